"""Infrastructure utilities module.

Contains utility modules for:
- Logging configuration
- Browser management (per-export Playwright browsers)
"""
