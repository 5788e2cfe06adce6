"""Services package for MDResume application.

This package contains:
- Markdown services (rendering, sanitization, text helpers)
- Export services (document wrapping, diagram wait, PDF capture)
- Infrastructure services (logging, browser, HTTP handlers, lifespan)

Import directly from subpackages:
    from services.markdown import to_safe_html
    from services.export import export_pdf
"""

__all__ = []
