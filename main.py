"""
MDResume - Markdown Resume Export Service (FastAPI)
===================================================

Async web application that previews markdown resumes as sanitized HTML and
exports them to PDF with a headless browser.

Version: See VERSION file (centralized version management)
Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License

Features:
- FastAPI with Pydantic models for type safety
- Uvicorn ASGI server
- Playwright print-to-PDF with Mermaid diagram rendering
- Auto-generated OpenAPI documentation at /docs (DEBUG only)
"""

# Third-party imports
from fastapi import FastAPI
import uvicorn

# First-party imports
from config.settings import config
from routers.register import register_routers
from services.infrastructure.utils.logging_config import setup_logging
from services.infrastructure.lifecycle.lifespan import lifespan
from services.infrastructure.http.middleware import setup_middleware
from services.infrastructure.http.exception_handlers import setup_exception_handlers

# Setup logging (must happen early, before other modules use logger)
logger = setup_logging()

# ============================================================================
# FASTAPI APPLICATION INITIALIZATION
# ============================================================================

app = FastAPI(
    title="MDResume API",
    description="Markdown preview and PDF export with FastAPI + Playwright",
    version=config.version,
    # Disable Swagger UI in production (only enable in DEBUG mode)
    docs_url="/docs" if config.debug else None,
    redoc_url="/redoc" if config.debug else None,
    lifespan=lifespan
)

# ============================================================================
# MIDDLEWARE & EXCEPTION HANDLERS
# ============================================================================

setup_middleware(app)
setup_exception_handlers(app)

# ============================================================================
# ROUTER REGISTRATION
# ============================================================================

register_routers(app)


def run_server() -> None:
    """Run MDResume with Uvicorn."""
    logger.info("Server starting at http://%s:%s (DEBUG=%s)", config.host, config.port, config.debug)
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level=config.log_level.lower(),
        access_log=False,
    )


# ============================================================================
# APPLICATION ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    run_server()
