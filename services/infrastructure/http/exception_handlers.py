"""
Exception handlers for MDResume application.

Handles:
- Request validation errors (422)
- HTTP exceptions
- Export pipeline errors that escape a router
- General unhandled exceptions
"""

import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi import HTTPException
from config.settings import config
from services.export.exceptions import CaptureUnavailableError, PdfExportError

logger = logging.getLogger(__name__)


def _request_path(request: Request) -> str:
    return getattr(request.url, 'path', '') if request and request.url else ''


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handle request validation errors (422 Unprocessable Entity).

    Common causes: empty title or content, content over the length limit,
    unknown page format.
    """
    errors = exc.errors() if hasattr(exc, 'errors') else []
    error_details = [
        f"{'.'.join(str(x) for x in error.get('loc', []))}: {error.get('msg', '')}"
        for error in errors
    ]

    error_summary = '; '.join(error_details[:3])
    if len(error_details) > 3:
        error_summary += f" ... and {len(error_details) - 3} more"

    logger.debug("Request validation error on %s: %s", _request_path(request), error_summary)

    return JSONResponse(
        status_code=422,
        content={
            "detail": error_details,
            "message": "Request validation failed. Please check your request parameters."
        }
    )


async def http_exception_handler(request: Request, exc: HTTPException):
    """
    Handle HTTP exceptions.

    Returns FastAPI-standard format: {"detail": "error message"}
    """
    path = _request_path(request)
    if exc.status_code < 500:
        # Client errors are expected, keep them out of the warning stream
        logger.debug("HTTP %s on %s: %s", exc.status_code, path, exc.detail)
    else:
        logger.warning("HTTP %s on %s: %s", exc.status_code, path, exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail}
    )


async def pdf_export_exception_handler(request: Request, exc: PdfExportError):
    """Map export errors to 503 (no browser) or 500, without leaking internals."""
    logger.error(
        "Export error on %s: [%s] %s", _request_path(request), exc.error_code, exc.message
    )
    if isinstance(exc, CaptureUnavailableError):
        return JSONResponse(status_code=503, content={"detail": "PDF export is not available"})
    return JSONResponse(status_code=500, content={"detail": "Failed to generate PDF"})


async def general_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions"""
    logger.error(
        "Unhandled exception on %s: %s: %s",
        _request_path(request), type(exc).__name__, exc, exc_info=True
    )

    error_response = {"error": "An unexpected error occurred. Please try again later."}

    # Add debug info in development mode
    if config.debug:
        error_response["debug"] = str(exc)

    return JSONResponse(
        status_code=500,
        content=error_response
    )


def setup_exception_handlers(app: FastAPI):
    """
    Register all exception handlers with the FastAPI application.
    """
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(PdfExportError, pdf_export_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
