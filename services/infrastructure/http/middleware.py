"""
Middleware configuration for MDResume application.

Handles:
- CORS configuration
- Request body size limiting
- Request timing logs
"""

import time
import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from config.settings import config

logger = logging.getLogger(__name__)

# Markdown is capped by MAX_MARKDOWN_LENGTH characters; allow 4 bytes per
# character plus room for the JSON envelope and options
BODY_SIZE_OVERHEAD = 64 * 1024


def max_request_body_size() -> int:
    return config.MAX_MARKDOWN_LENGTH * 4 + BODY_SIZE_OVERHEAD


async def limit_request_body_size(request: Request, call_next):
    """
    Reject requests whose Content-Length exceeds max_request_body_size().

    Content-Length can be spoofed; the pydantic length limits still apply
    to the parsed body.
    """
    content_length = request.headers.get('content-length')
    if content_length:
        try:
            size = int(content_length)
        except ValueError:
            size = 0
        limit = max_request_body_size()
        if size > limit:
            client_ip = request.client.host if request.client else 'unknown'
            logger.warning(
                "Rejected request body of %s bytes from %s (limit %s)", size, client_ip, limit
            )
            return JSONResponse(
                status_code=413,
                content={"detail": f"Request body too large. Maximum size is {limit} bytes"}
            )

    return await call_next(request)


async def log_request_timing(request: Request, call_next):
    """Log method, path, status and duration of every request at DEBUG."""
    start_time = time.time()
    response = await call_next(request)
    logger.debug(
        "%s %s -> %s (%.3fs)",
        request.method, request.url.path, response.status_code, time.time() - start_time
    )
    return response


def setup_middleware(app: FastAPI):
    """
    Register all middleware with the FastAPI application.
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition"],
    )
    app.middleware("http")(limit_request_body_size)
    app.middleware("http")(log_request_timing)
