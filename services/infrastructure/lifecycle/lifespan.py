"""
Lifespan management for MDResume application.

Handles FastAPI application startup and shutdown lifecycle:
- Startup timing and shutdown flag on app.state
- Playwright / Chromium availability check for PDF export
"""

import asyncio
import logging
import os
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config.settings import config
from services.infrastructure.utils.browser import log_browser_diagnostics

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    Browsers are created per export, so there is nothing to tear down here.
    """
    startup_start = time.time()
    fastapi_app.state.start_time = startup_start
    fastapi_app.state.is_shutting_down = False

    # Only log startup messages from first worker to avoid repetition
    worker_id = os.getenv('UVICORN_WORKER_ID', '0')
    is_main_worker = (worker_id == '0' or not worker_id)

    if is_main_worker:
        logger.debug("[LIFESPAN] MDResume %s starting...", config.version)

        # Verify Playwright installation (for PDF export); never raises
        await log_browser_diagnostics()

        logger.info(
            "[LIFESPAN] Startup complete in %.2fs (browser rendering: %s)",
            time.time() - startup_start, config.BROWSER_RENDERING_ENABLED
        )

    try:
        yield
    finally:
        fastapi_app.state.is_shutting_down = True
        # Give ongoing exports a brief moment to release their browsers
        await asyncio.sleep(0.1)
        if is_main_worker:
            logger.debug("[LIFESPAN] Shutdown complete")
