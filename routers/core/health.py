"""
Health check endpoint for MDResume application.

Reports the application version and whether PDF export can run.
"""

import logging

from fastapi import APIRouter

from config.settings import config
from models.responses import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint"""
    return HealthResponse(
        status="ok",
        version=config.version,
        browser_rendering=config.BROWSER_RENDERING_ENABLED
    )
