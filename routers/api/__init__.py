"""
API Router Module
=================

Main API router that combines all sub-routers for the application:
- PDF export
- Markdown preview
"""
from fastapi import APIRouter

from . import markdown_preview, pdf_export

# Create main router with prefix and tags
router = APIRouter(prefix="/api", tags=["api"])

# Include all sub-routers
router.include_router(pdf_export.router)
router.include_router(markdown_preview.router)

__all__ = ["router"]
