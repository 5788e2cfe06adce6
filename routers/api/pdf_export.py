"""
PDF Export API Router
=====================

API endpoint for PDF export functionality:
- /api/export/pdf: Export a markdown document as a PDF attachment

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from models import ExportPDFRequest
from services.export import CaptureUnavailableError, export_pdf

logger = logging.getLogger(__name__)

router = APIRouter(tags=["api"])


@router.post('/export/pdf')
async def export_pdf_endpoint(req: ExportPDFRequest):
    """
    Export a markdown document as PDF using Playwright browser automation (async).

    Diagrams in ```mermaid fences are rendered in the page before printing.
    The internal failure reason is logged, never returned to the client.
    """
    options = req.options.to_options() if req.options else None

    logger.debug(
        "[ExportPDF] Request - title: '%s', content length: %s",
        req.title, len(req.content)
    )

    try:
        result = await export_pdf(req.title, req.content, options)
    except CaptureUnavailableError as e:
        logger.error("[ExportPDF] Export unavailable: %s", e)
        raise HTTPException(status_code=503, detail="PDF export is not available") from e
    except Exception as e:
        logger.error("[ExportPDF] Export error: %s", e, exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to generate PDF") from e

    return Response(
        content=result.content,
        media_type="application/pdf",
        headers=result.headers
    )
