"""
PDF Export Façade
=================

Single entry point for turning a titled markdown document into a
downloadable PDF: render -> sanitize -> wrap -> capture.

Callers (HTTP routers, background jobs) use export_pdf() only and never talk
to the wrapper or the capture service directly.

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Dict, Optional
import logging
import re

from config.settings import config
from services.export.diagram_wait import DiagramWaitSettings
from services.export.document_wrapper import wrap_document
from services.export.exceptions import CaptureUnavailableError
from services.export.pdf_capture import PdfCaptureService, PdfOptions
from services.infrastructure.utils.browser import BrowserContextManager
from services.markdown import to_safe_html

logger = logging.getLogger(__name__)

_NON_ALNUM_RE = re.compile(r'[^a-zA-Z0-9]+')


@dataclass
class PdfExport:
    """Result of export_pdf()."""
    content: bytes
    filename: str
    headers: Dict[str, str]


def get_pdf_filename(title: str, today: Optional[date] = None) -> str:
    """
    Build a filesystem-safe PDF filename from a document title.

    Non-alphanumeric runs become one underscore, edges are trimmed, the
    result is lower-cased and suffixed with the ISO date.

        >>> get_pdf_filename("My Resume!!", date(2025, 1, 15))
        'my_resume_2025-01-15.pdf'
    """
    sanitized = _NON_ALNUM_RE.sub('_', title or '').strip('_').lower() or 'document'
    day = today or datetime.now(timezone.utc).date()
    return f"{sanitized}_{day.isoformat()}.pdf"


def get_pdf_headers(filename: str) -> Dict[str, str]:
    """Response headers for a PDF attachment that must not be cached."""
    return {
        'Content-Disposition': f'attachment; filename="{filename}"',
        'Content-Type': 'application/pdf',
        'Cache-Control': 'no-cache, no-store, must-revalidate',
        'Pragma': 'no-cache',
        'Expires': '0',
    }


def get_capture_service() -> PdfCaptureService:
    """Build a capture service from the current configuration."""
    backend = None
    if config.BROWSER_RENDERING_ENABLED:
        cdp_endpoint = config.BROWSER_CDP_ENDPOINT or None

        def backend():
            return BrowserContextManager(cdp_endpoint=cdp_endpoint)

    return PdfCaptureService(
        backend=backend,
        load_timeout_ms=config.PDF_LOAD_TIMEOUT_MS,
        pdf_timeout_ms=config.PDF_GENERATION_TIMEOUT_MS,
        diagram_settings=DiagramWaitSettings.from_config(config)
    )


async def export_pdf(
    title: str,
    markdown: str,
    options: Optional[PdfOptions] = None,
    capture_service: Optional[PdfCaptureService] = None
) -> PdfExport:
    """
    Export a markdown document as PDF.

    Args:
        title: Document title (used for <title> and the filename)
        markdown: Markdown source
        options: Page format and margins
        capture_service: Override for the configured capture service

    Returns:
        PdfExport with bytes, filename and response headers

    Raises:
        CaptureUnavailableError: No browser backend is provisioned
        CaptureFailedError: The browser failed to produce the PDF
    """
    service = capture_service or get_capture_service()
    if not service.available:
        logger.error("[ExportPDF] Browser rendering not available, export of '%s' rejected", title)
        raise CaptureUnavailableError()

    fragment = to_safe_html(markdown)
    document = wrap_document(fragment, title)
    logger.debug(
        "[ExportPDF] Export '%s': %s markdown chars -> %s html chars",
        title, len(markdown or ""), len(document)
    )

    content = await service.capture(document, options)
    filename = get_pdf_filename(title)
    return PdfExport(content=content, filename=filename, headers=get_pdf_headers(filename))
