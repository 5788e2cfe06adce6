"""
PDF Capture Service
===================

Loads a wrapped HTML document into a headless browser page and prints it to
PDF.

Sequence per capture:
1. Acquire a fresh browser (released on every exit path)
2. Load the document and wait for network idle
3. If diagrams are present, wait for them (bounded, non-fatal)
4. Print to PDF (bounded, fatal on failure)

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional
import asyncio
import logging
import time

from services.export.diagram_wait import DiagramWaitSettings, wait_for_diagrams
from services.export.document_wrapper import has_diagrams
from services.export.exceptions import CaptureFailedError, CaptureUnavailableError

logger = logging.getLogger(__name__)

PAGE_FORMATS = ('A4', 'Letter', 'Legal')


@dataclass
class PdfMargin:
    """Page margins as CSS lengths."""
    top: str = "20mm"
    right: str = "20mm"
    bottom: str = "20mm"
    left: str = "20mm"


@dataclass
class PdfOptions:
    """Print-to-PDF options. Unset fields keep their defaults."""
    format: str = "A4"
    margin: PdfMargin = field(default_factory=PdfMargin)
    print_background: bool = True
    display_header_footer: bool = False
    header_template: Optional[str] = None
    footer_template: Optional[str] = None

    def to_playwright(self) -> Dict[str, Any]:
        """Keyword arguments for Playwright's page.pdf()."""
        kwargs: Dict[str, Any] = {
            'format': self.format,
            'margin': {
                'top': self.margin.top,
                'right': self.margin.right,
                'bottom': self.margin.bottom,
                'left': self.margin.left,
            },
            'print_background': self.print_background,
            'display_header_footer': self.display_header_footer,
        }
        if self.header_template is not None:
            kwargs['header_template'] = self.header_template
        if self.footer_template is not None:
            kwargs['footer_template'] = self.footer_template
        return kwargs


# Factory returning an async context manager that yields a Playwright BrowserContext
CaptureBackend = Callable[[], Any]


class PdfCaptureService:
    """Drives a headless browser to turn a wrapped document into PDF bytes."""

    def __init__(
        self,
        backend: Optional[CaptureBackend],
        load_timeout_ms: int = 30000,
        pdf_timeout_ms: int = 30000,
        diagram_settings: Optional[DiagramWaitSettings] = None
    ):
        """
        Args:
            backend: Browser factory, or None when no browser is provisioned
            load_timeout_ms: Bound for loading the document to network idle
            pdf_timeout_ms: Bound for print-to-PDF
            diagram_settings: Bounds for the diagram wait
        """
        self.backend = backend
        self.load_timeout_ms = load_timeout_ms
        self.pdf_timeout_ms = pdf_timeout_ms
        self.diagram_settings = diagram_settings or DiagramWaitSettings()

    @property
    def available(self) -> bool:
        return self.backend is not None

    async def capture(self, wrapped_document: str, options: Optional[PdfOptions] = None) -> bytes:
        """
        Capture a wrapped HTML document as PDF.

        Args:
            wrapped_document: Complete HTML document from wrap_document()
            options: Page format and margins (defaults: A4, 20mm, backgrounds)

        Returns:
            PDF bytes

        Raises:
            CaptureUnavailableError: No browser backend; nothing was acquired
            CaptureFailedError: Load or PDF generation failed, browser released
        """
        if self.backend is None:
            logger.error("[ExportPDF] Browser rendering not available")
            raise CaptureUnavailableError()

        pdf_options = options or PdfOptions()
        start_time = time.time()

        logger.debug(
            "[ExportPDF] Starting capture: %s chars, format=%s",
            len(wrapped_document), pdf_options.format
        )

        try:
            async with self.backend() as context:
                page = await context.new_page()
                self._attach_page_logging(page)

                await page.set_content(
                    wrapped_document,
                    wait_until="networkidle",
                    timeout=self.load_timeout_ms
                )
                logger.debug("[ExportPDF] Document loaded, network idle")

                if has_diagrams(wrapped_document):
                    await wait_for_diagrams(page, self.diagram_settings)

                pdf_bytes = await asyncio.wait_for(
                    page.pdf(**pdf_options.to_playwright()),
                    timeout=self.pdf_timeout_ms / 1000
                )
        except asyncio.TimeoutError as e:
            logger.error("[ExportPDF] PDF generation timed out after %sms", self.pdf_timeout_ms)
            raise CaptureFailedError(
                f"PDF generation timed out after {self.pdf_timeout_ms}ms",
                context={'timeout_ms': self.pdf_timeout_ms}
            ) from e
        except Exception as e:
            logger.error("[ExportPDF] Error during PDF capture: %s", e, exc_info=True)
            raise CaptureFailedError(str(e) or type(e).__name__) from e

        logger.info(
            "[ExportPDF] PDF generated successfully: %s bytes in %.2fs",
            len(pdf_bytes), time.time() - start_time
        )
        return pdf_bytes

    @staticmethod
    def _attach_page_logging(page) -> None:
        def log_console_message(msg):
            if msg.type == 'error':
                logger.debug("BROWSER CONSOLE ERROR: %s", msg.text)

        def log_page_error(err):
            logger.error("BROWSER ERROR: %s", err)

        page.on("console", log_console_message)
        page.on("pageerror", log_page_error)
        page.on("requestfailed", lambda request: logger.warning(
            "RESOURCE FAILED: %s - %s", request.url, request.failure
        ))
