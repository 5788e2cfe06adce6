"""
Export Services
===============

PDF export pipeline. Callers use export_pdf(); the other names are exported
for tests and for callers that need a single stage.

    from services.export import export_pdf
    result = await export_pdf("My Resume", markdown_text)
"""
from .exceptions import PdfExportError, CaptureUnavailableError, CaptureFailedError
from .document_wrapper import wrap_document, has_diagrams
from .diagram_wait import DiagramWaitSettings, build_bootstrap_script, wait_for_diagrams
from .pdf_capture import PAGE_FORMATS, PdfMargin, PdfOptions, PdfCaptureService
from .pdf_export import (
    PdfExport,
    export_pdf,
    get_capture_service,
    get_pdf_filename,
    get_pdf_headers,
)

__all__ = [
    'PdfExportError',
    'CaptureUnavailableError',
    'CaptureFailedError',
    'wrap_document',
    'has_diagrams',
    'DiagramWaitSettings',
    'build_bootstrap_script',
    'wait_for_diagrams',
    'PAGE_FORMATS',
    'PdfMargin',
    'PdfOptions',
    'PdfCaptureService',
    'PdfExport',
    'export_pdf',
    'get_capture_service',
    'get_pdf_filename',
    'get_pdf_headers',
]
