"""
Request Models

Pydantic request models for API endpoints.
"""

from .requests_export import (
    ExportPDFRequest,
    MarkdownPreviewRequest,
    PdfMarginModel,
    PdfOptionsModel,
)

__all__ = [
    "ExportPDFRequest",
    "MarkdownPreviewRequest",
    "PdfMarginModel",
    "PdfOptionsModel",
]
