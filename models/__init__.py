"""
MDResume Pydantic Models
========================

Request and response models for FastAPI type safety and validation.

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""

from .requests.requests_export import (
    ExportPDFRequest,
    MarkdownPreviewRequest,
    PdfMarginModel,
    PdfOptionsModel,
)

from .responses import (
    ErrorResponse,
    HealthResponse,
    MarkdownPreviewResponse,
)

from .common import PageFormat

__all__ = [
    # Requests
    "ExportPDFRequest",
    "MarkdownPreviewRequest",
    "PdfMarginModel",
    "PdfOptionsModel",
    # Responses
    "ErrorResponse",
    "HealthResponse",
    "MarkdownPreviewResponse",
    # Common
    "PageFormat",
]
