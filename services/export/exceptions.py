"""
Export-specific exceptions for better error handling.

Only capture problems are raised to callers. Markdown render failures and
diagram timeouts are recovered inside the pipeline and logged instead.
"""

from typing import Optional


class PdfExportError(Exception):
    """Base exception for PDF export errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, context: Optional[dict] = None):
        """
        Initialize export error.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            context: Additional context (title, document size, etc.)
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}


class CaptureUnavailableError(PdfExportError):
    """Raised when no headless browser backend is provisioned."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message or "Browser rendering not available",
            error_code="CAPTURE_UNAVAILABLE"
        )


class CaptureFailedError(PdfExportError):
    """Raised when loading the document or generating the PDF fails."""

    def __init__(self, reason: str, context: Optional[dict] = None):
        super().__init__(
            f"Failed to generate PDF: {reason}",
            error_code="CAPTURE_FAILED",
            context=context
        )
        self.reason = reason
