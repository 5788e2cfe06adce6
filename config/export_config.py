"""PDF export configuration settings.

This module provides the headless browser, diagram rendering and PDF
generation settings used by the export pipeline.
"""
import logging
from typing import TYPE_CHECKING, Any

logger = logging.getLogger(__name__)

DEFAULT_MERMAID_SCRIPT_URL = "https://cdn.jsdelivr.net/npm/mermaid@10/dist/mermaid.min.js"


class ExportConfigMixin:
    """Mixin class for PDF export configuration properties.

    This mixin expects the class to inherit from BaseConfig or provide
    the _get_cached_value, _get_bool and _get_positive_int methods.
    """

    if TYPE_CHECKING:
        def _get_cached_value(self, _key: str, _default: Any = None) -> Any:
            """Type stub: method provided by BaseConfig."""
            return _default

        def _get_bool(self, _key: str, _default: str = 'False') -> bool:
            """Type stub: method provided by BaseConfig."""
            return False

        def _get_positive_int(self, _key: str, _default: int) -> int:
            """Type stub: method provided by BaseConfig."""
            return _default

    @property
    def BROWSER_RENDERING_ENABLED(self) -> bool:
        """Whether a headless browser is provisioned for PDF capture."""
        return self._get_bool('BROWSER_RENDERING_ENABLED', 'True')

    @property
    def BROWSER_CDP_ENDPOINT(self) -> str:
        """Remote Chromium CDP endpoint. Empty means launch a local browser."""
        return (self._get_cached_value('BROWSER_CDP_ENDPOINT', '') or '').strip()

    @property
    def MERMAID_SCRIPT_URL(self) -> str:
        """URL of the Mermaid.js bundle injected into documents with diagrams."""
        url = (self._get_cached_value('MERMAID_SCRIPT_URL', DEFAULT_MERMAID_SCRIPT_URL) or '').strip()
        if not url.startswith(('https://', 'http://')):
            logger.warning("Invalid MERMAID_SCRIPT_URL '%s', using default", url)
            return DEFAULT_MERMAID_SCRIPT_URL
        return url

    @property
    def MERMAID_THEME(self) -> str:
        """Mermaid theme used for exported diagrams."""
        theme = self._get_cached_value('MERMAID_THEME', 'default')
        valid_themes = ['default', 'dark', 'forest', 'neutral', 'base']
        if theme not in valid_themes:
            logger.warning("Invalid MERMAID_THEME '%s', using default", theme)
            return 'default'
        return theme

    @property
    def PDF_LOAD_TIMEOUT_MS(self) -> int:
        """Timeout for loading the document and reaching network idle."""
        return self._get_positive_int('PDF_LOAD_TIMEOUT_MS', 30000)

    @property
    def PDF_GENERATION_TIMEOUT_MS(self) -> int:
        """Timeout for print-to-PDF."""
        return self._get_positive_int('PDF_GENERATION_TIMEOUT_MS', 30000)

    @property
    def MERMAID_LIBRARY_TIMEOUT_MS(self) -> int:
        """How long capture waits for the diagram readiness flag."""
        return self._get_positive_int('MERMAID_LIBRARY_TIMEOUT_MS', 20000)

    @property
    def MERMAID_RENDER_TIMEOUT_MS(self) -> int:
        """How long capture waits for every diagram to contain an SVG."""
        return self._get_positive_int('MERMAID_RENDER_TIMEOUT_MS', 30000)

    @property
    def MERMAID_POLL_INTERVAL_MS(self) -> int:
        """Polling interval for diagram checks inside the page."""
        return self._get_positive_int('MERMAID_POLL_INTERVAL_MS', 500)

    @property
    def MAX_MARKDOWN_LENGTH(self) -> int:
        """Maximum accepted markdown length in characters."""
        return self._get_positive_int('MAX_MARKDOWN_LENGTH', 500000)
