"""MD Resume Configuration Module.

This module provides centralized configuration management for the export
service. It handles environment variable loading, validation, and provides a
clean interface for accessing configuration values throughout the application.

Features:
- Dynamic environment variable loading with .env support
- Property-based configuration access for real-time updates
- Default values for all configuration options
- Headless browser and Mermaid diagram settings for PDF export

Environment Variables:
- BROWSER_RENDERING_ENABLED: Set to false when no browser is provisioned
- BROWSER_CDP_ENDPOINT: Optional remote Chromium endpoint
- See ExportConfigMixin for the complete list

Usage:
    from config.settings import config
    timeout = config.PDF_GENERATION_TIMEOUT_MS

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
import logging

from dotenv import load_dotenv

from config.base_config import BaseConfig
from config.export_config import ExportConfigMixin

logger = logging.getLogger(__name__)

load_dotenv()  # Load environment variables from .env file


class Config(BaseConfig, ExportConfigMixin):
    """
    Centralized configuration management for the export service.

    Combines all configuration mixins to provide a unified interface
    for accessing configuration values throughout the application.
    """


# Create global configuration instance
config = Config()
