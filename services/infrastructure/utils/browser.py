"""
Browser Manager for PDF export

Simple browser manager that creates a fresh browser instance for each export.
This approach ensures reliability and isolation between requests.

Features:
- Fresh browser instance per export, closed on every exit path
- Local headless Chromium via Playwright, or a remote browser over CDP
- Optimized browser configuration for print-to-PDF
- Support for offline Chromium installation (browsers/chromium/)

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from pathlib import Path
from typing import Optional
import logging
import os
import platform
import sys

from playwright.async_api import async_playwright
import playwright

from config.settings import config


logger = logging.getLogger(__name__)

LAUNCH_ARGS = [
    '--no-sandbox',
    '--disable-dev-shm-usage',
    '--disable-gpu',
    '--disable-background-networking',
    '--disable-background-timer-throttling',
    '--disable-renderer-backgrounding',
    '--disable-backgrounding-occluded-windows',
    '--font-render-hinting=none',
]


def _get_local_chromium_executable() -> Optional[str]:
    """
    Get the path to local Chromium executable if available.

    Returns:
        str or None: Path to Chromium executable, or None if not found
    """
    # Project root (this file is in services/infrastructure/utils/)
    project_root = Path(__file__).parent.parent.parent.parent
    browsers_dir = project_root / "browsers" / "chromium"

    if not browsers_dir.exists():
        return None

    if platform.system().lower() == "darwin":
        possible_paths = [
            browsers_dir / "chrome-mac" / "Chromium.app" / "Contents" / "MacOS" / "Chromium",
            browsers_dir / "Chromium.app" / "Contents" / "MacOS" / "Chromium",
            browsers_dir / "chrome"
        ]
    else:  # Linux (default for production)
        possible_paths = [
            browsers_dir / "chrome-linux" / "chrome",
            browsers_dir / "chrome"
        ]

    for path in possible_paths:
        if path.exists():
            return str(path)
    return None


async def log_browser_diagnostics():
    """
    Log browser diagnostic information once at startup.
    This should be called from the application lifespan function.
    """
    try:
        logger.debug("[Browser] Python executable: %s", sys.executable)
        logger.debug("[Browser] Playwright module path: %s", playwright.__file__)

        if not config.BROWSER_RENDERING_ENABLED:
            logger.warning("[Browser] Browser rendering disabled - PDF export will be unavailable")
            return
        if config.BROWSER_CDP_ENDPOINT:
            logger.info("[Browser] Using remote browser at %s", config.BROWSER_CDP_ENDPOINT)
            return

        local_chromium = _get_local_chromium_executable()
        if local_chromium:
            logger.debug("[Browser] Local Chromium found: %s", local_chromium)
            return

        playwright_instance = await async_playwright().start()
        try:
            chromium_path = playwright_instance.chromium.executable_path
            if chromium_path and os.path.exists(chromium_path):
                logger.debug("[Browser] Chromium executable exists: %s", chromium_path)
            else:
                logger.error("=" * 80)
                logger.error("CRITICAL: Playwright browsers are not installed!")
                logger.error("PDF export endpoint (/api/export/pdf) will fail.")
                logger.error("To fix: python -m playwright install chromium")
                logger.error("=" * 80)
        finally:
            await playwright_instance.stop()
    except Exception as e:  # pylint: disable=broad-except
        logger.warning("[Browser] Diagnostic check failed: %s", e)


class BrowserContextManager:
    """Context manager that creates a fresh browser for each export"""

    def __init__(self, cdp_endpoint: Optional[str] = None):
        self.cdp_endpoint = cdp_endpoint
        self.context = None
        self.browser = None
        self.playwright = None

    async def __aenter__(self):
        """Create fresh browser instance for this export"""
        logger.debug("Creating fresh browser instance for PDF generation")

        try:
            self.playwright = await async_playwright().start()
            if self.cdp_endpoint:
                logger.debug("Connecting to remote browser: %s", self.cdp_endpoint)
                self.browser = await self.playwright.chromium.connect_over_cdp(self.cdp_endpoint)
            else:
                launch_options = {'headless': True, 'args': LAUNCH_ARGS}
                chromium_executable = _get_local_chromium_executable()
                if chromium_executable:
                    logger.debug("Using Chromium executable: %s", chromium_executable)
                    launch_options['executable_path'] = chromium_executable
                self.browser = await self.playwright.chromium.launch(**launch_options)

            self.context = await self.browser.new_context(
                viewport={'width': 1200, 'height': 1600},
                user_agent='MDResume/1.0 (PDF Generator)'
            )
        except Exception as e:
            logger.error("[Browser] Error starting browser: %s", e, exc_info=True)
            await self._close()
            raise

        logger.debug("Fresh browser context created - id: %s", id(self.context))
        return self.context

    async def __aexit__(self, exc_type, _exc_val, _exc_tb):
        """Clean up browser resources"""
        await self._close()
        logger.debug("Fresh browser instance cleaned up")

    async def _close(self):
        try:
            if self.context:
                await self.context.close()
        except Exception as e:  # pylint: disable=broad-except
            logger.warning("[Browser] Failed to close context: %s", e)
        finally:
            self.context = None

        try:
            if self.browser:
                await self.browser.close()
        except Exception as e:  # pylint: disable=broad-except
            logger.warning("[Browser] Failed to close browser: %s", e)
        finally:
            self.browser = None

        try:
            if self.playwright:
                await self.playwright.stop()
        except Exception as e:  # pylint: disable=broad-except
            logger.warning("[Browser] Failed to stop Playwright: %s", e)
        finally:
            self.playwright = None
