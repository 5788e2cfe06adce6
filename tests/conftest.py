"""
Pytest Configuration
====================

Ensures project root is in Python path for imports and provides shared
fixtures for the export pipeline tests.

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, Mock

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent.absolute()
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def mock_page():
    """Playwright page double: document loads, flag settles true, PDF prints."""
    page = MagicMock()
    page.on = Mock()
    page.set_content = AsyncMock()
    page.wait_for_function = AsyncMock()
    page.evaluate = AsyncMock(return_value=True)
    page.pdf = AsyncMock(return_value=b"%PDF-1.4 test")
    return page


@pytest.fixture
def browser_backend(mock_page):
    """
    Capture backend double.

    Returns (backend, manager): backend() yields the async context manager
    whose __aexit__ records browser release.
    """
    context = MagicMock()
    context.new_page = AsyncMock(return_value=mock_page)

    manager = MagicMock()
    manager.__aenter__ = AsyncMock(return_value=context)
    manager.__aexit__ = AsyncMock(return_value=False)

    backend = Mock(return_value=manager)
    return backend, manager
