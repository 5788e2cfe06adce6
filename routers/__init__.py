"""
MDResume FastAPI Routers
========================

This package contains all FastAPI route modules organized by functionality.

Routers:
- api/: PDF export and markdown preview endpoints under /api
- core/: Health check

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""

from . import api
from .core import health_router

__all__ = [
    "api",
    "health_router",
]
