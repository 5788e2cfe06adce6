"""
Common Pydantic Models and Enums
=================================

Shared models and enumerations used across requests and responses.

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from enum import Enum



class PageFormat(str, Enum):
    """Supported PDF page formats"""
    A4 = "A4"
    LETTER = "Letter"
    LEGAL = "Legal"
