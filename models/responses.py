"""
Response Models
===============

Pydantic models for API response validation and documentation.

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""

from typing import Optional, Dict, Any, List
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response"""
    error: str = Field(..., description="Error message")
    error_type: Optional[str] = Field(None, description="Type of error")
    context: Optional[Dict[str, Any]] = Field(None, description="Additional error context")
    timestamp: Optional[float] = Field(None, description="Error timestamp")

    class Config:
        """Configuration for ErrorResponse JSON schema"""
        json_schema_extra = {
            "example": {
                "error": "Field 'content' is required",
                "error_type": "validation",
                "timestamp": 1696800000.0
            }
        }


class HealthResponse(BaseModel):
    """Response model for /health endpoint"""
    status: str = Field(..., description="Health status")
    version: str = Field(..., description="Application version")
    browser_rendering: bool = Field(..., description="Whether PDF export is available")

    class Config:
        """Configuration for HealthResponse JSON schema"""
        json_schema_extra = {
            "example": {
                "status": "ok",
                "version": "1.0.0",  # Example only - actual version from config.version
                "browser_rendering": True
            }
        }


class MarkdownPreviewResponse(BaseModel):
    """Response model for /api/markdown/preview endpoint"""
    html: str = Field(..., description="Sanitized HTML fragment")
    word_count: int = Field(..., description="Number of words in the plain text")
    valid: bool = Field(..., description="Whether the markdown passed validation")
    errors: List[str] = Field(default_factory=list, description="Validation problems")

    class Config:
        """Configuration for MarkdownPreviewResponse JSON schema"""
        json_schema_extra = {
            "example": {
                "html": "<h1>Jane Doe</h1>\n",
                "word_count": 2,
                "valid": True,
                "errors": []
            }
        }
