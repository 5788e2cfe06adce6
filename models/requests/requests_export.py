"""Export and Preview Request Models.

Pydantic models for validating PDF export and markdown preview API requests.

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from typing import Optional

from pydantic import BaseModel, Field

from config.settings import config
from services.export import PdfMargin, PdfOptions

from ..common import PageFormat


MAX_TITLE_LENGTH = 200
MAX_CONTENT_LENGTH = config.MAX_MARKDOWN_LENGTH


class PdfMarginModel(BaseModel):
    """Page margins; unset sides keep the 20mm default"""
    top: Optional[str] = Field(None, max_length=20, description="Top margin (CSS length)")
    right: Optional[str] = Field(None, max_length=20, description="Right margin (CSS length)")
    bottom: Optional[str] = Field(None, max_length=20, description="Bottom margin (CSS length)")
    left: Optional[str] = Field(None, max_length=20, description="Left margin (CSS length)")


class PdfOptionsModel(BaseModel):
    """PDF options supplied by the client, merged over the defaults"""
    format: Optional[PageFormat] = Field(None, description="Page format")
    margin: Optional[PdfMarginModel] = Field(None, description="Page margins")
    print_background: Optional[bool] = Field(None, description="Print background colours")
    display_header_footer: Optional[bool] = Field(None, description="Show header and footer")
    header_template: Optional[str] = Field(
        None, max_length=10000, description="HTML template for the print header"
    )
    footer_template: Optional[str] = Field(
        None, max_length=10000, description="HTML template for the print footer"
    )

    def to_options(self) -> PdfOptions:
        """Merge the supplied fields over the default PdfOptions."""
        options = PdfOptions()
        if self.format is not None:
            options.format = self.format.value
        if self.margin is not None:
            defaults = PdfMargin()
            options.margin = PdfMargin(
                top=self.margin.top or defaults.top,
                right=self.margin.right or defaults.right,
                bottom=self.margin.bottom or defaults.bottom,
                left=self.margin.left or defaults.left,
            )
        if self.print_background is not None:
            options.print_background = self.print_background
        if self.display_header_footer is not None:
            options.display_header_footer = self.display_header_footer
        if self.header_template is not None:
            options.header_template = self.header_template
        if self.footer_template is not None:
            options.footer_template = self.footer_template
        return options


class ExportPDFRequest(BaseModel):
    """Request model for /api/export/pdf endpoint"""
    title: str = Field(
        ..., min_length=1, max_length=MAX_TITLE_LENGTH,
        description="Document title, used for the PDF filename"
    )
    content: str = Field(
        ..., min_length=1, max_length=MAX_CONTENT_LENGTH,
        description="Markdown source of the document"
    )
    options: Optional[PdfOptionsModel] = Field(None, description="PDF page options")

    class Config:
        """Configuration for ExportPDFRequest model."""

        json_schema_extra = {
            "example": {
                "title": "Jane Doe Resume",
                "content": "# Jane Doe\n\n## Experience\n\n- Engineer at Example Corp",
                "options": {"format": "A4", "margin": {"top": "15mm"}}
            }
        }


class MarkdownPreviewRequest(BaseModel):
    """Request model for /api/markdown/preview endpoint"""
    content: str = Field(
        ..., max_length=MAX_CONTENT_LENGTH,
        description="Markdown source to preview"
    )
