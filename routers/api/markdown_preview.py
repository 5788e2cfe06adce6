"""
Markdown Preview API Router
===========================

- /api/markdown/preview: Render markdown to sanitized HTML with word count
  and validation results
"""
import logging

from fastapi import APIRouter

from models import MarkdownPreviewRequest, MarkdownPreviewResponse
from services.markdown import get_word_count, to_safe_html, validate_markdown

logger = logging.getLogger(__name__)

router = APIRouter(tags=["api"])


@router.post('/markdown/preview', response_model=MarkdownPreviewResponse)
async def markdown_preview(req: MarkdownPreviewRequest):
    """Render a markdown preview. Only sanitized HTML is returned."""
    validation = validate_markdown(req.content)
    if not validation.valid:
        logger.debug("[Markdown] Preview validation issues: %s", validation.errors)

    return MarkdownPreviewResponse(
        html=to_safe_html(req.content),
        word_count=get_word_count(req.content),
        valid=validation.valid,
        errors=validation.errors
    )
