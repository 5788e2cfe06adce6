"""
Markdown Services
=================

Markdown rendering, HTML sanitization and text helpers.

Callers that need displayable HTML use to_safe_html(); render_markdown()
output must never reach a surface without sanitize_html().
"""
from .renderer import render_markdown, to_safe_html, DIAGRAM_CLASS, DIAGRAM_LANGUAGE
from .sanitizer import sanitize_html, is_safe_url
from .text_utils import (
    MarkdownValidation,
    get_word_count,
    markdown_to_plain_text,
    validate_markdown,
)

__all__ = [
    'render_markdown',
    'to_safe_html',
    'sanitize_html',
    'is_safe_url',
    'DIAGRAM_CLASS',
    'DIAGRAM_LANGUAGE',
    'MarkdownValidation',
    'get_word_count',
    'markdown_to_plain_text',
    'validate_markdown',
]
