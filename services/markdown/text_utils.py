"""
Markdown text helpers used by the editor preview: plain-text extraction,
word counting and basic structural validation.
"""
from dataclasses import dataclass, field
from typing import List
import re

_FENCED_BLOCK_RE = re.compile(r'```[\s\S]+?```')
_HEADING_RE = re.compile(r'#{1,6}\s+')
_BOLD_RE = re.compile(r'\*\*(.+?)\*\*')
_ITALIC_RE = re.compile(r'\*(.+?)\*')
_LINK_RE = re.compile(r'\[(.+?)\]\(.+?\)')
_INLINE_CODE_RE = re.compile(r'`(.+?)`')
_BLOCKQUOTE_RE = re.compile(r'>\s+')
_BULLET_RE = re.compile(r'[-*+]\s+')
_NUMBERED_RE = re.compile(r'\d+\.\s+')


@dataclass
class MarkdownValidation:
    """Result of validate_markdown()."""
    valid: bool
    errors: List[str] = field(default_factory=list)


def markdown_to_plain_text(markdown: str) -> str:
    """Strip markdown syntax, keeping the readable text."""
    if not markdown:
        return ""

    # Fences first; the inline-code pattern would otherwise eat their backticks
    text = _FENCED_BLOCK_RE.sub('', markdown)
    text = _HEADING_RE.sub('', text)
    text = _BOLD_RE.sub(r'\1', text)
    text = _ITALIC_RE.sub(r'\1', text)
    text = _LINK_RE.sub(r'\1', text)
    text = _INLINE_CODE_RE.sub(r'\1', text)
    text = _BLOCKQUOTE_RE.sub('', text)
    text = _BULLET_RE.sub('', text)
    text = _NUMBERED_RE.sub('', text)
    return text.strip()


def get_word_count(markdown: str) -> int:
    """Number of whitespace-separated words in the plain text."""
    return len(markdown_to_plain_text(markdown).split())


def validate_markdown(markdown: str) -> MarkdownValidation:
    """
    Basic structural checks: empty content, unclosed code fences and
    unbalanced link brackets. Rendering does not depend on the result.
    """
    errors = []

    if not markdown or not markdown.strip():
        errors.append("Markdown content is empty")
        markdown = markdown or ""

    if markdown.count('```') % 2 != 0:
        errors.append("Unclosed code block detected")

    if markdown.count('[') != markdown.count(']'):
        errors.append("Unmatched brackets in links")

    return MarkdownValidation(valid=not errors, errors=errors)
