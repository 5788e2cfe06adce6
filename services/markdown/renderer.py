"""
Markdown Renderer
=================

Converts resume markdown into an HTML fragment.

The parser is configured once at import time (GitHub-flavoured tables,
strikethrough and autolinks, single newlines as <br>). Fenced blocks tagged
``mermaid`` become diagram containers that Mermaid.js expands in the browser;
every other code block is escaped as usual.

The output of render_markdown() is NOT safe to display. Surfaces must use
to_safe_html(), which runs the sanitizer over it.

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
import html
import logging

from markdown_it import MarkdownIt

from services.markdown.sanitizer import sanitize_html

logger = logging.getLogger(__name__)

DIAGRAM_LANGUAGE = "mermaid"
DIAGRAM_CLASS = "mermaid"


def _fence_language(info: str) -> str:
    """First word of a fence info string, lower-cased."""
    parts = (info or "").strip().split(maxsplit=1)
    return parts[0].lower() if parts else ""


def _render_fence(self, tokens, idx, options, env):
    """Render mermaid fences as diagram containers, defer everything else."""
    token = tokens[idx]
    if _fence_language(token.info) == DIAGRAM_LANGUAGE:
        # Character references keep the text content identical to the block
        # while making it impossible to close the container from inside.
        source = html.escape(token.content, quote=False)
        return f'<div class="{DIAGRAM_CLASS}">{source}</div>\n'
    return self.fence(tokens, idx, options, env)


def _build_parser() -> MarkdownIt:
    md = MarkdownIt("gfm-like", {"breaks": True, "html": True})
    md.add_render_rule("fence", _render_fence)
    return md


_parser = _build_parser()


def render_markdown(markdown: str) -> str:
    """
    Convert markdown to an unsanitized HTML fragment.

    Never raises: a parser failure is logged and yields an empty string so
    that preview and export keep working on malformed input.

    Args:
        markdown: Markdown source text

    Returns:
        HTML fragment, or "" for empty input or on failure
    """
    if not markdown:
        return ""

    try:
        return _parser.render(markdown)
    except Exception as e:  # pylint: disable=broad-except
        logger.error("[Markdown] Failed to render markdown (%s chars): %s", len(markdown), e, exc_info=True)
        return ""


def to_safe_html(markdown: str) -> str:
    """Render markdown and sanitize the result for display or capture."""
    return sanitize_html(render_markdown(markdown))
