"""
Markdown Renderer Tests
=======================

Unit tests for markdown rendering including:
- GitHub-flavoured syntax (tables, strikethrough, line breaks)
- Mermaid fences rendered as diagram containers
- Failure recovery

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""

from unittest.mock import patch

from bs4 import BeautifulSoup

from services.markdown import render_markdown, sanitize_html, to_safe_html


class TestRenderMarkdown:
    """Test basic markdown rendering."""

    def test_empty_input(self):
        """Empty markdown renders to an empty string."""
        assert render_markdown("") == ""
        assert render_markdown(None) == ""

    def test_heading(self):
        """Headings render to h tags."""
        assert render_markdown("# Jane Doe") == "<h1>Jane Doe</h1>\n"

    def test_single_newline_becomes_break(self):
        """Single newlines inside a paragraph become <br>."""
        result = render_markdown("line one\nline two")
        assert "<br" in result
        assert "line one" in result and "line two" in result

    def test_table(self):
        """GFM tables are supported."""
        result = render_markdown("| Skill | Years |\n|---|---|\n| Python | 5 |")
        assert "<table>" in result
        assert "<th>Skill</th>" in result
        assert "<td>Python</td>" in result

    def test_strikethrough(self):
        """Double tildes render as strikethrough."""
        assert "<s>old</s>" in render_markdown("~~old~~ new")

    def test_code_fence_is_escaped(self):
        """Non-diagram fences keep the default escaped code block."""
        result = render_markdown("```python\nprint('<b>')\n```")
        assert '<code class="language-python">' in result
        assert "&lt;b&gt;" in result
        assert "<b>" not in result


class TestDiagramFences:
    """Test mermaid fence handling."""

    def test_mermaid_fence_becomes_container(self):
        """A mermaid fence renders to exactly one diagram container."""
        result = render_markdown("```mermaid\ngraph TD\nA-->B\n```")
        assert result.startswith('<div class="mermaid">')
        assert result.count('class="mermaid"') == 1
        assert "<pre>" not in result

    def test_mermaid_language_is_case_insensitive(self):
        """The info string is matched on its first word, any case."""
        result = render_markdown("```Mermaid title\ngraph LR\n```")
        assert '<div class="mermaid">' in result

    def test_container_text_equals_block(self):
        """Text content of the container is the raw diagram source."""
        source = "graph TD\nA[Start] --> B{Is it?}\nB -->|Yes & No| C\n"
        result = render_markdown(f"```mermaid\n{source}```")
        div = BeautifulSoup(result, "html.parser").find("div", class_="mermaid")
        assert div.get_text() == source

    def test_container_cannot_be_closed_from_inside(self):
        """Markup inside the block stays text."""
        source = "</div><script>alert(1)</script>\n"
        result = render_markdown(f"```mermaid\n{source}```")
        assert "<script>" not in result
        soup = BeautifulSoup(result, "html.parser")
        assert soup.find("script") is None
        assert soup.find("div", class_="mermaid").get_text() == source

    def test_multiple_diagrams(self):
        """Each mermaid fence maps to its own container."""
        markdown = "```mermaid\ngraph TD\n```\n\ntext\n\n```mermaid\npie\n```"
        assert render_markdown(markdown).count('<div class="mermaid">') == 2


class TestRenderFailure:
    """Test recovery from parser failures."""

    def test_parser_error_returns_empty(self):
        """A parser exception is logged and yields an empty string."""
        with patch('services.markdown.renderer._parser') as parser, \
                patch('services.markdown.renderer.logger') as logger:
            parser.render.side_effect = RuntimeError("boom")

            assert render_markdown("# Title") == ""
            logger.error.assert_called_once()


class TestToSafeHtml:
    """Test the render + sanitize composition."""

    def test_raw_script_is_removed(self):
        """Raw HTML scripts in markdown never reach the output."""
        result = to_safe_html("# Title\n\n<script>alert(1)</script>\n\ntext")
        assert "<script" not in result
        assert "alert(1)" not in result
        assert "<h1>Title</h1>" in result

    def test_inline_handlers_are_removed(self):
        """Event handler attributes on raw HTML are dropped."""
        result = to_safe_html('<p onclick="steal()">Hello</p>')
        assert "onclick" not in result
        assert "Hello" in result

    def test_diagram_survives_sanitizing(self):
        """Diagram containers pass the sanitizer unchanged."""
        source = "graph TD\nA-->B\n"
        result = to_safe_html(f"```mermaid\n{source}```")
        div = BeautifulSoup(result, "html.parser").find("div", class_="mermaid")
        assert div is not None
        assert div.get_text() == source

    def test_javascript_link_is_neutralised(self):
        """Markdown links with script URLs lose their href."""
        result = to_safe_html('<a href="javascript:alert(1)">click</a>')
        assert "javascript:" not in result
        assert "click" in result

    def test_sanitized_output_is_stable(self):
        """Sanitizing rendered markdown again changes nothing."""
        markdown = (
            "# CV\n\n<div onclick=\"x()\"><em>raw</em></div>\n\n"
            "| a | b |\n|---|---|\n| 1 | 2 |\n\n"
            "```mermaid\n</div><script>alert(1)</script>\n```\n\n"
            "- [link](https://example.com)\n- line one\n  line two"
        )
        once = to_safe_html(markdown)
        assert sanitize_html(once) == once
