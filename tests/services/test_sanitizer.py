"""
HTML Sanitizer Tests
====================

Unit tests for the allow-list sanitizer including:
- Hard denylist of executable and form elements
- Event handler and style attribute removal
- URL scheme checks
- Unknown tag unwrapping and comment removal
- Idempotency

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""

import pytest
from unittest.mock import patch

from bs4 import BeautifulSoup

from services.markdown import is_safe_url, sanitize_html


class TestDeniedElements:
    """Test removal of executable and form elements."""

    def test_script_removed_with_content(self):
        """Script elements disappear together with their body."""
        assert sanitize_html("<p>hi</p><script>alert(1)</script>") == "<p>hi</p>"

    @pytest.mark.parametrize("markup", [
        '<iframe src="https://evil.example"></iframe>',
        '<object data="x.swf"></object>',
        '<embed src="x.swf">',
        '<style>body { display: none }</style>',
        '<form action="/steal"><input name="q"><button>Go</button></form>',
        '<link rel="stylesheet" href="x.css">',
        '<meta http-equiv="refresh" content="0;url=https://evil.example">',
        '<noscript><p>fallback</p></noscript>',
        '<template><p>hidden</p></template>',
    ])
    def test_denied_elements_removed(self, markup):
        """Every denied element is removed entirely."""
        result = sanitize_html(f"<p>keep</p>{markup}")
        assert result == "<p>keep</p>"

    def test_denied_inside_allowed(self):
        """Denied elements nested inside allowed ones are removed."""
        result = sanitize_html("<div><p>a<script>x()</script>b</p></div>")
        assert result == "<div><p>ab</p></div>"

    def test_svg_foreign_object_removed(self):
        """foreignObject cannot smuggle HTML into an SVG."""
        result = sanitize_html(
            '<svg><foreignObject><iframe src="x"></iframe></foreignObject><rect width="10"></rect></svg>'
        )
        assert "foreignobject" not in result.lower()
        assert "iframe" not in result
        assert "<rect" in result


class TestAttributes:
    """Test attribute filtering."""

    def test_event_handlers_removed(self):
        """on* attributes are removed from every element."""
        result = sanitize_html('<p onclick="x()" onmouseover="y()">text</p><img src="a.png" onerror="z()">')
        assert "onclick" not in result
        assert "onmouseover" not in result
        assert "onerror" not in result
        assert 'src="a.png"' in result

    def test_event_handlers_removed_from_svg(self):
        """SVG elements lose handlers too."""
        result = sanitize_html('<svg onload="x()"><circle cx="1" cy="1" r="1" onclick="y()"></circle></svg>')
        assert "onload" not in result
        assert "onclick" not in result
        assert 'r="1"' in result

    def test_style_attribute_removed(self):
        """Inline styles are removed."""
        assert sanitize_html('<p style="color: red">x</p>') == "<p>x</p>"

    def test_global_attributes_kept(self):
        """class, id and title are allowed on any tag."""
        result = sanitize_html('<span class="tag" id="s1" title="Skill">Python</span>')
        span = BeautifulSoup(result, "html.parser").span
        assert span["class"] == ["tag"]
        assert span["id"] == "s1"
        assert span["title"] == "Skill"

    def test_unlisted_attribute_removed(self):
        """Attributes outside the tag's entry are dropped."""
        result = sanitize_html('<p data-x="1" align="center">x</p>')
        assert result == "<p>x</p>"

    def test_table_cell_attributes_kept(self):
        """Table cells keep their span and alignment attributes."""
        result = sanitize_html('<table><tr><td colspan="2" align="right">x</td></tr></table>')
        td = BeautifulSoup(result, "html.parser").td
        assert td["colspan"] == "2"
        assert td["align"] == "right"

    def test_target_gets_rel(self):
        """Links opening a new window get rel=noopener noreferrer."""
        result = sanitize_html('<a href="https://example.com" target="_blank">x</a>')
        link = BeautifulSoup(result, "html.parser").a
        assert link["rel"] == ["noopener", "noreferrer"]
        assert link["target"] == "_blank"


class TestUrls:
    """Test URL scheme handling."""

    @pytest.mark.parametrize("href", [
        "javascript:alert(1)",
        "JaVaScRiPt:alert(1)",
        "  javascript:alert(1)",
        "java\tscript:alert(1)",
        "java\nscript:alert(1)",
        "vbscript:msgbox(1)",
        "data:text/html,<script>alert(1)</script>",
    ])
    def test_unsafe_href_dropped(self, href):
        """Links with disallowed schemes lose their href."""
        result = sanitize_html(f'<a href="{href}">x</a>')
        assert result == "<a>x</a>"

    def test_entity_encoded_scheme_dropped(self):
        """Character references are decoded before the scheme check."""
        result = sanitize_html('<a href="&#106;avascript:alert(1)">x</a>')
        assert result == "<a>x</a>"

    @pytest.mark.parametrize("href", [
        "https://example.com/cv",
        "http://example.com",
        "mailto:jane@example.com",
        "tel:+15555550100",
        "/relative/path",
        "#section",
        "page.html?a=1",
    ])
    def test_safe_href_kept(self, href):
        """Allowed schemes and relative URLs pass."""
        link = BeautifulSoup(sanitize_html(f'<a href="{href}">x</a>'), "html.parser").a
        assert link["href"] == href

    def test_data_image_src_kept(self):
        """Inline images may use data: URLs."""
        src = "data:image/png;base64,iVBORw0KGgo="
        img = BeautifulSoup(sanitize_html(f'<img src="{src}" alt="logo">'), "html.parser").img
        assert img["src"] == src

    def test_is_safe_url(self):
        """Direct checks of the URL predicate."""
        assert is_safe_url("https://example.com")
        assert is_safe_url("")
        assert not is_safe_url("javascript:void(0)")
        assert not is_safe_url("data:image/png;base64,AA==", "href")
        assert is_safe_url("data:image/png;base64,AA==", "src")
        assert not is_safe_url("data:text/plain,hi", "src")


class TestStructure:
    """Test unwrapping, comments and idempotency."""

    def test_unknown_tag_unwrapped(self):
        """Unknown tags are removed but their children stay."""
        assert sanitize_html("<custom-el><b>bold</b> text</custom-el>") == "<b>bold</b> text"

    def test_comment_removed(self):
        """HTML comments are dropped."""
        assert sanitize_html("<p>a<!-- secret -->b</p>") == "<p>ab</p>"

    def test_text_is_preserved(self):
        """Plain text content is untouched apart from escaping."""
        assert sanitize_html("<p>5 &lt; 6 &amp; 7</p>") == "<p>5 &lt; 6 &amp; 7</p>"

    @pytest.mark.parametrize("markup", [
        '<p onclick="x()">a<script>b</script><custom>c</custom></p>',
        '<a href="javascript:x" target="_blank">y</a><br>',
        '<div class="mermaid">graph TD\nA--&gt;B</div>',
        '<svg viewBox="0 0 10 10"><path d="M0 0L10 10" style="x"></path></svg>',
        '<ul><li>one<li>two</ul><!-- c -->',
    ])
    def test_idempotent(self, markup):
        """Sanitizing twice gives the same result as sanitizing once."""
        once = sanitize_html(markup)
        assert sanitize_html(once) == once

    def test_empty_input(self):
        """Empty input gives empty output."""
        assert sanitize_html("") == ""
        assert sanitize_html(None) == ""

    def test_parser_failure_fails_closed(self):
        """An unexpected parser error drops the fragment."""
        with patch('services.markdown.sanitizer.BeautifulSoup', side_effect=RuntimeError("boom")):
            assert sanitize_html("<p>x</p>") == ""
