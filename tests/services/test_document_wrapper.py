"""
Document Wrapper Tests
======================

Unit tests for wrapping sanitized fragments into printable documents.

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""

from services.export import has_diagrams, wrap_document
from services.markdown import to_safe_html
from services.export.diagram_wait import READY_FLAG


class TestWrapDocument:
    """Test document structure."""

    def test_standalone_document(self):
        """Output is a complete HTML document with the print stylesheet."""
        document = wrap_document("<p>Hello</p>", "Resume")
        assert document.startswith("<!DOCTYPE html>")
        assert '<meta charset="UTF-8">' in document
        assert "<title>Resume</title>" in document
        assert ".markdown-body" in document
        assert '<div class="markdown-body">' in document
        assert document.rstrip().endswith("</html>")

    def test_fragment_inserted_unchanged(self):
        """The sanitized fragment is inserted as-is."""
        fragment = '<h1 id="top">Jane</h1>\n<table><tr><td>x</td></tr></table>'
        assert fragment in wrap_document(fragment)

    def test_title_is_escaped(self):
        """The title cannot inject markup into the head."""
        document = wrap_document("<p>x</p>", "</title><script>alert(1)</script>")
        assert "<script>alert(1)</script>" not in document
        assert "&lt;/title&gt;&lt;script&gt;" in document

    def test_empty_title_uses_default(self):
        """A missing title falls back to 'Document'."""
        assert "<title>Document</title>" in wrap_document("<p>x</p>", "")


class TestDiagramInjection:
    """Test conditional Mermaid injection."""

    def test_no_scripts_without_diagrams(self):
        """Plain documents contain no script at all."""
        document = wrap_document("<p>No diagrams here</p>", "Plain")
        assert "<script" not in document
        assert READY_FLAG not in document

    def test_scripts_with_diagrams(self):
        """Documents with a diagram container load Mermaid and the bootstrap."""
        fragment = '<div class="mermaid">graph TD\nA--&gt;B</div>'
        document = wrap_document(
            fragment, "Diagram",
            mermaid_script_url="https://cdn.example.com/mermaid.min.js",
            mermaid_theme="forest"
        )
        assert '<script src="https://cdn.example.com/mermaid.min.js"></script>' in document
        assert f"window.{READY_FLAG} = true" in document
        assert '"forest"' in document
        assert document.index("mermaid.min.js") < document.index("</head>")

    def test_config_defaults_used(self):
        """Without overrides the configured Mermaid URL is used."""
        document = wrap_document('<div class="mermaid">pie</div>')
        assert "mermaid" in document
        assert '<script src="http' in document

    def test_has_diagrams(self):
        """Diagram detection looks for the container class."""
        assert has_diagrams('<div class="mermaid">x</div>')
        assert not has_diagrams("<p>mermaid is a word</p>")
        assert not has_diagrams("")

    def test_has_diagrams_class_list(self):
        """The diagram class may share the class attribute with others."""
        assert has_diagrams('<div id="d1" class="chart mermaid">x</div>')
        assert not has_diagrams('<div class="markdown-body"><p>x</p></div>')
        assert not has_diagrams('<div class="mermaid-legend">x</div>')

    def test_markup_shown_as_code_is_not_a_diagram(self):
        """A code span quoting the container markup loads no scripts."""
        fragment = to_safe_html('Use `<div class="mermaid">` for diagrams')
        assert 'class="mermaid"' in fragment
        assert not has_diagrams(fragment)
        assert "<script" not in wrap_document(fragment, "Docs")

    def test_rendered_diagram_detected(self):
        """A mermaid fence renders to a detected container."""
        fragment = to_safe_html("```mermaid\ngraph TD\nA-->B\n```")
        assert has_diagrams(fragment)
