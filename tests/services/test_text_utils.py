"""
Markdown Text Utility Tests
===========================

Unit tests for plain-text extraction, word counting and validation.
"""

from services.markdown import get_word_count, markdown_to_plain_text, validate_markdown


class TestPlainText:
    """Test markdown to plain text conversion."""

    def test_strips_formatting(self):
        """Headings, emphasis, links and code markers are removed."""
        markdown = "# Jane Doe\n\n**Senior** *Engineer* at [Example](https://example.com) using `Python`"
        assert markdown_to_plain_text(markdown) == "Jane Doe\n\nSenior Engineer at Example using Python"

    def test_strips_lists_and_quotes(self):
        """List markers and blockquote markers are removed."""
        markdown = "- one\n* two\n1. three\n> quote"
        assert markdown_to_plain_text(markdown) == "one\ntwo\nthree\nquote"

    def test_drops_code_blocks(self):
        """Fenced blocks, including diagrams, are not counted as text."""
        markdown = "Intro\n\n```mermaid\ngraph TD\nA-->B\n```\n\nOutro"
        text = markdown_to_plain_text(markdown)
        assert "graph" not in text
        assert text.startswith("Intro") and text.endswith("Outro")

    def test_empty(self):
        """Empty input gives empty text."""
        assert markdown_to_plain_text("") == ""


class TestWordCount:
    """Test word counting."""

    def test_counts_words(self):
        """Words are counted on the plain text."""
        assert get_word_count("# Jane Doe\n\n**Senior** engineer") == 4

    def test_fenced_code_not_counted(self):
        """Code inside fences does not add to the count; inline code does."""
        markdown = "Uses `Python` daily\n\n```python\nprint('hello world')\n```\n\nDone"
        assert get_word_count(markdown) == 4

    def test_empty(self):
        """Empty input has no words."""
        assert get_word_count("") == 0
        assert get_word_count("   \n ") == 0


class TestValidateMarkdown:
    """Test structural validation."""

    def test_valid_document(self):
        """A well-formed document has no errors."""
        result = validate_markdown("# Title\n\n[link](https://example.com)\n\n```\ncode\n```")
        assert result.valid is True
        assert result.errors == []

    def test_empty_document(self):
        """Blank content is reported."""
        result = validate_markdown("  ")
        assert result.valid is False
        assert "Markdown content is empty" in result.errors

    def test_unclosed_code_block(self):
        """An odd number of fences is reported."""
        result = validate_markdown("```python\nprint(1)")
        assert result.valid is False
        assert result.errors == ["Unclosed code block detected"]

    def test_unmatched_brackets(self):
        """Unbalanced link brackets are reported."""
        result = validate_markdown("See [the docs(https://example.com)")
        assert result.errors == ["Unmatched brackets in links"]
