"""
Document Stylesheet Wrapper
===========================

Wraps a sanitized markdown fragment in a standalone HTML document with
GitHub-style "markdown body" print CSS, ready for PDF capture.

Mermaid.js and the diagram bootstrap are injected only when the fragment
contains a diagram container, so plain documents load without any network
fetches.

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from typing import Optional
import html
import logging
import re

from config.settings import config
from services.export.diagram_wait import build_bootstrap_script
from services.markdown import DIAGRAM_CLASS

logger = logging.getLogger(__name__)

# A start tag whose class list holds the diagram class. Sanitized text and
# attribute values never carry a literal "<", so escaped markup cannot match.
DIAGRAM_TAG_RE = re.compile(
    r'<[a-zA-Z][^<>]*\sclass="(?:[^"]*\s)?' + re.escape(DIAGRAM_CLASS) + r'(?:\s[^"]*)?"'
)

MARKDOWN_BODY_CSS = """
    body {
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', 'Noto Sans', Helvetica, Arial, sans-serif;
      font-size: 16px;
      line-height: 1.5;
      word-wrap: break-word;
      margin: 0;
      padding: 0;
      background-color: #ffffff;
      color: #1f2328;
      -webkit-print-color-adjust: exact;
      print-color-adjust: exact;
    }

    .markdown-body { max-width: 980px; margin: 0 auto; }

    h1, h2, h3, h4, h5, h6 {
      margin-top: 24px;
      margin-bottom: 16px;
      font-weight: 600;
      line-height: 1.25;
      page-break-after: avoid;
      break-after: avoid;
    }

    h1 { font-size: 2em; border-bottom: 1px solid #d0d7de; padding-bottom: 0.3em; }
    h2 { font-size: 1.5em; border-bottom: 1px solid #d0d7de; padding-bottom: 0.3em; }
    h3 { font-size: 1.25em; }
    h4 { font-size: 1em; }
    h5 { font-size: 0.875em; }
    h6 { font-size: 0.85em; color: #656d76; }

    p { margin-top: 0; margin-bottom: 10px; orphans: 3; widows: 3; }

    a { color: #0969da; text-decoration: none; }

    code {
      padding: 0.2em 0.4em;
      margin: 0;
      font-size: 85%;
      background-color: #f6f8fa;
      border-radius: 6px;
      font-family: ui-monospace, SFMono-Regular, 'SF Mono', Menlo, Consolas, 'Liberation Mono', monospace;
    }

    pre {
      padding: 16px;
      overflow: auto;
      font-size: 85%;
      line-height: 1.45;
      background-color: #f6f8fa;
      border-radius: 6px;
      margin-top: 0;
      margin-bottom: 16px;
      white-space: pre-wrap;
      page-break-inside: avoid;
      break-inside: avoid;
    }

    pre code { padding: 0; background-color: transparent; border: 0; }

    ul, ol { margin-top: 0; margin-bottom: 16px; padding-left: 2em; }
    li + li { margin-top: 0.25em; }

    blockquote {
      margin: 0 0 16px 0;
      padding: 0 1em;
      color: #656d76;
      border-left: 0.25em solid #d0d7de;
    }

    table {
      border-spacing: 0;
      border-collapse: collapse;
      margin-top: 0;
      margin-bottom: 16px;
      width: 100%;
      page-break-inside: avoid;
      break-inside: avoid;
    }

    table tr { background-color: #ffffff; border-top: 1px solid #d0d7de; }
    table tr:nth-child(2n) { background-color: #f6f8fa; }
    table th, table td { padding: 6px 13px; border: 1px solid #d0d7de; }
    table th { font-weight: 600; background-color: #f6f8fa; }

    hr { height: 0.25em; padding: 0; margin: 24px 0; background-color: #d0d7de; border: 0; }

    img { max-width: 100%; box-sizing: content-box; }

    .mermaid { text-align: center; margin-bottom: 16px; page-break-inside: avoid; break-inside: avoid; }
    .mermaid svg { max-width: 100%; height: auto; }

    strong { font-weight: 600; }
    em { font-style: italic; }

    @media print {
      .markdown-body { max-width: none; }
      a { color: inherit; text-decoration: underline; }
    }
"""


def has_diagrams(fragment: str) -> bool:
    """Whether a sanitized fragment contains a diagram container."""
    return bool(DIAGRAM_TAG_RE.search(fragment or ""))


def wrap_document(
    sanitized_html: str,
    title: str = "Document",
    mermaid_script_url: Optional[str] = None,
    mermaid_theme: Optional[str] = None
) -> str:
    """
    Build the full HTML document captured to PDF.

    Args:
        sanitized_html: Output of the sanitizer, inserted as-is
        title: Document title, escaped into <title>
        mermaid_script_url: Mermaid.js bundle URL (defaults to config)
        mermaid_theme: Mermaid theme (defaults to config)

    Returns:
        Complete HTML document
    """
    diagram_head = ""
    if has_diagrams(sanitized_html):
        script_url = mermaid_script_url or config.MERMAID_SCRIPT_URL
        theme = mermaid_theme or config.MERMAID_THEME
        logger.debug("[ExportPDF] Diagrams detected, injecting Mermaid from %s", script_url)
        diagram_head = (
            f'\n  <script src="{html.escape(script_url)}"></script>'
            f'\n  <script>\n{build_bootstrap_script(theme)}\n  </script>'
        )

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{html.escape(title or "Document")}</title>
  <style>{MARKDOWN_BODY_CSS}  </style>{diagram_head}
</head>
<body>
  <div class="markdown-body">
    {sanitized_html}
  </div>
</body>
</html>"""
