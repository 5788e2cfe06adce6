"""
HTML Sanitizer
==============

Filters rendered markdown HTML down to an explicit allow-list before it is
shown in a preview or captured to PDF.

Rules are table-driven and evaluated against a BeautifulSoup tree built with
the stdlib ``html.parser`` backend, so the result is the same in every
process (no browser DOM needed):

1. Hard denylist: executable and form elements are removed together with
   everything inside them, whatever the allow-list says.
2. Comments, doctypes and processing instructions are dropped.
3. Tags missing from ALLOWED_TAGS are unwrapped (their children stay).
4. Attributes are reduced to the global set plus the tag's own entry.
   ``on*`` handlers and ``style`` are always removed.
5. ``href``/``src`` must use an allowed URL scheme.

Rejected content is dropped silently; sanitize_html() never raises.

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from typing import Dict, FrozenSet
import logging
import re

from bs4 import BeautifulSoup, Tag
from bs4.element import PreformattedString

logger = logging.getLogger(__name__)


DENIED_TAGS: FrozenSet[str] = frozenset({
    'script', 'style', 'iframe', 'frame', 'frameset', 'object', 'embed', 'applet',
    'form', 'input', 'button', 'textarea', 'select', 'option', 'optgroup',
    'link', 'meta', 'base', 'noscript', 'template', 'foreignobject',
})

GLOBAL_ATTRIBUTES: FrozenSet[str] = frozenset({'class', 'id', 'title'})

_NONE: FrozenSet[str] = frozenset()
_TABLE_CELL = frozenset({'colspan', 'rowspan', 'align'})
_SVG_PRESENTATION = frozenset({
    'fill', 'fill-opacity', 'fill-rule', 'stroke', 'stroke-width', 'stroke-opacity',
    'stroke-dasharray', 'stroke-linecap', 'stroke-linejoin', 'opacity', 'transform',
    'marker-start', 'marker-mid', 'marker-end',
})
_SVG_TEXT = _SVG_PRESENTATION | frozenset({
    'x', 'y', 'dx', 'dy', 'text-anchor', 'dominant-baseline', 'alignment-baseline',
    'font-size', 'font-family', 'font-weight',
})

# Tag name -> attributes allowed on that tag in addition to GLOBAL_ATTRIBUTES.
# html.parser lower-cases names, so SVG names such as viewBox appear as viewbox.
ALLOWED_TAGS: Dict[str, FrozenSet[str]] = {
    # Headings and text blocks
    'h1': _NONE, 'h2': _NONE, 'h3': _NONE, 'h4': _NONE, 'h5': _NONE, 'h6': _NONE,
    'p': _NONE, 'br': _NONE, 'hr': _NONE, 'div': _NONE, 'span': _NONE,
    'blockquote': _NONE, 'pre': _NONE, 'code': _NONE,
    # Inline formatting
    'strong': _NONE, 'b': _NONE, 'em': _NONE, 'i': _NONE, 'u': _NONE, 's': _NONE,
    'del': _NONE, 'ins': _NONE, 'mark': _NONE, 'sub': _NONE, 'sup': _NONE,
    'small': _NONE, 'kbd': _NONE, 'abbr': _NONE,
    # Lists
    'ul': _NONE, 'ol': frozenset({'start'}), 'li': _NONE,
    'dl': _NONE, 'dt': _NONE, 'dd': _NONE,
    # Tables
    'table': _NONE, 'caption': _NONE, 'thead': _NONE, 'tbody': _NONE, 'tfoot': _NONE,
    'tr': _NONE, 'th': _TABLE_CELL, 'td': _TABLE_CELL,
    # Links and images
    'a': frozenset({'href', 'target', 'rel'}),
    'img': frozenset({'src', 'alt', 'width', 'height'}),
    # SVG primitives produced by diagram rendering
    'svg': _SVG_PRESENTATION | frozenset({
        'viewbox', 'width', 'height', 'xmlns', 'preserveaspectratio', 'role',
    }),
    'g': _SVG_PRESENTATION,
    'defs': _NONE,
    'marker': _SVG_PRESENTATION | frozenset({
        'viewbox', 'refx', 'refy', 'markerwidth', 'markerheight', 'markerunits', 'orient',
    }),
    'path': _SVG_PRESENTATION | frozenset({'d'}),
    'rect': _SVG_PRESENTATION | frozenset({'x', 'y', 'width', 'height', 'rx', 'ry'}),
    'circle': _SVG_PRESENTATION | frozenset({'cx', 'cy', 'r'}),
    'ellipse': _SVG_PRESENTATION | frozenset({'cx', 'cy', 'rx', 'ry'}),
    'line': _SVG_PRESENTATION | frozenset({'x1', 'y1', 'x2', 'y2'}),
    'polyline': _SVG_PRESENTATION | frozenset({'points'}),
    'polygon': _SVG_PRESENTATION | frozenset({'points'}),
    'text': _SVG_TEXT,
    'tspan': _SVG_TEXT,
}

URL_ATTRIBUTES: FrozenSet[str] = frozenset({'href', 'src'})
ALLOWED_URL_SCHEMES: FrozenSet[str] = frozenset({'http', 'https', 'mailto', 'tel', 'ftp', 'data'})

_SCHEME_RE = re.compile(r'^([a-z][a-z0-9+.\-]*):', re.IGNORECASE)
# Browsers skip whitespace and control characters when reading a scheme
_IGNORED_URL_CHARS_RE = re.compile(r'[\x00-\x20\x7f]+')


def is_safe_url(value: str, attribute: str = 'href') -> bool:
    """
    Check a URL attribute value against the scheme allow-list.

    Relative URLs and fragments are always accepted. ``data:`` is only
    accepted for ``src`` when it carries an image.
    """
    compact = _IGNORED_URL_CHARS_RE.sub('', value or '')
    match = _SCHEME_RE.match(compact)
    if not match:
        return True

    scheme = match.group(1).lower()
    if scheme not in ALLOWED_URL_SCHEMES:
        return False
    if scheme == 'data':
        return attribute == 'src' and compact[len('data:'):].lower().startswith('image/')
    return True


def _clean_attributes(tag: Tag) -> None:
    allowed = GLOBAL_ATTRIBUTES | ALLOWED_TAGS[tag.name]

    for name in list(tag.attrs):
        key = name.lower()
        if key.startswith('on') or key == 'style' or key not in allowed:
            del tag.attrs[name]
            continue

        if key in URL_ATTRIBUTES:
            value = tag.attrs[name]
            if isinstance(value, list):
                value = ' '.join(value)
            if not is_safe_url(value, key):
                logger.debug("[Sanitizer] Dropped %s=%r on <%s>", key, value[:80], tag.name)
                del tag.attrs[name]

    if tag.name == 'a' and tag.get('target') and not tag.get('rel'):
        tag['rel'] = 'noopener noreferrer'


def sanitize_html(html: str) -> str:
    """
    Reduce an HTML fragment to allow-listed tags, attributes and URLs.

    Deterministic and idempotent. Never raises; on an unexpected parser
    failure the fragment is dropped entirely (fail closed).

    Args:
        html: Untrusted HTML fragment

    Returns:
        Sanitized HTML fragment
    """
    if not html:
        return ""

    try:
        soup = BeautifulSoup(html, 'html.parser')

        for tag in soup.find_all(list(DENIED_TAGS)):
            if not tag.decomposed:
                tag.decompose()

        for node in soup.find_all(string=lambda s: isinstance(s, PreformattedString)):
            node.extract()

        for tag in soup.find_all(True):
            if tag.name not in ALLOWED_TAGS:
                tag.unwrap()
            else:
                _clean_attributes(tag)

        return str(soup)
    except Exception as e:  # pylint: disable=broad-except
        logger.error("[Sanitizer] Failed to sanitize HTML (%s chars): %s", len(html), e, exc_info=True)
        return ""
