"""Helpers shared by the built-in rules."""

from __future__ import annotations

import re
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag
from bs4.element import NavigableString, PreformattedString

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:")


def text_content(node: Tag | BeautifulSoup | NavigableString) -> str:
    """Return the raw text of *node*'s subtree, ignoring comments and doctypes."""
    if isinstance(node, NavigableString):
        return "" if isinstance(node, PreformattedString) else str(node)
    # descendants is iterative, so arbitrarily deep subtrees are safe
    return "".join(
        str(d)
        for d in node.descendants
        if isinstance(d, NavigableString) and not isinstance(d, PreformattedString)
    )


def attr(node: Tag, name: str) -> str:
    """Return attribute *name* of *node* as a string ("" when absent)."""
    value = node.get(name)
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(str(v) for v in value)
    return str(value)


def resolve_url(url: str, base_url: str) -> str:
    """Resolve a relative *url* against *base_url*.

    Left untouched when there is no base, when *url* is empty, already has a
    scheme (``https:``, ``mailto:``, ``data:`` ...) or is a fragment-only
    ``#anchor``.
    """
    if not base_url or not url:
        return url
    if url.startswith("#") or _SCHEME_RE.match(url):
        return url
    return urljoin(base_url, url)

