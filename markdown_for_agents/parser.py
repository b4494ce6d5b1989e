"""HTML parsing into a BeautifulSoup tree."""

from __future__ import annotations

from bs4 import BeautifulSoup


def parse_html(html: str) -> BeautifulSoup:
    """Parse *html* with lxml into a document tree.

    Multi-valued attribute splitting is disabled so ``class`` and ``rel``
    stay plain strings, which is what the extraction patterns match against.
    lxml lower-cases tag and attribute names.
    """
    return BeautifulSoup(html or "", "lxml", multi_valued_attributes=None)
