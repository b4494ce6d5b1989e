"""Page metadata from the document ``<head>``, for YAML frontmatter.

Extracted fields (only when non-empty):
    title        <title> text
    description  <meta name="description">
    image        <meta property="og:image">
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from markdown_for_agents.rules.util import attr, text_content


def _find_head(document: BeautifulSoup | Tag) -> Tag | None:
    """Find ``<head>`` as a direct child of the document or of ``<html>``."""
    for child in document.children:
        if not isinstance(child, Tag):
            continue
        if child.name == "head":
            return child
        if child.name == "html":
            for grandchild in child.children:
                if isinstance(grandchild, Tag) and grandchild.name == "head":
                    return grandchild
    return None


def _from_meta(meta: Tag) -> tuple[str, str] | None:
    content = attr(meta, "content").strip()
    if not content:
        return None
    if attr(meta, "name").lower() == "description":
        return "description", content
    if attr(meta, "property").lower() == "og:image":
        return "image", content
    return None


def extract_metadata(document: BeautifulSoup | Tag) -> dict[str, str]:
    """Return the title/description/image found in the document head."""
    meta: dict[str, str] = {}
    head = _find_head(document)
    if head is None:
        return meta

    for child in head.children:
        if not isinstance(child, Tag):
            continue
        if child.name == "title":
            title = text_content(child).strip()
            if title:
                meta["title"] = title
        elif child.name == "meta":
            entry = _from_meta(child)
            if entry:
                meta[entry[0]] = entry[1]
    return meta
