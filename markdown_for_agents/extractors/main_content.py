"""Main-content extraction: prune boilerplate subtrees before conversion.

An element is stripped when, tested in this order, its tag is in the strip
set, its ARIA ``role`` is in the role set, its ``class`` matches a class
pattern, or its ``id`` matches an id pattern.  The first hit decides.  Kept
elements are searched in turn, so a kept ancestor can still lose stripped
descendants.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any

from bs4 import BeautifulSoup, Tag

from markdown_for_agents.extractors.selectors import (
    DEFAULT_STRIP_CLASSES,
    DEFAULT_STRIP_IDS,
    DEFAULT_STRIP_ROLES,
    DEFAULT_STRIP_TAGS,
)
from markdown_for_agents.options import ExtractOptions
from markdown_for_agents.rules.util import attr

logger = logging.getLogger(__name__)

Pattern = str | re.Pattern[str]


def _matches_any(value: str, patterns: Iterable[Pattern]) -> bool:
    for pattern in patterns:
        if isinstance(pattern, str):
            if pattern in value:
                return True
        elif pattern.search(value):
            return True
    return False


class _StripCriteria:
    """The merged strip sets for one extraction pass."""

    def __init__(self, options: ExtractOptions) -> None:
        tags = set(DEFAULT_STRIP_TAGS) | {t.lower() for t in options.strip_tags}
        if options.keep_header:
            tags.discard("header")
        if options.keep_footer:
            tags.discard("footer")
        if options.keep_nav:
            tags.discard("nav")
        self.tags = frozenset(tags)
        self.roles = frozenset(DEFAULT_STRIP_ROLES) | frozenset(options.strip_roles)
        self.classes: tuple[Pattern, ...] = (*DEFAULT_STRIP_CLASSES, *options.strip_classes)
        self.ids: tuple[Pattern, ...] = (*DEFAULT_STRIP_IDS, *options.strip_ids)

    def should_strip(self, el: Tag) -> bool:
        if el.name in self.tags:
            return True
        role = attr(el, "role")
        if role and role in self.roles:
            return True
        class_name = attr(el, "class")
        if class_name and _matches_any(class_name, self.classes):
            return True
        element_id = attr(el, "id")
        return bool(element_id) and _matches_any(element_id, self.ids)


def extract_content(
    document: BeautifulSoup | Tag,
    options: ExtractOptions | Mapping[str, Any] | None = None,
) -> None:
    """Remove non-content elements from *document* in place.

    Strips everything matching the built-in criteria (navigation, ads,
    sidebars, cookie banners ...) plus the additions in *options*.  Removed
    elements are detached, so their ``parent`` is cleared.
    """
    if options is None:
        options = ExtractOptions()
    elif not isinstance(options, ExtractOptions):
        options = ExtractOptions.model_validate(dict(options))
    criteria = _StripCriteria(options)

    removed = 0
    stack: list[Tag] = [document]
    while stack:
        node = stack.pop()
        # Collect first, detach after the scan: never mutate while iterating
        to_remove: list[Tag] = []
        for child in node.children:
            if not isinstance(child, Tag):
                continue
            if criteria.should_strip(child):
                to_remove.append(child)
            else:
                stack.append(child)
        for child in to_remove:
            child.extract()
        removed += len(to_remove)

    logger.debug("extract_content removed %d elements", removed)
