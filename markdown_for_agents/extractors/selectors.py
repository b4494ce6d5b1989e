"""Built-in strip criteria for content extraction."""

from __future__ import annotations

import re

# Tags that never hold main content
DEFAULT_STRIP_TAGS: tuple[str, ...] = (
    "nav",
    "footer",
    "header",
    "aside",
    "script",
    "style",
    "noscript",
    "template",
    "iframe",
    "svg",
    "form",
)

# ARIA landmark / widget roles of navigational chrome
DEFAULT_STRIP_ROLES: tuple[str, ...] = (
    "navigation",
    "banner",
    "contentinfo",
    "complementary",
    "search",
    "menu",
    "menubar",
)

# Matched against the raw ``class`` attribute
DEFAULT_STRIP_CLASSES: tuple[re.Pattern[str], ...] = tuple(
    re.compile(p, re.IGNORECASE)
    for p in (
        r"\bad[s-]?\b",
        r"\bsidebar\b",
        r"\bwidget\b",
        r"\bcookie",
        r"\bpopup\b",
        r"\bmodal\b",
        r"\bbreadcrumb",
        r"\bfootnote",
        r"\bshare",
        r"\bsocial",
        r"\bnewsletter",
        r"\bcomment",
        r"\brelated",
        r"\bcta\b",
        r"\bcall-to-action",
        r"\bauthor[-_]?(bio|card|info|box)\b",
        r"\bavatar\b",
        r"\bpagination\b",
        r"\bprev[-_]?next\b",
        r"\bpager\b",
        r"\bpost[-_]?nav",
        r"\barticle[-_]?nav",
        r"\bback[-_]?link",
    )
)

# Matched against the raw ``id`` attribute
DEFAULT_STRIP_IDS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(p, re.IGNORECASE)
    for p in (
        r"\bad[s-]?\b",
        r"\bsidebar\b",
        r"\bcookie",
        r"\bpopup\b",
        r"\bmodal\b",
    )
)
