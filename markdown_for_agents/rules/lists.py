"""List rules.

Ordered-list numbers come from the parent ``<ol>``: its ``start`` attribute
(default 1) plus the number of ``<li>`` siblings before the item.  Items
never number themselves from their own attributes.
"""

from __future__ import annotations

import re

from bs4 import Tag

from markdown_for_agents.rules.base import Rule, RuleContext
from markdown_for_agents.rules.util import attr

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
# Whitespace text between items leaves one stray space before the next bullet
_STRAY_SPACE_RE = re.compile(r"^ (?=\S)", re.MULTILINE)


def _start_number(ol: Tag) -> int:
    m = _LEADING_INT_RE.match(attr(ol, "start"))
    return int(m.group(1)) if m else 1


def _list(ctx: RuleContext) -> str:
    content = _STRAY_SPACE_RE.sub("", ctx.convert_children(ctx.node))
    if ctx.list_depth == 0:
        return f"\n\n{content.strip()}\n\n"
    # Nested lists continue the parent item
    return f"\n{content.rstrip()}"


def _bullet(ctx: RuleContext) -> str:
    parent = ctx.parent
    if not (isinstance(parent, Tag) and parent.name == "ol"):
        return ctx.options.bullet_char
    preceding = sum(
        1
        for sibling in parent.contents[: ctx.sibling_index]
        if isinstance(sibling, Tag) and sibling.name == "li"
    )
    return f"{_start_number(parent) + preceding}."


def _list_item(ctx: RuleContext) -> str | None:
    content = ctx.convert_children(ctx.node).strip()
    if not content:
        return None

    bullet = _bullet(ctx)
    first, *rest = content.split("\n")
    if not rest:
        return f"{bullet} {first}\n"

    # Continuation lines (including nested lists) align with the item content
    indent = " " * (len(bullet) + 1)
    continuation = "\n".join(f"{indent}{line}" if line.strip() else "" for line in rest)
    return f"{bullet} {first}\n{continuation}\n"


LIST_RULES: tuple[Rule, ...] = (
    Rule(("ul", "ol"), _list),
    Rule("li", _list_item),
)
