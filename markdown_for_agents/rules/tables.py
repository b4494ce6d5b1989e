"""Table rule: GFM pipe tables.

A separator row follows the first row only when it is a header row: it sits
in ``<thead>``, or it consists solely of ``<th>`` cells.  Tables without a
header row are emitted as plain pipe rows.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from bs4 import Tag

from markdown_for_agents.rules.base import Rule, RuleContext
from markdown_for_agents.rules.util import attr

_SECTION_TAGS = frozenset({"thead", "tbody", "tfoot"})
_CELL_TAGS = frozenset({"td", "th"})
_CELL_BREAK_RE = re.compile(r"\s*\n\s*")


def _iter_rows(table: Tag) -> Iterator[tuple[Tag, bool]]:
    """Yield ``(tr, in_thead)`` for the rows of *table*, skipping nested tables."""
    for child in table.children:
        if not isinstance(child, Tag):
            continue
        if child.name == "tr":
            yield child, False
        elif child.name in _SECTION_TAGS:
            for row in child.children:
                if isinstance(row, Tag) and row.name == "tr":
                    yield row, child.name == "thead"


def _colspan(cell: Tag) -> int:
    value = attr(cell, "colspan").strip()
    return int(value) if value.isdigit() and int(value) > 0 else 1


def _cell_text(ctx: RuleContext, cell: Tag) -> str:
    text = _CELL_BREAK_RE.sub(" ", ctx.convert_children(cell)).strip()
    return text.replace("|", "\\|")


def _format_row(cells: list[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def _table(ctx: RuleContext) -> str | None:
    rows: list[list[str]] = []
    has_header = False

    for tr, in_thead in _iter_rows(ctx.node):
        cells = [c for c in tr.children if isinstance(c, Tag) and c.name in _CELL_TAGS]
        if not cells:
            continue
        if not rows:
            has_header = in_thead or all(c.name == "th" for c in cells)
        row: list[str] = []
        for cell in cells:
            row.append(_cell_text(ctx, cell))
            row.extend([""] * (_colspan(cell) - 1))
        rows.append(row)

    if not rows:
        return None

    width = max(len(row) for row in rows)
    lines = [_format_row(row + [""] * (width - len(row))) for row in rows]
    if has_header:
        lines.insert(1, _format_row(["---"] * width))
    return "\n\n" + "\n".join(lines) + "\n\n"


TABLE_RULES: tuple[Rule, ...] = (
    Rule("table", _table),
)
