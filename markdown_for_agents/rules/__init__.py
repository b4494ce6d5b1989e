"""Rule registry: built-in conversion rules plus user-rule merging.

Usage::

    from markdown_for_agents import convert, create_rule

    note = create_rule(
        lambda el: el.name == "div" and "note" in (el.get("class") or ""),
        lambda ctx: f"\\n\\n> **Note:** {ctx.convert_children(ctx.node).strip()}\\n\\n",
    )
    convert(html, rules=[note])
"""

from __future__ import annotations

import threading
from collections.abc import Iterable

from markdown_for_agents.rules.base import (
    PASS,
    Filter,
    LinkReferences,
    Replacement,
    Rule,
    RuleContext,
    Signal,
)
from markdown_for_agents.rules.block import BLOCK_RULES
from markdown_for_agents.rules.inline import INLINE_RULES
from markdown_for_agents.rules.lists import LIST_RULES
from markdown_for_agents.rules.tables import TABLE_RULES

_default_rules: tuple[Rule, ...] | None = None
_default_rules_lock = threading.Lock()


def get_default_rules() -> tuple[Rule, ...]:
    """Return the built-in rules (block, inline, list, table).

    Built once on first use and shared, read-only, by every conversion.
    """
    global _default_rules
    rules = _default_rules
    if rules is None:
        with _default_rules_lock:
            if _default_rules is None:
                _default_rules = (*BLOCK_RULES, *INLINE_RULES, *LIST_RULES, *TABLE_RULES)
            rules = _default_rules
    return rules


def create_rule(filter: Filter, replacement: Replacement, priority: int = 100) -> Rule:  # noqa: A002
    """Build a :class:`Rule`.  The default priority puts it ahead of every built-in."""
    return Rule(filter=filter, replacement=replacement, priority=priority)


def merge_rules(
    user_rules: Iterable[Rule],
    defaults: Iterable[Rule] | None = None,
) -> list[Rule]:
    """Combine *user_rules* with *defaults*, highest priority first.

    The sort is stable: rules of equal priority keep their order, with user
    rules ahead of the defaults.
    """
    if defaults is None:
        defaults = get_default_rules()
    combined = [*user_rules, *defaults]
    return sorted(combined, key=lambda rule: rule.priority, reverse=True)


__all__ = [
    "PASS",
    "Filter",
    "LinkReferences",
    "Replacement",
    "Rule",
    "RuleContext",
    "Signal",
    "create_rule",
    "get_default_rules",
    "merge_rules",
]
