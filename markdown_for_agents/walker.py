"""Depth-first tree walker that dispatches elements to conversion rules.

For each child of a node, in document order:

- Text is emitted verbatim inside ``<pre>``, dropped inside a table when it
  is whitespace-only, and otherwise emitted with whitespace runs collapsed
  to a single space.
- An element is offered to every matching rule, highest priority first.  A
  string result is the element's fragment; ``None`` drops the element; ``PASS``
  moves on to the next matching rule.  With no match (or only ``PASS``es) the
  element is transparent and its children are walked instead.

Entering ``<pre>`` or ``<table>`` switches on the matching flag for the whole
subtree; entering ``<ul>``/``<ol>`` increments the list depth.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from functools import partial
from typing import TYPE_CHECKING

from bs4 import BeautifulSoup, Tag
from bs4.element import NavigableString, PreformattedString

from markdown_for_agents.rules.base import LinkReferences, Rule, RuleContext, Signal

if TYPE_CHECKING:
    from markdown_for_agents.options import ConvertOptions

_WHITESPACE_RE = re.compile(r"\s+")

_LIST_TAGS = frozenset({"ul", "ol"})


class ConversionError(RuntimeError):
    """Base class for errors raised by the conversion pipeline."""


class NestingDepthError(ConversionError):
    """Raised when element nesting exceeds ``ConvertOptions.max_depth``.

    Attributes:
        depth     -- the depth that was reached
        max_depth -- the configured limit
    """

    def __init__(self, depth: int, max_depth: int) -> None:
        super().__init__(f"element nesting depth {depth} exceeds max_depth={max_depth}")
        self.depth = depth
        self.max_depth = max_depth


@dataclass(frozen=True)
class WalkerState:
    """Formatting context for one level of the walk."""

    options: ConvertOptions
    rules: tuple[Rule, ...]
    list_depth: int = 0
    inside_pre: bool = False
    inside_table: bool = False
    depth: int = 0
    references: LinkReferences = field(default_factory=LinkReferences)


def derive_state(element: Tag, state: WalkerState) -> WalkerState:
    """Return the state used for *element*'s children."""
    name = element.name
    return replace(
        state,
        inside_pre=state.inside_pre or name == "pre",
        inside_table=state.inside_table or name == "table",
        list_depth=state.list_depth + 1 if name in _LIST_TAGS else state.list_depth,
        depth=state.depth + 1,
    )


def _levels_below(node: Tag | BeautifulSoup, root: Tag) -> int:
    """Number of parent steps from *node* up to *root* (0 if not a descendant)."""
    levels = 0
    for parent in node.parents:
        levels += 1
        if parent is root:
            return levels
    return 0


def walk(
    node: Tag | BeautifulSoup,
    state: WalkerState,
    root: Tag | None = None,
) -> str:
    """Convert the children of *node* to a raw Markdown string.

    *state* describes the children of *root* (default: *node* itself).  When
    a rule converts a deeper descendant, such as a table converting its cells,
    the depth grows by the levels in between.
    """
    if root is not None and node is not root:
        state = replace(state, depth=state.depth + _levels_below(node, root))
    if state.depth > state.options.max_depth:
        raise NestingDepthError(state.depth, state.options.max_depth)

    fragments: list[str] = []
    # Kind of the closest preceding text/element sibling
    previous: str | None = None

    for index, child in enumerate(node.contents):
        if isinstance(child, NavigableString):
            if isinstance(child, PreformattedString):
                # Comments, doctypes, CDATA, processing instructions
                continue
            previous = "text"
            text = _convert_text(str(child), state)
            if text:
                fragments.append(text)
            continue

        if not isinstance(child, Tag):
            continue

        follows_element = previous == "element"
        previous = "element"
        result = _convert_element(child, index, node, state)
        if not result:
            continue

        # Two adjacent elements with no text between them would fuse,
        # e.g. [Link1](/a)[Link2](/b)
        if (
            follows_element
            and not state.inside_pre
            and not state.inside_table
            and fragments
            and not fragments[-1][-1].isspace()
        ):
            fragments.append(" ")
        fragments.append(result)

    return "".join(fragments)


def _convert_text(text: str, state: WalkerState) -> str:
    if state.inside_pre:
        return text
    if state.inside_table and not text.strip():
        return ""
    return _WHITESPACE_RE.sub(" ", text)


def _convert_element(
    element: Tag,
    index: int,
    parent: Tag | BeautifulSoup,
    state: WalkerState,
) -> str | None:
    child_state = derive_state(element, state)

    for rule in state.rules:
        if not rule.matches(element):
            continue
        context = RuleContext(
            node=element,
            parent=parent,
            convert_children=partial(walk, state=child_state, root=element),
            options=state.options,
            list_depth=state.list_depth,
            inside_pre=state.inside_pre,
            inside_table=state.inside_table,
            sibling_index=index,
            references=state.references,
        )
        result = rule.replacement(context)
        if result is Signal.PASS:
            continue
        if result is None or isinstance(result, str):
            return result
        raise TypeError(
            f"rule replacement for <{element.name}> must return str, None or PASS; "
            f"got {type(result).__name__}",
        )

    return walk(element, child_state)
