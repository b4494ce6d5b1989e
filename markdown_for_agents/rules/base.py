"""Rule and RuleContext: the contract between the walker and conversion rules.

A rule pairs a *filter* (which elements it handles) with a *replacement*
(the Markdown it produces).  The filter is one of three variants, dispatched
by :meth:`Rule.matches`:

- ``str``        -- a single tag name, e.g. ``"div"``
- ``frozenset``  -- any of several tag names (any non-string iterable is
  normalised to a frozenset)
- callable       -- a predicate over the element, for full control

The replacement receives a :class:`RuleContext` and returns:

- ``str``   -- the final fragment for the element; no further rules run
- ``None``  -- drop the element entirely (no output, no recursion)
- ``PASS``  -- decline; the next matching rule is tried
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from bs4 import BeautifulSoup, Tag

    from markdown_for_agents.options import ConvertOptions


class Signal(enum.Enum):
    """Non-string results a replacement may return besides ``None``."""

    PASS = "pass"

    def __repr__(self) -> str:
        return f"{type(self).__name__}.{self.name}"


PASS = Signal.PASS

Filter = Union[str, Iterable[str], Callable[["Tag"], bool]]
Replacement = Callable[["RuleContext"], Union[str, None, Signal]]


class LinkReferences:
    """Per-conversion collector for ``link_style="referenced"`` definitions.

    Identical (url, title) pairs share one reference number.
    """

    def __init__(self) -> None:
        self._numbers: dict[tuple[str, str], int] = {}

    def add(self, url: str, title: str = "") -> int:
        key = (url, title)
        if key not in self._numbers:
            self._numbers[key] = len(self._numbers) + 1
        return self._numbers[key]

    def __len__(self) -> int:
        return len(self._numbers)

    def render(self) -> str:
        """Return the definitions block, one ``[n]: url "title"`` per line."""
        lines: list[str] = []
        for (url, title), number in self._numbers.items():
            suffix = f' "{title}"' if title else ""
            lines.append(f"[{number}]: {url}{suffix}")
        return "\n".join(lines)


@dataclass(frozen=True)
class RuleContext:
    """Read-only view handed to a rule's replacement function.

    Attributes:
        node:             The element being converted.
        parent:           Its parent element, or the document root.
        convert_children: Converts the children of any node to Markdown,
                          using the formatting context derived for *node*.
        options:          The resolved conversion options.
        list_depth:       ``<ul>``/``<ol>`` nesting depth (0 = not in a list).
        inside_pre:       True inside a ``<pre>`` block.
        inside_table:     True inside a ``<table>``.
        sibling_index:    Index of *node* among its parent's children.
        references:       Collector for referenced-style link definitions.
    """

    node: Tag
    parent: Tag | BeautifulSoup | None
    convert_children: Callable[[Tag | BeautifulSoup], str]
    options: ConvertOptions
    list_depth: int = 0
    inside_pre: bool = False
    inside_table: bool = False
    sibling_index: int = 0
    references: LinkReferences = field(default_factory=LinkReferences)


@dataclass(frozen=True)
class Rule:
    """One entry of the rule table.  Built-in rules use priority 0."""

    filter: Filter
    replacement: Replacement
    priority: int = 0

    def __post_init__(self) -> None:
        f = self.filter
        if isinstance(f, str):
            object.__setattr__(self, "filter", f.lower())
        elif callable(f):
            pass
        elif isinstance(f, Iterable):
            object.__setattr__(self, "filter", frozenset(str(name).lower() for name in f))
        else:
            raise TypeError(
                f"rule filter must be a tag name, tag names or a predicate; got {type(f).__name__}",
            )
        if not callable(self.replacement):
            raise TypeError("rule replacement must be callable")
        if not isinstance(self.priority, int):
            raise TypeError(f"rule priority must be int; got {type(self.priority).__name__}")

    def matches(self, element: Tag) -> bool:
        f = self.filter
        if isinstance(f, str):
            return element.name == f
        if isinstance(f, frozenset):
            return element.name in f
        return bool(f(element))
