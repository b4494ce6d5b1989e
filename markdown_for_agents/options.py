"""Conversion options, validated with pydantic.

Every knob is resolved against its default exactly once, when the
:class:`ConvertOptions` instance is built.  Instances are frozen, so the
resolved options cannot change for the rest of a conversion.

Usage::

    from markdown_for_agents import ConvertOptions, ExtractOptions

    options = ConvertOptions(
        extract=ExtractOptions(strip_classes=[re.compile(r"promo", re.I)], keep_header=True),
        heading_style="setext",
        deduplicate={"min_length": 20},
    )
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from markdown_for_agents.rules.base import Rule


def _as_name_tuple(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(v) for v in value)


def _as_pattern_tuple(value: Any) -> tuple[str | re.Pattern[str], ...]:
    """Accept a str, a compiled pattern, or an iterable of either."""
    if value is None:
        return ()
    if isinstance(value, (str, re.Pattern)):
        value = (value,)
    patterns: list[str | re.Pattern[str]] = []
    for item in value:
        if not isinstance(item, (str, re.Pattern)):
            raise TypeError(
                f"extraction patterns must be str or re.Pattern; got {type(item).__name__}",
            )
        patterns.append(item)
    return tuple(patterns)


class ExtractOptions(BaseModel):
    """Additions to the built-in extraction strip sets.

    Attributes:
        strip_tags:    Extra tag names to strip.
        strip_roles:   Extra ARIA ``role`` values to strip.
        strip_classes: Extra class patterns.  A ``str`` matches as a substring
                       of the ``class`` attribute, an ``re.Pattern`` via
                       ``search``.
        strip_ids:     Extra id patterns, same semantics as *strip_classes*.
        keep_header:   Keep ``<header>`` elements.
        keep_footer:   Keep ``<footer>`` elements.
        keep_nav:      Keep ``<nav>`` elements.

    The pattern sets only ever add to the defaults; the ``keep_*`` flags are
    the only way to take a tag back out.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    strip_tags: tuple[str, ...] = ()
    strip_roles: tuple[str, ...] = ()
    strip_classes: tuple[Any, ...] = ()
    strip_ids: tuple[Any, ...] = ()
    keep_header: bool = False
    keep_footer: bool = False
    keep_nav: bool = False

    @field_validator("strip_tags", "strip_roles", mode="before")
    @classmethod
    def coerce_names(cls, v: Any) -> tuple[str, ...]:
        return _as_name_tuple(v)

    @field_validator("strip_classes", "strip_ids", mode="before")
    @classmethod
    def coerce_patterns(cls, v: Any) -> tuple[str | re.Pattern[str], ...]:
        return _as_pattern_tuple(v)


class DeduplicateOptions(BaseModel):
    """Blocks whose normalized fingerprint is shorter than *min_length* are never removed."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    min_length: int = Field(10, ge=0)


class ConvertOptions(BaseModel):
    """Fully resolved options for one :func:`~markdown_for_agents.convert` call."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    extract: bool | ExtractOptions = False
    rules: tuple[Any, ...] = ()
    base_url: str = ""
    heading_style: Literal["atx", "setext"] = "atx"
    bullet_char: Literal["-", "*", "+"] = "-"
    code_block_style: Literal["fenced", "indented"] = "fenced"
    fence_char: Literal["`", "~"] = "`"
    strong_delimiter: Literal["**", "__"] = "**"
    em_delimiter: Literal["*", "_"] = "*"
    link_style: Literal["inlined", "referenced"] = "inlined"
    deduplicate: bool | DeduplicateOptions = False
    frontmatter: bool | dict[str, str] = False
    token_counter: Callable[[str], Any] | None = None
    # Element nesting beyond this raises NestingDepthError
    max_depth: int = Field(200, ge=1)

    @field_validator("rules", mode="before")
    @classmethod
    def check_rules(cls, v: Any) -> tuple[Rule, ...]:
        if v is None:
            return ()
        if isinstance(v, Rule):
            v = (v,)
        rules = tuple(v)
        for rule in rules:
            if not isinstance(rule, Rule):
                raise TypeError(f"rules must be Rule instances; got {type(rule).__name__}")
        return rules

    @field_validator("base_url", mode="before")
    @classmethod
    def strip_base_url(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v or ""

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    @property
    def extract_options(self) -> ExtractOptions | None:
        """The extraction additions, or None when extraction is disabled."""
        if isinstance(self.extract, ExtractOptions):
            return self.extract
        return ExtractOptions() if self.extract else None

    @property
    def dedup_min_length(self) -> int | None:
        """The dedup floor, or None when deduplication is disabled."""
        if isinstance(self.deduplicate, DeduplicateOptions):
            return self.deduplicate.min_length
        return DeduplicateOptions().min_length if self.deduplicate else None


def resolve_options(
    options: ConvertOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> ConvertOptions:
    """Build the frozen :class:`ConvertOptions` for a call.

    *options* may already be a :class:`ConvertOptions`, a plain mapping of
    option names, or None.  Keyword *overrides* win over both.
    """
    if isinstance(options, ConvertOptions):
        if not overrides:
            return options
        base: dict[str, Any] = {
            name: getattr(options, name) for name in ConvertOptions.model_fields
        }
    else:
        base = dict(options or {})
    base.update(overrides)
    return ConvertOptions.model_validate(base)
