"""Inline rules: emphasis, code spans, links and images."""

from __future__ import annotations

import re
from collections.abc import Callable

from markdown_for_agents.rules.base import PASS, Rule, RuleContext, Signal
from markdown_for_agents.rules.util import attr, resolve_url, text_content

_WHITESPACE_RE = re.compile(r"\s+")


def _wrap(delimiter: Callable[[RuleContext], str]) -> Callable[[RuleContext], str | None]:
    """Build a replacement that surrounds the element's content with a delimiter."""

    def replacement(ctx: RuleContext) -> str | None:
        content = ctx.convert_children(ctx.node).strip()
        if not content:
            return None
        mark = delimiter(ctx)
        return f"{mark}{content}{mark}"

    return replacement


def _title_suffix(title: str) -> str:
    if not title:
        return ""
    escaped = title.replace('"', '\\"')
    return f' "{escaped}"'


def _code_span(ctx: RuleContext) -> str | Signal | None:
    if ctx.inside_pre:
        return PASS
    text = text_content(ctx.node).replace("\n", " ")
    if not text:
        return None
    delimiter = "``" if "`" in text else "`"
    if text.startswith("`") or text.endswith("`"):
        text = f" {text} "
    return f"{delimiter}{text}{delimiter}"


def _link(ctx: RuleContext) -> str | None:
    content = ctx.convert_children(ctx.node).strip()
    if not content:
        return None
    href = resolve_url(attr(ctx.node, "href").strip(), ctx.options.base_url)
    title = attr(ctx.node, "title").strip()

    if ctx.options.link_style == "referenced" and href:
        number = ctx.references.add(href, title)
        return f"[{content}][{number}]"
    return f"[{content}]({href}{_title_suffix(title)})"


def _image(ctx: RuleContext) -> str | None:
    src = attr(ctx.node, "src").strip()
    if not src:
        return None
    src = resolve_url(src, ctx.options.base_url)
    alt = _WHITESPACE_RE.sub(" ", attr(ctx.node, "alt")).strip()
    title = attr(ctx.node, "title").strip()
    return f"![{alt}]({src}{_title_suffix(title)})"


INLINE_RULES: tuple[Rule, ...] = (
    Rule(("strong", "b"), _wrap(lambda ctx: ctx.options.strong_delimiter)),
    Rule(("em", "i"), _wrap(lambda ctx: ctx.options.em_delimiter)),
    Rule(("del", "s", "strike"), _wrap(lambda ctx: "~~")),
    Rule("code", _code_span),
    Rule("a", _link),
    Rule("img", _image),
    Rule(("abbr", "mark"), lambda ctx: ctx.convert_children(ctx.node)),
    Rule("sub", _wrap(lambda ctx: "~")),
    Rule("sup", _wrap(lambda ctx: "^")),
)
