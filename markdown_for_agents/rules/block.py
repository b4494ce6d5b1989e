"""Block-level rules: headings, paragraphs, quotes, code blocks, rules, breaks."""

from __future__ import annotations

import re

from bs4 import Tag

from markdown_for_agents.rules.base import Rule, RuleContext
from markdown_for_agents.rules.util import attr, text_content

_HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")
_LANG_CLASS_RE = re.compile(r"language-(\S+)")
_BLANK_RUN_RE = re.compile(r"\n{3,}")


def _heading(ctx: RuleContext) -> str | None:
    level = int(ctx.node.name[1])
    content = ctx.convert_children(ctx.node).strip()
    if not content:
        return None
    if ctx.options.heading_style == "setext" and level <= 2:
        underline = ("=" if level == 1 else "-") * len(content)
        return f"\n\n{content}\n{underline}\n\n"
    return f"\n\n{'#' * level} {content}\n\n"


def _paragraph(ctx: RuleContext) -> str | None:
    content = ctx.convert_children(ctx.node).strip()
    if not content:
        return None
    return f"\n\n{content}\n\n"


def _blockquote(ctx: RuleContext) -> str | None:
    content = ctx.convert_children(ctx.node).strip()
    if not content:
        return None
    content = _BLANK_RUN_RE.sub("\n\n", content)
    quoted = "\n".join(f"> {line}" for line in content.split("\n"))
    return f"\n\n{quoted}\n\n"


def _code_language(pre: Tag) -> str:
    """Language hint from ``class="language-X"`` on a direct ``<code>`` child."""
    code = next(
        (c for c in pre.children if isinstance(c, Tag) and c.name == "code"),
        None,
    )
    if code is None:
        return ""
    m = _LANG_CLASS_RE.search(attr(code, "class"))
    return m.group(1) if m else ""


def _code_block(ctx: RuleContext) -> str:
    text = text_content(ctx.node).rstrip("\n")

    if ctx.options.code_block_style == "indented":
        indented = "\n".join(f"    {line}" if line else "" for line in text.split("\n"))
        return f"\n\n{indented}\n\n"

    char = ctx.options.fence_char
    # The fence must be longer than any run of the fence character in the code
    longest = max((len(run) for run in re.findall(re.escape(char) + "+", text)), default=0)
    fence = char * max(3, longest + 1)
    return f"\n\n{fence}{_code_language(ctx.node)}\n{text}\n{fence}\n\n"


def _drop(ctx: RuleContext) -> None:
    return None


BLOCK_RULES: tuple[Rule, ...] = (
    Rule(_HEADING_TAGS, _heading),
    Rule("p", _paragraph),
    Rule("blockquote", _blockquote),
    Rule("pre", _code_block),
    Rule("hr", lambda ctx: "\n\n---\n\n"),
    Rule("br", lambda ctx: "  \n"),
    Rule(("script", "style", "noscript", "template"), _drop),
    # Document metadata never appears as visible content
    Rule(("head", "title", "meta", "link", "base"), _drop),
)
