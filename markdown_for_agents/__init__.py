"""markdown_for_agents - convert HTML into compact, token-efficient Markdown.

Quick usage::

    from markdown_for_agents import convert

    result = convert("<h1>Hello</h1><p>World</p>")
    print(result.markdown)               # "# Hello\\n\\nWorld\\n"
    print(result.token_estimate.tokens)

Content pages (strip navigation/ads, drop repeated blocks)::

    result = convert(html, extract=True, deduplicate=True, base_url=url)

Custom rules::

    from markdown_for_agents import PASS, convert, create_rule

    callout = create_rule(
        "aside",
        lambda ctx: f"\\n\\n> {ctx.convert_children(ctx.node).strip()}\\n\\n",
    )
    convert(html, rules=[callout])
"""

from markdown_for_agents.converter import convert
from markdown_for_agents.dedup import deduplicate
from markdown_for_agents.extractors import extract_content, extract_metadata
from markdown_for_agents.frontmatter import serialize_frontmatter
from markdown_for_agents.hashing import content_hash
from markdown_for_agents.items import ConvertResult, TokenEstimate
from markdown_for_agents.options import ConvertOptions, DeduplicateOptions, ExtractOptions
from markdown_for_agents.parser import parse_html
from markdown_for_agents.profiles import load_profile
from markdown_for_agents.renderer import render
from markdown_for_agents.rules import (
    PASS,
    Rule,
    RuleContext,
    create_rule,
    get_default_rules,
    merge_rules,
)
from markdown_for_agents.tokens import TokenCounter, estimate_tokens
from markdown_for_agents.walker import ConversionError, NestingDepthError, WalkerState, walk

__version__ = "0.1.0"
__all__ = [
    "PASS",
    "ConversionError",
    "ConvertOptions",
    "ConvertResult",
    "DeduplicateOptions",
    "ExtractOptions",
    "NestingDepthError",
    "Rule",
    "RuleContext",
    "TokenCounter",
    "TokenEstimate",
    "WalkerState",
    "content_hash",
    "convert",
    "create_rule",
    "deduplicate",
    "estimate_tokens",
    "extract_content",
    "extract_metadata",
    "get_default_rules",
    "load_profile",
    "merge_rules",
    "parse_html",
    "render",
    "serialize_frontmatter",
    "walk",
]
