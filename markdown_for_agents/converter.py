"""markdown_for_agents.converter - the HTML to Markdown pipeline.

Stages, strictly in order::

    parse -> extract (optional) -> walk -> render -> deduplicate (optional)
          -> frontmatter (optional) -> token estimate + content hash

Basic usage::

    from markdown_for_agents import convert

    result = convert("<h1>Hello</h1><p>World</p>")
    result.markdown             # "# Hello\\n\\nWorld\\n"
    result.token_estimate.tokens
    result.content_hash

Content pages::

    result = convert(html, extract=True, deduplicate=True,
                     base_url="https://example.com")
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from markdown_for_agents.dedup import deduplicate
from markdown_for_agents.extractors.main_content import extract_content
from markdown_for_agents.extractors.metadata import extract_metadata
from markdown_for_agents.frontmatter import serialize_frontmatter
from markdown_for_agents.hashing import content_hash
from markdown_for_agents.items import ConvertResult
from markdown_for_agents.options import ConvertOptions, resolve_options
from markdown_for_agents.parser import parse_html
from markdown_for_agents.renderer import render
from markdown_for_agents.rules import merge_rules
from markdown_for_agents.tokens import count_tokens
from markdown_for_agents.walker import WalkerState, walk

logger = logging.getLogger(__name__)


def convert(
    html: str,
    options: ConvertOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> ConvertResult:
    """Convert *html* to Markdown.

    Args:
        html:      Raw HTML.  Malformed markup is tolerated by the parser.
        options:   A :class:`ConvertOptions`, or a mapping of option names.
        overrides: Individual options as keywords; they win over *options*.

    Returns:
        A :class:`ConvertResult` with the Markdown, its token estimate and a
        short content hash.

    Raises:
        pydantic.ValidationError: An option has an invalid value.
        NestingDepthError:        Element nesting exceeds ``max_depth``.

    Exceptions raised by custom rules or a custom token counter propagate
    unchanged.
    """
    opts = resolve_options(options, **overrides)
    document = parse_html(html)

    # Read the head before extraction prunes anything
    metadata = extract_metadata(document) if opts.frontmatter is not False else {}

    extract_opts = opts.extract_options
    if extract_opts is not None:
        extract_content(document, extract_opts)

    state = WalkerState(options=opts, rules=tuple(merge_rules(opts.rules)))
    raw = walk(document, state)
    if len(state.references):
        raw = f"{raw}\n\n{state.references.render()}\n"

    markdown = render(raw)

    min_length = opts.dedup_min_length
    if min_length is not None:
        markdown = deduplicate(markdown, min_length)

    if opts.frontmatter is not False:
        if isinstance(opts.frontmatter, dict):
            metadata.update(opts.frontmatter)
        header = serialize_frontmatter(metadata)
        if header:
            markdown = f"{header}\n{markdown}" if markdown.strip() else header

    token_estimate = count_tokens(markdown, opts.token_counter)
    logger.debug(
        "convert: %d chars html -> %d chars markdown (~%d tokens)",
        len(html or ""),
        len(markdown),
        token_estimate.tokens,
    )
    return ConvertResult(
        markdown=markdown,
        token_estimate=token_estimate,
        content_hash=content_hash(markdown),
    )
