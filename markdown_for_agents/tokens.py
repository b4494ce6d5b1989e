"""Token estimation for LLM context budgeting.

The default heuristic is ~4 characters per token, a reasonable approximation
for English text across most tokenizers.  Callers who need exact counts pass
their own counter as ``convert(..., token_counter=...)``::

    import tiktoken

    enc = tiktoken.get_encoding("cl100k_base")

    def count(text: str) -> dict:
        return {"tokens": len(enc.encode(text)), "characters": len(text),
                "words": len(text.split())}

    convert(html, token_counter=count)
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from markdown_for_agents.items import TokenEstimate

_CHARS_PER_TOKEN = 4


@runtime_checkable
class TokenCounter(Protocol):
    """Callable returning a :class:`TokenEstimate` (or an equivalent mapping)."""

    def __call__(self, text: str) -> TokenEstimate | Mapping[str, int]:
        ...


def estimate_tokens(text: str) -> TokenEstimate:
    """Estimate token, character and word counts for *text*."""
    characters = len(text)
    return TokenEstimate(
        tokens=math.ceil(characters / _CHARS_PER_TOKEN),
        characters=characters,
        words=len(text.split()),
    )


def count_tokens(text: str, counter: TokenCounter | None = None) -> TokenEstimate:
    """Run *counter* (or the default heuristic) on *text* and validate its result."""
    if counter is None:
        return estimate_tokens(text)
    result: Any = counter(text)
    if isinstance(result, TokenEstimate):
        return result
    return TokenEstimate.model_validate(result)
