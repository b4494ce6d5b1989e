"""Pydantic output schema for a conversion."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TokenEstimate(BaseModel):
    """Token, character and word counts for a piece of text."""

    model_config = ConfigDict(frozen=True)

    tokens: int = Field(0, ge=0)
    characters: int = Field(0, ge=0)
    words: int = Field(0, ge=0)


class ConvertResult(BaseModel):
    """Canonical output of :func:`markdown_for_agents.convert`."""

    model_config = ConfigDict(frozen=True)

    markdown: str
    token_estimate: TokenEstimate
    # Short non-cryptographic fingerprint, usable as an ETag / cache key
    content_hash: str
