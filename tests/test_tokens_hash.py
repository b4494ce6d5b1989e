"""Tests for token estimation and the content hash."""

from __future__ import annotations

import re

import pydantic
import pytest

from markdown_for_agents import TokenCounter, TokenEstimate, content_hash, estimate_tokens
from markdown_for_agents.tokens import count_tokens

# ---------------------------------------------------------------------------
# estimate_tokens
# ---------------------------------------------------------------------------

class TestEstimateTokens:
    def test_counts(self):
        result = estimate_tokens("Hello world, this is a test.")
        assert result == TokenEstimate(tokens=7, characters=28, words=6)

    def test_empty(self):
        assert estimate_tokens("") == TokenEstimate(tokens=0, characters=0, words=0)

    def test_whitespace_only(self):
        result = estimate_tokens("   \t\n  ")
        assert result.characters == 7
        assert result.words == 0
        assert result.tokens == 2

    def test_rounds_up(self):
        assert estimate_tokens("Hello").tokens == 2

    def test_counts_code_points(self):
        assert estimate_tokens("héllo wörld").characters == 11


class TestCountTokens:
    def test_default_heuristic(self):
        assert count_tokens("abcd") == estimate_tokens("abcd")

    def test_mapping_validated(self):
        result = count_tokens("x", lambda text: {"tokens": 3, "characters": 1, "words": 1})
        assert result == TokenEstimate(tokens=3, characters=1, words=1)

    def test_invalid_mapping_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            count_tokens("x", lambda text: {"tokens": -1})

    def test_protocol_check(self):
        assert isinstance(estimate_tokens, TokenCounter)
        assert not isinstance("not callable", TokenCounter)


# ---------------------------------------------------------------------------
# content_hash
# ---------------------------------------------------------------------------

class TestContentHash:
    def test_format(self):
        assert re.fullmatch(r"[0-9a-z]+-[0-9a-z]+", content_hash("# Hello\n"))

    def test_length_prefix(self):
        text = "x" * 100
        assert content_hash(text).split("-")[0] == "2s"

    def test_empty_is_offset_basis(self):
        length, digest = content_hash("").split("-")
        assert length == "0"
        assert int(digest, 36) == 0x811C9DC5

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("a", 0xE40C292C), ("foobar", 0xBF9CF968)],
    )
    def test_fnv1a_vectors(self, text, expected):
        assert int(content_hash(text).split("-")[1], 36) == expected

    def test_deterministic(self):
        assert content_hash("same text") == content_hash("same text")

    def test_sensitive_to_content(self):
        assert content_hash("abc") != content_hash("abd")
