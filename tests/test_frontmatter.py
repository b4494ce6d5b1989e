"""Tests for markdown_for_agents.frontmatter."""

from __future__ import annotations

import yaml

from markdown_for_agents import serialize_frontmatter


def _body(block: str) -> str:
    assert block.startswith("---\n")
    assert block.endswith("---\n")
    return block[len("---\n"):-len("---\n")]


# ---------------------------------------------------------------------------
# serialize_frontmatter
# ---------------------------------------------------------------------------

class TestSerializeFrontmatter:
    def test_empty(self):
        assert serialize_frontmatter({}) == ""

    def test_single_field(self):
        assert serialize_frontmatter({"title": "Hello"}) == "---\ntitle: Hello\n---\n"

    def test_priority_order(self):
        block = serialize_frontmatter(
            {"image": "https://example.com/img.png", "title": "Title", "description": "Desc"},
        )
        keys = [line.split(":", 1)[0] for line in _body(block).splitlines()]
        assert keys == ["title", "description", "image"]

    def test_remaining_keys_sorted(self):
        block = serialize_frontmatter({"zebra": "z", "title": "T", "alpha": "a"})
        keys = [line.split(":", 1)[0] for line in _body(block).splitlines()]
        assert keys == ["title", "alpha", "zebra"]

    def test_simple_values_unquoted(self):
        block = serialize_frontmatter({"title": "Simple Title"})
        assert "title: Simple Title\n" in block
        assert '"' not in block
        assert "'" not in block

    def test_special_values_round_trip(self):
        meta = {
            "title": "Key: Value",
            "description": "Color #fff",
            "image": 'Say "hello"',
            "lead": " leading",
            "trail": "trailing ",
            "path": "path\\to",
            "number": "42",
            "flag": "yes",
        }
        assert yaml.safe_load(_body(serialize_frontmatter(meta))) == meta

    def test_unicode_kept(self):
        block = serialize_frontmatter({"title": "Café déjà vu"})
        assert "Café déjà vu" in block

    def test_long_values_not_wrapped(self):
        title = " ".join(["word"] * 60)
        block = serialize_frontmatter({"title": title})
        assert len(_body(block).splitlines()) == 1
