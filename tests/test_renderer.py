"""Tests for markdown_for_agents.renderer."""

from __future__ import annotations

from markdown_for_agents import render

# ---------------------------------------------------------------------------
# Line endings and blank lines
# ---------------------------------------------------------------------------

class TestLineEndings:
    def test_crlf(self):
        assert render("line1\r\nline2\r\n") == "line1\nline2\n"

    def test_lone_cr(self):
        assert render("line1\rline2") == "line1\nline2\n"


class TestBlankLines:
    def test_whitespace_only_lines_emptied(self):
        assert render("a\n   \nb") == "a\n\nb\n"

    def test_tab_only_lines_emptied(self):
        assert render("a\n\t \t\nb") == "a\n\nb\n"

    def test_form_feed_and_vertical_tab_lines_emptied(self):
        assert render("a\n\n\x0c\n\nb") == "a\n\nb\n"
        assert render("a\n\n\x0b \n\nb") == "a\n\nb\n"

    def test_blank_runs_collapsed(self):
        assert render("a\n\n\n\nb") == "a\n\nb\n"

    def test_blank_runs_of_whitespace_lines_collapsed(self):
        assert render("a\n \n  \n\t\nb") == "a\n\nb\n"


# ---------------------------------------------------------------------------
# Trailing whitespace
# ---------------------------------------------------------------------------

class TestTrailingWhitespace:
    def test_single_trailing_space_trimmed(self):
        assert render("hello \nworld") == "hello\nworld\n"

    def test_hard_break_kept(self):
        assert render("line1  \nline2") == "line1  \nline2\n"

    def test_long_hard_break_normalised_to_two_spaces(self):
        assert render("hello   \nworld") == "hello  \nworld\n"

    def test_trailing_tab_trimmed(self):
        assert render("hello\t\nworld") == "hello\nworld\n"

    def test_whole_text_trimmed(self):
        assert render("\n\n  hello  \n\n") == "hello\n"

    def test_empty(self):
        assert render("") == "\n"

    def test_leading_code_indent_kept(self):
        assert render("\n\n    a = 1\n\n    b = 2\n") == "    a = 1\n\n    b = 2\n"

    def test_shallow_leading_indent_dropped(self):
        assert render("  hello\nworld") == "hello\nworld\n"

    def test_idempotent(self):
        raw = "\n\n# Title\n\n\n\nText  \nmore   \n\n - item \n"
        once = render(raw)
        assert render(once) == once
