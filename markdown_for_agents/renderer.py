"""Normalise the walker's raw Markdown into clean, presentable Markdown."""

from __future__ import annotations

import re

_LINE_ENDING_RE = re.compile(r"\r\n?")
_BLANKISH_LINE_RE = re.compile(r"^[^\S\n]+$", re.MULTILINE)
_EXCESSIVE_BLANK_LINES_RE = re.compile(r"\n{3,}")
_TRAILING_WHITESPACE_RE = re.compile(r"\s+$")
_HARD_BREAK_RE = re.compile(r"\S {2,}$")
_CODE_INDENT = "    "


def _trim_line(line: str) -> str:
    # A line ending in two or more spaces is a hard break: keep exactly two
    if _HARD_BREAK_RE.search(line):
        return _TRAILING_WHITESPACE_RE.sub("", line) + "  "
    return line.rstrip()


def trim_document(md: str) -> str:
    """Trim *md* and append a single ``\\n``.

    Leading blank lines and trailing whitespace go.  A first line indented by
    four spaces opens an indented code block and keeps its indent; shallower
    leading indentation is dropped.
    """
    md = md.strip("\n")
    if not md.startswith(_CODE_INDENT):
        md = md.lstrip()
    return md.rstrip() + "\n"


def render(raw: str) -> str:
    """Return *raw* normalised, with exactly one trailing newline.

    Steps, in order:
    1. ``\\r\\n`` and lone ``\\r`` become ``\\n``.
    2. Whitespace-only lines become empty lines.
    3. Runs of three or more newlines collapse to two.
    4. Trailing whitespace is trimmed from each line, except that a hard
       line break keeps exactly two trailing spaces.
    5. The whole text is trimmed (see :func:`trim_document`) and a single
       ``\\n`` appended.
    """
    md = _LINE_ENDING_RE.sub("\n", raw)
    md = _BLANKISH_LINE_RE.sub("", md)
    md = _EXCESSIVE_BLANK_LINES_RE.sub("\n\n", md)
    md = "\n".join(_trim_line(line) for line in md.split("\n"))
    return trim_document(md)
