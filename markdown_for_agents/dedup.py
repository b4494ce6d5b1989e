"""Section-aware removal of repeated Markdown blocks.

Pages often repeat the same content (mobile and desktop variants, "featured"
teasers that reappear in the full listing).  Blocks are paragraph-level units
separated by blank lines and are compared by a normalized fingerprint
(lower-cased, whitespace runs collapsed).

- A heading followed by a non-heading block forms a *section*; the pair is
  fingerprinted together, so a structural heading such as "### The situation"
  survives when it introduces different content in different places.  The
  content block's own fingerprint is registered too, so the same content
  later appearing alone (or under another heading) is still caught.
- A heading followed by another heading, or by nothing, is standalone and is
  always kept.
- Every other block is fingerprinted on its own.
- Fingerprints shorter than *min_length* are never deduplicated, which keeps
  separators such as ``---`` and short labels.
- The first occurrence wins.
"""

from __future__ import annotations

import logging
import re

from markdown_for_agents.renderer import trim_document

logger = logging.getLogger(__name__)

DEFAULT_MIN_LENGTH = 10

_BLOCK_SPLIT_RE = re.compile(r"\n{2,}")
_HEADING_RE = re.compile(r"^#{1,6}\s")
_WHITESPACE_RE = re.compile(r"\s+")


def fingerprint(text: str) -> str:
    """Return the dedup key for *text*."""
    return _WHITESPACE_RE.sub(" ", text.lower())


def _is_heading(block: str) -> bool:
    return bool(_HEADING_RE.match(block))


def deduplicate(markdown: str, min_length: int = DEFAULT_MIN_LENGTH) -> str:
    """Remove blocks of *markdown* that repeat an earlier block.

    Returns the kept blocks joined by blank lines, with one trailing newline.
    """
    blocks = _BLOCK_SPLIT_RE.split(markdown)
    seen: set[str] = set()
    kept: list[str] = []
    dropped = 0

    i = 0
    while i < len(blocks):
        current = blocks[i].strip()
        if not current:
            i += 1
            continue

        if _is_heading(current):
            j = i + 1
            while j < len(blocks) and not blocks[j].strip():
                j += 1
            following = blocks[j].strip() if j < len(blocks) else ""

            if not following or _is_heading(following):
                kept.append(blocks[i])
                i += 1
                continue

            section_fp = fingerprint(f"{current} {following}")
            if len(section_fp) >= min_length:
                if section_fp in seen:
                    dropped += 2
                    i = j + 1
                    continue
                seen.add(section_fp)

            content_fp = fingerprint(following)
            if len(content_fp) >= min_length:
                seen.add(content_fp)

            kept.extend((blocks[i], blocks[j]))
            i = j + 1
            continue

        block_fp = fingerprint(current)
        if len(block_fp) >= min_length:
            if block_fp in seen:
                dropped += 1
                i += 1
                continue
            seen.add(block_fp)
        kept.append(blocks[i])
        i += 1

    if dropped:
        logger.debug("deduplicate dropped %d of %d blocks", dropped, len(blocks))
    return trim_document("\n\n".join(kept))
