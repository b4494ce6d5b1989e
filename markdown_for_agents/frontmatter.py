"""YAML frontmatter serialization."""

from __future__ import annotations

from collections.abc import Mapping

import yaml

_PRIORITY_KEYS = ("title", "description", "image")


def serialize_frontmatter(meta: Mapping[str, str]) -> str:
    """Render *meta* as a ``---`` delimited YAML block.

    Keys are ordered ``title``, ``description``, ``image``, then the rest
    alphabetically.  Returns ``""`` for an empty mapping.
    """
    if not meta:
        return ""
    rest = sorted(k for k in meta if k not in _PRIORITY_KEYS)
    ordered = {k: str(meta[k]) for k in (*(k for k in _PRIORITY_KEYS if k in meta), *rest)}
    body = yaml.safe_dump(
        ordered,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        width=float("inf"),
    )
    return f"---\n{body}---\n"
