"""YAML-based conversion profiles.

A profile file holds a ``default`` mapping of :class:`ConvertOptions` fields
and, optionally, named ``profiles`` that are merged over it::

    default:
      extract:
        strip_classes: ["/promo/", "hero-banner"]
      base_url: https://example.com

    profiles:
      docs:
        deduplicate: {min_length: 20}
        heading_style: setext

Extraction class/id patterns written as ``/.../`` are compiled as
case-insensitive regular expressions; any other string matches as a
substring.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

import yaml

from markdown_for_agents.options import ConvertOptions

logger = logging.getLogger(__name__)

_REGEX_LITERAL_RE = re.compile(r"^/(.+)/$")


def _compile_patterns(values: Any) -> Any:
    if not isinstance(values, list):
        return values
    patterns: list[Any] = []
    for value in values:
        m = _REGEX_LITERAL_RE.match(value) if isinstance(value, str) else None
        patterns.append(re.compile(m.group(1), re.IGNORECASE) if m else value)
    return patterns


def _prepare(settings: dict[str, Any]) -> dict[str, Any]:
    extract = settings.get("extract")
    if isinstance(extract, dict):
        extract = dict(extract)
        for key in ("strip_classes", "strip_ids"):
            if key in extract:
                extract[key] = _compile_patterns(extract[key])
        settings["extract"] = extract
    return settings


def load_profile(path: str | Path, name: str | None = None) -> ConvertOptions:
    """Load conversion options from the YAML file at *path*.

    With *name*, the named profile is merged over the ``default`` mapping.

    Raises:
        KeyError: *name* is not defined in the file.
        pydantic.ValidationError: The merged settings are not valid options.
    """
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    default = data.get("default", {}) if isinstance(data, dict) else {}
    profiles = data.get("profiles", {}) if isinstance(data, dict) else {}

    merged: dict[str, Any] = {}
    if isinstance(default, dict):
        merged.update(default)
    if name is not None:
        if not isinstance(profiles, dict) or not isinstance(profiles.get(name), dict):
            raise KeyError(f"profile {name!r} not found in {path}")
        merged.update(profiles[name])

    logger.debug("Loaded profile %s from %s: %s", name or "default", path, sorted(merged))
    return ConvertOptions.model_validate(_prepare(merged))
