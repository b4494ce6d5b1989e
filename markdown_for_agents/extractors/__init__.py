"""Extraction sub-package: boilerplate pruning and head metadata."""

from .main_content import extract_content
from .metadata import extract_metadata
from .selectors import (
    DEFAULT_STRIP_CLASSES,
    DEFAULT_STRIP_IDS,
    DEFAULT_STRIP_ROLES,
    DEFAULT_STRIP_TAGS,
)

__all__ = [
    "DEFAULT_STRIP_CLASSES",
    "DEFAULT_STRIP_IDS",
    "DEFAULT_STRIP_ROLES",
    "DEFAULT_STRIP_TAGS",
    "extract_content",
    "extract_metadata",
]
