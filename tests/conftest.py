"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def article_html() -> str:
    return _read_fixture("article.html")


@pytest.fixture
def table_html() -> str:
    return _read_fixture("table.html")


@pytest.fixture
def nested_lists_html() -> str:
    return _read_fixture("nested_lists.html")


@pytest.fixture
def duplicated_html() -> str:
    return _read_fixture("duplicated.html")


@pytest.fixture
def article_path() -> Path:
    return FIXTURES_DIR / "article.html"
