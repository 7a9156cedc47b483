"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from searchpages.plugins import clear_plugins

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def sections_html() -> str:
    return _read_fixture("sections.html")


@pytest.fixture
def plain_html() -> str:
    return _read_fixture("plain.html")


@pytest.fixture(autouse=True)
def _reset_plugins():
    clear_plugins()
    yield
    clear_plugins()
