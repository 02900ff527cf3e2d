"""Shared fixtures for list view tests."""

from typing import Any

import pytest

from fastapi_listview.config import get_settings
from fastapi_listview.providers import ArrayDataProvider

SETTINGS_ENV = (
    "LISTVIEW_PAGE_SIZE",
    "LISTVIEW_FRAMEWORK_CSS",
    "LISTVIEW_MAX_BUTTON_COUNT",
    "LISTVIEW_TEMPLATES_PATH",
)


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch: pytest.MonkeyPatch) -> Any:
    """Run every test against default settings."""
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def make_rows(count: int = 9) -> list[dict[str, Any]]:
    return [
        {"id": number, "username": f"tests {number}", "total": number * 10}
        for number in range(1, count + 1)
    ]


@pytest.fixture
def rows() -> list[dict[str, Any]]:
    return make_rows()


@pytest.fixture
def provider(rows: list[dict[str, Any]]) -> ArrayDataProvider:
    return ArrayDataProvider(rows)


@pytest.fixture
def empty_provider() -> ArrayDataProvider:
    return ArrayDataProvider([])
