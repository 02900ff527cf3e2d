"""Tests for the in-memory data provider."""

from typing import Any

import pytest

from fastapi_listview.pagination import Pagination
from fastapi_listview.providers import ArrayDataProvider, DataProviderBase
from fastapi_listview.sort import Sort

from .conftest import make_rows


class TestArrayDataProvider:
    """Tests for ArrayDataProvider."""

    def test_counts_and_keys(self, provider: ArrayDataProvider) -> None:
        assert provider.get_total_count() == 9
        assert provider.get_count() == 9
        assert provider.get_keys() == list(range(9))

    def test_keys_are_absolute_positions(self, rows: list[dict[str, Any]]) -> None:
        provider = ArrayDataProvider(rows, pagination=Pagination(page_size=4, current_page=3))
        assert provider.get_models() == [rows[8]]
        assert provider.get_keys() == [8]
        assert provider.get_pagination().page == 3
        assert provider.get_pagination().total_count == 9

    def test_key_attribute(self, rows: list[dict[str, Any]]) -> None:
        provider = ArrayDataProvider(rows, key="id")
        assert provider.get_keys() == list(range(1, 10))

    def test_key_callable(self, rows: list[dict[str, Any]]) -> None:
        provider = ArrayDataProvider(rows[:2], key=lambda model: f"row-{model['id']}")
        assert provider.get_keys() == ["row-1", "row-2"]

    def test_sort_descending(self, rows: list[dict[str, Any]]) -> None:
        provider = ArrayDataProvider(rows, sort=Sort(attributes=["id"], params="-id"))
        assert [model["id"] for model in provider.get_models()] == list(range(9, 0, -1))

    def test_sort_then_paginate(self, rows: list[dict[str, Any]]) -> None:
        provider = ArrayDataProvider(
            rows,
            sort=Sort(attributes=["id"], params="-id"),
            pagination=Pagination(page_size=4, current_page=2),
        )
        assert [model["id"] for model in provider.get_models()] == [5, 4, 3, 2]

    def test_multi_column_sort(self) -> None:
        data = [
            {"id": 1, "group": "b"},
            {"id": 2, "group": "a"},
            {"id": 3, "group": "a"},
            {"id": 4, "group": "b"},
        ]
        sort = Sort(attributes=["group", "id"], params="group,-id", enable_multi_sort=True)
        provider = ArrayDataProvider(data, sort=sort)
        assert [model["id"] for model in provider.get_models()] == [3, 2, 4, 1]

    def test_none_sorts_first(self) -> None:
        data = [{"v": 2}, {"v": None}, {"v": 1}, {"v": None}]
        provider = ArrayDataProvider(data, sort=Sort(attributes=["v"], params="v"))
        assert [model["v"] for model in provider.get_models()] == [None, None, 1, 2]

    def test_with_methods_return_copies(self, provider: ArrayDataProvider) -> None:
        assert provider.get_count() == 9
        paged = provider.with_pagination(Pagination(page_size=2))
        assert paged.get_count() == 2
        assert provider.get_count() == 9
        assert provider.with_all_data(make_rows(3)).get_total_count() == 3
        assert provider.get_total_count() == 9

    def test_source_data_is_not_reordered(self, rows: list[dict[str, Any]]) -> None:
        provider = ArrayDataProvider(rows, sort=Sort(attributes=["id"], params="-id"))
        provider.get_models()
        assert provider.all_data[0]["id"] == 1


class TestDataProviderBase:
    def test_prepare_methods_are_abstract(self) -> None:
        provider = DataProviderBase()
        with pytest.raises(NotImplementedError):
            provider.get_models()
        with pytest.raises(NotImplementedError):
            provider.get_total_count()
