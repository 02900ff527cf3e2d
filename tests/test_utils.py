"""Tests for query parsing, URL building and value lookup."""

from types import SimpleNamespace

from fastapi_listview.utils import (
    build_url,
    get_value,
    humanize,
    parse_query_params,
    parse_sort_param,
    public_fields,
    resolve_path,
)


class TestQueryParams:
    def test_parse_sort_param(self) -> None:
        assert parse_sort_param("-created, name,,-") == [
            {"field": "created", "direction": "desc"},
            {"field": "name", "direction": "asc"},
        ]

    def test_parse_sort_param_with_separator(self) -> None:
        assert parse_sort_param("a;-b", separator=";") == [
            {"field": "a", "direction": "asc"},
            {"field": "b", "direction": "desc"},
        ]

    def test_parse_query_params(self) -> None:
        parsed = parse_query_params({"page": "3", "per-page": "abc", "sort": "-id", "q": "x"})
        assert parsed == {"page": 3, "page_size": None}

    def test_parse_query_params_custom_names(self) -> None:
        parsed = parse_query_params({"p": "2", "size": "5"}, page_param="p", page_size_param="size")
        assert parsed["page"] == 2
        assert parsed["page_size"] == 5


class TestUrls:
    def test_resolve_path(self) -> None:
        assert resolve_path("/users/{id}/{missing}", {"id": 5}) == "/users/5/{missing}"
        assert resolve_path("/users/{id}") == "/users/{id}"

    def test_build_url_merges_query(self) -> None:
        assert build_url("/items?q=a&page=1", {"page": 2}) == "/items?q=a&page=2"

    def test_build_url_none_removes_param(self) -> None:
        assert build_url("/items?sort=id", {"sort": None}) == "/items"

    def test_build_url_sequence_values(self) -> None:
        assert build_url("/items", {"tag": ["a", "b"]}) == "/items?tag=a&tag=b"


class TestValues:
    def test_get_value_from_nested_mapping(self) -> None:
        model = {"author": {"name": "Ann"}}
        assert get_value(model, "author.name") == "Ann"
        assert get_value(model, "author.email", "n/a") == "n/a"

    def test_get_value_from_object(self) -> None:
        model = SimpleNamespace(author=SimpleNamespace(name="Ann"), editor=None)
        assert get_value(model, "author.name") == "Ann"
        assert get_value(model, "editor.name") is None
        assert get_value(model, "missing", 0) == 0

    def test_get_value_with_callable_or_none(self) -> None:
        assert get_value({"a": 2}, lambda model: model["a"] * 2) == 4
        assert get_value({"a": 2}, None, "x") == "x"

    def test_public_fields(self) -> None:
        assert public_fields({"id": 1, "name": "x"}) == ["id", "name"]
        assert public_fields(SimpleNamespace(a=1, _b=2)) == ["a"]
        assert public_fields(3) == []

    def test_humanize(self) -> None:
        assert humanize("created_at") == "Created At"
        assert humanize("createdAt") == "Created At"
        assert humanize("id") == "Id"
