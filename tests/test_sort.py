"""Tests for sort state and sort links."""

import pytest

from fastapi_listview.core.errors import InvalidConfigError
from fastapi_listview.sort import Sort, SortDirection


class TestSortOrders:
    """Tests for requested and default orders."""

    def test_list_attributes_get_definitions(self) -> None:
        sort = Sort(attributes=["created_at"])
        assert sort.attributes["created_at"] == {
            "asc": {"created_at": SortDirection.ASC},
            "desc": {"created_at": SortDirection.DESC},
            "default": SortDirection.ASC,
            "label": "Created At",
        }

    def test_requested_order(self) -> None:
        sort = Sort(attributes=["id", "username"], params="-id")
        assert sort.get_attribute_orders() == {"id": SortDirection.DESC}
        assert sort.get_attribute_order("id") is SortDirection.DESC
        assert sort.get_attribute_order("username") is None

    def test_single_sort_keeps_first_attribute(self) -> None:
        sort = Sort(attributes=["id", "username"], params="id,-username")
        assert sort.get_attribute_orders() == {"id": SortDirection.ASC}

    def test_multi_sort_keeps_all_attributes(self) -> None:
        sort = Sort(attributes=["id", "username"], params="id,-username").with_multi_sort()
        assert sort.get_attribute_orders() == {
            "id": SortDirection.ASC,
            "username": SortDirection.DESC,
        }

    def test_unknown_params_are_ignored(self) -> None:
        assert Sort(attributes=["id"], params="bogus").get_attribute_orders() == {}

    def test_default_order(self) -> None:
        sort = Sort(attributes=["id"], default_order={"id": "desc"})
        assert sort.get_orders() == {"id": SortDirection.DESC}
        assert sort.with_params({"sort": "id"}).get_orders() == {"id": SortDirection.ASC}
        assert sort.with_default_order({"id": "asc"}).get_orders() == {"id": SortDirection.ASC}

    def test_column_definitions(self) -> None:
        sort = Sort(
            attributes={
                "name": {
                    "asc": {"last_name": "asc", "first_name": "asc"},
                    "desc": {"last_name": "desc", "first_name": "desc"},
                    "label": "Full name",
                }
            },
            params="-name",
        )
        assert sort.get_orders() == {
            "last_name": SortDirection.DESC,
            "first_name": SortDirection.DESC,
        }
        assert sort.attributes["name"]["label"] == "Full name"

    def test_with_params_reads_sort_param(self) -> None:
        sort = Sort(attributes=["id"], sort_param="order")
        assert sort.with_params({"order": "-id"}).params == "-id"
        assert sort.with_params({"sort": "-id"}).params == ""
        assert sort.params == ""

    def test_custom_separator(self) -> None:
        sort = Sort(attributes=["a", "b"], params="a;-b", separator=";", enable_multi_sort=True)
        assert sort.get_attribute_orders() == {"a": SortDirection.ASC, "b": SortDirection.DESC}
        assert sort.create_sort_param("a") == "-a;-b"


class TestSortParam:
    """Tests for the toggled sort param used in links."""

    def test_toggles_current_direction(self) -> None:
        assert Sort(attributes=["id"], params="id").create_sort_param("id") == "-id"
        assert Sort(attributes=["id"], params="-id").create_sort_param("id") == "id"

    def test_uses_attribute_default_direction(self) -> None:
        sort = Sort(attributes={"created_at": {"default": "desc"}})
        assert sort.create_sort_param("created_at") == "-created_at"

    def test_multi_sort_prepends_attribute(self) -> None:
        sort = Sort(attributes=["id", "username"], params="id", enable_multi_sort=True)
        assert sort.create_sort_param("username") == "username,id"

    def test_multi_sort_toggles_in_place(self) -> None:
        sort = Sort(attributes=["id", "username"], params="id,-username", enable_multi_sort=True)
        assert sort.create_sort_param("id") == "-id,-username"

    def test_unknown_attribute(self) -> None:
        with pytest.raises(InvalidConfigError, match='Unknown sort attribute: "bogus".'):
            Sort(attributes=["id"]).create_sort_param("bogus")


class TestSortLink:
    """Tests for sort anchors."""

    def test_link_for_current_sort(self) -> None:
        sort = Sort(attributes=["id", "username"], params="-id")
        assert sort.link("id", url_path="/items") == (
            '<a class="desc" href="/items?sort=id" data-sort="id">Id</a>'
        )

    def test_link_for_other_attribute(self) -> None:
        sort = Sort(attributes=["id", "username"], params="-id")
        assert sort.link("username", url_path="/items") == (
            '<a href="/items?sort=username" data-sort="username">Username</a>'
        )

    def test_link_keeps_query_params(self) -> None:
        sort = Sort(attributes=["id"])
        assert sort.link("id", query_params={"page": "2"}) == (
            '<a href="?page=2&amp;sort=id" data-sort="id">Id</a>'
        )

    def test_link_label_options(self) -> None:
        sort = Sort(attributes=["id"])
        assert sort.link("id", options={"label": "<i>ID</i>", "encode": False}) == (
            '<a href="?sort=id" data-sort="id"><i>ID</i></a>'
        )
        assert sort.link("id", options={"label": "<i>ID</i>"}) == (
            '<a href="?sort=id" data-sort="id">&lt;i&gt;ID&lt;/i&gt;</a>'
        )
