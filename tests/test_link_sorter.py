"""Tests for the sort links widget."""

import pytest

from fastapi_listview.core.errors import InvalidConfigError
from fastapi_listview.sort import Sort
from fastapi_listview.widgets import LinkSorter


@pytest.fixture
def sort() -> Sort:
    return Sort(attributes=["id", "username"], params="username")


class TestLinkSorter:
    def test_render(self, sort: Sort) -> None:
        assert LinkSorter(sort=sort).render() == (
            '<ul class="sorter">\n'
            '<li><a href="?sort=id" data-sort="id">Id</a></li>\n'
            '<li><a class="asc" href="?sort=-username" data-sort="-username">Username</a></li>\n'
            "</ul>"
        )

    def test_bulma_buttons(self, sort: Sort) -> None:
        html = LinkSorter(sort=sort, framework_css="bulma").render()
        assert '<a class="button is-small" href="?sort=id" data-sort="id">Id</a>' in html
        assert 'class="button is-small asc" href="?sort=-username"' in html

    def test_attribute_subset(self, sort: Sort) -> None:
        html = LinkSorter(sort=sort).with_attributes(["username"]).render()
        assert "data-sort=\"id\"" not in html
        assert "Username" in html
        assert LinkSorter(sort=sort).with_attributes(["nope"]).render() == ""

    def test_options_and_link_options(self, sort: Sort) -> None:
        sorter = (
            LinkSorter(sort=sort)
            .with_options({"tag": "div", "class": "sorts"})
            .with_link_options({"class": "sort-link"})
            .with_url_path("/items")
            .with_request_query_params({"page": "2"})
        )
        assert sorter.render() == (
            '<div class="sorts">\n'
            '<li><a class="sort-link" href="/items?page=2&amp;sort=id" data-sort="id">Id</a></li>\n'
            '<li><a class="sort-link asc" href="/items?page=2&amp;sort=-username" '
            'data-sort="-username">Username</a></li>\n'
            "</div>"
        )

    def test_sort_is_required(self) -> None:
        with pytest.raises(InvalidConfigError, match='The "sort" property must be set.'):
            LinkSorter().render()
