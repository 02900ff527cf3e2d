"""Sort links widget."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from pydantic import Field

from fastapi_listview.core.errors import InvalidConfigError
from fastapi_listview.sort import Sort

from .base import FrameworkCss, Widget, check_framework_css


class LinkSorter(Widget):
    """Render one sort link per sortable attribute as a list."""

    sort: Sort | None = None
    attributes: list[str] | None = None
    options: dict[str, Any] = Field(default_factory=lambda: {"class": "sorter"})
    link_options: dict[str, Any] = Field(default_factory=dict)
    request_attributes: dict[str, Any] = Field(default_factory=dict)
    request_query_params: dict[str, Any] = Field(default_factory=dict)
    url_path: str = ""

    def with_sort(self, sort: Sort) -> LinkSorter:
        return self._with(sort=sort)

    def with_attributes(self, attributes: Sequence[str] | None) -> LinkSorter:
        return self._with(attributes=None if attributes is None else list(attributes))

    def with_options(self, options: Mapping[str, Any]) -> LinkSorter:
        return self._with(options=dict(options))

    def with_link_options(self, link_options: Mapping[str, Any]) -> LinkSorter:
        return self._with(link_options=dict(link_options))

    def with_request_attributes(self, request_attributes: Mapping[str, Any]) -> LinkSorter:
        return self._with(request_attributes=dict(request_attributes))

    def with_request_query_params(self, request_query_params: Mapping[str, Any]) -> LinkSorter:
        return self._with(request_query_params=dict(request_query_params))

    def with_url_path(self, url_path: str) -> LinkSorter:
        return self._with(url_path=url_path)

    def render(self) -> str:
        if self.sort is None:
            raise InvalidConfigError('The "sort" property must be set.')
        framework_css = check_framework_css(self.framework_css)
        sort = self.sort
        names = self.attributes if self.attributes is not None else list(sort.attributes)
        names = [name for name in names if sort.has_attribute(name)]
        if not names:
            return ""

        link_options = dict(self.link_options)
        if framework_css is FrameworkCss.BULMA:
            link_options = self.html.add_css_class(link_options, "button is-small")

        items = [
            self.html.tag(
                "li",
                sort.link(
                    name,
                    html=self.html,
                    url_path=self.url_path,
                    query_params=self.request_query_params,
                    request_attributes=self.request_attributes,
                    options=link_options,
                ),
            )
            for name in names
        ]
        options = dict(self.options)
        tag = options.pop("tag", "ul")
        return self.html.tag(tag, "\n" + "\n".join(items) + "\n", options)
