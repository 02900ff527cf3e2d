"""Pagination links widget."""

from __future__ import annotations

from typing import Any, Mapping, NamedTuple

from pydantic import Field

from fastapi_listview.config import get_settings
from fastapi_listview.core.errors import InvalidConfigError
from fastapi_listview.pagination import Pagination

from .base import FrameworkCss, Widget, check_framework_css


class PageButton(NamedTuple):
    label: str
    page: int
    kind: str
    disabled: bool
    active: bool


class LinkPager(Widget):
    """Render page navigation for a Pagination in Bootstrap or Bulma markup.

    At most ``max_button_count`` page buttons are shown, centred on the
    current page. Labels are inserted as-is, so entities such as ``&laquo;``
    may be used. Set a label to None to drop that button.
    """

    pagination: Pagination | None = None
    request_attributes: dict[str, Any] = Field(default_factory=dict)
    request_query_params: dict[str, Any] = Field(default_factory=dict)
    url_path: str = ""
    max_button_count: int = Field(default_factory=lambda: get_settings().max_button_count)
    hide_on_single_page: bool = True
    first_page_label: str | None = None
    last_page_label: str | None = None
    prev_page_label: str | None = "Previous"
    next_page_label: str | None = "Next"
    disable_current_page_button: bool = False
    options: dict[str, Any] = Field(default_factory=dict)

    def with_pagination(self, pagination: Pagination) -> LinkPager:
        return self._with(pagination=pagination)

    def with_request_attributes(self, request_attributes: Mapping[str, Any]) -> LinkPager:
        return self._with(request_attributes=dict(request_attributes))

    def with_request_query_params(self, request_query_params: Mapping[str, Any]) -> LinkPager:
        return self._with(request_query_params=dict(request_query_params))

    def with_url_path(self, url_path: str) -> LinkPager:
        return self._with(url_path=url_path)

    def with_max_button_count(self, max_button_count: int) -> LinkPager:
        return self._with(max_button_count=max_button_count)

    def with_hide_on_single_page(self, hide_on_single_page: bool) -> LinkPager:
        return self._with(hide_on_single_page=hide_on_single_page)

    def with_first_page_label(self, label: str | None) -> LinkPager:
        return self._with(first_page_label=label)

    def with_last_page_label(self, label: str | None) -> LinkPager:
        return self._with(last_page_label=label)

    def with_prev_page_label(self, label: str | None) -> LinkPager:
        return self._with(prev_page_label=label)

    def with_next_page_label(self, label: str | None) -> LinkPager:
        return self._with(next_page_label=label)

    def with_disable_current_page_button(self, disable: bool = True) -> LinkPager:
        return self._with(disable_current_page_button=disable)

    def with_options(self, options: Mapping[str, Any]) -> LinkPager:
        return self._with(options=dict(options))

    def get_page_range(self) -> range:
        """Return the 1-based page numbers that get a button."""
        pagination = self._require_pagination()
        page_count = pagination.total_pages
        current = pagination.page
        button_count = max(self.max_button_count, 1)
        begin = max(1, current - button_count // 2)
        end = begin + button_count - 1
        if end > page_count:
            end = page_count
            begin = max(1, end - button_count + 1)
        return range(begin, end + 1)

    def render(self) -> str:
        pagination = self._require_pagination()
        framework_css = check_framework_css(self.framework_css)
        page_count = pagination.total_pages
        if page_count < 1 or (page_count < 2 and self.hide_on_single_page):
            return ""
        buttons = self._buttons(pagination)
        if framework_css is FrameworkCss.BULMA:
            return self._render_bulma(pagination, buttons)
        return self._render_bootstrap(pagination, buttons)

    def _require_pagination(self) -> Pagination:
        if self.pagination is None:
            raise InvalidConfigError('The "pagination" property must be set.')
        return self.pagination

    def _buttons(self, pagination: Pagination) -> list[PageButton]:
        current = pagination.page
        page_count = pagination.total_pages
        buttons: list[PageButton] = []
        if self.first_page_label is not None:
            buttons.append(PageButton(self.first_page_label, 1, "first", current <= 1, False))
        if self.prev_page_label is not None:
            buttons.append(
                PageButton(self.prev_page_label, max(current - 1, 1), "prev", current <= 1, False)
            )
        for page in self.get_page_range():
            active = page == current
            buttons.append(
                PageButton(str(page), page, "page", active and self.disable_current_page_button, active)
            )
        if self.next_page_label is not None:
            buttons.append(
                PageButton(
                    self.next_page_label,
                    min(current + 1, page_count),
                    "next",
                    current >= page_count,
                    False,
                )
            )
        if self.last_page_label is not None:
            buttons.append(
                PageButton(self.last_page_label, page_count, "last", current >= page_count, False)
            )
        return buttons

    def _url(self, pagination: Pagination, page: int) -> str:
        return pagination.create_url(
            page,
            url_path=self.url_path,
            query_params=self.request_query_params,
            request_attributes=self.request_attributes,
        )

    def _render_bootstrap(self, pagination: Pagination, buttons: list[PageButton]) -> str:
        html = self.html
        items: list[str] = []
        for button in buttons:
            item_options: dict[str, Any] = {"class": "page-item"}
            link_options: dict[str, Any] = {
                "class": "page-link",
                "href": self._url(pagination, button.page),
            }
            if button.active:
                item_options = html.add_css_class(item_options, "active")
                item_options["aria-current"] = "page"
            if button.disabled:
                item_options = html.add_css_class(item_options, "disabled")
                link_options["tabindex"] = "-1"
                link_options["aria-disabled"] = "true"
            items.append(html.tag("li", html.tag("a", button.label, link_options), item_options))
        content = html.tag("ul", "\n" + "\n".join(items) + "\n", {"class": "pagination"})
        nav_options = {"aria-label": "Page navigation", **self.options}
        return html.tag("nav", content, nav_options)

    def _render_bulma(self, pagination: Pagination, buttons: list[PageButton]) -> str:
        html = self.html
        edges: list[str] = []
        items: list[str] = []
        for button in buttons:
            link_options: dict[str, Any] = {"href": self._url(pagination, button.page)}
            if button.kind == "prev":
                link_options["class"] = "pagination-previous"
            elif button.kind == "next":
                link_options["class"] = "pagination-next"
            else:
                link_options["class"] = "pagination-link"
                link_options["aria-label"] = f"Goto page {button.page}"
            if button.active:
                link_options = html.add_css_class(link_options, "is-current")
                link_options["aria-label"] = f"Page {button.page}"
                link_options["aria-current"] = "page"
            if button.disabled:
                link_options = html.add_css_class(link_options, "is-disabled")
                link_options["aria-disabled"] = "true"
            link = html.tag("a", button.label, link_options)
            if button.kind in ("prev", "next"):
                edges.append(link)
            else:
                items.append(html.tag("li", link))
        page_list = html.tag("ul", "\n" + "\n".join(items) + "\n", {"class": "pagination-list"})
        nav_options = {
            "class": "pagination is-centered",
            "role": "navigation",
            "aria-label": "pagination",
            **self.options,
        }
        return html.tag("nav", "\n" + "\n".join([*edges, page_list]) + "\n", nav_options)
