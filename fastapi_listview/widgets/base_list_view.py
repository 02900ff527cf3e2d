"""Base class for widgets displaying data from a data provider."""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, ClassVar, Mapping

from pydantic import Field

from fastapi_listview.core.errors import InvalidConfigError
from fastapi_listview.core.translator import MessageTranslator
from fastapi_listview.pagination import Pagination
from fastapi_listview.providers.base import DataProviderBase
from fastapi_listview.sort import Sort
from fastapi_listview.utils.query_params import parse_query_params

from .base import FrameworkCss, Widget, check_framework_css
from .link_pager import LinkPager
from .link_sorter import LinkSorter

logger = logging.getLogger(__name__)

LAYOUT_TOKEN = re.compile(r"{\w+}")
TRANSLATION_CATEGORY = "fastapi-listview"
DEFAULT_SUMMARY = (
    "Showing <b>{begin, number}-{end, number}</b> of <b>{totalCount, number}</b> "
    "{totalCount, plural, one{item} other{items}}"
)


class BaseListView(Widget):
    """Base class for ListView and GridView.

    Renders the ``layout`` template, replacing these tokens with sections:

    - ``{items}``: the items, see ``render_items()``.
    - ``{summary}``: the summary, see ``render_summary()``.
    - ``{sorter}``: sort links, see ``render_sorter()``.
    - ``{pager}``: page links, see ``render_pager()``.

    Unknown tokens are replaced with an empty string. When the current page
    has no items and ``show_on_empty`` is off, only the empty text is rendered.

    ``summary`` may use ``{begin}``, ``{end}``, ``{count}``, ``{totalCount}``,
    ``{page}`` and ``{pageCount}``; set it to an empty string to hide it.
    """

    BOOTSTRAP: ClassVar[str] = FrameworkCss.BOOTSTRAP.value
    BULMA: ClassVar[str] = FrameworkCss.BULMA.value

    data_provider: DataProviderBase | None = None
    current_page: int = 1
    page_size: int | None = None
    empty_text: str = "No results found."
    empty_text_options: dict[str, Any] = Field(default_factory=lambda: {"class": "empty"})
    enclose_by_container: bool = False
    enclose_by_container_options: dict[str, Any] = Field(default_factory=dict)
    layout: str = "{items}\n{summary}\n{pager}"
    options: dict[str, Any] = Field(default_factory=dict)
    pager_options: dict[str, Any] = Field(default_factory=dict)
    sorter_options: dict[str, Any] = Field(default_factory=dict)
    request_attributes: dict[str, Any] = Field(default_factory=dict)
    request_query_params: dict[str, Any] = Field(default_factory=dict)
    url_path: str = ""
    show_on_empty: bool = False
    summary: str = DEFAULT_SUMMARY
    summary_options: dict[str, Any] = Field(default_factory=lambda: {"class": "summary"})
    translator: Any = Field(default_factory=MessageTranslator)

    def with_data_provider(self, data_provider: DataProviderBase) -> BaseListView:
        return self._with(data_provider=data_provider)

    def with_current_page(self, current_page: int) -> BaseListView:
        return self._with(current_page=current_page)

    def with_page_size(self, page_size: int | None) -> BaseListView:
        return self._with(page_size=page_size)

    def with_empty_text(self, empty_text: str) -> BaseListView:
        return self._with(empty_text=empty_text)

    def with_empty_text_options(self, empty_text_options: Mapping[str, Any]) -> BaseListView:
        return self._with(empty_text_options=dict(empty_text_options))

    def with_enclose_by_container(self, enabled: bool = True) -> BaseListView:
        return self._with(enclose_by_container=enabled)

    def with_enclose_by_container_options(self, options: Mapping[str, Any]) -> BaseListView:
        return self._with(enclose_by_container_options=dict(options))

    def with_layout(self, layout: str) -> BaseListView:
        return self._with(layout=layout)

    def with_options(self, options: Mapping[str, Any]) -> BaseListView:
        return self._with(options=dict(options))

    def with_pager_options(self, pager_options: Mapping[str, Any]) -> BaseListView:
        return self._with(pager_options=dict(pager_options))

    def with_sorter_options(self, sorter_options: Mapping[str, Any]) -> BaseListView:
        return self._with(sorter_options=dict(sorter_options))

    def with_request_attributes(self, request_attributes: Mapping[str, Any]) -> BaseListView:
        return self._with(request_attributes=dict(request_attributes))

    def with_request_query_params(self, request_query_params: Mapping[str, Any]) -> BaseListView:
        return self._with(request_query_params=dict(request_query_params))

    def with_url_path(self, url_path: str) -> BaseListView:
        return self._with(url_path=url_path)

    def with_show_on_empty(self, enabled: bool = True) -> BaseListView:
        return self._with(show_on_empty=enabled)

    def with_summary(self, summary: str) -> BaseListView:
        return self._with(summary=summary)

    def with_summary_options(self, summary_options: Mapping[str, Any]) -> BaseListView:
        return self._with(summary_options=dict(summary_options))

    def with_translator(self, translator: Any) -> BaseListView:
        return self._with(translator=translator)

    def with_request(
        self,
        query_params: Mapping[str, Any],
        path_params: Mapping[str, Any] | None = None,
        url_path: str | None = None,
    ) -> BaseListView:
        """Return a copy configured from an incoming request.

        The page and page size params become the current page and page size;
        all query params are kept for building pager and sorter links.
        """
        pagination = self.data_provider.pagination if self.data_provider else Pagination()
        parsed = parse_query_params(
            query_params,
            page_param=pagination.page_param,
            page_size_param=pagination.page_size_param,
        )
        updates: dict[str, Any] = {
            "request_query_params": dict(query_params),
            "request_attributes": dict(path_params or {}),
        }
        if url_path is not None:
            updates["url_path"] = url_path
        if parsed["page"] is not None:
            updates["current_page"] = parsed["page"]
        if parsed["page_size"] is not None and parsed["page_size"] > 0:
            updates["page_size"] = parsed["page_size"]
        return self._with(**updates)

    def get_data_provider(self) -> DataProviderBase:
        if self.data_provider is None:
            raise InvalidConfigError('The "data_provider" property must be set.')
        return self.data_provider

    def get_pagination(self) -> Pagination:
        return self.get_data_provider().get_pagination()

    def get_sort(self) -> Sort:
        return self.get_data_provider().get_sort()

    def prepare_data_provider(self) -> DataProviderBase:
        """Return the data provider with this view's page and sort applied."""
        provider = self.get_data_provider()
        pagination = provider.pagination.with_current_page(self.current_page)
        if self.page_size is not None and self.page_size > 0:
            pagination = pagination.with_page_size(self.page_size)
        sort = provider.get_sort()
        if sort.sort_param in self.request_query_params:
            sort = sort.with_params(self.request_query_params)
        return provider.with_pagination(pagination).with_sort(sort)

    def render(self) -> str:
        """Render the view.

        Raises:
            InvalidConfigError: no data provider is set or the framework css
                is not supported.
        """
        self.get_data_provider()
        check_framework_css(self.framework_css)
        provider = self.prepare_data_provider()

        count = provider.get_count()
        logger.debug(
            "Rendering %s with %d of %d models",
            type(self).__name__,
            count,
            provider.get_total_count(),
        )
        if self.show_on_empty or count > 0:
            content = LAYOUT_TOKEN.sub(
                lambda match: self.render_section(match.group(0), provider), self.layout
            )
        else:
            content = self.render_empty()

        options = dict(self.options)
        tag = options.pop("tag", "div")
        html = self.html.tag(tag, content, options)

        if self.enclose_by_container:
            html = (
                self.html.begin_tag("div", self.enclose_by_container_options)
                + "\n"
                + html
                + "\n"
                + self.html.end_tag("div")
                + "\n"
            )
        return html

    def render_section(self, name: str, provider: DataProviderBase) -> str:
        """Render a layout token such as ``{summary}``; unknown tokens render empty."""
        renderers: dict[str, Callable[[DataProviderBase], str]] = {
            "{summary}": self.render_summary,
            "{items}": self.render_items,
            "{pager}": self.render_pager,
            "{sorter}": self.render_sorter,
        }
        renderer = renderers.get(name)
        if renderer is None:
            logger.debug("Unknown layout token %s", name)
            return ""
        return renderer(provider)

    def render_items(self, provider: DataProviderBase) -> str:
        """Render the items of the current page."""
        raise NotImplementedError

    def render_empty(self) -> str:
        """Render the block shown when the data provider has no data."""
        if self.empty_text == "":
            return ""
        options = dict(self.empty_text_options)
        tag = options.pop("tag", "div")
        return self.html.tag(tag, self.empty_text, options)

    def render_summary(self, provider: DataProviderBase) -> str:
        count = provider.get_count()
        if count <= 0 or self.summary == "":
            return ""

        options = dict(self.summary_options)
        options["encode"] = False
        tag = options.pop("tag", "div")

        pagination = provider.get_pagination()
        total_count = provider.get_total_count()
        begin = pagination.offset + 1
        end = begin + count - 1
        if begin > end:
            begin = end

        content = self.translator.translate(
            self.summary,
            {
                "begin": begin,
                "end": end,
                "count": count,
                "totalCount": total_count,
                "page": pagination.page,
                "pageCount": pagination.total_pages,
            },
            TRANSLATION_CATEGORY,
        )
        return self.html.tag(tag, content, options)

    def render_pager(self, provider: DataProviderBase) -> str:
        pagination = provider.get_pagination()
        if not pagination.enabled:
            return ""
        return (
            LinkPager(
                framework_css=self.framework_css,
                html=self.html,
                pagination=pagination,
                request_attributes=self.request_attributes,
                request_query_params=self.request_query_params,
                url_path=self.url_path,
            )
            .with_options(self.pager_options)
            .render()
        )

    def render_sorter(self, provider: DataProviderBase) -> str:
        sort = provider.get_sort()
        if not sort.attributes or provider.get_count() <= 0:
            return ""
        return (
            LinkSorter(
                framework_css=self.framework_css,
                html=self.html,
                sort=sort,
                request_attributes=self.request_attributes,
                request_query_params=self.request_query_params,
                url_path=self.url_path,
            )
            .with_link_options(self.sorter_options)
            .render()
        )
