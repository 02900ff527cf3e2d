"""Columns showing model data."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Literal

from pydantic import Field

from fastapi_listview.providers.base import DataProviderBase
from fastapi_listview.utils.values import get_value, humanize

from .base import Column

if TYPE_CHECKING:
    from fastapi_listview.widgets.grid_view import GridView


class DataColumn(Column):
    """Show an attribute of each model, with a sort link in the header.

    ``value`` overrides where the cell value comes from: a dotted attribute
    path, or a callable ``(model, key, index, column)``. Values are escaped
    unless ``format`` is ``raw``.
    """

    attribute: str | None = None
    label: str | None = None
    value: str | Callable[..., Any] | None = None
    format: Literal["text", "raw"] = "text"
    encode_label: bool = True
    enable_sorting: bool = True
    sort_link_options: dict[str, Any] = Field(default_factory=dict)

    def get_label(self) -> str:
        if self.label is not None:
            return self.label
        return humanize(self.attribute) if self.attribute else ""

    def get_data_cell_value(self, model: Any, key: Any, index: int) -> Any:
        if callable(self.value):
            return self.value(model, key, index, self)
        if isinstance(self.value, str):
            return get_value(model, self.value)
        return get_value(model, self.attribute)

    def render_header_cell_content(self, grid: GridView, provider: DataProviderBase) -> str:
        if self.header is not None:
            return self.header
        label = self.get_label()
        sort = provider.get_sort()
        if self.attribute and self.enable_sorting and sort.has_attribute(self.attribute):
            return sort.link(
                self.attribute,
                html=grid.html,
                url_path=grid.url_path,
                query_params=grid.request_query_params,
                request_attributes=grid.request_attributes,
                options={**self.sort_link_options, "label": label, "encode": self.encode_label},
            )
        return grid.html.encode(label) if self.encode_label else label

    def render_data_cell_content(
        self, model: Any, key: Any, index: int, grid: GridView, provider: DataProviderBase
    ) -> str:
        if self.content is not None:
            return super().render_data_cell_content(model, key, index, grid, provider)
        value = self.get_data_cell_value(model, key, index)
        if value is None:
            return grid.empty_cell
        if self.format == "raw":
            return str(value)
        return grid.html.encode(value)
