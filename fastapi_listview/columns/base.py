"""Base column for grid views."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from pydantic import BaseModel, ConfigDict, Field

from fastapi_listview.providers.base import DataProviderBase

if TYPE_CHECKING:
    from fastapi_listview.widgets.grid_view import GridView


class Column(BaseModel):
    """A grid view column: one header cell, one cell per row, one footer cell.

    ``content`` is a callable ``(model, key, index, column) -> str`` producing
    the raw cell markup. ``content_options`` may be a mapping or a callable
    with the same arguments returning the cell attributes.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    header: str | None = None
    footer: str | None = None
    content: Callable[..., Any] | None = None
    visible: bool = True
    header_options: dict[str, Any] = Field(default_factory=dict)
    content_options: Any = Field(default_factory=dict)
    footer_options: dict[str, Any] = Field(default_factory=dict)

    def render_header_cell(self, grid: GridView, provider: DataProviderBase) -> str:
        return grid.html.tag(
            "th", self.render_header_cell_content(grid, provider), self.header_options
        )

    def render_data_cell(
        self, model: Any, key: Any, index: int, grid: GridView, provider: DataProviderBase
    ) -> str:
        if callable(self.content_options):
            options = dict(self.content_options(model, key, index, self))
        else:
            options = dict(self.content_options)
        return grid.html.tag(
            "td", self.render_data_cell_content(model, key, index, grid, provider), options
        )

    def render_footer_cell(self, grid: GridView, provider: DataProviderBase) -> str:
        return grid.html.tag(
            "td", self.render_footer_cell_content(grid, provider), self.footer_options
        )

    def render_header_cell_content(self, grid: GridView, provider: DataProviderBase) -> str:
        return self.header if self.header is not None else grid.empty_cell

    def render_data_cell_content(
        self, model: Any, key: Any, index: int, grid: GridView, provider: DataProviderBase
    ) -> str:
        if self.content is not None:
            return str(self.content(model, key, index, self))
        return grid.empty_cell

    def render_footer_cell_content(self, grid: GridView, provider: DataProviderBase) -> str:
        return self.footer if self.footer is not None else grid.empty_cell
