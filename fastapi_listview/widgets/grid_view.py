"""Grid view widget."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Sequence

from pydantic import Field, field_validator

from fastapi_listview.columns import Column, DataColumn
from fastapi_listview.providers.base import DataProviderBase
from fastapi_listview.utils.values import public_fields

from .base import FrameworkCss
from .base_list_view import BaseListView

DEFAULT_TABLE_OPTIONS = {
    FrameworkCss.BOOTSTRAP: {"class": "table"},
    FrameworkCss.BULMA: {"class": "table is-fullwidth"},
}


class GridView(BaseListView):
    """Render the data provider as an HTML table.

    ``columns`` accepts Column instances or attribute names, which become
    DataColumns. Without columns, one DataColumn is created per public field
    of the first model. ``row_options`` may be a mapping or a callable
    ``(model, key, index, grid)`` returning the row attributes.
    """

    options: dict[str, Any] = Field(default_factory=lambda: {"class": "grid-view"})
    columns: list[Column] = Field(default_factory=list)
    show_header: bool = True
    show_footer: bool = False
    show_on_empty: bool = True
    table_options: dict[str, Any] | None = None
    header_row_options: dict[str, Any] = Field(default_factory=dict)
    footer_row_options: dict[str, Any] = Field(default_factory=dict)
    row_options: Any = Field(default_factory=dict)
    empty_cell: str = "&nbsp;"

    @field_validator("columns", mode="before")
    @classmethod
    def _normalize_columns(cls, value: Any) -> list[Column]:
        return [DataColumn(attribute=column) if isinstance(column, str) else column for column in value]

    def with_columns(self, columns: Sequence[Column | str]) -> GridView:
        return self._with(columns=self._normalize_columns(columns))

    def with_show_header(self, show_header: bool) -> GridView:
        return self._with(show_header=show_header)

    def with_show_footer(self, show_footer: bool) -> GridView:
        return self._with(show_footer=show_footer)

    def with_table_options(self, table_options: Mapping[str, Any] | None) -> GridView:
        return self._with(table_options=None if table_options is None else dict(table_options))

    def with_header_row_options(self, header_row_options: Mapping[str, Any]) -> GridView:
        return self._with(header_row_options=dict(header_row_options))

    def with_footer_row_options(self, footer_row_options: Mapping[str, Any]) -> GridView:
        return self._with(footer_row_options=dict(footer_row_options))

    def with_row_options(
        self, row_options: Mapping[str, Any] | Callable[..., Mapping[str, Any]]
    ) -> GridView:
        return self._with(row_options=row_options if callable(row_options) else dict(row_options))

    def with_empty_cell(self, empty_cell: str) -> GridView:
        return self._with(empty_cell=empty_cell)

    def get_columns(self, provider: DataProviderBase) -> list[Column]:
        """Return the visible columns, guessing them from the data if none are set."""
        columns = self.columns
        if not columns:
            models = provider.get_models()
            columns = [DataColumn(attribute=name) for name in public_fields(models[0])] if models else []
        return [column for column in columns if column.visible]

    def render_items(self, provider: DataProviderBase) -> str:
        columns = self.get_columns(provider)
        parts: list[str] = []
        if self.show_header:
            parts.append(self.render_table_header(columns, provider))
        if self.show_footer:
            parts.append(self.render_table_footer(columns, provider))
        parts.append(self.render_table_body(columns, provider))

        if self.table_options is not None:
            table_options = self.table_options
        else:
            table_options = DEFAULT_TABLE_OPTIONS[self.framework_css]
        return self.html.tag("table", "\n" + "\n".join(parts) + "\n", table_options)

    def render_table_header(self, columns: list[Column], provider: DataProviderBase) -> str:
        cells = "".join(column.render_header_cell(self, provider) for column in columns)
        row = self.html.tag("tr", cells, self.header_row_options)
        return f"<thead>\n{row}\n</thead>"

    def render_table_footer(self, columns: list[Column], provider: DataProviderBase) -> str:
        cells = "".join(column.render_footer_cell(self, provider) for column in columns)
        row = self.html.tag("tr", cells, self.footer_row_options)
        return f"<tfoot>\n{row}\n</tfoot>"

    def render_table_body(self, columns: list[Column], provider: DataProviderBase) -> str:
        rows = [
            self.render_table_row(columns, model, key, index, provider)
            for index, (model, key) in enumerate(zip(provider.get_models(), provider.get_keys()))
        ]
        if not rows:
            cell = self.html.tag("td", self.render_empty(), {"colspan": max(len(columns), 1)})
            rows.append(self.html.tag("tr", cell))
        return "<tbody>\n" + "\n".join(rows) + "\n</tbody>"

    def render_table_row(
        self,
        columns: list[Column],
        model: Any,
        key: Any,
        index: int,
        provider: DataProviderBase,
    ) -> str:
        if callable(self.row_options):
            options = dict(self.row_options(model, key, index, self))
        else:
            options = dict(self.row_options)
        options["data-key"] = key
        cells = "".join(
            column.render_data_cell(model, key, index, self, provider) for column in columns
        )
        return self.html.tag("tr", cells, options)
