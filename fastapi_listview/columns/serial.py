"""Row number column."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi_listview.providers.base import DataProviderBase

from .base import Column

if TYPE_CHECKING:
    from fastapi_listview.widgets.grid_view import GridView


class SerialColumn(Column):
    """Number rows from 1, continuing across pages."""

    header: str | None = "#"

    def render_data_cell_content(
        self, model: Any, key: Any, index: int, grid: GridView, provider: DataProviderBase
    ) -> str:
        if self.content is not None:
            return super().render_data_cell_content(model, key, index, grid, provider)
        return str(provider.get_pagination().offset + index + 1)
