"""In-memory data provider."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from fastapi_listview.sort import SortDirection
from fastapi_listview.utils.values import get_value

from .base import DataProviderBase


class ArrayDataProvider(DataProviderBase):
    """Serve models from a sequence of mappings or objects.

    The full data set is sorted by the sort's column orders, then sliced by
    the pagination.
    """

    def __init__(self, all_data: Iterable[Any] = (), **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.all_data = list(all_data)

    def with_all_data(self, all_data: Iterable[Any]) -> ArrayDataProvider:
        return self._copy_with(all_data=list(all_data))

    def prepare_models(self) -> list[Any]:
        models = list(self.all_data)
        orders = self.sort.get_orders()
        if orders:
            models = self._sort_models(models, orders)
        return self.get_pagination().paginate(models)

    def prepare_total_count(self) -> int:
        return len(self.all_data)

    def _sort_models(self, models: list[Any], orders: Mapping[str, SortDirection]) -> list[Any]:
        # Stable sorts applied from the last column to the first.
        for column, direction in reversed(list(orders.items())):
            models.sort(
                key=lambda model, column=column: _sort_key(get_value(model, column)),
                reverse=direction is SortDirection.DESC,
            )
        return models


def _sort_key(value: Any) -> tuple[bool, Any]:
    return (value is not None, value)
