"""Data provider base class for list views."""

from __future__ import annotations

import copy
import logging
from typing import Any, Callable, TypeVar

from fastapi_listview.pagination import Pagination
from fastapi_listview.sort import Sort
from fastapi_listview.utils.values import get_value

logger = logging.getLogger(__name__)

ProviderT = TypeVar("ProviderT", bound="DataProviderBase")


class DataProviderBase:
    """Supply a page of models plus counts, pagination and sort state.

    Subclasses implement ``prepare_models`` and ``prepare_total_count``.
    Results are computed once per instance; ``with_pagination`` and
    ``with_sort`` return fresh copies so a configured provider can be shared
    between views without one render affecting another.
    """

    def __init__(
        self,
        *,
        key: str | Callable[[Any], Any] | None = None,
        pagination: Pagination | None = None,
        sort: Sort | None = None,
    ) -> None:
        self.key = key
        self.pagination = pagination or Pagination()
        self.sort = sort or Sort()
        self._reset()

    def _reset(self) -> None:
        self._models: list[Any] | None = None
        self._keys: list[Any] | None = None
        self._total_count: int | None = None

    def _copy_with(self: ProviderT, **changes: Any) -> ProviderT:
        new = copy.copy(self)
        for name, value in changes.items():
            setattr(new, name, value)
        new._reset()
        return new

    def with_pagination(self: ProviderT, pagination: Pagination) -> ProviderT:
        return self._copy_with(pagination=pagination)

    def with_sort(self: ProviderT, sort: Sort) -> ProviderT:
        return self._copy_with(sort=sort)

    def get_pagination(self) -> Pagination:
        """Return the pagination with the total count filled in."""
        return self.pagination.with_total_count(self.get_total_count())

    def get_sort(self) -> Sort:
        return self.sort

    def get_models(self) -> list[Any]:
        """Return the models on the current page."""
        if self._models is None:
            self._models = list(self.prepare_models())
            logger.debug(
                "%s prepared %d models", type(self).__name__, len(self._models)
            )
        return self._models

    def get_keys(self) -> list[Any]:
        """Return one key per model on the current page."""
        if self._keys is None:
            self._keys = self.prepare_keys(self.get_models())
        return self._keys

    def get_count(self) -> int:
        """Return the number of models on the current page."""
        return len(self.get_models())

    def get_total_count(self) -> int:
        """Return the number of models across all pages."""
        if self._total_count is None:
            self._total_count = self.prepare_total_count()
        return self._total_count

    def prepare_models(self) -> list[Any]:
        """Load the models on the current page."""
        raise NotImplementedError

    def prepare_total_count(self) -> int:
        """Count the models across all pages."""
        raise NotImplementedError

    def prepare_keys(self, models: list[Any]) -> list[Any]:
        """Return keys from the ``key`` option, or absolute row positions."""
        if self.key is None:
            offset = self.get_pagination().offset
            return list(range(offset, offset + len(models)))
        return [get_value(model, self.key) for model in models]
