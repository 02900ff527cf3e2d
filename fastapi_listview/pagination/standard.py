"""Page-number pagination."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field

from fastapi_listview.config import get_settings
from fastapi_listview.utils.urls import build_url

from .base import PaginationBase


class Pagination(BaseModel, PaginationBase):
    """Immutable page/offset arithmetic for a data set.

    ``current_page`` is what was requested; ``page`` is that value clamped
    into the available range and is what offsets and links are based on.
    A ``page_size`` below 1 disables pagination. Page URLs only carry the
    page size param when it differs from the configured default.
    """

    model_config = ConfigDict(frozen=True)

    total_count: int = Field(default=0, ge=0)
    page_size: int = Field(default_factory=lambda: get_settings().page_size)
    current_page: int = 1
    page_param: str = "page"
    page_size_param: str = "per-page"

    @property
    def enabled(self) -> bool:
        return self.page_size > 0

    @property
    def total_pages(self) -> int:
        if not self.enabled:
            return 1 if self.total_count > 0 else 0
        return (self.total_count + self.page_size - 1) // self.page_size

    @property
    def page(self) -> int:
        return min(max(self.current_page, 1), max(self.total_pages, 1))

    @property
    def offset(self) -> int:
        if not self.enabled:
            return 0
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int | None:
        return self.page_size if self.enabled else None

    def with_current_page(self, current_page: int) -> Pagination:
        return self.model_copy(update={"current_page": current_page})

    def with_page_size(self, page_size: int) -> Pagination:
        return self.model_copy(update={"page_size": page_size})

    def with_total_count(self, total_count: int) -> Pagination:
        return self.model_copy(update={"total_count": max(total_count, 0)})

    def paginate(self, items: Sequence[Any]) -> list[Any]:
        """Return the slice of items on the current page."""
        if not self.enabled:
            return list(items)
        return list(items[self.offset : self.offset + self.page_size])

    def create_url(
        self,
        page: int,
        *,
        url_path: str = "",
        query_params: Mapping[str, Any] | None = None,
        request_attributes: Mapping[str, Any] | None = None,
    ) -> str:
        """Return the URL of a 1-based page, keeping the other query params."""
        params = dict(query_params or {})
        params[self.page_param] = page
        if self.page_size != get_settings().page_size:
            params[self.page_size_param] = self.page_size
        else:
            params.pop(self.page_size_param, None)
        return build_url(url_path, params, attributes=request_attributes)
