"""Pagination base class for list views."""

from typing import Any, Mapping, Sequence


class PaginationBase:
    """Define the pagination API used by data providers and pagers."""

    def paginate(self, items: Sequence[Any]) -> list[Any]:
        """Return the slice of items on the current page."""
        raise NotImplementedError

    def create_url(
        self,
        page: int,
        *,
        url_path: str = "",
        query_params: Mapping[str, Any] | None = None,
        request_attributes: Mapping[str, Any] | None = None,
    ) -> str:
        """Return the URL of a 1-based page."""
        raise NotImplementedError
