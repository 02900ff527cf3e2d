"""Pagination for list views."""

from .base import PaginationBase
from .standard import Pagination

__all__ = ["Pagination", "PaginationBase"]
