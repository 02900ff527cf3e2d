"""Sorting for list views."""

from .base import Sort, SortDirection

__all__ = ["Sort", "SortDirection"]
