"""FastAPI routing for list views."""

from .base import ListViewRouter

__all__ = ["ListViewRouter"]
