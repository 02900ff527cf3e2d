"""Data providers for list views."""

from .array import ArrayDataProvider
from .base import DataProviderBase

__all__ = ["ArrayDataProvider", "DataProviderBase"]
