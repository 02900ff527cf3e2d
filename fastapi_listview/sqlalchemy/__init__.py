"""SQLAlchemy helpers for list views."""

from .data_provider import SQLAlchemyDataProvider
from .helpers import SQLAlchemyQueryHelper

__all__ = ["SQLAlchemyDataProvider", "SQLAlchemyQueryHelper"]
