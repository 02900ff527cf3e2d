"""SQLAlchemy helpers for sorting, paginating and counting statements."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from sqlalchemy import asc, desc, func, select
from sqlalchemy.sql import Select

from fastapi_listview.pagination import Pagination
from fastapi_listview.sort import SortDirection

logger = logging.getLogger(__name__)


class SQLAlchemyQueryHelper:
    """Apply list view sort and pagination state to a ``select()``."""

    def __init__(self, *, model: Any | None = None) -> None:
        self.model = model

    def _resolve_column(
        self, statement: Select, field_path: str, join_paths: set[str]
    ) -> tuple[Select, Any | None]:
        """Resolve a field path to a column, joining to-one relationships.

        Plain names are looked up on the model first, then among the
        statement's selected columns (which covers labels). Dotted paths such
        as ``author.name`` outer join each relationship once; paths that cross a
        to-many relationship are not sortable and resolve to None.
        """
        if "." not in field_path:
            if self.model is not None and hasattr(self.model, field_path):
                return statement, getattr(self.model, field_path)
            if field_path in statement.selected_columns:
                return statement, statement.selected_columns[field_path]
            return statement, None

        if self.model is None:
            return statement, None

        parts = field_path.split(".")
        current_model = self.model
        join_chain: list[str] = []
        for relationship_name in parts[:-1]:
            if not hasattr(current_model, relationship_name):
                return statement, None
            relationship_attr = getattr(current_model, relationship_name)
            rel_property = getattr(relationship_attr, "property", None)
            if rel_property is None or getattr(rel_property, "uselist", False):
                return statement, None

            join_chain.append(relationship_name)
            join_key = ".".join(join_chain)
            if join_key not in join_paths:
                statement = statement.outerjoin(relationship_attr)
                join_paths.add(join_key)

            related_model = getattr(getattr(rel_property, "mapper", None), "class_", None)
            if related_model is None:
                return statement, None
            current_model = related_model

        field_name = parts[-1]
        if hasattr(current_model, field_name):
            return statement, getattr(current_model, field_name)
        return statement, None

    def _apply_sort_column(self, statement: Select, column: Any, direction: SortDirection) -> Select:
        if direction is SortDirection.DESC:
            return statement.order_by(desc(column))
        return statement.order_by(asc(column))

    def apply_sorting(self, statement: Select, orders: Mapping[str, SortDirection]) -> Select:
        """Append ORDER BY clauses for each column order; unknown columns are skipped."""
        join_paths: set[str] = set()
        for field, direction in orders.items():
            statement, column = self._resolve_column(statement, field, join_paths)
            if column is None:
                logger.debug("Skipping unknown sort column %r", field)
                continue
            statement = self._apply_sort_column(statement, column, SortDirection(direction))
        return statement

    def apply_pagination(self, statement: Select, pagination: Pagination) -> Select:
        """Apply OFFSET/LIMIT for the current page."""
        if pagination.limit is None:
            return statement
        return statement.offset(pagination.offset).limit(pagination.limit)

    def count_statement(self, statement: Select) -> Select:
        """Return a statement counting the rows statement would return."""
        return select(func.count()).select_from(statement.order_by(None).subquery())
