"""SQLAlchemy data provider for list views."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.inspection import inspect
from sqlalchemy.orm import Session
from sqlalchemy.sql import Select

from fastapi_listview.providers.base import DataProviderBase

from .helpers import SQLAlchemyQueryHelper


class SQLAlchemyDataProvider(DataProviderBase):
    """Bridge list views with a SQLAlchemy ``select()``.

    The statement runs on a caller-owned synchronous session; the provider
    only reads. Selecting a single ORM entity yields model instances, any
    other statement yields one dict per row. Keys default to the model's
    primary key.
    """

    def __init__(
        self,
        *,
        session: Session,
        statement: Select | None = None,
        model: Any | None = None,
        query_helper: SQLAlchemyQueryHelper | None = None,
        **kwargs: Any,
    ) -> None:
        if statement is None and model is None:
            raise ValueError("Either statement or model must be given.")
        if statement is None:
            statement = select(model)
        if model is None:
            model = self._entity_of(statement)
        if kwargs.get("key") is None and model is not None:
            mapper = inspect(model)
            kwargs["key"] = mapper.get_property_by_column(mapper.primary_key[0]).key
        super().__init__(**kwargs)
        self.session = session
        self.statement = statement
        self.model = model
        self.query_helper = query_helper or SQLAlchemyQueryHelper(model=model)

    @staticmethod
    def _entity_of(statement: Select) -> Any | None:
        descriptions = statement.column_descriptions
        if not descriptions:
            return None
        return descriptions[0].get("entity")

    def _selects_entity(self) -> bool:
        descriptions = self.statement.column_descriptions
        return (
            len(descriptions) == 1
            and descriptions[0].get("entity") is not None
            and descriptions[0].get("expr") is descriptions[0].get("entity")
        )

    def prepare_models(self) -> list[Any]:
        statement = self.query_helper.apply_sorting(self.statement, self.sort.get_orders())
        statement = self.query_helper.apply_pagination(statement, self.get_pagination())
        result = self.session.execute(statement)
        if self._selects_entity():
            return list(result.scalars().all())
        return [dict(row._mapping) for row in result]

    def prepare_total_count(self) -> int:
        statement = self.query_helper.count_statement(self.statement)
        return int(self.session.execute(statement).scalar_one())
