"""Sort state for list views."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fastapi_listview.core.errors import InvalidConfigError
from fastapi_listview.core.html import HtmlBuilder
from fastapi_listview.utils.query_params import parse_sort_param
from fastapi_listview.utils.urls import build_url
from fastapi_listview.utils.values import humanize


class SortDirection(str, Enum):
    """Sort direction of an attribute or column."""

    ASC = "asc"
    DESC = "desc"


class Sort(BaseModel):
    """Sortable attribute definitions plus the requested sort order.

    ``attributes`` accepts a list of names or a mapping of name to definition.
    A definition may contain ``asc`` and ``desc`` mappings of column to
    direction, the ``default`` direction used when a link first sorts by the
    attribute, and a ``label``::

        Sort(attributes={
            "name": {
                "asc": {"last_name": "asc", "first_name": "asc"},
                "desc": {"last_name": "desc", "first_name": "desc"},
                "label": "Full name",
            },
            "created_at": {"default": "desc"},
        })

    ``params`` holds the raw requested sort, for example ``-created_at,name``.
    """

    model_config = ConfigDict(frozen=True)

    attributes: dict[str, dict[str, Any]] = Field(default_factory=dict)
    params: str = ""
    default_order: dict[str, SortDirection] = Field(default_factory=dict)
    enable_multi_sort: bool = False
    sort_param: str = "sort"
    separator: str = ","

    @field_validator("attributes", mode="before")
    @classmethod
    def _normalize_attributes(cls, value: Any) -> dict[str, dict[str, Any]]:
        if not value:
            return {}
        if isinstance(value, (list, tuple)):
            value = {name: {} for name in value}
        normalized: dict[str, dict[str, Any]] = {}
        for name, definition in value.items():
            definition = dict(definition or {})
            asc = definition.get("asc", {name: SortDirection.ASC})
            desc = definition.get("desc", {name: SortDirection.DESC})
            normalized[name] = {
                "asc": {column: SortDirection(direction) for column, direction in asc.items()},
                "desc": {column: SortDirection(direction) for column, direction in desc.items()},
                "default": SortDirection(definition.get("default", SortDirection.ASC)),
                "label": definition.get("label") or humanize(name),
            }
        return normalized

    def with_attributes(self, attributes: Any) -> Sort:
        return self.model_copy(update={"attributes": self._normalize_attributes(attributes)})

    def with_params(self, query_params: Mapping[str, Any]) -> Sort:
        """Return a copy sorted by the sort param found in query_params."""
        value = query_params.get(self.sort_param)
        return self.model_copy(update={"params": "" if value is None else str(value)})

    def with_default_order(self, default_order: Mapping[str, Any]) -> Sort:
        orders = {name: SortDirection(direction) for name, direction in default_order.items()}
        return self.model_copy(update={"default_order": orders})

    def with_multi_sort(self, enabled: bool = True) -> Sort:
        return self.model_copy(update={"enable_multi_sort": enabled})

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def get_attribute_orders(self) -> dict[str, SortDirection]:
        """Return requested attribute directions, or the default order."""
        orders: dict[str, SortDirection] = {}
        for entry in parse_sort_param(self.params, self.separator):
            name = entry["field"]
            if name not in self.attributes or name in orders:
                continue
            orders[name] = SortDirection(entry["direction"])
            if not self.enable_multi_sort:
                break
        if not orders:
            orders = dict(self.default_order)
        return orders

    def get_attribute_order(self, name: str) -> SortDirection | None:
        return self.get_attribute_orders().get(name)

    def get_orders(self) -> dict[str, SortDirection]:
        """Return the column directions to sort data by."""
        orders: dict[str, SortDirection] = {}
        for name, direction in self.get_attribute_orders().items():
            definition = self.attributes.get(name)
            if definition is None:
                orders[name] = direction
                continue
            orders.update(definition[direction.value])
        return orders

    def create_sort_param(self, attribute: str) -> str:
        """Return the sort param that toggles attribute in a link."""
        definition = self.attributes.get(attribute)
        if definition is None:
            raise InvalidConfigError(f'Unknown sort attribute: "{attribute}".')
        directions = self.get_attribute_orders()
        if attribute in directions:
            current = directions.pop(attribute)
            direction = SortDirection.DESC if current is SortDirection.ASC else SortDirection.ASC
        else:
            direction = definition["default"]
        if self.enable_multi_sort:
            directions = {attribute: direction, **directions}
        else:
            directions = {attribute: direction}
        return self.separator.join(
            ("-" if value is SortDirection.DESC else "") + name for name, value in directions.items()
        )

    def create_url(
        self,
        attribute: str,
        *,
        url_path: str = "",
        query_params: Mapping[str, Any] | None = None,
        request_attributes: Mapping[str, Any] | None = None,
    ) -> str:
        params = dict(query_params or {})
        params[self.sort_param] = self.create_sort_param(attribute)
        return build_url(url_path, params, attributes=request_attributes)

    def link(
        self,
        attribute: str,
        *,
        html: HtmlBuilder | None = None,
        url_path: str = "",
        query_params: Mapping[str, Any] | None = None,
        request_attributes: Mapping[str, Any] | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        """Return an anchor sorting by attribute.

        The anchor carries class ``asc`` or ``desc`` when attribute is the
        current sort, and ``data-sort`` with the sort param it applies.
        Options may override the ``label`` and disable label ``encode``.
        """
        html = html or HtmlBuilder()
        attrs = dict(options or {})
        direction = self.get_attribute_order(attribute)
        if direction is not None:
            attrs = html.add_css_class(attrs, direction.value)
        url = self.create_url(
            attribute,
            url_path=url_path,
            query_params=query_params,
            request_attributes=request_attributes,
        )
        attrs["data-sort"] = self.create_sort_param(attribute)
        label = attrs.pop("label", None) or self.attributes[attribute]["label"]
        if attrs.pop("encode", True):
            label = html.encode(label)
        return html.a(label, url, attrs)
