"""List view widget."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Callable, Mapping

from jinja2 import Environment, FileSystemLoader, select_autoescape
from pydantic import Field

from fastapi_listview.config import get_settings
from fastapi_listview.core.errors import InvalidConfigError
from fastapi_listview.providers.base import DataProviderBase

from .base_list_view import BaseListView

ItemCallback = Callable[[Any, Any, int, "ListView"], Any]


@lru_cache
def _default_environment(templates_path: Path) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(templates_path)),
        autoescape=select_autoescape(),
    )


class ListView(BaseListView):
    """Render each model of the data provider through an item view.

    ``item_view`` may be:

    - None: the model key is rendered.
    - a template name: rendered by the Jinja2 environment from ``templates``
      (an ``Environment`` or Starlette ``Jinja2Templates``), or from the
      ``templates_path`` setting, with ``model``, ``key``, ``index``,
      ``widget`` and the ``view_params``.
    - a callable ``(model, key, index, widget) -> str``.

    ``before_item`` and ``after_item`` take the same arguments and return
    markup placed around each item, or None for nothing.
    """

    options: dict[str, Any] = Field(default_factory=lambda: {"class": "list-view"})
    item_view: str | Callable[..., Any] | None = None
    item_view_options: dict[str, Any] = Field(default_factory=dict)
    before_item: Callable[..., Any] | None = None
    after_item: Callable[..., Any] | None = None
    separator: str = "\n"
    view_params: dict[str, Any] = Field(default_factory=dict)
    templates: Any = None

    def with_item_view(self, item_view: str | ItemCallback | None) -> ListView:
        return self._with(item_view=item_view)

    def with_item_view_options(self, item_view_options: Mapping[str, Any]) -> ListView:
        return self._with(item_view_options=dict(item_view_options))

    def with_before_item(self, before_item: ItemCallback | None) -> ListView:
        return self._with(before_item=before_item)

    def with_after_item(self, after_item: ItemCallback | None) -> ListView:
        return self._with(after_item=after_item)

    def with_separator(self, separator: str) -> ListView:
        return self._with(separator=separator)

    def with_view_params(self, view_params: Mapping[str, Any]) -> ListView:
        return self._with(view_params=dict(view_params))

    def with_templates(self, templates: Any) -> ListView:
        return self._with(templates=templates)

    def render_items(self, provider: DataProviderBase) -> str:
        rows: list[str] = []
        for index, (model, key) in enumerate(zip(provider.get_models(), provider.get_keys())):
            parts: list[str] = []
            before = self.render_before_item(model, key, index)
            if before:
                parts.append(before)
            parts.append(self.render_item(model, key, index))
            after = self.render_after_item(model, key, index)
            if after:
                parts.append(after)
            rows.append("\n".join(parts))
        return self.separator.join(rows)

    def render_before_item(self, model: Any, key: Any, index: int) -> str | None:
        if self.before_item is None:
            return None
        result = self.before_item(model, key, index, self)
        return None if result is None else str(result)

    def render_after_item(self, model: Any, key: Any, index: int) -> str | None:
        if self.after_item is None:
            return None
        result = self.after_item(model, key, index, self)
        return None if result is None else str(result)

    def render_item(self, model: Any, key: Any, index: int) -> str:
        """Render a single item wrapped in ``item_view_options``."""
        if self.item_view is None:
            content = str(key)
        elif isinstance(self.item_view, str):
            template = self.get_template_environment().get_template(self.item_view)
            content = template.render(
                model=model, key=key, index=index, widget=self, **self.view_params
            )
        else:
            content = str(self.item_view(model, key, index, self))

        options = dict(self.item_view_options)
        tag = options.pop("tag", "div")
        if not tag:
            return content
        options["data-key"] = key
        return self.html.tag(tag, content, options)

    def get_template_environment(self) -> Environment:
        """Return the Jinja2 environment used for template item views."""
        if self.templates is not None:
            return getattr(self.templates, "env", self.templates)
        templates_path = get_settings().templates_path
        if templates_path is None:
            raise InvalidConfigError(
                'The "templates" property or the templates_path setting must be set '
                "to render a template item view."
            )
        return _default_environment(templates_path)
