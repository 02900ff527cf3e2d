"""Widget base class and CSS framework selection."""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fastapi_listview.config import get_settings
from fastapi_listview.core.errors import InvalidConfigError
from fastapi_listview.core.html import HtmlBuilder

WidgetT = TypeVar("WidgetT", bound="Widget")


class FrameworkCss(str, Enum):
    """CSS framework whose markup the widgets produce."""

    BOOTSTRAP = "bootstrap"
    BULMA = "bulma"


def check_framework_css(value: Any) -> FrameworkCss:
    """Return value as a FrameworkCss, raising InvalidConfigError if unsupported."""
    try:
        return FrameworkCss(value)
    except ValueError:
        valid = '", "'.join(member.value for member in FrameworkCss)
        raise InvalidConfigError(f'Invalid framework css. Valid values are: "{valid}".') from None


class Widget(BaseModel):
    """Immutable widget configuration rendered to an HTML string.

    Configuration is changed through ``with_*`` methods, each returning a new
    widget and leaving the receiver untouched.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    framework_css: FrameworkCss = Field(
        default_factory=lambda: check_framework_css(get_settings().framework_css)
    )
    html: HtmlBuilder = Field(default_factory=HtmlBuilder)

    @field_validator("framework_css", mode="before")
    @classmethod
    def _validate_framework_css(cls, value: Any) -> FrameworkCss:
        return check_framework_css(value)

    def _with(self: WidgetT, **changes: Any) -> WidgetT:
        return self.model_copy(update=changes)

    def with_framework_css(self: WidgetT, framework_css: str) -> WidgetT:
        return self._with(framework_css=check_framework_css(framework_css))

    def with_html(self: WidgetT, html: HtmlBuilder) -> WidgetT:
        return self._with(html=html)

    def render(self) -> str:
        """Return the widget HTML."""
        raise NotImplementedError
