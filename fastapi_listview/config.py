"""Package-wide defaults via pydantic-settings.

Loads configuration from environment variables with the LISTVIEW_ prefix.
Widgets read these defaults when they are constructed, so an application can
switch every view to Bulma markup or a different page size without touching
the view definitions.

Examples:
    Use Bulma markup everywhere::

        LISTVIEW_FRAMEWORK_CSS=bulma uvicorn app:app

    Render string item views from a template directory::

        LISTVIEW_TEMPLATES_PATH=templates/items uvicorn app:app
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings


class ListViewSettings(BaseSettings):
    """Default widget settings loaded from environment variables."""

    page_size: int = 20
    framework_css: str = "bootstrap"
    max_button_count: int = 10

    # Directory of Jinja2 templates used for string item views
    templates_path: Path | None = None

    model_config = {"env_prefix": "LISTVIEW_"}


@lru_cache
def get_settings() -> ListViewSettings:
    """Get the cached settings singleton."""
    return ListViewSettings()
