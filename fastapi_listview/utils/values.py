"""Attribute lookup helpers shared by providers and columns."""

from __future__ import annotations

import re
from typing import Any, Callable, Mapping

_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|[_\-.]+")


def get_value(model: Any, key: str | Callable[[Any], Any] | None, default: Any = None) -> Any:
    """Return a value from a mapping or object.

    ``key`` may be a callable receiving the model, or a dotted path such as
    ``author.name`` walking nested mappings and attributes.
    """
    if key is None:
        return default
    if callable(key):
        return key(model)
    current = model
    for part in str(key).split("."):
        if current is None:
            return default
        if isinstance(current, Mapping):
            if part not in current:
                return default
            current = current[part]
        elif hasattr(current, part):
            current = getattr(current, part)
        else:
            return default
    return current


def public_fields(model: Any) -> list[str]:
    """Return the public field names of a mapping or plain object."""
    if isinstance(model, Mapping):
        return [str(key) for key in model.keys()]
    if hasattr(model, "__table__"):
        return [column.key for column in model.__table__.columns]
    if hasattr(model, "__dict__"):
        return [key for key in vars(model) if not key.startswith("_")]
    return []


def humanize(name: str) -> str:
    """Turn ``created_at`` or ``createdAt`` into ``Created At``."""
    words = [word for word in _WORD_BOUNDARY.split(name) if word]
    return " ".join(word[:1].upper() + word[1:] for word in words)
