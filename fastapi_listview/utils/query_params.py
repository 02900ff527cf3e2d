"""Helpers for list view query parameter parsing."""

from __future__ import annotations

from typing import Any, Mapping


def _split_csv(value: str) -> list[str]:
    return [item for item in (part.strip() for part in value.split(",")) if item]


def _maybe_int(value: Any) -> int | None:
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def parse_sort_param(value: str, separator: str = ",") -> list[dict[str, str]]:
    """Split a sort param such as ``-created,name`` into field/direction pairs."""
    if separator == ",":
        fields = _split_csv(value)
    else:
        fields = [part.strip() for part in value.split(separator) if part.strip()]
    return [
        {"field": field.lstrip("-"), "direction": "desc" if field.startswith("-") else "asc"}
        for field in fields
        if field.lstrip("-")
    ]


def parse_query_params(
    params: Mapping[str, Any],
    *,
    page_param: str = "page",
    page_size_param: str = "per-page",
) -> dict[str, Any]:
    """Normalize the page and page size parameters.

    Values that are not valid integers are dropped rather than rejected, so a
    malformed link falls back to the first page instead of failing the render.
    The sort param is read by ``Sort.with_params``.
    """
    normalized: dict[str, Any] = {
        "page": None,
        "page_size": None,
    }

    for key, value in params.items():
        if value is None:
            continue
        raw_value = str(value)
        if key == page_param:
            normalized["page"] = _maybe_int(raw_value)
        elif key == page_size_param:
            normalized["page_size"] = _maybe_int(raw_value)

    return normalized
