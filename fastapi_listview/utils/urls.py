"""URL building for pager and sorter links."""

from __future__ import annotations

import re
from typing import Any, Mapping
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

_PLACEHOLDER = re.compile(r"{(\w+)}")


def resolve_path(path: str, attributes: Mapping[str, Any] | None = None) -> str:
    """Fill ``{name}`` placeholders in path from route attributes.

    Placeholders without a matching attribute are kept as written.
    """
    if not attributes:
        return path

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in attributes:
            return str(attributes[name])
        return match.group(0)

    return _PLACEHOLDER.sub(replace, path)


def build_url(
    path: str,
    query_params: Mapping[str, Any] | None = None,
    *,
    attributes: Mapping[str, Any] | None = None,
) -> str:
    """Return path with query params merged into its existing query string."""
    split = urlsplit(resolve_path(path, attributes))
    merged: dict[str, Any] = dict(parse_qsl(split.query, keep_blank_values=True))
    for key, value in (query_params or {}).items():
        if value is None:
            merged.pop(key, None)
        else:
            merged[key] = value
    query = urlencode(merged, doseq=True)
    return urlunsplit((split.scheme, split.netloc, split.path, query, split.fragment))
