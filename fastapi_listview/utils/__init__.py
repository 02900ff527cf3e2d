"""Utility helpers for query parsing, URLs and value lookup."""

from .query_params import parse_query_params, parse_sort_param
from .urls import build_url, resolve_path
from .values import get_value, humanize, public_fields

__all__ = [
    "build_url",
    "get_value",
    "humanize",
    "parse_query_params",
    "parse_sort_param",
    "public_fields",
    "resolve_path",
]
