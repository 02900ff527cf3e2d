"""Exceptions raised by list view widgets."""


class ListViewError(Exception):
    """Base class for all errors raised by the package."""


class InvalidConfigError(ListViewError):
    """Raised when a widget is rendered with an invalid configuration."""
