"""Core HTML, translation and error helpers."""

from .errors import InvalidConfigError, ListViewError
from .html import HtmlBuilder
from .translator import MessageFormatter, MessageTranslator, Translator

__all__ = [
    "HtmlBuilder",
    "InvalidConfigError",
    "ListViewError",
    "MessageFormatter",
    "MessageTranslator",
    "Translator",
]
