"""List and grid view widgets for FastAPI."""

from .core.errors import InvalidConfigError, ListViewError
from .core.html import HtmlBuilder
from .core.translator import MessageTranslator
from .pagination import Pagination
from .providers import ArrayDataProvider, DataProviderBase
from .sort import Sort, SortDirection
from .widgets import GridView, LinkPager, LinkSorter, ListView

__all__ = [
    "ArrayDataProvider",
    "DataProviderBase",
    "GridView",
    "HtmlBuilder",
    "InvalidConfigError",
    "LinkPager",
    "LinkSorter",
    "ListView",
    "ListViewError",
    "MessageTranslator",
    "Pagination",
    "Sort",
    "SortDirection",
]
