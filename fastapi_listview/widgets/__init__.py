"""List view widgets."""

from .base import FrameworkCss, Widget
from .base_list_view import BaseListView
from .grid_view import GridView
from .link_pager import LinkPager
from .link_sorter import LinkSorter
from .list_view import ListView

__all__ = [
    "BaseListView",
    "FrameworkCss",
    "GridView",
    "LinkPager",
    "LinkSorter",
    "ListView",
    "Widget",
]
