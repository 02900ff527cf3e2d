"""Grid view columns."""

from .base import Column
from .data import DataColumn
from .serial import SerialColumn

__all__ = ["Column", "DataColumn", "SerialColumn"]
