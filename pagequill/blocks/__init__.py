"""Concrete blocks: flow layouts, tables and leaf content."""

from .row import RowFrame
from .spacers import RectBlock, SpacerFullWidth, SpacerHeight, SpacerWidth
from .stack import StackFrame
from .table import BorderSegment, PlacedTable, TableBlock
from .text import StringBlock, StringBlockBold
from .wrap import Line, WrapFrame

__all__ = [
    "BorderSegment",
    "Line",
    "PlacedTable",
    "RectBlock",
    "RowFrame",
    "SpacerFullWidth",
    "SpacerHeight",
    "SpacerWidth",
    "StackFrame",
    "StringBlock",
    "StringBlockBold",
    "TableBlock",
    "WrapFrame",
]
