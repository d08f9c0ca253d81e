"""
Table layout: a fixed grid of cell blocks.

Every cell is measured once per call. Row heights and column widths are the
largest padded cell extents in that row or column, laid end to end with a
border strip before the first, between each pair and after the last.

Borders are decomposed into rectangular segments: outer edges per row and per
column, inner rules per cell, and "interstices" - the small squares where rules
cross or meet the outer border. Subclasses choose which inner rules to keep
with :meth:`TableBlock.wants_row_rule` / :meth:`TableBlock.wants_column_rule`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from reportlab.lib.colors import Color

from ..engine.block import Block, PlacedBlock
from ..engine.geometry import Rect
from ..engine.layout import Alignment, Justification, Layout
from ..engine.quill import Quill
from ..render import scribe

logger = logging.getLogger(__name__)

BORDER_MIN_WIDTH = 0.5

SEGMENT_EDGE = "edge"
SEGMENT_CORNER = "corner"
SEGMENT_RULE = "rule"
SEGMENT_INTERSTICE = "interstice"


@dataclass(frozen=True, slots=True)
class BorderSegment:
    """One rectangle of border, relative to the table's top-left."""

    left: float
    top: float
    right: float
    bottom: float
    kind: str

    @property
    def rect(self) -> Rect:
        return Rect.from_edges(self.left, self.top, self.right, self.bottom)


class PlacedTable(PlacedBlock):
    __slots__ = ("cells", "row_tops", "row_bottoms", "column_lefts", "column_rights", "segments")

    def __init__(self, block: "TableBlock", quill: Quill):
        super().__init__(block, quill)
        self.cells: List[List[PlacedBlock]] = []
        self.row_tops: List[float] = []
        self.row_bottoms: List[float] = []
        self.column_lefts: List[float] = []
        self.column_rights: List[float] = []
        self.segments: List[BorderSegment] = []

    def cell(self, row: int, column: int) -> PlacedBlock:
        return self.cells[row][column]

    def iter_cells(self):
        for row in self.cells:
            yield from row

    def render(self, canvas, left: float, top: float) -> None:
        for cell in self.iter_cells():
            cell.require_positioned()
            cell.render(canvas, left + cell.left, top + cell.top)
        color = self.block.border_color
        for segment in self.segments:
            scribe.rect(
                canvas,
                left + segment.left,
                top + segment.top,
                left + segment.right,
                top + segment.bottom,
                color,
            )

    def revert_to_start(self) -> None:
        for cell in reversed(list(self.iter_cells())):
            cell.revert_to_start()


class TableBlock(Block):
    """
    Grid of ``row_count`` x ``column_count`` cells.

    Cells come from the ``cells`` matrix, or from :meth:`get_cell_block` in a
    subclass that passes only the counts.
    """

    def __init__(
        self,
        cells: Optional[Sequence[Sequence[Block]]] = None,
        row_count: Optional[int] = None,
        column_count: Optional[int] = None,
        border_color: Optional[Color] = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        if cells is not None:
            rows = [list(row) for row in cells]
            row_count = len(rows)
            column_count = len(rows[0]) if rows else 0
            for index, row in enumerate(rows):
                if len(row) != column_count:
                    raise ValueError(
                        f"Table row {index} has {len(row)} cells, expected {column_count}"
                    )
            self._cells = rows
        else:
            self._cells = None
        if not row_count or not column_count:
            raise ValueError("A table needs at least one row and one column")
        self.row_count = row_count
        self.column_count = column_count
        self.border_color = border_color
        self.quill: Optional[Quill] = None

    # -- hooks -------------------------------------------------------------

    def get_cell_block(self, row: int, column: int) -> Block:
        if self._cells is None:
            raise NotImplementedError(
                f"{type(self).__name__} has no cell matrix and does not override get_cell_block()"
            )
        return self._cells[row][column]

    def get_horizontal_justification(self, row: int, column: int) -> Justification:
        return Justification.CENTRE

    def get_vertical_alignment(self, row: int, column: int) -> Alignment:
        return Alignment.CENTRE

    def get_table_border_width(self, is_side: bool, is_before: bool) -> float:
        """Width of the outer border: ``is_side`` for left/right, ``is_before`` for left/top."""
        return max(BORDER_MIN_WIDTH, self.quill.size / 32)

    def get_cell_border_width(self, index: int, is_side: bool) -> float:
        """Width of the rule before row (or column, if ``is_side``) ``index``."""
        return self.get_table_border_width(is_side, True)

    def get_cell_padding(self, row: int, column: int, is_side: bool, is_before: bool) -> float:
        return self.quill.size / 2

    def inherit_cell_layout(self, table_layout: Layout, row: int, column: int) -> Layout:
        """Layout each cell is measured in. Cells are sized to content and never split."""
        return table_layout.copy_tight(width=True, height=True).copy_allow_splitting(False)

    def wants_row_rule(self, row: int) -> bool:
        """Whether to draw the rule above ``row`` (1 .. row_count-1)."""
        return True

    def wants_column_rule(self, column: int) -> bool:
        """Whether to draw the rule left of ``column`` (1 .. column_count-1)."""
        return True

    # -- measure -----------------------------------------------------------

    def fill(self, quill: Quill, layout: Layout) -> PlacedTable:
        self.quill = quill
        placed = PlacedTable(self, quill)
        for row in range(self.row_count):
            placed_row = []
            for column in range(self.column_count):
                cell = self.get_cell_block(row, column)
                placed_row.append(cell.measure(quill, self.inherit_cell_layout(layout, row, column)))
            placed.cells.append(placed_row)

        placed.row_tops, placed.row_bottoms = self._extents(placed, is_side=False)
        placed.column_lefts, placed.column_rights = self._extents(placed, is_side=True)
        width = placed.column_rights[-1] + self.get_table_border_width(True, False)
        height = placed.row_bottoms[-1] + self.get_table_border_width(False, False)
        placed.set_dimensions(width, height)

        for row in range(self.row_count):
            for column in range(self.column_count):
                self._position_cell(placed, row, column)
        placed.segments = self.border_segments(placed)
        return placed

    def _extents(self, placed: PlacedTable, is_side: bool) -> Tuple[List[float], List[float]]:
        """Starts and ends of every column (``is_side``) or row, border strips included."""
        count = self.column_count if is_side else self.row_count
        other_count = self.row_count if is_side else self.column_count
        starts: List[float] = []
        ends: List[float] = []
        position = 0.0
        for index in range(count):
            if index == 0:
                position += self.get_table_border_width(is_side, True)
            else:
                position += self.get_cell_border_width(index, is_side)
            extent = 0.0
            for other in range(other_count):
                row, column = (other, index) if is_side else (index, other)
                cell = placed.cells[row][column]
                size = cell.width if is_side else cell.height
                size += self.get_cell_padding(row, column, is_side, True)
                size += self.get_cell_padding(row, column, is_side, False)
                extent = max(extent, size)
            starts.append(position)
            ends.append(position + extent)
            position += extent
        return starts, ends

    def _position_cell(self, placed: PlacedTable, row: int, column: int) -> None:
        cell = placed.cells[row][column]
        interior_left = placed.column_lefts[column] + self.get_cell_padding(row, column, True, True)
        interior_right = placed.column_rights[column] - self.get_cell_padding(row, column, True, False)
        interior_top = placed.row_tops[row] + self.get_cell_padding(row, column, False, True)
        interior_bottom = placed.row_bottoms[row] - self.get_cell_padding(row, column, False, False)
        justification = self.get_horizontal_justification(row, column)
        alignment = self.get_vertical_alignment(row, column)
        cell.set_offset(
            interior_left + justification.offset(interior_right - interior_left - cell.width),
            interior_top + alignment.offset(interior_bottom - interior_top - cell.height),
        )

    # -- borders -----------------------------------------------------------

    def border_segments(self, placed: PlacedTable) -> List[BorderSegment]:
        rows, columns = self.row_count, self.column_count
        tops, bottoms = placed.row_tops, placed.row_bottoms
        lefts, rights = placed.column_lefts, placed.column_rights
        segments: List[BorderSegment] = []
        interstices = set()

        def interstice(row: int, column: int) -> None:
            if (row, column) in interstices:
                return
            interstices.add((row, column))
            kind = SEGMENT_CORNER if row in (0, rows) and column in (0, columns) else SEGMENT_INTERSTICE
            segments.append(
                BorderSegment(
                    rights[column - 1] if column > 0 else 0.0,
                    bottoms[row - 1] if row > 0 else 0.0,
                    lefts[column] if column < columns else placed.width,
                    tops[row] if row < rows else placed.height,
                    kind,
                )
            )

        for row in range(rows):
            segments.append(BorderSegment(0.0, tops[row], lefts[0], bottoms[row], SEGMENT_EDGE))
            segments.append(BorderSegment(rights[-1], tops[row], placed.width, bottoms[row], SEGMENT_EDGE))
            if row > 0:
                interstice(row, 0)
                interstice(row, columns)
        for column in range(columns):
            segments.append(BorderSegment(lefts[column], 0.0, rights[column], tops[0], SEGMENT_EDGE))
            segments.append(BorderSegment(lefts[column], bottoms[-1], rights[column], placed.height, SEGMENT_EDGE))
            if column > 0:
                interstice(0, column)
                interstice(rows, column)
        for row in (0, rows):
            for column in (0, columns):
                interstice(row, column)

        for row in range(1, rows):
            if not self.wants_row_rule(row):
                continue
            for column in range(columns):
                segments.append(BorderSegment(lefts[column], bottoms[row - 1], rights[column], tops[row], SEGMENT_RULE))
                if column > 0:
                    interstice(row, column)
        for column in range(1, columns):
            if not self.wants_column_rule(column):
                continue
            for row in range(rows):
                segments.append(BorderSegment(rights[column - 1], tops[row], lefts[column], bottoms[row], SEGMENT_RULE))
                if row > 0:
                    interstice(row, column)
        return segments
