"""Row layout: children side by side on a single line."""

from __future__ import annotations

import logging

from ..engine.frame import Frame, PlacedFrame
from ..engine.layout import Justification, Layout
from ..engine.quill import Quill

logger = logging.getLogger(__name__)


class RowFrame(Frame):
    """
    Lays children out left to right on one row, with a horizontal gap between them.

    A child wider than the remaining width is rejected unless it is the first
    of the call. When the layout is not width-tight the row takes the full
    width: with FULL justification the spare width is shared between the gaps,
    otherwise the children are shifted as a group. Children are aligned
    vertically within the row per the layout's alignment.
    """

    def fill(self, quill: Quill, layout: Layout) -> PlacedFrame:
        placed = self.new_placement(quill)
        gap = self.get_horizontal_gap(quill)
        eaten = layout.copy()
        sum_width = 0.0  # children plus gaps used
        max_child_height = 0.0
        while self.reader.has_more():
            child = self.reader.read()
            gap_before = gap if placed.children else 0.0
            child_layout = eaten.copy().set_size(max_width=max(0.0, eaten.max_width - gap_before))
            placed_child = child.measure(quill, child_layout)
            if (
                layout.allow_splitting
                and placed.children
                and placed_child.width > child_layout.max_width
            ):
                self.reject_child(placed_child, "exceeds width")
                break
            self.accept_child(placed, placed_child, eaten)
            eaten.reduce_width(gap_before + placed_child.width)
            sum_width += gap_before + placed_child.width
            max_child_height = max(max_child_height, placed_child.height)
            if not child.is_fill_complete():
                break

        count = len(placed)
        frame_width = sum_width if layout.is_width_tight else max(layout.max_width, sum_width)
        spare = frame_width - sum_width
        next_left = 0.0
        if layout.justification is Justification.FULL and count > 1:
            gap += spare / (count - 1)
        else:
            next_left = layout.justification.offset(spare)
        frame_height = max_child_height if layout.is_height_tight else layout.max_height

        for index, child in enumerate(placed.children):
            if index > 0:
                next_left += gap
            child.set_offset(next_left, layout.alignment.offset(frame_height - child.height))
            next_left += child.width
        placed.set_dimensions(frame_width, frame_height)
        logger.debug("%s fill leaving with %d children", self.log_name, count)
        return placed
