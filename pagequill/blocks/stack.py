"""Stack layout: children one below another."""

from __future__ import annotations

import logging

from ..engine.frame import Frame, PlacedFrame
from ..engine.layout import Layout
from ..engine.quill import Quill

logger = logging.getLogger(__name__)


class StackFrame(Frame):
    """
    Lays children out top to bottom, one per line.

    Each child is measured against the height left over by the children
    above it. A child taller than what is left is rejected, and the frame
    stops there, except for the first child of a call: it is always accepted,
    so a block taller than the whole page cannot stall pagination.

    Width is the widest child when the layout is width-tight, otherwise the
    full width offered; height is the sum of the accepted children. Each
    child is placed horizontally per the layout's justification.
    """

    def fill(self, quill: Quill, layout: Layout) -> PlacedFrame:
        placed = self.new_placement(quill)
        eaten = layout.copy()
        max_width = 0.0
        while self.reader.has_more():
            child = self.reader.read()
            placed_child = child.measure(quill, eaten)
            if eaten.allow_splitting and placed.children and placed_child.height > eaten.max_height:
                self.reject_child(placed_child, "exceeds height")
                break
            self.accept_child(placed, placed_child, eaten)
            eaten.reduce_height(placed_child.height)
            max_width = max(max_width, placed_child.width)
            if not child.is_fill_complete():
                # The child still has content but no room here; the parent
                # offers it more space on a later call.
                break

        frame_width = max_width if layout.is_width_tight else layout.max_width
        next_top = 0.0
        for child in placed.children:
            child.set_offset(layout.justification.offset(frame_width - child.width), next_top)
            next_top += child.height
        placed.set_dimensions(frame_width, next_top)
        logger.debug("%s fill leaving with %d children", self.log_name, len(placed))
        return placed
