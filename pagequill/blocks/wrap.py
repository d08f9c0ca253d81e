"""
Wrap layout: children in reading order, wrapped onto as many lines as fit.

Lines are filled greedily left to right. Nothing is positioned until the
call has finished filling lines, because only then is it known which line is
the last: full justification stretches every line but the last one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..engine.block import PlacedBlock
from ..engine.frame import Frame, PlacedFrame
from ..engine.layout import Justification, Layout
from ..engine.quill import Quill
from ..exceptions import LayoutContractError
from .text import StringBlock

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Line:
    """The children of one line, before they are positioned."""

    top: float
    children: List[PlacedBlock] = field(default_factory=list)
    width: float = 0.0  # children plus natural gaps
    height: float = 0.0
    is_last: bool = False
    # Set when a child was left incomplete, which ends the whole call.
    ends_call: bool = False


class WrapFrame(Frame):
    """
    Lays children out in reading order, wrapping onto new lines.

    On each line a child too wide for the rest of the line is moved to the
    next line, unless it is first on its line. A child too tall for the height
    left makes the whole line too tall: every child on it is reverted and the
    call stops, leaving that line for the next call. The first line of a call
    is always accepted so oversized content still makes progress.

    Per line, LEFT/CENTRE/RIGHT justification shifts the line within the
    frame width; FULL spreads the spare width over the gaps, except on the
    last line and on lines with a single child.
    """

    def write_words(self, text: str) -> "WrapFrame":
        """Write each whitespace-separated word of ``text`` as a StringBlock."""
        for word in text.split():
            self.write(StringBlock(word))
        return self

    def fill(self, quill: Quill, layout: Layout) -> PlacedFrame:
        placed = self.new_placement(quill)
        gap = self.get_horizontal_gap(quill)
        lines: List[Line] = []
        eaten = layout.copy()
        next_top = 0.0
        while self.reader.has_more():
            line = self._fill_line(quill, eaten, gap, next_top, is_first_line=not lines)
            if line is None:
                break
            placed.extend(line.children)
            lines.append(line)
            next_top += line.height
            eaten.set_size(max_width=layout.max_width)
            eaten.reduce_height(line.height)
            if line.ends_call:
                break

        if lines and not self.reader.has_more():
            lines[-1].is_last = True
        if layout.is_width_tight:
            frame_width = max((line.width for line in lines), default=0.0)
        else:
            frame_width = layout.max_width
        frame_height = next_top if layout.is_height_tight else layout.max_height

        for line in lines:
            self._position_line(line, layout, frame_width, gap)
        placed.set_dimensions(frame_width, frame_height)
        logger.debug("%s fill leaving with %d children on %d lines", self.log_name, len(placed), len(lines))
        return placed

    def _fill_line(
        self, quill: Quill, eaten: Layout, gap: float, top: float, is_first_line: bool
    ) -> Optional[Line]:
        """Fill one line. Returns None if the line was too tall and has been reverted."""
        line = Line(top=top)
        while self.reader.has_more():
            child = self.reader.read()
            gap_before = gap if line.children else 0.0
            child_layout = eaten.copy().set_size(max_width=max(0.0, eaten.max_width - gap_before))
            placed_child = child.measure(quill, child_layout)
            is_incomplete = not child.is_fill_complete()
            if is_incomplete and not eaten.allow_splitting:
                raise LayoutContractError(
                    "Child left incomplete in a layout that does not allow splitting",
                    f"{child.log_name} in {self.log_name}",
                )
            is_too_wide = placed_child.width > child_layout.max_width
            if line.children and (is_too_wide or is_incomplete):
                # Starts the next line instead, with the full width to itself.
                self.reject_child(placed_child, "moved to next line")
                break
            if eaten.allow_splitting and not is_first_line and placed_child.height > eaten.max_height:
                logger.debug(
                    "%s line rejected, %d children reverted", self.log_name, len(line.children) + 1
                )
                self.revert_to_first_of(line.children + [placed_child])
                return None
            line.children.append(placed_child)
            line.width += gap_before + placed_child.width
            line.height = max(line.height, placed_child.height)
            eaten.reduce_width(gap_before + placed_child.width)
            if is_incomplete:
                line.ends_call = True
                break
        return line

    @staticmethod
    def _position_line(line: Line, layout: Layout, frame_width: float, gap: float) -> None:
        spare = frame_width - line.width
        count = len(line.children)
        next_left = 0.0
        if layout.justification is Justification.FULL:
            if not line.is_last and count > 1:
                gap += spare / (count - 1)
        else:
            next_left = layout.justification.offset(spare)
        for index, child in enumerate(line.children):
            if index > 0:
                next_left += gap
            child.set_offset(next_left, line.top + layout.alignment.offset(line.height - child.height))
            next_left += child.width
