"""
Frame - a block that lays out the blocks of its own pipe.

Subclasses implement :meth:`Frame.fill`, pulling children from
``self.reader`` and deciding how many fit. When a child (or a whole batch of
children) does not fit, the placements are reverted with
:meth:`PlacedFrame.revert_to_start` and the pipe rewound, so the rejected
blocks are measured again by the next call, usually on the next page.

A frame moves NOT_STARTED -> PARTIAL* -> COMPLETE over its measure calls.
Measuring a COMPLETE frame is a contract violation.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Sequence, Union

from ..exceptions import LayoutContractError
from .block import Block, PlacedBlock
from .layout import Layout
from .pipe import BlockPipe
from .quill import Quill, QuillMemo

if TYPE_CHECKING:  # pragma: no cover
    from ..render.canvas import Canvas

logger = logging.getLogger(__name__)

DEFAULT_GAP_TEMPLATE = " "


class FillState(Enum):
    NOT_STARTED = "not_started"
    PARTIAL = "partial"
    COMPLETE = "complete"


class Frame(Block):
    """Base class for blocks whose content is a pipe of child blocks."""

    def __init__(self, pipe: Optional[BlockPipe] = None, **kwargs):
        super().__init__(**kwargs)
        if pipe is None:
            pipe = BlockPipe(self.log_name)
        self.pipe = pipe
        self.writer = pipe.writer
        self.reader = pipe.reader
        self.fill_state = FillState.NOT_STARTED
        self._gap_size = 0.0
        self._gap_template: Optional[str] = DEFAULT_GAP_TEMPLATE
        self._gap_memo = QuillMemo()

    def write(self, block: Block) -> "Frame":
        self.writer.write(block)
        return self

    def write_all(self, blocks: Sequence[Block]) -> "Frame":
        for block in blocks:
            self.writer.write(block)
        return self

    def set_horizontal_gap(self, gap: Union[float, str]) -> "Frame":
        """Gap between children on a line: a size in points, or a template string.

        A template is measured with the quill the frame is filled with, so the
        gap follows the font ("  " gives two spaces' width).
        """
        if isinstance(gap, str):
            self._gap_template = gap
        else:
            if gap < 0:
                raise ValueError(f"Horizontal gap must not be negative, got {gap}")
            self._gap_size = float(gap)
            self._gap_template = None
        self._gap_memo.clear()
        return self

    def get_horizontal_gap(self, quill: Quill) -> float:
        if self._gap_template is None:
            return self._gap_size
        template = self._gap_template
        return self._gap_memo.get(quill, lambda q: q.string_width(template))

    def is_fill_complete(self) -> bool:
        return not self.reader.has_more()

    def measure(self, quill: Quill, layout: Layout) -> "PlacedFrame":
        if self.fill_state is FillState.COMPLETE:
            raise LayoutContractError(
                "Frame measured again after it was complete", self.log_name
            )
        state_before = self.fill_state
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s", self.pipe.describe())
        placed = super().measure(quill, layout)
        if not isinstance(placed, PlacedFrame):
            raise LayoutContractError(
                "Frame fill() must return a placement from new_placement()",
                f"{self.log_name} returned {type(placed).__name__}",
            )
        placed.state_before = state_before
        self.fill_state = FillState.COMPLETE if self.is_fill_complete() else FillState.PARTIAL
        return placed

    def new_placement(self, quill: Quill) -> "PlacedFrame":
        return PlacedFrame(self, quill)

    def accept_child(self, placed: "PlacedFrame", child: PlacedBlock, eaten: Optional[Layout] = None) -> None:
        placed.add(child)
        if logger.isEnabledFor(logging.DEBUG):
            message = f"Child {child.block.log_name} accepted, has size {int(child.width)}x{int(child.height)}"
            if eaten is not None:
                message += f", layout remaining size {int(eaten.max_width)}x{int(eaten.max_height)}"
            logger.debug("%s %s", self.log_name, message)

    def reject_child(self, child: PlacedBlock, reason: str) -> None:
        """Undo one measured child and rewind the pipe so it is read next."""
        logger.debug("%s child %s rejected, %s", self.log_name, child.block.log_name, reason)
        child.revert_to_start()
        self.reader.revert_to(child.block)

    def revert_to_first_of(self, children: List[PlacedBlock]) -> None:
        """Undo a batch of measured children, latest first, and rewind to the first."""
        if not children:
            return
        for child in reversed(children):
            child.revert_to_start()
        self.reader.revert_to(children[0].block)


class PlacedFrame(PlacedBlock):
    """Placement of a frame: the child placements accepted by one measure call."""

    __slots__ = ("children", "state_before")

    def __init__(self, block: Frame, quill: Optional[Quill] = None, width: float = 0.0, height: float = 0.0):
        super().__init__(block, quill, width, height)
        self.children: List[PlacedBlock] = []
        self.state_before = FillState.NOT_STARTED

    def __len__(self) -> int:
        return len(self.children)

    def add(self, child: PlacedBlock) -> None:
        self.children.append(child)

    def extend(self, children: Sequence[PlacedBlock]) -> None:
        self.children.extend(children)

    def render(self, canvas: "Canvas", left: float, top: float) -> None:
        self.block.draw(canvas, self, left, top)
        for child in self.children:
            child.require_positioned()
            if self.is_child_outside_bounds(child):
                logger.warning(
                    "%s: child %s at (%.1f, %.1f) size %.1fx%.1f is outside parent %.1fx%.1f",
                    self.block.log_name,
                    child.block.log_name,
                    child.left,
                    child.top,
                    child.width,
                    child.height,
                    self.width,
                    self.height,
                )
            child.render(canvas, left + child.left, top + child.top)

    def revert_to_start(self) -> None:
        frame = self.block
        first = self.children[0] if self.children else None
        while self.children:
            self.children.pop().revert_to_start()
        if first is not None:
            frame.reader.revert_to(first.block)
        frame.fill_state = self.state_before
