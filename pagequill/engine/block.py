"""
Blocks and placed blocks - the measure/render contract.

A :class:`Block` is a unit of content. ``measure(quill, layout)`` returns a
:class:`PlacedBlock` recording the size the block takes in the space offered;
the parent later sets the placement's offset within itself, and the render
pass paints placements with their stored quill. A single block may produce
several placements over separate measure calls (see :mod:`.frame`).
"""

from __future__ import annotations

import itertools
import logging
from typing import TYPE_CHECKING, Callable, Optional

from ..exceptions import LayoutContractError, RenderingError
from .geometry import Rect
from .layout import Alignment, Justification, Layout
from .pipe import PipeLink
from .quill import Quill

if TYPE_CHECKING:  # pragma: no cover
    from ..render.canvas import Canvas

logger = logging.getLogger(__name__)

QuillOverride = Callable[[Quill], Quill]
LayoutOverride = Callable[[Layout], Layout]

_block_ids = itertools.count()

# Rounding in justified gaps can push a child a hair past its parent.
BOUNDS_TOLERANCE = 0.01


class Block:
    """
    Base class for all content.

    Subclasses implement :meth:`fill` (measure the content against the
    already-inherited quill and layout) and usually :meth:`draw`. Restyling a
    subtree can be done either by overriding :meth:`inherit_quill` /
    :meth:`inherit_layout`, or by passing ``quill_override`` /
    ``layout_override`` callables to the constructor.
    """

    def __init__(
        self,
        *,
        name: Optional[str] = None,
        quill_override: Optional[QuillOverride] = None,
        layout_override: Optional[LayoutOverride] = None,
    ):
        self.id = next(_block_ids)
        self.name = name
        self.pipe_link = PipeLink(self)
        self._quill_override = quill_override
        self._layout_override = layout_override

    @property
    def log_name(self) -> str:
        if self.name is not None:
            return self.name
        return f"{type(self).__name__}-{self.id}"

    def __repr__(self) -> str:
        return f"<{self.log_name}>"

    def inherit_quill(self, received: Quill) -> Quill:
        if self._quill_override is not None:
            return self._quill_override(received)
        return received

    def inherit_layout(self, received: Layout) -> Layout:
        if self._layout_override is not None:
            return self._layout_override(received.copy())
        return received

    def measure(self, quill: Quill, layout: Layout) -> "PlacedBlock":
        """Measure this block in the space ``layout`` offers."""
        quill = self.inherit_quill(quill)
        layout = self.inherit_layout(layout)
        logger.debug("%s measure entering, %s", self.log_name, layout.describe())
        placed = self.fill(quill, layout)
        logger.debug(
            "%s measure leaving, size %dx%d", self.log_name, placed.width, placed.height
        )
        return placed

    def fill(self, quill: Quill, layout: Layout) -> "PlacedBlock":
        raise NotImplementedError(f"{type(self).__name__} must implement fill()")

    def draw(self, canvas: "Canvas", placed: "PlacedBlock", left: float, top: float) -> None:
        """Paint this block's own marks. ``left``/``top`` are page coordinates."""

    def is_fill_complete(self) -> bool:
        """False only while a later measure call would yield more content."""
        return True


class PlacedBlock:
    """The result of one measure call: a size, the quill used, and an offset."""

    __slots__ = ("block", "quill", "width", "height", "left", "top")

    def __init__(self, block: Block, quill: Optional[Quill] = None, width: float = 0.0, height: float = 0.0):
        self.block = block
        self.quill = quill
        self.width = float(width)
        self.height = float(height)
        self.left: Optional[float] = None
        self.top: Optional[float] = None

    def __repr__(self) -> str:
        return f"<Placed {self.block.log_name} {self.width:.1f}x{self.height:.1f}>"

    @property
    def is_positioned(self) -> bool:
        return self.left is not None and self.top is not None

    def set_dimensions(self, width: float, height: float) -> "PlacedBlock":
        if self.is_positioned:
            raise LayoutContractError("Cannot resize a placement once positioned", repr(self))
        self.width = float(width)
        self.height = float(height)
        return self

    def set_offset(self, left: float, top: float) -> None:
        """Offset of this placement within its parent's box."""
        self.left = float(left)
        self.top = float(top)

    def place_in(self, parent: "PlacedBlock", justification: Justification, alignment: Alignment) -> None:
        """Position inside ``parent`` using the parent's spare width and height."""
        self.set_offset(
            justification.offset(parent.width - self.width),
            alignment.offset(parent.height - self.height),
        )

    def render(self, canvas: "Canvas", left: float, top: float) -> None:
        """Paint at page position ``left``/``top``. Never mutates the placement."""
        self.block.draw(canvas, self, left, top)

    def revert_to_start(self) -> None:
        """Undo whatever the measure call consumed. Leaf blocks consume nothing."""

    def require_positioned(self) -> None:
        if not self.is_positioned:
            raise RenderingError("Placement rendered before being positioned", repr(self))

    def bounds(self) -> Rect:
        """Box within the parent, or at the origin if not yet positioned."""
        return Rect(self.left or 0.0, self.top or 0.0, self.width, self.height)

    def is_child_outside_bounds(self, child: "PlacedBlock") -> bool:
        return not Rect(0.0, 0.0, self.width, self.height).contains(child.bounds(), BOUNDS_TOLERANCE)
