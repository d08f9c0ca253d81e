"""
Spacer and box leaf blocks.

Spacers take up room and paint nothing. A size may be given in points or
derived from the quill (a template string's width, a multiple of the line
height), in which case it is recomputed whenever the quill changes.
"""

from __future__ import annotations

from typing import Optional, Union

from reportlab.lib.colors import Color

from ..engine.block import Block, PlacedBlock
from ..engine.layout import Layout
from ..engine.quill import Quill, QuillMemo
from ..render import scribe


class SpacerWidth(Block):
    """Horizontal space: a width in points, or the width of a template string."""

    def __init__(self, size: Union[float, str] = " ", **kwargs):
        super().__init__(**kwargs)
        if isinstance(size, str):
            self.template: Optional[str] = size
            self.size = 0.0
        else:
            if size < 0:
                raise ValueError(f"Spacer width must not be negative, got {size}")
            self.template = None
            self.size = float(size)
        self._memo = QuillMemo()

    def get_spacer_size(self, quill: Quill) -> float:
        if self.template is None:
            return self.size
        return self._memo.get(quill, lambda q: q.string_width(self.template))

    def fill(self, quill: Quill, layout: Layout) -> PlacedBlock:
        return PlacedBlock(self, quill, self.get_spacer_size(quill), 0.0)


class SpacerHeight(Block):
    """Vertical space: points, or with ``font_multiple`` a multiple of the line height."""

    def __init__(self, size: float, font_multiple: bool = False, **kwargs):
        super().__init__(**kwargs)
        if size < 0:
            raise ValueError(f"Spacer height must not be negative, got {size}")
        self.size = float(size)
        self.font_multiple = font_multiple
        self._memo = QuillMemo()

    def get_spacer_size(self, quill: Quill) -> float:
        if not self.font_multiple:
            return self.size
        return self._memo.get(quill, lambda q: q.font_height() * self.size)

    def fill(self, quill: Quill, layout: Layout) -> PlacedBlock:
        return PlacedBlock(self, quill, 0.0, self.get_spacer_size(quill))


class SpacerFullWidth(Block):
    """Takes the whole remaining width, forcing a line break in a wrap layout."""

    def fill(self, quill: Quill, layout: Layout) -> PlacedBlock:
        return PlacedBlock(self, quill, layout.max_width, 0.0)


class RectBlock(Block):
    """A box of fixed size, filled with ``color`` when one is given."""

    def __init__(self, width: float, height: float, color: Optional[Color] = None, **kwargs):
        super().__init__(**kwargs)
        if width < 0 or height < 0:
            raise ValueError(f"Box size must not be negative, got {width}x{height}")
        self.width = float(width)
        self.height = float(height)
        self.color = color

    def fill(self, quill: Quill, layout: Layout) -> PlacedBlock:
        return PlacedBlock(self, quill, self.width, self.height)

    def draw(self, canvas, placed: PlacedBlock, left: float, top: float) -> None:
        if self.color is None:
            return
        scribe.rect(canvas, left, top, left + placed.width, top + placed.height, self.color)
