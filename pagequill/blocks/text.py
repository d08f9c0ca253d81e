"""Text leaf blocks."""

from __future__ import annotations

from typing import Tuple

from ..engine.block import Block, PlacedBlock
from ..engine.layout import Layout
from ..engine.quill import Quill, QuillMemo
from ..render import scribe

LOG_NAME_TEXT_LENGTH = 8


class StringBlock(Block):
    """
    One run of text on one line, no padding and no line breaks.

    The height is the font's line height rather than the height of this
    particular string, so runs on the same line (and separate lines) come out
    even. The baseline sits one descent above the bottom of the box.
    """

    def __init__(self, text: str, **kwargs):
        super().__init__(**kwargs)
        self.text = text
        self._size_memo = QuillMemo()

    @property
    def log_name(self) -> str:
        if len(self.text) > LOG_NAME_TEXT_LENGTH:
            excerpt = self.text[:LOG_NAME_TEXT_LENGTH] + ".."
        else:
            excerpt = self.text
        return f"{super().log_name}'{excerpt}'"

    def _measure_text(self, quill: Quill) -> Tuple[float, float]:
        return quill.string_width(self.text), quill.font_height()

    def fill(self, quill: Quill, layout: Layout) -> PlacedBlock:
        width, height = self._size_memo.get(quill, self._measure_text)
        return PlacedBlock(self, quill, width, height)

    def draw(self, canvas, placed: PlacedBlock, left: float, top: float) -> None:
        scribe.string(canvas, placed.quill, self.text, left, top, placed.height)


class StringBlockBold(StringBlock):
    """A StringBlock always set in the bold face of the received family."""

    def inherit_quill(self, received: Quill) -> Quill:
        return super().inherit_quill(received).bold()
