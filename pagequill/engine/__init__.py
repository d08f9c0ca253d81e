"""
Layout engine: pipes, blocks, frames and the contexts threaded through them.
"""

from .block import Block, PlacedBlock
from .frame import FillState, Frame, PlacedFrame
from .geometry import Margins, Rect, Size
from .layout import Alignment, Justification, Layout
from .pipe import BlockPipe, BlockReader, BlockWriter
from .quill import COURIER, FONT_FAMILIES, HELVETICA, TIMES_ROMAN, FontFamily, FontStyle, Quill
from .text_metrics import TextMetricsEngine

__all__ = [
    "Alignment",
    "Block",
    "BlockPipe",
    "BlockReader",
    "BlockWriter",
    "COURIER",
    "FONT_FAMILIES",
    "FillState",
    "FontFamily",
    "FontStyle",
    "Frame",
    "HELVETICA",
    "Justification",
    "Layout",
    "Margins",
    "PlacedBlock",
    "PlacedFrame",
    "Quill",
    "Rect",
    "Size",
    "TIMES_ROMAN",
    "TextMetricsEngine",
]
