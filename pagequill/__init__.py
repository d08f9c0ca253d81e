"""
PageQuill - pagination and layout of block content into PDF pages.

Content is written as blocks into frames; a chapter measures the content
page by page, splitting frames that do not fit and continuing them on the
next page, then paints each page through a canvas.

Quick Start:
    from pagequill import PdfDocument, WrapFrame

    document = PdfDocument()
    paragraph = WrapFrame()
    paragraph.write_words("The quick brown fox jumps over the lazy dog.")
    document.write(paragraph)
    document.write_file("output.pdf")
"""

from .version import __version__, __version_info__

from .exceptions import (
    LayoutContractError,
    LayoutError,
    PageQuillError,
    PipeContractError,
    RenderingError,
    RunawayLayoutError,
)
from .config import PageConfig
from .engine import (
    Alignment,
    Block,
    BlockPipe,
    FillState,
    Frame,
    Justification,
    Layout,
    Margins,
    PlacedBlock,
    PlacedFrame,
    Quill,
    Size,
)
from .blocks import (
    RectBlock,
    RowFrame,
    SpacerFullWidth,
    SpacerHeight,
    SpacerWidth,
    StackFrame,
    StringBlock,
    StringBlockBold,
    TableBlock,
    WrapFrame,
)
from .document import Chapter, Page, PdfDocument

__all__ = [
    "__version__",
    "__version_info__",
    "Alignment",
    "Block",
    "BlockPipe",
    "Chapter",
    "FillState",
    "Frame",
    "Justification",
    "Layout",
    "LayoutContractError",
    "LayoutError",
    "Margins",
    "Page",
    "PageConfig",
    "PageQuillError",
    "PdfDocument",
    "PipeContractError",
    "PlacedBlock",
    "PlacedFrame",
    "Quill",
    "RectBlock",
    "RenderingError",
    "RowFrame",
    "RunawayLayoutError",
    "Size",
    "SpacerFullWidth",
    "SpacerHeight",
    "SpacerWidth",
    "StackFrame",
    "StringBlock",
    "StringBlockBold",
    "TableBlock",
    "WrapFrame",
]
