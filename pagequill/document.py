"""
Chapter and document - the page driver.

Client code writes blocks to a :class:`Chapter` and then calls
:meth:`Chapter.make_pages`. Each page gets a fresh root frame bound to the
chapter's pipe, is measured against the page's content area, placed at the
margins and drawn. The loop runs until the pipe is empty, or until the page
count guard decides the content will never finish.

The page frame, layout and quill can be customised per page either by
overriding ``new_page_frame`` / ``new_page_layout`` / ``new_page_quill`` or by
passing factories to the constructor; each receives the previous page so
running state can be carried forward.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable, List, Optional, Union

from .blocks.stack import StackFrame
from .config import PageConfig
from .engine.block import Block
from .engine.frame import Frame, PlacedFrame
from .engine.layout import Layout
from .engine.pipe import BlockPipe
from .engine.quill import Quill
from .exceptions import LayoutContractError, RunawayLayoutError
from .render.canvas import Canvas
from .render.surface import PageSurface, ReportLabSurface

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Page:
    """Everything used to make one page, and the resulting placement."""

    number: int
    frame: Frame
    layout: Layout
    quill: Quill
    placement: Optional[PlacedFrame] = None


PageFrameFactory = Callable[[BlockPipe, Optional[Page]], Frame]
PageLayoutFactory = Callable[[PageConfig, Optional[Page]], Layout]
PageQuillFactory = Callable[[Optional[Page]], Quill]


class Chapter:
    """A run of pages filled from one pipe."""

    def __init__(
        self,
        config: Optional[PageConfig] = None,
        *,
        page_frame_factory: Optional[PageFrameFactory] = None,
        page_layout_factory: Optional[PageLayoutFactory] = None,
        page_quill_factory: Optional[PageQuillFactory] = None,
        name: str = "document",
    ):
        if config is None:
            config = PageConfig()
        # Setters below change this copy, never the caller's config.
        self.config = replace(config, page_size=replace(config.page_size), margins=replace(config.margins))
        self.pipe = BlockPipe(name)
        self.pages: List[Page] = []
        self.current_page: Optional[Page] = None
        self._page_frame_factory = page_frame_factory
        self._page_layout_factory = page_layout_factory
        self._page_quill_factory = page_quill_factory

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def write(self, block: Block) -> "Chapter":
        self.pipe.writer.write(block)
        return self

    def set_margins(
        self,
        left: Optional[float] = None,
        top: Optional[float] = None,
        right: Optional[float] = None,
        bottom: Optional[float] = None,
    ) -> "Chapter":
        margins = self.config.margins
        if left is not None:
            margins.left = float(left)
        if top is not None:
            margins.top = float(top)
        if right is not None:
            margins.right = float(right)
        if bottom is not None:
            margins.bottom = float(bottom)
        return self

    def set_max_page_count(self, max_page_count: Optional[int]) -> "Chapter":
        """Limit on pages made before giving up; ``None`` removes the limit."""
        if max_page_count is not None and max_page_count < 1:
            raise ValueError(f"max_page_count must be at least 1, got {max_page_count}")
        self.config.max_page_count = max_page_count
        return self

    # -- per-page hooks ----------------------------------------------------

    def new_page_frame(self, pipe: BlockPipe, prev_page: Optional[Page]) -> Frame:
        if self._page_frame_factory is not None:
            return self._page_frame_factory(pipe, prev_page)
        return StackFrame(pipe)

    def new_page_layout(self, config: PageConfig, prev_page: Optional[Page]) -> Layout:
        if self._page_layout_factory is not None:
            return self._page_layout_factory(config, prev_page)
        return Layout(config.content_width, config.content_height)

    def new_page_quill(self, prev_page: Optional[Page]) -> Quill:
        if self._page_quill_factory is not None:
            return self._page_quill_factory(prev_page)
        return self.config.default_quill()

    def new_page(self, prev_page: Optional[Page]) -> Page:
        frame = self.new_page_frame(self.pipe, prev_page)
        if frame.pipe is not self.pipe:
            raise LayoutContractError(
                "Page frame must be built on the pipe passed to new_page_frame()",
                f"{frame.log_name} uses {frame.pipe.name}",
            )
        layout = self.new_page_layout(self.config, prev_page)
        quill = self.new_page_quill(prev_page)
        return Page(self.page_count + 1, frame, layout, quill)

    # -- driver ------------------------------------------------------------

    def make_pages(self, surface: Optional[PageSurface] = None) -> List[Page]:
        """
        Fill and draw pages until the pipe is empty.

        Args:
            surface: Receives one canvas per page; with None pages are only measured

        Returns:
            The pages made by this call

        Raises:
            RunawayLayoutError: the content needs more than ``max_page_count`` pages
        """
        self.pipe.writer.close()
        made: List[Page] = []
        max_page_count = self.config.max_page_count
        while self.pipe.reader.has_more():
            if max_page_count is not None and self.page_count >= max_page_count:
                raise RunawayLayoutError(max_page_count, self.page_count + 1)
            page = self.new_page(self.current_page)
            self.pages.append(page)
            self.current_page = page
            made.append(page)
            logger.info("Created page %d, frame is %s", page.number, page.frame.log_name)

            placement = page.frame.measure(page.quill, page.layout)
            margins = self.config.margins
            placement.set_offset(margins.left, margins.top)
            page.placement = placement
            if surface is not None:
                canvas = surface.begin_page(self.config.page_size)
                self.draw_page(canvas, page)
                surface.end_page(canvas)
        if surface is not None:
            surface.finish()
        return made

    def draw_page(self, canvas: Canvas, page: Page) -> None:
        placement = page.placement
        placement.render(canvas, placement.left, placement.top)


class PdfDocument(Chapter):
    """A chapter written to a PDF file through ReportLab."""

    def write_file(self, output_path: Union[str, Path]) -> List[Page]:
        surface = ReportLabSurface(output_path)
        return self.make_pages(surface)
