"""
Page surfaces - hand out one canvas per page.

The page driver asks its surface for a fresh canvas at the start of every
page and closes it when the page is drawn. ``ReportLabSurface`` writes a PDF
file; ``RecordingSurface`` keeps every page's recorded operations in memory.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

from reportlab.pdfgen import canvas as pdf_canvas

from ..engine.geometry import Size
from .canvas import Canvas, RecordingCanvas, ReportLabCanvas

logger = logging.getLogger(__name__)


class PageSurface:
    """Source of per-page canvases."""

    def begin_page(self, size: Size) -> Canvas:
        raise NotImplementedError

    def end_page(self, canvas: Canvas) -> None:
        canvas.close()

    def finish(self) -> None:
        """Called once after the last page."""


class ReportLabSurface(PageSurface):
    def __init__(self, output_path: Union[str, Path]):
        self.output_path = Path(output_path)
        self._pdf = None
        self.page_count = 0

    def begin_page(self, size: Size) -> Canvas:
        if self._pdf is None:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            self._pdf = pdf_canvas.Canvas(str(self.output_path), pagesize=(size.width, size.height))
        else:
            self._pdf.setPageSize((size.width, size.height))
        self.page_count += 1
        return ReportLabCanvas(self._pdf, size.width, size.height)

    def finish(self) -> None:
        if self._pdf is None:
            # No content: still produce a valid single blank page.
            self._pdf = pdf_canvas.Canvas(str(self.output_path))
        self._pdf.save()
        logger.info("Wrote %d page(s) to %s", self.page_count, self.output_path)


class RecordingSurface(PageSurface):
    def __init__(self):
        self.pages: List[RecordingCanvas] = []
        self.is_finished = False

    def begin_page(self, size: Size) -> Canvas:
        canvas = RecordingCanvas(size.width, size.height)
        self.pages.append(canvas)
        return canvas

    def finish(self) -> None:
        self.is_finished = True
