"""

Canvas - the render target placements paint onto.

All coordinates passed to a canvas are in layout space: origin at the
top-left of the page, y growing downwards. Each backend converts to its own
coordinate system; ReportLab's origin is the bottom-left, so
``ReportLabCanvas`` inverts y against the page height.

Colours follow a requested/actual scheme: painters request a colour and
restore the previous request afterwards, and the backend is only told about a
change when the requested colour differs from the one last applied.

"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

from reportlab.lib.colors import Color, black

logger = logging.getLogger(__name__)


class Canvas:
    """Base render target. Subclasses implement the ``_backend_*`` primitives."""

    def __init__(self, page_width: float, page_height: float):
        self.page_width = float(page_width)
        self.page_height = float(page_height)
        self._requested_fill: Optional[Color] = None
        self._actual_fill: Optional[Color] = None
        self._requested_stroke: Optional[Color] = None
        self._actual_stroke: Optional[Color] = None
        self.is_closed = False

    # -- colours -----------------------------------------------------------

    def set_fill_color(self, color: Optional[Color]) -> Optional[Color]:
        """Request a fill colour; returns the previous request for ``restore_fill_color``.

        ``None`` keeps whatever is currently requested.
        """
        old = self._requested_fill
        if color is not None:
            self._requested_fill = color
        if self._requested_fill != self._actual_fill:
            self._backend_fill_color(black if self._requested_fill is None else self._requested_fill)
            self._actual_fill = self._requested_fill
        return old

    def restore_fill_color(self, old: Optional[Color]) -> None:
        self._requested_fill = old

    def set_stroke_color(self, color: Optional[Color]) -> Optional[Color]:
        old = self._requested_stroke
        if color is not None:
            self._requested_stroke = color
        if self._requested_stroke != self._actual_stroke:
            self._backend_stroke_color(black if self._requested_stroke is None else self._requested_stroke)
            self._actual_stroke = self._requested_stroke
        return old

    def restore_stroke_color(self, old: Optional[Color]) -> None:
        self._requested_stroke = old

    # -- drawing -----------------------------------------------------------

    def draw_text(self, left: float, baseline: float, text: str, font_name: str, font_size: float) -> None:
        self._backend_text(left, baseline, text, font_name, font_size)

    def draw_rect(
        self,
        left: float,
        top: float,
        width: float,
        height: float,
        fill: bool = True,
        stroke: bool = False,
    ) -> None:
        if width < 0 or height < 0:
            logger.warning("Rectangle with negative size %.2fx%.2f at (%.2f, %.2f)", width, height, left, top)
        self._backend_rect(left, top, width, height, fill, stroke)

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, thickness: float = 1.0) -> None:
        self._backend_line(x1, y1, x2, y2, thickness)

    def close(self) -> None:
        """Finish the page. Further drawing is a caller error."""
        self.is_closed = True

    # -- backend primitives ------------------------------------------------

    def _backend_fill_color(self, color: Color) -> None:
        raise NotImplementedError

    def _backend_stroke_color(self, color: Color) -> None:
        raise NotImplementedError

    def _backend_text(self, left: float, baseline: float, text: str, font_name: str, font_size: float) -> None:
        raise NotImplementedError

    def _backend_rect(self, left: float, top: float, width: float, height: float, fill: bool, stroke: bool) -> None:
        raise NotImplementedError

    def _backend_line(self, x1: float, y1: float, x2: float, y2: float, thickness: float) -> None:
        raise NotImplementedError


class ReportLabCanvas(Canvas):
    """Paints one page onto a ``reportlab.pdfgen.canvas.Canvas``."""

    def __init__(self, pdf_canvas, page_width: float, page_height: float):
        super().__init__(page_width, page_height)
        self.pdf_canvas = pdf_canvas

    def pdf_y(self, y: float) -> float:
        return self.page_height - y

    def _backend_fill_color(self, color: Color) -> None:
        self.pdf_canvas.setFillColor(color)

    def _backend_stroke_color(self, color: Color) -> None:
        self.pdf_canvas.setStrokeColor(color)

    def _backend_text(self, left: float, baseline: float, text: str, font_name: str, font_size: float) -> None:
        self.pdf_canvas.setFont(font_name, font_size)
        self.pdf_canvas.drawString(left, self.pdf_y(baseline), text)

    def _backend_rect(self, left: float, top: float, width: float, height: float, fill: bool, stroke: bool) -> None:
        self.pdf_canvas.rect(
            left, self.pdf_y(top + height), width, height, fill=1 if fill else 0, stroke=1 if stroke else 0
        )

    def _backend_line(self, x1: float, y1: float, x2: float, y2: float, thickness: float) -> None:
        self.pdf_canvas.setLineWidth(thickness)
        self.pdf_canvas.line(x1, self.pdf_y(y1), x2, self.pdf_y(y2))

    def close(self) -> None:
        if not self.is_closed:
            self.pdf_canvas.showPage()
        super().close()


class RecordingCanvas(Canvas):
    """Records drawing operations as tuples; used for previews and tests.

    Each entry of ``operations`` is ``(kind, *args)`` with ``kind`` one of
    ``"fill_color"``, ``"stroke_color"``, ``"text"``, ``"rect"``, ``"line"``.
    """

    def __init__(self, page_width: float = 612.0, page_height: float = 792.0):
        super().__init__(page_width, page_height)
        self.operations: List[Tuple[Any, ...]] = []

    def _backend_fill_color(self, color: Color) -> None:
        self.operations.append(("fill_color", color))

    def _backend_stroke_color(self, color: Color) -> None:
        self.operations.append(("stroke_color", color))

    def _backend_text(self, left: float, baseline: float, text: str, font_name: str, font_size: float) -> None:
        self.operations.append(("text", left, baseline, text, font_name, font_size))

    def _backend_rect(self, left: float, top: float, width: float, height: float, fill: bool, stroke: bool) -> None:
        self.operations.append(("rect", left, top, width, height, fill, stroke))

    def _backend_line(self, x1: float, y1: float, x2: float, y2: float, thickness: float) -> None:
        self.operations.append(("line", x1, y1, x2, y2, thickness))

    def of_kind(self, kind: str) -> List[Tuple[Any, ...]]:
        return [op for op in self.operations if op[0] == kind]

    @property
    def texts(self) -> List[str]:
        return [op[3] for op in self.operations if op[0] == "text"]
