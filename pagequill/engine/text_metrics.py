"""

TextMetricsEngine - measuring text runs for layout.

Uses ReportLab font metrics and calculates:
- horizontal extent of a string at a given font and size
- height of one line (font ascent to descent, not the specific string)
- descent below the baseline, used to place text inside its box

Results are pure for a given (font, size, text) so repeated measurement
within one document build is stable.

"""

from __future__ import annotations

import logging
from typing import Dict, Tuple

from reportlab.pdfbase import pdfmetrics

logger = logging.getLogger(__name__)


class TextMetricsEngine:
    """

    Engine for calculating text metrics.

    Widths come from ``pdfmetrics.stringWidth``; heights come from the font's
    ascent and descent so that every line set in one style has the same height,
    whatever characters it contains.

    """

    def __init__(self):
        # font name -> (line height, descent) per 1000 units of em
        self._face_cache: Dict[str, Tuple[float, float]] = {}

    def _face_metrics(self, font_name: str) -> Tuple[float, float]:
        cached = self._face_cache.get(font_name)
        if cached is not None:
            return cached
        ascent, descent = pdfmetrics.getAscentDescent(font_name)
        metrics = (float(ascent - descent), float(descent))
        self._face_cache[font_name] = metrics
        logger.debug("Cached face metrics for %s: height=%s descent=%s", font_name, *metrics)
        return metrics

    def string_width(self, text: str, font_name: str, font_size: float) -> float:
        """

        Measures the horizontal extent of text.

        Args:
        text: Text to measure
        font_name: Registered ReportLab font name
        font_size: Font size in points

        Returns:
        Width in points

        """
        if not text:
            return 0.0
        return float(pdfmetrics.stringWidth(text, font_name, font_size))

    def font_height(self, font_name: str, font_size: float) -> float:
        """Height of one line of text in points."""
        height, _ = self._face_metrics(font_name)
        return height / 1000.0 * font_size

    def descent(self, font_name: str, font_size: float) -> float:
        """Distance from the baseline down to the bottom of the line box, in points."""
        _, descent = self._face_metrics(font_name)
        return abs(descent) / 1000.0 * font_size


_default_engine = None


def default_metrics() -> TextMetricsEngine:
    """Shared engine used by quills that are not given one explicitly."""
    global _default_engine
    if _default_engine is None:
        _default_engine = TextMetricsEngine()
    return _default_engine
