"""Render targets and painters."""

from .canvas import Canvas, RecordingCanvas, ReportLabCanvas
from .surface import PageSurface, RecordingSurface, ReportLabSurface

__all__ = [
    "Canvas",
    "PageSurface",
    "RecordingCanvas",
    "RecordingSurface",
    "ReportLabCanvas",
    "ReportLabSurface",
]
