"""
Painters used by blocks' ``draw`` methods.

Plain functions taking a :class:`~pagequill.render.canvas.Canvas` and
layout-space coordinates. ``border``, ``cross`` and ``diagonals`` are mostly
useful when checking measured sizes by eye.
"""

from __future__ import annotations

from typing import Optional

from reportlab.lib.colors import Color

from ..engine.quill import Quill
from .canvas import Canvas


def string(canvas: Canvas, quill: Quill, text: str, left: float, top: float, height: float) -> None:
    """Draw ``text`` in a box whose top-left is (left, top) and whose height is one line."""
    baseline = top + height - quill.descent()
    old = canvas.set_fill_color(quill.color)
    canvas.draw_text(left, baseline, text, quill.font_name, quill.size)
    canvas.restore_fill_color(old)


def rect(
    canvas: Canvas,
    left: float,
    top: float,
    right: float,
    bottom: float,
    color: Optional[Color] = None,
    want_fill: bool = True,
    want_stroke: bool = False,
) -> None:
    """Rectangle given by its edges."""
    old_fill = canvas.set_fill_color(color) if want_fill else None
    old_stroke = canvas.set_stroke_color(color) if want_stroke else None
    canvas.draw_rect(left, top, right - left, bottom - top, fill=want_fill, stroke=want_stroke)
    if want_fill:
        canvas.restore_fill_color(old_fill)
    if want_stroke:
        canvas.restore_stroke_color(old_stroke)


def border(
    canvas: Canvas,
    left: float,
    top: float,
    width: float,
    height: float,
    color: Optional[Color] = None,
    inset_by: float = 0.0,
    thickness: float = 1.0,
) -> None:
    """Four filled strips just inside the box, inset by ``inset_by``."""
    inner_left = left + inset_by
    inner_top = top + inset_by
    inner_right = left + width - inset_by
    inner_bottom = top + height - inset_by
    rect(canvas, inner_left, inner_top, inner_left + thickness, inner_bottom, color)
    rect(canvas, inner_right - thickness, inner_top, inner_right, inner_bottom, color)
    rect(canvas, inner_left, inner_top, inner_right, inner_top + thickness, color)
    rect(canvas, inner_left, inner_bottom - thickness, inner_right, inner_bottom, color)


def cross(
    canvas: Canvas,
    left: float,
    top: float,
    width: float,
    height: float,
    color: Optional[Color] = None,
    thickness: float = 1.0,
) -> None:
    mid_x = left + width / 2
    mid_y = top + height / 2
    old = canvas.set_stroke_color(color)
    canvas.draw_line(mid_x, top, mid_x, top + height, thickness)
    canvas.draw_line(left, mid_y, left + width, mid_y, thickness)
    canvas.restore_stroke_color(old)


def diagonals(
    canvas: Canvas,
    left: float,
    top: float,
    width: float,
    height: float,
    color: Optional[Color] = None,
    thickness: float = 1.0,
) -> None:
    old = canvas.set_stroke_color(color)
    canvas.draw_line(left, top + height, left + width, top, thickness)
    canvas.draw_line(left, top, left + width, top + height, thickness)
    canvas.restore_stroke_color(old)
