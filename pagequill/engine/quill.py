"""
Quill - the style context threaded through a measure pass.

A Quill carries font family, style, size and colour. It is immutable: every
``copy``/``bold``/``with_size`` call returns a new Quill, so a subtree can be
restyled without affecting its siblings. Two quills with the same values
compare equal, which is what measurement memos key on.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Optional

from reportlab.lib.colors import Color

from .text_metrics import TextMetricsEngine, default_metrics


class FontStyle(Enum):
    PLAIN = "plain"
    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold_italic"


@dataclass(frozen=True, slots=True)
class FontFamily:
    """The four ReportLab font names making up one family."""

    name: str
    plain: str
    bold: str
    italic: str
    bold_italic: str

    def font_for(self, style: FontStyle) -> str:
        if style is FontStyle.BOLD:
            return self.bold
        if style is FontStyle.ITALIC:
            return self.italic
        if style is FontStyle.BOLD_ITALIC:
            return self.bold_italic
        return self.plain


TIMES_ROMAN = FontFamily("times", "Times-Roman", "Times-Bold", "Times-Italic", "Times-BoldItalic")
HELVETICA = FontFamily(
    "helvetica", "Helvetica", "Helvetica-Bold", "Helvetica-Oblique", "Helvetica-BoldOblique"
)
COURIER = FontFamily("courier", "Courier", "Courier-Bold", "Courier-Oblique", "Courier-BoldOblique")

FONT_FAMILIES = {family.name: family for family in (TIMES_ROMAN, HELVETICA, COURIER)}

DEFAULT_FONT_FAMILY = TIMES_ROMAN
DEFAULT_FONT_STYLE = FontStyle.PLAIN
DEFAULT_FONT_SIZE = 10.0


@dataclass(frozen=True, slots=True)
class Quill:
    family: FontFamily = DEFAULT_FONT_FAMILY
    style: FontStyle = DEFAULT_FONT_STYLE
    size: float = DEFAULT_FONT_SIZE
    color: Optional[Color] = None
    metrics: TextMetricsEngine = field(default_factory=default_metrics, compare=False, repr=False)

    def __post_init__(self):
        if self.size <= 0:
            raise ValueError(f"Font size must be positive, got {self.size}")

    @property
    def font_name(self) -> str:
        return self.family.font_for(self.style)

    def copy(
        self,
        family: Optional[FontFamily] = None,
        style: Optional[FontStyle] = None,
        size: Optional[float] = None,
        color: Optional[Color] = None,
    ) -> "Quill":
        """Copy with any non-None argument overriding the current value."""
        return replace(
            self,
            family=family if family is not None else self.family,
            style=style if style is not None else self.style,
            size=float(size) if size is not None else self.size,
            color=color if color is not None else self.color,
        )

    def plain(self) -> "Quill":
        return replace(self, style=FontStyle.PLAIN)

    def bold(self) -> "Quill":
        return replace(self, style=FontStyle.BOLD)

    def italic(self) -> "Quill":
        return replace(self, style=FontStyle.ITALIC)

    def bold_italic(self) -> "Quill":
        return replace(self, style=FontStyle.BOLD_ITALIC)

    def with_size(self, size: float) -> "Quill":
        return replace(self, size=float(size))

    def with_color(self, color: Optional[Color]) -> "Quill":
        return replace(self, color=color)

    def string_width(self, text: str) -> float:
        return self.metrics.string_width(text, self.font_name, self.size)

    def font_height(self) -> float:
        return self.metrics.font_height(self.font_name, self.size)

    def descent(self) -> float:
        return self.metrics.descent(self.font_name, self.size)


class QuillMemo:
    """Remembers one measurement for the last quill it was computed with.

    Quills compare by value, so an equal quill built elsewhere still hits.
    """

    __slots__ = ("_quill", "_value")

    def __init__(self):
        self._quill: Optional[Quill] = None
        self._value = None

    def get(self, quill: Quill, compute: Callable[[Quill], Any]) -> Any:
        if self._quill is None or quill != self._quill:
            self._value = compute(quill)
            self._quill = quill
        return self._value

    def clear(self) -> None:
        self._quill = None
        self._value = None
