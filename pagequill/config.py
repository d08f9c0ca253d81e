"""
Page configuration.

``PageConfig`` holds what the page driver needs to make a page: the page
size, the margins, the runaway guard and the default font. Page sizes can be
given by ReportLab name ("A4", "LETTER", "LEGAL") or as a width/height pair.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping, Optional, Union

from reportlab.lib import pagesizes

from .engine.geometry import Margins, Size
from .engine.quill import DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE, FONT_FAMILIES, FontFamily, Quill

DEFAULT_PAGE_SIZE = Size(*pagesizes.LETTER)
DEFAULT_MARGIN = 36.0
DEFAULT_MAX_PAGE_COUNT = 1000

PAGE_SIZE_NAMES = ("A3", "A4", "A5", "LETTER", "LEGAL")


def resolve_page_size(value: Union[str, Size, Any]) -> Size:
    """Page size from a ReportLab name, a Size, or a (width, height) pair."""
    if isinstance(value, Size):
        return Size(value.width, value.height)
    if isinstance(value, str):
        name = value.strip().upper()
        if name not in PAGE_SIZE_NAMES:
            raise ValueError(f"Unknown page size {value!r}, expected one of {', '.join(PAGE_SIZE_NAMES)}")
        return Size(*getattr(pagesizes, name))
    try:
        size = Size.from_tuple(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Page size must be a name or a (width, height) pair, got {value!r}") from exc
    if size.width <= 0 or size.height <= 0:
        raise ValueError(f"Page size must be positive, got {size.width}x{size.height}")
    return size


def resolve_margins(value: Union[float, Margins, Mapping[str, float]]) -> Margins:
    """Margins from a single number, a Margins, or a mapping of sides."""
    if isinstance(value, Margins):
        return value
    if isinstance(value, Mapping):
        unknown = set(value) - {"top", "bottom", "left", "right"}
        if unknown:
            raise ValueError(f"Unknown margin side(s): {', '.join(sorted(unknown))}")
        return Margins(**{side: float(size) for side, size in value.items()})
    return Margins.uniform(float(value))


@dataclass
class PageConfig:
    """Configuration for page creation."""

    page_size: Size = field(default_factory=lambda: Size(DEFAULT_PAGE_SIZE.width, DEFAULT_PAGE_SIZE.height))
    margins: Margins = field(default_factory=lambda: Margins.uniform(DEFAULT_MARGIN))
    max_page_count: Optional[int] = DEFAULT_MAX_PAGE_COUNT  # None disables the guard
    font_family: FontFamily = DEFAULT_FONT_FAMILY
    font_size: float = DEFAULT_FONT_SIZE

    def __post_init__(self):
        if self.max_page_count is not None and self.max_page_count < 1:
            raise ValueError(f"max_page_count must be at least 1, got {self.max_page_count}")
        if self.font_size <= 0:
            raise ValueError(f"font_size must be positive, got {self.font_size}")

    @property
    def content_width(self) -> float:
        """Page width minus left and right margins."""
        return max(0.0, self.page_size.width - self.margins.horizontal)

    @property
    def content_height(self) -> float:
        """Page height minus top and bottom margins."""
        return max(0.0, self.page_size.height - self.margins.vertical)

    def default_quill(self) -> Quill:
        return Quill(family=self.font_family, size=self.font_size)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PageConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown page config key(s): {', '.join(sorted(unknown))}")
        kwargs: Dict[str, Any] = dict(data)
        if "page_size" in kwargs:
            kwargs["page_size"] = resolve_page_size(kwargs["page_size"])
        if "margins" in kwargs:
            kwargs["margins"] = resolve_margins(kwargs["margins"])
        if isinstance(kwargs.get("font_family"), str):
            name = kwargs["font_family"].lower()
            if name not in FONT_FAMILIES:
                raise ValueError(f"Unknown font family {kwargs['font_family']!r}")
            kwargs["font_family"] = FONT_FAMILIES[name]
        if "font_size" in kwargs:
            kwargs["font_size"] = float(kwargs["font_size"])
        return cls(**kwargs)
