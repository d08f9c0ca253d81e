"""
Layout - the constraint context threaded through a measure pass.

A Layout stores the maximum size still available plus the sizing and
placement parameters for the content being measured. Parents pass copies to
their children; a frame narrows a private working copy (its "eaten" layout)
as children are accepted. A Layout received from a parent must never be
modified in place.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class Justification(Enum):
    """Horizontal placement of content within spare width."""

    LEFT = "left"
    CENTRE = "centre"
    RIGHT = "right"
    FULL = "full"

    def offset(self, slack: float) -> float:
        """Offset of content from the left edge, given the spare width.

        FULL places a single item like LEFT; spreading slack across gaps is
        the job of the flow that owns the gaps.
        """
        if self is Justification.RIGHT:
            return slack
        if self is Justification.CENTRE:
            return slack / 2
        return 0.0


class Alignment(Enum):
    """Vertical placement of content within spare height."""

    TOP = "top"
    CENTRE = "centre"
    BOTTOM = "bottom"

    @property
    def drop_factor(self) -> float:
        if self is Alignment.TOP:
            return 0.0
        if self is Alignment.CENTRE:
            return 0.5
        return 1.0

    def offset(self, slack: float) -> float:
        return slack * self.drop_factor


@dataclass(slots=True)
class Layout:
    max_width: float
    max_height: float
    # Width defaults to the full space available, height to tight around content.
    is_width_tight: bool = False
    is_height_tight: bool = True
    allow_splitting: bool = True
    justification: Justification = Justification.FULL
    alignment: Alignment = Alignment.BOTTOM

    def copy(self) -> "Layout":
        return replace(self)

    def copy_justified(self, justification: Optional[Justification]) -> "Layout":
        layout = replace(self)
        if justification is not None:
            layout.justification = justification
        return layout

    def copy_aligned(self, alignment: Optional[Alignment]) -> "Layout":
        layout = replace(self)
        if alignment is not None:
            layout.alignment = alignment
        return layout

    def copy_tight(self, width: Optional[bool] = None, height: Optional[bool] = None) -> "Layout":
        return replace(self).set_tight(width, height)

    def set_tight(self, width: Optional[bool] = None, height: Optional[bool] = None) -> "Layout":
        if width is not None:
            self.is_width_tight = width
        if height is not None:
            self.is_height_tight = height
        return self

    def copy_allow_splitting(self, allow_splitting: bool) -> "Layout":
        layout = replace(self)
        layout.allow_splitting = allow_splitting
        return layout

    def set_size(self, max_width: Optional[float] = None, max_height: Optional[float] = None) -> "Layout":
        if max_width is not None:
            self.max_width = max_width
        if max_height is not None:
            self.max_height = max_height
        return self

    def reduce_width(self, reduce_by: float) -> None:
        self.max_width -= reduce_by
        if self.max_width < 0:
            logger.warning("Width reduced to below zero (%.2f), set to zero", self.max_width)
            self.max_width = 0.0

    def reduce_height(self, reduce_by: float) -> None:
        self.max_height -= reduce_by
        if self.max_height < 0:
            logger.warning("Height reduced to below zero (%.2f), set to zero", self.max_height)
            self.max_height = 0.0

    def describe(self) -> str:
        """One-line description for diagnostics."""
        if self.is_width_tight:
            tightness = "tight width&height" if self.is_height_tight else "tight width, full height"
        else:
            tightness = "full width, tight height" if self.is_height_tight else "full width&height"
        splitting = "allow splitting" if self.allow_splitting else "no splitting"
        return (
            f"max size {int(self.max_width)}x{int(self.max_height)}, "
            f"alignment {self.alignment.value}, justification {self.justification.value}, "
            f"{tightness}, {splitting}"
        )
