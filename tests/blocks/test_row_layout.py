"""Tests for RowFrame."""

import pytest

from pagequill.blocks.row import RowFrame
from pagequill.blocks.stack import StackFrame
from pagequill.engine.layout import Alignment, Justification


def row_of(*blocks, gap=5):
    frame = RowFrame().set_horizontal_gap(gap)
    for block in blocks:
        frame.write(block)
    return frame


class TestRowFrame:
    """Test suite for the row layout."""

    def test_full_justification_stretches_gap(self, box, quill, layout):
        """Test 30 + 40 with a 5pt gap in 100pt spreads the spare 25pt into the gap."""
        frame = row_of(box(30, 10), box(40, 10))
        placed = frame.measure(quill, layout(100, 50))

        assert placed.width == 100
        assert [child.left for child in placed.children] == [0, 60]
        assert placed.children[1].left - placed.children[0].width == 30
        assert frame.is_fill_complete()

    def test_tight_width(self, box, quill, layout):
        """Test a width-tight row is exactly children plus gaps."""
        frame = row_of(box(30, 10), box(40, 10))
        placed = frame.measure(quill, layout(100, 50, is_width_tight=True))

        assert placed.width == 75
        assert [child.left for child in placed.children] == [0, 35]

    @pytest.mark.parametrize(
        "justification,lefts",
        [
            (Justification.LEFT, [0, 35]),
            (Justification.CENTRE, [12.5, 47.5]),
            (Justification.RIGHT, [25, 60]),
        ],
    )
    def test_group_justification(self, box, quill, layout, justification, lefts):
        """Test non-full justification shifts the children as a group."""
        frame = row_of(box(30, 10), box(40, 10))
        placed = frame.measure(quill, layout(100, 50, justification=justification))

        assert [child.left for child in placed.children] == lefts

    def test_single_child_full_justification(self, box, quill, layout):
        """Test a lone child under FULL justification stays at the left."""
        placed = row_of(box(30, 10)).measure(quill, layout(100, 50))
        assert placed.children[0].left == 0

    def test_too_wide_child_rejected(self, box, quill, layout):
        """Test a child wider than what is left is rejected and read next time."""
        first, second = box(60, 10), box(50, 10)
        frame = row_of(first, second)
        placed = frame.measure(quill, layout(100, 50))

        assert [child.block for child in placed.children] == [first]
        assert not frame.is_fill_complete()
        assert frame.reader.read() is second

    def test_exact_fit_accepted(self, box, quill, layout):
        """Test children plus gaps exactly filling the width all fit."""
        frame = row_of(box(45, 10), box(50, 10))
        placed = frame.measure(quill, layout(100, 50))

        assert len(placed) == 2
        assert placed.children[1].left + placed.children[1].width == 100

    def test_first_child_always_accepted(self, box, quill, layout):
        """Test an oversized first child is accepted and widens the row."""
        placed = row_of(box(150, 10)).measure(quill, layout(100, 50))

        assert len(placed) == 1
        assert placed.width == 150

    def test_no_splitting_accepts_wide_child(self, box, quill, layout):
        """Test with splitting disabled later children are never rejected."""
        frame = row_of(box(60, 10), box(50, 10))
        placed = frame.measure(quill, layout(100, 50, allow_splitting=False))

        assert len(placed) == 2
        assert frame.is_fill_complete()

    @pytest.mark.parametrize(
        "alignment,top",
        [(Alignment.TOP, 0), (Alignment.CENTRE, 5), (Alignment.BOTTOM, 10)],
    )
    def test_vertical_alignment(self, box, quill, layout, alignment, top):
        """Test shorter children are aligned within the row height."""
        frame = row_of(box(10, 10), box(10, 20))
        placed = frame.measure(quill, layout(100, 50, alignment=alignment))

        assert placed.height == 20
        assert placed.children[0].top == top
        assert placed.children[1].top == 0

    def test_loose_height_uses_layout_height(self, box, quill, layout):
        """Test a row that is not height-tight fills the layout height."""
        placed = row_of(box(10, 10)).measure(quill, layout(100, 50, is_height_tight=False))

        assert placed.height == 50
        assert placed.children[0].top == 40

    def test_incomplete_child_ends_row(self, box, quill, layout):
        """Test an incomplete child ends the row call."""
        inner = StackFrame(layout_override=lambda lay: lay.copy_tight(width=True))
        for _ in range(3):
            inner.write(box(10, 10))
        after = box(10, 10)
        frame = row_of(inner, after)

        placed = frame.measure(quill, layout(100, 25))

        assert [child.block for child in placed.children] == [inner]
        assert not frame.is_fill_complete()
        assert frame.reader.read() is inner
