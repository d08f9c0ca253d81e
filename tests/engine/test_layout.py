"""Tests for Layout, justification/alignment offsets, quills and text metrics."""

import logging
from unittest.mock import Mock

import pytest
from reportlab.lib import colors

from pagequill.engine.geometry import Margins, Rect, Size
from pagequill.engine.layout import Alignment, Justification, Layout
from pagequill.engine.quill import HELVETICA, FontStyle, Quill, QuillMemo
from pagequill.engine.text_metrics import TextMetricsEngine


class TestLayout:
    """Test suite for Layout."""

    def test_defaults(self):
        """Test a layout is full width, tight height, splitting, FULL, BOTTOM by default."""
        layout = Layout(200, 100)

        assert layout.is_width_tight is False
        assert layout.is_height_tight is True
        assert layout.allow_splitting is True
        assert layout.justification is Justification.FULL
        assert layout.alignment is Alignment.BOTTOM

    def test_copies_are_independent(self):
        """Test copy variants never modify the original."""
        layout = Layout(200, 100)
        justified = layout.copy_justified(Justification.RIGHT)
        aligned = layout.copy_aligned(Alignment.TOP)
        tight = layout.copy_tight(width=True)
        rigid = layout.copy_allow_splitting(False)

        assert justified.justification is Justification.RIGHT
        assert aligned.alignment is Alignment.TOP
        assert tight.is_width_tight and tight.is_height_tight
        assert rigid.allow_splitting is False
        assert layout == Layout(200, 100)

    def test_copy_with_none_keeps_values(self):
        """Test None arguments leave settings unchanged."""
        layout = Layout(200, 100, justification=Justification.LEFT)
        assert layout.copy_justified(None).justification is Justification.LEFT
        assert layout.copy_tight().is_width_tight is False

    def test_reduce(self):
        """Test reducing width and height."""
        layout = Layout(200, 100)
        layout.reduce_width(50)
        layout.reduce_height(30)

        assert (layout.max_width, layout.max_height) == (150, 70)

    def test_reduce_below_zero_clamps_and_warns(self, caplog):
        """Test over-reducing clamps to zero with a warning."""
        layout = Layout(10, 10)
        with caplog.at_level(logging.WARNING, logger="pagequill.engine.layout"):
            layout.reduce_height(15)

        assert layout.max_height == 0
        assert "Height reduced to below zero" in caplog.text

    def test_set_size_returns_self(self):
        """Test set_size can be chained."""
        layout = Layout(10, 10)
        assert layout.set_size(max_width=30) is layout
        assert (layout.max_width, layout.max_height) == (30, 10)

    def test_describe(self):
        """Test the diagnostic description."""
        text = Layout(200.4, 100.9, allow_splitting=False).describe()

        assert text.startswith("max size 200x100")
        assert "full width, tight height" in text
        assert "no splitting" in text


class TestOffsets:
    """Test suite for justification and alignment offsets."""

    @pytest.mark.parametrize(
        "justification,expected",
        [
            (Justification.LEFT, 0),
            (Justification.FULL, 0),
            (Justification.CENTRE, 15),
            (Justification.RIGHT, 30),
        ],
    )
    def test_justification_offset(self, justification, expected):
        """Test the left offset for 30pt of spare width."""
        assert justification.offset(30) == expected

    @pytest.mark.parametrize(
        "alignment,expected",
        [(Alignment.TOP, 0), (Alignment.CENTRE, 10), (Alignment.BOTTOM, 20)],
    )
    def test_alignment_offset(self, alignment, expected):
        """Test the top offset for 20pt of spare height."""
        assert alignment.offset(20) == expected


class TestQuill:
    """Test suite for Quill."""

    def test_default_font(self):
        """Test the default quill is Times-Roman 10pt."""
        quill = Quill()
        assert quill.font_name == "Times-Roman"
        assert quill.size == 10

    def test_styles(self):
        """Test style variants pick the right face of the family."""
        quill = Quill(family=HELVETICA)

        assert quill.bold().font_name == "Helvetica-Bold"
        assert quill.italic().font_name == "Helvetica-Oblique"
        assert quill.bold_italic().font_name == "Helvetica-BoldOblique"
        assert quill.bold().plain().font_name == "Helvetica"

    def test_immutable_copies(self):
        """Test derived quills leave the original alone."""
        quill = Quill()
        bigger = quill.with_size(14)
        coloured = quill.copy(color=colors.red, style=FontStyle.ITALIC)

        assert quill.size == 10
        assert bigger.size == 14
        assert coloured.color == colors.red and coloured.style is FontStyle.ITALIC
        assert quill == Quill()

    def test_non_positive_size_rejected(self):
        """Test a quill must have a positive size."""
        with pytest.raises(ValueError):
            Quill(size=0)

    def test_metrics_scale_with_size(self):
        """Test widths, heights and descents are proportional to the size."""
        small = Quill()
        large = small.with_size(20)

        assert large.string_width("Scale") == pytest.approx(2 * small.string_width("Scale"))
        assert large.font_height() == pytest.approx(2 * small.font_height())
        assert large.descent() == pytest.approx(2 * small.descent())
        assert 0 < small.descent() < small.font_height()


class TestQuillMemo:
    """Test suite for QuillMemo."""

    def test_recomputes_only_for_new_quill(self):
        """Test the memo hits for equal quills and misses for different ones."""
        memo = QuillMemo()
        compute = Mock(side_effect=lambda q: q.size * 2)

        assert memo.get(Quill(), compute) == 20
        assert memo.get(Quill(), compute) == 20
        assert compute.call_count == 1

        assert memo.get(Quill(size=12), compute) == 24
        assert compute.call_count == 2

    def test_clear(self):
        """Test clearing forces a recompute."""
        memo = QuillMemo()
        compute = Mock(return_value=1)
        memo.get(Quill(), compute)
        memo.clear()
        memo.get(Quill(), compute)

        assert compute.call_count == 2


class TestTextMetricsEngine:
    """Test suite for TextMetricsEngine."""

    def test_empty_string_has_no_width(self):
        """Test the empty string measures zero."""
        assert TextMetricsEngine().string_width("", "Helvetica", 12) == 0

    def test_monospace_width(self):
        """Test Courier characters are 0.6 em wide."""
        engine = TextMetricsEngine()
        assert engine.string_width("abcd", "Courier", 10) == pytest.approx(24)

    def test_line_height_covers_ascent_and_descent(self):
        """Test the line height is at least the font size for a standard font."""
        engine = TextMetricsEngine()
        assert engine.font_height("Helvetica", 10) >= 10 * 0.9
        assert engine.descent("Helvetica", 10) > 0


class TestGeometry:
    """Test suite for geometry helpers."""

    def test_rect_edges(self):
        """Test rects built from edges."""
        rect = Rect.from_edges(10, 20, 40, 60)
        assert (rect.width, rect.height, rect.right, rect.bottom) == (30, 40, 40, 60)

    def test_contains_with_tolerance(self):
        """Test containment allows a small tolerance."""
        outer = Rect(0, 0, 100, 100)
        assert outer.contains(Rect(10, 10, 20, 20))
        assert not outer.contains(Rect(90, 0, 10.005, 10))
        assert outer.contains(Rect(90, 0, 10.005, 10), tolerance=0.01)

    def test_margins(self):
        """Test margin totals."""
        margins = Margins(top=10, bottom=20, left=5, right=15)
        assert margins.horizontal == 20
        assert margins.vertical == 30
        assert Margins.uniform(36).left == 36

    def test_size_from_tuple(self):
        """Test sizes from pairs."""
        assert Size.from_tuple((612, 792)) == Size(612, 792)
