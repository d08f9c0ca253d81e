"""
Pytest configuration for PageQuill
"""

import logging
import sys

import pytest

from pagequill.blocks.spacers import RectBlock
from pagequill.engine.block import Block, PlacedBlock
from pagequill.engine.layout import Layout
from pagequill.engine.quill import Quill
from pagequill.render.canvas import RecordingCanvas


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid handlers leaking between tests."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    package_logger = logging.getLogger("pagequill")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter("%(name)s - %(levelname)s - %(message)s"))
    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


class EndlessBlock(Block):
    """Always measures ``width`` x ``height`` and never reports itself complete."""

    def __init__(self, width: float, height: float, **kwargs):
        super().__init__(**kwargs)
        self.width = width
        self.height = height
        self.measure_count = 0

    def fill(self, quill, layout):
        self.measure_count += 1
        return PlacedBlock(self, quill, self.width, self.height)

    def is_fill_complete(self) -> bool:
        return False


@pytest.fixture
def quill():
    """Default quill: Times-Roman 10pt."""
    return Quill()


@pytest.fixture
def canvas():
    """Canvas recording every drawing operation."""
    return RecordingCanvas()


@pytest.fixture
def box():
    """Factory for fixed-size leaf blocks."""

    def make(width: float, height: float, **kwargs) -> RectBlock:
        return RectBlock(width, height, **kwargs)

    return make


@pytest.fixture
def endless_block():
    """Factory for blocks that never finish."""

    def make(width: float, height: float) -> EndlessBlock:
        return EndlessBlock(width, height)

    return make


@pytest.fixture
def layout():
    """Factory for layouts; keyword arguments override the defaults."""

    def make(max_width: float = 100.0, max_height: float = 100.0, **kwargs) -> Layout:
        return Layout(max_width, max_height, **kwargs)

    return make
