"""Tests for BlockPipe reading, writing and reverting."""

import logging

import pytest

from pagequill.blocks.stack import StackFrame
from pagequill.engine.pipe import BlockPipe
from pagequill.exceptions import LayoutContractError, PipeContractError


class TestBlockPipe:
    """Test suite for BlockPipe."""

    def test_reads_blocks_in_write_order(self, box):
        """Test blocks come out in the order they were written."""
        pipe = BlockPipe("test")
        blocks = [box(10, 10) for _ in range(3)]
        for block in blocks:
            pipe.writer.write(block)

        read = []
        while pipe.reader.has_more():
            read.append(pipe.reader.read())

        assert read == blocks
        assert pipe.reader.read() is None

    def test_empty_pipe(self):
        """Test an empty pipe has nothing and closes its writer."""
        pipe = BlockPipe("empty")

        assert pipe.reader.has_more() is False
        assert pipe.writer.is_closed
        assert pipe.reader.read() is None

    def test_has_more_does_not_consume(self, box):
        """Test has_more only peeks."""
        pipe = BlockPipe("test")
        block = box(10, 10)
        pipe.writer.write(block)

        assert pipe.reader.has_more()
        assert pipe.reader.has_more()
        assert pipe.reader.read() is block

    def test_write_after_end_of_stream_is_dropped(self, box, caplog):
        """Test writing once the reader has seen the end logs a warning and drops the block."""
        pipe = BlockPipe("late")
        pipe.writer.write(box(10, 10))
        pipe.reader.read()
        assert pipe.reader.has_more() is False

        with caplog.at_level(logging.WARNING):
            pipe.writer.write(box(5, 5))

        assert "closed pipe" in caplog.text
        assert pipe.reader.has_more() is False

    def test_explicit_close(self, box, caplog):
        """Test an explicitly closed writer drops further blocks."""
        pipe = BlockPipe("closed")
        pipe.writer.close()
        with caplog.at_level(logging.WARNING):
            pipe.writer.write(box(5, 5))

        assert pipe.reader.has_more() is False
        assert "dropped" in caplog.text

    def test_revert_to_earlier_block(self, box):
        """Test revert_to makes the given block the next one read."""
        pipe = BlockPipe("test")
        first, second, third = box(1, 1), box(2, 2), box(3, 3)
        for block in (first, second, third):
            pipe.writer.write(block)

        pipe.reader.read()
        pipe.reader.read()
        pipe.reader.revert_to(first)

        assert pipe.reader.read() is first
        assert pipe.reader.read() is second
        assert pipe.reader.read() is third

    def test_revert_to_last_read_block(self, box):
        """Test reverting to the block just read re-delivers it."""
        pipe = BlockPipe("test")
        first, second = box(1, 1), box(2, 2)
        pipe.writer.write(first)
        pipe.writer.write(second)

        pipe.reader.read()
        pipe.reader.read()
        pipe.reader.revert_to(second)

        assert pipe.reader.has_more()
        assert pipe.reader.read() is second

    def test_revert_to_unread_block_fails(self, box):
        """Test reverting to a block never delivered is a contract violation."""
        pipe = BlockPipe("test")
        first, second = box(1, 1), box(2, 2)
        pipe.writer.write(first)
        pipe.writer.write(second)
        pipe.reader.read()

        with pytest.raises(PipeContractError):
            pipe.reader.revert_to(second)

    def test_revert_to_block_from_other_pipe_fails(self, box):
        """Test reverting to a block read from a different pipe fails fast."""
        pipe = BlockPipe("one")
        other = BlockPipe("two")
        block = box(1, 1)
        other.writer.write(block)
        other.reader.read()

        with pytest.raises(PipeContractError):
            pipe.reader.revert_to(block)

    def test_pipe_contract_error_is_layout_contract_error(self, box):
        """Test pipe errors can be caught as layout contract errors."""
        pipe = BlockPipe("test")
        with pytest.raises(LayoutContractError):
            pipe.reader.revert_to(box(1, 1))

    def test_block_in_two_pipes_fails(self, box):
        """Test a block can only belong to one pipe."""
        block = box(1, 1)
        BlockPipe("one").writer.write(block)

        with pytest.raises(PipeContractError):
            BlockPipe("two").writer.write(block)

    def test_incomplete_frame_is_read_again(self, box, quill, layout):
        """Test a frame with unconsumed children is handed out again before its successor."""
        pipe = BlockPipe("outer")
        inner = StackFrame()
        for _ in range(3):
            inner.write(box(10, 10))
        after = box(5, 5)
        pipe.writer.write(inner)
        pipe.writer.write(after)

        assert pipe.reader.read() is inner
        inner.measure(quill, layout(100, 15))
        assert not inner.is_fill_complete()

        assert pipe.reader.read() is inner
        placed = inner.measure(quill, layout(100, 100))
        assert len(placed) == 2
        assert inner.is_fill_complete()

        assert pipe.reader.read() is after
        assert not pipe.reader.has_more()

    def test_describe(self, box):
        """Test describe names the next blocks."""
        pipe = BlockPipe("document")
        assert pipe.describe() == "BlockPipe-document is empty"

        blocks = [box(1, 1, name=f"b{index}") for index in range(4)]
        for block in blocks:
            pipe.writer.write(block)

        description = pipe.describe(limit=3)
        assert description.startswith("BlockPipe-document, next blocks are")
        assert "b0" in description and "b2" in description
        assert "b3" not in description
        assert description.endswith("...")
