"""
Block pipes - the rewindable streams feeding frames.

Client code rarely touches a pipe directly: ``Chapter.write`` and
``Frame.write`` append to one. Frames pull blocks from their pipe during a
measure pass with :meth:`BlockReader.read` and, when a block does not fit,
rewind with :meth:`BlockReader.revert_to`.

The pipe is a singly linked list of :class:`PipeLink` objects, one per block.
The cursor is never a fixed "next node": each link decides lazily which block
comes after it. A leaf block's successor is simply the next block written,
but a frame that still has unconsumed children resolves to itself, so a frame
split across pages is handed out again by the same pipe until it is complete.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Set

from ..exceptions import PipeContractError

if TYPE_CHECKING:  # pragma: no cover
    from .block import Block

logger = logging.getLogger(__name__)


class PipeLink:
    """Links one block to the block written after it."""

    __slots__ = ("block", "next_written", "pipe")

    def __init__(self, block: "Block"):
        self.block = block
        self.next_written: Optional["Block"] = None
        self.pipe: Optional["BlockPipe"] = None

    def set_next(self, next_block: "Block") -> None:
        if self.next_written is not None:
            raise PipeContractError(
                "Block linked into a pipe more than once", next_block.log_name
            )
        self.next_written = next_block

    def next_to_fill(self) -> Optional["Block"]:
        """The block to hand out after this link's block.

        Must not be asked until the block has been measured: until then it is
        not known whether the block is finished with.
        """
        if not self.block.is_fill_complete():
            return self.block
        return self.next_written


class _StartLink:
    """Cursor used for the first block of a pipe, and after a revert."""

    __slots__ = ("next_block",)

    def __init__(self, next_block: "Block"):
        self.next_block = next_block

    def next_to_fill(self) -> Optional["Block"]:
        return self.next_block


class BlockWriter:
    """Appends blocks to the open end of a pipe."""

    def __init__(self, pipe: "BlockPipe"):
        self._pipe = pipe
        self.is_closed = False

    def write(self, block: "Block") -> None:
        pipe = self._pipe
        if self.is_closed:
            logger.warning("Writing %s to closed pipe %s, block is dropped", block.log_name, pipe.name)
            return
        link = block.pipe_link
        if link.pipe is not None:
            raise PipeContractError(
                "Block written to more than one pipe",
                f"{block.log_name} already in {link.pipe.name}",
            )
        link.pipe = pipe
        if pipe._last_link is not None:
            pipe._last_link.set_next(block)
        else:
            pipe._cursor = _StartLink(block)
        pipe._last_link = link

    def close(self) -> None:
        self.is_closed = True


class BlockReader:
    """Reads blocks from a pipe, and rewinds it."""

    def __init__(self, pipe: "BlockPipe"):
        self._pipe = pipe

    def _peek(self) -> Optional["Block"]:
        cursor = self._pipe._cursor
        if cursor is None:
            return None
        return cursor.next_to_fill()

    def has_more(self) -> bool:
        """Whether there are more blocks in the pipe.

        Once this returns False the writer is closed, so a block written late
        is reported rather than silently never read.
        """
        if self._peek() is not None:
            return True
        self._pipe.writer.close()
        return False

    def read(self) -> Optional["Block"]:
        """Return the next block and advance the cursor past it.

        If the block is a frame with children still to come, the next read may
        return the same frame again.
        """
        pipe = self._pipe
        block = self._peek()
        if block is None:
            pipe.writer.close()
            pipe._cursor = None
            return None
        pipe._cursor = block.pipe_link
        pipe._read_ids.add(block.id)
        return block

    def revert_to(self, block: "Block") -> None:
        """Rewind so that ``block``, previously read from this pipe, is read next."""
        pipe = self._pipe
        if block.id not in pipe._read_ids:
            raise PipeContractError(
                f"Cannot revert pipe {pipe.name} to a block it never delivered", block.log_name
            )
        logger.debug("Pipe %s reverted to %s", pipe.name, block.log_name)
        pipe._cursor = _StartLink(block)


class BlockPipe:
    """Append-once, rewindable stream of blocks for one frame (or chapter)."""

    def __init__(self, name: str):
        self.name = name
        self.writer = BlockWriter(self)
        self.reader = BlockReader(self)
        self._last_link: Optional[PipeLink] = None
        self._cursor = None
        self._read_ids: Set[int] = set()

    def describe(self, limit: int = 3) -> str:
        """Log line naming the next few blocks in the pipe."""
        head = f"{type(self).__name__}-{self.name}"
        if self._cursor is None:
            return f"{head} is empty"
        block = self._cursor.next_to_fill()
        if block is None:
            return f"{head} is empty(?)"
        names = []
        while block is not None and len(names) < limit:
            names.append(block.log_name)
            block = block.pipe_link.next_written
        suffix = "  ..." if block is not None else ""
        return f"{head}, next blocks are  " + "  ".join(names) + suffix
