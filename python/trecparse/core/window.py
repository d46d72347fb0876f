from typing import BinaryIO, Optional

from ..schemas.base import BaseSchema
from ..schemas.web import WebSchema
from .data_types import Exhausted, Result
from .errors import TrecConfigError
from .lexer import DOC_END

__all__ = ["BufferedWindow", "DEFAULT_BATCH_SIZE"]

DEFAULT_BATCH_SIZE = 10000


class BufferedWindow:
    """Reads envelopes from a stream in fixed-size batches and parses them from memory.

    The window keeps the unconsumed tail of what it has read so far. To produce a record it
    looks for the first `</DOC>` in that tail, reading more batches until one shows up, and
    hands everything up to and including the tag to the schema's slice parser. Consumed bytes
    are released by moving a start offset; the buffer is compacted once the dead prefix
    outgrows the live part, so peak memory stays around one batch plus the largest envelope.
    """

    def __init__(
        self,
        stream: BinaryIO,
        batch_size: int = DEFAULT_BATCH_SIZE,
        schema: Optional[BaseSchema] = None,
    ):
        if batch_size < 1:
            raise TrecConfigError(f"batch_size must be positive, got {batch_size}")

        schema = schema or WebSchema()
        if not schema.buffered:
            raise TrecConfigError(f"{schema.__class__.__name__} cannot be read through a buffered window")

        self.stream = stream
        self.batch_size = batch_size
        self.schema = schema
        self.offset = 0

        self._buffer = bytearray()
        self._start = 0
        self._stream_exhausted = False

    @property
    def buffered_size(self) -> int:
        """Number of bytes read from the stream but not consumed yet."""
        return len(self._buffer) - self._start

    def __call__(self) -> Result:
        return self.read_record()

    def read_record(self) -> Result:
        if (boundary := self._read_enough()) is None:
            return Exhausted()
        result = self.schema.parse(self._buffer, self._start, boundary)
        self._consume(boundary)
        return result

    def _read_batch(self) -> bool:
        if self._stream_exhausted:
            return False
        batch = self.stream.read(self.batch_size)
        if not batch:
            self._stream_exhausted = True
            return False
        self._buffer += batch
        return True

    def _read_enough(self) -> Optional[int]:
        """Buffer at least one complete envelope; returns the offset right after its `</DOC>`.

        Returns None if the stream ends before another `</DOC>` shows up.
        """
        tag_size = len(DOC_END)
        pos = self._buffer.find(DOC_END, self._start)
        while pos < 0:
            old_size = self.buffered_size
            if not self._read_batch():
                return None
            # only the bytes that could complete a tag straddling the old end need a second look
            anchor = self._start + max(old_size, tag_size) - tag_size
            pos = self._buffer.find(DOC_END, anchor)
        return pos + tag_size

    def _consume(self, boundary: int) -> None:
        self.offset += boundary - self._start
        self._start = boundary
        if self._start >= len(self._buffer) - self._start:
            del self._buffer[: self._start]
            self._start = 0
