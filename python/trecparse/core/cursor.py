import io
import re
from typing import BinaryIO, List, Optional, Pattern

__all__ = ["ByteCursor", "DEFAULT_CHUNK_SIZE"]

DEFAULT_CHUNK_SIZE = 1 << 16

RE_NON_WHITESPACE = re.compile(rb"[^ \t\n\r\x0b\x0c]")
RE_NEWLINE = re.compile(rb"\n")


class ByteCursor:
    """A forward cursor over a binary stream that supports peeking and putting back bytes.

    Bytes are pulled from the stream in chunks of `chunk_size`; bytes that are put back are
    replayed before any new byte from the stream, so a failed match can always be rolled back
    exactly to the state before the attempt.
    """

    def __init__(self, stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.stream = stream
        self.chunk_size = chunk_size
        self.offset = 0

        self._buffer = bytearray()
        self._pos = 0
        self._stream_exhausted = False

    @classmethod
    def from_bytes(cls, data: bytes, chunk_size: int = DEFAULT_CHUNK_SIZE) -> "ByteCursor":
        return cls(io.BytesIO(data), chunk_size=chunk_size)

    def _fill(self) -> bool:
        """Make sure at least one unread byte is buffered; returns False at end of input."""
        if self._pos < len(self._buffer):
            return True
        if self._stream_exhausted:
            return False

        chunk = self.stream.read(self.chunk_size)
        if not chunk:
            self._stream_exhausted = True
            return False

        self._buffer = bytearray(chunk)
        self._pos = 0
        return True

    def _move_to(self, pos: int) -> None:
        self.offset += pos - self._pos
        self._pos = pos

    def at_eof(self) -> bool:
        return not self._fill()

    def peek(self) -> Optional[int]:
        if not self._fill():
            return None
        return self._buffer[self._pos]

    def get(self) -> Optional[int]:
        if not self._fill():
            return None
        ch = self._buffer[self._pos]
        self._move_to(self._pos + 1)
        return ch

    def putback(self, data: bytes) -> None:
        """Return `data` to the front of the cursor; it must be the bytes most recently consumed."""
        if not data:
            return

        size = len(data)
        if size <= self._pos and self._buffer[self._pos - size : self._pos] == data:
            self._move_to(self._pos - size)
        else:
            # the bytes were consumed from an earlier chunk; splice them back in
            self._buffer[self._pos : self._pos] = data
            self.offset -= size

    def skip_whitespace(self) -> None:
        while self._fill():
            if (m := RE_NON_WHITESPACE.search(self._buffer, self._pos)) is not None:
                self._move_to(m.start())
                return
            self._move_to(len(self._buffer))

    def read_until(self, stop: Pattern[bytes], limit: Optional[int] = None) -> bytes:
        """Consume and return bytes up to, but excluding, the first match of `stop`.

        Reading also ends at end of input, or after `limit` bytes if a limit is given.
        """
        parts: List[bytes] = []
        size = 0
        while self._fill():
            end = len(self._buffer)
            if limit is not None:
                end = min(end, self._pos + limit - size)

            m = stop.search(self._buffer, self._pos, end)
            stop_at = m.start() if m is not None else end

            parts.append(bytes(self._buffer[self._pos : stop_at]))
            size += stop_at - self._pos
            self._move_to(stop_at)

            if m is not None or (limit is not None and size >= limit):
                break

        return b"".join(parts)

    def skip_until(self, stop: Pattern[bytes]) -> bool:
        """Discard bytes up to the first match of `stop`; returns False if input ran out first."""
        while self._fill():
            if (m := stop.search(self._buffer, self._pos)) is not None:
                self._move_to(m.start())
                return True
            self._move_to(len(self._buffer))
        return False

    def peek_line(self, limit: int) -> bytes:
        """Return the rest of the current line (at most `limit` bytes) without consuming it."""
        line = self.read_until(RE_NEWLINE, limit=limit)
        self.putback(line)
        return line
