"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

BUFFER_SIZE = 20


class LineReader(Generic[AnyStr]):
    """Return successive lines, each ending in a newline if it had one.

    Works with text and binary streams; the stream is read ``buffer_size``
    units at a time and only as far as needed for the next line.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._buffer: Optional[AnyStr] = None

    def _newline(self) -> AnyStr:
        return b"\n" if isinstance(self._buffer, (bytes, bytearray)) else "\n"  # type: ignore[return-value]

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream has no more data."""
        while self._buffer is None or self._newline() not in self._buffer:
            chunk = self._stream.read(self._buffer_size)
            if self._buffer is None:
                self._buffer = chunk[:0]
            if not chunk:
                break
            self._buffer += chunk
        buffer = self._buffer
        if not buffer:
            return None
        end = buffer.find(self._newline())
        if end < 0:
            self._buffer = buffer[:0]
            return buffer
        self._buffer = buffer[end + 1:]
        return buffer[: end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of ``stream``, keeping the line endings."""
    yield from LineReader(stream, buffer_size)