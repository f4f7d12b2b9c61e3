"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

from typing import AnyStr, Generic, Iterator, IO

BUFFER_SIZE = 4096


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream.

    Lines are returned without their newline. The text after the last
    newline is always returned as a final line, even when it is empty.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError("buffer_size must be an integer")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        if not hasattr(stream, "read"):
            raise TypeError("stream must have a read method")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None
        self._finished = False

    def next_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        if self._finished:
            return None
        pieces: list[AnyStr] = []
        buffer = self._pending
        while True:
            if buffer is not None:
                newline = "\n" if isinstance(buffer, str) else b"\n"
                index = buffer.find(newline)
                if index >= 0:
                    pieces.append(buffer[:index])
                    self._pending = buffer[index + 1:]
                    return pieces[0][:0].join(pieces)
                pieces.append(buffer)
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._finished = True
                self._pending = None
                if pieces:
                    return pieces[0][:0].join(pieces)
                return chunk if chunk is not None else ""
            buffer = chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield every line of ``stream`` as :class:`LineReader` does."""
    yield from LineReader(stream)