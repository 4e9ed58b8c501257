"""Read lines from a stream in fixed-size chunks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

DEFAULT_BUFFER_SIZE = 50


class LineReader(Generic[AnyStr]):
    """Return one line at a time from a text or binary stream.

    Lines keep their trailing newline; the last line may lack one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None when the stream is exhausted."""
        pending = self._pending
        while True:
            if pending is not None:
                separator = b"\n" if isinstance(pending, (bytes, bytearray)) else "\n"
                index = pending.find(separator)
                if index >= 0:
                    self._pending = pending[index + 1:]
                    return pending[: index + 1]
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._pending = None
                return pending or None
            pending = chunk if pending is None else pending + chunk

    def __iter__(self) -> Iterator[AnyStr]:
        return iter(self.read_line, None)