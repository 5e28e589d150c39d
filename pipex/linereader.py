"""Line-by-line reading from a stream in fixed-size chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

__all__ = ["LineReader", "DEFAULT_BUFFER_SIZE"]

DEFAULT_BUFFER_SIZE = 100


def _find_newline(data: AnyStr) -> int:
    """Return the index of the first newline in ``data``, or -1 if none."""
    if isinstance(data, str):
        return data.find("\n")
    return data.find(b"\n")


class LineReader(Generic[AnyStr]):
    """Read lines, each with its trailing newline, from a text or binary stream.

    Data is pulled from the stream ``buffer_size`` units at a time and what
    follows a returned line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE):
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        pending = self._pending
        while pending is None or _find_newline(pending) < 0:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._pending = None
            return None
        end = _find_newline(pending)
        if end < 0:
            self._pending = None
            return pending
        self._pending = pending[end + 1 :] or None
        return pending[: end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line