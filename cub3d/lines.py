"""Line-by-line reading of streams in fixed-size chunks."""

from __future__ import annotations

import weakref
from typing import IO, AnyStr, Generic, Iterator

BUFFER_SIZE = 10

_readers: weakref.WeakKeyDictionary = weakref.WeakKeyDictionary()


class LineReader(Generic[AnyStr]):
    """Reads lines from a text or binary stream, ``buffer_size`` units at a time.

    Each line keeps its terminating newline; the last line of a stream
    that does not end in a newline is returned as it is. Data read past
    the end of a line is kept for the next call. Reaching the end of the
    stream is not remembered: a later call reads the stream again.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    @staticmethod
    def _newline(sample: AnyStr) -> AnyStr:
        return "\n" if isinstance(sample, str) else b"\n"  # type: ignore[return-value]

    def _fill(self) -> None:
        while self._pending is None or self._newline(self._pending) not in self._pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                return
            self._pending = chunk if self._pending is None else self._pending + chunk

    def readline(self) -> AnyStr | None:
        """Return the next line, or None when no data is left."""
        try:
            self._fill()
        except BaseException:
            self._pending = None
            raise
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        end = pending.find(self._newline(pending))
        if end == -1:
            self._pending = None
            return pending
        line, rest = pending[: end + 1], pending[end + 1:]
        self._pending = rest if rest else None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.readline()) is not None:
            yield line


def get_next_line(stream: IO[AnyStr]) -> AnyStr | None:
    """Return the next line of ``stream``, keeping unread data per stream.

    Uses the default buffer size. On a read error the data held back for
    that stream is discarded and the error propagates.
    """
    reader = _readers.get(stream)
    if reader is None:
        reader = LineReader(stream)
        _readers[stream] = reader
    try:
        line = reader.readline()
    except BaseException:
        _readers.pop(stream, None)
        raise
    if line is None:
        _readers.pop(stream, None)
    return line


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of ``stream``, reading ``buffer_size`` units at a time."""
    return iter(LineReader(stream, buffer_size))