"""Queue of byte chunks waiting to be written to a non-blocking writer."""

from __future__ import annotations

from collections import deque
from typing import Deque, Optional, Protocol, Union

Buffer = Union[bytes, bytearray, memoryview]


class Writer(Protocol):
    """Anything with a ``write`` that may accept only part of the data."""

    def write(self, data: bytes) -> Optional[int]: ...


class _Writing:
    """A chunk being written and how much of it has gone out."""

    __slots__ = ("source", "written")

    def __init__(self, source: bytes) -> None:
        self.source = source
        self.written = 0

    def advance(self, n: int) -> None:
        self.written += n

    def remaining(self) -> bytes:
        return self.source[self.written :]

    def finished(self) -> bool:
        return self.written >= len(self.source)


class WriteQueue:
    """Chunks of output kept in order until the writer takes them."""

    def __init__(self) -> None:
        self._pending: Deque[bytes] = deque()
        self._current: Optional[_Writing] = None

    def push(self, data: Buffer) -> None:
        """Queue ``data`` behind everything already waiting."""
        chunk = bytes(data)
        if chunk:
            self._pending.append(chunk)

    def needs_write(self) -> bool:
        """Whether any bytes are still waiting to be written."""
        return self._current is not None or bool(self._pending)

    def _next(self) -> None:
        self._current = _Writing(self._pending.popleft()) if self._pending else None

    def write_to(self, writer: Writer) -> int:
        """Write as much as ``writer`` accepts; return the number of bytes written.

        Writing stops when the writer accepts nothing or would block; the
        unwritten rest stays queued. Other ``OSError``s propagate, and the
        unwritten rest also stays queued.
        """
        if self._current is None:
            self._next()

        total = 0
        while self._current is not None:
            current = self._current
            try:
                n = writer.write(current.remaining())
            except (BlockingIOError, InterruptedError):
                break
            if not n:
                break
            current.advance(n)
            total += n
            if current.finished():
                self._next()
        return total