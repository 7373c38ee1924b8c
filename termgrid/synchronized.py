"""Buffering of terminal output during synchronized updates.

A program starts a synchronized update with the DCS sequence ``ESC P = 1 s``
and ends it with ``ESC P = 2 s``. While an update is active every byte is held
back and only handed on when the update ends, times out, or the buffer fills.
"""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable, Optional

SYNC_UPDATE_TIMEOUT = 0.150
"""Seconds before a synchronized update is aborted."""

SYNC_BUFFER_SIZE = 0x20_0000
"""Maximum number of bytes held during one synchronized update (2 MiB)."""

SYNC_ESCAPE_START_LEN = 5

SYNC_START_ESCAPE_START = b"\x1bP=1s"
"""Start of the DCS sequence that begins a synchronized update."""

SYNC_END_ESCAPE_START = b"\x1bP=2s"
"""Start of the DCS sequence that ends a synchronized update."""

_ESC = 0x1B
_CANCEL_BYTES = frozenset({0x18, 0x1A, *range(0x80, 0xA0)})

ByteSink = Callable[[int], None]


class Dcs(Enum):
    """A synchronization DCS sequence waiting for its terminator."""

    SYNC_START = "sync_start"
    SYNC_END = "sync_end"


class SyncProcessor:
    """Holds bytes back while a synchronized update is active.

    ``process`` callbacks receive one byte at a time, in the order the bytes
    arrived. ``clock`` returns monotonic seconds.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        buffer_size: int = SYNC_BUFFER_SIZE,
    ) -> None:
        if buffer_size < 2:
            raise ValueError("buffer_size must be at least 2")
        self._clock = clock
        self._buffer_size = buffer_size
        self._timeout: Optional[float] = None
        self._pending_dcs: Optional[Dcs] = None
        self._buffer = bytearray()

    def begin(self) -> None:
        """Start a synchronized update, or extend the one running."""
        self._timeout = self._clock() + SYNC_UPDATE_TIMEOUT

    def advance(self, byte: int, process: ByteSink) -> None:
        """Hand ``byte`` to ``process``, or hold it if an update is active."""
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"not a byte: {byte}")
        if self._timeout is None:
            process(byte)
            return

        self._buffer.append(byte)
        if self._pending_dcs is None:
            self._advance_dcs_start()
        else:
            self._advance_dcs_end(byte, process)

    def stop_sync(self, process: ByteSink) -> None:
        """End the update, handing every held byte to ``process``."""
        held = bytes(self._buffer)
        for byte in held:
            process(byte)
        # Reset after replaying so buffered sync escapes are not acted upon.
        self._buffer.clear()
        self._timeout = None

    def sync_timeout(self) -> Optional[float]:
        """Deadline of the active update, or ``None`` when there is none."""
        return self._timeout

    def sync_bytes_count(self) -> int:
        """Number of bytes held back so far."""
        return len(self._buffer)

    def _advance_dcs_start(self) -> None:
        tail = bytes(self._buffer[-SYNC_ESCAPE_START_LEN:])
        if tail == SYNC_START_ESCAPE_START:
            self._pending_dcs = Dcs.SYNC_START
        elif (
            tail == SYNC_END_ESCAPE_START
            or len(self._buffer) >= self._buffer_size - 1
        ):
            self._pending_dcs = Dcs.SYNC_END

    def _advance_dcs_end(self, byte: int, process: ByteSink) -> None:
        if byte in _CANCEL_BYTES:
            self._pending_dcs = None
        elif byte == _ESC:
            pending, self._pending_dcs = self._pending_dcs, None
            if pending is Dcs.SYNC_START:
                self.begin()
            elif pending is Dcs.SYNC_END:
                self.stop_sync(process)