"""Input-method state: whether it is on and the current preedit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from wcwidth import wcwidth


def _char_width(ch: str) -> int:
    width = wcwidth(ch)
    return 1 if width < 0 else width


@dataclass
class Preedit:
    """Preedit text with an optional cursor.

    ``cursor_byte_offset`` is a UTF-8 byte offset into ``text``; ``None`` means
    the cursor is invisible. ``cursor_end_offset`` is the cursor's distance from
    the end of the text in cell widths.
    """

    text: str = ""
    cursor_byte_offset: Optional[int] = None
    cursor_end_offset: Optional[int] = None

    @classmethod
    def create(cls, text: str, cursor_byte_offset: Optional[int]) -> "Preedit":
        """Build a preedit, computing the cursor's offset from the end."""
        if cursor_byte_offset is None:
            return cls(text, None, None)
        encoded = text.encode("utf-8")
        if not 0 <= cursor_byte_offset <= len(encoded):
            raise ValueError(f"byte offset {cursor_byte_offset} is outside the text")
        try:
            tail = encoded[cursor_byte_offset:].decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValueError(
                f"byte offset {cursor_byte_offset} is not on a character boundary"
            ) from exc
        end_offset = sum(_char_width(ch) for ch in tail)
        return cls(text, cursor_byte_offset, end_offset)


@dataclass
class Ime:
    """IME state of a window."""

    enabled: bool = False
    preedit: Optional[Preedit] = None

    def set_enabled(self, enabled: bool) -> None:
        """Turn the IME on, or off and drop all of its state."""
        if enabled:
            self.enabled = True
        else:
            self.enabled = False
            self.preedit = None

    def set_preedit(self, preedit: Optional[Preedit]) -> None:
        self.preedit = preedit