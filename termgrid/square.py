"""Terminal grid cells: content, colours, attribute flags and rare extras."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field, replace
from enum import IntFlag
from typing import Any, Optional, Sequence

FOREGROUND = "foreground"
BACKGROUND = "background"


class Flags(IntFlag):
    """Attribute bits of a cell."""

    INVERSE = 0b0000_0000_0000_0001
    BOLD = 0b0000_0000_0000_0010
    ITALIC = 0b0000_0000_0000_0100
    BOLD_ITALIC = 0b0000_0000_0000_0110
    UNDERLINE = 0b0000_0000_0000_1000
    WRAPLINE = 0b0000_0000_0001_0000
    WIDE_CHAR = 0b0000_0000_0010_0000
    WIDE_CHAR_SPACER = 0b0000_0000_0100_0000
    DIM = 0b0000_0000_1000_0000
    DIM_BOLD = 0b0000_0000_1000_0010
    HIDDEN = 0b0000_0001_0000_0000
    STRIKEOUT = 0b0000_0010_0000_0000
    LEADING_WIDE_CHAR_SPACER = 0b0000_0100_0000_0000
    DOUBLE_UNDERLINE = 0b0000_1000_0000_0000
    UNDERCURL = 0b0001_0000_0000_0000
    DOTTED_UNDERLINE = 0b0010_0000_0000_0000
    DASHED_UNDERLINE = 0b0100_0000_0000_0000
    ALL_UNDERLINES = (
        UNDERLINE | DOUBLE_UNDERLINE | UNDERCURL | DOTTED_UNDERLINE | DASHED_UNDERLINE
    )


_EMPTY_BLOCKERS = (
    Flags.INVERSE
    | Flags.ALL_UNDERLINES
    | Flags.STRIKEOUT
    | Flags.WRAPLINE
    | Flags.WIDE_CHAR_SPACER
    | Flags.LEADING_WIDE_CHAR_SPACER
)

_hyperlink_ids = itertools.count()


@dataclass(frozen=True)
class Hyperlink:
    """A hyperlink attached to cells."""

    id: str
    uri: str

    @classmethod
    def make(cls, id: Any, uri: str) -> "Hyperlink":
        """Create a hyperlink; without an id a unique one is generated."""
        link_id = f"{next(_hyperlink_ids)}_rio" if id is None else str(id)
        return cls(link_id, uri)


@dataclass(frozen=True)
class CellExtra:
    """Rarely set cell attributes, shared between copies until changed."""

    zerowidth: tuple = ()
    underline_color: Any = None
    hyperlink: Optional[Hyperlink] = None


@dataclass
class Square:
    """Content and attributes of a single grid cell."""

    c: str = " "
    fg: Any = FOREGROUND
    bg: Any = BACKGROUND
    extra: Optional[CellExtra] = None
    flags: Flags = field(default_factory=lambda: Flags(0))

    @classmethod
    def from_background(cls, color: Any) -> "Square":
        """A blank cell with the given background colour."""
        return cls(bg=color)

    def zerowidth(self) -> Optional[tuple]:
        """Zero-width characters on this cell; ``None`` without extra storage."""
        return None if self.extra is None else self.extra.zerowidth

    def push_zerowidth(self, character: str) -> None:
        """Append a zero-width character to this cell."""
        extra = self.extra or CellExtra()
        self.extra = replace(extra, zerowidth=extra.zerowidth + (character,))

    def clear_wide(self) -> None:
        """Turn a wide character cell back into a blank one."""
        self.flags &= ~Flags.WIDE_CHAR
        if self.extra is not None:
            self.extra = replace(self.extra, zerowidth=())
        self.c = " "

    def set_underline_color(self, color: Any) -> None:
        """Set the underline colour; ``None`` drops unneeded extra storage."""
        extra = self.extra
        if color is None and (
            extra is None or (not extra.zerowidth and extra.hyperlink is None)
        ):
            self.extra = None
        else:
            self.extra = replace(extra or CellExtra(), underline_color=color)

    def underline_color(self) -> Any:
        return None if self.extra is None else self.extra.underline_color

    def set_hyperlink(self, hyperlink: Optional[Hyperlink]) -> None:
        """Set the hyperlink; ``None`` drops unneeded extra storage."""
        extra = self.extra
        if hyperlink is None and (
            extra is None or (not extra.zerowidth and extra.underline_color is None)
        ):
            self.extra = None
        else:
            self.extra = replace(extra or CellExtra(), hyperlink=hyperlink)

    def hyperlink(self) -> Optional[Hyperlink]:
        return None if self.extra is None else self.extra.hyperlink

    def is_empty(self) -> bool:
        """Whether the cell shows nothing and carries no visible attributes."""
        return (
            self.c in (" ", "\t")
            and not self.flags & _EMPTY_BLOCKERS
            and (self.extra is None or not self.extra.zerowidth)
        )

    def reset(self, template: "Square") -> None:
        """Blank this cell, keeping only the template's background."""
        self.c = " "
        self.fg = FOREGROUND
        self.bg = template.bg
        self.extra = None
        self.flags = Flags(0)


def line_length(row: Sequence[Square]) -> int:
    """Number of occupied columns in a row."""
    if not row:
        return 0
    if row[-1].flags & Flags.WRAPLINE:
        return len(row)
    for index, cell in enumerate(reversed(row)):
        if cell.c != " " or (cell.extra is not None and cell.extra.zerowidth):
            return len(row) - index
    return 0