"""Grid positions, graphic character sets and boundary clamping."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum
from typing import Optional, Protocol


class Side(Enum):
    """Which half of a cell, or which way along a line."""

    LEFT = "left"
    RIGHT = "right"

    def opposite(self) -> "Side":
        """Return the other side."""
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


Direction = Side


_LINE_DRAWING = {
    "_": " ",
    "`": "◆",
    "a": "▒",
    "b": "\u2409",  # horizontal tabulation
    "c": "\u240c",  # form feed
    "d": "\u240d",  # carriage return
    "e": "\u240a",  # line feed
    "f": "°",
    "g": "±",
    "h": "\u2424",  # newline
    "i": "\u240b",  # vertical tabulation
    "j": "┘",
    "k": "┐",
    "l": "┌",
    "m": "└",
    "n": "┼",
    "o": "⎺",
    "p": "⎻",
    "q": "─",
    "r": "⎼",
    "s": "⎽",
    "t": "├",
    "u": "┤",
    "v": "┴",
    "w": "┬",
    "x": "│",
    "y": "≤",
    "z": "≥",
    "{": "π",
    "|": "≠",
    "}": "£",
    "~": "·",
}


class StandardCharset(Enum):
    """A graphic character set that can be designated to G0..G3."""

    ASCII = "ascii"
    SPECIAL_CHARACTER_AND_LINE_DRAWING = "special"

    def map(self, c: str) -> str:
        """Translate a character through this character set."""
        if self is StandardCharset.ASCII:
            return c
        return _LINE_DRAWING.get(c, c)


class CharsetIndex(IntEnum):
    """Identifiers that a graphic character set can be assigned to."""

    G0 = 0
    G1 = 1
    G2 = 2
    G3 = 3


def _default_sets() -> list:
    return [StandardCharset.ASCII] * len(CharsetIndex)


@dataclass
class Charsets:
    """The character sets currently designated to G0..G3."""

    sets: list = field(default_factory=_default_sets)

    def __getitem__(self, index: CharsetIndex) -> StandardCharset:
        return self.sets[CharsetIndex(index)]

    def __setitem__(self, index: CharsetIndex, charset: StandardCharset) -> None:
        self.sets[CharsetIndex(index)] = StandardCharset(charset)


class Boundary(Enum):
    """Region a position is clamped to."""

    CURSOR = "cursor"
    GRID = "grid"
    NONE = "none"


class Dimensions(Protocol):
    """Anything with a column count and a line count."""

    columns: int
    screen_lines: int
    total_lines: int


def _last_column(dimensions: Dimensions) -> int:
    return dimensions.columns - 1


def _topmost_line(dimensions: Dimensions) -> int:
    return -(dimensions.total_lines - dimensions.screen_lines)


def _bottommost_line(dimensions: Dimensions) -> int:
    return dimensions.screen_lines - 1


def _truncated_rem(a: int, b: int) -> int:
    """Remainder that keeps the sign of the dividend."""
    r = abs(a) % b
    return -r if a < 0 else r


@dataclass(frozen=True)
class Size:
    """Plain grid dimensions; history lines are ``total_lines - screen_lines``."""

    columns: int
    screen_lines: int
    total_lines: Optional[int] = None

    def __post_init__(self) -> None:
        if self.total_lines is None:
            object.__setattr__(self, "total_lines", self.screen_lines)
        if self.columns < 1 or self.screen_lines < 1:
            raise ValueError("a grid needs at least one column and one line")
        if self.total_lines < self.screen_lines:
            raise ValueError("total_lines cannot be smaller than screen_lines")

    def last_column(self) -> int:
        return _last_column(self)

    def topmost_line(self) -> int:
        return _topmost_line(self)

    def bottommost_line(self) -> int:
        return _bottommost_line(self)


def clamp_line(line: int, dimensions: Dimensions, boundary: Boundary) -> int:
    """Clamp a line to a grid boundary; ``NONE`` wraps around the grid."""
    top = _topmost_line(dimensions)
    bottom = _bottommost_line(dimensions)
    if boundary is Boundary.CURSOR:
        return max(0, min(bottom, line))
    if boundary is Boundary.GRID:
        return max(top, min(bottom, line))
    screen_lines = dimensions.screen_lines
    total_lines = dimensions.total_lines
    if line >= screen_lines:
        return top + _truncated_rem(line - screen_lines, total_lines)
    return bottom + _truncated_rem(line - screen_lines + 1, total_lines)


@dataclass(frozen=True, order=True)
class Pos:
    """A cell position: row (negative rows are history) and column."""

    row: int = 0
    col: int = 0

    def sub(self, dimensions: Dimensions, boundary: Boundary, rhs: int) -> "Pos":
        """Move ``rhs`` cells backwards, wrapping over line starts."""
        cols = dimensions.columns
        line_changes = max(rhs + cols - 1 - self.col, 0) // cols
        moved = Pos(self.row - line_changes, (cols + self.col - rhs % cols) % cols)
        return moved.grid_clamp(dimensions, boundary)

    def add(self, dimensions: Dimensions, boundary: Boundary, rhs: int) -> "Pos":
        """Move ``rhs`` cells forwards, wrapping over line ends."""
        cols = dimensions.columns
        moved = Pos(self.row + (rhs + self.col) // cols, (self.col + rhs) % cols)
        return moved.grid_clamp(dimensions, boundary)

    def grid_clamp(self, dimensions: Dimensions, boundary: Boundary) -> "Pos":
        """Clamp this position into the region named by ``boundary``."""
        last_column = _last_column(dimensions)
        pos = replace(self, col=min(self.col, last_column))
        top = _topmost_line(dimensions)
        bottom = _bottommost_line(dimensions)

        if boundary is Boundary.CURSOR and pos.row < 0:
            return Pos(0, 0)
        if boundary is Boundary.GRID and pos.row < top:
            return Pos(top, 0)
        if boundary in (Boundary.CURSOR, Boundary.GRID) and pos.row > bottom:
            return Pos(bottom, last_column)
        if boundary is Boundary.NONE:
            return replace(pos, row=clamp_line(pos.row, dimensions, boundary))
        return pos