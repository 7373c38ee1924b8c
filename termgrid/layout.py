"""Window layout: how many rows and columns fit, and where the mouse points."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field
from typing import Tuple

from termgrid.event import ClickState
from termgrid.pos import Pos, Side

MIN_COLUMNS = 2
MIN_VISIBLE_ROWS = 1

PADDING_X = 10.0
PADDING_Y = 50.0

_TABS_X = 80.0
_TABS_Y = 8.0

_U32_MAX = 0xFFFF_FFFF


def _to_unsigned(value: float, limit: int = (1 << 64) - 1) -> int:
    """Truncate a float to an unsigned integer, saturating at the bounds."""
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value) or value >= limit:
        return limit
    return int(value)


@dataclass
class Style:
    """Where text is drawn and at which scale."""

    screen_position: Tuple[float, float] = (0.0, 0.0)
    bounds: Tuple[float, float] = (0.0, 0.0)
    text_scale: float = 0.0


@dataclass
class Styles:
    """Styles for the terminal area and for the tab bar."""

    term: Style = field(default_factory=Style)
    tabs: Style = field(default_factory=Style)


@dataclass
class AccumulatedScroll:
    """Scroll still to be performed along each axis."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Mouse:
    """Mouse state of a window, in pixels and button states."""

    multiplier: float = 3.0
    left_button_pressed: bool = False
    middle_button_pressed: bool = False
    right_button_pressed: bool = False
    last_click_timestamp: float = field(default_factory=time.monotonic)
    last_click_button: str = "left"
    click_state: ClickState = ClickState.NONE
    accumulated_scroll: AccumulatedScroll = field(default_factory=AccumulatedScroll)
    square_side: Side = Side.LEFT
    lines_scrolled: float = 0.0
    inside_text_area: bool = False
    x: int = 0
    y: int = 0


class Layout:
    """Size of a window and the grid that fits in it."""

    def __init__(
        self, width: float, height: float, scale_factor: float, font_size: float
    ) -> None:
        self.width = float(width)
        self.height = float(height)
        self.width_u32 = _to_unsigned(self.width, _U32_MAX)
        self.height_u32 = _to_unsigned(self.height, _U32_MAX)
        self.columns = 80
        self.rows = 25
        self.scale_factor = float(scale_factor)
        self.font_size = float(font_size)
        self.mouse = Mouse()
        self.styles = Styles()
        self._padding_x = PADDING_X
        self._padding_y = PADDING_Y
        self._update_styles()

    @property
    def screen_lines(self) -> int:
        return self.rows

    @property
    def total_lines(self) -> int:
        return self.rows

    def _update_styles(self) -> None:
        scale = self.scale_factor
        bounds = (self.width * scale, self.height * scale)
        text_scale = self.font_size * scale
        self.styles = Styles(
            term=Style(
                screen_position=(self._padding_x * scale, self._padding_y * scale),
                bounds=bounds,
                text_scale=text_scale,
            ),
            tabs=Style(
                screen_position=(_TABS_X * scale, _TABS_Y * scale),
                bounds=bounds,
                text_scale=text_scale,
            ),
        )

    def padding(self) -> Tuple[float, float]:
        """Scaled padding, rounded down to whole pixels."""
        return (
            float(math.floor(self._padding_x * self.scale_factor)),
            float(math.floor(self._padding_y * self.scale_factor)),
        )

    def set_scale(self, scale_factor: float) -> "Layout":
        self.scale_factor = float(scale_factor)
        return self

    def set_size(self, width: int, height: int) -> "Layout":
        self.width_u32 = width
        self.height_u32 = height
        self.width = float(width)
        self.height = float(height)
        return self

    def update(self) -> "Layout":
        """Recompute the styles from the current size and scale."""
        self._update_styles()
        return self

    def reset_mouse(self) -> None:
        self.mouse.accumulated_scroll = AccumulatedScroll()

    def mouse_position(self, display_offset: int) -> Pos:
        """Grid cell under the mouse, taking the scroll offset into account."""
        text_scale = _to_unsigned(self.styles.term.text_scale) + 1
        col = max(self.mouse.x - int(PADDING_X), 0) // _to_unsigned(self.font_size)
        col = min(col, self.columns)

        line = max(self.mouse.y - int(PADDING_Y), 0) // text_scale
        line = min(line, self.rows - 1)

        return Pos(line - display_offset, col)

    def compute(self) -> Tuple[int, int]:
        """Work out and store how many columns and rows fit; return both."""
        padding_x, padding_y = self.padding()
        rows = (self.height - padding_y) / self.scale_factor
        rows /= self.font_size
        visible_rows = max(_to_unsigned(rows), MIN_VISIBLE_ROWS)

        columns = (self.width - 2.0 * padding_x) / self.scale_factor
        columns /= self.font_size / 2.0
        visible_columns = max(_to_unsigned(columns), MIN_COLUMNS)

        self.columns = visible_columns
        self.rows = visible_rows
        return visible_columns, visible_rows