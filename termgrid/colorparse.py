"""Colour specifications from OSC and SGR escape sequences."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Union

_HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")
_USIZE_MASK = (1 << 64) - 1

ColorSpec = Union[bytes, bytearray, memoryview, str]


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be between 0 and 255, got {value}")


@dataclass(frozen=True)
class Rgb:
    """A true-colour value."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        _check_byte("r", self.r)
        _check_byte("g", self.g)
        _check_byte("b", self.b)


@dataclass(frozen=True)
class Indexed:
    """A colour from the 256-colour palette."""

    index: int

    def __post_init__(self) -> None:
        _check_byte("index", self.index)


AnsiColor = Union[Rgb, Indexed, str]


def _as_bytes(color: ColorSpec) -> bytes:
    if isinstance(color, str):
        return color.encode("utf-8")
    return bytes(color)


def _parse_hex(text: bytes, max_digits: int) -> Optional[int]:
    """Parse an unsigned hexadecimal number, allowing one leading ``+``."""
    digits = text[1:] if text.startswith(b"+") else text
    if not digits or any(b not in _HEX_DIGITS for b in digits):
        return None
    if len(digits.lstrip(b"0")) > max_digits:
        return None
    return int(digits, 16)


def xparse_color(color: ColorSpec) -> Optional[Rgb]:
    """Parse ``#rgb``-style or ``rgb:r/g/b``-style colour specifications."""
    data = _as_bytes(color)
    if data.startswith(b"#"):
        return parse_legacy_color(data[1:])
    if data.startswith(b"rgb:"):
        return parse_rgb_color(data[4:])
    return None


def _scale(component: bytes) -> Optional[int]:
    if len(component) > 4:
        return None
    value = _parse_hex(component, 8)
    if value is None:
        return None
    maximum = 16 ** len(component) - 1
    return (255 * value // maximum) & 0xFF


def parse_rgb_color(color: ColorSpec) -> Optional[Rgb]:
    """Parse ``r(rrr)/g(ggg)/b(bbb)``, scaling each part to 0..255."""
    data = _as_bytes(color)
    try:
        data.decode("utf-8")
    except UnicodeDecodeError:
        return None
    parts = data.split(b"/")
    if len(parts) != 3:
        return None
    scaled = [_scale(part) for part in parts]
    if any(value is None for value in scaled):
        return None
    r, g, b = scaled
    return Rgb(r, g, b)


def _legacy_component(part: bytes) -> Optional[int]:
    try:
        part.decode("utf-8")
    except UnicodeDecodeError:
        return None
    value = _parse_hex(part, 16)
    if value is None:
        return None
    shifted = (value << 4) & _USIZE_MASK
    return (shifted >> (4 * max(len(part) - 1, 0))) & 0xFF


def parse_legacy_color(color: ColorSpec) -> Optional[Rgb]:
    """Parse ``r(rrr)g(ggg)b(bbb)``, keeping two hex digits of precision."""
    data = _as_bytes(color)
    item_len = len(data) // 3
    parts = (data[:item_len], data[item_len : item_len * 2], data[item_len * 2 :])
    components = [_legacy_component(part) for part in parts]
    if any(value is None for value in components):
        return None
    r, g, b = components
    return Rgb(r, g, b)


def parse_number(data: ColorSpec) -> Optional[int]:
    """Parse a decimal number that fits in a byte; ``None`` otherwise."""
    raw = _as_bytes(data)
    if not raw or any(not 0x30 <= b <= 0x39 for b in raw):
        return None
    value = int(raw)
    return value if value <= 0xFF else None


def parse_sgr_color(params: Iterable[int]) -> Optional[AnsiColor]:
    """Parse an extended SGR colour (``2;r;g;b`` or ``5;index``).

    Consumes from ``params`` exactly the values the colour needs.
    """
    values = iter(params)

    def next_byte() -> Optional[int]:
        value = next(values, None)
        if value is None or not 0 <= value <= 0xFF:
            return None
        return value

    kind = next(values, None)
    if kind == 2:
        r = next_byte()
        if r is None:
            return None
        g = next_byte()
        if g is None:
            return None
        b = next_byte()
        if b is None:
            return None
        return Rgb(r, g, b)
    if kind == 5:
        index = next_byte()
        return None if index is None else Indexed(index)
    return None


def handle_colon_rgb(params: Sequence[int]) -> Optional[AnsiColor]:
    """Parse colon-separated SGR colour sub-parameters.

    With more than four values the second is a colour-space id and skipped.
    """
    rgb_start = 2 if len(params) > 4 else 1
    values = itertools.chain((params[0],), params[rgb_start:])
    return parse_sgr_color(values)