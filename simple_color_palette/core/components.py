"""Colour components: red, green, blue and opacity as floats.

Rules:
  - red/green/blue are extended range and never clamped.
  - opacity is clamped to 0...1 whenever it is assigned, including in __init__.
  - All four are rounded to DECIMAL_PLACES when constructed. Later arithmetic
    (c.red += 0.1) keeps full precision; the codec rounds again on encode.

Hex parsing lives here too. It returns None for anything it cannot read, so
callers decide whether a bad hex string is an error.
"""

from __future__ import annotations

import copy
import re
from collections.abc import Iterator
from dataclasses import dataclass

from simple_color_palette.core.numeric import DECIMAL_PLACES, clamp, round_to_places

_HEX_RE = re.compile(r'#?([0-9a-fA-F]*)')


@dataclass
class Components:
    """RGB + opacity tuple. Whether the values are linear depends on the owner.

    Mutable, so not hashable; `tuple(components)` gives a hashable key.
    """

    red: float
    green: float
    blue: float
    opacity: float = 1.0

    def __post_init__(self) -> None:
        self.red = round_to_places(self.red, DECIMAL_PLACES)
        self.green = round_to_places(self.green, DECIMAL_PLACES)
        self.blue = round_to_places(self.blue, DECIMAL_PLACES)
        self.opacity = round_to_places(self.opacity, DECIMAL_PLACES)

    def __setattr__(self, name: str, value: float) -> None:
        if name == 'opacity':
            value = clamp(value, 0.0, 1.0)
        super().__setattr__(name, value)

    def __iter__(self) -> Iterator[float]:
        yield self.red
        yield self.green
        yield self.blue
        yield self.opacity

    @property
    def is_opaque(self) -> bool:
        return self.opacity == 1

    def copy(self) -> Components:
        """Independent copy. Values are taken as-is, not re-rounded."""
        return copy.copy(self)

    @classmethod
    def from_hex(cls, value: str | int) -> Components | None:
        """Parse a hex string or integer as non-linear sRGB. See parse_hex."""
        return parse_hex(value)


def parse_hex(value: str | int) -> Components | None:
    """Parse a hex colour into non-linear sRGB components.

    Strings: optional '#', then 3 (RGB), 4 (RGBA), 6 (RRGGBB) or 8 (RRGGBBAA)
    hex digits, any case. Short forms repeat each digit ('F00' == 'FF0000').

    Integers are read by magnitude:
        0x0       ... 0xFFF        RGB, 4 bits per channel
        0x1000    ... 0xFFFF       RGBA, 4 bits per channel
        0x10000   ... 0xFFFFFF     RGB, 8 bits per channel
        0x1000000 ... 0xFFFFFFFF   RGBA, 8 bits per channel

    Returns None for any other input.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return _parse_hex_int(value)
    if isinstance(value, str):
        return _parse_hex_str(value)
    return None


def _parse_hex_str(text: str) -> Components | None:
    m = _HEX_RE.fullmatch(text)
    if not m:
        return None
    digits = m.group(1)
    if len(digits) in (3, 4):
        digits = ''.join(ch * 2 for ch in digits)
    if len(digits) not in (6, 8):
        return None
    channels = [int(digits[i : i + 2], 16) / 255 for i in range(0, len(digits), 2)]
    return Components(*channels)


def _parse_hex_int(number: int) -> Components | None:
    if number < 0 or number > 0xFFFFFFFF:
        return None
    if number <= 0xFFF:
        return _split_channels(number, count=3, bits=4)
    if number <= 0xFFFF:
        return _split_channels(number, count=4, bits=4)
    if number <= 0xFFFFFF:
        return _split_channels(number, count=3, bits=8)
    return _split_channels(number, count=4, bits=8)


def _split_channels(number: int, count: int, bits: int) -> Components:
    """Split `number` into `count` channels of `bits` width, most significant first."""
    mask = (1 << bits) - 1
    channels = [((number >> (bits * shift)) & mask) / mask for shift in reversed(range(count))]
    return Components(*channels)
