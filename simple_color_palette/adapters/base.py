"""Adapter interface between palette colours and some other colour type.

The core never imports an adapter. Each adapter turns a "native" colour
(a tuple, a toolkit object, ...) into a Color and back:

    class MyAdapter:
        def to_core(self, native, name=None) -> Color: ...
        def from_core(self, color) -> native: ...

The helpers below lift an adapter to whole palettes and to named colour
collections (insertion-ordered dicts of name -> native colour).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Protocol, TypeVar

from simple_color_palette.core.color import Color
from simple_color_palette.core.palette import ColorPalette
from simple_color_palette.core.report import presentation_name

NativeT = TypeVar('NativeT')


class ColorAdapter(Protocol[NativeT]):
    def to_core(self, native: NativeT, name: str | None = None) -> Color: ...

    def from_core(self, color: Color) -> NativeT: ...


def palette_from_native(
    adapter: ColorAdapter[NativeT], natives: Iterable[NativeT], name: str | None = None
) -> ColorPalette:
    """Build an unnamed-colour palette from native colours, in order."""
    return ColorPalette([adapter.to_core(n) for n in natives], name=name)


def palette_to_native(adapter: ColorAdapter[NativeT], palette: ColorPalette) -> list[NativeT]:
    return [adapter.from_core(c) for c in palette.colors]


def palette_from_named(
    adapter: ColorAdapter[NativeT], named: Mapping[str, NativeT], name: str | None = None
) -> ColorPalette:
    """Build a palette from a name -> colour mapping; keys become colour names."""
    return ColorPalette([adapter.to_core(native, name=key) for key, native in named.items()], name=name)


def palette_to_named(adapter: ColorAdapter[NativeT], palette: ColorPalette) -> dict[str, NativeT]:
    """Convert to a name -> colour dict.

    Unnamed colours are keyed by their presentation name ('255 0 0',
    '0 255 0 50%'). A later colour with the same key replaces the earlier one.
    """
    named: dict[str, NativeT] = {}
    for color in palette.colors:
        key = color.name if color.name is not None else presentation_name(color.components)
        named[key] = adapter.from_core(color)
    return named
