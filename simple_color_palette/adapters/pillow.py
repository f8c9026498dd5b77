"""Pillow bridge: 8-bit (r, g, b, a) tuples in non-linear sRGB.

to_core also accepts any colour string PIL.ImageColor understands
('#ff0000', 'rgb(255, 0, 0)', 'red', ...). from_core clamps each channel to
0-255, so extended-range values do not survive this adapter.

render_swatch draws a palette as a grid of solid cells.
"""

from __future__ import annotations

import math

import numpy as np
from PIL import Image, ImageColor

from simple_color_palette.adapters.arrays import palette_to_array
from simple_color_palette.core.color import Color
from simple_color_palette.core.components import Components
from simple_color_palette.core.palette import ColorPalette

PillowColor = tuple[int, int, int, int]


def _to_byte(value: float) -> int:
    return min(255, max(0, round(value * 255)))


class PillowAdapter:
    def to_core(self, native: str | tuple[int, ...], name: str | None = None) -> Color:
        """Convert a Pillow colour (tuple or colour string) to a Color.

        Raises ValueError for strings ImageColor cannot parse and for tuples
        that are not 3 or 4 long.
        """
        rgba = ImageColor.getrgb(native) if isinstance(native, str) else tuple(native)
        if len(rgba) not in (3, 4):
            raise ValueError(f'expected an RGB or RGBA tuple, got {native!r}')
        alpha = rgba[3] if len(rgba) == 4 else 255
        components = Components(rgba[0] / 255, rgba[1] / 255, rgba[2] / 255, alpha / 255)
        return Color.from_components(components, name=name)

    def from_core(self, color: Color) -> PillowColor:
        srgb = color.components
        return (_to_byte(srgb.red), _to_byte(srgb.green), _to_byte(srgb.blue), _to_byte(srgb.opacity))


def render_swatch(palette: ColorPalette, size: int = 64, columns: int = 8) -> Image.Image:
    """Render the palette as an RGBA image, `columns` cells of `size` px per row.

    An empty palette gives a single transparent cell.
    """
    if size < 1 or columns < 1:
        raise ValueError('size and columns must be positive')
    srgb = palette_to_array(palette, linear=False)
    cells = np.clip(np.rint(srgb * 255), 0, 255).astype(np.uint8)

    count = len(cells)
    cols = min(columns, count) or 1
    rows = math.ceil(count / cols) or 1
    canvas = np.zeros((rows * size, cols * size, 4), dtype=np.uint8)
    for index, rgba in enumerate(cells):
        row, col = divmod(index, cols)
        canvas[row * size : (row + 1) * size, col * size : (col + 1) * size] = rgba
    return Image.fromarray(canvas)
