"""Read, write and edit Simple Color Palette (.color-palette) files.

A palette is an ordered list of optionally named colours plus an optional
palette name. Colours are stored as extended linear sRGB and written as JSON
with 4-decimal, ties-to-even rounding:

    from simple_color_palette import Color, ColorPalette, Components

    palette = ColorPalette(
        [
            Color.from_components(Components(1, 0, 0), name='Red'),
            Color.from_components(Components(0, 1, 0), name='Green'),
        ],
        name='Traffic Lights',
    )
    palette.save('Traffic Lights.color-palette')
    loaded = ColorPalette.load('Traffic Lights.color-palette')
"""

from simple_color_palette.core.color import Color
from simple_color_palette.core.components import Components, parse_hex
from simple_color_palette.core.errors import InvalidComponentCountError, MalformedDocumentError, PaletteError
from simple_color_palette.core.numeric import DECIMAL_PLACES, clamp, round_to_places
from simple_color_palette.core.palette import CONTENT_TYPE, FILE_EXTENSION, ColorPalette
from simple_color_palette.core.transfer import linear_to_srgb, srgb_to_linear

__all__ = [
    'CONTENT_TYPE',
    'DECIMAL_PLACES',
    'FILE_EXTENSION',
    'Color',
    'ColorPalette',
    'Components',
    'InvalidComponentCountError',
    'MalformedDocumentError',
    'PaletteError',
    'clamp',
    'linear_to_srgb',
    'parse_hex',
    'round_to_places',
    'srgb_to_linear',
]
