"""Bridges between palette colours and other colour representations.

Nothing in simple_color_palette.core imports from here.
"""

from simple_color_palette.adapters.arrays import palette_from_array, palette_to_array
from simple_color_palette.adapters.base import (
    ColorAdapter,
    palette_from_named,
    palette_from_native,
    palette_to_named,
    palette_to_native,
)
from simple_color_palette.adapters.pillow import PillowAdapter, render_swatch
from simple_color_palette.adapters.resolved import ResolvedAdapter

__all__ = [
    'ColorAdapter',
    'PillowAdapter',
    'ResolvedAdapter',
    'palette_from_array',
    'palette_from_named',
    'palette_from_native',
    'palette_to_array',
    'palette_to_named',
    'palette_to_native',
    'render_swatch',
]
