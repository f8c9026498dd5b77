"""numpy bridge: palettes as (N, 4) float arrays of red, green, blue, opacity.

linear=True (the default) exchanges the stored linear components. With
linear=False the RGB columns are non-linear sRGB, converted with the
vectorised transfer functions; opacity is the same in both.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from simple_color_palette.core.color import Color
from simple_color_palette.core.components import Components
from simple_color_palette.core.palette import ColorPalette
from simple_color_palette.core.transfer import linear_to_srgb_array, srgb_to_linear_array


def palette_to_array(palette: ColorPalette, linear: bool = True) -> np.ndarray:
    """Return an (N, 4) float64 array; (0, 4) for an empty palette."""
    arr = np.array([list(c.linear_components) for c in palette.colors], dtype=np.float64).reshape(-1, 4)
    if not linear:
        arr[:, :3] = linear_to_srgb_array(arr[:, :3])
    return arr


def palette_from_array(
    array: np.ndarray,
    names: Sequence[str | None] | None = None,
    linear: bool = True,
    name: str | None = None,
) -> ColorPalette:
    """Build a palette from an (N, 3) or (N, 4) array. Missing opacity means 1."""
    arr = np.asarray(array, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] not in (3, 4):
        raise ValueError(f'expected an (N, 3) or (N, 4) array, got shape {arr.shape}')
    if names is not None and len(names) != arr.shape[0]:
        raise ValueError(f'got {len(names)} names for {arr.shape[0]} colours')

    rgb = arr[:, :3] if linear else srgb_to_linear_array(arr[:, :3])
    opacity = arr[:, 3] if arr.shape[1] == 4 else np.ones(arr.shape[0])

    colors = []
    for i in range(arr.shape[0]):
        components = Components(float(rgb[i, 0]), float(rgb[i, 1]), float(rgb[i, 2]), float(opacity[i]))
        colors.append(Color(components, name=names[i] if names is not None else None))
    return ColorPalette(colors, name=name)
