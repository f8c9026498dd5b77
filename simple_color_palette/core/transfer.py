"""sRGB <-> linear sRGB transfer functions (per channel).

The piecewise sRGB curve and its inverse. Inputs are extended-range: values
below 0 or above 1 are not clamped, so wide-gamut colours survive a round
trip. Opacity is never passed through these functions.

The scalar functions are what the model uses. The *_array variants are numpy
versions for bulk conversion (adapters, swatch rendering) and agree with the
scalar functions element-wise.
"""

import numpy as np

SRGB_THRESHOLD = 0.04045
LINEAR_THRESHOLD = 0.0031308
_GAMMA = 2.4


def srgb_to_linear(value: float) -> float:
    """Decode one non-linear sRGB channel value to linear."""
    if value <= SRGB_THRESHOLD:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** _GAMMA


def linear_to_srgb(value: float) -> float:
    """Encode one linear channel value to non-linear sRGB."""
    if value <= LINEAR_THRESHOLD:
        return value * 12.92
    return 1.055 * value ** (1 / _GAMMA) - 0.055


def srgb_to_linear_array(values: np.ndarray) -> np.ndarray:
    """Vectorised srgb_to_linear. Returns a new float64 array."""
    arr = np.asarray(values, dtype=np.float64)
    out = arr / 12.92
    high = arr > SRGB_THRESHOLD
    out[high] = ((arr[high] + 0.055) / 1.055) ** _GAMMA
    return out


def linear_to_srgb_array(values: np.ndarray) -> np.ndarray:
    """Vectorised linear_to_srgb. Returns a new float64 array."""
    arr = np.asarray(values, dtype=np.float64)
    out = arr * 12.92
    high = arr > LINEAR_THRESHOLD
    out[high] = 1.055 * arr[high] ** (1 / _GAMMA) - 0.055
    return out
