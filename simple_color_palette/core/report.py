"""Report builder: text and JSON views of a palette for people and scripts."""

import json
import math
import os
from typing import Any

from simple_color_palette.core.components import Components
from simple_color_palette.core.numeric import clamp
from simple_color_palette.core.palette import ColorPalette


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def presentation_name(components: Components) -> str:
    """Display name for an unnamed colour: 'R G B' or 'R G B A%'.

    `components` are non-linear sRGB. Channels are shown as 0-255 integers
    and opacity as a whole percentage, which is only shown below 100%.
    """
    red = _round_half_away(components.red * 0xFF)
    green = _round_half_away(components.green * 0xFF)
    blue = _round_half_away(components.blue * 0xFF)
    opacity = _round_half_away(clamp(components.opacity, 0.0, 1.0) * 100)
    if opacity < 100:
        return f'{red} {green} {blue} {opacity}%'
    return f'{red} {green} {blue}'


def _fmt(components: Components) -> str:
    values = [f'{v:.4f}' for v in components]
    return ' '.join(values)


def format_text(palette: ColorPalette, path: str | None = None) -> str:
    """Format palette as human-readable text."""
    lines = []
    title = palette.name if palette.name is not None else '(unnamed)'
    header = f'color-palette: {title} ({len(palette.colors)} colours)'
    if path:
        header += f' \u2014 {os.path.basename(path)}'
    lines.append(header)
    lines.append('')

    for index, color in enumerate(palette.colors):
        srgb = color.components
        label = color.name if color.name is not None else presentation_name(srgb)
        lines.append(f'\u2500\u2500 {index}: {label}')
        lines.append(f'  srgb:   {_fmt(srgb)}')
        lines.append(f'  linear: {_fmt(color.linear_components)}')

    if palette.colors:
        lines.append('')
    return '\n'.join(lines)


def format_json(palette: ColorPalette, path: str | None = None) -> str:
    """Format palette as JSON with both component views per colour."""
    obj: dict[str, Any] = {'name': palette.name, 'count': len(palette.colors)}
    if path:
        obj['file'] = path

    obj['colors'] = []
    for color in palette.colors:
        srgb = color.components
        obj['colors'].append(
            {
                'name': color.name,
                'display_name': color.name if color.name is not None else presentation_name(srgb),
                'components': list(srgb),
                'linear_components': list(color.linear_components),
            }
        )
    return json.dumps(obj, indent=2, ensure_ascii=False)
