"""JSON codec for .color-palette documents.

Document shape:

    {
      "colors": [
        {"components": [r, g, b] | [r, g, b, a], "name": "..."},
        ...
      ],
      "name": "..."
    }

Encoding rules:
  - "components" holds the colour's LINEAR components. The key name is part of
    the file format and stays as is.
  - Components are written as 3 numbers when opacity is exactly 1, else 4.
  - Every number is rounded to DECIMAL_PLACES (ties to even); opacity is
    clamped again. Integral values are written as integers, and no number
    uses exponent notation.
  - "name" keys are omitted when there is no name.
  - Keys are sorted and the output is indented by 2 spaces, so files diff well.

Decoding accepts any key order and whitespace, ignores unknown keys, and treats
a missing "name" and "name": null the same. A single bad colour fails the whole
document.
"""

import json
import logging
import math
from typing import Any

from simple_color_palette.core.color import Color
from simple_color_palette.core.components import Components
from simple_color_palette.core.errors import InvalidComponentCountError, MalformedDocumentError
from simple_color_palette.core.numeric import DECIMAL_PLACES, clamp, round_to_places

logger = logging.getLogger(__name__)

INDENT = 2


def _number(value: float) -> float | int:
    rounded = round_to_places(value, DECIMAL_PLACES)
    if rounded.is_integer():
        return int(rounded)
    return rounded


def encode_components(components: Components) -> list[float | int]:
    """Encode components as a compact JSON array."""
    values = [_number(components.red), _number(components.green), _number(components.blue)]
    if components.opacity != 1:
        values.append(_number(clamp(components.opacity, 0.0, 1.0)))
    return values


def decode_components(value: Any) -> Components:
    """Decode a 3 or 4 element JSON array into Components."""
    if not isinstance(value, list):
        raise MalformedDocumentError(f'components must be an array, got {type(value).__name__}')
    numbers = [_decode_number(item) for item in value]
    if len(numbers) not in (3, 4):
        raise InvalidComponentCountError(len(numbers))
    opacity = numbers[3] if len(numbers) == 4 else 1.0
    return Components(numbers[0], numbers[1], numbers[2], opacity)


def _decode_number(item: Any) -> float:
    if isinstance(item, bool) or not isinstance(item, (int, float)):
        raise MalformedDocumentError(f'components must contain only numbers, got {item!r}')
    try:
        number = float(item)
    except OverflowError:
        number = math.inf
    if not math.isfinite(number):
        raise MalformedDocumentError('components must be finite numbers')
    return number


def encode_color(color: Color) -> dict[str, Any]:
    obj: dict[str, Any] = {'components': encode_components(color.linear_components)}
    if color.name is not None:
        obj['name'] = color.name
    return obj


def decode_color(value: Any) -> Color:
    if not isinstance(value, dict):
        raise MalformedDocumentError(f'colour must be an object, got {type(value).__name__}')
    if 'components' not in value:
        raise MalformedDocumentError('colour is missing "components"')
    return Color(decode_components(value['components']), name=_decode_name(value))


def encode_palette(palette: Any) -> dict[str, Any]:
    """Encode anything with `colors` and `name` attributes (a ColorPalette)."""
    obj: dict[str, Any] = {'colors': [encode_color(c) for c in palette.colors]}
    if palette.name is not None:
        obj['name'] = palette.name
    return obj


def decode_palette(value: Any) -> tuple[list[Color], str | None]:
    """Decode a palette object into (colors, name)."""
    if not isinstance(value, dict):
        raise MalformedDocumentError(f'palette must be an object, got {type(value).__name__}')
    if 'colors' not in value:
        raise MalformedDocumentError('palette is missing "colors"')
    raw_colors = value['colors']
    if not isinstance(raw_colors, list):
        raise MalformedDocumentError(f'"colors" must be an array, got {type(raw_colors).__name__}')
    colors = []
    for index, raw in enumerate(raw_colors):
        try:
            colors.append(decode_color(raw))
        except MalformedDocumentError as exc:
            raise MalformedDocumentError(f'colors[{index}]: {exc}') from exc
    return colors, _decode_name(value)


def _decode_name(obj: dict[str, Any]) -> str | None:
    name = obj.get('name')
    if name is None:
        return None
    if not isinstance(name, str):
        raise MalformedDocumentError(f'"name" must be a string, got {type(name).__name__}')
    try:
        name.encode('utf-8')
    except UnicodeEncodeError as exc:
        raise MalformedDocumentError(f'"name" is not valid Unicode text: {exc}') from exc
    return name


def dumps(palette: Any) -> bytes:
    """Serialize a palette to UTF-8 JSON bytes."""
    text = json.dumps(encode_palette(palette), indent=INDENT, sort_keys=True, ensure_ascii=False)
    return text.encode('utf-8')


def _reject_constant(name: str) -> None:
    raise MalformedDocumentError(f'{name} is not a valid number')


def loads(data: bytes | str) -> tuple[list[Color], str | None]:
    """Parse JSON bytes into (colors, name)."""
    try:
        document = json.loads(data, parse_constant=_reject_constant)
    except MalformedDocumentError:
        raise
    except (ValueError, RecursionError) as exc:
        # Includes JSONDecodeError, UnicodeDecodeError and over-long integer literals
        raise MalformedDocumentError(f'invalid JSON: {exc}') from exc
    colors, name = decode_palette(document)
    logger.debug('decoded palette %r with %d colours', name, len(colors))
    return colors, name
