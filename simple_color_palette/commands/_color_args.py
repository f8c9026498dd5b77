"""Parsing of colour arguments given on the command line: HEX or HEX=Name."""

from simple_color_palette.core.color import Color
from simple_color_palette.core.components import parse_hex


def parse_color_arg(text: str) -> Color:
    """Parse '#ff0000', 'f00=Red' or '#ff000080=Half red' into a Color.

    Raises ValueError when the hex part is not a valid colour.
    """
    hex_part, sep, name = text.partition('=')
    components = parse_hex(hex_part.strip())
    if components is None:
        raise ValueError(f'invalid hex colour: {hex_part!r}')
    return Color.from_components(components, name=name if sep else None)


def parse_color_args(texts: list[str]) -> list[Color]:
    return [parse_color_arg(t) for t in texts]
