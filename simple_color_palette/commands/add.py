"""Append colours to an existing palette file.

Colours use the same HEX or HEX=Name form as `create` and are added after
the existing ones, in the order given. The file is rewritten in canonical
form.

Example:
    color-palette add "Traffic Lights.color-palette" "#ff8000=Amber"
"""

import sys

from simple_color_palette.commands._color_args import parse_color_args
from simple_color_palette.core.palette import ColorPalette
from simple_color_palette.core.types import Command

command = Command(name='add', help='Append HEX or HEX=Name colours to a palette file.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('path', help='Palette file to update')
    parser.add_argument('colors', nargs='+', metavar='COLOR', help='HEX or HEX=Name')


@command.run
def run(args, settings) -> int:
    try:
        colors = parse_color_args(args.colors)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    palette = ColorPalette.load(args.path)
    palette.colors.extend(colors)
    palette.save(args.path)
    print(f'added {len(colors)} colours to {args.path} ({len(palette.colors)} total)')
    return 0
