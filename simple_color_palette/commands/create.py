"""Create a new palette file from hex colours.

Each colour is HEX or HEX=Name. HEX is 3, 4, 6 or 8 hex digits with an
optional '#': RGB, RGBA, RRGGBB or RRGGBBAA, read as non-linear sRGB.
Quote arguments containing '#' or spaces in your shell.

Refuses to overwrite an existing file unless --force is given.

Example:
    color-palette create "Traffic Lights.color-palette" \\
        "#f00=Red" "#ff0=Yellow" "#0f0=Green" --name "Traffic Lights"
"""

import os
import sys

from simple_color_palette.commands._color_args import parse_color_args
from simple_color_palette.core.palette import ColorPalette
from simple_color_palette.core.types import Command

command = Command(name='create', help='Create a palette file from HEX or HEX=Name colours.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('output', help='Palette file to write')
    parser.add_argument('colors', nargs='*', metavar='COLOR', help='HEX or HEX=Name')
    parser.add_argument('-n', '--name', default=None, help='Palette name')
    parser.add_argument('-f', '--force', action='store_true', help='Overwrite an existing file')


@command.run
def run(args, settings) -> int:
    if os.path.exists(args.output) and not args.force:
        print(f'Error: {args.output} already exists (use --force to overwrite)', file=sys.stderr)
        return 1
    try:
        colors = parse_color_args(args.colors)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    palette = ColorPalette(colors, name=args.name)
    palette.save(args.output)
    print(f'wrote {len(colors)} colours to {args.output}')
    return 0
