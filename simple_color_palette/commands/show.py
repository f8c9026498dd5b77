"""Print a palette: its name and every colour in sRGB and linear form.

Unnamed colours are labelled with their presentation name, e.g. '255 0 0'
or '0 255 0 50%'. Use --json for machine-readable output.

Example:
    color-palette show "Traffic Lights.color-palette"
    color-palette show "Traffic Lights.color-palette" --json
"""

from simple_color_palette.core.palette import ColorPalette
from simple_color_palette.core.report import format_json, format_text
from simple_color_palette.core.types import Command

command = Command(name='show', help='Print a palette as text or JSON.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('path', help='Path to a .color-palette file')
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')


@command.run
def run(args, settings) -> int:
    palette = ColorPalette.load(args.path)
    if args.json:
        print(format_json(palette, path=args.path))
    else:
        print(format_text(palette, path=args.path))
    return 0
