"""Check that palette files decode. Exit 1 if any of them fails.

Prints one line per file: OK with the colour count, or FAIL with the reason
(invalid JSON, wrong document shape, a components array that is not 3 or 4
numbers long, or a read error).

Example:
    color-palette validate palettes/*.color-palette
"""

from simple_color_palette.core.errors import PaletteError
from simple_color_palette.core.palette import ColorPalette
from simple_color_palette.core.types import Command

command = Command(name='validate', help='Check that palette files decode; exit 1 on any failure.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('paths', nargs='+', metavar='PATH', help='Palette files to check')


@command.run
def run(args, settings) -> int:
    failures = 0
    for path in args.paths:
        try:
            palette = ColorPalette.load(path)
        except (PaletteError, OSError) as e:
            failures += 1
            print(f'FAIL {path}: {e}')
            continue
        print(f'OK   {path} ({len(palette.colors)} colours)')
    return 1 if failures else 0
