"""Render a palette as a PNG grid of colour cells.

Cells are filled with the non-linear sRGB colour, clamped to 8 bits, with
the colour's opacity as alpha. Defaults come from COLOR_PALETTE_SWATCH_SIZE
and COLOR_PALETTE_SWATCH_COLUMNS; --size and --columns override them.

Example:
    color-palette swatch brand.color-palette brand.png
    color-palette swatch brand.color-palette brand.png --size 32 --columns 4
"""

from simple_color_palette.adapters.pillow import render_swatch
from simple_color_palette.core.palette import ColorPalette
from simple_color_palette.core.types import Command

command = Command(name='swatch', help='Render a palette as a PNG grid of colour cells.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('path', help='Palette file to render')
    parser.add_argument('output', help='PNG file to write')
    parser.add_argument('-s', '--size', type=int, default=None, help='Cell size in pixels')
    parser.add_argument('-c', '--columns', type=int, default=None, help='Cells per row')


@command.run
def run(args, settings) -> int:
    palette = ColorPalette.load(args.path)
    size = args.size or settings.swatch_size
    columns = args.columns or settings.swatch_columns
    image = render_swatch(palette, size=size, columns=columns)
    image.save(args.output, format='PNG')
    print(f'wrote {image.width}\u00d7{image.height} swatch to {args.output}')
    return 0
