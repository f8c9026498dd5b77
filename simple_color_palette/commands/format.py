"""Rewrite a palette file in canonical form.

Canonical form: keys sorted, 2-space indentation, every value rounded to
4 decimal places (ties to even), opacity dropped when it is 1 and null names
omitted. Useful before committing palettes so diffs stay small.

With --check nothing is written; exit 1 if the file is not canonical.

Example:
    color-palette format brand.color-palette
    color-palette format brand.color-palette -o brand.clean.color-palette
    color-palette format brand.color-palette --check
"""

from simple_color_palette.core.palette import ColorPalette
from simple_color_palette.core.types import Command

command = Command(name='format', help='Rewrite a palette file in canonical form.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('path', help='Palette file to format')
    parser.add_argument('-o', '--output', default=None, help='Write here instead of in place')
    parser.add_argument('-c', '--check', action='store_true', help='Only report whether the file is canonical')


@command.run
def run(args, settings) -> int:
    with open(args.path, 'rb') as f:
        original = f.read()
    palette = ColorPalette.deserialize(original)
    canonical = palette.serialize()

    if args.check:
        if canonical == original:
            print(f'{args.path}: canonical')
            return 0
        print(f'{args.path}: not canonical')
        return 1

    output = args.output or args.path
    palette.save(output)
    print(f'formatted {args.path} -> {output}')
    return 0
