"""color-palette — Create, inspect and convert Simple Color Palette files.

Usage: color-palette <command> [options]

Commands are auto-discovered from simple_color_palette/commands/.
Each command module's docstring is its documentation.
Run `color-palette help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, color-palette looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import logging
import sys

from simple_color_palette import registry
from simple_color_palette.core.env import Settings, load_env
from simple_color_palette.core.errors import PaletteError


def _short_help(name: str) -> str:
    doc = (registry.module_for(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else registry.get(name).help


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  color-palette create brand.color-palette "#1e293b=Ink" "#f8fafc=Paper" --name Brand\n'
        '  color-palette add brand.color-palette "#2563eb80=Accent"\n'
        '  color-palette show brand.color-palette --json\n'
        '  color-palette validate palettes/*.color-palette\n'
        '  color-palette format brand.color-palette --check\n'
        '  color-palette swatch brand.color-palette brand.png\n'
        '  color-palette extract photo.jpg photo.color-palette --count 6\n'
        '  color-palette help create\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  COLOR_PALETTE_SWATCH_SIZE     swatch cell size in px (default 64)\n'
        '  COLOR_PALETTE_SWATCH_COLUMNS  swatch cells per row (default 8)\n'
        '  COLOR_PALETTE_EXTRACT_COUNT   colours kept by extract (default 8)\n'
    )
    parser = argparse.ArgumentParser(
        prog='color-palette',
        description='Create, inspect and convert Simple Color Palette (.color-palette) files.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global options before the subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debug output to stderr')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name))
        cmd.configure(p)

    # `help` subcommand, prints full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> int:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name in sorted(commands):
            print(f'  {name:<10} {_short_help(name)}')
        print('\nRun: color-palette help <command> for full docs.')
        return 0

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        return 1

    doc = (registry.module_for(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return 0
    print(doc)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    # Load .env before anything else, OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'color-palette: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == 'help':
        return _print_help(args.topic)

    try:
        settings = Settings.from_env()
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    cmd = registry.get(args.command)
    try:
        return cmd.execute(args, settings)
    except (PaletteError, ValueError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
