"""Command plug-in type for the color-palette CLI."""

from __future__ import annotations

import argparse
from collections.abc import Callable

from simple_color_palette.core.env import Settings


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='show', help='Print a palette')

        @command.arguments
        def arguments(parser):
            parser.add_argument('path')

        @command.run
        def run(args, settings):
            ...
            return 0
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable[[argparse.Namespace, Settings], int | None] | None = None
        self._arguments_fn: Callable[[argparse.ArgumentParser], None] | None = None

    def arguments(self, fn: Callable[[argparse.ArgumentParser], None]) -> Callable[[argparse.ArgumentParser], None]:
        """Decorator to register the function that adds this command's arguments."""
        self._arguments_fn = fn
        return fn

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def configure(self, parser: argparse.ArgumentParser) -> None:
        if self._arguments_fn is not None:
            self._arguments_fn(parser)

    def execute(self, args: argparse.Namespace, settings: Settings) -> int:
        """Run the command and return its exit status (None counts as 0)."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        return self._run_fn(args, settings) or 0
