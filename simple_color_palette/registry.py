"""Command auto-discovery and registration.

Scans simple_color_palette/commands/ for modules that define a `command`
object of type Command. Collects them into a dict keyed by name. Modules whose
name starts with an underscore are helpers and are skipped.

Handles both normal Python (pkgutil.iter_modules) and frozen binaries
(where iter_modules returns nothing; falls back to the known module list).
"""

import importlib
import pkgutil

from simple_color_palette.core.types import Command

_registry: dict[str, Command] = {}

# Known command module names, fallback for frozen binaries
_COMMAND_MODULES = [
    'add',
    'create',
    'extract',
    'format',
    'show',
    'swatch',
    'validate',
]


def discover() -> dict[str, Command]:
    """Import all command modules and return the registry."""
    if _registry:
        return _registry

    import simple_color_palette.commands as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]
    if not found_modules:
        found_modules = _COMMAND_MODULES

    for modname in found_modules:
        module = importlib.import_module(f'simple_color_palette.commands.{modname}')
        cmd = getattr(module, 'command', None)
        if isinstance(cmd, Command):
            _registry[cmd.name] = cmd

    return _registry


def module_for(name: str) -> object:
    """Return the module that defines command `name` (for its docstring)."""
    return importlib.import_module(f'simple_color_palette.commands.{name}')


def get(name: str) -> Command:
    """Get a command by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_commands() -> dict[str, Command]:
    """Return all registered commands."""
    return discover()
