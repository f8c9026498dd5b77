"""Auto-discovery of command modules.

Every .py file in this package that defines a `command` object is
auto-registered by simple_color_palette.registry.discover().

The explicit imports below ensure PyInstaller includes these modules
in the frozen binary. Without them, pkgutil.iter_modules cannot find
the command files at runtime.
"""

# PyInstaller hidden imports, keep this list in sync with command modules
import simple_color_palette.commands.add as _add  # noqa: F401
import simple_color_palette.commands.create as _create  # noqa: F401
import simple_color_palette.commands.extract as _extract  # noqa: F401
import simple_color_palette.commands.format as _format  # noqa: F401
import simple_color_palette.commands.show as _show  # noqa: F401
import simple_color_palette.commands.swatch as _swatch  # noqa: F401
import simple_color_palette.commands.validate as _validate  # noqa: F401
