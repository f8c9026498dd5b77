"""Settings for the color-palette command, from the environment and .env files.

Load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. The .env file given with --env-file, if any.
  3. The first .env found walking up from the cwd, stopping at a .git
     directory or file so nothing outside the repo is read.

Recognised variables:
  COLOR_PALETTE_SWATCH_SIZE      swatch cell size in pixels (default 64)
  COLOR_PALETTE_SWATCH_COLUMNS   swatch cells per row (default 8)
  COLOR_PALETTE_EXTRACT_COUNT    colours pulled out by `extract` (default 8)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = 'COLOR_PALETTE_'


@dataclass
class Settings:
    swatch_size: int = 64
    swatch_columns: int = 8
    extract_count: int = 8

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from COLOR_PALETTE_* variables (default: os.environ)."""
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            swatch_size=_int_setting(env, 'SWATCH_SIZE', defaults.swatch_size),
            swatch_columns=_int_setting(env, 'SWATCH_COLUMNS', defaults.swatch_columns),
            extract_count=_int_setting(env, 'EXTRACT_COUNT', defaults.extract_count),
        )


def _int_setting(env: Mapping[str, str], suffix: str, default: int) -> int:
    key = ENV_PREFIX + suffix
    raw = env.get(key, '').strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f'{key} must be an integer, got {raw!r}') from None
    if value < 1:
        raise ValueError(f'{key} must be at least 1, got {value}')
    return value


def find_dotenv(start: Path) -> Path | None:
    """Return the nearest .env at or above `start`, without crossing a .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        if (directory / '.git').exists():
            return None
    return None


def read_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Blank lines, comments and lines without '=' are skipped."""
    values: dict[str, str] = {}
    for raw_line in path.read_text(encoding='utf-8').splitlines():
        line = raw_line.strip()
        if line.startswith('export '):
            line = line[len('export ') :].lstrip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in '"\'':
            value = value[1:-1]
        if key:
            values[key] = value
    return values


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env values into os.environ for keys that are not set yet.

    Returns the file that was read, or None.
    """
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in read_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path
