"""ColorPalette: an ordered list of colours plus an optional name.

Serialization goes through core.codec; load/save read and write the whole
file in one go. save() writes to a temporary file next to the target and
renames it into place, so a failed write leaves the old file untouched.
"""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass, field
from typing import Any

from simple_color_palette.core import codec
from simple_color_palette.core.color import Color

logger = logging.getLogger(__name__)

FILE_EXTENSION = '.color-palette'
CONTENT_TYPE = 'com.sindresorhus.simple-color-palette'


def _new_file_mode() -> int:
    """0o666 minus the process umask, the mode open() would give a new file."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


@dataclass
class ColorPalette:
    """Colours in order (duplicates allowed) and an optional palette name.

    The palette owns copies of the colours it is given. Like Color it is
    mutable and unhashable.
    """

    colors: list[Color] = field(default_factory=list)
    name: str | None = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name == 'colors':
            value = [c.copy() for c in value]
        super().__setattr__(name, value)

    def serialize(self) -> bytes:
        """Encode the current state as UTF-8 JSON."""
        return codec.dumps(self)

    @classmethod
    def deserialize(cls, data: bytes | str) -> ColorPalette:
        """Decode a palette document.

        Raises MalformedDocumentError or InvalidComponentCountError.
        """
        colors, name = codec.loads(data)
        return cls(colors, name=name)

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> ColorPalette:
        """Read and decode a palette file. OSError propagates unchanged."""
        with open(path, 'rb') as f:
            data = f.read()
        logger.debug('read %d bytes from %s', len(data), path)
        return cls.deserialize(data)

    def save(self, path: str | os.PathLike[str]) -> None:
        """Serialize and write atomically to `path`."""
        data = self.serialize()
        # Write through symlinks to the file they point at
        path = os.path.realpath(path)
        directory = os.path.dirname(path)
        mode = os.stat(path).st_mode & 0o777 if os.path.exists(path) else _new_file_mode()
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix='.', suffix='.tmp')
        try:
            with os.fdopen(fd, 'wb') as f:
                os.fchmod(f.fileno(), mode)
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
        logger.debug('wrote %d bytes to %s', len(data), path)

    def suggested_file_name(self) -> str | None:
        """'<name>.color-palette', or None for an unnamed palette."""
        if self.name is None:
            return None
        return f'{self.name}{FILE_EXTENSION}'

    def copy(self) -> ColorPalette:
        return ColorPalette(self.colors, name=self.name)
