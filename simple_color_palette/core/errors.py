"""Exceptions raised while decoding palette documents.

File system errors are not wrapped: OSError from reading or writing a palette
reaches the caller unchanged. Hex parsing never raises; it returns None.
"""


class PaletteError(Exception):
    """Base class for palette decoding errors."""


class MalformedDocumentError(PaletteError, ValueError):
    """The data is not valid JSON or does not have the palette document shape."""


class InvalidComponentCountError(PaletteError, ValueError):
    """A components array has neither 3 nor 4 elements."""

    def __init__(self, count: int):
        super().__init__(f'components array must have 3 or 4 elements, got {count}')
        self.count = count
