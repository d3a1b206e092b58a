"""Error taxonomy. Every error is fatal: the CLI reports it and writes nothing."""

from __future__ import annotations

from gbtile.core.types import Color


class GbTileError(Exception):
    """Base class for conversion failures reported to the user."""


class DecodeFailure(GbTileError):
    """The image decoder could not parse the input."""


class UnsupportedColorType(GbTileError):
    def __init__(self, layout: str):
        self.layout = layout
        super().__init__(f'Unsupported colour type: {layout!r} (expected RGB, RGBA, L or LA)')


class TooManyColors(GbTileError):
    """A fifth distinct colour turned up while enumerating the palette."""

    def __init__(self, colors: list[Color], position: tuple[int, int]):
        self.colors = colors
        self.position = position
        seen = ', '.join(c.hex() for c in colors)
        x, y = position
        super().__init__(f'Too many colours: found a 5th distinct colour at ({x}, {y}); seen: {seen}')


class InvalidSymbolName(GbTileError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f'Cannot derive a symbol name from input path: {path!r}')


class InvalidDimensions(GbTileError):
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        super().__init__(f'Image size {width}x{height} is not a multiple of 8x8 (use --truncate to drop the remainder)')


class IoFailure(GbTileError):
    """Reading the input or writing the output failed at the storage layer."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f'{reason}: {path}')
