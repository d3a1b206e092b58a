"""Shared types for gbtile: Color, PixelBuffer, PaletteMap, TileData, Quantizer."""

from __future__ import annotations

import enum
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

Diagnostics = Callable[[str], None]


def silent(message: str) -> None:
    """Default diagnostics sink: drop the message."""


@dataclass(frozen=True, order=True)
class Color:
    """An exact (r, g, b) triple. Ordered by channel tuple."""

    r: int
    g: int
    b: int

    @property
    def total(self) -> int:
        """Sum of the three channels (0-765)."""
        return self.r + self.g + self.b

    def hex(self) -> str:
        return f'#{self.r:02x}{self.g:02x}{self.b:02x}'


@dataclass(frozen=True)
class DecodedImage:
    """What the image decoder hands to the normalizer."""

    width: int
    height: int
    layout: str  # channel layout tag: RGB, RGBA, L, LA
    raw: bytes


@dataclass(frozen=True)
class PixelBuffer:
    """Row-major colours of one image, produced once by the normalizer."""

    width: int
    height: int
    colors: tuple[Color, ...]

    def __post_init__(self) -> None:
        expected = self.width * self.height
        if len(self.colors) != expected:
            raise ValueError(f'Expected {expected} colours for {self.width}x{self.height}, got {len(self.colors)}')

    def at(self, x: int, y: int) -> Color:
        return self.colors[y * self.width + x]

    def distinct(self) -> list[Color]:
        """Distinct colours in natural (r, g, b) order."""
        return sorted(set(self.colors))


class PaletteLookupError(AssertionError):
    """A colour reached the packer without a palette entry. Always a bug."""


@dataclass(frozen=True)
class PaletteMap:
    """Colour -> 2-bit palette index (0-3)."""

    entries: Mapping[Color, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for color, index in self.entries.items():
            if not 0 <= index <= 3:
                raise ValueError(f'Palette index for {color.hex()} out of range: {index}')

    def __len__(self) -> int:
        return len(self.entries)

    def index_of(self, color: Color) -> int:
        try:
            return self.entries[color]
        except KeyError:
            raise PaletteLookupError(f'No palette entry for {color.hex()}') from None

    def indices(self, pixels: PixelBuffer) -> list[int]:
        """Per-pixel palette indices in raster order."""
        return [self.index_of(c) for c in pixels.colors]

    def used(self) -> list[int]:
        """Distinct index values present in the map, ascending."""
        return sorted(set(self.entries.values()))


@dataclass(frozen=True)
class TileData:
    """Packed 2bpp tile bytes plus the symbol name used in emitted source."""

    data: bytes
    symbol: str

    @property
    def tile_count(self) -> int:
        return len(self.data) // 16


class OutputFormat(enum.Enum):
    HEADER = 'header'
    ASM = 'asm'

    @classmethod
    def parse(cls, value: str | None) -> OutputFormat:
        """Map a user-supplied selector to a format. Unknown values mean HEADER."""
        if not value:
            return cls.HEADER
        return _FORMAT_ALIASES.get(value.strip().lower(), cls.HEADER)


_FORMAT_ALIASES = {
    'header': OutputFormat.HEADER,
    'gbdk': OutputFormat.HEADER,
    'c': OutputFormat.HEADER,
    'h': OutputFormat.HEADER,
    'asm': OutputFormat.ASM,
    'rgbds': OutputFormat.ASM,
    's': OutputFormat.ASM,
}


class Quantizer:
    """A self-registering palette-building strategy.

    Usage in a quantizer module:

        quantizer = Quantizer(name='luminance', help='Fixed luminance buckets')

        @quantizer.build
        def build(pixels, diagnostics):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._build_fn: Callable[[PixelBuffer, Diagnostics], PaletteMap] | None = None

    def build(self, fn: Callable[[PixelBuffer, Diagnostics], PaletteMap]) -> Callable:
        """Decorator to register the palette build function."""
        self._build_fn = fn
        return fn

    def execute(self, pixels: PixelBuffer, diagnostics: Diagnostics = silent) -> PaletteMap:
        """Build the palette map for a pixel buffer."""
        if self._build_fn is None:
            raise RuntimeError(f'Quantizer {self.name} has no build function')
        return self._build_fn(pixels, diagnostics)
