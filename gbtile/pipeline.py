"""Conversion pipeline: decode -> normalize -> quantize -> pack -> emit.

Everything is computed before the caller writes anything, so a failed run
leaves any existing output file untouched.
"""

import os
from dataclasses import dataclass

from gbtile import registry
from gbtile.core.budget import check_color_budget
from gbtile.core.decode import decode_image
from gbtile.core.emit import emit, format_preview, symbol_name
from gbtile.core.errors import IoFailure
from gbtile.core.normalize import normalize
from gbtile.core.pack import pack_tiles, unpack_tiles
from gbtile.core.types import DecodedImage, Diagnostics, OutputFormat, TileData, silent


@dataclass
class ConvertOptions:
    output_format: OutputFormat = OutputFormat.HEADER
    strategy: str = registry.DEFAULT
    strict: bool = False
    truncate: bool = False


@dataclass
class Conversion:
    """Result of one run: the emitted text plus what produced it."""

    text: str
    tiles: TileData
    width: int
    height: int

    def preview(self) -> str:
        width, height = self.width // 8 * 8, self.height // 8 * 8
        return format_preview(unpack_tiles(self.tiles.data, width, height), width)


def encode(
    image: DecodedImage,
    symbol: str,
    options: ConvertOptions | None = None,
    diagnostics: Diagnostics = silent,
) -> Conversion:
    options = options or ConvertOptions()
    quantizer = registry.get(options.strategy)

    diagnostics(f'{image.width}x{image.height} {image.layout}')
    pixels = normalize(image)
    diagnostics(f'{len(pixels.distinct())} distinct colour(s) after rounding')

    if options.strict:
        check_color_budget(pixels)
    palette = quantizer.execute(pixels, diagnostics)

    data = pack_tiles(pixels, palette, truncate=options.truncate)
    tiles = TileData(data=data, symbol=symbol)
    diagnostics(f'{tiles.tile_count} tile(s), {len(data)} bytes')

    text = emit(tiles, options.output_format)
    return Conversion(text=text, tiles=tiles, width=image.width, height=image.height)


def convert_image(
    image: DecodedImage,
    symbol: str,
    options: ConvertOptions | None = None,
    diagnostics: Diagnostics = silent,
) -> str:
    """Encode an already decoded image to source text."""
    return encode(image, symbol, options, diagnostics).text


def convert_file(
    path: str | os.PathLike,
    options: ConvertOptions | None = None,
    diagnostics: Diagnostics = silent,
) -> str:
    """Decode an image file and encode it, naming the symbol after the file."""
    return encode_file(path, options, diagnostics).text


def encode_file(
    path: str | os.PathLike,
    options: ConvertOptions | None = None,
    diagnostics: Diagnostics = silent,
) -> Conversion:
    symbol = symbol_name(path)
    image = decode_image(path)
    return encode(image, symbol, options, diagnostics)


def write_output(path: str | os.PathLike, text: str) -> None:
    """Write text as UTF-8, replacing any existing file."""
    try:
        with open(path, 'w', encoding='utf-8', newline='\n') as f:
            f.write(text)
    except OSError as exc:
        raise IoFailure(os.fspath(path), 'Cannot write output') from exc
