"""Tile packer: 8x8 blocks to Game Boy 2bpp bit-plane rows.

Blocks go left-to-right, top-to-bottom. Each block contributes 8 rows, each
row two bytes: the low bit-plane then the high bit-plane. The leftmost pixel
of a row lands in bit 7 of both bytes; the hardware reads tiles this way, so
the order is fixed.
"""

import numpy as np

from gbtile.core.errors import InvalidDimensions
from gbtile.core.types import PaletteMap, PixelBuffer

TILE_SIZE = 8
BYTES_PER_TILE = 16


def tile_grid(width: int, height: int, truncate: bool = False) -> tuple[int, int]:
    """Return (columns, rows) of whole tiles, or raise for ragged sizes."""
    if (width % TILE_SIZE or height % TILE_SIZE) and not truncate:
        raise InvalidDimensions(width, height)
    return width // TILE_SIZE, height // TILE_SIZE


def pack_indices(indices: np.ndarray, columns: int, rows: int) -> bytes:
    """Pack a (height, width) array of 2-bit indices covering columns x rows tiles."""
    area = indices[: rows * TILE_SIZE, : columns * TILE_SIZE].astype(np.uint8)
    # (rows, columns, 8 lines, 8 pixels)
    blocks = area.reshape(rows, TILE_SIZE, columns, TILE_SIZE).transpose(0, 2, 1, 3)
    # packbits is MSB-first: pixel 0 -> bit 7
    low = np.packbits(blocks & 1, axis=-1)
    high = np.packbits((blocks >> 1) & 1, axis=-1)
    return np.concatenate([low, high], axis=-1).tobytes()


def pack_tiles(pixels: PixelBuffer, palette: PaletteMap, truncate: bool = False) -> bytes:
    """Produce the tile byte stream for a whole image."""
    columns, rows = tile_grid(pixels.width, pixels.height, truncate)
    indices = np.array(palette.indices(pixels), dtype=np.uint8).reshape(pixels.height, pixels.width)
    return pack_indices(indices, columns, rows)


def unpack_tiles(data: bytes, width: int, height: int) -> list[int]:
    """Rebuild raster-order palette indices from a tile byte stream."""
    columns, rows = tile_grid(width, height, truncate=True)
    expected = columns * rows * BYTES_PER_TILE
    if len(data) != expected:
        raise ValueError(f'Expected {expected} bytes for {columns}x{rows} tiles, got {len(data)}')

    planes = np.frombuffer(data, dtype=np.uint8).reshape(rows, columns, TILE_SIZE, 2)
    bits = np.unpackbits(planes, axis=-1)
    blocks = bits[..., :TILE_SIZE] | (bits[..., TILE_SIZE:] << 1)
    raster = blocks.transpose(0, 2, 1, 3).reshape(rows * TILE_SIZE, columns * TILE_SIZE)
    return [int(v) for v in raster.flatten()]
