"""Tests for gbtile.core.pack: 2bpp bit-plane packing and block order."""

import numpy as np
import pytest
from gbtile.core.errors import InvalidDimensions
from gbtile.core.pack import pack_indices, pack_tiles, tile_grid, unpack_tiles
from gbtile.core.types import Color, PixelBuffer
from gbtile.quantizers.luminance import quantizer as luminance

BLACK = Color(0, 0, 0)
WHITE = Color(224, 224, 224)


def _solid(color: Color, width: int = 8, height: int = 8) -> PixelBuffer:
    return PixelBuffer(width=width, height=height, colors=(color,) * (width * height))


def _pack(pixels: PixelBuffer, truncate: bool = False) -> bytes:
    return pack_tiles(pixels, luminance.execute(pixels), truncate=truncate)


class TestSolidTiles:
    def test_black_tile_is_all_ones(self):
        data = _pack(_solid(BLACK))
        assert data == b'\xff\xff' * 8
        assert len(data) == 16

    def test_white_tile_is_all_zeros(self):
        assert _pack(_solid(WHITE)) == b'\x00' * 16


class TestBitOrder:
    def test_leftmost_pixel_is_msb(self):
        indices = np.zeros((8, 8), dtype=np.uint8)
        indices[0, 0] = 1
        data = pack_indices(indices, 1, 1)
        assert data[0] == 0x80  # low plane
        assert data[1] == 0x00  # high plane

    def test_high_plane_carries_bit_one(self):
        indices = np.zeros((8, 8), dtype=np.uint8)
        indices[2, 7] = 2
        data = pack_indices(indices, 1, 1)
        assert data[4] == 0x00
        assert data[5] == 0x01

    def test_mixed_row(self):
        indices = np.zeros((8, 8), dtype=np.uint8)
        indices[0] = [3, 2, 1, 0, 0, 1, 2, 3]
        data = pack_indices(indices, 1, 1)
        assert data[0] == 0b10100101
        assert data[1] == 0b11000011


class TestBlockOrder:
    def test_left_block_before_right(self):
        colors = []
        for _y in range(8):
            colors += [BLACK] * 8 + [WHITE] * 8
        data = _pack(PixelBuffer(width=16, height=8, colors=tuple(colors)))
        assert data[:16] == b'\xff' * 16
        assert data[16:] == b'\x00' * 16

    def test_top_block_before_bottom(self):
        colors = (BLACK,) * 64 + (WHITE,) * 64
        data = _pack(PixelBuffer(width=8, height=16, colors=colors))
        assert data[:16] == b'\xff' * 16
        assert data[16:] == b'\x00' * 16

    def test_length_is_quarter_of_pixel_count(self):
        for width, height in [(8, 8), (16, 8), (24, 16), (160, 144)]:
            assert len(_pack(_solid(WHITE, width, height))) == width * height // 4


class TestDimensions:
    def test_ragged_size_rejected(self):
        with pytest.raises(InvalidDimensions) as exc:
            _pack(_solid(WHITE, 10, 8))
        assert (exc.value.width, exc.value.height) == (10, 8)

    def test_truncate_drops_remainder(self):
        data = _pack(_solid(BLACK, 17, 9), truncate=True)
        assert data == b'\xff' * 32

    def test_tile_grid(self):
        assert tile_grid(160, 144) == (20, 18)
        assert tile_grid(15, 15, truncate=True) == (1, 1)


class TestUnpack:
    def test_round_trip_restores_every_index(self):
        rng = np.random.default_rng(42)
        indices = rng.integers(0, 4, size=(16, 24), dtype=np.uint8)
        data = pack_indices(indices, 3, 2)
        assert unpack_tiles(data, 24, 16) == indices.flatten().tolist()

    def test_wrong_length(self):
        with pytest.raises(ValueError):
            unpack_tiles(b'\x00' * 15, 8, 8)
