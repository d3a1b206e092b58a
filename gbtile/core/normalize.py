"""Pixel normalizer: raw decoded samples to a rounded RGB PixelBuffer.

Alpha is dropped, grayscale expands to R=G=B, and each channel is snapped
down to a multiple of 32 so anti-aliased near-duplicates collapse into one
colour before anything counts distinct colours.
"""

import numpy as np

from gbtile.core.errors import DecodeFailure, UnsupportedColorType
from gbtile.core.types import Color, DecodedImage, PixelBuffer

ROUNDING_STEP = 32

# layout -> (channels per pixel, indices of the channels that become r, g, b)
LAYOUTS: dict[str, tuple[int, tuple[int, int, int]]] = {
    'RGB': (3, (0, 1, 2)),
    'RGBA': (4, (0, 1, 2)),
    'L': (1, (0, 0, 0)),
    'LA': (2, (0, 0, 0)),
}


def round_channel(value: int) -> int:
    return value // ROUNDING_STEP * ROUNDING_STEP


def round_color(color: Color) -> Color:
    return Color(round_channel(color.r), round_channel(color.g), round_channel(color.b))


def normalize(image: DecodedImage) -> PixelBuffer:
    """Convert a decoded image into a PixelBuffer of rounded colours."""
    if image.layout not in LAYOUTS:
        raise UnsupportedColorType(image.layout)
    channels, picks = LAYOUTS[image.layout]

    expected = image.width * image.height * channels
    if len(image.raw) != expected:
        raise DecodeFailure(
            f'{image.layout} buffer for {image.width}x{image.height} should be {expected} bytes, got {len(image.raw)}'
        )

    samples = np.frombuffer(image.raw, dtype=np.uint8).reshape(-1, channels)
    rgb = samples[:, list(picks)] // ROUNDING_STEP * ROUNDING_STEP

    # tolist() yields plain ints, not numpy scalars
    colors = tuple(Color(r, g, b) for r, g, b in rgb.tolist())
    return PixelBuffer(width=image.width, height=image.height, colors=colors)
