"""Strict four-colour budget scan.

Walks the pixels in raster order and fails on the first pixel that would
introduce a fifth distinct colour. The enumeration quantizer builds on this;
the pipeline also runs it ahead of any other strategy when strict mode is on.
"""

from gbtile.core.errors import TooManyColors
from gbtile.core.types import Color, PixelBuffer

MAX_COLORS = 4


def check_color_budget(pixels: PixelBuffer, limit: int = MAX_COLORS) -> list[Color]:
    """Return the distinct colours in sorted order, or raise TooManyColors."""
    seen: set[Color] = set()
    for i, color in enumerate(pixels.colors):
        if color in seen:
            continue
        seen.add(color)
        if len(seen) > limit:
            position = (i % pixels.width, i // pixels.width)
            raise TooManyColors(sorted(seen), position)
    return sorted(seen)
