"""Fixed luminance buckets on the channel sum. The default strategy.

Each rounded colour is placed by r + g + b (0-765):

    sum <= 191          -> 3  (darkest)
    191 < sum <= 382    -> 2
    382 < sum <= 573    -> 1
    sum > 573           -> 0  (lightest)

The index depends only on the colour itself, not on what else is in the
image, so there are never more than four indices. Any number of source
colours may share a bucket.

Example:
    gbtile -i sprite.png -o sprite.h -s luminance
"""

from gbtile.core.types import Color, Diagnostics, PaletteMap, PixelBuffer, Quantizer

quantizer = Quantizer(
    name='luminance',
    help='Bucket colours by channel sum into four shades (default).',
)

# (upper bound inclusive, index)
BUCKETS = ((191, 3), (382, 2), (573, 1))


def luminance_index(color: Color) -> int:
    total = color.total
    for bound, index in BUCKETS:
        if total <= bound:
            return index
    return 0


@quantizer.build
def build(pixels: PixelBuffer, diagnostics: Diagnostics) -> PaletteMap:
    entries = {color: luminance_index(color) for color in pixels.distinct()}
    palette = PaletteMap(entries)
    diagnostics(f'luminance: {len(entries)} colour(s) -> indices {palette.used()}')
    return palette
