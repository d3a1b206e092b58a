"""Number the distinct colours in (r, g, b) order. Fails past four colours.

Scans the image in raster order collecting distinct rounded colours. The
moment a fifth one appears the conversion stops with TooManyColors, naming
every colour seen and the pixel that broke the budget. Otherwise the colours
are sorted and the i-th receives index i, so black ends up at 0.

Useful for art drawn in exactly four colours where the palette order is
managed elsewhere.

Example:
    gbtile -i font.png -o font.s -t asm -s enumeration
"""

from gbtile.core.budget import check_color_budget
from gbtile.core.types import Diagnostics, PaletteMap, PixelBuffer, Quantizer

quantizer = Quantizer(
    name='enumeration',
    help='Index up to four distinct colours in sorted order; error on a fifth.',
)


@quantizer.build
def build(pixels: PixelBuffer, diagnostics: Diagnostics) -> PaletteMap:
    colors = check_color_budget(pixels)
    diagnostics(f'enumeration: {", ".join(c.hex() for c in colors)}')
    return PaletteMap({color: i for i, color in enumerate(colors)})
