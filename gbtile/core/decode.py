"""Image decoding via Pillow.

Produces a DecodedImage (width, height, layout tag, flat bytes). Palette and
1-bit images are expanded here so the normalizer only ever sees RGB, RGBA,
L or LA; any other Pillow mode is passed through untouched and rejected by
the normalizer.
"""

import os

from PIL import Image, UnidentifiedImageError

from gbtile.core.errors import DecodeFailure, IoFailure
from gbtile.core.types import DecodedImage

# Pillow mode -> mode to convert to before handing off
EXPANSIONS = {
    '1': 'L',
    'PA': 'RGBA',
}


def _expand(image: Image.Image) -> Image.Image:
    if image.mode == 'P':
        return image.convert('RGBA' if 'transparency' in image.info else 'RGB')
    target = EXPANSIONS.get(image.mode)
    if target:
        return image.convert(target)
    return image


def from_pil(image: Image.Image) -> DecodedImage:
    """Wrap an already opened Pillow image."""
    image = _expand(image)
    return DecodedImage(width=image.width, height=image.height, layout=image.mode, raw=image.tobytes())


def decode_image(path: str | os.PathLike) -> DecodedImage:
    """Open and fully decode an image file."""
    path = os.fspath(path)
    try:
        with Image.open(path) as image:
            image.load()
            return from_pil(image)
    except UnidentifiedImageError as exc:
        raise DecodeFailure(f'Not a recognised image file: {path}') from exc
    except (FileNotFoundError, IsADirectoryError, PermissionError) as exc:
        raise IoFailure(path, 'Cannot read input') from exc
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
        # Pillow reports corrupt, truncated or oversized data through these
        raise DecodeFailure(f'Failed to decode {path}: {exc}') from exc
