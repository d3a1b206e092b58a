"""Format emitter: tile bytes to C header or RGBDS assembly text.

Both layouts are parsed by external toolchains, so the exact text matters:

    unsigned char foo[] = {
        0x00,0x01,...,0x0f,
        0x10,...
    };

    SECTION "foo", ROM0
    EXPORT foo, foo_end

    foo:
        db $00,$01,...,$0f
    foo_end:
"""

import os

from gbtile.core.errors import InvalidSymbolName
from gbtile.core.types import OutputFormat, TileData

BYTES_PER_LINE = 16
INDENT = '    '
PREVIEW_CHARS = ' .+#'


def symbol_name(path: str | os.PathLike) -> str:
    """Base file name of path, without directory or extension."""
    base = os.path.basename(os.fspath(path))
    stem, ext = os.path.splitext(base)
    if not ext and stem.startswith('.'):
        # '.png' is all extension
        stem = ''
    if not stem.strip():
        raise InvalidSymbolName(os.fspath(path))
    return stem


def _chunks(data: bytes) -> list[bytes]:
    return [data[i : i + BYTES_PER_LINE] for i in range(0, len(data), BYTES_PER_LINE)]


def format_header(tiles: TileData) -> str:
    """Render as a GBDK-style C array."""
    lines = [INDENT + ','.join(f'0x{b:02x}' for b in chunk) for chunk in _chunks(tiles.data)]
    body = ',\n'.join(lines)
    if body:
        body += '\n'
    return f'unsigned char {tiles.symbol}[] = {{\n{body}}};\n'


def format_asm(tiles: TileData) -> str:
    """Render as an RGBDS ROM0 section with start and end labels."""
    out = [
        f'SECTION "{tiles.symbol}", ROM0',
        f'EXPORT {tiles.symbol}, {tiles.symbol}_end',
        '',
        f'{tiles.symbol}:',
    ]
    for chunk in _chunks(tiles.data):
        out.append(INDENT + 'db ' + ','.join(f'${b:02x}' for b in chunk))
    out.append(f'{tiles.symbol}_end:')
    return '\n'.join(out) + '\n'


def emit(tiles: TileData, fmt: OutputFormat) -> str:
    if fmt is OutputFormat.ASM:
        return format_asm(tiles)
    return format_header(tiles)


def format_preview(indices: list[int], width: int) -> str:
    """ASCII picture of palette indices, lightest (0) to darkest (3)."""
    if width <= 0:
        return ''
    rows = [indices[i : i + width] for i in range(0, len(indices), width)]
    return '\n'.join(''.join(PREVIEW_CHARS[v] for v in row) for row in rows)
