"""Tests for gbtile.core.emit: C header / RGBDS text and symbol names."""

import pytest
from gbtile.core.emit import emit, format_asm, format_header, format_preview, symbol_name
from gbtile.core.errors import InvalidSymbolName
from gbtile.core.types import OutputFormat, TileData

ONE_TILE = TileData(data=bytes(range(16)), symbol='foo')


class TestHeader:
    def test_single_tile(self):
        expected = (
            'unsigned char foo[] = {\n'
            '    0x00,0x01,0x02,0x03,0x04,0x05,0x06,0x07,0x08,0x09,0x0a,0x0b,0x0c,0x0d,0x0e,0x0f\n'
            '};\n'
        )
        assert format_header(ONE_TILE) == expected

    def test_lines_are_comma_separated(self):
        tiles = TileData(data=b'\xff' * 16 + b'\xab' * 16, symbol='bar')
        text = format_header(tiles)
        lines = text.splitlines()
        assert lines[0] == 'unsigned char bar[] = {'
        assert lines[1] == '    ' + ','.join(['0xff'] * 16) + ','
        assert lines[2] == '    ' + ','.join(['0xab'] * 16)
        assert lines[3] == '};'
        assert text.endswith('};\n')

    def test_partial_last_line(self):
        text = format_header(TileData(data=bytes(18), symbol='x'))
        assert text.splitlines()[2] == '    0x00,0x00'

    def test_empty(self):
        assert format_header(TileData(data=b'', symbol='e')) == 'unsigned char e[] = {\n};\n'


class TestAsm:
    def test_single_tile(self):
        expected = (
            'SECTION "foo", ROM0\n'
            'EXPORT foo, foo_end\n'
            '\n'
            'foo:\n'
            '    db $00,$01,$02,$03,$04,$05,$06,$07,$08,$09,$0a,$0b,$0c,$0d,$0e,$0f\n'
            'foo_end:\n'
        )
        assert format_asm(ONE_TILE) == expected

    def test_one_db_per_sixteen_bytes(self):
        text = format_asm(TileData(data=b'\xff' * 48, symbol='t'))
        db_lines = [line for line in text.splitlines() if line.startswith('    db ')]
        assert len(db_lines) == 3
        assert db_lines[0] == '    db ' + ','.join(['$ff'] * 16)

    def test_ends_with_end_label(self):
        assert format_asm(TileData(data=b'', symbol='t')).endswith('t:\nt_end:\n')


class TestDispatch:
    def test_header(self):
        assert emit(ONE_TILE, OutputFormat.HEADER) == format_header(ONE_TILE)

    def test_asm(self):
        assert emit(ONE_TILE, OutputFormat.ASM) == format_asm(ONE_TILE)


class TestOutputFormatParse:
    def test_defaults_to_header(self):
        assert OutputFormat.parse(None) is OutputFormat.HEADER
        assert OutputFormat.parse('') is OutputFormat.HEADER
        assert OutputFormat.parse('bogus') is OutputFormat.HEADER

    def test_aliases(self):
        assert OutputFormat.parse('gbdk') is OutputFormat.HEADER
        assert OutputFormat.parse('asm') is OutputFormat.ASM
        assert OutputFormat.parse(' RGBDS ') is OutputFormat.ASM


class TestSymbolName:
    def test_strips_directory_and_extension(self):
        assert symbol_name('assets/sprites/foo.png') == 'foo'

    def test_no_extension(self):
        assert symbol_name('foo') == 'foo'

    def test_keeps_inner_dots(self):
        assert symbol_name('a/b.c.png') == 'b.c'

    @pytest.mark.parametrize('path', ['', 'dir/', '.png', '/'])
    def test_no_base_name(self, path):
        with pytest.raises(InvalidSymbolName):
            symbol_name(path)


class TestPreview:
    def test_characters(self):
        assert format_preview([0, 1, 2, 3, 3, 2, 1, 0], 4) == ' .+#\n#+. '

    def test_zero_width(self):
        assert format_preview([], 0) == ''
