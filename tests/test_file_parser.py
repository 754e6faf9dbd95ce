"""
Tests for the chunk container parser
"""
import struct

import pytest

from sty_analyzer import decode_style, load_style
from sty_analyzer.chunks import ChunkRegistry, chunk_registry
from sty_analyzer.constants import ChunkTag
from sty_analyzer.chunks.recy import RecyChunk
from sty_analyzer.errors import FormatError, SizeMismatch, TruncatedInput, UnknownChunk
from sty_analyzer.models import StyleFile
from sty_analyzer.parser import StyleFileParser
from sty_analyzer.utils.binary import BinaryReader

from style_builder import (
    build_sprite_style,
    create_style,
    create_test_chunk,
    delta_set,
    palb_chunk,
    patch,
)

class TestHeader:
    """Test magic and version handling"""

    def test_version_is_kept(self):
        style = decode_style(create_style(version=700))
        assert style.version == 700
        assert style.chunks == []
        assert style.warnings == []

    def test_unknown_version_is_accepted(self):
        assert decode_style(create_style(version=1)).version == 1

    def test_bad_magic(self):
        with pytest.raises(FormatError):
            decode_style(create_style(palb_chunk([1] * 8), magic=b'GBMP'))

    def test_bad_magic_consumes_nothing(self):
        reader = BinaryReader(b'XXXX' + struct.pack('<H', 700))
        parser = StyleFileParser()
        with pytest.raises(FormatError):
            parser._read_header(reader, StyleFile())
        assert reader.position == 0

    def test_short_file(self):
        with pytest.raises(TruncatedInput):
            decode_style(b'GB')
        with pytest.raises(TruncatedInput):
            decode_style(b'GBST\x01')

class TestChunkWalk:
    """Test chunk iteration and dispatch"""

    def test_handlers_consume_declared_length(self):
        deltas = [delta_set(0, [4])]
        style = decode_style(build_sprite_style(deltas, patch(0, b'\x01')))
        assert style.chunk_tags() == ['PALX', 'PPAL', 'PALB', 'SPRB', 'SPRG', 'SPRX', 'DELX', 'DELS']
        for info in style.chunks:
            assert info.handled
            assert info.consumed == info.size
        assert style.warnings == []

    def test_chunk_offsets(self):
        data = create_style(
            create_test_chunk(b'RECY', b'\x01\xff'),
            create_test_chunk(b'OBJI', b'\x01\x02'),
        )
        style = decode_style(data)
        assert [c.offset for c in style.chunks] == [6, 6 + 8 + 2]
        assert style.chunks[1].data_offset == 24

    def test_unknown_chunk_is_skipped(self):
        data = create_style(
            create_test_chunk(b'ZZZZ', b'\xaa' * 13),
            create_test_chunk(b'RECY', b'\x05\x06\xff'),
        )
        style = decode_style(data)
        assert style.recyclable_cars == [5, 6]
        unknown, recy = style.chunks
        assert not unknown.handled
        assert recy.offset == unknown.offset + 8 + 13
        assert len(style.warnings) == 1
        assert isinstance(style.warnings[0], UnknownChunk)
        assert style.warnings[0].tag == 'ZZZZ'
        assert style.warnings[0].size == 13

    def test_psx_tiles_are_skipped(self):
        data = create_style(
            create_test_chunk(b'PSXT', b'\x00' * 32),
            create_test_chunk(b'OBJI', b'\x03\x04'),
        )
        style = decode_style(data)
        assert style.map_objects[0].model == 3
        assert isinstance(style.warnings[0], UnknownChunk)
        assert not chunk_registry.supports_chunk(ChunkTag.PSXT.value)
        assert chunk_registry.supports_chunk(ChunkTag.SPEC.value)

    def test_length_past_end_of_file(self):
        data = create_style(b'SPRG' + struct.pack('<I', 100) + b'\x00' * 99)
        with pytest.raises(TruncatedInput) as exc_info:
            decode_style(data)
        assert exc_info.value.requested == 100
        assert exc_info.value.remaining == 99

    def test_unknown_chunk_past_end_of_file(self):
        data = create_style(b'ZZZZ' + struct.pack('<I', 0xFFFFFFFF))
        with pytest.raises(TruncatedInput):
            decode_style(data)

    def test_partial_chunk_header(self):
        with pytest.raises(TruncatedInput):
            decode_style(create_style(b'PAL'))

    def test_fixed_layout_size_mismatch_is_fatal(self):
        data = create_style(create_test_chunk(b'PALB', b'\x00' * 14))
        with pytest.raises(SizeMismatch) as exc_info:
            decode_style(data)
        assert exc_info.value.tag == 'PALB'

    def test_palx_size_mismatch_is_fatal(self):
        with pytest.raises(SizeMismatch):
            decode_style(create_style(create_test_chunk(b'PALX', b'\x00' * 100)))

    def test_variable_layout_size_mismatch_is_warning(self):
        # Second delta set is cut after its header
        delx = delta_set(0, [3]) + struct.pack('<HBB', 1, 2, 0)
        data = create_style(
            create_test_chunk(b'DELX', delx),
            create_test_chunk(b'OBJI', b'\x09\x01'),
        )
        style = decode_style(data)
        assert len(style.delta_sets) == 1
        assert style.delta_sets[0].sizes == [3]
        assert style.map_objects[0].model == 9
        assert style.chunks[0].consumed == style.chunks[0].size
        assert any(isinstance(w, SizeMismatch) for w in style.warnings)

    def test_duplicate_chunk_replaces(self):
        data = create_style(
            create_test_chunk(b'RECY', b'\x01\xff'),
            create_test_chunk(b'RECY', b'\x02\xff'),
        )
        assert decode_style(data).recyclable_cars == [2]

    def test_custom_registry(self):
        registry = ChunkRegistry(register_defaults=False)
        registry.register(RecyChunk)
        data = create_style(
            create_test_chunk(b'OBJI', b'\x01\x02'),
            create_test_chunk(b'RECY', b'\x07\xff'),
        )
        style = StyleFileParser(registry).parse(data)
        assert style.map_objects == []
        assert style.recyclable_cars == [7]
        assert registry.list_supported_chunks() == {b'RECY': 'RecyChunk'}

    def test_registry_rejects_bad_tags(self):
        with pytest.raises(ValueError):
            ChunkRegistry().register(RecyChunk, b'REC')

class TestLoadStyle:
    """Test reading from disk"""

    def test_load_style(self, tmp_path):
        path = tmp_path / 'test.sty'
        path.write_bytes(create_style(create_test_chunk(b'RECY', b'\x03\xff')))
        assert load_style(path).recyclable_cars == [3]

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_style(tmp_path / 'missing.sty')
