"""
Tests for PNG and metadata export and the command line entry point
"""
import json
import logging

import pytest
from PIL import Image

from sty_analyzer import build_bitmaps, decode_style, export_bitmaps, export_metadata
from sty_analyzer.chunks import AllocationTable
from sty_analyzer.constants import SPRITE_CATEGORIES
from sty_analyzer.export import sprite_name, style_metadata
from sty_analyzer.main import main
from sty_analyzer.models import StyleFile
from sty_analyzer.utils.logging import setup_logging

from style_builder import (
    build_sprite_style,
    car_record,
    create_style,
    create_test_chunk,
    delta_set,
    patch,
)

@pytest.fixture(autouse=True)
def restore_root_logger():
    """main() reconfigures the root logger; put the original handlers back"""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)

@pytest.fixture
def style_path(tmp_path):
    store = patch(0, bytes([77]))
    path = tmp_path / 'wil.sty'
    path.write_bytes(build_sprite_style(deltas=[delta_set(1, [len(store)])], delta_store=store))
    return path

class TestSpriteNames:
    """Test naming sprites after their category"""

    def test_categories_and_fonts(self):
        style = StyleFile()
        style.sprite_allocation = AllocationTable.from_counts(SPRITE_CATEGORIES, [2, 1, 0, 0, 0, 3])
        style.font_allocation = AllocationTable.from_counts(['font0', 'font1'], [1, 2])

        names = [sprite_name(style, i) for i in range(7)]
        assert names == [
            'car_0000', 'car_0001', 'ped_0000',
            'font0_000', 'font1_000', 'font1_001',
            'sprite_0006'
        ]

    def test_without_allocation(self):
        assert sprite_name(StyleFile(), 3) == 'sprite_0003'

    def test_fonts_without_font_table(self):
        style = StyleFile()
        style.sprite_allocation = AllocationTable.from_counts(SPRITE_CATEGORIES, [0, 0, 0, 0, 0, 2])
        assert sprite_name(style, 1) == 'font_0001'

class TestExportBitmaps:
    """Test writing PNG files"""

    def test_files_written(self, style_path, tmp_path):
        style = decode_style(style_path.read_bytes())
        out = tmp_path / 'out'
        written = export_bitmaps(build_bitmaps(style), style, out)

        assert written == 3
        assert sorted(p.name for p in (out / 'sprites').iterdir()) == ['car_0000.png', 'car_0001.png']
        assert [p.name for p in (out / 'deltas').iterdir()] == ['car_0001_d00.png']
        assert not (out / 'tiles').exists()

        with Image.open(out / 'sprites' / 'car_0001.png') as image:
            assert image.mode == 'RGBA'
            assert image.size == (8, 2)
            assert image.getpixel((0, 0)) == (0, 5, 5, 255)

        with Image.open(out / 'deltas' / 'car_0001_d00.png') as image:
            assert image.getpixel((0, 0)) == (0, 77, 77, 255)
            assert image.getpixel((1, 0)) == (0, 6, 6, 255)

    def test_asset_classes_can_be_skipped(self, style_path, tmp_path):
        style = decode_style(style_path.read_bytes())
        out = tmp_path / 'out'
        written = export_bitmaps(build_bitmaps(style), style, out, sprites=False)
        assert written == 1
        assert not (out / 'sprites').exists()

    def test_empty_bitmaps_are_skipped(self, tmp_path):
        style = decode_style(build_sprite_style(sprites=((0, 0, 0), (0, 2, 2))))
        written = export_bitmaps(build_bitmaps(style), style, tmp_path)
        assert written == 1
        assert [p.name for p in (tmp_path / 'sprites').iterdir()] == ['car_0001.png']

class TestExportMetadata:
    """Test the JSON metadata document"""

    def test_metadata_document(self, tmp_path):
        data = create_style(
            create_test_chunk(b'CARI', car_record(model=3, remaps=[1], doors=[(2, -3)], info_flags=0x08)),
            create_test_chunk(b'OBJI', bytes([4, 2])),
            create_test_chunk(b'RECY', bytes([3, 255])),
            create_test_chunk(b'SPEC', b'\x05\x00\x00\x00'),
            create_test_chunk(b'ZZZZ', b'\x00\x00'),
        )
        style = decode_style(data)
        path = export_metadata(style, tmp_path / 'meta' / 'style.json')

        with open(path, encoding='utf-8') as f:
            document = json.load(f)

        assert document == style_metadata(style)
        assert [c['tag'] for c in document['chunks']] == ['CARI', 'OBJI', 'RECY', 'SPEC', 'ZZZZ']
        assert document['chunks'][-1]['handled'] is False
        assert document['vehicles'][0]['info_flags'] == ['cab']
        assert document['vehicles'][0]['doors'] == [{'rx': 2, 'ry': -3}]
        assert document['map_objects'] == [{'model': 4, 'sprites': 2}]
        assert document['recyclable_cars'] == [3]
        assert document['surfaces']['grass'] == [5]
        assert document['surfaces']['grass_wall'] == []
        assert document['palette_allocation'] is None
        assert document['warnings'][0]['type'] == 'UnknownChunk'

    def test_counts(self, style_path):
        document = style_metadata(decode_style(style_path.read_bytes()))
        assert document['counts'] == {
            'palettes': 64,
            'tiles': 0,
            'sprites': 2,
            'delta_sets': 1,
            'delta_frames': 1,
        }
        assert document['sprite_allocation']['car'] == {'offset': 0, 'count': 2}

class TestMain:
    """Test the command line entry point"""

    def test_success(self, style_path, tmp_path):
        out = tmp_path / 'out'
        assert main([str(style_path), '--output', str(out), '--metadata']) == 0
        assert (out / 'sprites' / 'car_0000.png').is_file()
        assert (out / 'wil_metadata.json').is_file()

    def test_missing_file(self, tmp_path):
        assert main([str(tmp_path / 'nope.sty'), '--output', str(tmp_path)]) == 1

    def test_bad_magic(self, tmp_path):
        path = tmp_path / 'bad.sty'
        path.write_bytes(b'GBMP\x01\x00')
        assert main([str(path), '--output', str(tmp_path / 'out')]) == 1

    def test_metadata_only(self, style_path, tmp_path):
        out = tmp_path / 'out'
        args = [str(style_path), '--output', str(out), '--metadata', '--no-tiles', '--no-sprites', '--no-deltas']
        assert main(args) == 0
        assert not (out / 'sprites').exists()
        assert (out / 'wil_metadata.json').is_file()

    def test_log_file(self, tmp_path):
        log_file = setup_logging(str(tmp_path / 'logs'))
        assert log_file is not None
        assert log_file.parent == tmp_path / 'logs'
        assert log_file.name.startswith('sty_analyzer_')

    def test_console_only_logging(self):
        assert setup_logging(None, logging.DEBUG) is None
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)
