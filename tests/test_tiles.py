"""
Tests for the TILE chunk
"""
import numpy as np
import pytest

from sty_analyzer import decode_style
from sty_analyzer.errors import SizeMismatch

from style_builder import create_style, create_test_chunk

def naive_tiles(pages: np.ndarray, count: int) -> np.ndarray:
    """Reference implementation of the tile addressing"""
    tiles = np.zeros((count, 64, 64), dtype=np.uint8)
    for i in range(count):
        row, col = i // 4, i % 4
        for y in range(64):
            for x in range(64):
                tiles[i, y, x] = pages[x + col * 64 + (y + row * 64) * 256]
    return tiles

class TestTiles:
    """Test tile extraction from pages"""

    def test_quadrant_markers(self):
        page = np.zeros((256, 256), dtype=np.uint8)
        for block in range(16):
            row, col = block // 4, block % 4
            page[row * 64:(row + 1) * 64, col * 64:(col + 1) * 64] = block + 1

        style = decode_style(create_style(create_test_chunk(b'TILE', page.tobytes())))
        assert style.tiles.shape == (16, 64, 64)
        for i in range(16):
            assert style.tiles[i][0][0] == i + 1
            assert (style.tiles[i] == i + 1).all()

    def test_matches_reference_addressing(self):
        rng = np.random.default_rng(1234)
        pages = rng.integers(0, 256, size=2 * 256 * 256, dtype=np.uint8)
        style = decode_style(create_style(create_test_chunk(b'TILE', pages.tobytes())))
        assert style.tile_count == 32
        np.testing.assert_array_equal(style.tiles, naive_tiles(pages, 32))

    def test_pixel_orientation(self):
        page = np.zeros((256, 256), dtype=np.uint8)
        page[64 + 3, 128 + 7] = 200   # tile 6, x=7, y=3
        style = decode_style(create_style(create_test_chunk(b'TILE', page.tobytes())))
        assert style.tiles[6][3][7] == 200
        assert np.count_nonzero(style.tiles) == 1

    def test_partial_tile_row(self):
        with pytest.raises(SizeMismatch):
            decode_style(create_style(create_test_chunk(b'TILE', b'\x00' * 4096)))
