# sty_analyzer/chunks/tile.py
import logging

import numpy as np

from .base import BaseChunk
from ..constants import ChunkTag, PAGE_SIZE, TILE_SIZE, TILES_PER_PAGE_ROW

logger = logging.getLogger(__name__)

class TileChunk(BaseChunk):
    """TILE chunk parser.

    Tiles are 64x64 palette indices, grouped into 256x256 pages. Pages are
    stacked into one tall buffer four tiles wide, so tile i sits at tile
    row i // 4 and tile column i % 4 of that buffer.
    """

    TAG = ChunkTag.TILE.value
    FIELD = 'tiles'
    TILE_BYTES = TILE_SIZE * TILE_SIZE
    ROW_BYTES = TILE_SIZE * PAGE_SIZE

    def parse(self) -> np.ndarray:
        """Parse TILE chunk data.

        Returns:
            uint8 array of shape (tile_count, 64, 64), indexed [tile, y, x]
        """
        tile_rows = self._validate_entry_size(self.ROW_BYTES)

        pixels = self.reader.read_array(np.uint8, self.size)
        # [tile_row, y, tile_col, x] -> [tile_row, tile_col, y, x]
        tiles = pixels.reshape(tile_rows, TILE_SIZE, TILES_PER_PAGE_ROW, TILE_SIZE)
        tiles = tiles.transpose(0, 2, 1, 3).reshape(-1, TILE_SIZE, TILE_SIZE)

        logger.debug(f"Decoded {len(tiles)} tiles")
        return np.ascontiguousarray(tiles)
