# sty_analyzer/chunks/ppal.py
import logging

import numpy as np

from .base import BaseChunk
from ..constants import ChunkTag, COLORS_PER_PALETTE, PALETTES_PER_PAGE

logger = logging.getLogger(__name__)

class PpalChunk(BaseChunk):
    """PPAL (Physical Palettes) chunk parser.

    Palettes come in pages of 64. Within a page the colors are interleaved:

        C0P0   - C0P1   - ... - C0P63
        C1P0   - C1P1   - ... - C1P63
        ...
        C255P0 - C255P1 - ... - C255P63

    Each color is a little-endian dword: bits 16-23 red, 8-15 green,
    0-7 blue. The top byte is not an alpha channel; alpha is always opaque.
    """

    TAG = ChunkTag.PPAL.value
    FIELD = 'palettes'
    PALETTE_SIZE = COLORS_PER_PALETTE * 4
    PAGE_SIZE = PALETTE_SIZE * PALETTES_PER_PAGE

    def parse(self) -> np.ndarray:
        """Parse PPAL chunk data.

        Returns:
            uint8 array of shape (palette_count, 256, 4) holding RGBA colors
        """
        count = self._validate_entry_size(self.PALETTE_SIZE)
        pages = self._validate_entry_size(self.PAGE_SIZE)

        raw = self.reader.read_array('<u4', count * COLORS_PER_PALETTE)
        # (page, color, palette) on disk -> (page, palette, color)
        raw = raw.reshape(pages, COLORS_PER_PALETTE, PALETTES_PER_PAGE)
        raw = raw.transpose(0, 2, 1).reshape(count, COLORS_PER_PALETTE)

        palettes = np.empty((count, COLORS_PER_PALETTE, 4), dtype=np.uint8)
        palettes[..., 0] = (raw >> 16) & 0xFF
        palettes[..., 1] = (raw >> 8) & 0xFF
        palettes[..., 2] = raw & 0xFF
        palettes[..., 3] = 0xFF

        logger.debug(f"Decoded {count} physical palettes in {pages} pages")
        return palettes
