# sty_analyzer/chunks/palx.py
import numpy as np

from .base import BaseChunk
from ..constants import ChunkTag, VIRTUAL_PALETTE_COUNT

class PalxChunk(BaseChunk):
    """PALX (Palette Index) chunk parser.

    Maps each of the 16384 virtual palettes to a physical palette number.
    Each entry is a u16, total size is 32768 bytes.
    """

    TAG = ChunkTag.PALX.value
    FIELD = 'palette_index'
    ENTRY_SIZE = 2
    EXPECTED_SIZE = ENTRY_SIZE * VIRTUAL_PALETTE_COUNT

    def parse(self) -> np.ndarray:
        """Parse PALX chunk data into a uint16 array."""
        self._validate_size(self.EXPECTED_SIZE)
        return self.reader.read_array('<u2', VIRTUAL_PALETTE_COUNT)
