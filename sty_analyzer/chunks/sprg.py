# sty_analyzer/chunks/sprg.py
import numpy as np

from .base import BaseChunk
from ..constants import ChunkTag

class SprgChunk(BaseChunk):
    """SPRG (Sprite Graphics) chunk parser.

    Raw palette indices for all sprites, laid out as a raster 256 pixels
    wide. Sprite records address it by byte offset.
    """

    TAG = ChunkTag.SPRG.value
    FIELD = 'sprite_store'

    def parse(self) -> np.ndarray:
        return self.reader.read_array(np.uint8, self.size)
