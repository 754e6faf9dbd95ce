# sty_analyzer/chunks/sprb.py
from .allocation import AllocationTable
from .base import BaseChunk
from ..constants import ChunkTag, SPRITE_CATEGORIES
from ..structures import SpriteCounts

class SprbChunk(BaseChunk):
    """SPRB (Sprite Base) chunk parser.

    Six u16 sprite counts: car, ped, code object, map object, user, font.
    """

    TAG = ChunkTag.SPRB.value
    FIELD = 'sprite_allocation'
    EXPECTED_SIZE = SpriteCounts.sizeof()

    def parse(self) -> AllocationTable:
        self._validate_size(self.EXPECTED_SIZE)
        counts = self.reader.read_struct(SpriteCounts)
        return AllocationTable.from_counts(
            SPRITE_CATEGORIES,
            [counts[name] for name in SPRITE_CATEGORIES]
        )
