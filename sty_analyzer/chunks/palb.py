# sty_analyzer/chunks/palb.py
from .allocation import AllocationTable
from .base import BaseChunk
from ..constants import ChunkTag, PALETTE_CATEGORIES
from ..structures import PaletteCounts

class PalbChunk(BaseChunk):
    """PALB (Palette Base) chunk parser.

    Eight u16 counts of virtual palettes, one per asset class. The virtual
    palette space is allocated to the classes in this order.
    """

    TAG = ChunkTag.PALB.value
    FIELD = 'palette_allocation'
    EXPECTED_SIZE = PaletteCounts.sizeof()

    def parse(self) -> AllocationTable:
        self._validate_size(self.EXPECTED_SIZE)
        counts = self.reader.read_struct(PaletteCounts)
        return AllocationTable.from_counts(
            PALETTE_CATEGORIES,
            [counts[name] for name in PALETTE_CATEGORIES]
        )
