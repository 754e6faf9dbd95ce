# sty_analyzer/chunks/fonb.py
from .allocation import AllocationTable
from .base import BaseChunk
from ..constants import ChunkTag
from ..errors import TruncatedInput

class FonbChunk(BaseChunk):
    """FONB (Font Base) chunk parser.

    u16 font count followed by one u16 glyph count per font. Fonts occupy
    consecutive ranges of the font sprites.
    """

    TAG = ChunkTag.FONB.value
    FIELD = 'font_allocation'
    FIXED_LAYOUT = False

    def parse(self) -> AllocationTable:
        counts = []
        if self.size < 2:
            self._warn(f"chunk size {self.size} too small for the font count")
            self.reader.skip(self.reader.remaining)
            return AllocationTable.from_counts([], counts)

        font_count = self.reader.read_u16()
        try:
            counts.extend(self.reader.read_many('<H', font_count))
        except TruncatedInput:
            available = self.reader.remaining // 2
            self._warn(f"{font_count} fonts declared, only room for {available}")
            counts.extend(self.reader.read_many('<H', available))
            self.reader.skip(self.reader.remaining)

        return AllocationTable.from_counts(
            [f"font{i}" for i in range(len(counts))],
            counts
        )
