# sty_analyzer/chunks/recy.py
from typing import List

from .base import BaseChunk
from ..constants import ChunkTag, MAX_RECYCLABLE_CARS, RECYCLE_END

class RecyChunk(BaseChunk):
    """RECY (Car Recycling Info) chunk parser.

    Up to 64 car model numbers, terminated by 255. Bytes after the
    terminator are padding.
    """

    TAG = ChunkTag.RECY.value
    FIELD = 'recyclable_cars'
    FIXED_LAYOUT = False

    def parse(self) -> List[int]:
        if self.size > MAX_RECYCLABLE_CARS:
            self._warn(f"chunk size {self.size} > {MAX_RECYCLABLE_CARS}, ignoring the excess")

        models = []
        limit = min(self.size, MAX_RECYCLABLE_CARS)
        for _ in range(limit):
            value = self.reader.read_u8()
            if value == RECYCLE_END:
                break
            models.append(value)

        self.reader.skip(self.reader.remaining)
        return models
