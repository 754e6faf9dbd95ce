# sty_analyzer/chunks/obji.py
from dataclasses import dataclass
from typing import List

from .base import BaseChunk
from ..constants import ChunkTag
from ..structures import ObjectEntry

@dataclass(frozen=True)
class MapObjectRecord:
    model: int      # Object model number
    sprites: int    # Number of sprites stored for this model

    def to_dict(self) -> dict:
        return {'model': self.model, 'sprites': self.sprites}

class ObjiChunk(BaseChunk):
    """OBJI (Map Object Info) chunk parser.

    Each entry is 2 bytes: model number and sprite count.
    """

    TAG = ChunkTag.OBJI.value
    FIELD = 'map_objects'
    ENTRY_SIZE = ObjectEntry.sizeof()

    def parse(self) -> List[MapObjectRecord]:
        count = self._validate_entry_size(self.ENTRY_SIZE)
        objects = []
        for _ in range(count):
            entry = self.reader.read_struct(ObjectEntry)
            objects.append(MapObjectRecord(entry.model, entry.sprites))
        return objects
