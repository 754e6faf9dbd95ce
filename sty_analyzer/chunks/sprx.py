# sty_analyzer/chunks/sprx.py
from dataclasses import dataclass
from typing import Any, Dict, List

from .base import BaseChunk
from ..constants import ChunkTag, SPRITE_STRIDE
from ..structures import SpriteEntry

@dataclass(frozen=True)
class SpriteRecord:
    """Location and size of one sprite in the sprite store."""
    offset: int     # Byte offset into the sprite store
    width: int
    height: int

    @property
    def x(self) -> int:
        return self.offset % SPRITE_STRIDE

    @property
    def y(self) -> int:
        return self.offset // SPRITE_STRIDE

    def to_dict(self) -> Dict[str, Any]:
        return {
            'offset': self.offset,
            'width': self.width,
            'height': self.height
        }

class SprxChunk(BaseChunk):
    """SPRX (Sprite Index) chunk parser.

    Each entry is 8 bytes: u32 offset, u8 width, u8 height, 2 pad bytes.
    """

    TAG = ChunkTag.SPRX.value
    FIELD = 'sprites'
    ENTRY_SIZE = SpriteEntry.sizeof()

    def parse(self) -> List[SpriteRecord]:
        count = self._validate_entry_size(self.ENTRY_SIZE)
        sprites = []
        for _ in range(count):
            entry = self.reader.read_struct(SpriteEntry)
            sprites.append(SpriteRecord(entry.offset, entry.width, entry.height))
        return sprites
