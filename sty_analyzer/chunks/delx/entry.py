# sty_analyzer/chunks/delx/entry.py
from dataclasses import dataclass, field
from typing import Any, Dict, List

from ...structures import DeltaIndexHeader
from ...utils.binary import BinaryReader

@dataclass
class DeltaSet:
    """Delta frames derived from one sprite.

    One entry per frame in sizes, giving the byte length of that frame's
    patch records in the delta store.
    """
    sprite: int
    sizes: List[int] = field(default_factory=list)

    @classmethod
    def read(cls, reader: BinaryReader) -> 'DeltaSet':
        header = reader.read_struct(DeltaIndexHeader)
        sizes = list(reader.read_many('<H', header.count))
        return cls(header.sprite, sizes)

    def to_dict(self) -> Dict[str, Any]:
        return {'sprite': self.sprite, 'sizes': list(self.sizes)}
