"""
Decoded style file model.
Holds the raw records of every chunk; pixels are produced by bitmaps.py.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np

from .chunks.allocation import AllocationTable
from .chunks.base import ChunkInfo
from .chunks.cari import VehicleRecord
from .chunks.delx import DeltaSet
from .chunks.obji import MapObjectRecord
from .chunks.sprx import SpriteRecord
from .constants import SurfaceType
from .errors import StyleParsingError

@dataclass
class StyleFile:
    """Everything decoded from one style file buffer"""
    version: int = 0

    # Palettes
    palette_index: Optional[np.ndarray] = None          # (16384,) uint16
    palettes: Optional[np.ndarray] = None               # (count, 256, 4) uint8 RGBA
    palette_allocation: Optional[AllocationTable] = None

    # Tiles
    tiles: Optional[np.ndarray] = None                  # (count, 64, 64) uint8

    # Sprites
    sprite_store: Optional[np.ndarray] = None           # flat uint8, stride 256
    sprites: List[SpriteRecord] = field(default_factory=list)
    sprite_allocation: Optional[AllocationTable] = None

    # Deltas
    delta_store: Optional[np.ndarray] = None            # flat uint8
    delta_sets: List[DeltaSet] = field(default_factory=list)

    # Metadata
    font_allocation: Optional[AllocationTable] = None
    vehicles: List[VehicleRecord] = field(default_factory=list)
    map_objects: List[MapObjectRecord] = field(default_factory=list)
    recyclable_cars: List[int] = field(default_factory=list)
    surfaces: Dict[SurfaceType, List[int]] = field(default_factory=dict)

    # Layout and non-fatal problems
    chunks: List[ChunkInfo] = field(default_factory=list)
    warnings: List[StyleParsingError] = field(default_factory=list)

    @property
    def tile_count(self) -> int:
        return 0 if self.tiles is None else len(self.tiles)

    @property
    def palette_count(self) -> int:
        return 0 if self.palettes is None else len(self.palettes)

    def chunk_tags(self) -> List[str]:
        return [c.tag for c in self.chunks]
