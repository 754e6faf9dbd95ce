# sty_analyzer/chunks/spec.py
from typing import Dict, List
import logging

from .base import BaseChunk
from ..constants import ChunkTag, SurfaceType

logger = logging.getLogger(__name__)

class SpecChunk(BaseChunk):
    """SPEC (Surface Behavior) chunk parser.

    One list of u16 tile numbers per surface type, each terminated by 0,
    in SurfaceType order. The chunk may end before all types are listed.
    """

    TAG = ChunkTag.SPEC.value
    FIELD = 'surfaces'
    FIXED_LAYOUT = False

    def parse(self) -> Dict[SurfaceType, List[int]]:
        surfaces: Dict[SurfaceType, List[int]] = {surface: [] for surface in SurfaceType}

        for surface in SurfaceType:
            if self.reader.is_exhausted():
                break
            tiles = surfaces[surface]
            while not self.reader.is_exhausted():
                if self.reader.remaining < 2:
                    self._warn(f"odd trailing byte in {surface.name.lower()} list")
                    self.reader.skip(self.reader.remaining)
                    break
                value = self.reader.read_u16()
                if value == 0:
                    break
                tiles.append(value)

        logger.debug(
            "Surface tiles: " + ", ".join(f"{s.name.lower()}={len(t)}" for s, t in surfaces.items())
        )
        return surfaces
