# sty_analyzer/chunks/cari/parser.py
from typing import List
import logging
from ..base import BaseChunk
from ...constants import ChunkTag
from .entry import VehicleRecord

logger = logging.getLogger(__name__)

class CariChunk(BaseChunk):
    """CARI (Car Info) chunk parser.

    Variable-length vehicle records repeated to the end of the chunk.
    """

    TAG = ChunkTag.CARI.value
    FIELD = 'vehicles'
    FIXED_LAYOUT = False

    def parse(self) -> List[VehicleRecord]:
        vehicles = self._read_records(VehicleRecord.read)
        logger.debug(f"Decoded {len(vehicles)} vehicle records")
        return vehicles
