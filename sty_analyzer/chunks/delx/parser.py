# sty_analyzer/chunks/delx/parser.py
from typing import List
import logging
from ..base import BaseChunk
from ...constants import ChunkTag
from .entry import DeltaSet

logger = logging.getLogger(__name__)

class DelxChunk(BaseChunk):
    """DELX (Delta Index) chunk parser.

    Variable-length entries: u16 sprite, u8 frame count, 1 pad byte and
    then one u16 size per frame. Entries repeat to the end of the chunk.
    """

    TAG = ChunkTag.DELX.value
    FIELD = 'delta_sets'
    FIXED_LAYOUT = False

    def parse(self) -> List[DeltaSet]:
        delta_sets = self._read_records(DeltaSet.read)
        logger.debug(
            f"Decoded {len(delta_sets)} delta sets, "
            f"{sum(len(d.sizes) for d in delta_sets)} frames"
        )
        return delta_sets
