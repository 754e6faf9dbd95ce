# sty_analyzer/chunks/dels.py
from dataclasses import dataclass
from typing import List

import numpy as np

from .base import BaseChunk
from ..constants import ChunkTag
from ..errors import SizeMismatch
from ..structures import DeltaPatchHeader
from ..utils.binary import BinaryReader

@dataclass(frozen=True)
class DeltaPatch:
    """One run of a delta frame.

    skip is relative to the end of the previous run, in a raster with the
    sprite store stride.
    """
    skip: int
    pixels: bytes

    @property
    def byte_size(self) -> int:
        return DeltaPatchHeader.sizeof() + len(self.pixels)

class DelsChunk(BaseChunk):
    """DELS (Delta Store) chunk parser.

    Patch records for every delta frame, stored back to back in the order
    of the DELX entries. Kept opaque until reconstruction.
    """

    TAG = ChunkTag.DELS.value
    FIELD = 'delta_store'

    def parse(self) -> np.ndarray:
        return self.reader.read_array(np.uint8, self.size)

def read_patches(reader: BinaryReader, size: int) -> List[DeltaPatch]:
    """Read the patch records of one delta frame.

    Args:
        reader: Reader positioned at the first record of the frame
        size: Byte length of the frame's records

    Returns:
        Patch records in order

    Raises:
        SizeMismatch: If the last record runs past size
        TruncatedInput: If the store ends first
    """
    patches = []
    used = 0
    while used < size:
        header = reader.read_struct(DeltaPatchHeader)
        patch = DeltaPatch(header.skip, reader.read_bytes(header.length))
        used += patch.byte_size
        patches.append(patch)
    if used != size:
        raise SizeMismatch('DELS', f"delta frame records use {used} bytes, expected {size}")
    return patches
