"""Base chunk parser."""
from dataclasses import dataclass
from typing import Any, Callable, List, Optional
import logging

from ..constants import CHUNK_HEADER_SIZE
from ..errors import SizeMismatch, StyleParsingError, TruncatedInput
from ..utils.binary import BinaryReader

logger = logging.getLogger(__name__)

@dataclass
class ChunkInfo:
    """Information about a chunk seen while walking the file"""
    tag: str
    offset: int          # Offset of the chunk header in the file
    size: int            # Declared payload size
    consumed: int = 0    # Payload bytes used by the handler
    handled: bool = True # False when the tag had no parser and was skipped

    @property
    def data_offset(self) -> int:
        return self.offset + CHUNK_HEADER_SIZE

    def to_dict(self) -> dict:
        return {
            'tag': self.tag,
            'offset': self.offset,
            'size': self.size,
            'consumed': self.consumed,
            'handled': self.handled
        }

class BaseChunk:
    """Base class for chunk parsers.

    Subclasses set TAG (the 4-byte chunk name), FIELD (the StyleFile
    attribute the result is stored in) and FIXED_LAYOUT. Size problems in
    fixed-layout chunks are fatal; variable-layout chunks report them as
    warnings and keep what they could decode.
    """

    TAG: bytes = b''
    FIELD: str = ''
    FIXED_LAYOUT = True

    def __init__(self, header: Optional[ChunkInfo], reader: BinaryReader):
        """Initialize chunk parser.

        Args:
            header: Chunk header info
            reader: Reader limited to the chunk payload
        """
        self.header = header
        self.reader = reader
        self.warnings: List[StyleParsingError] = []

    @property
    def name(self) -> str:
        return self.TAG.decode('ascii')

    @property
    def size(self) -> int:
        return self.reader.size

    def parse(self) -> Any:
        """Parse chunk data.

        Returns:
            Decoded chunk value

        Raises:
            StyleParsingError: If chunk data is invalid
        """
        raise NotImplementedError("Subclasses must implement parse()")

    def _warn(self, message: str) -> None:
        warning = SizeMismatch(self.name, message)
        logger.warning(str(warning))
        self.warnings.append(warning)

    def _validate_size(self, expected_size: int) -> None:
        """Require the payload to be exactly expected_size bytes."""
        if self.size != expected_size:
            raise SizeMismatch(self.name, f"chunk size {self.size} != {expected_size}")

    def _validate_entry_size(self, entry_size: int) -> int:
        """Require the payload to be a whole number of entries.

        Returns:
            Number of entries
        """
        if self.size % entry_size != 0:
            raise SizeMismatch(
                self.name,
                f"chunk size {self.size} not divisible by entry size {entry_size}"
            )
        return self.size // entry_size

    def _read_records(self, read_one: Callable[[BinaryReader], Any]) -> List[Any]:
        """Read self-delimited records until the payload is exhausted.

        A record cut short by the chunk boundary is dropped with a warning.
        """
        records = []
        while not self.reader.is_exhausted():
            start = self.reader.position
            try:
                records.append(read_one(self.reader))
            except TruncatedInput:
                self._warn(
                    f"record {len(records)} at payload offset {start} "
                    f"overruns chunk end ({self.size} bytes)"
                )
                self.reader.skip(self.reader.remaining)
                break
        return records
