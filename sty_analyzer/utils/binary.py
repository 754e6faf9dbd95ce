"""
Binary data handling utilities for style parsing.
"""
import struct
from typing import Any, Tuple, Union

import numpy as np
from construct import Construct

from ..errors import TruncatedInput

Buffer = Union[bytes, bytearray, memoryview]


class BinaryReader:
    """
    Bounds-checked sequential reader over an in-memory buffer.

    Every read checks the remaining size first and raises TruncatedInput
    instead of reading past the end. Values returned by the read methods
    are copies; only peek_bytes() hands out a view into the buffer.
    """

    def __init__(self, data: Buffer, base_offset: int = 0):
        """
        Args:
            data: Buffer to read from
            base_offset: Absolute offset of data[0] in the enclosing file,
                used for error messages only
        """
        self._view = memoryview(data).cast('B')
        self._cursor = 0
        self.base_offset = base_offset

    @property
    def size(self) -> int:
        return len(self._view)

    @property
    def position(self) -> int:
        return self._cursor

    @property
    def remaining(self) -> int:
        return len(self._view) - self._cursor

    def is_exhausted(self) -> bool:
        return self._cursor >= len(self._view)

    def _require(self, count: int) -> None:
        if count < 0 or count > self.remaining:
            raise TruncatedInput(count, self.remaining, self.base_offset + self._cursor)

    def read(self, fmt: str) -> Any:
        """
        Read a single value described by a struct format string

        Args:
            fmt: struct format, e.g. '<H'

        Returns:
            The unpacked value (a tuple if the format holds several values)
        """
        size = struct.calcsize(fmt)
        self._require(size)
        values = struct.unpack_from(fmt, self._view, self._cursor)
        self._cursor += size
        return values[0] if len(values) == 1 else values

    def read_u8(self) -> int:
        return self.read('<B')

    def read_i8(self) -> int:
        return self.read('<b')

    def read_u16(self) -> int:
        return self.read('<H')

    def read_u32(self) -> int:
        return self.read('<I')

    def read_many(self, fmt: str, count: int) -> Tuple[Any, ...]:
        """
        Read count consecutive values of a single-value struct format

        Args:
            fmt: struct format of one element, e.g. '<H'
            count: Number of elements

        Returns:
            Tuple of values
        """
        if count == 0:
            return ()
        byte_order = fmt[0] if fmt[0] in '<>!=@' else ''
        element = fmt[len(byte_order):]
        return self.read(f"{byte_order}{count}{element}") if count > 1 else (self.read(fmt),)

    def read_array(self, dtype: Union[str, np.dtype], count: int) -> np.ndarray:
        """Read count elements into a new numpy array (never a view)."""
        dtype = np.dtype(dtype)
        size = dtype.itemsize * count
        self._require(size)
        array = np.frombuffer(self._view, dtype=dtype, count=count, offset=self._cursor).copy()
        self._cursor += size
        return array

    def read_bytes(self, count: int) -> bytes:
        self._require(count)
        data = self._view[self._cursor:self._cursor + count].tobytes()
        self._cursor += count
        return data

    def read_struct(self, structure: Construct) -> Any:
        """
        Parse a fixed-size construct structure at the cursor

        Args:
            structure: construct Struct with a static size

        Returns:
            Parsed construct Container
        """
        size = structure.sizeof()
        self._require(size)
        result = structure.parse(self._view[self._cursor:self._cursor + size].tobytes())
        self._cursor += size
        return result

    def peek_bytes(self, count: int) -> memoryview:
        """Return a view of the next count bytes without advancing."""
        self._require(count)
        return self._view[self._cursor:self._cursor + count]

    def skip(self, count: int) -> None:
        self._require(count)
        self._cursor += count

    def sub_reader(self, count: int) -> 'BinaryReader':
        """
        Split off a reader limited to the next count bytes

        The parent cursor moves past those bytes whatever the child reads.
        """
        self._require(count)
        child = BinaryReader(
            self._view[self._cursor:self._cursor + count],
            base_offset=self.base_offset + self._cursor
        )
        self._cursor += count
        return child
