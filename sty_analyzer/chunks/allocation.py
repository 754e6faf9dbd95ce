# sty_analyzer/chunks/allocation.py
from dataclasses import dataclass
from typing import Dict, Any, Iterator, List, Sequence, Tuple

from ..errors import IndexOutOfRange


@dataclass(frozen=True)
class AllocationRange:
    """Contiguous (offset, count) block owned by one category."""
    name: str
    offset: int
    count: int

    @property
    def end(self) -> int:
        return self.offset + self.count

    def __contains__(self, index: int) -> bool:
        return self.offset <= index < self.end

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'offset': self.offset, 'count': self.count}


class AllocationTable:
    """Named ranges partitioning an index space.

    Offsets are the running sum of the counts in declaration order, so the
    ranges never overlap and leave no gaps.
    """

    def __init__(self, ranges: Sequence[AllocationRange]):
        self.ranges: List[AllocationRange] = list(ranges)
        self._by_name = {r.name: r for r in self.ranges}

    @classmethod
    def from_counts(cls, names: Sequence[str], counts: Sequence[int]) -> 'AllocationTable':
        if len(names) != len(counts):
            raise ValueError(f"{len(names)} names for {len(counts)} counts")
        ranges = []
        offset = 0
        for name, count in zip(names, counts):
            ranges.append(AllocationRange(name, offset, count))
            offset += count
        return cls(ranges)

    @property
    def total(self) -> int:
        return self.ranges[-1].end if self.ranges else 0

    def __getitem__(self, name: str) -> AllocationRange:
        return self._by_name[name]

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[AllocationRange]:
        return iter(self.ranges)

    def __len__(self) -> int:
        return len(self.ranges)

    def classify(self, index: int) -> Tuple[str, int]:
        """Return (category name, index relative to the category start)."""
        for block in self.ranges:
            if index in block:
                return block.name, index - block.offset
        raise IndexOutOfRange(f"Index {index} outside allocation table (total {self.total})")

    def to_dict(self) -> Dict[str, Any]:
        return {r.name: {'offset': r.offset, 'count': r.count} for r in self.ranges}
