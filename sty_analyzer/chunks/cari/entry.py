# sty_analyzer/chunks/cari/entry.py
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .flags import VehicleFlags, VehicleFlags2
from ...structures import CarInfoHeader, DoorEntry
from ...utils.binary import BinaryReader

@dataclass(frozen=True)
class DoorInfo:
    """Door position relative to the center of the car."""
    rx: int
    ry: int

@dataclass
class VehicleRecord:
    """Single entry in the CARI chunk.

    14 fixed bytes, then num_remaps remap palettes, a door count and the
    doors themselves.
    """
    model: int
    sprite: int                 # Sprite number relative to the first car sprite
    width: int                  # Collision size, may differ from the sprite
    height: int
    passengers: int
    wreck: int                  # Wreck graphic (0-8, 99 if it can't wreck)
    rating: int
    front_wheel_offset: int
    rear_wheel_offset: int
    front_window_offset: int
    rear_window_offset: int
    info_flags: VehicleFlags
    info_flags2: VehicleFlags2
    remaps: List[int] = field(default_factory=list)    # Relative to the car remap palettes
    doors: List[DoorInfo] = field(default_factory=list)

    @classmethod
    def read(cls, reader: BinaryReader) -> 'VehicleRecord':
        """Read one vehicle record at the reader cursor."""
        header = reader.read_struct(CarInfoHeader)
        remaps = list(reader.read_many('<B', header.num_remaps))
        num_doors = reader.read_u8()
        doors = []
        for _ in range(num_doors):
            door = reader.read_struct(DoorEntry)
            doors.append(DoorInfo(door.rx, door.ry))

        return cls(
            model=header.model,
            sprite=header.sprite,
            width=header.width,
            height=header.height,
            passengers=header.passengers,
            wreck=header.wreck,
            rating=header.rating,
            front_wheel_offset=header.front_wheel_offset,
            rear_wheel_offset=header.rear_wheel_offset,
            front_window_offset=header.front_window_offset,
            rear_window_offset=header.rear_window_offset,
            info_flags=VehicleFlags(header.info_flags),
            info_flags2=VehicleFlags2(header.info_flags2),
            remaps=remaps,
            doors=doors
        )

    @property
    def num_remaps(self) -> int:
        return len(self.remaps)

    def to_dict(self) -> Dict[str, Any]:
        """Convert entry to dictionary format."""
        return {
            'model': self.model,
            'sprite': self.sprite,
            'width': self.width,
            'height': self.height,
            'passengers': self.passengers,
            'wreck': self.wreck,
            'rating': self.rating,
            'front_wheel_offset': self.front_wheel_offset,
            'rear_wheel_offset': self.rear_wheel_offset,
            'front_window_offset': self.front_window_offset,
            'rear_window_offset': self.rear_window_offset,
            'info_flags': [flag.name.lower() for flag in VehicleFlags if flag in self.info_flags],
            'info_flags2': [flag.name.lower() for flag in VehicleFlags2 if flag in self.info_flags2],
            'remaps': list(self.remaps),
            'doors': [{'rx': d.rx, 'ry': d.ry} for d in self.doors]
        }
