# sty_analyzer/structures.py
"""Fixed-size on-disk structures."""
from construct import (
    Struct,
    Bytes,
    Int32ul,
    Int16ul,
    Int8ul,
    Int8sl,
    Padding,
)

StyleFileHeader = Struct(
    "magic" / Bytes(4),
    "version" / Int16ul,
)

ChunkHeader = Struct(
    "tag" / Bytes(4),
    "size" / Int32ul,
)

PaletteCounts = Struct(
    "tile" / Int16ul,
    "sprite" / Int16ul,
    "car_remap" / Int16ul,
    "ped_remap" / Int16ul,
    "code_obj_remap" / Int16ul,
    "map_obj_remap" / Int16ul,
    "user_remap" / Int16ul,
    "font_remap" / Int16ul,
)

SpriteCounts = Struct(
    "car" / Int16ul,
    "ped" / Int16ul,
    "code_obj" / Int16ul,
    "map_obj" / Int16ul,
    "user" / Int16ul,
    "font" / Int16ul,
)

SpriteEntry = Struct(
    "offset" / Int32ul,
    "width" / Int8ul,
    "height" / Int8ul,
    Padding(2),
)

DeltaIndexHeader = Struct(
    "sprite" / Int16ul,
    "count" / Int8ul,
    Padding(1),
)

DeltaPatchHeader = Struct(
    "skip" / Int16ul,
    "length" / Int8ul,
)

CarInfoHeader = Struct(
    "model" / Int8ul,
    "sprite" / Int8ul,
    "width" / Int8ul,
    "height" / Int8ul,
    "num_remaps" / Int8ul,
    "passengers" / Int8ul,
    "wreck" / Int8ul,
    "rating" / Int8ul,
    "front_wheel_offset" / Int8sl,
    "rear_wheel_offset" / Int8sl,
    "front_window_offset" / Int8sl,
    "rear_window_offset" / Int8sl,
    "info_flags" / Int8ul,
    "info_flags2" / Int8ul,
)

DoorEntry = Struct(
    "rx" / Int8sl,
    "ry" / Int8sl,
)

ObjectEntry = Struct(
    "model" / Int8ul,
    "sprites" / Int8ul,
)
