# sty_analyzer/constants.py
from enum import Enum, IntEnum

STYLE_MAGIC = b'GBST'
CHUNK_HEADER_SIZE = 8

# Palettes
COLORS_PER_PALETTE = 256
PALETTES_PER_PAGE = 64
VIRTUAL_PALETTE_COUNT = 16384

# Tiles and pages are square
TILE_SIZE = 64
PAGE_SIZE = 256
TILES_PER_PAGE_ROW = PAGE_SIZE // TILE_SIZE

# Sprite and delta rasters share the page stride
SPRITE_STRIDE = PAGE_SIZE

MAX_RECYCLABLE_CARS = 64
RECYCLE_END = 255

PALETTE_CATEGORIES = (
    'tile',
    'sprite',
    'car_remap',
    'ped_remap',
    'code_obj_remap',
    'map_obj_remap',
    'user_remap',
    'font_remap',
)

SPRITE_CATEGORIES = (
    'car',
    'ped',
    'code_obj',
    'map_obj',
    'user',
    'font',
)


class ChunkTag(Enum):
    """Chunk tags found in style files."""
    PALX = b'PALX'   # Virtual palette -> physical palette table
    PPAL = b'PPAL'   # Physical palettes
    PALB = b'PALB'   # Palette allocation
    TILE = b'TILE'   # Tile pages
    SPRG = b'SPRG'   # Sprite graphics store
    SPRX = b'SPRX'   # Sprite index
    SPRB = b'SPRB'   # Sprite allocation
    DELS = b'DELS'   # Delta store
    DELX = b'DELX'   # Delta index
    FONB = b'FONB'   # Font allocation
    CARI = b'CARI'   # Car info
    OBJI = b'OBJI'   # Map object info
    RECY = b'RECY'   # Recyclable cars
    SPEC = b'SPEC'   # Surface behavior lists
    PSXT = b'PSXT'   # PSX tiles, not supported


class SurfaceType(IntEnum):
    """Surface behavior categories, in SPEC chunk order."""
    GRASS = 0
    ROAD_SPECIAL = 1
    WATER = 2
    ELECTRIFIED = 3
    ELECTRIFIED_PLATFORM = 4
    WOOD_FLOOR = 5
    METAL_FLOOR = 6
    METAL_WALL = 7
    GRASS_WALL = 8
