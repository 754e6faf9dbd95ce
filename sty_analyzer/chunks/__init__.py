# sty_analyzer/chunks/__init__.py
"""Style file chunk parsers package."""
from .base import BaseChunk, ChunkInfo
from .allocation import AllocationTable, AllocationRange
from .palx import PalxChunk
from .ppal import PpalChunk
from .palb import PalbChunk
from .tile import TileChunk
from .sprg import SprgChunk
from .sprx import SprxChunk, SpriteRecord
from .sprb import SprbChunk
from .dels import DelsChunk, DeltaPatch, read_patches
from .delx import DelxChunk, DeltaSet
from .fonb import FonbChunk
from .cari import CariChunk, VehicleRecord, DoorInfo, VehicleFlags, VehicleFlags2
from .obji import ObjiChunk, MapObjectRecord
from .recy import RecyChunk
from .spec import SpecChunk
from .registry import ChunkRegistry, chunk_registry

__all__ = [
    'BaseChunk',
    'ChunkInfo',
    'AllocationTable',
    'AllocationRange',
    'PalxChunk',
    'PpalChunk',
    'PalbChunk',
    'TileChunk',
    'SprgChunk',
    'SprxChunk',
    'SpriteRecord',
    'SprbChunk',
    'DelsChunk',
    'DeltaPatch',
    'read_patches',
    'DelxChunk',
    'DeltaSet',
    'FonbChunk',
    'CariChunk',
    'VehicleRecord',
    'DoorInfo',
    'VehicleFlags',
    'VehicleFlags2',
    'ObjiChunk',
    'MapObjectRecord',
    'RecyChunk',
    'SpecChunk',
    'ChunkRegistry',
    'chunk_registry',
]
