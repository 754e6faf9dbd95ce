# sty_analyzer/chunks/cari/__init__.py
"""CARI (Car Info) parser."""
from .parser import CariChunk
from .entry import VehicleRecord, DoorInfo
from .flags import VehicleFlags, VehicleFlags2

__all__ = ['CariChunk', 'VehicleRecord', 'DoorInfo', 'VehicleFlags', 'VehicleFlags2']
