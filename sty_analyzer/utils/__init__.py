"""Utility helpers for the style analyzer."""
from .binary import BinaryReader
from .logging import setup_logging

__all__ = ['BinaryReader', 'setup_logging']
