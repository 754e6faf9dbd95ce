# sty_analyzer/chunks/delx/__init__.py
"""DELX (Delta Index) parser."""
from .parser import DelxChunk
from .entry import DeltaSet

__all__ = ['DelxChunk', 'DeltaSet']
