"""
Chunk parser registry
"""
from typing import Dict, Optional, Type
import logging

from .base import BaseChunk
from .palx import PalxChunk
from .ppal import PpalChunk
from .palb import PalbChunk
from .tile import TileChunk
from .sprg import SprgChunk
from .sprx import SprxChunk
from .sprb import SprbChunk
from .dels import DelsChunk
from .delx import DelxChunk
from .fonb import FonbChunk
from .cari import CariChunk
from .obji import ObjiChunk
from .recy import RecyChunk
from .spec import SpecChunk

logger = logging.getLogger(__name__)

DEFAULT_PARSERS = (
    PalxChunk,
    PpalChunk,
    PalbChunk,
    SprbChunk,
    TileChunk,
    SprgChunk,
    SprxChunk,
    DelsChunk,
    DelxChunk,
    FonbChunk,
    CariChunk,
    ObjiChunk,
    RecyChunk,
    SpecChunk,
)

class ChunkRegistry:
    """Registry of chunk parsers mapped to chunk tags.

    Tags without a parser (PSXT among them) are skipped by the file parser.
    """

    def __init__(self, register_defaults: bool = True):
        self._parsers: Dict[bytes, Type[BaseChunk]] = {}
        if register_defaults:
            for parser_class in DEFAULT_PARSERS:
                self.register(parser_class)

    def register(self, parser_class: Type[BaseChunk], tag: Optional[bytes] = None) -> None:
        """Register a parser for a chunk tag (defaults to its TAG)."""
        tag = tag or parser_class.TAG
        if len(tag) != 4:
            raise ValueError(f"Chunk tags are 4 bytes, got {tag!r}")
        if tag in self._parsers:
            logger.debug(f"Replacing parser for {tag!r}: {self._parsers[tag].__name__} -> {parser_class.__name__}")
        self._parsers[tag] = parser_class

    def get_parser(self, tag: bytes) -> Optional[Type[BaseChunk]]:
        return self._parsers.get(tag)

    def supports_chunk(self, tag: bytes) -> bool:
        return tag in self._parsers

    def list_supported_chunks(self) -> Dict[bytes, str]:
        """Map each supported tag to its parser class name."""
        return {tag: parser.__name__ for tag, parser in self._parsers.items()}

# Global registry instance
chunk_registry = ChunkRegistry()
