"""Style file parser."""
from typing import Optional, Set, Type, Union
import logging
from pathlib import Path

from ..chunks.base import BaseChunk, ChunkInfo
from ..chunks.registry import ChunkRegistry, chunk_registry
from ..constants import STYLE_MAGIC
from ..errors import FormatError, SizeMismatch, UnknownChunk
from ..models import StyleFile
from ..structures import ChunkHeader, StyleFileHeader
from ..utils.binary import BinaryReader, Buffer

logger = logging.getLogger(__name__)

class StyleFileParser:
    """Main parser for style files.

    Walks the chunk list once, handing each payload to the parser
    registered for its tag. Only raw records are produced here; see
    sty_analyzer.bitmaps for palette resolution.
    """

    def __init__(self, registry: Optional[ChunkRegistry] = None):
        self.registry = registry or chunk_registry

    def _read_header(self, reader: BinaryReader, style: StyleFile) -> None:
        """Check the magic, then read the version."""
        magic = bytes(reader.peek_bytes(len(STYLE_MAGIC)))
        if magic != STYLE_MAGIC:
            raise FormatError(f"Not a style file: magic {magic!r} != {STYLE_MAGIC!r}")

        header = reader.read_struct(StyleFileHeader)
        style.version = header.version
        logger.debug(f"Style file version {style.version}")

    def _parse_chunk(self,
                     parser_class: Type[BaseChunk],
                     info: ChunkInfo,
                     payload: BinaryReader,
                     style: StyleFile,
                     seen: Set[str]) -> None:
        """Run one chunk parser and store its result on the style."""
        chunk = parser_class(header=info, reader=payload)
        value = chunk.parse()
        info.consumed = payload.position
        style.warnings.extend(chunk.warnings)

        if not payload.is_exhausted():
            mismatch = SizeMismatch(
                info.tag,
                f"parser consumed {info.consumed} of {info.size} bytes"
            )
            if parser_class.FIXED_LAYOUT:
                raise mismatch
            logger.warning(str(mismatch))
            style.warnings.append(mismatch)

        if info.tag in seen:
            logger.warning(f"Duplicate {info.tag} chunk at offset {info.offset} replaces the earlier one")
        seen.add(info.tag)
        setattr(style, parser_class.FIELD, value)

    def parse(self, data: Buffer) -> StyleFile:
        """Decode a whole style file held in memory.

        Args:
            data: File contents

        Returns:
            StyleFile with the raw records of every known chunk

        Raises:
            FormatError: Bad magic
            TruncatedInput: A header or payload runs past the end of data
            SizeMismatch: A fixed-layout chunk has the wrong size
        """
        reader = BinaryReader(data)
        style = StyleFile()
        seen: Set[str] = set()

        self._read_header(reader, style)

        while not reader.is_exhausted():
            offset = reader.position
            header = reader.read_struct(ChunkHeader)
            tag = header.tag.decode('ascii', 'replace')
            payload = reader.sub_reader(header.size)

            info = ChunkInfo(tag, offset, header.size)
            style.chunks.append(info)

            parser_class = self.registry.get_parser(header.tag)
            if parser_class is None:
                unknown = UnknownChunk(tag, offset, header.size)
                logger.warning(str(unknown))
                style.warnings.append(unknown)
                info.handled = False
                info.consumed = header.size
                continue

            logger.debug(f"Chunk {tag} at {offset}, {header.size} bytes")
            self._parse_chunk(parser_class, info, payload, style, seen)

        logger.info(f"Decoded {len(style.chunks)} chunks, {len(style.warnings)} warnings")
        return style

    def parse_file(self, file_path: Union[str, Path]) -> StyleFile:
        """Read a style file from disk and decode it.

        I/O errors propagate before any decoding starts.
        """
        file_path = Path(file_path)
        logger.info(f"Processing style file: {file_path}")
        with open(file_path, 'rb') as f:
            data = f.read()
        return self.parse(data)

def decode_style(data: Buffer) -> StyleFile:
    """Decode a style file from an in-memory buffer."""
    return StyleFileParser().parse(data)

def load_style(file_path: Union[str, Path]) -> StyleFile:
    """Read and decode a style file."""
    return StyleFileParser().parse_file(file_path)
