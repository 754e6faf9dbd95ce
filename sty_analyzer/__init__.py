"""GTA2 style file decoder package."""
from .parser import StyleFileParser, decode_style, load_style
from .bitmaps import Bitmap, StyleBitmaps, build_bitmaps
from .export import export_bitmaps, export_metadata
from .models import StyleFile
from .errors import (
    StyleParsingError,
    FormatError,
    TruncatedInput,
    SizeMismatch,
    UnknownChunk,
    IndexOutOfRange,
)

__version__ = '0.1.0'

__all__ = [
    'StyleFileParser',
    'decode_style',
    'load_style',
    'Bitmap',
    'StyleBitmaps',
    'build_bitmaps',
    'export_bitmaps',
    'export_metadata',
    'StyleFile',
    'StyleParsingError',
    'FormatError',
    'TruncatedInput',
    'SizeMismatch',
    'UnknownChunk',
    'IndexOutOfRange',
]
