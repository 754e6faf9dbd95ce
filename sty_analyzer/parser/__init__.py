# sty_analyzer/parser/__init__.py
"""Style file parser module."""
from .file_parser import StyleFileParser, decode_style, load_style

__all__ = [
    'StyleFileParser',
    'decode_style',
    'load_style'
]
