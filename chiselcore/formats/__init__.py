"""
Chiselcore Formats Module
=========================

Shape payload codec and JSON file handling.
"""

from chiselcore.formats.shape_codec import (
    DecodedShape, FormatCheck, FormatError, ShapeMetadata,
    decode, decode_with_resize, detect_grid_size, encode,
    from_binary_string, to_binary_string, validate_format,
)
from chiselcore.formats.shape_file import ShapeFile, ShapeFileError

__all__ = [
    'DecodedShape',
    'FormatCheck',
    'FormatError',
    'ShapeMetadata',
    'decode',
    'decode_with_resize',
    'detect_grid_size',
    'encode',
    'from_binary_string',
    'to_binary_string',
    'validate_format',
    'ShapeFile',
    'ShapeFileError',
]
