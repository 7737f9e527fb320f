"""
Shape File Handler
==================

Reads and writes shape payloads as JSON files.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from chiselcore.core.voxel_grid import VoxelGrid
from chiselcore.formats.shape_codec import (
    DecodedShape, FormatError, ShapeMetadata,
    decode, decode_with_resize, encode, validate_format,
)

logger = logging.getLogger(__name__)


class ShapeFileError(IOError):
    """Raised when a shape file cannot be parsed or has an invalid format."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = list(errors or [])


class ShapeFile:
    """
    JSON shape file reader/writer.

    Files hold a single payload object:
    ``{"voxelDataString": ..., "difficulty": ..., "maxMoves": ...}``
    """

    EXTENSION = '.json'

    @classmethod
    def loads(cls, text: str) -> Dict[str, Any]:
        """
        Parse and check a payload from JSON text.

        Raises:
            ShapeFileError: If the text is not JSON or the payload is malformed
        """
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise ShapeFileError(f"Invalid JSON: {e}") from e

        check = validate_format(payload)
        logger.debug("Format check: valid=%s errors=%s", check.is_valid, check.errors)
        if not check.is_valid:
            raise ShapeFileError(
                "Invalid file format:\n" + "\n".join(check.errors), check.errors)
        return payload

    @classmethod
    def load(cls, filepath: str) -> Dict[str, Any]:
        """
        Load a payload from a shape file.

        Args:
            filepath: Path to the .json file

        Returns:
            The checked payload dictionary
        """
        path = Path(filepath)
        logger.debug("Loading shape file %s", path)
        try:
            text = path.read_text(encoding='utf-8')
        except UnicodeDecodeError as e:
            raise ShapeFileError(f"File is not UTF-8 text: {e}") from e
        return cls.loads(text)

    @classmethod
    def read(cls, filepath: str, target_size: Optional[int] = None) -> DecodedShape:
        """
        Load and decode a shape file.

        Args:
            filepath: Path to the .json file
            target_size: Resample to this grid size; native size if None

        Returns:
            DecodedShape for the file contents
        """
        payload = cls.load(filepath)
        try:
            if target_size is None:
                decoded = decode(payload)
            else:
                decoded = decode_with_resize(payload, target_size)
        except FormatError as e:
            raise ShapeFileError(str(e), [str(e)]) from e

        if decoded.was_converted:
            logger.debug("Converted %s from %d^3 to %d^3 (%d voxels)",
                         filepath, decoded.original_grid_size, decoded.grid_size,
                         decoded.grid.voxel_count())
        else:
            logger.debug("Read %s at grid size %d", filepath, decoded.grid_size)
        return decoded

    @classmethod
    def dumps(cls, grid: VoxelGrid, metadata: Optional[ShapeMetadata] = None,
              indent: Optional[int] = 2) -> str:
        """Serialize a grid and its metadata to JSON text."""
        return json.dumps(encode(grid, metadata), indent=indent)

    @classmethod
    def save(cls, filepath: str, grid: VoxelGrid,
             metadata: Optional[ShapeMetadata] = None, indent: Optional[int] = 2):
        """
        Write a grid to a shape file.

        The grid is written as-is; validate it first if it must be loadable
        by the game.
        """
        cls.save_payload(filepath, encode(grid, metadata), indent=indent)

    @classmethod
    def save_payload(cls, filepath: str, payload: Dict[str, Any],
                     indent: Optional[int] = 2):
        """Write an already encoded payload to a shape file."""
        path = Path(filepath)
        path.write_text(json.dumps(payload, indent=indent), encoding='utf-8')
        logger.debug("Saved %d-cell shape to %s", len(payload['voxelDataString']), path)
