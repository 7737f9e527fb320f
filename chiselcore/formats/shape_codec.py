"""
Shape Binary String Format
==========================

Encoder/decoder for the shape payload consumed by the game engine.

Payload layout (a JSON object):
- voxelDataString: one '0'/'1' character per cell in linear index order
- difficulty: integer 1-10
- maxMoves: integer 1-999

The grid size is not stored; it is the cube root of the string length.
"""

import re
import numpy as np
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from chiselcore.core.voxel_grid import VoxelGrid
from chiselcore.core.resample import resample

DEFAULT_DIFFICULTY = 5
DEFAULT_MAX_MOVES = 50

DIFFICULTY_RANGE = (1, 10)
MAX_MOVES_RANGE = (1, 999)

_BINARY_PATTERN = re.compile(r"[01]+")


class FormatError(ValueError):
    """Raised when a binary string cannot describe a cubic grid."""


@dataclass
class ShapeMetadata:
    """Game metadata stored next to the voxel data."""
    difficulty: int = DEFAULT_DIFFICULTY
    max_moves: int = DEFAULT_MAX_MOVES

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> 'ShapeMetadata':
        """
        Read metadata from a payload.

        Missing values, and falsy ones such as 0, fall back to the defaults.
        """
        return cls(
            difficulty=payload.get('difficulty') or DEFAULT_DIFFICULTY,
            max_moves=payload.get('maxMoves') or DEFAULT_MAX_MOVES,
        )


@dataclass
class DecodedShape:
    """
    A decoded payload.

    Attributes:
        grid: Decoded (and possibly resampled) grid
        grid_size: Side length of ``grid``
        metadata: Shape metadata with defaults applied
        original_grid_size: Size detected in the payload when it was resampled
        was_converted: True if the grid was resampled to a different size
    """
    grid: VoxelGrid
    grid_size: int
    metadata: ShapeMetadata = field(default_factory=ShapeMetadata)
    original_grid_size: Optional[int] = None
    was_converted: bool = False


@dataclass
class FormatCheck:
    """Result of a structural payload check."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)


def to_binary_string(grid: VoxelGrid) -> str:
    """Encode grid cells as a '0'/'1' string in linear index order."""
    codes = np.where(grid.cells, ord('1'), ord('0')).astype(np.uint8)
    return codes.tobytes().decode('ascii')


def from_binary_string(binary_string: str) -> np.ndarray:
    """Decode a '0'/'1' string into flat cells; anything but '1' is empty."""
    return np.array([bit == '1' for bit in binary_string], dtype=bool)


def cube_root(length: int) -> int:
    """Nearest integer cube root of ``length``."""
    return int(round(float(np.cbrt(length))))


def is_perfect_cube(length: int) -> bool:
    root = cube_root(length)
    return root ** 3 == length


def detect_grid_size(binary_string: str) -> int:
    """
    Recover the grid size from the length of a binary string.

    Raises:
        FormatError: If the length is zero or not a perfect cube
    """
    length = len(binary_string)
    if length == 0:
        raise FormatError("Binary string is empty")

    root = cube_root(length)
    if root ** 3 != length:
        raise FormatError(f"Binary string length ({length}) is not a perfect cube")
    return root


def encode(grid: VoxelGrid, metadata: Optional[ShapeMetadata] = None) -> Dict[str, Any]:
    """
    Build the wire payload for a grid.

    Args:
        grid: Grid to encode
        metadata: Shape metadata; falsy values are replaced by defaults

    Returns:
        Payload dictionary ready for JSON serialisation
    """
    if metadata is None:
        metadata = ShapeMetadata()
    return {
        'voxelDataString': to_binary_string(grid),
        'difficulty': metadata.difficulty or DEFAULT_DIFFICULTY,
        'maxMoves': metadata.max_moves or DEFAULT_MAX_MOVES,
    }


def decode(payload: Mapping[str, Any]) -> DecodedShape:
    """
    Decode a payload at its native grid size.

    Raises:
        FormatError: If voxelDataString is missing or its length is not a cube
    """
    binary_string = payload.get('voxelDataString')
    if not isinstance(binary_string, str):
        raise FormatError("Missing or invalid voxelDataString field")

    grid_size = detect_grid_size(binary_string)
    grid = VoxelGrid.from_cells(from_binary_string(binary_string), grid_size)
    return DecodedShape(
        grid=grid,
        grid_size=grid_size,
        metadata=ShapeMetadata.from_payload(payload),
    )


def decode_with_resize(payload: Mapping[str, Any], target_size: int) -> DecodedShape:
    """
    Decode a payload and resample it to ``target_size`` if needed.

    Cropping to a smaller grid may discard voxels outside the centered window.
    """
    decoded = decode(payload)
    if decoded.grid_size == target_size:
        return decoded

    return DecodedShape(
        grid=resample(decoded.grid, target_size),
        grid_size=target_size,
        metadata=decoded.metadata,
        original_grid_size=decoded.grid_size,
        was_converted=True,
    )


def _is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def _in_range(value: Any, bounds) -> bool:
    low, high = bounds
    return _is_integer(value) and low <= value <= high


def validate_format(payload: Any) -> FormatCheck:
    """
    Check the structure of a payload without decoding it.

    All applicable problems are collected; only a non-object payload stops
    the check early.
    """
    if not isinstance(payload, Mapping):
        return FormatCheck(is_valid=False, errors=["JSON must be an object"])

    errors = []
    binary_string = payload.get('voxelDataString')

    if not binary_string or not isinstance(binary_string, str):
        errors.append("Missing or invalid voxelDataString field")
    elif not _BINARY_PATTERN.fullmatch(binary_string):
        errors.append("voxelDataString must contain only 0 and 1")
    elif not is_perfect_cube(len(binary_string)):
        errors.append(
            f"voxelDataString length ({len(binary_string)}) is not a perfect cube")

    if not _in_range(payload.get('difficulty'), DIFFICULTY_RANGE):
        errors.append("difficulty must be an integer from 1 to 10")

    if not _in_range(payload.get('maxMoves'), MAX_MOVES_RANGE):
        errors.append("maxMoves must be an integer from 1 to 999")

    return FormatCheck(is_valid=not errors, errors=errors)

