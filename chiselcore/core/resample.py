"""
Grid Resampling
===============

Converts voxel data between cubic grids of different sizes.

Smaller sources are padded and centered in the larger grid. Larger sources
are cropped to a centered window; occupied cells outside that window are
dropped without warning.
"""

import numpy as np
from typing import Sequence

from chiselcore.core.voxel_grid import VoxelGrid


def convert_grid_size(cells: Sequence[bool], from_size: int, to_size: int) -> np.ndarray:
    """
    Resample flat cell data from one grid size to another.

    Args:
        cells: Flat source cells, ``from_size**3`` values
        from_size: Source side length
        to_size: Target side length

    Returns:
        Flat bool array of ``to_size**3`` cells
    """
    if from_size <= 0 or to_size <= 0:
        raise ValueError(f"grid sizes must be positive, got {from_size} -> {to_size}")

    source = np.asarray(cells, dtype=bool).reshape((from_size,) * 3)
    result = np.zeros((to_size,) * 3, dtype=bool)

    # The offset is the same on every axis, so the [z, y, x] layout of the
    # reshaped arrays needs no special handling.
    if from_size <= to_size:
        offset = (to_size - from_size) // 2
        end = offset + from_size
        result[offset:end, offset:end, offset:end] = source
    else:
        offset = (from_size - to_size) // 2
        end = offset + to_size
        result[:, :, :] = source[offset:end, offset:end, offset:end]

    return result.reshape(-1)


def resample(grid: VoxelGrid, target_size: int) -> VoxelGrid:
    """
    Produce a copy of ``grid`` resampled to ``target_size``.

    Equal sizes yield an identical copy.
    """
    target_size = int(target_size)
    if target_size == grid.grid_size:
        return grid.copy()
    cells = convert_grid_size(grid.cells, grid.grid_size, target_size)
    return VoxelGrid.from_cells(cells, target_size)
