"""Shape validation deciding whether a grid may be saved."""

from dataclasses import dataclass, field
from typing import List

from chiselcore.core.connectivity import (
    Connectivity, ConnectivityInfo, connectivity_debug_info, is_connected,
)
from chiselcore.core.voxel_grid import VoxelGrid

EMPTY_SHAPE_ERROR = "Shape must have at least one voxel"
GENERIC_CONNECTION_ERROR = "All voxels must be connected (no floating parts)"


@dataclass
class ValidationResult:
    """
    Outcome of validating a shape.

    ``errors`` is empty exactly when ``is_valid`` is True.
    ``is_uniform`` always mirrors ``is_connected``.
    """
    has_voxels: bool = False
    is_connected: bool = False
    is_uniform: bool = False
    voxel_count: int = 0
    is_valid: bool = False
    errors: List[str] = field(default_factory=list)
    debug_info: ConnectivityInfo = field(default_factory=ConnectivityInfo)
    connectivity: Connectivity = Connectivity.FACE


def validate_shape(grid: VoxelGrid,
                   connectivity: Connectivity = Connectivity.FACE) -> ValidationResult:
    """
    Validate a shape for saving.

    A shape is valid when it has at least one voxel and all voxels are
    connected under ``connectivity``. Diagnostics in ``debug_info`` always use
    face adjacency, whatever rule decides the verdict.

    Args:
        grid: Grid to validate
        connectivity: Adjacency rule for the connectivity verdict

    Returns:
        ValidationResult with errors and diagnostics
    """
    connectivity = Connectivity(connectivity)
    voxel_count = grid.voxel_count()
    debug_info = connectivity_debug_info(grid)

    result = ValidationResult(
        has_voxels=voxel_count > 0,
        voxel_count=voxel_count,
        debug_info=debug_info,
        connectivity=connectivity,
    )

    if not result.has_voxels:
        result.errors.append(EMPTY_SHAPE_ERROR)
        return result

    result.is_connected = is_connected(grid, connectivity)
    result.is_uniform = result.is_connected

    if not result.is_connected:
        if debug_info.component_count > 1:
            result.errors.append(
                f"All voxels must be connected {connectivity.description} "
                f"(found {debug_info.component_count} separate parts)")
            result.errors.append(
                f"Floating voxels: {len(debug_info.floating_voxels)} voxels in "
                f"{debug_info.component_count - 1} groups")
        else:
            result.errors.append(GENERIC_CONNECTION_ERROR)

    result.is_valid = result.has_voxels and result.is_connected
    return result


class ShapeValidator:
    """Validator bound to a fixed adjacency rule."""

    def __init__(self, connectivity: Connectivity = Connectivity.FACE):
        self.connectivity = Connectivity(connectivity)

    def validate(self, grid: VoxelGrid) -> ValidationResult:
        return validate_shape(grid, self.connectivity)

    def is_valid(self, grid: VoxelGrid) -> bool:
        """Quick check if a shape can be saved."""
        return self.validate(grid).is_valid
