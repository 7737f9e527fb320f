"""
Connectivity - Voxel Component Analysis
=======================================

Flood-fill based connectivity checks for voxel shapes.

Three adjacency rules are supported:
- face: 6 neighbors sharing a face
- edge: face neighbors plus 12 neighbors sharing an edge
- corner: edge neighbors plus 8 neighbors sharing only a corner
"""

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from chiselcore.core.voxel_grid import Position, VoxelGrid, voxel_index

Offset = Tuple[int, int, int]


class Connectivity(Enum):
    """Adjacency rule used to decide whether two voxels touch."""
    FACE = "face"
    EDGE = "edge"
    CORNER = "corner"

    @property
    def description(self) -> str:
        """Human readable phrase used in validation messages."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    Connectivity.FACE: "by faces",
    Connectivity.EDGE: "by faces and edges",
    Connectivity.CORNER: "by faces, edges and corners",
}


FACE_OFFSETS: Tuple[Offset, ...] = (
    (1, 0, 0), (-1, 0, 0),
    (0, 1, 0), (0, -1, 0),
    (0, 0, 1), (0, 0, -1),
)

EDGE_OFFSETS: Tuple[Offset, ...] = (
    (1, 1, 0), (1, -1, 0), (-1, 1, 0), (-1, -1, 0),
    (1, 0, 1), (1, 0, -1), (-1, 0, 1), (-1, 0, -1),
    (0, 1, 1), (0, 1, -1), (0, -1, 1), (0, -1, -1),
)

CORNER_OFFSETS: Tuple[Offset, ...] = (
    (1, 1, 1), (1, 1, -1), (1, -1, 1), (1, -1, -1),
    (-1, 1, 1), (-1, 1, -1), (-1, -1, 1), (-1, -1, -1),
)

_NEIGHBOR_OFFSETS = {
    Connectivity.FACE: FACE_OFFSETS,
    Connectivity.EDGE: FACE_OFFSETS + EDGE_OFFSETS,
    Connectivity.CORNER: FACE_OFFSETS + EDGE_OFFSETS + CORNER_OFFSETS,
}


def neighbor_offsets(connectivity: Connectivity = Connectivity.FACE) -> Tuple[Offset, ...]:
    """Get the neighbor offsets for an adjacency rule."""
    return _NEIGHBOR_OFFSETS[Connectivity(connectivity)]


@dataclass
class ConnectivityInfo:
    """
    Face-connectivity diagnostics for a grid.

    Attributes:
        component_count: Number of face-connected components
        components: Components in discovery order, each in visitation order
        floating_voxels: Positions outside the first discovered component
        total_voxels: Number of occupied cells
    """
    component_count: int = 0
    components: List[List[Position]] = field(default_factory=list)
    floating_voxels: List[Position] = field(default_factory=list)
    total_voxels: int = 0


def find_connected_components(grid: Optional[VoxelGrid]) -> List[List[Position]]:
    """
    Find the face-connected components of the occupied cells.

    Cells are scanned x-major; every unvisited occupied cell seeds a
    breadth-first traversal over its face neighbors.

    Args:
        grid: Grid to analyse

    Returns:
        Components ordered by the scan position of their seed. Each component
        lists its positions in visitation order.
    """
    if grid is None or grid.grid_size <= 0:
        return []

    n = grid.grid_size
    cells = grid.cells
    visited = set()
    components = []

    for seed in grid.iter_occupied():
        seed_key = voxel_index(*seed, n)
        if seed_key in visited:
            continue

        component = []
        queue = deque([seed])
        visited.add(seed_key)

        while queue:
            current = queue.popleft()
            component.append(current)
            x, y, z = current

            for dx, dy, dz in FACE_OFFSETS:
                nx, ny, nz = x + dx, y + dy, z + dz
                if not (0 <= nx < n and 0 <= ny < n and 0 <= nz < n):
                    continue
                key = voxel_index(nx, ny, nz, n)
                if cells[key] and key not in visited:
                    visited.add(key)
                    queue.append((nx, ny, nz))

        components.append(component)

    return components


def connectivity_debug_info(grid: Optional[VoxelGrid]) -> ConnectivityInfo:
    """Collect component diagnostics for a grid (always face adjacency)."""
    components = find_connected_components(grid)
    floating = []
    for component in components[1:]:
        floating.extend(component)

    return ConnectivityInfo(
        component_count=len(components),
        components=components,
        floating_voxels=floating,
        total_voxels=grid.voxel_count() if grid is not None else 0,
    )


def is_connected(grid: Optional[VoxelGrid],
                 connectivity: Connectivity = Connectivity.FACE) -> bool:
    """
    Check whether all occupied cells form a single component.

    Args:
        grid: Grid to check
        connectivity: Adjacency rule to traverse with

    Returns:
        False for an empty grid, True for a single voxel, otherwise whether a
        traversal from the first occupied cell reaches every occupied cell.
    """
    if grid is None or grid.grid_size <= 0:
        return False

    occupied = grid.voxel_count()
    if occupied == 0:
        return False
    if occupied == 1:
        return True

    n = grid.grid_size
    cells = grid.cells
    offsets = neighbor_offsets(connectivity)

    seed = next(grid.iter_occupied())
    visited = {voxel_index(*seed, n)}
    queue = deque([seed])

    while queue:
        x, y, z = queue.popleft()
        for dx, dy, dz in offsets:
            nx, ny, nz = x + dx, y + dy, z + dz
            if not (0 <= nx < n and 0 <= ny < n and 0 <= nz < n):
                continue
            key = voxel_index(nx, ny, nz, n)
            if cells[key] and key not in visited:
                visited.add(key)
                queue.append((nx, ny, nz))

    return len(visited) == occupied


def is_uniform(grid: Optional[VoxelGrid],
               connectivity: Connectivity = Connectivity.FACE) -> bool:
    """A shape is uniform exactly when it is connected."""
    return is_connected(grid, connectivity)
