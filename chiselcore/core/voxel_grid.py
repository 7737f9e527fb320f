"""
VoxelGrid - Core Voxel Data Structure
=====================================

Cubic occupancy grid backing the shape editor.
Cells are kept in a flat numpy bool array of length N**3, addressed by
``x + y*N + z*N*N``.
"""

import numpy as np
from typing import Iterator, List, Sequence, Tuple

Position = Tuple[int, int, int]


def voxel_index(x: int, y: int, z: int, grid_size: int) -> int:
    """Linear index of ``(x, y, z)`` in a grid of side ``grid_size``.

    No range check is done here; callers validate coordinates first.
    """
    return x + y * grid_size + z * grid_size * grid_size


class VoxelGrid:
    """
    Cubic voxel occupancy grid.

    Attributes:
        grid_size: Side length N of the cube
        cells: Flat boolean array of N**3 cells
    """

    __slots__ = ("grid_size", "_cells")

    def __init__(self, grid_size: int, fill: bool = False):
        """
        Create a grid with every cell set to ``fill``.

        Args:
            grid_size: Side length, must be a positive integer
            fill: Initial value for all cells
        """
        grid_size = int(grid_size)
        if grid_size <= 0:
            raise ValueError(f"grid size must be positive, got {grid_size}")
        self.grid_size = grid_size
        self._cells = np.full(grid_size ** 3, bool(fill), dtype=bool)

    @classmethod
    def empty(cls, grid_size: int) -> 'VoxelGrid':
        """Create a grid with no occupied cells."""
        return cls(grid_size, fill=False)

    @classmethod
    def filled(cls, grid_size: int) -> 'VoxelGrid':
        """Create a grid with every cell occupied."""
        return cls(grid_size, fill=True)

    @classmethod
    def centered(cls, grid_size: int) -> 'VoxelGrid':
        """Create an empty grid holding a single voxel at its center."""
        grid = cls(grid_size, fill=False)
        center = grid_size // 2
        grid.set(center, center, center, True)
        return grid

    @classmethod
    def from_cells(cls, cells: Sequence[bool], grid_size: int) -> 'VoxelGrid':
        """
        Create a grid from a flat cell sequence.

        Args:
            cells: N**3 truthy/falsy values in linear index order
            grid_size: Side length N

        Returns:
            New VoxelGrid instance holding a copy of the cells
        """
        data = np.asarray(cells, dtype=bool).reshape(-1)
        grid = cls(grid_size)
        if data.size != grid.grid_size ** 3:
            raise ValueError(
                f"expected {grid.grid_size ** 3} cells for grid size "
                f"{grid.grid_size}, got {data.size}")
        grid._cells = data.copy()
        return grid

    @property
    def cells(self) -> np.ndarray:
        """Get the flat cell array."""
        return self._cells

    @property
    def cell_count(self) -> int:
        return self._cells.size

    def as_volume(self) -> np.ndarray:
        """
        View the cells as a 3D array.

        The view is indexed ``[z, y, x]`` so that C-order flattening matches
        the linear index.
        """
        n = self.grid_size
        return self._cells.reshape((n, n, n))

    def is_valid_position(self, x: int, y: int, z: int) -> bool:
        """Check if coordinates are within the grid bounds."""
        n = self.grid_size
        return 0 <= x < n and 0 <= y < n and 0 <= z < n

    def _checked_index(self, x: int, y: int, z: int) -> int:
        if not self.is_valid_position(x, y, z):
            raise IndexError(
                f"voxel ({x}, {y}, {z}) out of range for grid size {self.grid_size}")
        return voxel_index(x, y, z, self.grid_size)

    def get(self, x: int, y: int, z: int) -> bool:
        return bool(self._cells[self._checked_index(x, y, z)])

    def set(self, x: int, y: int, z: int, occupied: bool = True):
        self._cells[self._checked_index(x, y, z)] = bool(occupied)

    def voxel_count(self) -> int:
        """Get the number of occupied cells."""
        return int(np.count_nonzero(self._cells))

    def is_empty(self) -> bool:
        return not self._cells.any()

    def iter_occupied(self) -> Iterator[Position]:
        """
        Yield occupied positions in scan order.

        Scan order is outer x, middle y, inner z, all ascending.
        """
        # transpose [z, y, x] -> [x, y, z] so argwhere walks x-major
        for x, y, z in np.argwhere(self.as_volume().transpose(2, 1, 0)):
            yield int(x), int(y), int(z)

    def occupied_positions(self) -> List[Position]:
        return list(self.iter_occupied())

    def fill(self, occupied: bool = True):
        """Set every cell to the same value."""
        self._cells.fill(bool(occupied))

    def clear(self):
        self._cells.fill(False)

    def copy(self) -> 'VoxelGrid':
        return VoxelGrid.from_cells(self._cells, self.grid_size)

    def __eq__(self, other) -> bool:
        if not isinstance(other, VoxelGrid):
            return NotImplemented
        return (self.grid_size == other.grid_size
                and bool(np.array_equal(self._cells, other._cells)))

    __hash__ = None

    def __repr__(self) -> str:
        return f"VoxelGrid(grid_size={self.grid_size}, voxels={self.voxel_count()})"
