"""Tests for grid resampling."""

import numpy as np
import pytest

from chiselcore.core.resample import convert_grid_size, resample
from chiselcore.core.voxel_grid import VoxelGrid


def random_grid(size, seed):
    rng = np.random.default_rng(seed)
    return VoxelGrid.from_cells(rng.random(size ** 3) < 0.5, size)


class TestResample:

    def test_same_size_is_identity(self):
        grid = random_grid(4, 0)
        result = resample(grid, 4)
        assert result == grid
        assert result is not grid

    def test_expand_centers_shape(self):
        grid = VoxelGrid.filled(1)
        result = resample(grid, 3)
        assert result.grid_size == 3
        assert result.voxel_count() == 1
        assert result.get(1, 1, 1)

    def test_expand_uses_floor_offset(self):
        grid = VoxelGrid.empty(2)
        grid.set(0, 0, 0)
        grid.set(1, 0, 1)
        result = resample(grid, 5)
        # offset (5 - 2) // 2 == 1
        assert result.occupied_positions() == [(1, 1, 1), (2, 1, 2)]

    def test_crop_keeps_center_window(self):
        grid = VoxelGrid.empty(5)
        grid.set(2, 2, 2)
        grid.set(1, 3, 2)
        result = resample(grid, 3)
        assert result.grid_size == 3
        assert result.occupied_positions() == [(0, 2, 1), (1, 1, 1)]

    def test_crop_drops_outside_voxels(self):
        grid = VoxelGrid.empty(5)
        grid.set(0, 0, 0)
        grid.set(4, 4, 4)
        grid.set(2, 2, 2)
        result = resample(grid, 3)
        assert result.voxel_count() == 1
        assert result.get(1, 1, 1)

    def test_crop_even_difference(self):
        grid = VoxelGrid.filled(4)
        result = resample(grid, 3)
        assert result.voxel_count() == 27

    @pytest.mark.parametrize("source,target", [(1, 2), (2, 7), (3, 4), (4, 9), (5, 5)])
    def test_expand_then_crop_round_trip(self, source, target):
        grid = random_grid(source, source * 10 + target)
        assert resample(resample(grid, target), source) == grid

    @pytest.mark.parametrize("source,target", [(2, 6), (7, 3), (4, 1)])
    def test_output_size(self, source, target):
        result = resample(VoxelGrid.filled(source), target)
        assert result.cell_count == target ** 3

    def test_flat_conversion(self):
        cells = [True] + [False] * 7
        result = convert_grid_size(cells, 2, 4)
        assert result.shape == (64,)
        assert result[1 + 1 * 4 + 1 * 16]
        assert result.sum() == 1

    def test_invalid_sizes(self):
        with pytest.raises(ValueError):
            convert_grid_size([True], 1, 0)
