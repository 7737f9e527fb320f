"""
Chiselcore Core Module
======================

Voxel grid storage and the shape algorithms built on it.
"""

from chiselcore.core.voxel_grid import VoxelGrid, voxel_index
from chiselcore.core.connectivity import (
    Connectivity, ConnectivityInfo, connectivity_debug_info,
    find_connected_components, is_connected, is_uniform,
)
from chiselcore.core.validator import ShapeValidator, ValidationResult, validate_shape
from chiselcore.core.resample import convert_grid_size, resample

__all__ = [
    'VoxelGrid',
    'voxel_index',
    'Connectivity',
    'ConnectivityInfo',
    'connectivity_debug_info',
    'find_connected_components',
    'is_connected',
    'is_uniform',
    'ShapeValidator',
    'ValidationResult',
    'validate_shape',
    'convert_grid_size',
    'resample',
]
