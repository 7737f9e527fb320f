"""
Chiselcore - Voxel Shape Editor Kernel
======================================

Core of a cubic voxel shape editor whose shapes are saved as a compact
binary-string JSON payload for a puzzle game:
- Face / edge / corner connectivity analysis and shape validation
- Centered grid resampling between cube sizes
- Binary-string payload encoding, decoding and format checks

Version: 1.0.0
"""

__version__ = "1.0.0"
__license__ = "MIT"

from chiselcore.core.voxel_grid import VoxelGrid
from chiselcore.core.connectivity import Connectivity
from chiselcore.core.validator import ShapeValidator, ValidationResult, validate_shape
from chiselcore.config import EditorConfig

__all__ = [
    'VoxelGrid',
    'Connectivity',
    'ShapeValidator',
    'ValidationResult',
    'validate_shape',
    'EditorConfig',
    '__version__',
]
