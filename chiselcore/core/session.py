"""
EditorSession - Headless Shape Editing State
============================================

Holds the grid, metadata and edit mode behind an editing surface.
A UI forwards clicks and button presses here and shows ``status_message``.
"""

import logging
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

from chiselcore.config import EditorConfig
from chiselcore.core.validator import ValidationResult, validate_shape
from chiselcore.core.voxel_grid import VoxelGrid
from chiselcore.formats.shape_codec import (
    FormatError, ShapeMetadata, decode_with_resize, encode, validate_format,
)
from chiselcore.formats.shape_file import ShapeFile, ShapeFileError

logger = logging.getLogger(__name__)


class VoxelMode(Enum):
    """What a click on the grid does."""
    ADD = "add"
    REMOVE = "remove"


class EditorSession:
    """
    Editing state for a single shape.

    Attributes:
        config: Session settings
        grid: Current voxel grid, always ``config.grid_size`` wide
        metadata: Difficulty and move limit saved with the shape
        mode: Current click mode
        status_message: Last user-facing message
    """

    def __init__(self, config: Optional[EditorConfig] = None):
        self.config = config or EditorConfig()
        size = self.config.grid_size
        self.grid = VoxelGrid.filled(size) if self.config.start_filled else VoxelGrid.centered(size)
        self.metadata = ShapeMetadata(
            difficulty=self.config.default_difficulty,
            max_moves=self.config.default_max_moves,
        )
        self.mode = VoxelMode.ADD
        self.status_message = "Ready - Left click to add voxels, right click to rotate camera"

    @property
    def grid_size(self) -> int:
        return self.config.grid_size

    @property
    def voxel_count(self) -> int:
        return self.grid.voxel_count()

    # ==================== Editing ====================

    def apply_voxel_action(self, x: int, y: int, z: int) -> bool:
        """
        Apply the current mode to one cell.

        Removing the last remaining voxel is refused.

        Returns:
            False if the action was refused
        """
        if not self.grid.is_valid_position(x, y, z):
            self.status_message = f"Position ({x}, {y}, {z}) is outside the grid"
            return False

        if self.mode == VoxelMode.ADD:
            self.grid.set(x, y, z, True)
            self.status_message = f"Added voxel at ({x}, {y}, {z})"
            return True

        if self.grid.get(x, y, z) and self.voxel_count <= 1:
            self.status_message = "Cannot remove last voxel - shape must have at least one voxel"
            return False

        self.grid.set(x, y, z, False)
        self.status_message = f"Removed voxel at ({x}, {y}, {z})"
        return True

    def toggle_mode(self) -> VoxelMode:
        """Switch between add and remove mode."""
        self.mode = VoxelMode.REMOVE if self.mode == VoxelMode.ADD else VoxelMode.ADD
        action = self.mode.value
        self.status_message = (f"Switched to {action} mode - Left click to {action} voxels, "
                               f"right click to rotate camera")
        return self.mode

    def fill_cube(self):
        """Replace the grid with a filled cube."""
        self.grid = VoxelGrid.filled(self.grid_size)
        self.status_message = "Filled entire cube"

    def clear_grid(self):
        """Replace the grid with a single voxel at the center."""
        self.grid = VoxelGrid.centered(self.grid_size)
        center = self.grid_size // 2
        self.status_message = (f"Cleared shape - center voxel remains at "
                               f"({center}, {center}, {center})")

    def set_metadata(self, difficulty: Optional[int] = None,
                     max_moves: Optional[int] = None):
        if difficulty is not None:
            self.metadata.difficulty = difficulty
        if max_moves is not None:
            self.metadata.max_moves = max_moves

    # ==================== Save / Load ====================

    def validate(self) -> ValidationResult:
        """Validate the current shape under the configured rule."""
        return validate_shape(self.grid, self.config.connectivity)

    def export_payload(self) -> Tuple[ValidationResult, Optional[Dict[str, Any]]]:
        """
        Validate and encode the current shape.

        Metadata out of range also blocks the payload, since the file could
        not be loaded back.

        Returns:
            Tuple of (validation result, payload or None if it cannot be saved)
        """
        validation = self.validate()
        info = validation.debug_info
        if info.component_count > 1:
            logger.debug("Found %d components, %d floating voxels",
                         info.component_count, len(info.floating_voxels))

        if not validation.is_valid:
            self.status_message = "Save failed - shape is invalid"
            return validation, None

        payload = encode(self.grid, self.metadata)
        check = validate_format(payload)
        if not check.is_valid:
            self.status_message = "Save failed - " + "; ".join(check.errors)
            return validation, None
        return validation, payload

    def save(self, filepath: str) -> bool:
        """
        Save the current shape if it is valid.

        Returns:
            True if the file was written
        """
        validation, payload = self.export_payload()
        if payload is None:
            logger.info("Not saving %s: %s", filepath, self.status_message)
            return False

        try:
            ShapeFile.save_payload(filepath, payload)
        except OSError as e:
            self.status_message = f"Save error: {e}"
            return False
        self.status_message = "Shape saved successfully"
        return True

    def import_payload(self, payload: Mapping[str, Any], source: str = "payload") -> bool:
        """
        Replace the current shape with a decoded payload.

        The payload is resampled to the session grid size when needed.

        Returns:
            True if the payload was loaded
        """
        check = validate_format(payload)
        if not check.is_valid:
            self.status_message = "Load failed - invalid format"
            logger.info("Rejected %s: %s", source, "; ".join(check.errors))
            return False

        try:
            decoded = decode_with_resize(payload, self.grid_size)
        except FormatError as e:
            self.status_message = f"Load error: {e}"
            return False

        self.grid = decoded.grid
        self.metadata = decoded.metadata

        message = f"Shape loaded from {source}"
        if decoded.was_converted:
            message += f" (converted from {decoded.original_grid_size}³ to {self.grid_size}³)"
            lost = _count_cells(payload) - decoded.grid.voxel_count()
            if lost > 0:
                message += f", {lost} voxels outside the grid were dropped"
            logger.debug("Conversion completed. Voxel count: %d", decoded.grid.voxel_count())
        self.status_message = message
        return True

    def load(self, filepath: str) -> bool:
        """
        Load a shape file into the session.

        Returns:
            True if the file was loaded
        """
        try:
            payload = ShapeFile.load(filepath)
        except ShapeFileError as e:
            self.status_message = ("Load failed - invalid format" if e.errors
                                   else f"Load error: {e}")
            return False
        except OSError as e:
            self.status_message = f"Load error: {e}"
            return False
        return self.import_payload(payload, source=str(filepath))


def _count_cells(payload: Mapping[str, Any]) -> int:
    return payload['voxelDataString'].count('1')
