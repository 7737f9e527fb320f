"""Editor configuration."""

from dataclasses import dataclass
from typing import Any

from chiselcore.core.connectivity import Connectivity
from chiselcore.formats.shape_codec import DEFAULT_DIFFICULTY, DEFAULT_MAX_MOVES

DEFAULT_GRID_SIZE = 7


@dataclass
class EditorConfig:
    """
    Settings for an editing session.

    Attributes:
        grid_size: Side length of the editing grid
        connectivity: Adjacency rule used when validating before save
        default_difficulty: Difficulty for new shapes
        default_max_moves: Move limit for new shapes
        start_filled: Start with a filled cube instead of a single voxel
    """

    grid_size: int = DEFAULT_GRID_SIZE
    connectivity: Connectivity = Connectivity.FACE
    default_difficulty: int = DEFAULT_DIFFICULTY
    default_max_moves: int = DEFAULT_MAX_MOVES
    start_filled: bool = True

    def __post_init__(self):
        self.grid_size = int(self.grid_size)
        if self.grid_size <= 0:
            raise ValueError(f"grid size must be positive, got {self.grid_size}")
        self.connectivity = Connectivity(self.connectivity)

    @classmethod
    def from_args(cls, args: Any) -> 'EditorConfig':
        """
        Build a configuration from parsed command line arguments.

        Attributes missing from ``args`` keep their defaults.
        """
        values = {}
        for name, attr in (('grid_size', 'size'),
                           ('connectivity', 'connectivity'),
                           ('default_difficulty', 'difficulty'),
                           ('default_max_moves', 'max_moves')):
            value = getattr(args, attr, None)
            if value is not None:
                values[name] = value
        return cls(**values)
