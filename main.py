#!/usr/bin/env python3
"""
Chiselcore - Voxel Shape Tool
=============================

Command line entry point for inspecting, validating, converting and
creating shape files.

Usage:
    python main.py info FILE
    python main.py validate FILE [--connectivity face|edge|corner]
    python main.py convert FILE --size N -o OUT
    python main.py new OUT [--size N] [--empty | --center]
"""

import sys
import argparse
import logging
from pathlib import Path

# Add the project root to path if needed
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from chiselcore import __version__
from chiselcore.config import DEFAULT_GRID_SIZE, EditorConfig
from chiselcore.core.connectivity import Connectivity, connectivity_debug_info
from chiselcore.core.validator import validate_shape
from chiselcore.core.voxel_grid import VoxelGrid
from chiselcore.formats.shape_codec import ShapeMetadata, encode, validate_format
from chiselcore.formats.shape_file import ShapeFile, ShapeFileError

logger = logging.getLogger("chiselcore")


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Chiselcore - Voxel Shape Tool',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Shape files are JSON objects:
  {"voxelDataString": "0110...", "difficulty": 5, "maxMoves": 50}

Examples:
  %(prog)s info shape.json
  %(prog)s validate shape.json --connectivity edge
  %(prog)s convert shape.json --size 9 -o shape9.json
  %(prog)s new blank.json --size 5 --center
        """
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    commands = parser.add_subparsers(dest='command', required=True)

    info = commands.add_parser('info', help='Show grid size, voxel count and metadata')
    info.add_argument('file', help='Shape file to inspect')

    validate = commands.add_parser('validate', help='Check file format and shape connectivity')
    validate.add_argument('file', help='Shape file to validate')
    validate.add_argument(
        '--connectivity',
        choices=[c.value for c in Connectivity],
        default=Connectivity.FACE.value,
        help='Adjacency rule for the connectivity check (default: face)'
    )

    convert = commands.add_parser('convert', help='Resample a shape to another grid size')
    convert.add_argument('file', help='Shape file to convert')
    convert.add_argument('--size', type=int, required=True, help='Target grid size')
    convert.add_argument('-o', '--output', required=True, help='Output shape file')

    new = commands.add_parser('new', help='Create a new shape file')
    new.add_argument('output', help='Output shape file')
    new.add_argument(
        '--size',
        type=int,
        default=DEFAULT_GRID_SIZE,
        help=f'Grid size (default: {DEFAULT_GRID_SIZE})'
    )
    start = new.add_mutually_exclusive_group()
    start.add_argument('--empty', action='store_true', help='Start with no voxels')
    start.add_argument('--center', action='store_true', help='Start with a single center voxel')
    new.add_argument('--difficulty', type=int, default=None, help='Shape difficulty (1-10)')
    new.add_argument('--max-moves', type=int, default=None, help='Move limit (1-999)')

    return parser.parse_args(argv)


def cmd_info(args) -> int:
    decoded = ShapeFile.read(args.file)
    info = connectivity_debug_info(decoded.grid)
    print(f"File:       {args.file}")
    print(f"Grid size:  {decoded.grid_size}³")
    print(f"Voxels:     {decoded.grid.voxel_count()}/{decoded.grid.cell_count}")
    print(f"Components: {info.component_count}")
    print(f"Difficulty: {decoded.metadata.difficulty}")
    print(f"Max moves:  {decoded.metadata.max_moves}")
    return 0


def cmd_validate(args) -> int:
    decoded = ShapeFile.read(args.file)
    result = validate_shape(decoded.grid, Connectivity(args.connectivity))
    if result.is_valid:
        print(f"{args.file}: valid ({result.voxel_count} voxels)")
        return 0

    print(f"{args.file}: invalid")
    for error in result.errors:
        print(f"  {error}")
    return 1


def cmd_convert(args) -> int:
    decoded = ShapeFile.read(args.file, target_size=args.size)
    ShapeFile.save(args.output, decoded.grid, decoded.metadata)
    if decoded.was_converted:
        print(f"Converted {args.file} from {decoded.original_grid_size}³ "
              f"to {decoded.grid_size}³ -> {args.output}")
    else:
        print(f"{args.file} is already {decoded.grid_size}³ -> {args.output}")
    return 0


def cmd_new(args) -> int:
    config = EditorConfig.from_args(args)
    if args.empty:
        grid = VoxelGrid.empty(config.grid_size)
    elif args.center:
        grid = VoxelGrid.centered(config.grid_size)
    else:
        grid = VoxelGrid.filled(config.grid_size)

    metadata = ShapeMetadata(config.default_difficulty, config.default_max_moves)
    payload = encode(grid, metadata)
    check = validate_format(payload)
    if not check.is_valid:
        for error in check.errors:
            print(f"Error: {error}", file=sys.stderr)
        return 1

    ShapeFile.save_payload(args.output, payload)
    print(f"Created {config.grid_size}³ shape with {grid.voxel_count()} voxels -> {args.output}")
    return 0


COMMANDS = {
    'info': cmd_info,
    'validate': cmd_validate,
    'convert': cmd_convert,
    'new': cmd_new,
}


def main(argv=None):
    """Main application entry point."""
    args = parse_arguments(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    try:
        return COMMANDS[args.command](args)
    except ShapeFileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
