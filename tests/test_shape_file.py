"""Tests for JSON shape files."""

import json

import pytest

from chiselcore.core.voxel_grid import VoxelGrid
from chiselcore.formats.shape_codec import ShapeMetadata
from chiselcore.formats.shape_file import ShapeFile, ShapeFileError


class TestShapeFile:

    def test_save_writes_payload(self, tmp_path):
        path = tmp_path / "shape.json"
        ShapeFile.save(str(path), VoxelGrid.filled(2), ShapeMetadata(3, 40))
        data = json.loads(path.read_text(encoding='utf-8'))
        assert data == {'voxelDataString': "11111111", 'difficulty': 3, 'maxMoves': 40}

    def test_save_and_read(self, tmp_path):
        path = tmp_path / "shape.json"
        grid = VoxelGrid.centered(5)
        ShapeFile.save(str(path), grid, ShapeMetadata(8, 300))
        decoded = ShapeFile.read(str(path))
        assert decoded.grid == grid
        assert decoded.metadata == ShapeMetadata(8, 300)

    def test_read_with_target_size(self, tmp_path):
        path = tmp_path / "shape.json"
        ShapeFile.save(str(path), VoxelGrid.filled(3))
        decoded = ShapeFile.read(str(path), target_size=7)
        assert decoded.was_converted
        assert decoded.original_grid_size == 3
        assert decoded.grid.voxel_count() == 27

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding='utf-8')
        with pytest.raises(ShapeFileError) as excinfo:
            ShapeFile.load(str(path))
        assert excinfo.value.errors == []

    def test_invalid_format(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({'voxelDataString': "111", 'difficulty': 5, 'maxMoves': 50}),
                        encoding='utf-8')
        with pytest.raises(ShapeFileError) as excinfo:
            ShapeFile.load(str(path))
        assert excinfo.value.errors == ["voxelDataString length (3) is not a perfect cube"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            ShapeFile.load(str(tmp_path / "missing.json"))

    def test_dumps_indent(self):
        text = ShapeFile.dumps(VoxelGrid.filled(1), indent=None)
        assert text == '{"voxelDataString": "1", "difficulty": 5, "maxMoves": 50}'

    def test_loads(self):
        data = ShapeFile.loads('{"voxelDataString": "1", "difficulty": 2, "maxMoves": 9}')
        assert data['difficulty'] == 2

    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "binary.json"
        path.write_bytes(b"\xff\xfe\x00garbage")
        with pytest.raises(ShapeFileError, match="not UTF-8"):
            ShapeFile.load(str(path))

    def test_save_payload(self, tmp_path):
        path = tmp_path / "shape.json"
        data = {'voxelDataString': "1", 'difficulty': 4, 'maxMoves': 8}
        ShapeFile.save_payload(str(path), data, indent=None)
        assert path.read_text(encoding='utf-8') == json.dumps(data)
        assert ShapeFile.load(str(path)) == data
