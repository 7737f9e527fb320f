"""Tests for the command line entry point."""

import json

import pytest

from main import main
from chiselcore.core.voxel_grid import VoxelGrid
from chiselcore.formats.shape_codec import encode


def write_shape(path, grid, difficulty=5, max_moves=50):
    data = encode(grid)
    data['difficulty'] = difficulty
    data['maxMoves'] = max_moves
    path.write_text(json.dumps(data), encoding='utf-8')
    return str(path)


class TestCommands:

    def test_new_and_info(self, tmp_path, capsys):
        out = tmp_path / "new.json"
        assert main(['new', str(out), '--size', '4', '--center', '--difficulty', '3']) == 0
        data = json.loads(out.read_text(encoding='utf-8'))
        assert len(data['voxelDataString']) == 64
        assert data['voxelDataString'].count('1') == 1
        assert data['difficulty'] == 3
        assert data['maxMoves'] == 50

        assert main(['info', str(out)]) == 0
        output = capsys.readouterr().out
        assert "Grid size:  4³" in output
        assert "Voxels:     1/64" in output

    def test_new_default_is_filled(self, tmp_path):
        out = tmp_path / "new.json"
        assert main(['new', str(out)]) == 0
        data = json.loads(out.read_text(encoding='utf-8'))
        assert data['voxelDataString'] == "1" * 343

    def test_validate_valid(self, tmp_path, capsys):
        path = write_shape(tmp_path / "ok.json", VoxelGrid.filled(3))
        assert main(['validate', path]) == 0
        assert "valid (27 voxels)" in capsys.readouterr().out

    def test_validate_disconnected(self, tmp_path, capsys):
        grid = VoxelGrid.empty(2)
        grid.set(0, 0, 0)
        grid.set(1, 1, 1)
        path = write_shape(tmp_path / "pair.json", grid)
        assert main(['validate', path]) == 1
        assert "found 2 separate parts" in capsys.readouterr().out
        assert main(['validate', path, '--connectivity', 'corner']) == 0

    def test_validate_bad_format(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text('{"voxelDataString": "111", "difficulty": 5, "maxMoves": 50}',
                        encoding='utf-8')
        assert main(['validate', str(path)]) == 1
        assert "not a perfect cube" in capsys.readouterr().err

    def test_convert(self, tmp_path, capsys):
        path = write_shape(tmp_path / "small.json", VoxelGrid.filled(2), difficulty=7)
        out = tmp_path / "big.json"
        assert main(['convert', path, '--size', '4', '-o', str(out)]) == 0
        data = json.loads(out.read_text(encoding='utf-8'))
        assert len(data['voxelDataString']) == 64
        assert data['voxelDataString'].count('1') == 8
        assert data['difficulty'] == 7
        assert "from 2³ to 4³" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        assert main(['info', str(tmp_path / "missing.json")]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_requires_command(self):
        with pytest.raises(SystemExit):
            main([])

    @pytest.mark.parametrize("option,value,message", [
        ('--difficulty', '20', "difficulty must be an integer from 1 to 10"),
        ('--max-moves', '1000', "maxMoves must be an integer from 1 to 999"),
    ])
    def test_new_rejects_out_of_range_metadata(self, tmp_path, capsys, option, value, message):
        out = tmp_path / "new.json"
        assert main(['new', str(out), option, value]) == 1
        assert message in capsys.readouterr().err
        assert not out.exists()

    def test_new_output_loads_back(self, tmp_path):
        out = tmp_path / "new.json"
        assert main(['new', str(out), '--difficulty', '10', '--max-moves', '999']) == 0
        assert main(['info', str(out)]) == 0
