"""Test the puzzle generation and selection check CLIs."""

import json

import pytest

from src.main import main as generate_main, load_config
from src.check import main as check_main, parse_cell
from src.generator import Cell, GameGrid


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("grid_size: 6\nseed: 4\ndifficulty: easy\nwords:\n  - CAT\n  - DOG\n")
    return path


class TestLoadConfig:
    def test_load(self, config_file):
        config = load_config(str(config_file))
        assert config.grid_size == 6
        assert config.words == ["CAT", "DOG"]
        assert config.max_attempts == 1000

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)).grid_size == 10

    def test_invalid_size(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("grid_size: 0\n")
        with pytest.raises(ValueError):
            load_config(str(path))


class TestGenerateCli:
    def test_generate_and_save(self, config_file, tmp_path, capsys):
        output = tmp_path / "out" / "puzzle.json"
        assert generate_main([str(config_file), "--output", str(output), "--verbose"]) == 0

        puzzle = GameGrid.model_validate_json(output.read_text())
        assert puzzle.size == 6
        assert sorted(pw.word for pw in puzzle.placed_words) == ["CAT", "DOG"]

        out = capsys.readouterr().out
        assert "Words to find (2):" in out
        assert "Puzzle saved to:" in out

    def test_overrides(self, config_file, tmp_path):
        output = tmp_path / "puzzle.json"
        assert generate_main([str(config_file), "--size", "8", "-o", str(output)]) == 0
        data = json.loads(output.read_text())
        assert len(data["grid"]) == 8

    def test_bad_config(self, tmp_path, capsys):
        assert generate_main([str(tmp_path / "missing.yaml")]) == 1
        assert "Error loading config" in capsys.readouterr().err

    def test_unknown_topic(self, capsys):
        assert generate_main(["--topic", "weather"]) == 1
        assert "Error generating puzzle" in capsys.readouterr().err


class TestCheckCli:
    @pytest.fixture
    def saved_puzzle(self, config_file, tmp_path):
        output = tmp_path / "puzzle.json"
        generate_main([str(config_file), "-o", str(output)])
        return output, GameGrid.model_validate_json(output.read_text())

    def test_found(self, saved_puzzle, capsys):
        path, puzzle = saved_puzzle
        cat = next(pw for pw in puzzle.placed_words if pw.word == "CAT")
        cells = [f"{c.row},{c.col}" for c in reversed(cat.cells)]
        assert check_main([str(path), *cells]) == 0
        assert "Found: CAT" in capsys.readouterr().out

    def test_not_found(self, saved_puzzle, capsys):
        path, _ = saved_puzzle
        assert check_main([str(path), "0,0"]) == 1
        assert "TOO_SHORT" in capsys.readouterr().out

    def test_missing_puzzle(self, tmp_path):
        assert check_main([str(tmp_path / "nope.json"), "0,0", "0,1"]) == 2

    def test_parse_cell(self):
        assert parse_cell("3,4") == Cell(3, 4)
        with pytest.raises(Exception):
            parse_cell("3")
