"""Test the command line entry point."""

import json

import pytest

from src.main import load_config, main


@pytest.fixture
def inputs(tmp_path):
    dice = tmp_path / "dice.txt"
    dice.write_text("ENG\nSAA\nPRR\nEAE\n")
    words = tmp_path / "words.txt"
    words.write_text("RAGE\nPEA\nEGG\n")
    return dice, words


class TestOutput:
    """Test the printed result lines."""

    def test_results(self, inputs, capsys):
        dice, words = inputs
        assert main([str(dice), str(words)]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "2,1,0,3: RAGE",
            "2,0,1: PEA",
            "Cannot spell EGG",
        ]

    def test_verbose_goes_to_stderr(self, inputs, capsys):
        dice, words = inputs
        main([str(dice), str(words), "--verbose"])
        captured = capsys.readouterr()
        assert "Cannot spell EGG" in captured.out
        assert "Run Summary" in captured.err
        assert "Run Summary" not in captured.out

    def test_show_graph(self, tmp_path, capsys):
        dice = tmp_path / "dice.txt"
        dice.write_text("ab\na\n")
        words = tmp_path / "words.txt"
        words.write_text("ab\n")
        main([str(dice), str(words), "--show-graph"])
        out = capsys.readouterr().out
        assert "Graph for word: ab" in out
        assert "Node 0: SOURCE Edges to 1 2" in out
        assert out.strip().endswith("1,0: ab")

    def test_ignore_case_flag(self, tmp_path, capsys):
        dice = tmp_path / "dice.txt"
        dice.write_text("A\n")
        words = tmp_path / "words.txt"
        words.write_text("a\n")
        main([str(dice), str(words), "--ignore-case"])
        assert capsys.readouterr().out.strip() == "0: a"


class TestErrors:
    """Test missing inputs and bad configuration."""

    def test_missing_dice_file(self, tmp_path, inputs, capsys):
        _, words = inputs
        with pytest.raises(SystemExit) as exc:
            main([str(tmp_path / "nope.txt"), str(words)])
        assert exc.value.code == 1
        assert "Error loading dice" in capsys.readouterr().err

    def test_missing_words_file(self, tmp_path, inputs, capsys):
        dice, _ = inputs
        with pytest.raises(SystemExit) as exc:
            main([str(dice), str(tmp_path / "nope.txt")])
        assert exc.value.code == 1
        assert "Error loading words" in capsys.readouterr().err

    def test_missing_arguments(self):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 2

    def test_missing_config(self, tmp_path, inputs, capsys):
        dice, words = inputs
        with pytest.raises(SystemExit) as exc:
            main([str(dice), str(words), "--config", str(tmp_path / "run.yaml")])
        assert exc.value.code == 1
        assert "Error loading config" in capsys.readouterr().err

    def test_invalid_config(self, tmp_path, inputs):
        dice, words = inputs
        config = tmp_path / "run.yaml"
        config.write_text("ignore_case: [1, 2]\n")
        with pytest.raises(SystemExit) as exc:
            main([str(dice), str(words), "--config", str(config)])
        assert exc.value.code == 1


class TestConfig:
    """Test YAML configuration."""

    def test_load_config(self, tmp_path):
        config = tmp_path / "run.yaml"
        config.write_text("ignore_case: true\nshow_graph: false\n")
        loaded = load_config(str(config))
        assert loaded.ignore_case is True
        assert loaded.strip_whitespace is False

    def test_empty_config(self, tmp_path):
        config = tmp_path / "run.yaml"
        config.write_text("")
        assert load_config(str(config)).ignore_case is False

    def test_config_applies(self, tmp_path, capsys):
        dice = tmp_path / "dice.txt"
        dice.write_text(" ab \n")
        words = tmp_path / "words.txt"
        words.write_text("B  \n")
        config = tmp_path / "run.yaml"
        config.write_text("ignore_case: true\nstrip_whitespace: true\n")
        main([str(dice), str(words), "--config", str(config)])
        assert capsys.readouterr().out.strip() == "0: B"


class TestSavedRun:
    """Test the JSON run record."""

    def test_output_file(self, inputs, tmp_path):
        dice, words = inputs
        output = tmp_path / "results" / "run.json"
        main([str(dice), str(words), "--output", str(output)])
        data = json.loads(output.read_text())
        assert data["dice"] == ["ENG", "SAA", "PRR", "EAE"]
        assert data["spelled_count"] == 2
        assert data["failed_count"] == 1
        assert data["results"][0]["dice"] == [2, 1, 0, 3]
        assert data["results"][2]["dice"] is None
        assert data["results"][2]["error"] == "NO_VALID_ASSIGNMENT"
