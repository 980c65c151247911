"""
TEST DOC: Command-Line Interface

WHAT: Tests for the file-quest commands through typer's CliRunner.
WHY: The CLI is how worlds are generated, saved and inspected by hand.
HOW: Invoke commands in-process and check exit codes, output and files.

CASES:
- generate with a seed, printing and saving
- show for saves and for layout files, with --path and --ls
- validate for good and bad files
- domains and config listings

EDGE CASES:
- Invalid JSON
- Layout files that fail validation
- Unknown --path
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from file_quest.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Keep the user's environment out of CLI runs."""
    for name in ("SEED", "DEFAULT_DOMAIN", "DEFAULT_LEVEL", "DEBUG", "LOG_LEVEL"):
        monkeypatch.delenv(f"FILE_QUEST_{name}", raising=False)
    monkeypatch.delenv("FILE_QUEST_OTEL_ENABLED", raising=False)
    monkeypatch.setenv("FILE_QUEST_DATA_DIR", str(tmp_path / "data"))


class TestGenerate:
    def test_prints_world(self):
        result = runner.invoke(app, ["generate", "--domain", "game-studio", "--seed", "5"])
        assert result.exit_code == 0, result.output
        assert "Game Studio" in result.output
        assert "Seed: 5" in result.output

    def test_same_seed_same_output(self):
        args = ["generate", "-D", "web-agency", "-s", "12", "-l", "2", "--all"]
        first = runner.invoke(app, args)
        second = runner.invoke(app, args)
        assert first.exit_code == 0
        assert first.output == second.output

    def test_seed_from_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("FILE_QUEST_SEED", "77")
        result = runner.invoke(app, ["generate"])
        assert result.exit_code == 0, result.output
        assert "Seed: 77" in result.output
        assert "Tech Startup" in result.output

    def test_rejects_level_zero(self):
        result = runner.invoke(app, ["generate", "--level", "0"])
        assert result.exit_code != 0

    def test_rejects_unknown_domain(self):
        result = runner.invoke(app, ["generate", "--domain", "bakery"])
        assert result.exit_code != 0

    def test_saves_world(self, tmp_path: Path):
        output = tmp_path / "world.json"
        result = runner.invoke(app, ["generate", "-s", "9", "-o", str(output)])
        assert result.exit_code == 0, result.output
        assert "World saved" in result.output

        data = json.loads(output.read_text())
        assert data["layout"]["root_name"] == "Tech Startup"
        assert data["state"]["seed"] == 9
        assert data["state"]["current_path"] == "/Tech Startup"
        assert data["layout"]["special_items"]["key_location"] == data["state"]["key_location"]

    def test_overwrite_declined(self, tmp_path: Path):
        output = tmp_path / "world.json"
        output.write_text("{}")
        result = runner.invoke(app, ["generate", "-s", "1", "-o", str(output)], input="n\n")
        assert result.exit_code == 0
        assert output.read_text() == "{}"


class TestShow:
    def test_layout_file(self, sample_layout_path: Path):
        result = runner.invoke(app, ["show", str(sample_layout_path)])
        assert result.exit_code == 0, result.output
        assert "game-studio/" in result.output
        assert "main.js" in result.output
        assert ".hidden.py" not in result.output

    def test_hidden_and_depth(self, sample_layout_path: Path):
        result = runner.invoke(app, ["show", str(sample_layout_path), "--all"])
        assert ".hidden.py" in result.output

        result = runner.invoke(app, ["show", str(sample_layout_path), "--depth", "1"])
        assert "tech-startup/" in result.output
        assert "main.js" not in result.output

    def test_path_and_listing(self, sample_layout_path: Path):
        result = runner.invoke(
            app, ["show", str(sample_layout_path), "--path", "tech-startup", "--ls"]
        )
        assert result.exit_code == 0, result.output
        assert "package.json" in result.output
        assert "treasure" in result.output
        assert "game-studio" not in result.output

    def test_unknown_path(self, sample_layout_path: Path):
        result = runner.invoke(app, ["show", str(sample_layout_path), "-p", "nowhere"])
        assert result.exit_code == 1
        assert "no such directory: nowhere" in result.output

    def test_saved_world(self, tmp_path: Path):
        output = tmp_path / "world.json"
        runner.invoke(app, ["generate", "-s", "4", "-o", str(output)])
        result = runner.invoke(app, ["show", str(output)])
        assert result.exit_code == 0, result.output
        assert "Current path: /Tech Startup" in result.output

    def test_invalid_layout(self, invalid_layout_path: Path):
        result = runner.invoke(app, ["show", str(invalid_layout_path)])
        assert result.exit_code == 1
        assert "Validation errors" in result.output

    def test_missing_file(self, tmp_path: Path):
        result = runner.invoke(app, ["show", str(tmp_path / "missing.json")])
        assert result.exit_code != 0


class TestValidate:
    def test_valid_layout(self, sample_layout_path: Path):
        result = runner.invoke(app, ["validate", str(sample_layout_path)])
        assert result.exit_code == 0, result.output
        assert "Valid world: projects" in result.output
        assert "Directories: 8" in result.output
        assert "monster: 6" in result.output

    def test_invalid_layout(self, invalid_layout_path: Path):
        result = runner.invoke(app, ["validate", str(invalid_layout_path)])
        assert result.exit_code == 1
        assert "Validation errors" in result.output

    def test_bad_special_items(self, sample_layout_dict: dict, tmp_path: Path):
        sample_layout_dict["special_items"] = {
            "boss_location": "/projects/tech-startup/package.json",
            "key_location": "/projects/nowhere.json",
        }
        layout_file = tmp_path / "layout.json"
        layout_file.write_text(json.dumps(sample_layout_dict))

        result = runner.invoke(app, ["validate", str(layout_file)])
        assert result.exit_code == 1
        assert "boss location is not a directory" in result.output
        assert "key location is not a file" in result.output

    def test_invalid_json(self, tmp_path: Path):
        broken = tmp_path / "broken.json"
        broken.write_text("{not json")
        result = runner.invoke(app, ["validate", str(broken)])
        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_generated_save(self, tmp_path: Path):
        output = tmp_path / "world.json"
        runner.invoke(app, ["generate", "-D", "web-agency", "-s", "8", "-o", str(output)])
        result = runner.invoke(app, ["validate", str(output)])
        assert result.exit_code == 0, result.output
        assert "Valid world: Web Agency" in result.output


class TestInfoCommands:
    def test_domains(self):
        result = runner.invoke(app, ["domains"])
        assert result.exit_code == 0
        for key in ("tech-startup", "game-studio", "web-agency"):
            assert key in result.output

    def test_config(self):
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "Default domain: tech-startup" in result.output
        assert "Seed: (random)" in result.output

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "file-quest version" in result.output


class TestSavedWorlds:
    """Worlds saved by name into the saves directory."""

    def test_save_by_name(self, tmp_path: Path):
        result = runner.invoke(app, ["generate", "-s", "6", "--save", "demo"])
        assert result.exit_code == 0, result.output

        save_file = tmp_path / "data" / "saves" / "demo.json"
        data = json.loads(save_file.read_text())
        assert data["state"]["seed"] == 6

    def test_show_and_validate_by_name(self):
        runner.invoke(app, ["generate", "-D", "game-studio", "-s", "2", "-S", "studio"])

        result = runner.invoke(app, ["show", "studio", "--depth", "1"])
        assert result.exit_code == 0, result.output
        assert "Current path: /Game Studio" in result.output

        result = runner.invoke(app, ["validate", "studio.json"])
        assert result.exit_code == 0, result.output
        assert "Valid world: Game Studio" in result.output

    def test_list_saves(self):
        result = runner.invoke(app, ["saves"])
        assert result.exit_code == 0
        assert "No saved worlds" in result.output

        runner.invoke(app, ["generate", "-s", "1", "-S", "alpha"])
        runner.invoke(app, ["generate", "-s", "2", "-S", "beta"])
        result = runner.invoke(app, ["saves"])
        assert result.exit_code == 0
        assert result.output.split() == ["alpha", "beta"]

    def test_unknown_name(self):
        result = runner.invoke(app, ["show", "nothing-here"])
        assert result.exit_code == 1
        assert "No such file or saved world: nothing-here" in result.output
