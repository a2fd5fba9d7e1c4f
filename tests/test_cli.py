"""Tests for the Typer command line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from sheet_settings.domain.rules.defaults import factory_sheet_settings
from sheet_settings.infrastructure.persistence.json_settings_store import JsonSettingsStore
from sheet_settings.presentation.cli.app import app

runner = CliRunner()


@pytest.fixture()
def legacy_file(tmp_path: Path) -> Path:
    path = tmp_path / "legacy.json"
    path.write_text(
        json.dumps(
            {
                "sheet_settings": {
                    "damage_progression": "thrust_equals_swing_minus_2",
                    "show_advantage_modifier_adj": True,
                    "use_skill_modifier_adjustments": True,
                    "hard_skill_modifier_override": -1,
                }
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture()
def broken_file(tmp_path: Path) -> Path:
    path = tmp_path / "broken.json"
    path.write_text("{{invalid json", encoding="utf-8")
    return path


class TestFileCommands:
    def test_no_args_shows_help(self) -> None:
        result = runner.invoke(app, [])
        assert "Usage" in result.output

    def test_init_writes_factory_settings(self, tmp_path: Path) -> None:
        out = tmp_path / "new.json"
        result = runner.invoke(app, ["init", "-o", str(out)])
        assert result.exit_code == 0
        assert JsonSettingsStore().load(out) == factory_sheet_settings()

    def test_init_declined_overwrite(self, tmp_path: Path) -> None:
        out = tmp_path / "existing.json"
        out.write_text("{}", encoding="utf-8")
        result = runner.invoke(app, ["init", "-o", str(out)], input="n\n")
        assert result.exit_code != 0
        assert out.read_text(encoding="utf-8") == "{}"

    def test_show(self, legacy_file: Path) -> None:
        result = runner.invoke(app, ["show", str(legacy_file)])
        assert result.exit_code == 0
        assert "show_trait_modifier_adj" in result.output
        assert "thrust_equals_swing_minus_2" in result.output

    def test_validate(self, legacy_file: Path) -> None:
        result = runner.invoke(app, ["validate", str(legacy_file)])
        assert result.exit_code == 0
        assert "usable" in result.output
        assert "override" in result.output

    def test_validate_broken_file(self, broken_file: Path) -> None:
        result = runner.invoke(app, ["validate", str(broken_file)])
        assert result.exit_code == 1
        assert "not valid JSON" in result.output

    def test_migrate_to_output(self, legacy_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "migrated.json"
        result = runner.invoke(app, ["migrate", str(legacy_file), "-o", str(out)])
        assert result.exit_code == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        assert "sheet_settings" not in data
        assert data["show_trait_modifier_adj"] is True
        assert "show_advantage_modifier_adj" not in data

    def test_migrate_in_place(self, legacy_file: Path) -> None:
        result = runner.invoke(app, ["migrate", str(legacy_file)])
        assert result.exit_code == 0
        data = json.loads(legacy_file.read_text(encoding="utf-8"))
        assert data["damage_progression"] == "thrust_equals_swing_minus_2"

    def test_modifiers(self, legacy_file: Path) -> None:
        result = runner.invoke(app, ["modifiers", str(legacy_file)])
        assert result.exit_code == 0
        assert "override mode" in result.output
        assert "Very Hard" in result.output

    def test_modifiers_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["modifiers", str(tmp_path / "missing.json")])
        assert result.exit_code == 1


class TestDefaultsCommands:
    def test_path(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["defaults", "path", "--config-dir", str(tmp_path)])
        assert result.exit_code == 0
        assert result.output.strip() == str(tmp_path / "sheet_settings.json")

    def test_show_factory(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["defaults", "show", "--config-dir", str(tmp_path)])
        assert result.exit_code == 0
        assert "include_dodge_flat_bonus" in result.output

    def test_import_then_reset(self, legacy_file: Path, tmp_path: Path) -> None:
        config_dir = tmp_path / "config"
        result = runner.invoke(
            app, ["defaults", "import", str(legacy_file), "--config-dir", str(config_dir)]
        )
        assert result.exit_code == 0
        stored = JsonSettingsStore().load(config_dir / "sheet_settings.json")
        assert stored.show_trait_modifier_adj is True

        result = runner.invoke(app, ["defaults", "reset", "--config-dir", str(config_dir)])
        assert result.exit_code == 0
        assert not (config_dir / "sheet_settings.json").exists()

    def test_import_broken_file(self, broken_file: Path, tmp_path: Path) -> None:
        config_dir = tmp_path / "config"
        result = runner.invoke(
            app, ["defaults", "import", str(broken_file), "--config-dir", str(config_dir)]
        )
        assert result.exit_code == 1
        assert not (config_dir / "sheet_settings.json").exists()

    def test_reset_failure(self, tmp_path: Path) -> None:
        # A directory where the settings file belongs cannot be unlinked.
        (tmp_path / "sheet_settings.json").mkdir()
        result = runner.invoke(app, ["defaults", "reset", "--config-dir", str(tmp_path)])
        assert result.exit_code == 1
        assert "Unable to remove settings" in result.output
