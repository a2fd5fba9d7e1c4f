"""Thin CLI wrapper — Typer commands that delegate to the Container.

All domain logic is accessed through the Container (bootstrap.py) or the
pure domain rules.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from sheet_settings.domain.errors import SheetSettingsError
from sheet_settings.presentation.cli.formatters import (
    configure_logging,
    console,
    error_message,
    json_panel,
    modifiers_table,
    success_panel,
)

app = typer.Typer(
    name="sheet-settings",
    help="⚙️  Inspect, repair and migrate character sheet settings files",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for the global defaults document
defaults_app = typer.Typer(
    name="defaults",
    help="🌐 Manage the global default sheet settings",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(defaults_app, name="defaults")

ConfigDirOption = Annotated[
    Optional[Path],
    typer.Option("--config-dir", help="Directory holding the global settings file"),
]


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log every repair and migration step")
    ] = False,
) -> None:
    """Sheet settings engine command line."""
    configure_logging(verbose)


def _load(path: Path):
    from sheet_settings.infrastructure.persistence.json_settings_store import JsonSettingsStore

    try:
        return JsonSettingsStore().load(path)
    except SheetSettingsError as exc:
        error_message(str(exc))
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# sheet-settings show / validate / migrate / modifiers
# ---------------------------------------------------------------------------


@app.command()
def show(
    settings_file: Annotated[Path, typer.Argument(help="Settings JSON file")],
) -> None:
    """Show a settings file after migration and repair."""
    settings = _load(settings_file)
    json_panel(json.dumps(settings.to_dict(), indent=2), title=f"⚙️  {settings_file.name}")


@app.command()
def validate(
    settings_file: Annotated[Path, typer.Argument(help="Settings JSON file")],
) -> None:
    """Check that a settings file can be loaded."""
    from sheet_settings.domain.rules.skill_modifiers import uses_overrides

    settings = _load(settings_file)
    mode = "override" if uses_overrides(settings) else "adjustment"
    success_panel(
        "✅ Settings file is usable\n\n"
        f"  Damage progression: [cyan]{settings.damage_progression.value}[/]\n"
        f"  Units: [cyan]{settings.default_length_units.value}[/], "
        f"[cyan]{settings.default_weight_units.value}[/]\n"
        f"  Skill modifiers: [cyan]{mode}[/] mode\n"
        f"  Flat dodge bonus: [cyan]{settings.include_dodge_flat_bonus}[/]\n"
        f"  Passive defense: [cyan]{settings.use_passive_defense}[/]",
        title="✅ Validation",
    )


@app.command()
def migrate(
    settings_file: Annotated[Path, typer.Argument(help="Settings JSON file to migrate")],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Destination file (defaults to in place)"),
    ] = None,
) -> None:
    """Rewrite a settings file in the current format."""
    from sheet_settings.infrastructure.persistence.json_settings_store import JsonSettingsStore

    settings = _load(settings_file)
    dest = output or settings_file
    try:
        JsonSettingsStore().save(settings, dest)
    except SheetSettingsError as exc:
        error_message(str(exc))
        raise typer.Exit(code=1)
    success_panel(f"✅ Settings written to: [bold green]{dest}[/]", title="🔁 Migrate")


@app.command()
def modifiers(
    settings_file: Annotated[Path, typer.Argument(help="Settings JSON file")],
) -> None:
    """Show the effective skill difficulty modifiers of a settings file."""
    from sheet_settings.domain.models.enums import DifficultyTier
    from sheet_settings.domain.rules.skill_modifiers import (
        baseline_modifier,
        configured_modifiers,
        effective_modifiers,
        uses_overrides,
    )

    settings = _load(settings_file)
    modifiers_table(
        baselines={tier: baseline_modifier(tier) for tier in DifficultyTier},
        configured=configured_modifiers(settings),
        effective=effective_modifiers(settings),
        override_mode=uses_overrides(settings),
    )


@app.command()
def init(
    output: Annotated[
        Path, typer.Option("--output", "-o", help="Destination file")
    ] = Path("sheet_settings.json"),
) -> None:
    """Write a settings file holding the factory defaults."""
    from sheet_settings.domain.rules.defaults import factory_sheet_settings
    from sheet_settings.infrastructure.persistence.json_settings_store import JsonSettingsStore

    if output.exists():
        console.print(f"[bold yellow]⚠️  File already exists:[/] {output}")
        if not typer.confirm("Overwrite it?"):
            raise typer.Abort()

    try:
        JsonSettingsStore().save(factory_sheet_settings(), output)
    except SheetSettingsError as exc:
        error_message(str(exc))
        raise typer.Exit(code=1)
    success_panel(f"✅ Factory settings written to: [bold green]{output}[/]", title="⚙️  Init")


# ---------------------------------------------------------------------------
# sheet-settings defaults ...
# ---------------------------------------------------------------------------


@defaults_app.command("show")
def defaults_show(config_dir: ConfigDirOption = None) -> None:
    """Show the global default settings."""
    from sheet_settings.bootstrap import Container

    container = Container(config_dir)
    raw_json = container.global_settings.sheet.model_dump_json(indent=2)
    json_panel(raw_json, title="🌐 Global Defaults")


@defaults_app.command("path")
def defaults_path(config_dir: ConfigDirOption = None) -> None:
    """Print where the global default settings are stored."""
    from sheet_settings.infrastructure.config.global_settings_manager import GlobalSettingsManager

    console.print(str(GlobalSettingsManager(config_dir).settings_path), soft_wrap=True)


@defaults_app.command("import")
def defaults_import(
    settings_file: Annotated[Path, typer.Argument(help="Settings JSON file to adopt")],
    config_dir: ConfigDirOption = None,
) -> None:
    """Make a settings file the new global defaults."""
    from sheet_settings.bootstrap import Container

    container = Container(config_dir)
    try:
        container.edit_settings().load(settings_file)
        container.save_global_settings()
    except SheetSettingsError as exc:
        error_message(str(exc))
        raise typer.Exit(code=1)
    success_panel(
        f"✅ Global defaults replaced from: [bold green]{settings_file}[/]",
        title="🌐 Defaults",
    )


@defaults_app.command("reset")
def defaults_reset(config_dir: ConfigDirOption = None) -> None:
    """Restore the factory global defaults."""
    from sheet_settings.infrastructure.config.global_settings_manager import GlobalSettingsManager

    manager = GlobalSettingsManager(config_dir)
    try:
        manager.reset_to_defaults()
    except SheetSettingsError as exc:
        error_message(str(exc))
        raise typer.Exit(code=1)
    success_panel("✅ Global defaults reset to factory settings", title="🌐 Defaults")


if __name__ == "__main__":
    app()
