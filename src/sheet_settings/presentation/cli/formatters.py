"""Rich formatting utilities for the CLI.

Keeps all Rich rendering (tables, panels, syntax) apart from the commands,
so the commands only deal with use cases and domain values.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from sheet_settings.domain.models.enums import DifficultyTier

console = Console()

_TIER_LABELS = {
    DifficultyTier.EASY: "Easy (E)",
    DifficultyTier.AVERAGE: "Average (A)",
    DifficultyTier.HARD: "Hard (H)",
    DifficultyTier.VERY_HARD: "Very Hard (VH)",
}


def configure_logging(verbose: bool) -> None:
    """Route log records through Rich; DEBUG when *verbose*."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "Sheet Settings") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]❌ {message}[/]")


# ---------------------------------------------------------------------------
# JSON rendering
# ---------------------------------------------------------------------------


def json_panel(raw_json: str, title: str = "⚙️  Sheet Settings") -> None:
    """Render JSON inside a syntax-highlighted panel."""
    console.print(
        Panel(
            Syntax(raw_json, "json", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )


# ---------------------------------------------------------------------------
# Skill difficulty modifiers
# ---------------------------------------------------------------------------


def _signed(value: Decimal) -> str:
    text = format(value.normalize(), "f")
    return text if value < 0 else f"+{text}"


def modifiers_table(
    baselines: dict[DifficultyTier, Decimal],
    configured: dict[DifficultyTier, Decimal],
    effective: dict[DifficultyTier, Decimal],
    override_mode: bool,
) -> None:
    """Print baseline, configured and effective modifier per difficulty."""
    mode = "override" if override_mode else "adjustment"
    table = Table(
        title=f"🎯 Skill Difficulty Modifiers ({mode} mode)",
        show_header=True,
        border_style="blue",
    )
    table.add_column("Difficulty", style="cyan")
    table.add_column("Baseline", justify="right")
    table.add_column("Override" if override_mode else "Adjustment", justify="right")
    table.add_column("Effective", style="green", justify="right")

    for tier in DifficultyTier:
        table.add_row(
            _TIER_LABELS[tier],
            _signed(baselines[tier]),
            _signed(configured[tier]),
            _signed(effective[tier]),
        )

    console.print(table)
