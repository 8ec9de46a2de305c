"""Shared utility functions for vulcangen.

Provides JSON I/O and Rich-based console reporting.
All user-facing output goes through the shared ``console``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.rule import Rule
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> Any:
    """Load and parse a JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        The parsed JSON value, whatever its top-level type.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    file_path = Path(path)
    raw = file_path.read_text(encoding="utf-8")
    return json.loads(raw)


def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> None:
    """Save data as pretty-printed JSON.

    Parent directories are created automatically.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(data, indent=2, ensure_ascii=False, default=str)
    file_path.write_text(content + "\n", encoding="utf-8")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


PHASE_COLORS: dict[str, str] = {
    "prompting": "bright_cyan",
    "configuring": "bright_green",
    "writing": "bright_yellow",
    "install": "bright_magenta",
}


def print_phase_header(name: str) -> None:
    """Print a dim rule naming the lifecycle phase that is about to run."""
    color = PHASE_COLORS.get(name, "white")
    console.print(Rule(f"[{color}]{name}[/{color}]", style="dim"))


def print_name_table(names: list[str], title: str, column: str = "Name") -> None:
    """Print a single-column table of names, or a dim note when empty."""
    if not names:
        console.print(f"[dim]No {column.lower()}s found.[/dim]")
        return
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", justify="right")
    table.add_column(column)
    for index, name in enumerate(names, start=1):
        table.add_row(str(index), name)
    console.print(table)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
