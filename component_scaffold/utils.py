"""Shared console helpers.

All user-facing output goes through one Rich console so that messages from
the generators and the CLI share formatting.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(escape(key), escape(str(value)))

    console.print(table)
    console.print()


def print_written_files(paths: list[Path], title: str = "Generated files") -> None:
    """Print one row per written file, relative to the working directory when possible."""
    cwd = Path.cwd()
    rows: dict[str, str] = {}
    for index, path in enumerate(paths, start=1):
        try:
            shown = path.absolute().relative_to(cwd)
        except ValueError:
            shown = path
        rows[str(index)] = str(shown)
    print_summary_table(rows, title=title)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
