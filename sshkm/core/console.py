from typing import Any, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


def info(msg: str) -> None:
    console.print(f"[bold blue]ℹ[/] {escape(msg)}")


def success(msg: str) -> None:
    console.print(f"[bold green]✓[/] {escape(msg)}")


def warning(msg: str) -> None:
    console.print(f"[bold yellow]⚠[/] {escape(msg)}")


def error(msg: str) -> None:
    console.print(f"[bold red]✗[/] {escape(msg)}")


def heading(msg: str) -> None:
    console.print(f"\n[bold]--- {escape(msg)} ---[/]")


def raw(text: str) -> None:
    """Print text as-is, without markup, highlighting or wrapping."""
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def print_table(title: str, columns: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    table = Table(title=title, show_lines=False)
    for col in columns:
        table.add_column(col, style="cyan", overflow="fold")
    for row in rows:
        table.add_row(*(str(v) for v in row))
    console.print(table)
