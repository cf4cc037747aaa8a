"""Rich display helpers for terminal output."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from headermap.models.mapping import FieldKey, MappingResult


def display_headers(headers: list[str], console: Console) -> None:
    """Print the extracted CSV headers in column order.

    Empty headers are shown as a dim placeholder so their position stays
    visible.
    """
    table = Table(title="CSV Headers", show_lines=False)
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Header", style="bold cyan")

    for idx, header in enumerate(headers, start=1):
        cell = Text(header) if header else Text("(empty)", style="dim")
        table.add_row(str(idx), cell)

    console.print(table)
    console.print(f"\n[bold]{len(headers)}[/bold] headers found")


def display_mapping_result(result: MappingResult, console: Console) -> None:
    """Print the field-to-header mapping with unresolved fields in red.

    Args:
        result: Reconciled mapping to display.
        console: Rich Console for output.
    """
    table = Table(title="Header Mapping", show_lines=True)
    table.add_column("Field", style="bold cyan", no_wrap=True)
    table.add_column("Header")

    for field in FieldKey:
        header = result.header_for(field)
        if header is None:
            header_text = Text("unresolved", style="bold red")
        else:
            header_text = Text(header, style="green")
        table.add_row(field.value, header_text)

    console.print(table)

    if result.diagnostic:
        title = "Diagnostic"
        if result.diagnostic_source == "synthesized":
            title = "Diagnostic (auto-filled)"
        console.print(Panel(result.diagnostic, title=title, border_style="yellow"))
    else:
        console.print("[green]All fields mapped.[/green]")
