"""headermap CLI application entry point.

Provides commands for inspecting the header row of a CSV file and for
mapping it onto the internal email, firstName and lastName fields.

Usage:
    headermap headers <csv-path>
    headermap map <csv-path> [--output mapping.json]
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

app = typer.Typer(
    name="headermap",
    help="Map German CSV column headers to email, first name and last name.",
    no_args_is_help=True,
)

console = Console()


@app.command()
def version() -> None:
    """Show the current version."""
    from headermap import __version__

    console.print(f"headermap {__version__}")


def _load_headers(csv_path: Path) -> tuple[str, list[str]]:
    """Read the CSV file and extract its headers, exiting on failure."""
    from headermap.io.csv_headers import NoHeadersFound, extract_headers, read_csv_text

    if not csv_path.is_file():
        console.print(f"[bold red]Error:[/bold red] File not found: {csv_path}")
        raise typer.Exit(code=1)

    try:
        raw_text = read_csv_text(csv_path)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[bold red]Error reading CSV file:[/bold red] {e}")
        raise typer.Exit(code=1) from e

    try:
        headers = extract_headers(raw_text)
    except NoHeadersFound as e:
        console.print(f"[bold red]Error:[/bold red] No headers found in {csv_path}")
        raise typer.Exit(code=1) from e

    return raw_text, headers


@app.command()
def headers(
    csv_path: Annotated[
        Path,
        typer.Argument(help="Path to a CSV file"),
    ],
) -> None:
    """Show the headers of a CSV file without contacting the LLM."""
    from headermap.cli.display import display_headers

    _, header_list = _load_headers(csv_path)
    display_headers(header_list, console)


def _check_api_key() -> bool:
    """Check if ANTHROPIC_API_KEY is set. Print error and return False if not."""
    import os

    if not os.environ.get("ANTHROPIC_API_KEY"):
        console.print(
            "[bold red]Error:[/bold red] ANTHROPIC_API_KEY environment variable is not set.\n"
            "Set it with: [bold]export ANTHROPIC_API_KEY=sk-...[/bold]"
        )
        return False
    return True


@app.command(name="map")
def map_cmd(
    csv_path: Annotated[
        Path,
        typer.Argument(help="Path to a CSV file"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the mapping as JSON to this file"),
    ] = None,
    model: Annotated[
        str | None,
        typer.Option("--model", "-m", help="Claude model ID (default: HEADERMAP_MODEL)"),
    ] = None,
    max_attempts: Annotated[
        int,
        typer.Option("--max-attempts", min=1, help="Attempts for transient API errors"),
    ] = 1,
) -> None:
    """Map the headers of a CSV file onto email, firstName and lastName.

    Unresolved fields are reported with a diagnostic and do not cause a
    non-zero exit. Requires ANTHROPIC_API_KEY to be set.
    """
    from headermap.cli.display import display_headers, display_mapping_result
    from headermap.config import OracleConfig
    from headermap.llm.client import MalformedOracleResponse, OracleTransportFailure
    from headermap.mapping.pipeline import map_headers
    from headermap.mapping.requester import MappingRequester

    # Step 1: Read headers
    raw_text, header_list = _load_headers(csv_path)
    console.print(f"\n[bold blue][1/2][/bold blue] Found {len(header_list)} headers")
    display_headers(header_list, console)

    if not _check_api_key():
        raise typer.Exit(code=1)

    # Step 2: Map via LLM
    config = OracleConfig.from_env(model=model, max_attempts=max_attempts)
    console.print(f"[bold blue][2/2][/bold blue] Mapping headers with {config.model}...")
    try:
        result = map_headers(raw_text, MappingRequester(config))
    except OracleTransportFailure as e:
        console.print(f"[bold red]Error: LLM unavailable:[/bold red] {e}")
        raise typer.Exit(code=1) from e
    except MalformedOracleResponse as e:
        console.print(f"[bold red]Error: unexpected LLM response:[/bold red] {e}")
        raise typer.Exit(code=1) from e

    console.print()
    display_mapping_result(result, console)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(
            json.dumps(result.to_json_dict(), indent=2, ensure_ascii=False), encoding="utf-8"
        )
        console.print(f"\n[green]Mapping written to {output}[/green]")
