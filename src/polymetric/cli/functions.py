"""Functions command: list function and closure spans of one file."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from ..api import function_spans
from ..exceptions import PolymetricError
from ..logging_config import setup_logging
from . import app
from ._common import console, read_source


@app.command()
def functions(
    file: Path = typer.Argument(
        ...,
        help="Source file",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    language: Optional[str] = typer.Option(
        None,
        "--language",
        "-l",
        help="Language tag (default: detect from the extension)",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    List every function and closure with its line range.
    """
    setup_logging(verbose=verbose)

    try:
        source, tag = read_source(file, language)
    except PolymetricError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    report = function_spans(source, tag)
    if report is None:
        console.print(f"[red]Error:[/red] cannot parse {file} as {tag}")
        raise typer.Exit(1)

    if json_output:
        output = {
            "path": str(file),
            "language": tag,
            "has_error": report.has_error,
            "functions": [span.to_dict() for span in report],
        }
        print(json.dumps(output, indent=2))
        return

    table = Table(title=str(file), title_justify="left")
    table.add_column("Name")
    table.add_column("Kind", style="dim")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    for span in report:
        table.add_row(span.name, span.kind, str(span.start_line), str(span.end_line))
    console.print(table)
    if report.has_error:
        console.print("[yellow]The file has syntax errors; spans are best-effort.[/yellow]")
