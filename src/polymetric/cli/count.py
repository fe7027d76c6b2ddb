"""Count command: node totals for one file."""

import json
from pathlib import Path
from typing import List, Optional

import typer

from ..api import count_nodes
from ..exceptions import PolymetricError
from ..logging_config import setup_logging
from . import app
from ._common import console, read_source


@app.command()
def count(
    file: Path = typer.Argument(
        ...,
        help="Source file",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    kinds: List[str] = typer.Option(
        [],
        "--kind",
        "-k",
        help="Node kind to count (repeatable), e.g. -k if_statement -k call",
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
):
    """
    Count syntax tree nodes, in total and for the requested kinds.
    """
    setup_logging()

    try:
        source, tag = read_source(file, language)
    except PolymetricError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    result = count_nodes(source, tag, kinds)
    if result is None:
        console.print(f"[red]Error:[/red] cannot parse {file} as {tag}")
        raise typer.Exit(1)

    if json_output:
        output = {
            "total": result.total,
            "matched": result.matched,
            "by_kind": {kind: result.by_kind.get(kind, 0) for kind in kinds},
        }
        print(json.dumps(output, indent=2))
        return

    console.print(f"[bold]{result.total}[/bold] nodes")
    for kind in kinds:
        console.print(f"  {kind}: [cyan]{result.by_kind.get(kind, 0)}[/cyan]")
    if kinds:
        console.print(f"[bold]{result.matched}[/bold] matched")
