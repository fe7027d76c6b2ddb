"""Strip-comments command: source without comments on stdout."""

from pathlib import Path
from typing import Optional

import typer

from ..api import strip_comments as strip_source_comments
from ..exceptions import PolymetricError
from ..logging_config import setup_logging
from . import app
from ._common import console, read_source


@app.command("strip-comments")
def strip_comments(
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
):
    """
    Write FILE without its comments to stdout; line numbers are preserved.
    """
    setup_logging()

    try:
        source, tag = read_source(file, language)
    except PolymetricError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    stripped = strip_source_comments(source, tag)
    if stripped is None:
        console.print(f"[red]Error:[/red] cannot parse {file} as {tag}")
        raise typer.Exit(1)
    typer.echo(stripped, nl=False)
