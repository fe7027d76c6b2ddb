"""Languages command: registered language tags and grammar availability."""

import typer
from rich.table import Table

from ..langs import LANGUAGES, available_languages
from ..parsing import get_parser
from . import app
from ._common import console


@app.command()
def languages():
    """
    List supported language tags, their extensions and grammar status.
    """
    parser = get_parser()
    table = Table(title="Languages", title_justify="left")
    table.add_column("Tag", style="bold")
    table.add_column("Extensions")
    table.add_column("Grammar")
    for tag in available_languages():
        installed = parser.is_language_supported(tag)
        table.add_row(
            tag,
            " ".join(LANGUAGES[tag].extensions),
            "[green]installed[/green]" if installed else "[red]missing[/red]",
        )
    console.print(table)
    if not any(parser.is_language_supported(tag) for tag in available_languages()):
        raise typer.Exit(1)
