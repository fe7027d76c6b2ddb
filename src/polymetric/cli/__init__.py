"""CLI entry point: builds the typer app and registers every subcommand."""

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="polymetric",
    help="polymetric - complexity and size metrics for source code",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold cyan]polymetric[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)


@app.callback()
def _root(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """
    Compute cyclomatic, cognitive, Halstead, LOC and related metrics.

    [bold cyan]Examples:[/bold cyan]

      polymetric analyze src/

      polymetric analyze app.py --json

      polymetric functions app.py
    """


# Import subcommands to register them
from .analyze import analyze as _analyze  # noqa: F401, E402
from .functions import functions as _functions  # noqa: F401, E402
from .count import count as _count  # noqa: F401, E402
from .strip import strip_comments as _strip_comments  # noqa: F401, E402
from .languages import languages as _languages  # noqa: F401, E402


def main() -> None:
    app()
