"""Analyze command: metrics for files and directories."""

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.table import Table

from ..config import load_config
from ..exceptions import PolymetricError
from ..logging_config import get_logger, setup_logging
from ..runner import FileRunner, RunReport, collect_files
from ..spaces import Space
from . import app
from ._common import console

logger = get_logger(__name__)


@app.command()
def analyze(
    paths: List[Path] = typer.Argument(
        ...,
        help="Files or directories to analyze",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output the space trees in machine-readable JSON format",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "-w",
        "--workers",
        help="Parallel workers (default: auto-detect)",
        min=1,
        max=32,
    ),
    language: Optional[str] = typer.Option(
        None,
        "--language",
        "-l",
        help="Only analyze files of this language tag",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
):
    """
    Compute metrics for every supported source file under PATHS.

    [bold cyan]Examples:[/bold cyan]

      polymetric analyze src/

      polymetric analyze main.rs lib.rs --json

      polymetric analyze . --language python -w 4
    """
    setup_logging(verbose=verbose, quiet=quiet)

    try:
        settings = load_config(
            config_file=config,
            workers=workers,
            languages=[language] if language else None,
            verbose=verbose or None,
            quiet=quiet or None,
        )
        # config files and POLYMETRIC_VERBOSITY can change the level
        setup_logging(
            verbose=settings.verbosity == "verbose", quiet=settings.verbosity == "quiet"
        )
        files: list[Path] = []
        for path in paths:
            files.extend(collect_files(path, settings))
        logger.debug(f"Collected {len(files)} files from {len(paths)} paths")

        report = FileRunner(settings).run(files)
    except PolymetricError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if json_output:
        _output_json(report)
    else:
        _output_rich(report)

    if not report.results and report.diagnostics:
        raise typer.Exit(1)


def _output_json(report: RunReport) -> None:
    output = {
        "files": {path: space.to_dict() for path, space in report.results.items()},
        "diagnostics": [d.to_json() for d in report.diagnostics],
    }
    print(json.dumps(output, indent=2))


def _fmt(value: float) -> str:
    return f"{value:.0f}" if float(value).is_integer() else f"{value:.2f}"


def _space_table(unit: Space) -> Table:
    table = Table(title=unit.name, title_justify="left", show_lines=False)
    table.add_column("Space")
    table.add_column("Kind", style="dim")
    table.add_column("Lines", justify="right")
    table.add_column("CC", justify="right")
    table.add_column("Cognitive", justify="right")
    table.add_column("SLOC", justify="right")
    table.add_column("Args", justify="right")
    table.add_column("MI", justify="right")

    stack = [(unit, 0)]
    while stack:
        space, depth = stack.pop()
        metrics = space.metrics
        label = "  " * depth + (space.name if space is not unit else "<unit>")
        table.add_row(
            label,
            space.kind.value,
            f"{space.start_line}-{space.end_line}",
            _fmt(metrics.cyclomatic.value),
            _fmt(metrics.cognitive.structural),
            _fmt(metrics.loc.sloc),
            _fmt(metrics.nargs.value),
            _fmt(metrics.mi.visual_studio),
        )
        for child in reversed(space.children):
            stack.append((child, depth + 1))
    return table


def _output_rich(report: RunReport) -> None:
    for unit in report.results.values():
        console.print(_space_table(unit))
        console.print()

    if report.diagnostics:
        console.print(f"[yellow]{len(report.diagnostics)} file(s) skipped:[/yellow]")
        for diagnostic in report.diagnostics:
            console.print(f"  [dim]{diagnostic.code.value}[/dim] {diagnostic.path}: {diagnostic.message}")

    console.print(
        f"[bold]{report.analyzed_count}[/bold] file(s) analyzed in {report.elapsed_seconds:.2f}s"
    )
