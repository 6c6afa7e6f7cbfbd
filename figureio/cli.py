"""Command line interface for converting figure files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from figureio.dto.result import LoadResult, Outcome, SaveResult
from figureio.io.settings import FigureSettings
from figureio.ops.converter import Converter

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

SAVE_FAILED_EXIT_CODE = 1
NO_INPUT_EXIT_CODE = 2

app = typer.Typer(add_completion=False, help="Convert figure lists between TXT, JSON and XML.")


def _configure_logging(level_name: str) -> None:
    resolved = getattr(logging, level_name.upper(), None)
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(level=resolved, format=LOG_FORMAT, force=True)


def describe_load(result: LoadResult) -> str:
    if result.outcome == Outcome.SUCCESS:
        return f"{result.path}: loaded {result.count} figure(s)"
    if result.outcome == Outcome.PARSE_ERROR and result.count:
        return f"{result.path}: parse error, kept {result.count} figure(s): {result.message}"
    return f"{result.path}: {result.outcome.value.replace('_', ' ')}: {result.message}"


def describe_save(result: SaveResult) -> str:
    if result.ok:
        return f"{result.path}: saved {result.count} figure(s)"
    return f"{result.path}: {result.outcome.value.replace('_', ' ')}: {result.message}"


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Root logging level (defaults to FIGUREIO_LOG_LEVEL).",
    ),
) -> None:
    _configure_logging(log_level or FigureSettings().FIGUREIO_LOG_LEVEL)


@app.command("convert")
def convert_command(
    sources: List[Path] = typer.Argument(..., help="Files to load, in order."),
    output: Path = typer.Option(..., "--output", "-o", help="File to save all loaded figures to."),
) -> None:
    """Load one or more figure files and save everything to OUTPUT."""
    converter = Converter()
    results = [converter.load(source) for source in sources]
    for result in results:
        typer.echo(describe_load(result))

    if not any(result.ok for result in results):
        typer.echo("No input could be loaded.", err=True)
        raise typer.Exit(code=NO_INPUT_EXIT_CODE)

    saved = converter.save(output)
    typer.echo(describe_save(saved))
    if not saved.ok:
        raise typer.Exit(code=SAVE_FAILED_EXIT_CODE)


@app.command("show")
def show_command(
    sources: List[Path] = typer.Argument(..., help="Files to load, in order."),
) -> None:
    """Print the figures held in one or more files."""
    converter = Converter()
    for source in sources:
        result = converter.load(source)
        if result.outcome != Outcome.SUCCESS:
            typer.echo(describe_load(result), err=True)

    for figure in converter.figures:
        typer.echo(f"{figure.name}\t{figure.width:g}\t{figure.height:g}")


if __name__ == "__main__":  # pragma: no cover
    app()
