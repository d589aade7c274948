"""Command-line entry point.

Usage::

    station-extract stations.shp          # ID;TITLE;LAT,LON lines
    station-extract stations.shp -sql     # INSERT INTO stations ... statements

Records go to stdout; log messages go to stderr.
"""

import io
import logging
import sys
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer

from station_extract.core.config import ExtractConfig
from station_extract.core.constants import USAGE_MESSAGE
from station_extract.core.exceptions import PipelineError
from station_extract.pipeline.extract import extract
from station_extract.pipeline.formatter import resolve_format
from station_extract.sources.fiona_source import FionaFeatureSource
from station_extract.transliteration.factory import get_transliterator

logger = logging.getLogger("station_extract.cli")

app = typer.Typer(
    add_completion=False,
    help="Extract station records (delimited or SQL) from a point dataset.",
)


def setup_logging(level: int) -> None:
    """Configure root logging on stderr so records on stdout stay clean."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


def _usage_and_exit() -> NoReturn:
    typer.echo(USAGE_MESSAGE, err=True)
    raise typer.Exit(1)


def _reconfigure_output(encoding: str) -> None:
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(encoding=encoding)


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def main(
    ctx: typer.Context,
    path: Annotated[
        Optional[Path],
        typer.Argument(help="Path to the point dataset (e.g. a .shp file)."),
    ] = None,
    mode: Annotated[
        Optional[str],
        typer.Argument(help="'-sql' (any case) to emit SQL INSERT statements."),
    ] = None,
) -> None:
    """Write one record per feature of PATH to stdout."""
    if path is None:
        _usage_and_exit()

    if not path.exists():
        typer.echo(f"File not found: {path}", err=True)
        _usage_and_exit()

    try:
        config = ExtractConfig().validated()
        setup_logging(config.log_level_number)
        _reconfigure_output(config.output_encoding)

        tokens = [mode, *ctx.args] if mode is not None else list(ctx.args)
        record_format = resolve_format(tokens)

        transliterator = get_transliterator(config.transliteration_variant)
        source = FionaFeatureSource(path, encoding=config.dataset_encoding)
        extract(
            source,
            transliterator,
            sys.stdout,
            record_format=record_format,
            config=config,
        )
    except PipelineError as exc:
        logger.error("Extraction failed: %s", exc.to_error_dict())
        raise typer.Exit(1) from exc
