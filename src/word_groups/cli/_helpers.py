"""Shared helpers for CLI commands."""

from __future__ import annotations

import json
import logging
from typing import Any

import typer

LOG_FORMAT = "[%(levelname)s] %(name)s - %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Send library logs to stderr; DEBUG when verbose, else WARNING."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(format=LOG_FORMAT, level=level, force=True)


def output_result(data: dict[str, Any], as_json: bool = False) -> None:
    """Output a result dictionary in the appropriate format."""
    if as_json:
        typer.echo(json.dumps(data, indent=2, default=str))
        return

    if "error" in data:
        typer.secho(f"Error: {data['error']}", fg=typer.colors.RED, err=True)
    elif "lines" in data:
        for line in data["lines"]:
            typer.echo(line)
    else:
        typer.echo(str(data))


def output_report(report: dict[str, int]) -> None:
    """Print run statistics to stderr, one ``key: value`` per line."""
    for key, value in report.items():
        typer.secho(f"  {key}: {value}", fg=typer.colors.BRIGHT_BLACK, err=True)
