"""word-groups CLI main entry point."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated, Optional

import typer

from word_groups.cli._helpers import configure_logging, output_report, output_result
from word_groups.engine.pipeline import GroupingResult, group_tokens
from word_groups.extraction.tokens import InputFormatError, iter_tokens

app = typer.Typer(
    name="wordgroups",
    help="Group near-variant word forms and count how often they occur close together",
    no_args_is_help=True,
)


def _run(input_file: Path | None) -> GroupingResult:
    if input_file is None:
        return group_tokens(iter_tokens(sys.stdin))
    with input_file.open(encoding="utf-8", errors="replace") as handle:
        return group_tokens(iter_tokens(handle))


@app.command()
def group(
    input_file: Annotated[
        Optional[Path],
        typer.Argument(
            help="File holding the window K followed by words (default: stdin)",
            exists=True,
            dir_okay=False,
            readable=True,
        ),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    members: Annotated[
        bool, typer.Option("--members", "-m", help="List the member forms of each cluster")
    ] = False,
    stats: Annotated[
        bool, typer.Option("--stats", "-s", help="Print run statistics to stderr")
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Group similar words and report their proximity counts.

    The first token is the window K; every following token is a word.
    Prints one ``<representative>: <count>`` line per cluster whose
    occurrences fall within K positions of each other.

    Examples:
        echo "2 cat cats dog cat" | wordgroups group
        wordgroups group corpus.txt --members
        wordgroups group corpus.txt --json
    """
    configure_logging(verbose)

    try:
        result = _run(input_file)
    except InputFormatError as e:
        output_result({"error": str(e)})
        raise typer.Exit(1) from None
    except OSError as e:
        output_result({"error": f"cannot read input: {e}"})
        raise typer.Exit(1) from None

    if json_output:
        output_result(result.to_dict(), as_json=True)
    elif members:
        for cluster, line in zip(result.clusters, result.lines()):
            typer.echo(line)
            typer.secho(f"    {', '.join(cluster.members)}", fg=typer.colors.BRIGHT_BLACK)
    else:
        output_result({"lines": result.lines()})

    if stats:
        typer.secho(f"Window: {result.window}", bold=True, err=True)
        output_report(result.report.to_dict())


@app.command()
def version() -> None:
    """Show version information."""
    from word_groups import __version__

    typer.echo(f"word-groups v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
