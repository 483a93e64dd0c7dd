"""CLI entry point for semrange.

Invoked as::

    semrange [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m semrange.cli.main

Commands
--------
normalize       Show the canonical comparators a range expands to
check           Test versions against a range
parse           Dump the parsed range tree to JSON or YAML
max-satisfying  Print the highest version matching a range
min-satisfying  Print the lowest version matching a range
version         Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from semrange.config import RangeConfig

if TYPE_CHECKING:
    import semver

    from semrange.ast.nodes import Or

console = Console()
err_console = Console(stderr=True)

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

loose_option = click.option(
    "--loose",
    is_flag=True,
    default=False,
    help="Accept loose version syntax (leading zeros, 1.2.3beta).",
)


def _parse_or_exit(raw: str, config: RangeConfig) -> "Or":
    """Parse a range, printing the error and exiting on failure."""
    from semrange.errors import RangeParseError
    from semrange.parser import parse_range

    try:
        return parse_range(raw, config)
    except RangeParseError as exc:
        err_console.print(f"[red]Range error:[/red] {exc}", highlight=False)
        sys.exit(1)


def _versions_or_exit(texts: tuple[str, ...], config: RangeConfig) -> list["semver.Version"]:
    """Parse candidate versions, printing the error and exiting on failure."""
    from semrange.errors import VersionSyntaxError
    from semrange.version import parse_version

    try:
        return [parse_version(text, loose=config.loose) for text in texts]
    except VersionSyntaxError as exc:
        err_console.print(f"[red]Version error:[/red] {exc}", highlight=False)
        sys.exit(1)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="semrange")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log each parsing stage.")
def cli(verbose: bool) -> None:
    """Version-range parsing and matching for semantic versions."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=_LOG_FORMAT)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from semrange import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]semrange[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# normalize command
# ---------------------------------------------------------------------------


@cli.command(name="normalize")
@click.argument("range_text", metavar="RANGE")
@loose_option
def normalize_command(range_text: str, loose: bool) -> None:
    """Print the canonical comparators RANGE expands to.

    Each ||-separated group is printed as space-separated comparators.
    """
    from semrange.errors import RangeParseError
    from semrange.parser import RangeParser

    parser = RangeParser(RangeConfig(loose=loose))
    try:
        groups = parser.normalize(range_text)
    except RangeParseError as exc:
        err_console.print(f"[red]Range error:[/red] {exc}", highlight=False)
        sys.exit(1)

    console.print(" || ".join(" ".join(tokens) for tokens in groups), markup=False, highlight=False)


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


@cli.command(name="check")
@click.argument("range_text", metavar="RANGE")
@click.argument("versions", nargs=-1, required=True)
@loose_option
def check_command(range_text: str, versions: tuple[str, ...], loose: bool) -> None:
    """Test each VERSION against RANGE.

    Exits with status 1 if any version does not satisfy the range.

    \b
        semrange check "^1.2.3" 1.4.0 2.0.0
    """
    from semrange.evaluator import evaluate

    config = RangeConfig(loose=loose)
    expr = _parse_or_exit(range_text, config)
    candidates = _versions_or_exit(versions, config)

    table = Table(title=f"Range: {range_text}", show_lines=False)
    table.add_column("Version", min_width=10)
    table.add_column("Result", style="bold")

    failures = 0
    for text, candidate in zip(versions, candidates):
        if evaluate(expr, candidate):
            table.add_row(text, "[green]match[/green]")
        else:
            failures += 1
            table.add_row(text, "[red]no match[/red]")

    console.print(table)
    console.print(
        f"\n[bold]Summary:[/bold] {len(versions) - failures} match(es), {failures} miss(es)"
    )

    if failures:
        sys.exit(1)


# ---------------------------------------------------------------------------
# parse command
# ---------------------------------------------------------------------------


@cli.command(name="parse")
@click.argument("range_text", metavar="RANGE")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    help="Tree output format",
)
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
@loose_option
def parse_command(range_text: str, output_format: str, output: str | None, loose: bool) -> None:
    """Parse RANGE and dump its expression tree."""
    from semrange.ast import RangeSerializer

    expr = _parse_or_exit(range_text, RangeConfig(loose=loose))
    serializer = RangeSerializer()

    if output_format.lower() == "json":
        text = serializer.to_json(expr, indent=2)
        lang = "json"
    else:
        text = serializer.to_yaml(expr)
        lang = "yaml"

    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]Tree written to[/green] {output}")
    else:
        syntax = Syntax(text, lang, line_numbers=True)
        console.print(syntax)


# ---------------------------------------------------------------------------
# max-satisfying / min-satisfying commands
# ---------------------------------------------------------------------------


def _select(range_text: str, versions: tuple[str, ...], loose: bool, highest: bool) -> None:
    from semrange.evaluator import max_satisfying, min_satisfying

    config = RangeConfig(loose=loose)
    expr = _parse_or_exit(range_text, config)
    candidates = _versions_or_exit(versions, config)

    pick = max_satisfying if highest else min_satisfying
    selected = pick(candidates, expr)
    if selected is None:
        err_console.print(f"[yellow]No version satisfies[/yellow] {range_text}", highlight=False)
        sys.exit(1)
    console.print(str(selected), markup=False, highlight=False)


@cli.command(name="max-satisfying")
@click.argument("range_text", metavar="RANGE")
@click.argument("versions", nargs=-1, required=True)
@loose_option
def max_satisfying_command(range_text: str, versions: tuple[str, ...], loose: bool) -> None:
    """Print the highest VERSION that satisfies RANGE."""
    _select(range_text, versions, loose, highest=True)


@cli.command(name="min-satisfying")
@click.argument("range_text", metavar="RANGE")
@click.argument("versions", nargs=-1, required=True)
@loose_option
def min_satisfying_command(range_text: str, versions: tuple[str, ...], loose: bool) -> None:
    """Print the lowest VERSION that satisfies RANGE."""
    _select(range_text, versions, loose, highest=False)


if __name__ == "__main__":
    cli()
