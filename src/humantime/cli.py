"""Command-line interface for humantime.

Commands:
    humantime ago: Format a timestamp relative to now
    humantime duration: Convert a duration string to seconds
    humantime units: List time units and their durations
"""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from humantime.core import format_relative_time
from humantime.exceptions import HumanTimeError
from humantime.units import DEFAULT_SHORT_LABELS, get_units, parse_duration

app = typer.Typer(
    name="humantime",
    help="Human-readable relative time phrases",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


def _parse_value(value: str) -> int | str:
    """Digits-only values are epoch milliseconds, anything else is ISO 8601."""
    stripped = value.strip()
    if stripped.lstrip("-").isdigit():
        return int(stripped)
    return stripped


@app.command(name="ago")
def ago_cmd(
    value: Annotated[str, typer.Argument(help="Epoch milliseconds or ISO 8601 date/time")],
    now: Annotated[
        Optional[str],
        typer.Option("--now", help="Reference time (epoch milliseconds or ISO 8601)"),
    ] = None,
    locale: Annotated[
        list[str],
        typer.Option("--locale", "-l", help="Locale tag; repeat for a priority list"),
    ] = ["en"],
    short: Annotated[
        bool,
        typer.Option("--short", "-s", help="Compact output (5m ago)"),
    ] = False,
    style: Annotated[
        str,
        typer.Option("--style", help="Phrase length (long, short, narrow, auto)"),
    ] = "long",
    numeric: Annotated[
        str,
        typer.Option("--numeric", help="Numeric wording (always, auto)"),
    ] = "auto",
    rounding: Annotated[
        str,
        typer.Option("--rounding", "-r", help="Rounding (floor, round, ceil, auto)"),
    ] = "round",
    max_unit: Annotated[
        str,
        typer.Option("--max-unit", help="Largest unit to use"),
    ] = "year",
    min_unit: Annotated[
        str,
        typer.Option("--min-unit", help="Smallest unit to use"),
    ] = "second",
    threshold: Annotated[
        float,
        typer.Option("--threshold", help="Seconds rendered as 'just now'"),
    ] = 5,
    absolute_after: Annotated[
        Optional[float],
        typer.Option("--absolute-after", help="Seconds after which a calendar date is shown"),
    ] = None,
    no_absolute: Annotated[
        bool,
        typer.Option("--no-absolute", help="Never fall back to a calendar date"),
    ] = False,
    time_zone: Annotated[
        Optional[str],
        typer.Option("--tz", help="IANA time zone for calendar dates"),
    ] = None,
    template: Annotated[
        Optional[str],
        typer.Option("--template", "-t", help="Output template, e.g. '{abs} {unit}s ({direction})'"),
    ] = None,
) -> None:
    """Format a timestamp relative to now."""
    config = {
        "now": _parse_value(now) if now is not None else None,
        "locale": locale,
        "short": short,
        "style": style,
        "numeric": numeric,
        "rounding": rounding,
        "max_unit": max_unit,
        "min_unit": min_unit,
        "just_now_threshold": threshold,
        "absolute_after": False if no_absolute else absolute_after,
        "time_zone": time_zone,
        "template": template,
    }

    try:
        result = format_relative_time(_parse_value(value), config)
    except HumanTimeError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(result)


@app.command(name="duration")
def duration_cmd(
    text: Annotated[str, typer.Argument(help="Duration such as '5 minutes', '3d' or '2w'")],
) -> None:
    """Convert a duration string to seconds."""
    seconds = parse_duration(text)
    if seconds is None:
        typer.echo(f"Error: Invalid duration: {text!r}", err=True)
        raise typer.Exit(1)
    typer.echo(str(seconds))


@app.command(name="units")
def units_cmd() -> None:
    """List time units and their durations."""
    table = Table(title="Time Units")
    table.add_column("Unit", style="cyan")
    table.add_column("Seconds", justify="right")
    table.add_column("Label", style="green")

    for unit in get_units():
        table.add_row(unit.value, f"{unit.seconds:,}", DEFAULT_SHORT_LABELS[unit])

    console.print(table)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
