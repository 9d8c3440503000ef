"""Command-line interface for bengalidate.

Provides CLI commands for converting, validating and filtering dates
written with Bengali numerals.
"""

import importlib.metadata
import sys
from pathlib import Path
from typing import NoReturn

import click

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("bengalidate")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.3.0"  # Fallback for development


def _fail(message: str) -> NoReturn:
    click.secho(message, fg="red", err=True)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="bengalidate")
def cli() -> None:
    """Convert and validate DD/MM/YYYY dates written with Bengali numerals.

    Use 'bengalidate COMMAND --help' for command-specific help.
    """


@cli.command("to-bengali")
@click.argument("text")
def to_bengali(text: str) -> None:
    """Replace ASCII digits in TEXT with Bengali digits."""
    from bengalidate import to_localized_numerals

    click.echo(to_localized_numerals(text))


@cli.command("to-ascii")
@click.argument("text")
def to_ascii(text: str) -> None:
    """Replace Bengali digits in TEXT with ASCII digits."""
    from bengalidate import to_ascii_numerals

    click.echo(to_ascii_numerals(text))


@cli.command()
@click.argument("text")
def validate(text: str) -> None:
    """Check that TEXT is a real date in Bengali DD/MM/YYYY form.

    Exits with status 1 and the failure kind when it is not.

    Examples
    --------
        bengalidate validate ০৭/০৭/২০২৫
    """
    from bengalidate import check_bengali_date

    result = check_bengali_date(text)
    if not result.valid:
        _fail(f"✗ invalid ({result.error})")

    click.secho(f"✓ valid ({result.parts.to_iso()})", fg="green")


@cli.command("to-iso")
@click.argument("text")
def to_iso(text: str) -> None:
    """Convert a DD/MM/YYYY date in either numeral system to YYYY-MM-DD.

    Only component ranges are checked; use 'parse' to also reject days
    that do not exist.
    """
    from bengalidate import bengali_date_to_iso

    iso = bengali_date_to_iso(text)
    if not iso:
        _fail(f"Error: cannot convert {text!r}")

    click.echo(iso)


@cli.command()
@click.argument("text")
def parse(text: str) -> None:
    """Parse loosely formatted date TEXT into YYYY-MM-DD.

    Accepts '/' or '-' separators, eight bare digits (DDMMYYYY) and
    two-digit years, in either numeral system.

    Examples
    --------
        bengalidate parse ৭/৭/২৫
        bengalidate parse 07-07-2025
    """
    from bengalidate import parse_flexible_date

    iso = parse_flexible_date(text)
    if iso is None:
        _fail(f"Error: cannot parse {text!r}")

    click.echo(iso)


@cli.command("format")
@click.argument("value")
def format_(value: str) -> None:
    """Format a date VALUE (ISO, D/M/Y, free text) as Bengali DD/MM/YYYY."""
    from bengalidate import format_localized_date

    localized = format_localized_date(value)
    if not localized:
        _fail(f"Error: cannot format {value!r}")

    click.echo(localized)


@cli.command()
def today() -> None:
    """Print today's date as Bengali DD/MM/YYYY."""
    from bengalidate import get_current_localized_date

    click.echo(get_current_localized_date())


@cli.command()
@click.argument("first")
@click.argument("second")
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with status 1 when either date cannot be converted",
)
def compare(first: str, second: str, strict: bool) -> None:
    """Compare two localized dates, printing -1, 0 or 1."""
    from bengalidate import DateOrder, order_localized_dates

    order = order_localized_dates(first, second)
    if strict and order is DateOrder.INCOMPARABLE:
        _fail("Error: dates are not comparable")

    click.echo(str(order.as_int()))


@cli.command("filter")
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--field", "-f", required=True, help="Name of the date field on each record")
@click.option("--start", "-s", default="", help="Inclusive lower bound, Bengali DD/MM/YYYY")
@click.option("--end", "-e", default="", help="Inclusive upper bound, Bengali DD/MM/YYYY")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output JSONL file path for kept records",
)
@click.option(
    "--audit-log",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write JSONL audit events to this file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def filter_(
    input_path: str,
    field: str,
    start: str,
    end: str,
    output: str | None,
    audit_log: str | None,
    verbose: bool,
) -> None:
    """Keep records from a JSONL file whose date FIELD is within a range.

    Records without the field are always kept. Records whose date cannot
    be read are kept too and reported in the audit log.

    Examples
    --------
        bengalidate filter records.jsonl -f date -s ০১/০১/২০২৫ -o kept.jsonl
        bengalidate filter records.jsonl -f date -e ৩১/১২/২০২৫ --audit-log events.jsonl
    """
    from bengalidate import FilterConfig, filter_jsonl

    if verbose:
        click.echo(f"Filtering: {input_path}", err=True)
        click.echo(f"  Field: {field}", err=True)
        click.echo(f"  Start: {start or '(none)'}", err=True)
        click.echo(f"  End: {end or '(none)'}", err=True)

    try:
        config = FilterConfig(
            field=field,
            start=start,
            end=end,
            output=Path(output) if output else None,
            audit_log=Path(audit_log) if audit_log else None,
        )

        result = filter_jsonl(input_path, config)

        if verbose:
            click.echo(f"Read {result.records_in} records", err=True)
            click.echo(f"Flagged {result.records_flagged} unreadable dates", err=True)

        target = f" to {result.output}" if result.output else ""
        click.secho(
            f"✓ Kept {result.records_kept} of {result.records_in} records{target}",
            fg="green",
        )

    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        if verbose:
            import traceback

            click.echo(traceback.format_exc(), err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
