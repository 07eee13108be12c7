"""Command-line interface for the ULID function.

Runs the ``ulid`` function outside a query host, and decodes identifiers.

Example:
    >>> # From terminal:
    >>> # ulid-udf --version
    >>> # ulid-udf generate
    >>> # ulid-udf generate "1983-04-13 12:09:14.274"
    >>> # ulid-udf generate --null
    >>> # ulid-udf decode 00C69ND6S2XXXXXXXXXXXXXXXX [--format text|json]
"""

import json
from typing import Annotated, Optional

import typer

from ulid_udf import __version__
from ulid_udf.errors import UlidUdfError
from ulid_udf.models.constants import FUNCTION_NAME
from ulid_udf.models.ids import decode
from ulid_udf.observability.logging import configure_logging
from ulid_udf.udf import call

app = typer.Typer(help="ULID function CLI.")


def _version_callback(value: bool) -> None:
    """Print the version and exit when requested."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


VERSION_OPTION = typer.Option(
    False,
    "--version",
    help="Show version and exit.",
    callback=_version_callback,
    is_eager=True,
)


@app.callback()
def cli(
    version: bool = VERSION_OPTION,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """ULID function CLI entrypoint."""
    configure_logging(log_level="DEBUG" if verbose else None, force=verbose)


@app.command("generate")
def generate(
    dates: Annotated[
        Optional[list[str]],
        typer.Argument(help="Date/time to use as the timestamp (default: now)."),
    ] = None,
    null: Annotated[
        bool,
        typer.Option("--null", help="Pass a NULL first argument, as a host would."),
    ] = False,
) -> None:
    """Print a ULID for now, or for the given date."""
    values: list[Optional[str]] = [None] if null else []
    values.extend(dates or [])
    try:
        typer.echo(call(FUNCTION_NAME, *values))
    except UlidUdfError as exc:
        typer.echo(f"Error: {exc.message}", err=True)
        raise typer.Exit(1) from exc


@app.command("decode")
def decode_command(
    value: Annotated[str, typer.Argument(help="ULID to decode (case-insensitive).")],
    output_format: Annotated[
        str,
        typer.Option("--format", "-o", help="Output format: text or json."),
    ] = "text",
) -> None:
    """Show the timestamp and randomness of a ULID."""
    fmt = output_format.strip().lower()
    if fmt not in ("text", "json"):
        typer.echo("Error: --format must be 'text' or 'json'", err=True)
        raise typer.Exit(1)
    try:
        identifier = decode(value.strip())
    except UlidUdfError as exc:
        typer.echo(f"Error: {exc.message}", err=True)
        raise typer.Exit(1) from exc

    timestamp = identifier.datetime.isoformat(timespec="milliseconds")
    if fmt == "json":
        data = {
            "ulid": str(identifier),
            "timestamp": timestamp,
            "milliseconds": identifier.milliseconds,
            "randomness": identifier.bytes[6:].hex(),
        }
        typer.echo(json.dumps(data, indent=2))
        return
    typer.echo(f"ULID:         {identifier}")
    typer.echo(f"Timestamp:    {timestamp}")
    typer.echo(f"Milliseconds: {identifier.milliseconds}")


def main() -> None:
    """Run the ULID function CLI."""
    app()


if __name__ == "__main__":
    main()
