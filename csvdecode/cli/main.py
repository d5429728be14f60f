"""
Main CLI application.

Entry point for csvdecode command.
"""

from __future__ import annotations

import logging
from pathlib import Path  # noqa: TC003
from typing import Annotated

import typer
from pydantic import ValidationError

import csvdecode
from csvdecode.cli.context import CliContext, ExitCode, get_exit_code, resolve_max_bytes
from csvdecode.core.decoder import CsvErrors
from csvdecode.core.result import Err, Ok

# Create main app
app = typer.Typer(
    name="csvdecode",
    help="CSV parser and typed record decoder",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"csvdecode {csvdecode.__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """CSV parser and typed record decoder."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _build_context(
    format: str,
    color: bool,
    separator: str | None,
    max_bytes: int | None,
    strict_width: bool = False,
) -> CliContext:
    try:
        resolved_max_bytes = resolve_max_bytes(max_bytes)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from None

    try:
        return CliContext(
            format=format,
            color=color,
            separator=separator,
            max_bytes=resolved_max_bytes,
            strict_width=strict_width,
        )
    except ValidationError as e:
        for error in e.errors():
            option = ".".join(str(part) for part in error["loc"])
            typer.echo(f"Invalid --{option}: {error['msg']}", err=True)
        raise typer.Exit(ExitCode.USAGE) from None


# =============================================================================
# Parse Command
# =============================================================================


@app.command("parse")
def parse_command(
    file: Annotated[Path, typer.Argument(help="CSV file to parse", exists=True)],
    separator: Annotated[
        str,
        typer.Option("--separator", "-s", help="Field separator (one character, or 'tab')"),
    ] = ",",
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: terminal, json"),
    ] = "terminal",
    color: Annotated[
        bool,
        typer.Option("--color/--no-color", help="Enable/disable colored output"),
    ] = True,
    max_bytes: Annotated[
        int | None,
        typer.Option(
            "--max-bytes",
            help="Maximum input size in bytes (0 = unlimited). Defaults to CSVDECODE_MAX_BYTES or 100MiB.",
        ),
    ] = None,
) -> None:
    """Parse a CSV file and print its rows."""
    from csvdecode.core.parser import parse_file

    ctx = _build_context(format, color, separator, max_bytes)
    adapter = ctx.output_adapter()

    result = parse_file(file, separator=ctx.separator_or(), max_bytes=ctx.max_bytes)

    match result:
        case Ok(value=document):
            typer.echo(adapter.render_document(document))
            raise typer.Exit(ExitCode.SUCCESS)
        case Err(error=errors):
            typer.echo(adapter.render_errors(CsvErrors(errors=errors)))
            raise typer.Exit(ExitCode.FATAL)


# =============================================================================
# Decode Command
# =============================================================================


@app.command("decode")
def decode_command(
    file: Annotated[Path, typer.Argument(help="CSV file to decode", exists=True)],
    schema_file: Annotated[
        Path,
        typer.Option("--schema", help="YAML schema describing the columns"),
    ],
    separator: Annotated[
        str | None,
        typer.Option("--separator", "-s", help="Field separator; overrides the schema"),
    ] = None,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: terminal, json"),
    ] = "terminal",
    strict_width: Annotated[
        bool,
        typer.Option("--strict-width", help="Fail records whose width differs from the header"),
    ] = False,
    color: Annotated[
        bool,
        typer.Option("--color/--no-color", help="Enable/disable colored output"),
    ] = True,
    max_bytes: Annotated[
        int | None,
        typer.Option(
            "--max-bytes",
            help="Maximum input size in bytes (0 = unlimited). Defaults to CSVDECODE_MAX_BYTES or 100MiB.",
        ),
    ] = None,
) -> None:
    """Decode a CSV file into typed records using a schema."""
    from csvdecode.core.decoder import decode
    from csvdecode.core.errors import SchemaError
    from csvdecode.core.parser import parse_file
    from csvdecode.core.schema import load_schema

    ctx = _build_context(format, color, separator, max_bytes, strict_width)
    adapter = ctx.output_adapter()

    try:
        schema = load_schema(schema_file)
    except SchemaError as e:
        typer.echo(f"Schema error: {e}", err=True)
        raise typer.Exit(ExitCode.CONFIG) from None

    parsed = parse_file(
        file,
        separator=ctx.separator_or(schema.separator),
        max_bytes=ctx.max_bytes,
    )
    result = decode(schema.to_decoder(), parsed, strict_width=ctx.strict_width)

    match result:
        case Ok(value=records):
            typer.echo(adapter.render_records(records))
        case Err(error=errors):
            typer.echo(adapter.render_errors(errors))

    raise typer.Exit(get_exit_code(result))
