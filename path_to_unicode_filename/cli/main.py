#!/usr/bin/env python3
"""
Command-line interface for path-to-unicode-filename.

Provides commands to encode paths as filenames and decode them back.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Literal, TypeGuard

import typer

from path_to_unicode_filename.cli.logger import CLILogger
from path_to_unicode_filename.codec import to_filename, to_path
from path_to_unicode_filename.config.cli import settings
from path_to_unicode_filename.exceptions import UnicodeFilenameError
from path_to_unicode_filename.schemas import ConversionResult

app = typer.Typer(
    name='path-to-unicode-filename',
    help='Convert file paths to reversible unicode filenames and back',
    add_completion=False,
)

# Type aliases and validators
OutputFormat = Literal['text', 'json']
Direction = Literal['encode', 'decode']


def _is_output_format(value: str) -> TypeGuard[OutputFormat]:
    """Type guard for valid output formats."""
    return value in ('text', 'json')


def _validate_output_format(value: str | None) -> str | None:
    """Validate output format for typer callback."""
    if value is None:
        return None
    if _is_output_format(value):
        return value
    raise typer.BadParameter("Must be 'text' or 'json'")


def _resolve_output_format(value: str | None) -> OutputFormat:
    """Explicit --format wins over UNICODE_FILENAME_OUTPUT_FORMAT."""
    resolved = value if value is not None else settings.OUTPUT_FORMAT
    if not _is_output_format(resolved):
        raise typer.BadParameter("Must be 'text' or 'json'", param_hint='--format')
    return resolved


@app.command()
def encode(
    paths: list[str] = typer.Argument(..., help='Paths to encode'),
    format: str | None = typer.Option(
        None, '--format', '-f', help='Output format: text or json', callback=_validate_output_format
    ),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """Encode each path as a filename, one line per path.

    Examples:
        path-to-unicode-filename encode /home/alice/Documents/report.txt
        path-to-unicode-filename encode 'C:\\Users\\alice\\Music\\song.mp3' --format json
    """
    _convert('encode', to_filename, paths, _resolve_output_format(format), verbose or settings.VERBOSE)


@app.command()
def decode(
    filenames: list[str] = typer.Argument(..., help='Encoded filenames to decode'),
    format: str | None = typer.Option(
        None, '--format', '-f', help='Output format: text or json', callback=_validate_output_format
    ),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """Decode each filename back into the path it encodes, one line per filename.

    Examples:
        path-to-unicode-filename decode '🐧📄alice／report.txt'
    """
    _convert('decode', to_path, filenames, _resolve_output_format(format), verbose or settings.VERBOSE)


def _convert(
    direction: Direction,
    convert: Callable[[str], str],
    values: Sequence[str],
    format: OutputFormat,
    verbose: bool,
) -> None:
    """Convert each value in order; stop with exit code 1 at the first failure."""
    logger = CLILogger(verbose=verbose)
    for value in values:
        try:
            result = convert(value)
        except UnicodeFilenameError as e:
            typer.secho(f'Error: {e}', fg=typer.colors.RED, err=True)
            raise typer.Exit(1)

        logger.info(f'{direction}: {value!r} -> {result!r}')
        if format == 'json':
            typer.echo(ConversionResult(direction=direction, source=value, result=result).model_dump_json())
        else:
            typer.echo(result)


def main() -> None:
    """Entry point for CLI."""
    app()


if __name__ == '__main__':
    main()
