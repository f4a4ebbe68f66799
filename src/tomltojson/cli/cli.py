#!/usr/bin/env python3
"""
tomltojson.cli.cli

Typer-based CLI for converting TOML files, or folders of TOML files, to JSON.

Examples
--------
Convert one file next to itself:

    tomltojson config.toml

Convert a folder tree two levels deep into another folder, pretty-printed,
only for files changed in the last week:

    tomltojson settings/ build/settings/ --pretty --recursion 2 --modified 7d
"""

from __future__ import annotations

import logging
import traceback
from pathlib import Path

import typer

from tomltojson import __version__
from tomltojson.application.results import ConversionReport
from tomltojson.errors import InvalidDurationFormatError, TomlToJsonError
from tomltojson.types import MAX_RECURSION_DEPTH

app = typer.Typer(
    name="tomltojson",
    help="Converts TOML file(s) to JSON.",
    no_args_is_help=True,
    add_completion=False,
)


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly conversion error.

    Parameters
    ----------
    exc : Exception
        Exception raised during conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.secho(f"✗ {type(exc).__name__}: {exc}", fg=typer.colors.RED, err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _plural(count: int) -> str:
    return "file" if count == 1 else "files"


def _print_report(report: ConversionReport) -> None:
    """Render the converted/failed summary of a run."""
    typer.secho(
        f"✓ {report.converted} {_plural(report.converted)} converted",
        fg=typer.colors.GREEN,
    )
    if report.skipped:
        typer.echo(f"  {report.skipped} {_plural(report.skipped)} skipped (not modified recently)")
    failures = report.failures
    if failures:
        typer.secho(
            f"✗ {len(failures)} {_plural(len(failures))} failed",
            fg=typer.colors.RED,
            err=True,
        )
        for outcome in failures:
            typer.echo(f"  {outcome.source_path}: {outcome.reason}", err=True)


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tomltojson {__version__}")
        raise typer.Exit()


@app.command()
def convert(
    source: Path = typer.Argument(
        ...,
        exists=True,
        metavar="SOURCE",
        help="input file or folder",
    ),
    target: str | None = typer.Argument(
        None,
        metavar="TARGET",
        help="output file or folder",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        "-p",
        envvar="TOMLTOJSON_PRETTY",
        help="formats JSON output in human-readable 'pretty' format",
    ),
    modified: str | None = typer.Option(
        None,
        "--modified",
        "-m",
        metavar="SINCE",
        envvar="TOMLTOJSON_MODIFIED",
        help="converts only files modified since <SINCE> ago, e.g. `10d`",
    ),
    recursion: int | None = typer.Option(
        None,
        "--recursion",
        "-r",
        metavar="DEPTH",
        min=1,
        max=MAX_RECURSION_DEPTH,
        help="recursion depth when converting a folder of files (default 0)",
    ),
    debug: bool = typer.Option(False, "--debug", help="Show debug logs and full tracebacks on error."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Converts TOML file(s) to JSON.

    SOURCE is a .toml file or a folder of .toml files; TARGET is the output
    file or folder.

    Parameters
    ----------
    source : Path
        Existing ``.toml`` file or folder.
    target : str | None, default=None
        Output file or folder; defaults to writing beside the source.
    pretty : bool, default=False
        Indent JSON output.
    modified : str | None, default=None
        Only convert files modified within this duration (``30d``, ``12h``...).
    recursion : int | None, default=None
        Subfolder depth for folder conversion (1-255).

    Notes
    -----
    - Output key order follows the TOML document.
    - Mirrored target subfolders are created as needed.
    """
    del version
    _configure_logging(debug)

    from tomltojson.application.use_cases import (
        build_conversion_options,
        build_conversion_request,
        run_conversion,
    )

    try:
        options = build_conversion_options(
            pretty=pretty,
            modified=modified,
            recursion=recursion or 0,
        )
    except InvalidDurationFormatError as exc:
        raise typer.BadParameter(str(exc), param_hint="'--modified' / '-m'") from exc

    try:
        request = build_conversion_request(
            source_path=source,
            target_path=target,
            options=options,
        )
        report = run_conversion(request)
    except TomlToJsonError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_conversion_error(exc, debug))

    _print_report(report)
    if not report.ok:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
