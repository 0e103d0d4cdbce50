"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from glyphgen.version import get_version


OUTPUT_PANEL = "Output"
DIAGNOSTICS_PANEL = "Diagnostics"


def _print_version(value: bool) -> None:
    if value:
        typer.echo(get_version())
        raise typer.Exit()


SettingsFileOption = Annotated[
    Path | None,
    typer.Option(
        "--settings",
        metavar="FILE",
        help="YAML file with generator settings. Command-line options take precedence.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
]

OutputDirOption = Annotated[
    Path | None,
    typer.Option(
        "--output-dir",
        "-o",
        help="Directory the output paths are resolved against (default: current directory).",
        file_okay=False,
        dir_okay=True,
        rich_help_panel=OUTPUT_PANEL,
    ),
]

WithIconsOption = Annotated[
    bool | None,
    typer.Option(
        "--with-icons/--without-icons",
        help="List the Icons glyph set in the generated config.",
        show_default=False,
        rich_help_panel=OUTPUT_PANEL,
    ),
]

PrintAliasesOption = Annotated[
    bool,
    typer.Option(
        "--print-aliases",
        help="Print the Latin alias file to stdout and exit without writing anything.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

CheckOption = Annotated[
    bool,
    typer.Option(
        "--check",
        help="Verify that every glyph set's index and alias files exist and fit its grid.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks when an unexpected error occurs.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

VersionOption = Annotated[
    bool,
    typer.Option(
        "--version",
        help="Show the glyphgen version and exit.",
        callback=_print_version,
        is_eager=True,
    ),
]


__all__ = [
    "CheckOption",
    "DIAGNOSTICS_PANEL",
    "DebugOption",
    "OUTPUT_PANEL",
    "OutputDirOption",
    "PrintAliasesOption",
    "SettingsFileOption",
    "VerboseOption",
    "VersionOption",
    "WithIconsOption",
]
