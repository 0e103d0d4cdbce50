"""Implementation of the ``glyphgen`` command."""

from __future__ import annotations

import logging

import click
from rich.logging import RichHandler
import typer

from glyphgen.exceptions import DeclinedConfirmationError, GlyphGenError
from glyphgen.glyphs.aliases import format_alias_file
from glyphgen.glyphs.assembler import assemble
from glyphgen.pipeline import generate as run_generation
from glyphgen.settings import GeneratorSettings, load_settings
from glyphgen.writer import OutputPlan

from .._options import (
    CheckOption,
    DebugOption,
    OutputDirOption,
    PrintAliasesOption,
    SettingsFileOption,
    VerboseOption,
    VersionOption,
    WithIconsOption,
)
from ..diagnostics import CliEmitter
from ..presenter import present_aliases, present_written_files
from ..state import CLIState, report, start_run


CONFIRM_PROMPT = "Do you want to proceed? [y/N]"


def _attach_log_handler(state: CLIState) -> RichHandler | None:
    """Show package log records on stderr from ``-v`` on."""
    package_logger = logging.getLogger("glyphgen")
    if state.verbosity <= 0:
        return None
    handler = RichHandler(console=state.err_console, show_path=False)
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if state.verbosity >= 2 else logging.INFO)
    return handler


def _detach_log_handler(handler: RichHandler | None) -> None:
    if handler is None:
        return
    package_logger = logging.getLogger("glyphgen")
    package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


def ask_confirmation(plan: OutputPlan) -> str:
    """Read the overwrite answer from the terminal."""
    _ = plan
    try:
        return typer.prompt(CONFIRM_PROMPT, default="", show_default=False)
    except click.Abort:
        # End of input counts as a refusal.
        typer.echo(err=True)
        return ""


def generate(
    settings_file: SettingsFileOption = None,
    output_dir: OutputDirOption = None,
    with_icons: WithIconsOption = None,
    print_aliases: PrintAliasesOption = False,
    check: CheckOption = False,
    verbose: VerboseOption = 0,
    debug: DebugOption = False,
    version: VersionOption = False,
) -> None:
    """Write config.json plus the Latin index, icon index and Latin alias files."""
    _ = version
    state = start_run(verbosity=verbose, debug=debug)
    handler = _attach_log_handler(state)

    try:
        settings = load_settings(settings_file) if settings_file else GeneratorSettings()
        settings = settings.with_overrides(
            {"output_dir": output_dir, "include_icons": with_icons}
        )

        if print_aliases:
            documents = assemble(settings)
            typer.echo(format_alias_file(documents.latin_aliases), nl=False)
            raise typer.Exit()

        result = run_generation(
            settings,
            ask_confirmation,
            check=check,
            emitter=CliEmitter(state),
        )
    except DeclinedConfirmationError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    except GlyphGenError as exc:
        report(state, "error", str(exc), exc)
        raise typer.Exit(code=1) from exc
    finally:
        _detach_log_handler(handler)

    if state.verbosity >= 1:
        present_aliases(state, result.documents.latin_aliases)
        present_written_files(state, settings)


__all__ = ["CONFIRM_PROMPT", "ask_confirmation", "generate"]
