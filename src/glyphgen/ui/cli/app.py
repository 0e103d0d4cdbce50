"""Typer application wiring for the glyphgen CLI."""

from __future__ import annotations

from rich.traceback import Traceback
import typer

from glyphgen.ui.cli.commands.generate import generate

from .state import emit_error, get_cli_state


app = typer.Typer(
    help="Generate glyph set config, index and alias files for the font codegen.",
    context_settings={"help_option_names": ["--help"]},
    add_completion=False,
    pretty_exceptions_enable=False,
)


app.command()(generate)


def main() -> None:
    """Console script entry point."""
    try:
        app()
    except KeyboardInterrupt as exc:
        if get_cli_state().show_tracebacks:
            raise
        emit_error("Operation cancelled by user.")
        raise SystemExit(1) from exc
    except Exception as exc:  # pragma: no cover - unexpected failures only
        state = get_cli_state()
        if state.show_tracebacks:
            state.err_console.print(
                Traceback.from_exception(
                    type(exc), exc, exc.__traceback__, show_locals=state.verbosity >= 2
                )
            )
        else:
            emit_error(str(exc), exception=exc)
        raise SystemExit(1) from exc


__all__ = ["app", "main"]
