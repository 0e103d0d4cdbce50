"""Terminal emitter for the generate command."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import typer

from glyphgen.diagnostics import format_event_message

from .state import CLIState, report


class CliEmitter:
    """Print status lines on stdout, warnings and errors on stderr.

    Every event is also recorded on ``state`` for the ``-v`` summary tables.
    """

    def __init__(self, state: CLIState) -> None:
        self.state = state

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        report(self.state, "warning", message, exc)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        report(self.state, "error", message, exc)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        self.state.record_event(name, payload)
        message = format_event_message(name, payload)
        if message is not None:
            typer.echo(message)


__all__ = ["CliEmitter"]
