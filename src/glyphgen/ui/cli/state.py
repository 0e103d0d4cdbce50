"""Per-run CLI state: verbosity, consoles and recorded pipeline events."""

from __future__ import annotations

from collections.abc import Mapping
from contextvars import ContextVar
from dataclasses import dataclass, field
import sys
from typing import Any

from rich.console import Console
from rich.text import Text


LEVEL_STYLES = {"warning": "yellow", "error": "red"}


@dataclass(slots=True)
class CLIState:
    """Options of the running command plus the events it has seen so far."""

    verbosity: int = 0
    show_tracebacks: bool = False
    events: dict[str, list[dict[str, Any]]] = field(default_factory=dict)

    # Consoles follow sys.stdout and sys.stderr, which test runners swap.
    @property
    def console(self) -> Console:
        return Console(file=sys.stdout)

    @property
    def err_console(self) -> Console:
        return Console(file=sys.stderr, highlight=False)

    def record_event(self, name: str, payload: Mapping[str, Any]) -> None:
        self.events.setdefault(name, []).append(dict(payload))

    def consume_events(self, name: str) -> list[dict[str, Any]]:
        """Return the events recorded under ``name`` and forget them."""
        return self.events.pop(name, [])


_CURRENT: ContextVar[CLIState | None] = ContextVar("glyphgen_cli_state", default=None)


def start_run(*, verbosity: int = 0, debug: bool = False) -> CLIState:
    """Install a fresh state for one command invocation."""
    state = CLIState(verbosity=max(0, verbosity), show_tracebacks=debug)
    _CURRENT.set(state)
    return state


def get_cli_state() -> CLIState:
    """Return the state of the running command, or defaults outside a run."""
    return _CURRENT.get() or CLIState()


def report(
    state: CLIState,
    level: str,
    message: str,
    exception: BaseException | None = None,
) -> None:
    """Print a warning or error on stderr.

    With ``-v`` the exception type is added, with ``-vv`` its direct cause too.
    """
    style = LEVEL_STYLES[level]
    text = Text.assemble((f"{level}: ", f"bold {style}"), (message, style))
    if exception is not None and state.verbosity >= 1:
        text.append(f"\ntype: {type(exception).__name__}", style=style)
        cause = exception.__cause__
        if cause is not None and state.verbosity >= 2:
            text.append(f"\ncaused by: {type(cause).__name__}: {cause}", style=style)
    state.err_console.print(text)


def emit_error(message: str, *, exception: BaseException | None = None) -> None:
    report(get_cli_state(), "error", message, exception)


__all__ = [
    "CLIState",
    "emit_error",
    "get_cli_state",
    "report",
    "start_run",
]
