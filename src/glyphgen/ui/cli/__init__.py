"""Public CLI exports for glyphgen."""

from __future__ import annotations

from .app import app, main
from .commands import generate
from .state import CLIState, get_cli_state


__all__ = ["CLIState", "app", "generate", "get_cli_state", "main"]
