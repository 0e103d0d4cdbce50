"""Diagnostic abstractions shared across the generation pipeline."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any, Protocol, runtime_checkable


logger = logging.getLogger(__name__)


@runtime_checkable
class DiagnosticEmitter(Protocol):
    """Interface used to surface warnings, errors, and structured events."""

    def warning(self, message: str, exc: BaseException | None = None) -> None: ...

    def error(self, message: str, exc: BaseException | None = None) -> None: ...

    def event(self, name: str, payload: Mapping[str, Any]) -> None: ...


class LoggingEmitter:
    """Emitter used when the pipeline runs as a library, outside the CLI.

    Events with a status line are logged at ``INFO``, the rest at ``DEBUG``.
    """

    def __init__(self, log: logging.Logger | None = None) -> None:
        self.log = log or logger

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        self.log.warning(message, exc_info=exc)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        self.log.error(message, exc_info=exc)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        message = format_event_message(name, payload)
        if message is None:
            self.log.debug("%s %s", name, dict(payload))
        else:
            self.log.info(message)


def format_event_message(name: str, payload: Mapping[str, Any]) -> str | None:
    """Return the status line printed for selected diagnostic events."""
    path = payload.get("path") or "<unknown>"
    if name == "output_plan":
        return "Preparing to overwrite files..."
    if name == "output_planned":
        return f"  {path}"
    if name == "output_write":
        return f"writing {path}"
    return None


__all__ = ["DiagnosticEmitter", "LoggingEmitter", "format_event_message"]
