"""Custom exception hierarchy for the glyph set generator."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class GlyphGenError(RuntimeError):
    """Base exception for generator failures."""


class InvalidCodepointError(GlyphGenError, ValueError):
    """Raised when a hex grapheme cluster holds a malformed or out-of-range scalar."""

    def __init__(self, hex_cluster: str, reason: str) -> None:
        super().__init__(f"invalid hex grapheme cluster {hex_cluster!r}: {reason}")
        self.hex_cluster = hex_cluster
        self.reason = reason


class DeclinedConfirmationError(GlyphGenError):
    """Raised when the user does not confirm overwriting the output files."""

    def __init__(self, answer: str) -> None:
        super().__init__("Operation canceled")
        self.answer = answer


class OutputWriteError(GlyphGenError):
    """Raised when an output file cannot be written."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"cannot write {path}: {message}")
        self.path = path


class SettingsError(GlyphGenError):
    """Raised when a settings file cannot be loaded or validated."""


class ValidationFailedError(GlyphGenError):
    """Raised when the opt-in reference checks report problems."""

    def __init__(self, issues: Sequence[str]) -> None:
        count = len(issues)
        noun = "issue" if count == 1 else "issues"
        super().__init__(f"validation found {count} {noun}")
        self.issues = list(issues)


__all__ = [
    "DeclinedConfirmationError",
    "GlyphGenError",
    "InvalidCodepointError",
    "OutputWriteError",
    "SettingsError",
    "ValidationFailedError",
]
