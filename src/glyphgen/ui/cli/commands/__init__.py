"""CLI command implementations."""

from __future__ import annotations

from .generate import generate


__all__ = ["generate"]
