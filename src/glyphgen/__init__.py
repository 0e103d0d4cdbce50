"""Primary public API for glyphgen."""

from __future__ import annotations

from glyphgen.exceptions import (
    DeclinedConfirmationError,
    GlyphGenError,
    InvalidCodepointError,
    OutputWriteError,
    SettingsError,
    ValidationFailedError,
)
from glyphgen.glyphs import (
    AliasEntry,
    ConfigDocument,
    GeneratedDocuments,
    GlyphSet,
    GlyphTrim,
    IndexDocument,
    IndexEntry,
    IndexType,
    assemble,
    iter_aliases,
    resolve_nfd_hex,
)
from glyphgen.pipeline import GenerationResult, generate, prepare
from glyphgen.settings import GeneratorSettings, load_settings
from glyphgen.version import get_version


__version__ = get_version()

__all__ = [
    "AliasEntry",
    "ConfigDocument",
    "DeclinedConfirmationError",
    "GeneratedDocuments",
    "GenerationResult",
    "GeneratorSettings",
    "GlyphGenError",
    "GlyphSet",
    "GlyphTrim",
    "IndexDocument",
    "IndexEntry",
    "IndexType",
    "InvalidCodepointError",
    "OutputWriteError",
    "SettingsError",
    "ValidationFailedError",
    "__version__",
    "assemble",
    "generate",
    "get_version",
    "iter_aliases",
    "load_settings",
    "prepare",
    "resolve_nfd_hex",
]
