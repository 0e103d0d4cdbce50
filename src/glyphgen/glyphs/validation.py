"""Cross-checks between glyph sets and the index and alias files they name.

These checks are opt-in. A plain generator run writes the config without
looking at the files it references.
"""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from glyphgen.exceptions import InvalidCodepointError
from glyphgen.glyphs.aliases import parse_alias_text
from glyphgen.glyphs.assembler import GeneratedDocuments
from glyphgen.glyphs.hexcodec import canonical_hex_cluster
from glyphgen.glyphs.models import GlyphSet, IndexEntry, IndexType
from glyphgen.glyphs.normalization import is_nfc_hex
from glyphgen.glyphs.rowmajor import parse_row_major_index
from glyphgen.glyphs.serialization import parse_index_json
from glyphgen.glyphs.tables import icon_glyph_set
from glyphgen.settings import GeneratorSettings


logger = logging.getLogger(__name__)


def check_entries(entries: list[IndexEntry], *, cols: int, source: str) -> list[str]:
    """Check grid bounds and cluster keys of one index."""
    issues: list[str] = []
    for entry in entries:
        if entry.col >= cols:
            issues.append(
                f"{source}: {entry.hex} at column {entry.col} is outside a {cols} column grid"
            )
        if not is_nfc_hex(entry.hex):
            issues.append(f"{source}: {entry.hex} is not in Normalization Form C")
    return issues


class ReferenceChecker:
    """Collect issues for the glyph sets of one generated config."""

    def __init__(self, documents: GeneratedDocuments, settings: GeneratorSettings) -> None:
        self.settings = settings
        self.generated = documents.indexes_by_reference(settings)
        self.generated_aliases = settings.reference(settings.latin_alias_path)
        self.issues: list[str] = []
        self._checked: set[tuple[str, int]] = set()

    def check(self, glyph_set: GlyphSet) -> None:
        entries = self._load_entries(glyph_set)
        if entries is not None:
            self.check_index(glyph_set.index, entries, glyph_set.cols)
        self._check_aliases(glyph_set, entries)

    def check_index(self, index: str, entries: list[IndexEntry], cols: int) -> None:
        # Bold, Regular and Small share one index; report its problems once.
        key = (index, cols)
        if key in self._checked:
            return
        self._checked.add(key)
        self.issues.extend(check_entries(entries, cols=cols, source=index))

    def _load_entries(self, glyph_set: GlyphSet) -> list[IndexEntry] | None:
        index = glyph_set.index
        if index in self.generated:
            if glyph_set.index_type is not IndexType.GRID_COORD_JSON:
                self.issues.append(
                    f"{glyph_set.name}: generated index {index} is "
                    f"{IndexType.GRID_COORD_JSON.value} but the glyph set declares "
                    f"{glyph_set.index_type.value}"
                )
                return None
            return list(self.generated[index].map)

        path = self.settings.resolve(index)
        if not path.is_file():
            self.issues.append(f"{glyph_set.name}: index file {index} not found")
            return None
        text = self._read(glyph_set, "index", index)
        if text is None:
            return None
        if glyph_set.index_type is IndexType.ROW_MAJOR_TEXT:
            try:
                return parse_row_major_index(text, glyph_set.cols)
            except InvalidCodepointError as exc:
                self.issues.append(f"{index}: {exc}")
                return None
        try:
            return list(parse_index_json(text).map)
        except (json.JSONDecodeError, ValidationError) as exc:
            self.issues.append(f"{glyph_set.name}: index file {index} is unreadable: {exc}")
            return None

    def _read(self, glyph_set: GlyphSet, kind: str, reference: str) -> str | None:
        try:
            return self.settings.resolve(reference).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            self.issues.append(f"{glyph_set.name}: cannot read {kind} file {reference}: {exc}")
            return None

    def _check_aliases(self, glyph_set: GlyphSet, entries: list[IndexEntry] | None) -> None:
        aliases = glyph_set.aliases
        if not aliases or aliases == self.generated_aliases:
            return
        path = self.settings.resolve(aliases)
        if not path.is_file():
            self.issues.append(f"{glyph_set.name}: alias file {aliases} not found")
            return
        if entries is None:
            return
        text = self._read(glyph_set, "alias", aliases)
        if text is None:
            return
        known = {canonical_hex_cluster(entry.hex) for entry in entries}
        for canonical, alias in parse_alias_text(text):
            try:
                key = canonical_hex_cluster(canonical)
            except InvalidCodepointError as exc:
                self.issues.append(f"{glyph_set.name}: {aliases}: {exc}")
                continue
            if key not in known:
                self.issues.append(
                    f"{glyph_set.name}: alias {alias} points at {canonical}, "
                    f"which is not in {glyph_set.index}"
                )


def validate_references(documents: GeneratedDocuments, settings: GeneratorSettings) -> list[str]:
    """Return every problem found between the config and the files it names."""
    checker = ReferenceChecker(documents, settings)
    for glyph_set in documents.config.glyph_sets:
        checker.check(glyph_set)
    if not settings.include_icons:
        icons = icon_glyph_set(settings.reference(settings.icon_index_path))
        checker.check_index(icons.index, list(documents.icon_index.map), icons.cols)
    logger.debug("reference validation found %d issues", len(checker.issues))
    return checker.issues


__all__ = ["ReferenceChecker", "check_entries", "validate_references"]
