"""Assemble the config, index and alias documents from the static tables."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from glyphgen.glyphs.aliases import AliasEntry, iter_aliases
from glyphgen.glyphs.models import ConfigDocument, GlyphSet, IndexDocument
from glyphgen.glyphs.tables import (
    CJK_GLYPH_SETS,
    CONFIG_COMMENT,
    ICON_ROWS,
    LATIN_ROWS,
    build_index,
    icon_glyph_set,
    latin_glyph_sets,
)
from glyphgen.settings import GeneratorSettings


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GeneratedDocuments:
    """Every document produced by one generator run."""

    config: ConfigDocument
    latin_index: IndexDocument
    icon_index: IndexDocument
    latin_aliases: tuple[AliasEntry, ...]

    def indexes_by_reference(self, settings: GeneratorSettings) -> dict[str, IndexDocument]:
        """Map the in-document path of each generated index to the index."""
        return {
            settings.reference(settings.latin_index_path): self.latin_index,
            settings.reference(settings.icon_index_path): self.icon_index,
        }


def build_latin_index() -> IndexDocument:
    return build_index(LATIN_ROWS)


def build_icon_index() -> IndexDocument:
    return build_index(ICON_ROWS)


def build_glyph_sets(settings: GeneratorSettings) -> tuple[GlyphSet, ...]:
    """Return the glyph sets in config order."""
    glyph_sets = CJK_GLYPH_SETS + latin_glyph_sets(
        settings.reference(settings.latin_index_path),
        settings.reference(settings.latin_alias_path),
    )
    if settings.include_icons:
        glyph_sets += (icon_glyph_set(settings.reference(settings.icon_index_path)),)
    return glyph_sets


def build_config(settings: GeneratorSettings) -> ConfigDocument:
    return ConfigDocument(comment=CONFIG_COMMENT, glyph_sets=build_glyph_sets(settings))


def assemble(settings: GeneratorSettings) -> GeneratedDocuments:
    """Build every output document in memory.

    Alias records are fully materialised here, so a malformed cluster key
    fails the run before anything is written.
    """
    latin_index = build_latin_index()
    aliases = tuple(iter_aliases(latin_index.hex_clusters()))
    logger.debug(
        "assembled %d latin entries, %d aliases", len(latin_index.map), len(aliases)
    )
    return GeneratedDocuments(
        config=build_config(settings),
        latin_index=latin_index,
        icon_index=build_icon_index(),
        latin_aliases=aliases,
    )


__all__ = [
    "GeneratedDocuments",
    "assemble",
    "build_config",
    "build_glyph_sets",
    "build_icon_index",
    "build_latin_index",
]
