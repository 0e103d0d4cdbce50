"""Data models for glyph set configs and grid-coordinate indexes.

GlyphSet

`name` (`str`)
: Unique name of the glyph set, also used by the renderer for its font module.

`m3_seed` (`int`)
: Hash seed placeholder serialised as ``m3Seed``. Currently always ``0``.

`sprites` (`str`)
: Path of the sprite sheet image.

`size`, `cols`, `gutter`, `border` (`int`)
: Glyph cell size in pixels, grid column count, pixels between cells and
  pixels around the grid.

`legal` (`str`)
: Path of the license notice for the glyphs. May be empty.

`index` (`str`)
: Path of the index file mapping clusters to grid cells.

`index_type` (`IndexType`)
: How consumers read ``index``. Serialised as ``indexType``.

`aliases` (`str`)
: Path of the alias file. Empty when the glyph set has no aliases.

`glyph_trim` (`GlyphTrim`)
: Glyph trimming policy. Serialised as ``glyphTrim``.

`rustout` (`str`)
: Path of the generated font module.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from glyphgen.glyphs.hexcodec import canonical_hex_cluster, decode_hex_cluster


class IndexType(str, Enum):
    """Encoding of a glyph set's index file."""

    ROW_MAJOR_TEXT = "txt-row-major"
    GRID_COORD_JSON = "json-grid-coord"

    @classmethod
    def _missing_(cls, value: object) -> IndexType | None:
        aliases = {"row-major-text": cls.ROW_MAJOR_TEXT, "grid-coord-json": cls.GRID_COORD_JSON}
        if isinstance(value, str):
            return aliases.get(value.lower())
        return None


class GlyphTrim(str, Enum):
    """Policy for trimming blank columns around each glyph."""

    CJK = "CJK"
    PROPORTIONAL = "proportional"


class GlyphSet(BaseModel):
    """One bitmap font sprite sheet and the files describing it."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    name: str
    m3_seed: int = Field(default=0, alias="m3Seed", ge=0)
    sprites: str
    size: int = Field(gt=0)
    cols: int = Field(gt=0)
    gutter: int = Field(default=0, ge=0)
    border: int = Field(default=0, ge=0)
    legal: str = ""
    index: str
    index_type: IndexType = Field(alias="indexType")
    aliases: str = ""
    glyph_trim: GlyphTrim = Field(alias="glyphTrim")
    rustout: str


class IndexEntry(BaseModel):
    """Mapping of one NFC hex cluster key to a sprite sheet grid cell."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    hex: str = Field(min_length=1)
    row: int = Field(ge=0)
    col: int = Field(ge=0)
    label: str = ""

    @field_validator("hex")
    @classmethod
    def _check_cluster_key(cls, value: str) -> str:
        decode_hex_cluster(value)
        return value


class IndexDocument(BaseModel):
    """Grid-coordinate index document (``json-grid-coord``)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    comment: tuple[str, ...] = ()
    map: tuple[IndexEntry, ...] = ()

    @model_validator(mode="after")
    def _check_unique_clusters(self) -> IndexDocument:
        seen: set[str] = set()
        for entry in self.map:
            key = canonical_hex_cluster(entry.hex)
            if key in seen:
                raise ValueError(f"duplicate cluster key in index: {entry.hex}")
            seen.add(key)
        return self

    def hex_clusters(self) -> tuple[str, ...]:
        """Return the cluster keys in declaration order."""
        return tuple(entry.hex for entry in self.map)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class ConfigDocument(BaseModel):
    """Top-level config listing every glyph set the codegen should build."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    comment: tuple[str, ...] = ()
    glyph_sets: tuple[GlyphSet, ...] = Field(default=(), alias="glyphSets")

    @model_validator(mode="after")
    def _check_unique_names(self) -> ConfigDocument:
        names = [glyph_set.name for glyph_set in self.glyph_sets]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"duplicate glyph set names: {', '.join(duplicates)}")
        return self

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


__all__ = [
    "ConfigDocument",
    "GlyphSet",
    "GlyphTrim",
    "IndexDocument",
    "IndexEntry",
    "IndexType",
]
