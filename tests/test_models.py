from __future__ import annotations

from pydantic import ValidationError
import pytest

from glyphgen.glyphs.models import (
    ConfigDocument,
    GlyphSet,
    GlyphTrim,
    IndexDocument,
    IndexEntry,
    IndexType,
)


def _glyph_set(**overrides: object) -> GlyphSet:
    values: dict[str, object] = {
        "name": "Bold",
        "sprites": "src_data/bold.png",
        "size": 30,
        "cols": 16,
        "gutter": 2,
        "border": 2,
        "legal": "src_data/chicago_legal.txt",
        "index": "src_data/latin_index.json",
        "index_type": IndexType.GRID_COORD_JSON,
        "aliases": "src_data/latin_aliases.txt",
        "glyph_trim": GlyphTrim.PROPORTIONAL,
        "rustout": "../src/fonts/bold.rs",
    }
    values.update(overrides)
    return GlyphSet(**values)


def test_glyph_set_serialises_keys_in_contract_order() -> None:
    payload = ConfigDocument(glyph_sets=(_glyph_set(),)).to_payload()

    assert list(payload) == ["comment", "glyphSets"]
    assert list(payload["glyphSets"][0]) == [
        "name",
        "m3Seed",
        "sprites",
        "size",
        "cols",
        "gutter",
        "border",
        "legal",
        "index",
        "indexType",
        "aliases",
        "glyphTrim",
        "rustout",
    ]
    assert payload["glyphSets"][0]["indexType"] == "json-grid-coord"
    assert payload["glyphSets"][0]["glyphTrim"] == "proportional"


def test_glyph_set_accepts_wire_names() -> None:
    glyph_set = GlyphSet.model_validate(
        {
            "name": "Emoji",
            "m3Seed": 0,
            "sprites": "src_data/emoji.png",
            "size": 32,
            "cols": 16,
            "index": "src_data/emoji_index.txt",
            "indexType": "txt-row-major",
            "glyphTrim": "CJK",
            "rustout": "../src/fonts/emoji.rs",
        }
    )

    assert glyph_set.index_type is IndexType.ROW_MAJOR_TEXT
    assert glyph_set.glyph_trim is GlyphTrim.CJK
    assert glyph_set.aliases == ""


def test_index_type_accepts_descriptive_names() -> None:
    assert IndexType("row-major-text") is IndexType.ROW_MAJOR_TEXT
    assert IndexType("grid-coord-json") is IndexType.GRID_COORD_JSON
    with pytest.raises(ValueError):
        IndexType("png")


def test_glyph_set_rejects_unknown_keys_and_bad_sizes() -> None:
    with pytest.raises(ValidationError):
        _glyph_set(colour="red")
    with pytest.raises(ValidationError):
        _glyph_set(cols=0)


def test_glyph_set_is_immutable() -> None:
    glyph_set = _glyph_set()

    with pytest.raises(ValidationError):
        glyph_set.cols = 20


def test_index_rejects_duplicate_cluster_keys() -> None:
    entries = (IndexEntry(hex="C0", row=0, col=0), IndexEntry(hex="c0", row=1, col=0))

    with pytest.raises(ValidationError, match="duplicate cluster key"):
        IndexDocument(map=entries)


def test_index_rejects_zero_padded_duplicate_keys() -> None:
    entries = (IndexEntry(hex="C0", row=0, col=0), IndexEntry(hex="00C0", row=1, col=0))

    with pytest.raises(ValidationError, match="duplicate cluster key in index: 00C0"):
        IndexDocument(map=entries)


@pytest.mark.parametrize("hex_cluster", ["ZZ", "110000", "D800", "41--300"])
def test_index_entry_rejects_malformed_cluster_keys(hex_cluster: str) -> None:
    with pytest.raises(ValidationError, match="invalid hex grapheme cluster"):
        IndexEntry(hex=hex_cluster, row=0, col=0)


def test_index_allows_shared_grid_cells() -> None:
    document = IndexDocument(
        map=(
            IndexEntry(hex="20", row=0, col=2, label=" "),
            IndexEntry(hex="A0", row=0, col=2, label="No-Break Space"),
        )
    )

    assert document.hex_clusters() == ("20", "A0")


def test_index_entry_rejects_negative_coordinates() -> None:
    with pytest.raises(ValidationError):
        IndexEntry(hex="41", row=-1, col=0)


def test_config_rejects_duplicate_glyph_set_names() -> None:
    with pytest.raises(ValidationError, match="duplicate glyph set names: Bold"):
        ConfigDocument(glyph_sets=(_glyph_set(), _glyph_set()))
