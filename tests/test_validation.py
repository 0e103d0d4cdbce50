from __future__ import annotations

from pathlib import Path

import pytest

from glyphgen.exceptions import ValidationFailedError
from glyphgen.glyphs.assembler import assemble
from glyphgen.glyphs.models import IndexEntry
from glyphgen.glyphs.validation import check_entries, validate_references
from glyphgen.pipeline import prepare
from glyphgen.settings import GeneratorSettings


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def _seed_cjk_sources(root: Path) -> None:
    _write(root / "src_data" / "emoji_13_0_index.txt", "# emoji\n1f600\n1f601\n")
    _write(root / "src_data" / "emoji_13_0_aliases.txt", "1f600 1f600-fe0f\n")
    _write(root / "src_data" / "hanzi_core2020_g_index.txt", "4e00\n4e8c\n")


def test_missing_referenced_files_are_reported(tmp_path: Path) -> None:
    settings = GeneratorSettings(output_dir=tmp_path)

    issues = validate_references(assemble(settings), settings)

    assert issues == [
        "Emoji: index file src_data/emoji_13_0_index.txt not found",
        "Emoji: alias file src_data/emoji_13_0_aliases.txt not found",
        "Hanzi: index file src_data/hanzi_core2020_g_index.txt not found",
    ]


def test_complete_source_tree_passes(tmp_path: Path) -> None:
    _seed_cjk_sources(tmp_path)
    settings = GeneratorSettings(output_dir=tmp_path, include_icons=True)

    assert validate_references(assemble(settings), settings) == []


def test_alias_pointing_outside_the_index_is_reported(tmp_path: Path) -> None:
    _seed_cjk_sources(tmp_path)
    _write(tmp_path / "src_data" / "emoji_13_0_aliases.txt", "1f602 1f602-fe0f\n")
    settings = GeneratorSettings(output_dir=tmp_path)

    issues = validate_references(assemble(settings), settings)

    assert issues == [
        "Emoji: alias 1f602-fe0f points at 1f602, which is not in src_data/emoji_13_0_index.txt"
    ]


def test_malformed_row_major_cluster_is_reported(tmp_path: Path) -> None:
    _seed_cjk_sources(tmp_path)
    _write(tmp_path / "src_data" / "hanzi_core2020_g_index.txt", "4e00\nxyz\n")
    settings = GeneratorSettings(output_dir=tmp_path)

    issues = validate_references(assemble(settings), settings)

    assert len(issues) == 1
    assert issues[0].startswith("src_data/hanzi_core2020_g_index.txt: invalid hex grapheme cluster")


def test_check_entries_reports_grid_and_normalization_problems() -> None:
    entries = [
        IndexEntry(hex="41", row=0, col=16),
        IndexEntry(hex="41-300", row=0, col=1),
        IndexEntry(hex="C0", row=0, col=2),
    ]

    assert check_entries(entries, cols=16, source="latin.json") == [
        "latin.json: 41 at column 16 is outside a 16 column grid",
        "latin.json: 41-300 is not in Normalization Form C",
    ]


def test_prepare_with_check_aborts_before_planning(tmp_path: Path, emitter) -> None:
    settings = GeneratorSettings(output_dir=tmp_path)

    with pytest.raises(ValidationFailedError) as excinfo:
        prepare(settings, check=True, emitter=emitter)

    assert len(excinfo.value.issues) == 3
    assert emitter.warnings == excinfo.value.issues
    assert list(tmp_path.iterdir()) == []


def test_prepare_without_check_ignores_missing_files(tmp_path: Path) -> None:
    documents, plan = prepare(GeneratorSettings(output_dir=tmp_path))

    assert len(plan.outputs) == 4
    assert len(documents.latin_aliases) == 53


def test_undecodable_index_file_is_reported(tmp_path: Path) -> None:
    _seed_cjk_sources(tmp_path)
    (tmp_path / "src_data" / "hanzi_core2020_g_index.txt").write_bytes(b"4e00\n\xff\xfe\n")
    settings = GeneratorSettings(output_dir=tmp_path)

    issues = validate_references(assemble(settings), settings)

    assert len(issues) == 1
    assert issues[0].startswith(
        "Hanzi: cannot read index file src_data/hanzi_core2020_g_index.txt:"
    )


def test_undecodable_alias_file_is_reported(tmp_path: Path) -> None:
    _seed_cjk_sources(tmp_path)
    (tmp_path / "src_data" / "emoji_13_0_aliases.txt").write_bytes(b"\xc3\x28 1f600\n")
    settings = GeneratorSettings(output_dir=tmp_path)

    issues = validate_references(assemble(settings), settings)

    assert len(issues) == 1
    assert issues[0].startswith(
        "Emoji: cannot read alias file src_data/emoji_13_0_aliases.txt:"
    )


def test_alias_lookup_ignores_key_spelling(tmp_path: Path) -> None:
    _seed_cjk_sources(tmp_path)
    _write(tmp_path / "src_data" / "emoji_13_0_aliases.txt", "01F600 1f600-fe0f\n")
    settings = GeneratorSettings(output_dir=tmp_path)

    assert validate_references(assemble(settings), settings) == []
