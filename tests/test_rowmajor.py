from __future__ import annotations

import pytest

from glyphgen.exceptions import InvalidCodepointError
from glyphgen.glyphs.rowmajor import parse_row_major_index


def test_clusters_fill_the_grid_row_by_row() -> None:
    text = "# emoji sheet\n1f600\n\n1f601  # grin\n  1f602-fe0f  \n1f603\n"

    entries = parse_row_major_index(text, cols=2)

    assert [(entry.hex, entry.row, entry.col) for entry in entries] == [
        ("1f600", 0, 0),
        ("1f601", 0, 1),
        ("1f602-fe0f", 1, 0),
        ("1f603", 1, 1),
    ]


def test_empty_text_has_no_entries() -> None:
    assert parse_row_major_index("# nothing\n\n", cols=16) == []


def test_column_count_must_be_positive() -> None:
    with pytest.raises(ValueError):
        parse_row_major_index("41\n", cols=0)


def test_malformed_cluster_raises_invalid_codepoint() -> None:
    with pytest.raises(InvalidCodepointError, match="'xyz' is not a hex scalar"):
        parse_row_major_index("4e00\nxyz\n", cols=16)
