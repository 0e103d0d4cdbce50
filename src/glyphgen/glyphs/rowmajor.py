"""Reader for row-major text indexes (``txt-row-major``).

Each non-blank line names one hex grapheme cluster, for example
``1f4aa-1f3fc``. Lines fill the sprite grid from the top left corner, left
to right, wrapping after ``cols`` cells. ``#`` starts a comment.
"""

from __future__ import annotations

from glyphgen.glyphs.hexcodec import decode_hex_cluster
from glyphgen.glyphs.models import IndexEntry


def parse_row_major_index(text: str, cols: int) -> list[IndexEntry]:
    """Assign grid coordinates to the clusters listed in ``text``.

    Keys keep the spelling used in the file. A malformed key raises
    ``InvalidCodepointError``.
    """
    if cols <= 0:
        raise ValueError(f"column count must be positive, got {cols}")
    entries: list[IndexEntry] = []
    row = 0
    col = 0
    for line in text.splitlines():
        cluster = line.split("#", 1)[0].strip()
        if not cluster:
            continue
        decode_hex_cluster(cluster)
        entries.append(IndexEntry(hex=cluster, row=row, col=col))
        col += 1
        if col == cols:
            row += 1
            col = 0
    return entries


__all__ = ["parse_row_major_index"]
