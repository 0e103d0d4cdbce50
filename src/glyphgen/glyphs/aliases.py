"""Normalization alias records for indexed grapheme clusters.

An alias file lets a renderer resolve a decomposed (NFD) string to the glyph
indexed under its precomposed (NFC) cluster key. Each line reads::

    C0 41-300   # nfc: [C0, À],  nfd: [41-300, À]

Consumers only read the first two whitespace separated tokens; the trailing
comment is for people auditing the generated file.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
import logging

from glyphgen.glyphs.hexcodec import canonical_hex_cluster, hex_cluster_to_text
from glyphgen.glyphs.normalization import resolve_nfd_hex


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AliasEntry:
    """One NFC to NFD equivalence for a cluster of the primary index."""

    source: str
    target: str
    source_text: str
    target_text: str

    def to_line(self) -> str:
        return (
            f"{self.source} {self.target}   "
            f"# nfc: [{self.source}, {self.source_text}],  "
            f"nfd: [{self.target}, {self.target_text}]"
        )


def alias_for(hex_cluster: str) -> AliasEntry | None:
    """Return the alias record for one cluster, or ``None`` when NFD equals NFC."""
    source = canonical_hex_cluster(hex_cluster)
    target = resolve_nfd_hex(source)
    if source == target:
        return None
    return AliasEntry(
        source=source,
        target=target,
        source_text=hex_cluster_to_text(source),
        target_text=hex_cluster_to_text(target),
    )


def iter_aliases(hex_clusters: Iterable[str]) -> Iterator[AliasEntry]:
    """Yield alias records in table order, skipping clusters without a decomposition."""
    for hex_cluster in hex_clusters:
        entry = alias_for(hex_cluster)
        if entry is None:
            continue
        logger.debug("alias %s -> %s", entry.source, entry.target)
        yield entry


def format_alias_file(entries: Iterable[AliasEntry]) -> str:
    """Join alias records into alias file text, one record per line."""
    lines = [entry.to_line() for entry in entries]
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def render_alias_text(hex_clusters: Iterable[str]) -> str:
    """Render the complete alias file for ``hex_clusters``."""
    return format_alias_file(iter_aliases(hex_clusters))


def parse_alias_text(text: str) -> list[tuple[str, str]]:
    """Read ``(canonical, alias)`` cluster pairs from alias file text.

    Everything after ``#`` is ignored, as are lines with fewer than two
    tokens. Tokens beyond the second are ignored too.
    """
    pairs: list[tuple[str, str]] = []
    for line in text.splitlines():
        tokens = line.split("#", 1)[0].split()
        if len(tokens) < 2:
            continue
        pairs.append((tokens[0], tokens[1]))
    return pairs


__all__ = [
    "AliasEntry",
    "alias_for",
    "format_alias_file",
    "iter_aliases",
    "parse_alias_text",
    "render_alias_text",
]
