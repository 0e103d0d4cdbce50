"""Unicode canonical decomposition of hex grapheme clusters."""

from __future__ import annotations

import unicodedata

from glyphgen.glyphs.hexcodec import (
    canonical_hex_cluster,
    hex_cluster_to_text,
    text_to_hex_cluster,
)


def normalize_hex(form: str, hex_cluster: str) -> str:
    """Return the cluster key of ``hex_cluster`` in Unicode normalization ``form``."""
    return text_to_hex_cluster(unicodedata.normalize(form, hex_cluster_to_text(hex_cluster)))


def resolve_nfd_hex(hex_cluster: str) -> str:
    """Map an NFC hex cluster key to the hex key of its canonical decomposition."""
    return normalize_hex("NFD", hex_cluster)


def is_nfc_hex(hex_cluster: str) -> bool:
    """Return whether the cluster is already in Normalization Form C."""
    return normalize_hex("NFC", hex_cluster) == canonical_hex_cluster(hex_cluster)


__all__ = ["is_nfc_hex", "normalize_hex", "resolve_nfd_hex"]
