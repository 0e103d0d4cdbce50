"""Grapheme tables, Unicode normalization aliases and document assembly."""

from __future__ import annotations

from .aliases import AliasEntry, alias_for, iter_aliases, parse_alias_text, render_alias_text
from .assembler import GeneratedDocuments, assemble
from .hexcodec import decode_hex_cluster, encode_hex_cluster
from .models import ConfigDocument, GlyphSet, GlyphTrim, IndexDocument, IndexEntry, IndexType
from .normalization import resolve_nfd_hex


__all__ = [
    "AliasEntry",
    "ConfigDocument",
    "GeneratedDocuments",
    "GlyphSet",
    "GlyphTrim",
    "IndexDocument",
    "IndexEntry",
    "IndexType",
    "alias_for",
    "assemble",
    "decode_hex_cluster",
    "encode_hex_cluster",
    "iter_aliases",
    "parse_alias_text",
    "render_alias_text",
    "resolve_nfd_hex",
]
