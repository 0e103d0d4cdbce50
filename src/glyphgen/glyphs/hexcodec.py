"""Conversion between hex grapheme cluster keys and Unicode scalar values.

A cluster key spells each scalar value as uppercase hexadecimal without
zero padding and joins multi-scalar clusters with ``-``. For example the
regional-indicator flag for France is ``"1F1EB-1F1F7"`` and a decomposed
``À`` is ``"41-300"``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import re

from glyphgen.exceptions import InvalidCodepointError


SEPARATOR = "-"
MAX_CODEPOINT = 0x10FFFF
SURROGATE_RANGE = range(0xD800, 0xE000)

_HEX_TOKEN = re.compile(r"[0-9A-Fa-f]+")


def check_scalar(value: int, *, hex_cluster: str | None = None) -> int:
    """Return ``value`` when it is a Unicode scalar value, raise otherwise."""
    label = hex_cluster if hex_cluster is not None else f"{value:X}"
    if value < 0 or value > MAX_CODEPOINT:
        raise InvalidCodepointError(label, f"U+{value:X} is outside the Unicode range")
    if value in SURROGATE_RANGE:
        raise InvalidCodepointError(label, f"U+{value:X} is a surrogate code point")
    return value


def decode_hex_cluster(hex_cluster: str) -> tuple[int, ...]:
    """Parse ``"1F3C4-200D-2640-FE0F"`` into its scalar values."""
    if not isinstance(hex_cluster, str) or not hex_cluster:
        raise InvalidCodepointError(str(hex_cluster), "empty cluster")
    scalars: list[int] = []
    for token in hex_cluster.split(SEPARATOR):
        if not _HEX_TOKEN.fullmatch(token):
            raise InvalidCodepointError(hex_cluster, f"{token!r} is not a hex scalar")
        scalars.append(check_scalar(int(token, 16), hex_cluster=hex_cluster))
    return tuple(scalars)


def encode_hex_cluster(scalars: Iterable[int]) -> str:
    """Format scalar values as an uppercase, ``-`` joined cluster key."""
    values = [check_scalar(value) for value in scalars]
    if not values:
        raise InvalidCodepointError("", "empty cluster")
    return SEPARATOR.join(f"{value:X}" for value in values)


def scalars_to_text(scalars: Sequence[int]) -> str:
    return "".join(chr(value) for value in scalars)


def text_to_scalars(text: str) -> tuple[int, ...]:
    return tuple(ord(char) for char in text)


def hex_cluster_to_text(hex_cluster: str) -> str:
    """Convert a hex cluster key to the string it spells."""
    return scalars_to_text(decode_hex_cluster(hex_cluster))


def text_to_hex_cluster(text: str) -> str:
    """Convert a string to its hex cluster key."""
    return encode_hex_cluster(text_to_scalars(text))


def canonical_hex_cluster(hex_cluster: str) -> str:
    """Return the canonical spelling of a cluster key (uppercase, unpadded)."""
    return encode_hex_cluster(decode_hex_cluster(hex_cluster))


__all__ = [
    "MAX_CODEPOINT",
    "SEPARATOR",
    "canonical_hex_cluster",
    "check_scalar",
    "decode_hex_cluster",
    "encode_hex_cluster",
    "hex_cluster_to_text",
    "scalars_to_text",
    "text_to_hex_cluster",
    "text_to_scalars",
]
