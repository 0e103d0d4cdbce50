"""Static grapheme tables and glyph set declarations.

Row and column placements are authored by hand to match the sprite sheets;
nothing here is computed. Rows are ``(hex, row, col, label)`` with cluster
keys in Normalization Form C.
"""

from __future__ import annotations

from glyphgen.glyphs.hexcodec import canonical_hex_cluster
from glyphgen.glyphs.models import GlyphSet, GlyphTrim, IndexDocument, IndexEntry, IndexType


IndexRow = tuple[str, int, int, str]

INDEX_COMMENT = ("Before making changes here, see the glyphgen grapheme tables.",)
CONFIG_COMMENT = (
    "Config for use with the font codegen. Before making changes here, see the glyphgen tables.",
)

BASIC_LATIN: tuple[IndexRow, ...] = (
    ("20", 0, 2, " "),
    ("21", 1, 2, "!"),
    ("22", 2, 2, '"'),
    ("23", 3, 2, "#"),
    ("24", 4, 2, "$"),
    ("25", 5, 2, "%"),
    ("26", 6, 2, "&"),
    ("27", 7, 2, "'"),
    ("28", 8, 2, "("),
    ("29", 9, 2, ")"),
    ("2A", 10, 2, "*"),
    ("2B", 11, 2, "+"),
    ("2C", 12, 2, ","),
    ("2D", 13, 2, "-"),
    ("2E", 14, 2, "."),
    ("2F", 15, 2, "/"),
    ("30", 0, 3, "0"),
    ("31", 1, 3, "1"),
    ("32", 2, 3, "2"),
    ("33", 3, 3, "3"),
    ("34", 4, 3, "4"),
    ("35", 5, 3, "5"),
    ("36", 6, 3, "6"),
    ("37", 7, 3, "7"),
    ("38", 8, 3, "8"),
    ("39", 9, 3, "9"),
    ("3A", 10, 3, ":"),
    ("3B", 11, 3, ";"),
    ("3C", 12, 3, "<"),
    ("3D", 13, 3, "="),
    ("3E", 14, 3, ">"),
    ("3F", 15, 3, "?"),
    ("40", 0, 4, "@"),
    ("41", 1, 4, "A"),
    ("42", 2, 4, "B"),
    ("43", 3, 4, "C"),
    ("44", 4, 4, "D"),
    ("45", 5, 4, "E"),
    ("46", 6, 4, "F"),
    ("47", 7, 4, "G"),
    ("48", 8, 4, "H"),
    ("49", 9, 4, "I"),
    ("4A", 10, 4, "J"),
    ("4B", 11, 4, "K"),
    ("4C", 12, 4, "L"),
    ("4D", 13, 4, "M"),
    ("4E", 14, 4, "N"),
    ("4F", 15, 4, "O"),
    ("50", 0, 5, "P"),
    ("51", 1, 5, "Q"),
    ("52", 2, 5, "R"),
    ("53", 3, 5, "S"),
    ("54", 4, 5, "T"),
    ("55", 5, 5, "U"),
    ("56", 6, 5, "V"),
    ("57", 7, 5, "W"),
    ("58", 8, 5, "X"),
    ("59", 9, 5, "Y"),
    ("5A", 10, 5, "Z"),
    ("5B", 11, 5, "["),
    ("5C", 12, 5, "\\"),
    ("5D", 13, 5, "]"),
    ("5E", 14, 5, "^"),
    ("5F", 15, 5, "_"),
    ("60", 0, 6, "`"),
    ("61", 1, 6, "a"),
    ("62", 2, 6, "b"),
    ("63", 3, 6, "c"),
    ("64", 4, 6, "d"),
    ("65", 5, 6, "e"),
    ("66", 6, 6, "f"),
    ("67", 7, 6, "g"),
    ("68", 8, 6, "h"),
    ("69", 9, 6, "i"),
    ("6A", 10, 6, "j"),
    ("6B", 11, 6, "k"),
    ("6C", 12, 6, "l"),
    ("6D", 13, 6, "m"),
    ("6E", 14, 6, "n"),
    ("6F", 15, 6, "o"),
    ("70", 0, 7, "p"),
    ("71", 1, 7, "q"),
    ("72", 2, 7, "r"),
    ("73", 3, 7, "s"),
    ("74", 4, 7, "t"),
    ("75", 5, 7, "u"),
    ("76", 6, 7, "v"),
    ("77", 7, 7, "w"),
    ("78", 8, 7, "x"),
    ("79", 9, 7, "y"),
    ("7A", 10, 7, "z"),
    ("7B", 11, 7, "{"),
    ("7C", 12, 7, "|"),
    ("7D", 13, 7, "}"),
    ("7E", 14, 7, "~"),
)

LATIN_1_SUPPLEMENT: tuple[IndexRow, ...] = (
    ("A0", 0, 2, "No-Break Space"),
    ("A1", 1, 12, "¡"),
    ("A2", 2, 10, "¢"),
    ("A3", 3, 10, "£"),
    ("A4", 15, 1, "¤"),
    ("A5", 4, 11, "¥"),
    ("A6", 15, 7, "¦"),
    ("A7", 4, 10, "§"),
    ("A8", 12, 10, "¨"),
    ("A9", 9, 10, "©"),
    ("AA", 11, 11, "ª"),
    ("AB", 7, 12, "«"),
    ("AC", 2, 12, "¬"),
    ("AD", 13, 2, "Soft Hyphen"),
    ("AE", 8, 10, "®"),
    ("AF", 8, 15, "¯ Macron"),
    ("B0", 1, 10, "° Degree Sign"),
    ("B1", 1, 11, "±"),
    ("B2", 3, 1, "²"),
    ("B3", 4, 1, "³"),
    ("B4", 11, 10, "´"),
    ("B5", 5, 11, "µ"),
    ("B6", 6, 10, "¶"),
    ("B7", 1, 14, "·"),
    ("B8", 12, 15, "¸ Cedilla"),
    ("B9", 2, 1, "¹"),
    ("BA", 12, 11, "º"),
    ("BB", 8, 12, "»"),
    ("BC", 5, 1, "¼"),
    ("BD", 6, 1, "½"),
    ("BE", 7, 1, "¾"),
    ("BF", 0, 12, "¿"),
    ("C0", 11, 12, "À"),
    ("C1", 7, 14, "Á"),
    ("C2", 5, 14, "Â"),
    ("C3", 12, 12, "Ã"),
    ("C4", 0, 8, "Ä"),
    ("C5", 1, 8, "Å"),
    ("C6", 14, 10, "Æ"),
    ("C7", 2, 8, "Ç"),
    ("C8", 9, 14, "È"),
    ("C9", 3, 8, "É"),
    ("CA", 6, 14, "Ê"),
    ("CB", 8, 14, "Ë"),
    ("CC", 13, 14, "Ì"),
    ("CD", 10, 14, "Í"),
    ("CE", 11, 14, "Î"),
    ("CF", 12, 14, "Ï"),
    ("D0", 8, 1, "Ð"),
    ("D1", 4, 8, "Ñ"),
    ("D2", 1, 15, "Ò"),
    ("D3", 14, 14, "Ó"),
    ("D4", 15, 14, "Ô"),
    ("D5", 13, 12, "Õ"),
    ("D6", 5, 8, "Ö"),
    ("D7", 9, 1, "× Multiplication Sign"),
    ("D8", 15, 10, "Ø"),
    ("D9", 4, 15, "Ù"),
    ("DA", 2, 15, "Ú"),
    ("DB", 3, 15, "Û"),
    ("DC", 6, 8, "Ü"),
    ("DD", 10, 1, "Ý"),
    ("DE", 11, 1, "Þ"),
    ("DF", 7, 10, "ß"),
    ("E0", 8, 8, "à"),
    ("E1", 7, 8, "á"),
    ("E2", 9, 8, "â"),
    ("E3", 11, 8, "ã"),
    ("E4", 10, 8, "ä"),
    ("E5", 12, 8, "å"),
    ("E6", 14, 11, "æ"),
    ("E7", 13, 8, "ç"),
    ("E8", 15, 8, "è"),
    ("E9", 14, 8, "é"),
    ("EA", 0, 9, "ê"),
    ("EB", 1, 9, "ë"),
    ("EC", 3, 9, "ì"),
    ("ED", 2, 9, "í"),
    ("EE", 4, 9, "î"),
    ("EF", 5, 9, "ï"),
    ("F0", 12, 1, "ð"),
    ("F1", 6, 9, "ñ"),
    ("F2", 8, 9, "ò"),
    ("F3", 7, 9, "ó"),
    ("F4", 9, 9, "ô"),
    ("F5", 11, 9, "õ"),
    ("F6", 10, 9, "ö"),
    ("F7", 6, 13, "÷"),
    ("F8", 15, 11, "ø"),
    ("F9", 13, 9, "ù"),
    ("FA", 12, 9, "ú"),
    ("FB", 14, 9, "û"),
    ("FC", 15, 9, "ü"),
    ("FD", 13, 1, "ý"),
    ("FE", 14, 1, "þ"),
    ("FF", 8, 13, "ÿ"),
)

LATIN_EXTENDED_A: tuple[IndexRow, ...] = (
    ("152", 14, 12, "Œ"),
    ("153", 15, 12, "œ"),
)

GENERAL_PUNCTUATION: tuple[IndexRow, ...] = (
    ("2018", 4, 13, "‘ Left Single Quotation Mark"),
    ("2019", 5, 13, "’ Right Single Quotation Mark"),
    ("201A", 2, 14, "‚ Single Low-9 Quotation Mark"),
    ("201B", 7, 11, "‛ Single High-Reversed-9 Quotation Mark"),
    ("201C", 2, 13, "“ Left Double Quotation Mark"),
    ("201D", 3, 13, "” Right Double Quotation Mark"),
    ("201E", 3, 14, "„ Double Low-9 Quotation Mark"),
    ("201F", 8, 11, "‟ Double High-Reversed-9 Quotation Mark"),
    ("2020", 0, 10, "†"),
    ("2021", 0, 14, "‡"),
    ("2022", 5, 10, "•"),
)

CURRENCY_SYMBOLS: tuple[IndexRow, ...] = (("20AC", 11, 13, "€"),)

SPECIALS: tuple[IndexRow, ...] = (("FFFD", 0, 15, "�"),)

LATIN_ROWS: tuple[IndexRow, ...] = (
    BASIC_LATIN
    + LATIN_1_SUPPLEMENT
    + LATIN_EXTENDED_A
    + GENERAL_PUNCTUATION
    + CURRENCY_SYMBOLS
    + SPECIALS
)

# Private Use Area assignments for UI icons
ICON_ROWS: tuple[IndexRow, ...] = (
    ("E700", 0, 0, "Battery_05"),
    ("E701", 1, 0, "Battery_25"),
    ("E702", 2, 0, "Battery_50"),
    ("E703", 3, 0, "Battery_75"),
    ("E704", 4, 0, "Battery_99"),
    ("E705", 5, 0, "Radio_3"),
    ("E706", 6, 0, "Radio_2"),
    ("E707", 7, 0, "Radio_1"),
    ("E708", 8, 0, "Radio_0"),
    ("E709", 9, 0, "Radio_Off"),
    ("E70A", 13, 0, "Shift_Arrow"),
    ("E70B", 14, 0, "Backspace_Symbol"),
    ("E70C", 15, 0, "Enter_Symbol"),
)


def build_index(
    rows: tuple[IndexRow, ...], comment: tuple[str, ...] = INDEX_COMMENT
) -> IndexDocument:
    """Build an index document from ``(hex, row, col, label)`` rows.

    Keys are stored in canonical spelling. A malformed key raises
    ``InvalidCodepointError``.
    """
    entries = tuple(
        IndexEntry(hex=canonical_hex_cluster(hex_cluster), row=row, col=col, label=label)
        for hex_cluster, row, col, label in rows
    )
    return IndexDocument(comment=comment, map=entries)


def latin_glyph_sets(latin_index: str, latin_aliases: str) -> tuple[GlyphSet, ...]:
    """Glyph sets that share the Latin grid index and alias file."""
    shared = {
        "m3_seed": 0,
        "cols": 16,
        "gutter": 2,
        "border": 2,
        "index": latin_index,
        "index_type": IndexType.GRID_COORD_JSON,
        "aliases": latin_aliases,
        "glyph_trim": GlyphTrim.PROPORTIONAL,
    }
    return (
        GlyphSet(
            name="Bold",
            sprites="src_data/bold.png",
            size=30,
            legal="src_data/chicago_legal.txt",
            rustout="../src/fonts/bold.rs",
            **shared,
        ),
        GlyphSet(
            name="Regular",
            sprites="src_data/regular.png",
            size=30,
            legal="src_data/geneva_legal.txt",
            rustout="../src/fonts/regular.rs",
            **shared,
        ),
        GlyphSet(
            name="Small",
            sprites="src_data/small.png",
            size=24,
            legal="src_data/geneva_legal.txt",
            rustout="../src/fonts/small.rs",
            **shared,
        ),
    )


CJK_GLYPH_SETS: tuple[GlyphSet, ...] = (
    GlyphSet(
        name="Emoji",
        m3_seed=0,
        sprites="src_data/emoji_13_0.png",
        size=32,
        cols=16,
        gutter=0,
        border=0,
        legal="src_data/twemoji_legal.txt",
        index="src_data/emoji_13_0_index.txt",
        index_type=IndexType.ROW_MAJOR_TEXT,
        aliases="src_data/emoji_13_0_aliases.txt",
        glyph_trim=GlyphTrim.CJK,
        rustout="../src/fonts/emoji.rs",
    ),
    GlyphSet(
        name="Hanzi",
        m3_seed=0,
        sprites="src_data/hanzi_core2020_g.png",
        size=32,
        cols=20,
        gutter=2,
        border=2,
        legal="src_data/noto_sans_sc_legal.txt",
        index="src_data/hanzi_core2020_g_index.txt",
        index_type=IndexType.ROW_MAJOR_TEXT,
        aliases="",
        glyph_trim=GlyphTrim.CJK,
        rustout="../src/fonts/hanzi.rs",
    ),
)


def icon_glyph_set(icon_index: str) -> GlyphSet:
    """Icons drawn on the Regular sprite sheet, indexed in the Private Use Area."""
    return GlyphSet(
        name="Icons",
        m3_seed=0,
        sprites="src_data/regular.png",
        size=30,
        cols=16,
        gutter=2,
        border=2,
        legal="",
        index=icon_index,
        index_type=IndexType.GRID_COORD_JSON,
        aliases="",
        glyph_trim=GlyphTrim.PROPORTIONAL,
        rustout="../src/fonts/icons.rs",
    )


__all__ = [
    "CJK_GLYPH_SETS",
    "CONFIG_COMMENT",
    "ICON_ROWS",
    "INDEX_COMMENT",
    "LATIN_ROWS",
    "IndexRow",
    "build_index",
    "icon_glyph_set",
    "latin_glyph_sets",
]
