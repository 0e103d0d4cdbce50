from __future__ import annotations

import json

from glyphgen.glyphs.assembler import build_config, build_latin_index
from glyphgen.glyphs.models import IndexDocument, IndexEntry
from glyphgen.glyphs.serialization import (
    parse_config_json,
    parse_index_json,
    render_config_json,
    render_index_json,
)
from glyphgen.settings import GeneratorSettings


def test_index_json_keeps_one_entry_per_line() -> None:
    document = IndexDocument(
        comment=("Edit the tables instead.",),
        map=(
            IndexEntry(hex="41", row=1, col=4, label="A"),
            IndexEntry(hex="22", row=2, col=2, label='"'),
        ),
    )

    assert render_index_json(document) == (
        '{ "comment": [\n'
        '"Edit the tables instead."\n'
        '], "map": [\n'
        '{ "hex": "41", "row": 1, "col": 4, "label": "A" },\n'
        '{ "hex": "22", "row": 2, "col": 2, "label": "\\"" }\n'
        "] }\n"
    )


def test_empty_index_renders_empty_arrays() -> None:
    assert render_index_json(IndexDocument()) == '{ "comment": [], "map": [] }\n'


def test_latin_index_json_is_valid_and_line_oriented() -> None:
    text = render_index_json(build_latin_index())

    assert len(text.splitlines()) == 3 + 206 + 1
    payload = json.loads(text)
    assert payload["map"][0] == {"hex": "20", "row": 0, "col": 2, "label": " "}
    assert "¡" in text


def test_index_json_can_be_loaded_back() -> None:
    document = build_latin_index()

    assert parse_index_json(render_index_json(document)) == document


def test_config_json_is_pretty_printed() -> None:
    text = render_config_json(build_config(GeneratorSettings()))
    lines = text.splitlines()

    assert text.endswith("}\n")
    assert lines[0] == "{"
    assert lines[1] == '  "comment": ['
    assert '    {\n      "name": "Emoji",\n      "m3Seed": 0,' in text
    assert '"indexType": "txt-row-major"' in text


def test_config_json_round_trips_through_the_model() -> None:
    config = build_config(GeneratorSettings(include_icons=True))

    assert parse_config_json(render_config_json(config)) == config
