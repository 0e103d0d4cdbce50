"""JSON renderers for the generated documents.

The config is pretty-printed with two-space indentation. Index documents keep
one entry per line so diffs of hand edited grid placements stay readable::

    { "comment": [
    "Before making changes here, ..."
    ], "map": [
    { "hex": "20", "row": 0, "col": 2, "label": " " },
    { "hex": "21", "row": 1, "col": 2, "label": "!" }
    ] }
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
import json
from typing import Any

from glyphgen.glyphs.models import ConfigDocument, IndexDocument


def _scalar(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)


def _compact_object(payload: Mapping[str, Any]) -> str:
    if not payload:
        return "{}"
    members = ", ".join(f"{_scalar(key)}: {_render_value(value)}" for key, value in payload.items())
    return f"{{ {members} }}"


def _line_array(items: Sequence[Any]) -> str:
    if not items:
        return "[]"
    body = ",\n".join(_render_value(item) for item in items)
    return f"[\n{body}\n]"


def _render_value(value: Any) -> str:
    if isinstance(value, Mapping):
        return _compact_object(value)
    if isinstance(value, (list, tuple)):
        return _line_array(value)
    return _scalar(value)


def render_index_json(document: IndexDocument) -> str:
    """Render a grid-coordinate index with one map entry per line."""
    return _render_value(document.to_payload()) + "\n"


def render_config_json(document: ConfigDocument) -> str:
    """Render the config document pretty-printed, keys in declaration order."""
    return json.dumps(document.to_payload(), indent=2, ensure_ascii=False) + "\n"


def parse_index_json(text: str) -> IndexDocument:
    """Load a grid-coordinate index document."""
    return IndexDocument.model_validate(json.loads(text))


def parse_config_json(text: str) -> ConfigDocument:
    """Load a config document."""
    return ConfigDocument.model_validate(json.loads(text))


__all__ = [
    "parse_config_json",
    "parse_index_json",
    "render_config_json",
    "render_index_json",
]
