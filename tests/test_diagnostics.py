from __future__ import annotations

import logging
from pathlib import Path

import pytest

from glyphgen.diagnostics import DiagnosticEmitter, LoggingEmitter, format_event_message
from glyphgen.exceptions import ValidationFailedError
from glyphgen.pipeline import generate, prepare
from glyphgen.settings import GeneratorSettings


def test_event_messages() -> None:
    assert format_event_message("output_plan", {"count": 4}) == "Preparing to overwrite files..."
    assert format_event_message("output_planned", {"path": "config.json"}) == "  config.json"
    assert format_event_message("output_write", {"path": "config.json"}) == "writing config.json"
    assert format_event_message("output_write", {}) == "writing <unknown>"
    assert format_event_message("something_else", {"path": "x"}) is None


def test_emitters_satisfy_the_protocol(emitter) -> None:
    assert isinstance(LoggingEmitter(), DiagnosticEmitter)
    assert isinstance(emitter, DiagnosticEmitter)


def test_library_run_logs_progress(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="glyphgen")

    generate(GeneratorSettings(output_dir=tmp_path), lambda plan: "y")

    messages = [
        record.getMessage() for record in caplog.records if record.name == "glyphgen.diagnostics"
    ]
    assert messages[:2] == ["Preparing to overwrite files...", "  config.json"]
    assert messages[-4:] == [
        "writing src_data/latin_index.json",
        "writing src_data/latin_aliases.txt",
        "writing src_data/icon_index.json",
        "writing config.json",
    ]


def test_library_check_logs_warnings(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="glyphgen")

    with pytest.raises(ValidationFailedError):
        prepare(GeneratorSettings(output_dir=tmp_path), check=True)

    warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert [record.getMessage() for record in warnings][0] == (
        "Emoji: index file src_data/emoji_13_0_index.txt not found"
    )
    assert len(warnings) == 3


def test_unformatted_events_are_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    log = logging.getLogger("glyphgen.tests")
    caplog.set_level(logging.DEBUG, logger="glyphgen.tests")

    LoggingEmitter(log).event("custom", {"n": 1})

    assert [(record.levelno, record.getMessage()) for record in caplog.records] == [
        (logging.DEBUG, "custom {'n': 1}")
    ]
