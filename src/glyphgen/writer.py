"""Two-phase output writer: plan every file, confirm once, then write them all."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
from pathlib import Path

from glyphgen.diagnostics import DiagnosticEmitter, LoggingEmitter
from glyphgen.exceptions import DeclinedConfirmationError, OutputWriteError
from glyphgen.glyphs.aliases import format_alias_file
from glyphgen.glyphs.assembler import GeneratedDocuments
from glyphgen.glyphs.serialization import render_config_json, render_index_json
from glyphgen.settings import GeneratorSettings


logger = logging.getLogger(__name__)

AFFIRMATIVE_ANSWERS = frozenset({"y", "Y"})


class OutputKind(str, Enum):
    CONFIG = "config"
    LATIN_INDEX = "latin-index"
    ICON_INDEX = "icon-index"
    LATIN_ALIASES = "latin-aliases"


# Files are announced in this order and written in WRITE_ORDER.
LISTING_ORDER = (
    OutputKind.CONFIG,
    OutputKind.LATIN_INDEX,
    OutputKind.ICON_INDEX,
    OutputKind.LATIN_ALIASES,
)
WRITE_ORDER = (
    OutputKind.LATIN_INDEX,
    OutputKind.LATIN_ALIASES,
    OutputKind.ICON_INDEX,
    OutputKind.CONFIG,
)


@dataclass(frozen=True, slots=True)
class PlannedOutput:
    """One file the run will overwrite, with its full contents."""

    kind: OutputKind
    reference: str
    target: Path
    content: str


@dataclass(frozen=True, slots=True)
class OutputPlan:
    """Every file of a run, rendered before anything touches the disk."""

    outputs: tuple[PlannedOutput, ...]

    def _ordered(self, order: tuple[OutputKind, ...]) -> list[PlannedOutput]:
        by_kind = {output.kind: output for output in self.outputs}
        return [by_kind[kind] for kind in order if kind in by_kind]

    def listing(self) -> list[PlannedOutput]:
        return self._ordered(LISTING_ORDER)

    def write_sequence(self) -> list[PlannedOutput]:
        return self._ordered(WRITE_ORDER)


def plan_outputs(documents: GeneratedDocuments, settings: GeneratorSettings) -> OutputPlan:
    """Render every output document and pair it with its destination."""
    alias_text = format_alias_file(documents.latin_aliases)
    rendered = (
        (OutputKind.CONFIG, settings.config_path, render_config_json(documents.config)),
        (
            OutputKind.LATIN_INDEX,
            settings.latin_index_path,
            render_index_json(documents.latin_index),
        ),
        (OutputKind.ICON_INDEX, settings.icon_index_path, render_index_json(documents.icon_index)),
        (OutputKind.LATIN_ALIASES, settings.latin_alias_path, alias_text),
    )
    return OutputPlan(
        outputs=tuple(
            PlannedOutput(
                kind=kind,
                reference=settings.reference(path),
                target=settings.resolve(path),
                content=content,
            )
            for kind, path, content in rendered
        )
    )


def is_affirmative(answer: str) -> bool:
    """Only a bare ``y`` or ``Y`` counts as consent."""
    return answer in AFFIRMATIVE_ANSWERS


def confirm_overwrite(answer: str) -> None:
    """Raise :class:`DeclinedConfirmationError` unless ``answer`` is affirmative."""
    if not is_affirmative(answer):
        logger.debug("overwrite declined with answer %r", answer)
        raise DeclinedConfirmationError(answer)


def write_output(output: PlannedOutput) -> None:
    """Write one planned file as UTF-8 with LF line endings."""
    try:
        output.target.parent.mkdir(parents=True, exist_ok=True)
        with open(output.target, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(output.content)
    except OSError as exc:
        raise OutputWriteError(output.target, exc.strerror or str(exc)) from exc


def execute_plan(plan: OutputPlan, emitter: DiagnosticEmitter | None = None) -> list[Path]:
    """Write every planned file, announcing each one before writing it.

    A failure stops the run; files written earlier in the run stay in place.
    """
    emitter = emitter or LoggingEmitter()
    written: list[Path] = []
    for output in plan.write_sequence():
        emitter.event("output_write", {"path": output.reference})
        write_output(output)
        written.append(output.target)
    return written


__all__ = [
    "AFFIRMATIVE_ANSWERS",
    "OutputKind",
    "OutputPlan",
    "PlannedOutput",
    "confirm_overwrite",
    "execute_plan",
    "is_affirmative",
    "plan_outputs",
    "write_output",
]
