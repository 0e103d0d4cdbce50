"""End-to-end generator run: assemble, plan, confirm, write."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
import logging
from pathlib import Path

from glyphgen.diagnostics import DiagnosticEmitter, LoggingEmitter
from glyphgen.exceptions import ValidationFailedError
from glyphgen.glyphs.assembler import GeneratedDocuments, assemble
from glyphgen.glyphs.validation import validate_references
from glyphgen.settings import GeneratorSettings
from glyphgen.writer import OutputPlan, confirm_overwrite, execute_plan, plan_outputs


logger = logging.getLogger(__name__)

AnswerProvider = Callable[[OutputPlan], str]


@dataclass(slots=True)
class GenerationResult:
    """Documents, plan and written paths of a completed run."""

    documents: GeneratedDocuments
    plan: OutputPlan
    written: list[Path] = field(default_factory=list)


def prepare(
    settings: GeneratorSettings,
    *,
    check: bool = False,
    emitter: DiagnosticEmitter | None = None,
) -> tuple[GeneratedDocuments, OutputPlan]:
    """Build and render every output without touching the filesystem."""
    emitter = emitter or LoggingEmitter()
    documents = assemble(settings)
    if check:
        issues = validate_references(documents, settings)
        for issue in issues:
            emitter.warning(issue)
        if issues:
            raise ValidationFailedError(issues)
    return documents, plan_outputs(documents, settings)


def generate(
    settings: GeneratorSettings,
    ask: AnswerProvider,
    *,
    check: bool = False,
    emitter: DiagnosticEmitter | None = None,
) -> GenerationResult:
    """Run the generator, writing every output only after ``ask`` returns ``y``."""
    emitter = emitter or LoggingEmitter()
    documents, plan = prepare(settings, check=check, emitter=emitter)

    emitter.event("output_plan", {"count": len(plan.outputs)})
    for output in plan.listing():
        emitter.event("output_planned", {"path": output.reference})
    confirm_overwrite(ask(plan))

    written = execute_plan(plan, emitter)
    logger.info("wrote %d files under %s", len(written), settings.output_dir)
    return GenerationResult(documents=documents, plan=plan, written=written)


__all__ = ["AnswerProvider", "GenerationResult", "generate", "prepare"]
