"""Rich presenters for generator summaries."""

from __future__ import annotations

from collections.abc import Sequence

from rich import box
from rich.table import Table

from glyphgen.glyphs.aliases import AliasEntry
from glyphgen.settings import GeneratorSettings

from .state import CLIState


def present_aliases(state: CLIState, aliases: Sequence[AliasEntry]) -> None:
    """Show the NFC to NFD alias records as a table."""
    table = Table(box=box.SQUARE, header_style="bold cyan", title="Latin Aliases")
    table.add_column("NFC", style="cyan")
    table.add_column("NFD", style="magenta")
    table.add_column("Text", justify="center")
    for entry in aliases:
        table.add_row(entry.source, entry.target, entry.source_text)
    state.console.print(table)


def present_written_files(state: CLIState, settings: GeneratorSettings) -> None:
    """Summarise the files written by the run, in write order, with their sizes."""
    table = Table(box=box.SQUARE, header_style="bold cyan", title="Generated Files")
    table.add_column("File", style="cyan")
    table.add_column("Size", style="magenta", justify="right", no_wrap=True)
    for event in state.consume_events("output_write"):
        reference = event.get("path", "")
        path = settings.resolve(reference)
        table.add_row(reference, f"{path.stat().st_size} B")
    state.console.print(table)


__all__ = ["present_aliases", "present_written_files"]
