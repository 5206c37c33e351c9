"""
Info command - display module summary for a MIDI or module JSON file.
"""

from pathlib import Path
from typing import Optional, Tuple

import typer
from rich.console import Console

from midi2mod.converters.midi_to_module import MidiToModuleConverter
from midi2mod.converters.reconstructor import ReconstructionStats
from midi2mod.formats.json.reader import ModuleJsonReader
from midi2mod.formats.midi.reader import MidiSequence
from midi2mod.log_config import setup_logging
from midi2mod.models.module import Module
from midi2mod.utils.tracker import DEFAULT_ROWS_PER_BEAT
from midi2mod.utils.validation import ValidationError
from cli.display.tables import display_module_info

console = Console()
app = typer.Typer()

MIDI_SUFFIXES = (".mid", ".midi", ".smf")


def load_module(
    source: Path,
) -> Tuple[Module, Optional[MidiSequence], Optional[ReconstructionStats]]:
    """
    Load a Module from a MIDI file or a module JSON document.

    Returns:
        (module, decoded MIDI sequence, pairing stats); the last two are
        None for JSON sources
    """
    if source.suffix.lower() == ".json":
        return ModuleJsonReader.read(source), None, None

    converter = MidiToModuleConverter()
    module = converter.convert(source)
    return module, converter.last_sequence, converter.last_stats


def load_or_exit(
    source: Path,
) -> Tuple[Module, Optional[MidiSequence], Optional[ReconstructionStats]]:
    """Load a source file, printing the error and exiting with code 1 on failure."""
    if not source.exists():
        console.print(f"[red]Error: File not found: {source}[/red]")
        raise typer.Exit(1)

    suffix = source.suffix.lower()
    if suffix != ".json" and suffix not in MIDI_SUFFIXES:
        console.print(f"[red]Error: Unknown file type: {suffix}[/red]")
        console.print("Supported formats: .mid/.midi (MIDI), .json (module)")
        raise typer.Exit(1)

    try:
        return load_module(source)
    except (ValidationError, OSError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def info(
    source: Path = typer.Argument(..., help="MIDI file or module JSON"),
    rows_per_beat: int = typer.Option(
        DEFAULT_ROWS_PER_BEAT, "--rows-per-beat", "-r", min=1, help="Tracker rows per beat"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """
    Show time division, track and note counts for a file.

    Examples:

        midi2mod info song.mid

        midi2mod info song.json --rows-per-beat 8
    """
    setup_logging(verbose)

    module, sequence, stats = load_or_exit(source)
    display_module_info(
        module, source, sequence=sequence, stats=stats, rows_per_beat=rows_per_beat
    )


if __name__ == "__main__":
    app()
