"""
Convert command - MIDI file to module JSON.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from midi2mod.converters.midi_to_module import MidiToModuleConverter
from midi2mod.formats.json.layout import JsonLayout
from midi2mod.log_config import setup_logging
from midi2mod.utils.validation import ValidationError

console = Console()
app = typer.Typer()


@app.command()
def convert(
    source: Path = typer.Argument(..., help="Source MIDI file (.mid)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output JSON file path"),
    layout: JsonLayout = typer.Option(
        JsonLayout.STANDARD, "--layout", "-l", help="JSON field layout"
    ),
    indent: Optional[int] = typer.Option(
        None, "--indent", "-i", min=0, help="Pretty-print with this indentation"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed progress"),
) -> None:
    """
    Convert a MIDI file to a module JSON document.

    Notes are paired per track, channel and pitch, sorted by onset time and
    pitch, and empty tracks are dropped.

    Examples:

        midi2mod convert song.mid

        midi2mod convert song.mid -o song.json --indent 2

        midi2mod convert song.mid --layout midi2json
    """
    setup_logging(verbose)

    if not source.exists():
        console.print(f"[red]Error: Source file not found: {source}[/red]")
        raise typer.Exit(1)

    output_path = output or source.with_name(source.name + ".json")

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=not verbose,
    ) as progress:
        task = progress.add_task("Converting MIDI to module...", total=None)

        try:
            converter = MidiToModuleConverter(layout=layout, indent=indent)
            module = converter.convert_and_save(source, output_path)
            progress.update(task, description="Done!")

        except (ValidationError, OSError) as e:
            progress.stop()
            console.print(f"[red]Error: {e}[/red]")
            if verbose:
                console.print_exception()
            raise typer.Exit(1)

    console.print(f"[green]Converted:[/green] {source} -> {output_path}")
    console.print(
        f"[dim]{module.note_count} notes in {module.track_count} tracks, "
        f"{module.ticks_per_beat} ticks/beat[/dim]"
    )

    stats = converter.last_stats
    if stats is not None and stats.dropped:
        console.print(
            f"[yellow]Dropped {stats.unmatched_offsets} unmatched note-offs and "
            f"{stats.unterminated_onsets} unterminated notes[/yellow]"
        )


if __name__ == "__main__":
    app()
