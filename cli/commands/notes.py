"""
Notes command - list the notes of the sequenced tracks.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from midi2mod.log_config import setup_logging
from midi2mod.utils.tracker import DEFAULT_ROWS_PER_BEAT
from cli.commands.info import load_or_exit
from cli.display.tables import display_track_notes

console = Console()
app = typer.Typer()


@app.command()
def notes(
    source: Path = typer.Argument(..., help="MIDI file or module JSON"),
    track: Optional[int] = typer.Option(
        None, "--track", "-t", min=0, help="Output track index (default: all tracks)"
    ),
    limit: Optional[int] = typer.Option(
        None, "--limit", "-n", min=1, help="Maximum notes to list per track"
    ),
    rows_per_beat: int = typer.Option(
        DEFAULT_ROWS_PER_BEAT, "--rows-per-beat", "-r", min=1, help="Tracker rows per beat"
    ),
) -> None:
    """
    List notes per output track with tracker rows and note names.

    Track indices are those of the compacted output, not the MIDI file.

    Examples:

        midi2mod notes song.mid

        midi2mod notes song.mid --track 0 --limit 32
    """
    setup_logging()

    module, _, _ = load_or_exit(source)

    if module.is_empty:
        console.print("[yellow]No notes found.[/yellow]")
        return

    if track is not None:
        if track >= module.track_count:
            console.print(
                f"[red]Error: Track {track} out of range "
                f"(module has {module.track_count} tracks)[/red]"
            )
            raise typer.Exit(1)
        indices = [track]
    else:
        indices = range(module.track_count)

    for index in indices:
        display_track_notes(module, index, limit=limit, rows_per_beat=rows_per_beat)


if __name__ == "__main__":
    app()
