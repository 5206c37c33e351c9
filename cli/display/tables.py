"""
Rich table displays for module information.
"""

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

from midi2mod.converters.reconstructor import ReconstructionStats
from midi2mod.formats.midi.reader import MidiSequence
from midi2mod.models.module import Module
from midi2mod.utils.tracker import max_row, note_name, tick_to_row
from cli.display.formatters import format_channel, format_ticks, value_bar


console = Console()


def display_module_info(
    module: Module,
    source: Path,
    sequence: Optional[MidiSequence] = None,
    stats: Optional[ReconstructionStats] = None,
    rows_per_beat: int = 4,
) -> None:
    """Display a module summary with Rich formatting."""
    last_row = max_row(module, rows_per_beat)

    header_content = f"""[bold]File:[/bold] {source}
[bold]Ticks/Beat:[/bold] {module.ticks_per_beat}
[bold]Output Tracks:[/bold] {module.track_count}
[bold]Notes:[/bold] {module.note_count}
[bold]Length:[/bold] {format_ticks(module.end_time, module.ticks_per_beat)}
[bold]Last Row:[/bold] {last_row if last_row is not None else "N/A"} ({rows_per_beat} rows/beat)"""

    if sequence is not None:
        header_content += f"""
[bold]MIDI Format:[/bold] {sequence.format}
[bold]Source Tracks:[/bold] {sequence.track_count}"""

    console.print(
        Panel(
            header_content,
            title="[bold blue]Module Info[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )

    if stats is not None:
        stats_table = Table(title="Note Pairing", box=box.ROUNDED, show_header=False)
        stats_table.add_column("Property", style="cyan")
        stats_table.add_column("Value", style="white")

        stats_table.add_row("Matched Notes", str(stats.matched))
        stats_table.add_row("Unmatched Note-Offs", str(stats.unmatched_offsets))
        stats_table.add_row("Unterminated Onsets", str(stats.unterminated_onsets))

        console.print(stats_table)

    if module.is_empty:
        console.print("[yellow]No notes found.[/yellow]")
        return

    track_table = Table(
        title="Tracks", box=box.ROUNDED, show_header=True, header_style="bold magenta"
    )
    track_table.add_column("#", style="dim", width=3)
    track_table.add_column("Notes", width=24)
    track_table.add_column("Channels", width=12)
    track_table.add_column("Range", width=10)
    track_table.add_column("Start", justify="right")
    track_table.add_column("End", justify="right")

    most_notes = max(len(track) for track in module.tracks)

    for index, track in enumerate(module.tracks):
        channels = sorted({note.channel + 1 for note in track})
        low = min(note.pitch for note in track)
        high = max(note.pitch for note in track)
        track_table.add_row(
            str(index),
            value_bar(len(track), max_value=most_notes, width=10, show_percent=False),
            ",".join(str(ch) for ch in channels),
            f"{note_name(low)}-{note_name(high)}",
            str(track[0].onset_time),
            str(max(note.offset_time for note in track)),
        )

    console.print(track_table)


def display_track_notes(
    module: Module,
    track_index: int,
    limit: Optional[int] = None,
    rows_per_beat: int = 4,
) -> None:
    """Display the notes of one output track as a table."""
    track = module.get_track(track_index)
    shown = track if limit is None else track[:limit]

    table = Table(
        title=f"Track {track_index} ({len(track)} notes)",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold green",
    )
    table.add_column("Row", style="dim", justify="right")
    table.add_column("Note", style="cyan")
    table.add_column("Pitch", justify="right")
    table.add_column("Channel")
    table.add_column("Onset", justify="right")
    table.add_column("Offset", justify="right")
    table.add_column("Duration", justify="right")

    for note in shown:
        table.add_row(
            str(tick_to_row(note.onset_time, module.ticks_per_beat, rows_per_beat)),
            note_name(note.pitch),
            str(note.pitch),
            format_channel(note.channel),
            str(note.onset_time),
            str(note.offset_time),
            str(note.duration),
        )

    console.print(table)

    if len(shown) < len(track):
        console.print(f"[dim]... {len(track) - len(shown)} more notes[/dim]")
