"""
midi2mod - MIDI to tracker-module note sequence converter.

A CLI tool for turning MIDI files into sorted per-track note lists.
"""

import typer
from rich.console import Console

from midi2mod import __version__
from cli.commands.convert import convert
from cli.commands.info import info
from cli.commands.notes import notes

console = Console()

# Main app
app = typer.Typer(
    name="midi2mod",
    help="Convert MIDI files to per-track note sequences for tracker modules.",
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="convert")(convert)
app.command(name="info")(info)
app.command(name="notes")(notes)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]midi2mod[/bold] version {__version__}")
    console.print("[dim]MIDI to tracker-module note sequence converter[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
) -> None:
    """
    midi2mod - Convert MIDI files into tracker-ready note sequences.

    [bold]Quick Start:[/bold]

        midi2mod convert song.mid          # Write song.mid.json
        midi2mod info song.mid             # Summary of tracks and notes
        midi2mod notes song.mid -t 0       # Notes of the first track

    Use --help with any command for more details.
    """
    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
