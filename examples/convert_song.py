#!/usr/bin/env python3
"""
Example: Convert a MIDI file to module JSON

Usage:
    python convert_song.py song.mid [output.json]
"""

import sys

sys.path.insert(0, "..")

from pathlib import Path
from midi2mod.converters import MidiToModuleConverter
from midi2mod.formats import JsonLayout
from midi2mod.utils.tracker import note_name, tick_to_row


def main():
    if len(sys.argv) < 2:
        print(__doc__)
        return 1

    midi_file = Path(sys.argv[1])
    output_json = Path(sys.argv[2]) if len(sys.argv) > 2 else midi_file.with_suffix(".json")

    converter = MidiToModuleConverter(layout=JsonLayout.STANDARD, indent=2)
    module = converter.convert_and_save(midi_file, output_json)

    print(f"Converted {midi_file} -> {output_json}")
    print(f"  Ticks per beat: {module.ticks_per_beat}")
    print(f"  Tracks: {module.track_count}, notes: {module.note_count}")

    # First few notes of every track, on a 4 rows-per-beat grid
    for index, track in enumerate(module.tracks):
        print(f"\nTrack {index}:")
        for note in track[:8]:
            row = tick_to_row(note.onset_time, module.ticks_per_beat)
            print(f"  row {row:4d}  {note_name(note.pitch)}  len {note.duration}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
