#!/usr/bin/env python3
"""
Example: Inspect note pairing on a MIDI file

Shows how many note-ons were matched, and how many note events were dropped
because they had no partner.
"""

import sys

sys.path.insert(0, "..")

from midi2mod.converters import NoteReconstructor, sequence_notes
from midi2mod.formats import MidiReader


def main():
    if len(sys.argv) < 2:
        print("Usage: python inspect_events.py song.mid")
        return 1

    sequence = MidiReader.read(sys.argv[1])
    print(f"Format {sequence.format}, {sequence.track_count} tracks, "
          f"{sequence.ticks_per_beat} ticks/beat")
    print(f"Channel events: {len(sequence.events)} ({sequence.note_event_count} note events)")

    reconstructor = NoteReconstructor()
    notes = reconstructor.reconstruct(sequence.events)
    stats = reconstructor.last_stats

    print(f"\nMatched notes:        {stats.matched}")
    print(f"Unmatched note-offs:  {stats.unmatched_offsets}")
    print(f"Unterminated onsets:  {stats.unterminated_onsets}")

    tracks = sequence_notes(notes)
    print(f"\nNon-empty tracks: {len(tracks)}")
    for index, track in enumerate(tracks):
        print(f"  {index}: source track {track[0].track}, {len(track)} notes")

    return 0


if __name__ == "__main__":
    sys.exit(main())
