"""
Converters from raw MIDI events to sequenced modules.

Example:
    from midi2mod.converters import convert_midi_to_module

    module = convert_midi_to_module("song.mid", "song.json")
"""

from midi2mod.converters.reconstructor import (
    NoteReconstructor,
    ReconstructionStats,
    reconstruct_notes,
)
from midi2mod.converters.sequencer import (
    group_by_track,
    sequence_notes,
    sequence_tracks,
    sort_track,
)
from midi2mod.converters.midi_to_module import MidiToModuleConverter, convert_midi_to_module

__all__ = [
    "NoteReconstructor",
    "ReconstructionStats",
    "reconstruct_notes",
    "group_by_track",
    "sequence_notes",
    "sequence_tracks",
    "sort_track",
    "MidiToModuleConverter",
    "convert_midi_to_module",
]
