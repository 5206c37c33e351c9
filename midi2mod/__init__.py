"""
midi2mod - MIDI to tracker-module note sequence converter.

This library provides tools to:
- Read Standard MIDI Files into time-ordered channel-voice events
- Pair note-on/note-off events into timed notes per track
- Sort and compact tracks into a Module ready for templating
- Write and read modules as JSON

Example usage:
    from midi2mod import MidiToModuleConverter, ModuleJsonWriter

    module = MidiToModuleConverter().convert("song.mid")
    ModuleJsonWriter.write(module, "song.json")
"""

__version__ = "0.2.0"
__author__ = "midi2mod Contributors"

from midi2mod.models.event import EventKind, RawEvent
from midi2mod.models.note import Note, NoteKey
from midi2mod.models.module import Module, assemble_module
from midi2mod.converters.reconstructor import NoteReconstructor
from midi2mod.converters.sequencer import sequence_notes, sequence_tracks
from midi2mod.converters.midi_to_module import MidiToModuleConverter, convert_midi_to_module
from midi2mod.formats.midi.reader import MidiReader, MidiSequence
from midi2mod.formats.json.layout import JsonLayout
from midi2mod.formats.json.reader import ModuleJsonReader
from midi2mod.formats.json.writer import ModuleJsonWriter

__all__ = [
    "EventKind",
    "RawEvent",
    "Note",
    "NoteKey",
    "Module",
    "assemble_module",
    "NoteReconstructor",
    "sequence_notes",
    "sequence_tracks",
    "MidiToModuleConverter",
    "convert_midi_to_module",
    "MidiReader",
    "MidiSequence",
    "JsonLayout",
    "ModuleJsonReader",
    "ModuleJsonWriter",
]
