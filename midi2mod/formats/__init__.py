"""Format handlers for MIDI input and module JSON output."""

from midi2mod.formats.midi import MidiReader, MidiSequence
from midi2mod.formats.json import JsonLayout, ModuleJsonReader, ModuleJsonWriter

__all__ = ["MidiReader", "MidiSequence", "JsonLayout", "ModuleJsonReader", "ModuleJsonWriter"]
