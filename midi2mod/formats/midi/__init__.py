"""Standard MIDI File handling."""

from midi2mod.formats.midi.reader import MidiReader, MidiSequence

__all__ = ["MidiReader", "MidiSequence"]
