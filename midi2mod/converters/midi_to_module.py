"""
MIDI to module converter.

Runs the full pipeline on a Standard MIDI File:

1. Decode the file into a time-ordered RawEvent stream (MidiReader)
2. Pair note-ons with note-offs (NoteReconstructor)
3. Sort each track and drop empty tracks (sequencer)
4. Wrap the tracks and time division into a Module
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from midi2mod.converters.reconstructor import NoteReconstructor, ReconstructionStats
from midi2mod.converters.sequencer import sequence_notes
from midi2mod.formats.json.layout import JsonLayout
from midi2mod.formats.json.writer import ModuleJsonWriter
from midi2mod.formats.midi.reader import MidiReader, MidiSequence
from midi2mod.models.event import RawEvent
from midi2mod.models.module import Module, assemble_module

logger = logging.getLogger(__name__)


class MidiToModuleConverter:
    """
    Converter from MIDI files to Modules.

    Attributes:
        layout: JSON layout used by convert_and_save
        indent: JSON indentation used by convert_and_save (None = compact)
        last_sequence: Decoded source of the most recent file conversion
        last_stats: Pairing statistics of the most recent conversion
    """

    def __init__(self, layout: JsonLayout = JsonLayout.STANDARD, indent: Optional[int] = None):
        self.layout = layout
        self.indent = indent
        self.reconstructor = NoteReconstructor()
        self.last_sequence: Optional[MidiSequence] = None

    @property
    def last_stats(self) -> Optional[ReconstructionStats]:
        return self.reconstructor.last_stats

    def convert(self, source_path: Union[str, Path]) -> Module:
        """
        Convert a MIDI file to a Module.

        Args:
            source_path: Path to .mid file

        Returns:
            Sequenced Module

        Raises:
            FileNotFoundError: If the file does not exist
            MidiFormatError: If the file cannot be decoded
            InvalidTimeDivisionError: If the file has no positive ticks-per-beat
        """
        sequence = MidiReader.read(source_path)
        self.last_sequence = sequence
        return self.convert_sequence(sequence)

    def convert_sequence(self, sequence: MidiSequence) -> Module:
        """Convert an already decoded MidiSequence."""
        return self.convert_events(sequence.events, sequence.ticks_per_beat)

    def convert_events(self, events: Iterable[RawEvent], ticks_per_beat: int) -> Module:
        """
        Convert a decoded event stream.

        Args:
            events: RawEvents in delivery order
            ticks_per_beat: Time division of the source

        Returns:
            Sequenced Module
        """
        notes = self.reconstructor.reconstruct(events)
        tracks = sequence_notes(notes)
        module = assemble_module(ticks_per_beat, tracks)
        logger.debug("Assembled %r", module)
        return module

    def convert_and_save(
        self, source_path: Union[str, Path], output_path: Union[str, Path]
    ) -> Module:
        """
        Convert a MIDI file and write the result as JSON.

        Returns:
            The converted Module
        """
        module = self.convert(source_path)
        ModuleJsonWriter.write(module, output_path, layout=self.layout, indent=self.indent)
        logger.info(
            "Wrote %d notes in %d tracks to %s", module.note_count, module.track_count, output_path
        )
        return module


def convert_midi_to_module(
    source_path: Union[str, Path],
    output_path: Optional[Union[str, Path]] = None,
    layout: JsonLayout = JsonLayout.STANDARD,
    indent: Optional[int] = None,
) -> Module:
    """
    Convert a MIDI file to a Module, optionally saving it as JSON.

    Convenience function for simple conversion.

    Args:
        source_path: Path to source .mid file
        output_path: Path for output .json file, None to skip writing
        layout: JSON layout for the output file
        indent: JSON indentation, None for compact output

    Example:
        module = convert_midi_to_module("song.mid", "song.json")
    """
    converter = MidiToModuleConverter(layout=layout, indent=indent)
    if output_path is None:
        return converter.convert(source_path)
    return converter.convert_and_save(source_path, output_path)
