"""
Standard MIDI File reader.

Reads .mid files with mido and flattens every track into one time-ordered
stream of RawEvent records for the note reconstructor.
"""

import heapq
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple, Union

import mido

from midi2mod.models.event import RawEvent
from midi2mod.utils.validation import MidiFormatError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MidiSequence:
    """
    Decoded contents of a MIDI file.

    Attributes:
        ticks_per_beat: Time division from the file header (not validated)
        track_count: Number of tracks in the file, including empty ones
        format: SMF format type (0, 1 or 2)
        events: Channel-voice events of all tracks, ordered by time
    """

    ticks_per_beat: int
    track_count: int
    format: int = 1
    events: Tuple[RawEvent, ...] = field(default_factory=tuple)

    @property
    def note_event_count(self) -> int:
        return sum(1 for e in self.events if e.is_note)


class MidiReader:
    """
    Reader for Standard MIDI Files.

    Note-on messages with velocity 0 are normalized to note-offs here, so
    later stages only ever see explicit NOTE_OFF events.

    Example:
        sequence = MidiReader.read("song.mid")
        print(sequence.ticks_per_beat, len(sequence.events))
    """

    # Channel messages that are neither note-on nor note-off
    OTHER_CHANNEL_TYPES = frozenset(
        ["control_change", "program_change", "pitchwheel", "aftertouch", "polytouch"]
    )

    @classmethod
    def read(cls, filepath: Union[str, Path]) -> MidiSequence:
        """
        Read a MIDI file and return its decoded event stream.

        Args:
            filepath: Path to .mid file

        Returns:
            Decoded MidiSequence
        """
        reader = cls()
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> MidiSequence:
        """
        Parse a MIDI file.

        Raises:
            FileNotFoundError: If the file does not exist
            MidiFormatError: If mido cannot decode the file
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        try:
            midi_file = mido.MidiFile(str(filepath))
        except (OSError, EOFError, ValueError, KeyError) as e:
            raise MidiFormatError(f"Cannot decode MIDI file {filepath}: {e}") from e

        sequence = self.parse_midi_file(midi_file)
        logger.info(
            "Read %s: format %d, %d tracks, %d ticks/beat, %d note events",
            filepath.name,
            sequence.format,
            sequence.track_count,
            sequence.ticks_per_beat,
            sequence.note_event_count,
        )
        return sequence

    def parse_midi_file(self, midi_file: mido.MidiFile) -> MidiSequence:
        """Decode an already loaded mido.MidiFile."""
        per_track = [
            self.parse_track(index, track) for index, track in enumerate(midi_file.tracks)
        ]
        # heapq.merge is stable: equal times keep track order, then message order
        events = tuple(heapq.merge(*per_track, key=lambda e: e.time))

        return MidiSequence(
            ticks_per_beat=midi_file.ticks_per_beat,
            track_count=len(midi_file.tracks),
            format=midi_file.type,
            events=events,
        )

    def parse_track(self, index: int, track: mido.MidiTrack) -> List[RawEvent]:
        """
        Convert one track's messages to RawEvents with absolute tick times.

        Args:
            index: Track index in the file
            track: mido track (messages carry delta times)

        Returns:
            Channel-voice events of the track in their original order
        """
        events: List[RawEvent] = []
        time = 0

        for msg in track:
            time += msg.time
            event = self.convert_message(index, msg, time)
            if event is not None:
                events.append(event)

        return events

    def convert_message(self, track: int, msg: mido.Message, time: int):
        """
        Map a single mido message to a RawEvent.

        Returns:
            RawEvent, or None for meta and system messages
        """
        if msg.is_meta:
            return None

        if msg.type == "note_on":
            if msg.velocity == 0:
                return RawEvent.note_off(track, msg.channel, msg.note, 0, time)
            return RawEvent.note_on(track, msg.channel, msg.note, msg.velocity, time)

        if msg.type == "note_off":
            return RawEvent.note_off(track, msg.channel, msg.note, msg.velocity, time)

        if msg.type in self.OTHER_CHANNEL_TYPES:
            return RawEvent.other(track, msg.channel, time)

        return None
