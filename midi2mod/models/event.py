"""
Raw channel-voice event model.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List

from midi2mod.utils.validation import (
    ValidationError,
    validate_channel,
    validate_midi_value,
    validate_tick,
    validate_track,
)


class EventKind(Enum):
    """Kinds of channel-voice events the note reconstructor distinguishes."""

    NOTE_ON = "note_on"
    NOTE_OFF = "note_off"
    OTHER = "other"


@dataclass(frozen=True)
class RawEvent:
    """
    A single decoded channel-voice event.

    Attributes:
        track: Index into the source file's track list
        channel: MIDI channel (0-15)
        kind: Event kind
        pitch: Note number (0-127), 0 for non-note events
        velocity: Note velocity (0-127)
        time: Absolute time in ticks from the start of the track
    """

    track: int
    channel: int
    kind: EventKind
    pitch: int = 0
    velocity: int = 0
    time: int = 0

    @property
    def is_note_on(self) -> bool:
        return self.kind == EventKind.NOTE_ON

    @property
    def is_note_off(self) -> bool:
        return self.kind == EventKind.NOTE_OFF

    @property
    def is_note(self) -> bool:
        """Check if this event takes part in note pairing."""
        return self.kind in (EventKind.NOTE_ON, EventKind.NOTE_OFF)

    def validate(self) -> List[str]:
        """
        Validate event fields.

        Returns:
            List of validation error messages (empty if valid)
        """
        checks = (
            lambda: validate_track(self.track),
            lambda: validate_channel(self.channel),
            lambda: validate_midi_value(self.pitch, "pitch"),
            lambda: validate_midi_value(self.velocity, "velocity"),
            lambda: validate_tick(self.time),
        )

        errors = []
        for check in checks:
            try:
                check()
            except ValidationError as e:
                errors.append(str(e))

        return errors

    @classmethod
    def note_on(
        cls, track: int, channel: int, pitch: int, velocity: int = 100, time: int = 0
    ) -> "RawEvent":
        """Create a note-on event."""
        return cls(
            track=track,
            channel=channel,
            kind=EventKind.NOTE_ON,
            pitch=pitch,
            velocity=velocity,
            time=time,
        )

    @classmethod
    def note_off(
        cls, track: int, channel: int, pitch: int, velocity: int = 0, time: int = 0
    ) -> "RawEvent":
        """Create a note-off event."""
        return cls(
            track=track,
            channel=channel,
            kind=EventKind.NOTE_OFF,
            pitch=pitch,
            velocity=velocity,
            time=time,
        )

    @classmethod
    def other(cls, track: int, channel: int, time: int = 0) -> "RawEvent":
        """Create a non-note channel event (control change, program change, ...)."""
        return cls(track=track, channel=channel, kind=EventKind.OTHER, time=time)
