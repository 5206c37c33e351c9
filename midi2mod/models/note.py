"""
Note data models used while pairing note-on and note-off events.
"""

from dataclasses import dataclass
from typing import NamedTuple


class NoteKey(NamedTuple):
    """Identity under which onsets and offsets are paired."""

    pitch: int
    track: int
    channel: int


@dataclass(frozen=True)
class PendingOnset:
    """An open note-on waiting for its matching note-off."""

    onset_time: int
    channel: int


@dataclass(frozen=True)
class Note:
    """
    A completed, pitched, timed note.

    Attributes:
        track: Source track index the note was played on
        channel: MIDI channel of the note-on event (0-15)
        pitch: Note number (0-127)
        onset_time: Note-on time in ticks
        offset_time: Note-off time in ticks (never before onset_time)
    """

    track: int
    channel: int
    pitch: int
    onset_time: int
    offset_time: int

    def __post_init__(self):
        if self.offset_time < self.onset_time:
            raise ValueError(
                f"Note offset {self.offset_time} precedes onset {self.onset_time}"
            )

    @property
    def duration(self) -> int:
        """Length in ticks (0 for zero-length notes)."""
        return self.offset_time - self.onset_time

    @property
    def key(self) -> NoteKey:
        return NoteKey(self.pitch, self.track, self.channel)

    @property
    def sort_key(self):
        """Canonical in-track ordering: onset time, then pitch."""
        return (self.onset_time, self.pitch)
