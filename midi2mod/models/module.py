"""
Module data model - the top-level container handed to serializers.
"""

from dataclasses import dataclass, field
from typing import Iterable, Sequence, Tuple

from midi2mod.models.note import Note
from midi2mod.utils.validation import ValidationError, validate_ticks_per_beat


@dataclass(frozen=True)
class Module:
    """
    Sequenced notes ready for serialization or templating.

    Attributes:
        ticks_per_beat: Time division copied from the source file
        tracks: Non-empty note sequences, compacted and sorted. Output index
            does not equal the source track index.
    """

    ticks_per_beat: int
    tracks: Tuple[Tuple[Note, ...], ...] = field(default_factory=tuple)

    def __post_init__(self):
        validate_ticks_per_beat(self.ticks_per_beat)
        for index, track in enumerate(self.tracks):
            if not track:
                raise ValidationError(f"Track {index} has no notes")

    @property
    def track_count(self) -> int:
        return len(self.tracks)

    @property
    def note_count(self) -> int:
        """Total number of notes over all tracks."""
        return sum(len(track) for track in self.tracks)

    @property
    def end_time(self) -> int:
        """Latest note offset in ticks (0 for an empty module)."""
        return max((note.offset_time for track in self.tracks for note in track), default=0)

    @property
    def is_empty(self) -> bool:
        return not self.tracks

    def get_track(self, index: int) -> Tuple[Note, ...]:
        """Get an output track by its compacted index."""
        if not 0 <= index < len(self.tracks):
            raise IndexError(f"Track index {index} out of range (0-{len(self.tracks) - 1})")
        return self.tracks[index]

    def __repr__(self) -> str:
        return (
            f"Module(ticks_per_beat={self.ticks_per_beat}, "
            f"tracks={self.track_count}, notes={self.note_count})"
        )


def assemble_module(ticks_per_beat: int, tracks: Iterable[Sequence[Note]]) -> Module:
    """
    Wrap sequenced tracks and the time division into a Module.

    Args:
        ticks_per_beat: Time division, must be positive
        tracks: Sequencer output

    Returns:
        Read-only Module

    Raises:
        InvalidTimeDivisionError: If ticks_per_beat is not positive
        ValidationError: If a track is empty
    """
    return Module(
        ticks_per_beat=ticks_per_beat,
        tracks=tuple(tuple(track) for track in tracks),
    )
