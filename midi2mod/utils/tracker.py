"""
Tracker timing and note-naming helpers.

Trackers lay notes out on a grid of rows. With ``rows_per_beat`` rows per
quarter note, one row spans ``ticks_per_beat / rows_per_beat`` ticks.
"""

from typing import Optional

from midi2mod.models.module import Module
from midi2mod.utils.validation import ValidationError, validate_ticks_per_beat

DEFAULT_ROWS_PER_BEAT = 4

# Tracker pitch names, two characters each
PITCHES = ["C-", "C#", "D-", "D#", "E-", "F-", "F#", "G-", "G#", "A-", "A#", "B-"]

MIN_OCTAVE = 0
MAX_OCTAVE = 8


def _check_rows_per_beat(rows_per_beat: int) -> None:
    if rows_per_beat <= 0:
        raise ValidationError(f"Rows per beat must be > 0, got {rows_per_beat}")


def clocks_per_row(ticks_per_beat: int, rows_per_beat: int = DEFAULT_ROWS_PER_BEAT) -> float:
    """
    Number of ticks covered by one tracker row.

    Args:
        ticks_per_beat: Time division of the module
        rows_per_beat: Tracker rows per quarter note

    Returns:
        Ticks per row (may be fractional)
    """
    validate_ticks_per_beat(ticks_per_beat)
    _check_rows_per_beat(rows_per_beat)
    return ticks_per_beat / rows_per_beat


def tick_to_row(
    tick: int, ticks_per_beat: int, rows_per_beat: int = DEFAULT_ROWS_PER_BEAT
) -> int:
    """Convert a tick position to the tracker row it falls on."""
    return int(tick // clocks_per_row(ticks_per_beat, rows_per_beat))


def note_octave(pitch: int) -> int:
    """
    Tracker octave for a MIDI pitch (middle C, 60, is octave 4).

    Pitches below 24 keep their plain ``pitch // 12`` octave, so 0-11 is
    octave 0 and 12-23 is octave 1. The result is clamped to 0-8.
    """
    octave = pitch // 12 - 1
    if octave < 1:
        octave = pitch // 12
    return max(MIN_OCTAVE, min(MAX_OCTAVE, octave))


def note_name(pitch: int) -> str:
    """
    Format a MIDI pitch in tracker notation.

    Example:
        note_name(60) -> "C-4"
        note_name(61) -> "C#4"
    """
    return f"{PITCHES[pitch % 12]}{note_octave(pitch)}"


def max_row(module: Module, rows_per_beat: int = DEFAULT_ROWS_PER_BEAT) -> Optional[int]:
    """
    Last row touched by any note offset.

    Returns:
        Row index, or None for an empty module
    """
    if module.is_empty:
        return None
    return tick_to_row(module.end_time, module.ticks_per_beat, rows_per_beat)
