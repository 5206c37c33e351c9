"""
Data validation utilities and error types.
"""


class ValidationError(Exception):
    """Raised when event or module data validation fails."""

    pass


class InvalidTimeDivisionError(ValidationError):
    """Raised when the ticks-per-beat value is not a positive integer."""

    pass


class MidiFormatError(ValidationError):
    """Raised when a MIDI file cannot be decoded."""

    pass


class ModuleFormatError(ValidationError):
    """Raised when a serialized module document is malformed."""

    pass


def validate_midi_value(value: int, name: str = "value") -> None:
    """
    Validate that a value is in MIDI range (0-127).

    Args:
        value: The value to validate
        name: Name of the value for error messages

    Raises:
        ValidationError: If value is out of range
    """
    if not 0 <= value <= 127:
        raise ValidationError(f"{name} must be 0-127, got {value}")


def validate_channel(channel: int) -> None:
    """
    Validate a zero-based MIDI channel number (0-15).

    Raises:
        ValidationError: If channel is out of range
    """
    if not 0 <= channel <= 15:
        raise ValidationError(f"MIDI channel must be 0-15, got {channel}")


def validate_track(track: int) -> None:
    """Validate a track index (non-negative)."""
    if track < 0:
        raise ValidationError(f"Track index must be >= 0, got {track}")


def validate_tick(tick: int, name: str = "time") -> None:
    """Validate a tick count (non-negative)."""
    if tick < 0:
        raise ValidationError(f"{name} must be >= 0 ticks, got {tick}")


def validate_ticks_per_beat(ticks_per_beat: int) -> None:
    """
    Validate a time-division value.

    Args:
        ticks_per_beat: Ticks per quarter note from the file header

    Raises:
        InvalidTimeDivisionError: If the value is not a positive integer
    """
    if isinstance(ticks_per_beat, bool) or not isinstance(ticks_per_beat, int):
        raise InvalidTimeDivisionError(
            f"Ticks per beat must be an integer, got {ticks_per_beat!r}"
        )
    if ticks_per_beat <= 0:
        raise InvalidTimeDivisionError(f"Ticks per beat must be > 0, got {ticks_per_beat}")


def validate_event(event) -> None:
    """
    Validate a raw event before it takes part in note pairing.

    Raises:
        ValidationError: With all problems found, joined by "; "
    """
    errors = event.validate()
    if errors:
        raise ValidationError("; ".join(errors))
