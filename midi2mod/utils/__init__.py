"""Utility functions for midi2mod."""

from midi2mod.utils.validation import (
    InvalidTimeDivisionError,
    MidiFormatError,
    ModuleFormatError,
    ValidationError,
    validate_channel,
    validate_event,
    validate_midi_value,
    validate_tick,
    validate_track,
    validate_ticks_per_beat,
)

__all__ = [
    "InvalidTimeDivisionError",
    "MidiFormatError",
    "ModuleFormatError",
    "ValidationError",
    "validate_channel",
    "validate_event",
    "validate_midi_value",
    "validate_tick",
    "validate_track",
    "validate_ticks_per_beat",
]
