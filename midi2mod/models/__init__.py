"""Data models for MIDI events, notes and modules."""

from midi2mod.models.event import EventKind, RawEvent
from midi2mod.models.note import Note, NoteKey, PendingOnset
from midi2mod.models.module import Module, assemble_module

__all__ = [
    "EventKind",
    "RawEvent",
    "Note",
    "NoteKey",
    "PendingOnset",
    "Module",
    "assemble_module",
]
