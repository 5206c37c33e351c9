"""
Module JSON writer.

Writes Module objects as JSON documents for downstream templating.
"""

import json
from pathlib import Path
from typing import Optional, Union

from midi2mod.formats.json.layout import JsonLayout
from midi2mod.models.module import Module
from midi2mod.models.note import Note


class ModuleJsonWriter:
    """
    Writer for module JSON documents.

    Output is compact by default; pass ``indent`` for pretty printing.

    Example:
        ModuleJsonWriter.write(module, "song.json")
        ModuleJsonWriter(layout=JsonLayout.MIDI2JSON, indent=2).to_json(module)
    """

    def __init__(self, layout: JsonLayout = JsonLayout.STANDARD, indent: Optional[int] = None):
        self.layout = layout
        self.indent = indent

    @classmethod
    def write(
        cls,
        module: Module,
        filepath: Union[str, Path],
        layout: JsonLayout = JsonLayout.STANDARD,
        indent: Optional[int] = None,
    ) -> None:
        """
        Write a Module to a JSON file.

        Args:
            module: Module to write
            filepath: Output file path
            layout: Field naming to use
            indent: Indentation for pretty printing, None for compact
        """
        writer = cls(layout=layout, indent=indent)
        writer.write_file(module, filepath)

    def write_file(self, module: Module, filepath: Union[str, Path]) -> None:
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, "w", encoding="utf-8") as f:
            f.write(self.to_json(module))

    def to_json(self, module: Module) -> str:
        """Serialize a Module to a JSON string."""
        if self.indent is None:
            return json.dumps(self.to_dict(module), separators=(",", ":"))
        return json.dumps(self.to_dict(module), indent=self.indent)

    def to_dict(self, module: Module) -> dict:
        """Build the JSON-ready document for a Module."""
        return {
            self.layout.time_division_field: module.ticks_per_beat,
            self.layout.tracks_field: [
                [self.note_to_dict(note) for note in track] for track in module.tracks
            ],
        }

    def note_to_dict(self, note: Note) -> dict:
        fields = self.layout.note_fields
        return {
            fields["pitch"]: note.pitch,
            fields["onset_time"]: note.onset_time,
            fields["offset_time"]: note.offset_time,
            fields["duration"]: note.duration,
            fields["channel"]: note.channel,
        }
