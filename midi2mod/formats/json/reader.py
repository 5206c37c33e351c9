"""
Module JSON reader.

Loads documents written by ModuleJsonWriter (either layout) back into a Module.
"""

import json
from pathlib import Path
from typing import List, Union

from midi2mod.formats.json.layout import JsonLayout
from midi2mod.models.module import Module, assemble_module
from midi2mod.models.note import Note
from midi2mod.utils.validation import ModuleFormatError


class ModuleJsonReader:
    """
    Reader for module JSON documents.

    The layout is detected from the top-level keys. Empty track arrays are
    dropped. Serialized notes carry no source track index, so loaded notes
    get their output track index.

    Example:
        module = ModuleJsonReader.read("song.json")
    """

    @classmethod
    def read(cls, filepath: Union[str, Path]) -> Module:
        """Read a module JSON file."""
        reader = cls()
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> Module:
        """
        Parse a module JSON file.

        Raises:
            FileNotFoundError: If the file does not exist
            ModuleFormatError: If the document is malformed
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        try:
            with open(filepath, "r", encoding="utf-8") as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise ModuleFormatError(f"{filepath} is not UTF-8 text: {e}") from e

        return self.parse_string(text)

    def parse_string(self, text: str) -> Module:
        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise ModuleFormatError(f"Invalid JSON: {e}") from e
        return self.parse_document(document)

    def parse_document(self, document: dict) -> Module:
        """
        Build a Module from an already parsed document.

        Raises:
            ModuleFormatError: On unknown layout or bad note entries
            InvalidTimeDivisionError: If the time division is not positive
        """
        if not isinstance(document, dict):
            raise ModuleFormatError("Module document must be a JSON object")

        try:
            layout = JsonLayout.detect(document)
        except ValueError as e:
            raise ModuleFormatError(str(e)) from e

        raw_tracks = document[layout.tracks_field]
        if not isinstance(raw_tracks, list):
            raise ModuleFormatError(f"'{layout.tracks_field}' must be a list of tracks")

        tracks: List[List[Note]] = []
        for index, raw_track in enumerate(raw_tracks):
            if not isinstance(raw_track, list):
                raise ModuleFormatError(f"Track {index} must be a list of notes")
            if not raw_track:
                # Output tracks are never empty
                continue
            output_index = len(tracks)
            tracks.append([self._parse_note(layout, output_index, raw) for raw in raw_track])

        return assemble_module(document[layout.time_division_field], tracks)

    def _parse_note(self, layout: JsonLayout, track: int, raw: dict) -> Note:
        fields = layout.note_fields
        try:
            return Note(
                track=track,
                channel=int(raw[fields["channel"]]),
                pitch=int(raw[fields["pitch"]]),
                onset_time=int(raw[fields["onset_time"]]),
                offset_time=int(raw[fields["offset_time"]]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ModuleFormatError(f"Invalid note in track {track}: {raw!r} ({e})") from e
