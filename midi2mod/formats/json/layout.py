"""
JSON document layouts for serialized modules.
"""

from enum import Enum


class JsonLayout(Enum):
    """
    Field naming used in the JSON document.

    STANDARD:
        {"time_division": 96, "tracks": [[{"pitch", "onset_time",
        "offset_time", "duration", "channel"}, ...], ...]}

    MIDI2JSON:
        Legacy midi2json naming, {"ppqn": 96, "seq": [[{"note",
        "time_from_start", "off_time_from_start", "duration", "channel"}]]}
    """

    STANDARD = "standard"
    MIDI2JSON = "midi2json"

    @property
    def time_division_field(self) -> str:
        return "time_division" if self is JsonLayout.STANDARD else "ppqn"

    @property
    def tracks_field(self) -> str:
        return "tracks" if self is JsonLayout.STANDARD else "seq"

    @property
    def note_fields(self) -> dict:
        """Map of note attribute name to JSON field name."""
        if self is JsonLayout.STANDARD:
            return {
                "pitch": "pitch",
                "onset_time": "onset_time",
                "offset_time": "offset_time",
                "duration": "duration",
                "channel": "channel",
            }
        return {
            "pitch": "note",
            "onset_time": "time_from_start",
            "offset_time": "off_time_from_start",
            "duration": "duration",
            "channel": "channel",
        }

    @classmethod
    def detect(cls, document: dict) -> "JsonLayout":
        """
        Guess the layout of a parsed document from its top-level keys.

        Raises:
            ValueError: If neither layout matches
        """
        for layout in cls:
            if layout.time_division_field in document and layout.tracks_field in document:
                return layout
        raise ValueError(f"Unrecognized module layout (keys: {sorted(document)})")
