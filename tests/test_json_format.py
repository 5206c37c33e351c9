"""Tests for module JSON writer and reader."""

import json

import pytest

from midi2mod.formats.json.layout import JsonLayout
from midi2mod.formats.json.reader import ModuleJsonReader
from midi2mod.formats.json.writer import ModuleJsonWriter
from midi2mod.models.module import assemble_module
from midi2mod.models.note import Note
from midi2mod.utils.validation import InvalidTimeDivisionError, ModuleFormatError


@pytest.fixture
def module():
    return assemble_module(
        96,
        [
            [Note(1, 0, 60, 0, 48), Note(1, 0, 64, 0, 96)],
            [Note(4, 9, 36, 24, 24)],
        ],
    )


class TestModuleJsonWriter:
    """Test cases for ModuleJsonWriter."""

    def test_standard_layout(self, module):
        document = ModuleJsonWriter().to_dict(module)

        assert document["time_division"] == 96
        assert len(document["tracks"]) == 2
        assert document["tracks"][0][1] == {
            "pitch": 64,
            "onset_time": 0,
            "offset_time": 96,
            "duration": 96,
            "channel": 0,
        }

    def test_midi2json_layout(self, module):
        document = ModuleJsonWriter(layout=JsonLayout.MIDI2JSON).to_dict(module)

        assert document["ppqn"] == 96
        assert document["seq"][1] == [
            {
                "note": 36,
                "time_from_start": 24,
                "off_time_from_start": 24,
                "duration": 0,
                "channel": 9,
            }
        ]

    def test_compact_by_default(self, module):
        text = ModuleJsonWriter().to_json(module)

        assert "\n" not in text
        assert " " not in text

    def test_indent(self, module):
        text = ModuleJsonWriter(indent=2).to_json(module)

        assert "\n  " in text
        assert json.loads(text) == ModuleJsonWriter().to_dict(module)

    def test_empty_module(self):
        text = ModuleJsonWriter().to_json(assemble_module(480, []))

        assert text == '{"time_division":480,"tracks":[]}'

    def test_write_file(self, module, tmp_path):
        path = tmp_path / "out" / "song.json"

        ModuleJsonWriter.write(module, path, layout=JsonLayout.MIDI2JSON)

        assert path.exists()
        assert json.loads(path.read_text(encoding="utf-8"))["ppqn"] == 96


class TestModuleJsonReader:
    """Test cases for ModuleJsonReader."""

    @pytest.mark.parametrize("layout", list(JsonLayout))
    def test_read_written_file(self, module, tmp_path, layout):
        path = tmp_path / "song.json"
        ModuleJsonWriter.write(module, path, layout=layout)

        loaded = ModuleJsonReader.read(path)

        assert loaded.ticks_per_beat == 96
        assert [[(n.pitch, n.onset_time, n.offset_time, n.channel) for n in t] for t in loaded.tracks] == [
            [(60, 0, 48, 0), (64, 0, 96, 0)],
            [(36, 24, 24, 9)],
        ]

    def test_loaded_notes_use_output_track_index(self, module):
        loaded = ModuleJsonReader().parse_string(ModuleJsonWriter().to_json(module))

        assert [t[0].track for t in loaded.tracks] == [0, 1]

    def test_layout_detection(self):
        assert JsonLayout.detect({"ppqn": 1, "seq": []}) is JsonLayout.MIDI2JSON
        assert JsonLayout.detect({"time_division": 1, "tracks": []}) is JsonLayout.STANDARD
        with pytest.raises(ValueError):
            JsonLayout.detect({"tracks": []})

    def test_invalid_json(self):
        with pytest.raises(ModuleFormatError, match="Invalid JSON"):
            ModuleJsonReader().parse_string("{not json")

    def test_unknown_layout(self):
        with pytest.raises(ModuleFormatError):
            ModuleJsonReader().parse_string('{"foo": 1}')

    def test_missing_note_field(self):
        text = '{"time_division": 96, "tracks": [[{"pitch": 60, "onset_time": 0}]]}'

        with pytest.raises(ModuleFormatError, match="track 0"):
            ModuleJsonReader().parse_string(text)

    def test_offset_before_onset(self):
        text = (
            '{"time_division": 96, "tracks": [[{"pitch": 60, "onset_time": 10, '
            '"offset_time": 5, "duration": -5, "channel": 0}]]}'
        )

        with pytest.raises(ModuleFormatError):
            ModuleJsonReader().parse_string(text)

    def test_bad_time_division(self):
        with pytest.raises(InvalidTimeDivisionError):
            ModuleJsonReader().parse_string('{"time_division": 0, "tracks": []}')

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ModuleJsonReader.read(tmp_path / "nope.json")

    def test_empty_track_is_dropped(self):
        module = ModuleJsonReader().parse_string('{"time_division": 96, "tracks": [[]]}')

        assert module.tracks == ()
        assert module.is_empty

    def test_empty_track_does_not_shift_indices(self):
        text = (
            '{"time_division": 96, "tracks": [[], [{"pitch": 60, "onset_time": 0, '
            '"offset_time": 48, "duration": 48, "channel": 2}]]}'
        )

        module = ModuleJsonReader().parse_string(text)

        assert module.track_count == 1
        assert module.tracks[0][0].track == 0
        assert module.tracks[0][0].channel == 2

    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"time_division": 96, "tracks": [], "title": "\xff"}')

        with pytest.raises(ModuleFormatError, match="UTF-8"):
            ModuleJsonReader.read(path)
