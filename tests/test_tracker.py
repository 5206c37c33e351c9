"""Tests for tracker timing and note-naming helpers."""

import pytest

from midi2mod.models.module import assemble_module
from midi2mod.models.note import Note
from midi2mod.utils.tracker import clocks_per_row, max_row, note_name, note_octave, tick_to_row
from midi2mod.utils.validation import InvalidTimeDivisionError, ValidationError


class TestNoteNames:
    """Test cases for tracker note naming."""

    @pytest.mark.parametrize(
        "pitch, name",
        [(60, "C-4"), (61, "C#4"), (69, "A-4"), (71, "B-4"), (36, "C-2")],
    )
    def test_note_name(self, pitch, name):
        assert note_name(pitch) == name

    def test_octave_clamped_low(self):
        assert note_octave(0) == 0
        assert note_name(5) == "F-0"

    def test_octave_clamped_high(self):
        assert note_octave(127) == 8
        assert note_name(127) == "G-8"

    @pytest.mark.parametrize(
        "pitch, name",
        [(0, "C-0"), (12, "C-1"), (23, "B-1"), (24, "C-1"), (60, "C-4")],
    )
    def test_low_octaves_keep_plain_division(self, pitch, name):
        """Pitches below 24 are not shifted down an octave."""
        assert note_name(pitch) == name


class TestRows:
    """Test cases for tick to row conversion."""

    def test_clocks_per_row(self):
        assert clocks_per_row(96, 4) == 24
        assert clocks_per_row(480, 8) == 60

    def test_tick_to_row(self):
        assert tick_to_row(0, 96) == 0
        assert tick_to_row(23, 96) == 0
        assert tick_to_row(24, 96) == 1
        assert tick_to_row(96, 96, rows_per_beat=2) == 2

    def test_invalid_rows_per_beat(self):
        with pytest.raises(ValidationError):
            clocks_per_row(96, 0)

    def test_invalid_time_division(self):
        with pytest.raises(InvalidTimeDivisionError):
            tick_to_row(10, 0)

    def test_max_row(self):
        module = assemble_module(96, [[Note(0, 0, 60, 0, 100)], [Note(1, 0, 62, 0, 190)]])

        assert max_row(module) == 7
        assert max_row(module, rows_per_beat=1) == 1

    def test_max_row_empty(self):
        assert max_row(assemble_module(96, [])) is None
