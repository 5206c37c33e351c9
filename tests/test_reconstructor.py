"""Tests for note reconstruction (onset/offset pairing)."""

import logging

import pytest

from midi2mod.converters.reconstructor import NoteReconstructor, reconstruct_notes
from midi2mod.models.event import EventKind, RawEvent
from midi2mod.models.note import Note
from midi2mod.utils.validation import ValidationError

from conftest import off, on


def spans(notes):
    return sorted((n.onset_time, n.offset_time) for n in notes)


class TestPairing:
    """Test cases for basic onset/offset pairing."""

    def test_single_note(self):
        notes = reconstruct_notes([on(60, 0), off(60, 24)])

        assert notes == [Note(track=0, channel=0, pitch=60, onset_time=0, offset_time=24)]
        assert notes[0].duration == 24

    def test_overlapping_onsets_pair_fifo(self):
        """The first note-off closes the oldest open onset."""
        events = [on(60, 0), on(60, 5), off(60, 10), off(60, 20)]

        notes = reconstruct_notes(events)

        assert spans(notes) == [(0, 10), (5, 20)]

    def test_zero_length_note(self):
        notes = reconstruct_notes([on(60, 12), off(60, 12)])

        assert len(notes) == 1
        assert notes[0].duration == 0

    def test_same_pitch_on_different_tracks(self):
        """Same pitch on two tracks must not close each other."""
        events = [
            on(60, 0, track=0),
            on(60, 4, track=1),
            off(60, 8, track=1),
            off(60, 16, track=0),
        ]

        notes = reconstruct_notes(events)

        by_track = {n.track: (n.onset_time, n.offset_time) for n in notes}
        assert by_track == {0: (0, 16), 1: (4, 8)}

    def test_same_pitch_on_different_channels(self):
        events = [
            on(60, 0, channel=0),
            on(60, 4, channel=9),
            off(60, 8, channel=0),
            off(60, 16, channel=9),
        ]

        notes = reconstruct_notes(events)

        by_channel = {n.channel: (n.onset_time, n.offset_time) for n in notes}
        assert by_channel == {0: (0, 8), 9: (4, 16)}

    def test_notes_emitted_in_offset_order(self):
        events = [on(60, 0), on(64, 0), off(64, 10), off(60, 20)]

        notes = reconstruct_notes(events)

        assert [n.pitch for n in notes] == [64, 60]

    def test_other_events_ignored(self):
        events = [
            RawEvent.other(0, 0, time=0),
            on(60, 0),
            RawEvent.other(0, 0, time=5),
            off(60, 10),
        ]

        reconstructor = NoteReconstructor()
        notes = reconstructor.reconstruct(events)

        assert len(notes) == 1
        assert reconstructor.last_stats.matched == 1
        assert reconstructor.last_stats.dropped == 0


class TestSilentDrops:
    """Unmatched events are dropped without errors."""

    def test_lone_note_off(self):
        reconstructor = NoteReconstructor()

        notes = reconstructor.reconstruct([off(60, 10)])

        assert notes == []
        assert reconstructor.last_stats.unmatched_offsets == 1

    def test_lone_note_on(self):
        reconstructor = NoteReconstructor()

        notes = reconstructor.reconstruct([on(60, 0)])

        assert notes == []
        assert reconstructor.last_stats.unterminated_onsets == 1

    def test_extra_note_off_after_match(self):
        notes = reconstruct_notes([on(60, 0), off(60, 10), off(60, 20)])

        assert spans(notes) == [(0, 10)]

    def test_note_off_for_other_key_does_not_close(self):
        notes = reconstruct_notes([on(60, 0), off(62, 10), off(60, 30, track=1)])

        assert notes == []

    def test_unterminated_onset_after_matches(self):
        reconstructor = NoteReconstructor()

        notes = reconstructor.reconstruct([on(60, 0), on(60, 4), off(60, 8)])

        assert spans(notes) == [(0, 8)]
        assert reconstructor.last_stats.unterminated_onsets == 1

    def test_dropped_onsets_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="midi2mod.converters.reconstructor")

        reconstruct_notes([on(72, 0, track=2, channel=3)])

        assert "unterminated onset" in caplog.text

    def test_empty_input(self):
        assert reconstruct_notes([]) == []


class TestReconstructorProperties:
    """General properties of the reconstruction pass."""

    @pytest.fixture
    def busy_events(self):
        return [
            on(60, 0),
            on(60, 2),
            on(64, 2, channel=1),
            off(60, 3),
            off(62, 4),
            on(60, 5),
            off(64, 6, channel=1),
            off(60, 9),
            off(60, 9),
            off(60, 12),
            on(67, 12),
        ]

    def test_offset_never_before_onset(self, busy_events):
        for note in reconstruct_notes(busy_events):
            assert note.offset_time >= note.onset_time

    def test_note_count_bounded_by_pairs(self, busy_events):
        notes = reconstruct_notes(busy_events)

        pitch_60 = [n for n in notes if n.pitch == 60]
        onsets = sum(1 for e in busy_events if e.is_note_on and e.pitch == 60)
        offsets = sum(1 for e in busy_events if e.is_note_off and e.pitch == 60)
        assert len(pitch_60) == min(onsets, offsets) == 3
        assert spans(pitch_60) == [(0, 3), (2, 9), (5, 9)]

    def test_input_not_mutated(self, busy_events):
        snapshot = list(busy_events)

        reconstruct_notes(busy_events)

        assert busy_events == snapshot

    def test_repeated_runs_identical(self, busy_events):
        reconstructor = NoteReconstructor()

        first = reconstructor.reconstruct(busy_events)
        second = reconstructor.reconstruct(busy_events)

        assert first == second

    def test_accepts_generator(self):
        events = (e for e in [on(60, 0), off(60, 1)])

        assert len(reconstruct_notes(events)) == 1

    def test_invalid_pitch_rejected(self):
        bad = RawEvent(track=0, channel=0, kind=EventKind.NOTE_ON, pitch=128, time=0)

        with pytest.raises(ValidationError, match="pitch"):
            reconstruct_notes([bad])

    def test_invalid_channel_rejected(self):
        bad = RawEvent(track=0, channel=16, kind=EventKind.NOTE_OFF, pitch=60, time=0)

        with pytest.raises(ValidationError, match="channel"):
            reconstruct_notes([bad])
