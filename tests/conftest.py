"""Test configuration and fixtures."""

import logging

import mido
import pytest

from midi2mod.models.event import RawEvent


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handler changes made by setup_logging between tests."""
    yield
    logger = logging.getLogger("midi2mod")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def write_midi(tmp_path):
    """
    Return a factory that writes a MIDI file from message lists.

    Each track is a list of mido messages with delta times.
    """

    def _write(tracks, ticks_per_beat=96, name="test.mid", midi_type=1):
        mid = mido.MidiFile(type=midi_type, ticks_per_beat=ticks_per_beat)
        for messages in tracks:
            track = mido.MidiTrack()
            track.extend(messages)
            mid.tracks.append(track)
        path = tmp_path / name
        mid.save(str(path))
        return path

    return _write


@pytest.fixture
def song_midi_file(write_midi):
    """
    Three-track file: a conductor track with no notes, a melody and a bass
    line that ends its notes with velocity-0 note-ons.
    """
    conductor = [
        mido.MetaMessage("set_tempo", tempo=500000, time=0),
        mido.MetaMessage("time_signature", numerator=4, denominator=4, time=0),
    ]
    melody = [
        mido.Message("program_change", channel=0, program=1, time=0),
        mido.Message("note_on", channel=0, note=64, velocity=90, time=0),
        mido.Message("note_off", channel=0, note=64, velocity=0, time=48),
        mido.Message("note_on", channel=0, note=67, velocity=90, time=0),
        mido.Message("note_off", channel=0, note=67, velocity=0, time=48),
    ]
    bass = [
        mido.Message("note_on", channel=1, note=36, velocity=100, time=0),
        mido.Message("note_on", channel=1, note=36, velocity=0, time=96),
    ]
    return write_midi([conductor, melody, bass])


def on(pitch, time, track=0, channel=0, velocity=100):
    """Shorthand for a note-on RawEvent."""
    return RawEvent.note_on(track, channel, pitch, velocity, time)


def off(pitch, time, track=0, channel=0):
    """Shorthand for a note-off RawEvent."""
    return RawEvent.note_off(track, channel, pitch, 0, time)
