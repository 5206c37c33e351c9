"""
Track sequencing: per-track sorting and compaction of reconstructed notes.
"""

from typing import Dict, Iterable, List

from midi2mod.models.note import Note


def group_by_track(notes: Iterable[Note]) -> Dict[int, List[Note]]:
    """
    Group notes by source track index, keeping their relative order.

    Returns:
        Mapping of track index to that track's notes
    """
    tracks: Dict[int, List[Note]] = {}
    for note in notes:
        tracks.setdefault(note.track, []).append(note)
    return tracks


def sort_track(notes: Iterable[Note]) -> List[Note]:
    """
    Sort one track's notes by onset time, then pitch.

    The sort is stable: notes sharing onset time and pitch keep the order
    they were given in.
    """
    return sorted(notes, key=lambda note: note.sort_key)


def sequence_tracks(notes_by_track: Dict[int, Iterable[Note]]) -> List[List[Note]]:
    """
    Build the compacted, sorted track list.

    Tracks without notes are left out and the rest keep their source order,
    so output index ``i`` is the ``i``-th non-empty source track, not
    source track ``i``.

    Args:
        notes_by_track: Unordered notes keyed by source track index

    Returns:
        List of sorted, non-empty note lists
    """
    sequenced = []
    for track_index in sorted(notes_by_track):
        track = sort_track(notes_by_track[track_index])
        if not track:
            continue
        sequenced.append(track)
    return sequenced


def sequence_notes(notes: Iterable[Note]) -> List[List[Note]]:
    """Group a flat note collection by track and sequence it."""
    return sequence_tracks(group_by_track(notes))
