"""
Note reconstruction from raw note-on / note-off events.

Onsets and offsets are paired per (pitch, track, channel) key. Several onsets
may be open for the same key at once (retriggered or legato notes); they are
closed first-in first-out, so the oldest open onset is ended by the next
note-off for that key.

Pairing anomalies are never errors:

- a note-off with no open onset for its key is discarded
- onsets still open when the input ends are dropped without emitting a note
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, Iterable, List, Optional

from midi2mod.models.event import EventKind, RawEvent
from midi2mod.models.note import Note, NoteKey, PendingOnset
from midi2mod.utils.validation import validate_event

logger = logging.getLogger(__name__)


@dataclass
class ReconstructionStats:
    """Counters describing one reconstruction pass."""

    matched: int = 0
    unmatched_offsets: int = 0
    unterminated_onsets: int = 0

    @property
    def dropped(self) -> int:
        return self.unmatched_offsets + self.unterminated_onsets


class NoteReconstructor:
    """
    Pairs note-on and note-off events into Notes.

    Each call to ``reconstruct`` works on its own pairing state, so one
    instance can be reused (or shared) safely. ``last_stats`` only reports
    on the most recent call.

    Example:
        notes = NoteReconstructor().reconstruct(events)
    """

    def __init__(self):
        self.last_stats: Optional[ReconstructionStats] = None

    def reconstruct(self, events: Iterable[RawEvent]) -> List[Note]:
        """
        Pair onsets with offsets in a single pass over ``events``.

        Args:
            events: Raw events in delivery order; not modified

        Returns:
            Notes in the order their note-off arrived (unsorted)

        Raises:
            ValidationError: If a note event carries out-of-range fields
        """
        pending: Dict[NoteKey, Deque[PendingOnset]] = {}
        notes: List[Note] = []
        stats = ReconstructionStats()

        for event in events:
            if event.kind == EventKind.NOTE_ON:
                validate_event(event)
                key = NoteKey(event.pitch, event.track, event.channel)
                queue = pending.get(key)
                if queue is None:
                    queue = pending[key] = deque()
                queue.append(PendingOnset(onset_time=event.time, channel=event.channel))

            elif event.kind == EventKind.NOTE_OFF:
                validate_event(event)
                key = NoteKey(event.pitch, event.track, event.channel)
                queue = pending.get(key)
                if not queue:
                    # No open onset for this key: drop the note-off
                    stats.unmatched_offsets += 1
                    continue
                onset = queue.popleft()
                notes.append(
                    Note(
                        track=event.track,
                        channel=onset.channel,
                        pitch=event.pitch,
                        onset_time=onset.onset_time,
                        offset_time=event.time,
                    )
                )
                stats.matched += 1

            # Any other kind is ignored

        for key, queue in pending.items():
            if queue:
                # Never closed: dropped without a note
                stats.unterminated_onsets += len(queue)
                logger.debug(
                    "Dropping %d unterminated onset(s) for pitch %d track %d channel %d",
                    len(queue),
                    key.pitch,
                    key.track,
                    key.channel,
                )

        logger.debug(
            "Reconstructed %d notes (%d unmatched note-offs, %d unterminated onsets)",
            stats.matched,
            stats.unmatched_offsets,
            stats.unterminated_onsets,
        )
        self.last_stats = stats
        return notes


def reconstruct_notes(events: Iterable[RawEvent]) -> List[Note]:
    """Convenience wrapper around NoteReconstructor.reconstruct."""
    return NoteReconstructor().reconstruct(events)
