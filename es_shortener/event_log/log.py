"""
Append-only event log.

Rules enforced:
- Append-only: events are stored in insertion order and never modified.
- Sequential: every appended event carries sequence == len(log) + 1.
- No business logic: the log does not interpret event payloads.
"""

from typing import Iterator, List, Tuple

from es_shortener.domain.errors import EventSequenceError
from es_shortener.domain.events import Event


class EventLog:
    """In-memory, process-lifetime event log."""

    def __init__(self):
        self._events: List[Event] = []

    def next_sequence(self) -> int:
        """Sequence number the next appended event must carry."""
        return len(self._events) + 1

    def append(self, event: Event) -> Event:
        expected = self.next_sequence()
        if event.sequence != expected:
            raise EventSequenceError(expected=expected, actual=event.sequence)
        self._events.append(event)
        return event

    def events(self, after: int = 0) -> Tuple[Event, ...]:
        """
        Snapshot of the log.

        Args:
            after: Only return events with a sequence greater than this

        Returns:
            Events in append order
        """
        # sequence == index + 1, so slicing by `after` is exact
        return tuple(self._events[max(after, 0):])

    def clear(self) -> None:
        """Drop all events. Only the owning service calls this, on reset."""
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(self.events())
