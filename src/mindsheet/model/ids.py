"""Identifier allocation for topics, sheets and relationships.

Every Document owns one IdAllocator. Identifiers are strings of the form
``"<kind>-<n>"`` drawn from a single counter shared by all kinds, so no two
entities created through the same allocator ever share an identifier.
"""

from __future__ import annotations

import threading

TOPIC = "topic"
SHEET = "sheet"
RELATIONSHIP = "rel"


class IdAllocator:
    """Monotonic identifier source.

    Example:
        >>> ids = IdAllocator()
        >>> ids.topic_id()
        'topic-1'
        >>> ids.sheet_id()
        'sheet-2'
    """

    def __init__(self, start: int = 1) -> None:
        """Initialize the allocator.

        Args:
            start: First counter value to hand out.
        """
        self._next = start
        self._issued = 0
        self._lock = threading.Lock()

    def next_id(self, kind: str) -> str:
        """Return a fresh identifier for an entity of the given kind."""
        with self._lock:
            value = self._next
            self._next += 1
            self._issued += 1
        return f"{kind}-{value}"

    def topic_id(self) -> str:
        return self.next_id(TOPIC)

    def sheet_id(self) -> str:
        return self.next_id(SHEET)

    def relationship_id(self) -> str:
        return self.next_id(RELATIONSHIP)

    @property
    def issued(self) -> int:
        """Number of identifiers handed out so far."""
        return self._issued

    def __repr__(self) -> str:
        return f"IdAllocator(next={self._next})"
