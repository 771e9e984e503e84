"""Monotonic template identifiers."""

from __future__ import annotations

from sqlalchemy.orm import Session

from .state_store import StateStore

NEXT_ID_KEY = "next_id"


class IdAllocator:
    """Hand out ids from a durable counter; ids are never reused."""

    def __init__(self, state: StateStore) -> None:
        self._state = state

    def allocate(self, session: Session) -> int:
        """Return the next unused id and advance the counter."""
        current = self._state.read(session, NEXT_ID_KEY) or 0
        self._state.upsert(session, NEXT_ID_KEY, current + 1)
        return int(current)
