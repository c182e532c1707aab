"""Per-user key/value store interface and in-memory implementation."""

import copy
from datetime import datetime, timezone
from typing import Any, Protocol

from ..models import TraceEvent


class IBrain(Protocol):
    """Per-user attribute storage ("brain")."""

    async def init(self) -> None:
        """Open the store."""
        ...

    async def close(self) -> None:
        """Release the store."""
        ...

    # Users
    async def has_user(self, user_id: str) -> bool:
        """Check whether a user exists."""
        ...

    async def add_user(self, user_id: str) -> None:
        """Create a user with an empty dialog stack; existing attributes are kept."""
        ...

    async def init_user_if_necessary(self, user_id: str) -> None:
        """Create the user on first contact. Idempotent."""
        ...

    async def get_user(self, user_id: str) -> dict | None:
        """Get all attributes of a user."""
        ...

    # Attributes
    async def user_get(self, user_id: str, key: str) -> Any:
        """Get one attribute of a user, None if unset."""
        ...

    async def user_set(self, user_id: str, key: str, value: Any) -> None:
        """Set one attribute of a user."""
        ...

    # TraceEvents
    async def save_trace_event(self, event: TraceEvent) -> None:
        """Save a trace event."""
        ...

    async def get_trace_events(
        self,
        after: datetime | None = None,
        event_types: list[str] | None = None,
        actor: str | None = None,
        limit: int = 100,
    ) -> list[TraceEvent]:
        """Get trace events with optional filters (newest first)."""
        ...

    # Lifecycle
    async def clean(self) -> None:
        """Drop all users and events."""
        ...


def new_user_attributes() -> dict:
    """Attributes every user starts with."""
    return {
        "dialogs": [],
        "created_at": datetime.now(timezone.utc).isoformat(),
    }


class MemoryBrain:
    """Brain kept in process memory. Values are copied in and out."""

    def __init__(self) -> None:
        self._users: dict[str, dict[str, Any]] = {}
        self._events: list[TraceEvent] = []

    async def init(self) -> None:
        return

    async def close(self) -> None:
        return

    async def has_user(self, user_id: str) -> bool:
        return user_id in self._users

    async def add_user(self, user_id: str) -> None:
        user = self._users.setdefault(user_id, {})
        for key, value in new_user_attributes().items():
            user.setdefault(key, value)

    async def init_user_if_necessary(self, user_id: str) -> None:
        if not await self.has_user(user_id):
            await self.add_user(user_id)

    async def get_user(self, user_id: str) -> dict | None:
        user = self._users.get(user_id)
        return copy.deepcopy(user) if user is not None else None

    async def user_get(self, user_id: str, key: str) -> Any:
        user = self._users.get(user_id, {})
        return copy.deepcopy(user.get(key))

    async def user_set(self, user_id: str, key: str, value: Any) -> None:
        user = self._users.setdefault(user_id, new_user_attributes())
        user[key] = copy.deepcopy(value)

    async def save_trace_event(self, event: TraceEvent) -> None:
        self._events.append(event)

    async def get_trace_events(
        self,
        after: datetime | None = None,
        event_types: list[str] | None = None,
        actor: str | None = None,
        limit: int = 100,
    ) -> list[TraceEvent]:
        events = [
            event
            for event in self._events
            if (after is None or event.timestamp > after)
            and (not event_types or event.event_type in event_types)
            and (actor is None or event.actor == actor)
        ]
        events.sort(key=lambda event: event.timestamp, reverse=True)
        return events[:limit]

    async def clean(self) -> None:
        self._users.clear()
        self._events.clear()
