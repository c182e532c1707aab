"""Tracker implementation for creating TraceEvents."""

import uuid
from datetime import datetime, timezone
from typing import Protocol

from ..models import TraceEvent
from ..storage import IBrain


class ITracker(Protocol):
    """Records TraceEvents for a turn."""

    async def track(self, event_type: str, actor: str, data: dict) -> None:
        """Create TraceEvent and save it through the brain."""
        ...


class Tracker:
    """Creates TraceEvents and stores them in the brain."""

    def __init__(self, brain: IBrain):
        self._brain = brain

    async def track(self, event_type: str, actor: str, data: dict) -> None:
        """Create TraceEvent and save it through the brain."""
        trace_event = TraceEvent(
            id=str(uuid.uuid4()),
            event_type=event_type,
            actor=actor,
            data=data,
            timestamp=datetime.now(timezone.utc),
        )
        await self._brain.save_trace_event(trace_event)
