"""Tracing and observability data models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class TraceEvent:
    """A single observability event recorded during a turn."""

    id: str
    event_type: str  # e.g. "message_received", "dialog_executed"
    actor: str  # who created this event
    data: dict
    timestamp: datetime
