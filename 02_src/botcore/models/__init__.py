"""Core data models for botcore."""

from .dialogs import DialogStack, DialogStackEntry, Entity, IntentCandidate
from .messages import (
    Action,
    BotMessage,
    Card,
    PostbackMessage,
    UserMessage,
    UserTextMessage,
)
from .tracing import TraceEvent

__all__ = [
    # Dialogs
    "Entity",
    "IntentCandidate",
    "DialogStackEntry",
    "DialogStack",
    # Messages
    "Action",
    "Card",
    "BotMessage",
    "UserTextMessage",
    "PostbackMessage",
    "UserMessage",
    # Tracing
    "TraceEvent",
]
