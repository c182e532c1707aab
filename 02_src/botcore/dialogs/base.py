"""Dialog handler contract and shared helpers."""

import re
import sys
from enum import Enum
from typing import Any, Callable, Iterable, Protocol

from ..config import BotConfig
from ..models import BotMessage, Entity
from ..storage import IBrain

# Complexity of a dialog that declares none: lowest execution priority.
MAX_COMPLEXITY = sys.maxsize


class DialogStatus(str, Enum):
    """Conversational state a dialog keeps in its own user attributes."""

    READY = "ready"
    WAITING = "waiting"
    COMPLETED = "completed"
    DISCARDED = "discarded"
    BLOCKED = "blocked"


class IDialog(Protocol):
    """A stateful conversational task.

    ``execute`` appends outbound messages to ``messages`` and returns True
    when the dialog is finished (completed or discarded) and must be popped,
    False when it waits for another turn of user input.
    """

    complexity: int

    async def execute(
        self,
        user_id: str,
        messages: list[BotMessage],
        entities: list[Entity],
        is_resumed: bool,
    ) -> bool:
        ...


# Builds a fresh dialog for one turn.
DialogFactory = Callable[[BotConfig, IBrain], IDialog]


def push_message(messages: list[Any], message: Any) -> None:
    messages.append(message)


def push_messages(messages: list[Any], new_messages: Iterable[Any]) -> None:
    for message in new_messages:
        messages.append(message)


def dialog_name(dialog: object) -> str:
    """Name derived from the class name: ``GreetingsDialog`` -> ``greetings``."""
    return re.sub("dialog", "", type(dialog).__name__.lower())
