"""botcore: turn-based dialog orchestration for chatbots."""

from .bot import Bot, IBot
from .config import BotConfig
from .dialogs import (
    DialogManager,
    DialogRegistry,
    DialogStatus,
    IDialog,
    PromptDialog,
    TextDialog,
)
from .errors import BotError, DialogNotFoundError
from .models import (
    BotMessage,
    DialogStack,
    DialogStackEntry,
    IntentCandidate,
    PostbackMessage,
    TraceEvent,
    UserTextMessage,
)
from .nlu import (
    IClassifier,
    IEntityExtractor,
    LLMClassifier,
    PatternClassifier,
    RegexEntityExtractor,
)
from .storage import IBrain, MemoryBrain, SqliteBrain
from .tracker import ITracker, Tracker

__all__ = [
    # Bot
    "Bot",
    "IBot",
    "BotConfig",
    # Models
    "IntentCandidate",
    "DialogStackEntry",
    "DialogStack",
    "BotMessage",
    "UserTextMessage",
    "PostbackMessage",
    "TraceEvent",
    # Dialogs
    "IDialog",
    "DialogStatus",
    "DialogRegistry",
    "DialogManager",
    "PromptDialog",
    "TextDialog",
    # Components
    "IBrain",
    "MemoryBrain",
    "SqliteBrain",
    "IClassifier",
    "LLMClassifier",
    "PatternClassifier",
    "IEntityExtractor",
    "RegexEntityExtractor",
    "ITracker",
    "Tracker",
    # Errors
    "BotError",
    "DialogNotFoundError",
]
