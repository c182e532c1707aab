"""Dialogs module."""

from .base import (
    MAX_COMPLEXITY,
    DialogFactory,
    DialogStatus,
    IDialog,
    dialog_name,
    push_message,
    push_messages,
)
from .builtin import (
    BUILTIN_DIALOGS,
    DEFAULT_DIALOG,
    DefaultDialog,
    PromptDialog,
    TextDialog,
    prompt_dialog,
    text_dialog,
)
from .locks import UserLocks
from .manager import DIALOGS_KEY, LAST_DIALOG_KEY, DialogManager
from .registry import DialogRegistry

__all__ = [
    "MAX_COMPLEXITY",
    "DialogFactory",
    "DialogStatus",
    "IDialog",
    "dialog_name",
    "push_message",
    "push_messages",
    "BUILTIN_DIALOGS",
    "DEFAULT_DIALOG",
    "DefaultDialog",
    "PromptDialog",
    "TextDialog",
    "prompt_dialog",
    "text_dialog",
    "UserLocks",
    "DIALOGS_KEY",
    "LAST_DIALOG_KEY",
    "DialogManager",
    "DialogRegistry",
]
