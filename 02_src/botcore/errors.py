"""Exceptions raised by botcore."""


class BotError(Exception):
    """Base class for botcore errors."""


class DialogNotFoundError(BotError):
    """A dialog label could not be resolved to a handler."""

    def __init__(self, label: str):
        super().__init__(f"No dialog registered for label '{label}'")
        self.label = label


class BrainNotInitializedError(BotError, RuntimeError):
    """The brain was used before init() was called."""

    def __init__(self) -> None:
        super().__init__("Brain not initialized")


class ClassificationError(BotError):
    """The classifier produced an answer that could not be parsed."""
