"""Channel-agnostic message models."""

from dataclasses import asdict, dataclass, field
from typing import Any, Literal

from .dialogs import Entity

MessageType = Literal["text", "quickreplies", "image", "actions", "cards"]


@dataclass
class Action:
    """A button attached to an actions or cards message."""

    type: Literal["postback", "link"]
    text: str
    value: Any  # {"dialog": ..., "entities": [...]} for postbacks, url for links

    @classmethod
    def postback(
        cls, text: str, dialog: str, entities: list[Entity] | None = None
    ) -> "Action":
        return cls("postback", text, {"dialog": dialog, "entities": entities or []})

    @classmethod
    def link(cls, text: str, url: str) -> "Action":
        return cls("link", text, url)


@dataclass
class Card:
    """A card of a carousel."""

    title: str
    image_url: str | None = None
    buttons: list[Action] = field(default_factory=list)


@dataclass
class BotMessage:
    """An outbound message produced by a dialog."""

    type: MessageType
    bot: str
    user: str
    value: Any
    options: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Serialize as {type, bot, user, payload: {value, options}}."""
        value = self.value
        if self.type in ("actions", "cards"):
            value = [asdict(item) for item in self.value]
        return {
            "type": self.type,
            "bot": self.bot,
            "user": self.user,
            "payload": {"value": value, "options": self.options},
        }

    @classmethod
    def text(cls, bot: str, user: str, text: str, **options: Any) -> "BotMessage":
        return cls("text", bot, user, text, options)

    @classmethod
    def quickreplies(
        cls, bot: str, user: str, replies: list[str], text: str
    ) -> "BotMessage":
        return cls("quickreplies", bot, user, list(replies), {"text": text})

    @classmethod
    def image(cls, bot: str, user: str, url: str) -> "BotMessage":
        return cls("image", bot, user, url)

    @classmethod
    def actions(
        cls, bot: str, user: str, actions: list[Action], text: str
    ) -> "BotMessage":
        return cls("actions", bot, user, list(actions), {"text": text})

    @classmethod
    def cards(cls, bot: str, user: str, cards: list[Card]) -> "BotMessage":
        return cls("cards", bot, user, list(cards))


@dataclass
class UserTextMessage:
    """Free text typed by a user."""

    user: str
    text: str


@dataclass
class PostbackMessage:
    """A button press that names the dialog to trigger."""

    user: str
    dialog: str
    entities: list[Entity] = field(default_factory=list)


UserMessage = UserTextMessage | PostbackMessage
