"""Dialogs shipped with botcore."""

from ..config import BotConfig
from ..logging_config import get_logger
from ..models import BotMessage, Entity
from ..storage import IBrain
from .base import MAX_COMPLEXITY, DialogFactory, DialogStatus, dialog_name, push_message

logger = get_logger(__name__)

DEFAULT_DIALOG = "default_dialog"


class DefaultDialog:
    """Answers when nothing was understood."""

    complexity = MAX_COMPLEXITY

    def __init__(self, config: BotConfig, brain: IBrain):
        self.config = config
        self.brain = brain
        self.name = dialog_name(self)

    async def execute(
        self,
        user_id: str,
        messages: list[BotMessage],
        entities: list[Entity],
        is_resumed: bool,
    ) -> bool:
        push_message(
            messages,
            BotMessage.text(self.config.bot_id, user_id, self.config.default_message),
        )
        return True


class TextDialog:
    """Replies with a fixed text and completes."""

    complexity = MAX_COMPLEXITY

    def __init__(self, config: BotConfig, brain: IBrain, text: str):
        self.config = config
        self.brain = brain
        self.text = text

    async def execute(
        self,
        user_id: str,
        messages: list[BotMessage],
        entities: list[Entity],
        is_resumed: bool,
    ) -> bool:
        push_message(messages, BotMessage.text(self.config.bot_id, user_id, self.text))
        return True


def text_dialog(text: str) -> DialogFactory:
    """Factory for a TextDialog replying ``text``."""

    def build(config: BotConfig, brain: IBrain) -> TextDialog:
        return TextDialog(config, brain, text)

    return build


class PromptDialog:
    """Collects entities over several turns, asking for each missing one.

    Progress lives in the user attributes ``<name>_status`` and
    ``<name>_entities``. ``questions`` maps an entity dimension to the
    question asked while that dimension is missing; ``confirmation`` is
    formatted with the collected values once all of them are known.
    """

    def __init__(
        self,
        config: BotConfig,
        brain: IBrain,
        name: str,
        questions: dict[str, str],
        confirmation: str,
        complexity: int = MAX_COMPLEXITY,
    ):
        self.config = config
        self.brain = brain
        self.name = name
        self.questions = questions
        self.confirmation = confirmation
        self.complexity = complexity

    @property
    def status_key(self) -> str:
        return f"{self.name}_status"

    @property
    def entities_key(self) -> str:
        return f"{self.name}_entities"

    async def execute(
        self,
        user_id: str,
        messages: list[BotMessage],
        entities: list[Entity],
        is_resumed: bool,
    ) -> bool:
        status = await self.brain.user_get(user_id, self.status_key)
        collected: dict = {}
        if status == DialogStatus.WAITING.value:
            collected = await self.brain.user_get(user_id, self.entities_key) or {}

        for entity in entities:
            dim = entity.get("dim")
            if dim in self.questions:
                collected[dim] = entity.get("value")

        missing = [dim for dim in self.questions if dim not in collected]
        logger.debug("PromptDialog %s: collected=%s missing=%s", self.name, collected, missing)

        if missing:
            push_message(
                messages,
                BotMessage.text(self.config.bot_id, user_id, self.questions[missing[0]]),
            )
            await self.brain.user_set(user_id, self.entities_key, collected)
            await self.brain.user_set(user_id, self.status_key, DialogStatus.WAITING.value)
            return False

        push_message(
            messages,
            BotMessage.text(
                self.config.bot_id, user_id, self.confirmation.format(**collected)
            ),
        )
        await self.brain.user_set(user_id, self.entities_key, {})
        await self.brain.user_set(user_id, self.status_key, DialogStatus.COMPLETED.value)
        return True


def prompt_dialog(
    name: str,
    questions: dict[str, str],
    confirmation: str,
    complexity: int = MAX_COMPLEXITY,
) -> DialogFactory:
    """Factory for a PromptDialog."""

    def build(config: BotConfig, brain: IBrain) -> PromptDialog:
        return PromptDialog(config, brain, name, questions, confirmation, complexity)

    return build


BUILTIN_DIALOGS: dict[str, DialogFactory] = {
    DEFAULT_DIALOG: DefaultDialog,
}
