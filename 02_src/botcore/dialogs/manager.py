"""DialogManager: turns classified intents into a dialog stack and runs it."""

from ..config import BotConfig
from ..logging_config import get_logger, turn_context
from ..models import BotMessage, DialogStack, DialogStackEntry, Entity, IntentCandidate
from ..storage import IBrain
from ..tracker import ITracker
from .builtin import DEFAULT_DIALOG
from .locks import UserLocks
from .registry import DialogRegistry

logger = get_logger(__name__)

DIALOGS_KEY = "dialogs"
LAST_DIALOG_KEY = "lastDialog"


class DialogManager:
    """Updates and executes the dialog stack of a user, one turn at a time."""

    def __init__(
        self,
        brain: IBrain,
        registry: DialogRegistry,
        config: BotConfig | None = None,
        tracker: ITracker | None = None,
    ):
        self._brain = brain
        self._registry = registry
        self._config = config or BotConfig()
        self._tracker = tracker
        self._locks = UserLocks()
        self.intent_threshold = self._config.intent_threshold
        self.max_intents = self._config.max_intents

    def filter_intents(self, intents: list[IntentCandidate]) -> list[IntentCandidate]:
        """Select the intents to push, lowest execution priority first.

        Keeps intents above the threshold, caps them to the most confident
        ones, then sorts by complexity (descending) and confidence
        (ascending). Exact ties keep the classifier's best candidate last.
        """
        qualifying = [i for i in intents if i.confidence > self.intent_threshold]
        top = sorted(qualifying, key=lambda i: i.confidence, reverse=True)
        top = top[: self.max_intents]
        complexity = {i.label: self._registry.complexity(i.label) for i in top}
        ranked = sorted(
            enumerate(top),
            key=lambda item: (
                -complexity[item[1].label],
                item[1].confidence,
                -item[0],
            ),
        )
        return [intent for _, intent in ranked]

    async def update_dialogs(
        self,
        user_id: str,
        dialogs: DialogStack,
        intents: list[IntentCandidate],
        entities: list[Entity],
    ) -> DialogStack:
        """Push the selected intents on the stack, or a fallback when empty."""
        selected = self.filter_intents(intents)
        logger.debug("Selected intents for %s: %s", user_id, selected)

        for i, intent in enumerate(selected):
            tail = dialogs.peek()
            if tail is None or tail.label != intent.label:
                dialogs.push(
                    DialogStackEntry(
                        label=intent.label,
                        order=len(selected) - 1 - i,
                        entities=entities,
                    )
                )

        if dialogs.is_empty():
            last_dialog = await self._brain.user_get(user_id, LAST_DIALOG_KEY)
            if last_dialog is not None:
                entry = DialogStackEntry.from_dict(last_dialog)
                entry.order = 0
                dialogs.push(entry)
            else:
                dialogs.push(DialogStackEntry(label=DEFAULT_DIALOG, order=0))

        return dialogs

    async def execute_dialogs(
        self,
        user_id: str,
        dialogs: DialogStack,
        entities: list[Entity],
    ) -> list[BotMessage]:
        """Run dialogs from the tail until one waits or the stack is empty.

        The stack is persisted once, after the loop. If a dialog cannot be
        resolved or raises, nothing is written and the error propagates.
        """
        messages: list[BotMessage] = []
        done = True
        while done and not dialogs.is_empty():
            entry = dialogs.peek()
            dialog = self._registry.get(entry.label)
            await self._brain.user_set(user_id, LAST_DIALOG_KEY, entry.to_dict())

            is_resumed = entry.order != 0
            done = await dialog.execute(user_id, messages, entities, is_resumed)
            logger.debug(
                "Dialog %s for %s (resumed=%s) done=%s",
                entry.label,
                user_id,
                is_resumed,
                done,
            )
            if self._tracker:
                await self._tracker.track(
                    event_type="dialog_executed",
                    actor="dialog_manager",
                    data={
                        "user_id": user_id,
                        "label": entry.label,
                        "is_resumed": is_resumed,
                        "done": done,
                    },
                )
            if done:
                dialogs.pop()

        await self._brain.user_set(user_id, DIALOGS_KEY, dialogs.to_list())
        return messages

    async def execute(
        self,
        user_id: str,
        intents: list[IntentCandidate] | None,
        entities: list[Entity] | None,
    ) -> list[BotMessage]:
        """Populate and execute the stack of a user for one turn.

        Turns of the same user are serialized; different users run freely.
        """
        intents = intents or []
        entities = entities or []
        async with self._locks.hold(user_id):
            with turn_context(user_id):
                return await self._run_turn(user_id, intents, entities)

    async def _run_turn(
        self,
        user_id: str,
        intents: list[IntentCandidate],
        entities: list[Entity],
    ) -> list[BotMessage]:
        logger.info(
            "Executing turn for %s",
            user_id,
            extra={"context": {"intents": [i.label for i in intents]}},
        )
        await self._brain.init_user_if_necessary(user_id)
        dialogs = DialogStack.from_list(
            await self._brain.user_get(user_id, DIALOGS_KEY)
        )
        await self.update_dialogs(user_id, dialogs, intents, entities)
        logger.debug("Dialog stack for %s: %s", user_id, dialogs.labels())
        if self._tracker:
            await self._tracker.track(
                event_type="dialogs_updated",
                actor="dialog_manager",
                data={"user_id": user_id, "dialogs": dialogs.labels()},
            )
        try:
            return await self.execute_dialogs(user_id, dialogs, entities)
        except Exception:
            logger.error("Turn failed for %s", user_id, exc_info=True)
            raise
