"""Bot bootstrap, lifecycle and message handling."""

from typing import Mapping, Protocol

from .config import BotConfig
from .dialogs import DialogFactory, DialogManager, DialogRegistry
from .llm import ILLMProvider, LLMProvider
from .logging_config import get_logger
from .models import BotMessage, IntentCandidate, PostbackMessage, UserMessage
from .nlu import (
    IClassifier,
    IEntityExtractor,
    LLMClassifier,
    PatternClassifier,
    RegexEntityExtractor,
)
from .storage import IBrain, MemoryBrain, SqliteBrain
from .tracker import ITracker, Tracker

logger = get_logger(__name__)


class IBot(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...

    async def reset(self) -> None:
        """Forget all users and trace events."""
        ...

    async def respond(self, message: UserMessage) -> list[BotMessage]:
        """Run one turn for an inbound message."""
        ...


class Bot:
    """Wires the brain, NLU and dialog manager together."""

    def __init__(
        self,
        config: BotConfig | None = None,
        dialogs: Mapping[str, DialogFactory] | None = None,
        intents: Mapping[str, str] | None = None,
        patterns: Mapping[str, list[str]] | None = None,
        brain: IBrain | None = None,
        classifier: IClassifier | None = None,
        extractor: IEntityExtractor | None = None,
        llm_provider: ILLMProvider | None = None,
    ):
        self.config = config or BotConfig.from_env()
        self._dialogs = dict(dialogs or {})
        self._intents = dict(intents or {})
        self._patterns = dict(patterns or {})

        # Components (will be initialized in start() unless injected)
        self._brain: IBrain | None = brain
        self._classifier: IClassifier | None = classifier
        self._extractor: IEntityExtractor | None = extractor
        self._llm: ILLMProvider | None = llm_provider
        self._tracker: ITracker | None = None
        self._registry: DialogRegistry | None = None
        self._dialog_manager: DialogManager | None = None

    def _build_brain(self) -> IBrain:
        if self.config.brain == "memory":
            return MemoryBrain()
        if self.config.brain == "sqlite":
            return SqliteBrain(self.config.db_path)
        raise ValueError(f"Unknown brain: {self.config.brain}")

    def _build_classifier(self) -> IClassifier:
        if self.config.classifier == "pattern":
            return PatternClassifier(self._patterns)
        if self.config.classifier == "llm":
            if self._llm is None:
                self._llm = LLMProvider()
            return LLMClassifier(self._llm, self._intents, self.config.locale)
        raise ValueError(f"Unknown classifier: {self.config.classifier}")

    async def start(self) -> None:
        """Initialize components in dependency order."""
        logger.info("Starting bot %s", self.config.bot_id)

        # 1. Brain (no dependencies)
        if self._brain is None:
            self._brain = self._build_brain()
        await self._brain.init()
        logger.info("Brain initialized")

        # 2. Tracker (depends on Brain)
        self._tracker = Tracker(self._brain)

        # 3. NLU (classifier may depend on the LLM provider)
        if self._classifier is None:
            self._classifier = self._build_classifier()
        if self._extractor is None:
            self._extractor = RegexEntityExtractor()
        logger.info("NLU initialized")

        # 4. Dialogs (depend on Brain, Tracker)
        self._registry = DialogRegistry.with_builtins(self.config, self._brain, self._dialogs)
        self._dialog_manager = DialogManager(
            brain=self._brain,
            registry=self._registry,
            config=self.config,
            tracker=self._tracker,
        )
        logger.info("Dialog manager started with dialogs: %s", self._registry.labels())

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        self._dialog_manager = None
        if self._brain:
            await self._brain.close()
            logger.info("Brain closed")

    async def reset(self) -> None:
        """Forget all users and trace events."""
        await self.brain.clean()
        logger.info("Brain cleaned")

    async def respond(self, message: UserMessage) -> list[BotMessage]:
        """Run one turn for an inbound message."""
        user_id = message.user

        if isinstance(message, PostbackMessage):
            await self.tracker.track(
                event_type="message_received",
                actor="bot",
                data={"user_id": user_id, "postback": message.dialog},
            )
            intents = [IntentCandidate(label=message.dialog, confidence=1.0)]
            entities = list(message.entities)
        else:
            await self.tracker.track(
                event_type="message_received",
                actor="bot",
                data={"user_id": user_id, "message_text": message.text},
            )
            entities = await self._extractor.extract(message.text)
            intents = await self._classifier.classify(message.text)

        responses = await self.dialog_manager.execute(user_id, intents, entities)

        await self.tracker.track(
            event_type="message_responded",
            actor="bot",
            data={"user_id": user_id, "message_count": len(responses)},
        )
        return responses

    @property
    def brain(self) -> IBrain:
        """Get brain instance."""
        if not self._brain or not self._dialog_manager:
            raise RuntimeError("Bot not started")
        return self._brain

    @property
    def tracker(self) -> ITracker:
        """Get tracker instance."""
        if not self._tracker:
            raise RuntimeError("Bot not started")
        return self._tracker

    @property
    def dialog_manager(self) -> DialogManager:
        """Get dialog manager instance."""
        if not self._dialog_manager:
            raise RuntimeError("Bot not started")
        return self._dialog_manager

    @property
    def registry(self) -> DialogRegistry:
        """Get dialog registry instance."""
        if not self._registry:
            raise RuntimeError("Bot not started")
        return self._registry
