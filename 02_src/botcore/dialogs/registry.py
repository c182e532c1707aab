"""Resolution of dialog labels to dialog handlers."""

from typing import Mapping, Sequence

from ..config import BotConfig
from ..errors import DialogNotFoundError
from ..storage import IBrain
from .base import MAX_COMPLEXITY, DialogFactory, IDialog
from .builtin import BUILTIN_DIALOGS


class DialogRegistry:
    """Looks labels up in an ordered list of providers.

    Each provider maps labels to dialog factories. The first provider that
    knows a label wins, so bot-specific dialogs go before the built-in set.
    Every lookup builds a fresh handler.
    """

    def __init__(
        self,
        config: BotConfig,
        brain: IBrain,
        providers: Sequence[Mapping[str, DialogFactory]] | None = None,
    ):
        self._config = config
        self._brain = brain
        if providers is None:
            providers = [{}, BUILTIN_DIALOGS]
        self._providers: list[dict[str, DialogFactory]] = [dict(p) for p in providers]
        if not self._providers:
            self._providers.append({})

    @classmethod
    def with_builtins(
        cls,
        config: BotConfig,
        brain: IBrain,
        dialogs: Mapping[str, DialogFactory] | None = None,
    ) -> "DialogRegistry":
        """Registry with bot dialogs first and built-in dialogs as fallback."""
        return cls(config, brain, [dict(dialogs or {}), BUILTIN_DIALOGS])

    def register(self, label: str, factory: DialogFactory) -> None:
        """Add a dialog to the highest-priority provider."""
        self._providers[0][label] = factory

    def labels(self) -> list[str]:
        seen: list[str] = []
        for provider in self._providers:
            seen.extend(label for label in provider if label not in seen)
        return seen

    def has(self, label: str) -> bool:
        return any(label in provider for provider in self._providers)

    def _factory(self, label: str) -> DialogFactory | None:
        for provider in self._providers:
            factory = provider.get(label)
            if factory is not None:
                return factory
        return None

    def resolve(self, label: str) -> IDialog | None:
        """Build the handler for a label, or None if no provider knows it."""
        factory = self._factory(label)
        if factory is None:
            return None
        return factory(self._config, self._brain)

    def get(self, label: str) -> IDialog:
        """Build the handler for a label, raising if it is unknown."""
        dialog = self.resolve(label)
        if dialog is None:
            raise DialogNotFoundError(label)
        return dialog

    def complexity(self, label: str) -> int:
        """Declared complexity of a dialog; unknown labels get MAX_COMPLEXITY.

        A dialog class declaring ``complexity`` is read without being built.
        """
        factory = self._factory(label)
        if factory is None:
            return MAX_COMPLEXITY
        declared = getattr(factory, "complexity", None)
        if isinstance(factory, type) and isinstance(declared, int):
            return declared
        dialog = factory(self._config, self._brain)
        return getattr(dialog, "complexity", MAX_COMPLEXITY)
