"""Intent classifiers."""

import json
import re
from typing import Protocol

from ..errors import ClassificationError
from ..llm import ILLMProvider
from ..logging_config import get_logger
from ..models import IntentCandidate

logger = get_logger(__name__)


class IClassifier(Protocol):
    """Ranks intent labels for a sentence."""

    async def classify(self, sentence: str) -> list[IntentCandidate]:
        """Return intent candidates, most confident first."""
        ...


class PatternClassifier:
    """Regex-based classifier for fast, local classification.

    Longer matching patterns are considered more specific and score higher.
    """

    def __init__(self, patterns: dict[str, list[str]]):
        self.patterns = {
            label: [re.compile(pattern, re.IGNORECASE) for pattern in label_patterns]
            for label, label_patterns in patterns.items()
        }

    async def classify(self, sentence: str) -> list[IntentCandidate]:
        text = sentence.lower().strip()
        candidates = []
        for label, patterns in self.patterns.items():
            lengths = [len(p.pattern) for p in patterns if p.search(text)]
            if lengths:
                confidence = min(0.99, 0.8 + max(lengths) / 100)
                candidates.append(IntentCandidate(label, confidence))

        candidates.sort(key=lambda c: c.confidence, reverse=True)
        return candidates


class LLMClassifier:
    """Classifier asking Claude to score the known intents."""

    CLASSIFICATION_PROMPT = """You are the intent classifier of a chatbot.
The user writes in the locale "{locale}".

Known intents:
{intents}

Score how likely the message expresses each intent. Only use the intent names
listed above and omit intents that clearly do not apply.

Message: "{sentence}"

Respond with a JSON array only:
[{{"label": "<intent>", "confidence": <0.0-1.0>}}]"""

    def __init__(
        self,
        llm_provider: ILLMProvider,
        intents: dict[str, str],
        locale: str = "en",
    ):
        self._llm = llm_provider
        self.intents = intents  # label -> description
        self.locale = locale

    def _build_prompt(self, sentence: str) -> str:
        intents = "\n".join(
            f"- {label}: {description}" for label, description in self.intents.items()
        )
        return self.CLASSIFICATION_PROMPT.format(
            locale=self.locale, intents=intents, sentence=sentence
        )

    def _parse(self, answer: str) -> list[IntentCandidate]:
        json_match = re.search(r"\[.*\]", answer, re.DOTALL)
        if not json_match:
            raise ClassificationError(f"No JSON array in classifier answer: {answer!r}")
        try:
            items = json.loads(json_match.group())
        except json.JSONDecodeError as e:
            raise ClassificationError(f"Invalid classifier answer: {answer!r}") from e

        candidates = []
        for item in items:
            if not isinstance(item, dict) or item.get("label") not in self.intents:
                continue
            try:
                confidence = float(item.get("confidence", 0.0))
            except (TypeError, ValueError):
                continue
            candidates.append(
                IntentCandidate(item["label"], min(1.0, max(0.0, confidence)))
            )
        candidates.sort(key=lambda c: c.confidence, reverse=True)
        return candidates

    async def classify(self, sentence: str) -> list[IntentCandidate]:
        if not sentence.strip():
            return []
        answer = await self._llm.complete(
            messages=[{"role": "user", "content": self._build_prompt(sentence)}],
            max_tokens=300,
        )
        candidates = self._parse(answer)
        logger.debug("Classified %r as %s", sentence, candidates)
        return candidates
