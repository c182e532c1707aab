"""Entity extraction."""

import re
from typing import Any, Callable, Protocol

from ..models import Entity


class IEntityExtractor(Protocol):
    """Extracts entities from a sentence."""

    async def extract(self, sentence: str) -> list[Entity]:
        ...


def _to_number(body: str) -> int | float:
    body = body.replace(",", "")
    return float(body) if "." in body else int(body)


# dimension -> (patterns, value parser)
DEFAULT_PATTERNS: dict[str, tuple[list[str], Callable[[str], Any]]] = {
    "email": ([r"[\w.+-]+@[\w-]+\.[\w.-]+"], str),
    "url": ([r"https?://[^\s]+"], str),
    "time": ([r"\b([01]?\d|2[0-3]):[0-5]\d\b"], str),
    "number": ([r"(?<![\w.:/])\d+(?:,\d{3})*(?:\.\d+)?(?![\w:/])"], _to_number),
}


class RegexEntityExtractor:
    """Extracts entities with regular expressions, one dimension at a time.

    A span already claimed by an earlier dimension is not reported again.
    """

    def __init__(
        self,
        patterns: dict[str, tuple[list[str], Callable[[str], Any]]] | None = None,
    ):
        patterns = DEFAULT_PATTERNS if patterns is None else patterns
        self.patterns = {
            dim: ([re.compile(p, re.IGNORECASE) for p in dim_patterns], parse)
            for dim, (dim_patterns, parse) in patterns.items()
        }

    async def extract(self, sentence: str) -> list[Entity]:
        entities: list[Entity] = []
        claimed: list[tuple[int, int]] = []
        for dim, (patterns, parse) in self.patterns.items():
            for pattern in patterns:
                for match in pattern.finditer(sentence):
                    start, end = match.span()
                    if any(start < c_end and c_start < end for c_start, c_end in claimed):
                        continue
                    claimed.append((start, end))
                    entities.append(
                        {
                            "dim": dim,
                            "body": match.group(),
                            "value": parse(match.group()),
                            "start": start,
                            "end": end,
                        }
                    )
        entities.sort(key=lambda e: e["start"])
        return entities
