"""Dialog stack data models."""

from dataclasses import dataclass, field
from typing import Any, Iterator

# Entities are opaque values produced by an entity extractor for one turn.
Entity = dict[str, Any]


@dataclass
class IntentCandidate:
    """A classified intent label with its confidence in [0, 1]."""

    label: str
    confidence: float


@dataclass
class DialogStackEntry:
    """One pending conversational task."""

    label: str
    order: int = 0
    entities: list[Entity] | None = None

    def to_dict(self) -> dict:
        data: dict[str, Any] = {"label": self.label, "order": self.order}
        if self.entities is not None:
            data["entities"] = self.entities
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "DialogStackEntry":
        return cls(
            label=data["label"],
            order=int(data.get("order", 0)),
            entities=data.get("entities"),
        )


@dataclass
class DialogStack:
    """Pending dialogs of a user. The tail entry is the next to execute."""

    entries: list[DialogStackEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[DialogStackEntry]:
        return iter(self.entries)

    def is_empty(self) -> bool:
        return not self.entries

    def peek(self) -> DialogStackEntry | None:
        """Return the tail entry without removing it."""
        return self.entries[-1] if self.entries else None

    def push(self, entry: DialogStackEntry) -> None:
        self.entries.append(entry)

    def pop(self) -> DialogStackEntry:
        if not self.entries:
            raise IndexError("pop from empty dialog stack")
        return self.entries.pop()

    def labels(self) -> list[str]:
        return [entry.label for entry in self.entries]

    def to_list(self) -> list[dict]:
        """Serialize to the persisted JSON shape."""
        return [entry.to_dict() for entry in self.entries]

    @classmethod
    def from_list(cls, data: list[dict] | None) -> "DialogStack":
        """Build a stack from its persisted shape; None gives an empty stack."""
        if not data:
            return cls()
        return cls([DialogStackEntry.from_dict(item) for item in data])
