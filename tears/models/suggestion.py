from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, Optional, Tuple


class Polarity(Enum):
    DO = "do"
    DONT = "dont"

    @classmethod
    def parse(cls, value: str) -> "Polarity":
        key = value.strip().lower().replace("'", "")
        for polarity in cls:
            if polarity.value == key:
                return polarity
        raise ValueError(f"polarity must be 'do' or 'dont', got {value!r}")


@dataclass(frozen=True)
class SuggestionItem:
    """
    A single thing to do, or to avoid doing, for the person.

    `tags` lists the situations the item applies to; an empty set means it
    applies everywhere.
    """
    id: str
    text: str
    polarity: Polarity
    tags: FrozenSet[str] = frozenset()
    priority: int = 100
    detail: Optional[str] = None

    @property
    def universal(self) -> bool:
        return not self.tags

    def paragraphs(self) -> Tuple[str, ...]:
        if not self.detail:
            return ()
        parts = (p.strip() for p in self.detail.split("\n\n"))
        return tuple(p for p in parts if p)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
            "polarity": self.polarity.value,
            "tags": sorted(self.tags),
            "priority": self.priority,
            "detail": list(self.paragraphs()),
        }


@dataclass(frozen=True)
class SituationContext:
    """The tags currently selected for the person being helped."""
    tags: FrozenSet[str] = frozenset()

    @classmethod
    def of(cls, tags: Iterable[str]) -> "SituationContext":
        return cls(frozenset(tags))

    def toggle(self, tag: str) -> "SituationContext":
        if tag in self.tags:
            return SituationContext(self.tags - {tag})
        return SituationContext(self.tags | {tag})

    def __contains__(self, tag: str) -> bool:
        return tag in self.tags

    def __len__(self) -> int:
        return len(self.tags)

    def to_list(self) -> list:
        return sorted(self.tags)


@dataclass(frozen=True)
class SuggestionResult:
    do: Tuple[SuggestionItem, ...] = field(default_factory=tuple)
    dont: Tuple[SuggestionItem, ...] = field(default_factory=tuple)

    def ids(self) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
        return tuple(i.id for i in self.do), tuple(i.id for i in self.dont)

    def __bool__(self) -> bool:
        return bool(self.do or self.dont)
