"""
Entity model for extracted entities (hashtag / mention / list / URL / cashtag).
"""
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class EntityKind(str, Enum):
    HASHTAG = "hashtag"
    MENTION = "mention"
    LIST_MENTION = "list_mention"
    URL = "url"
    CASHTAG = "cashtag"


@dataclass(frozen=True)
class Entity:
    """A single extracted entity. Offsets are code points, end-exclusive."""

    kind: EntityKind
    start: int
    end: int
    text: str                   # display text, exactly text[start:end]
    value: str                  # tag body | username | URL | ticker symbol
    subgroups: Mapping[str, Optional[str]] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        # Read-only copy, so the caller's dict cannot change a returned entity
        object.__setattr__(self, "subgroups", MappingProxyType(dict(self.subgroups)))

    def overlaps(self, other: "Entity") -> bool:
        """Check if two entities have overlapping spans."""
        return not (self.end <= other.start or other.end <= self.start)

    def span_length(self) -> int:
        return self.end - self.start

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "start": self.start,
            "end": self.end,
            "text": self.text,
            "value": self.value,
            "subgroups": dict(self.subgroups),
        }

    def __repr__(self) -> str:
        return f"Entity('{self.text}', {self.kind.value}, [{self.start},{self.end}])"
