"""
RawMatch: one pattern application, before boundary checks.
"""
import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional


@dataclass(frozen=True)
class GroupSpan:
    start: int
    end: int
    text: str

    @classmethod
    def of(cls, match: re.Match, name: str) -> Optional["GroupSpan"]:
        text = match.group(name)
        return None if text is None else cls(match.start(name), match.end(name), text)


@dataclass(frozen=True)
class RawMatch:
    """Match span plus every named group (None when the group did not take part)."""

    start: int
    end: int
    groups: Dict[str, Optional[GroupSpan]] = field(default_factory=dict)

    @classmethod
    def from_match(cls, match: re.Match, group_names: Iterable[str]) -> "RawMatch":
        groups = {name: GroupSpan.of(match, name) for name in group_names}
        return cls(match.start(), match.end(), groups)

    def group(self, name: str) -> Optional[GroupSpan]:
        return self.groups.get(name)

    def text_of(self, name: str) -> Optional[str]:
        span = self.groups.get(name)
        return None if span is None else span.text
