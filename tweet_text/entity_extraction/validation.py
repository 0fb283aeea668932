"""
Text checks that sit beside extraction rather than inside it.

- Invalid control characters (BOMs, noncharacters, directional overrides):
  extraction still scans such text, callers reject it upstream with
  has_invalid_characters().
- Right-to-left script detection for bidi-aware rendering.
- Single-entity validators (is this whole string one valid hashtag?).
"""
from typing import List, Optional

from tweet_text.entity_extraction.patterns import (
    INVALID_CHARACTERS,
    RTL_CHARACTERS,
    VALID_TCO_URL,
)
from tweet_text.entity_extraction.pipeline import extract_entities
from tweet_text.models.entity import EntityKind


def has_invalid_characters(text: str) -> bool:
    return INVALID_CHARACTERS.search(text) is not None


def find_invalid_characters(text: str) -> List[int]:
    """Code-point offsets of every invalid control character."""
    return [m.start() for m in INVALID_CHARACTERS.finditer(text)]


def contains_rtl(text: str, start: int = 0, end: Optional[int] = None) -> bool:
    """True if any character of text[start:end] belongs to a right-to-left script."""
    if end is None:
        end = len(text)
    return RTL_CHARACTERS.search(text, start, end) is not None


def is_tco_url(url: str) -> bool:
    return VALID_TCO_URL.fullmatch(url) is not None


def classify_entity_text(text: str) -> Optional[EntityKind]:
    """
    Kind of entity *text* is, when the whole string is exactly one entity.

    Returns None for text with no entity, several entities, or leftover
    characters around the entity.
    """
    entities = extract_entities(text)
    if len(entities) != 1:
        return None
    entity = entities[0]
    if entity.start != 0 or entity.end != len(text):
        return None
    return entity.kind


def is_valid_hashtag(text: str) -> bool:
    return classify_entity_text(text) is EntityKind.HASHTAG


def is_valid_username(text: str) -> bool:
    return classify_entity_text(text) is EntityKind.MENTION


def is_valid_list(text: str) -> bool:
    return classify_entity_text(text) is EntityKind.LIST_MENTION


def is_valid_cashtag(text: str) -> bool:
    return classify_entity_text(text) is EntityKind.CASHTAG
