"""
Deterministic Entity Merger.

Merges overlapping entities with fixed priority rules:
1. URLs win over every other kind they overlap
2. Earlier start wins
3. Same start → longest span wins
4. Same span  → kind priority (url > mention > hashtag > cashtag)
"""
from typing import List

from tweet_text.config.constants import KIND_PRIORITY
from tweet_text.models.entity import Entity, EntityKind
from tweet_text.postprocessing.metrics import record_rejection


def remove_url_overlaps(entities: List[Entity]) -> List[Entity]:
    """Drop every non-URL entity that overlaps a URL."""
    urls = [e for e in entities if e.kind is EntityKind.URL]
    if not urls:
        return list(entities)

    kept: List[Entity] = []
    for entity in entities:
        if entity.kind is not EntityKind.URL and any(entity.overlaps(u) for u in urls):
            record_rejection(entity.kind.value, "url_overlap")
            continue
        kept.append(entity)
    return kept


def merge_entities_deterministic(entities: List[Entity]) -> List[Entity]:
    """
    Merge overlapping entities using deterministic rules.

    Args:
        entities: Candidates from all extractors (may overlap).

    Returns:
        Non-overlapping entities sorted by start offset.
    """
    if not entities:
        return []

    candidates = remove_url_overlaps(entities)

    # Sort by start position, then by reverse end (longest first),
    # then by kind priority
    candidates.sort(
        key=lambda e: (
            e.start,
            -e.end,
            KIND_PRIORITY.get(e.kind.value, 99),
        ),
    )

    merged: List[Entity] = []
    for entity in candidates:
        # Kept entities never overlap, so only the last can reach this far
        if merged and entity.overlaps(merged[-1]):
            record_rejection(entity.kind.value, "overlap")
            continue
        merged.append(entity)

    return merged
