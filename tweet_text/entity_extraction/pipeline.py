"""
Entity Extraction Pipeline: orchestrates the per-kind extractors + merge.

Pipeline:
    1. URLs
    2. Hashtags, mentions / lists, cashtags (independently)
    3. Deterministic merge (URL precedence, then earliest / longest span)

Offsets in the result are code points; see offsets.py for UTF-16.
"""
import logging
from typing import List, Optional

from tweet_text.config import settings
from tweet_text.entity_extraction.extractors import (
    extract_cashtags_with_indices,
    extract_hashtags_with_indices,
    extract_mentions_or_lists_with_indices,
    extract_urls_with_indices,
)
from tweet_text.entity_extraction.merger import merge_entities_deterministic
from tweet_text.models.entity import Entity
from tweet_text.postprocessing.metrics import record_entity, timed_extraction

logger = logging.getLogger(__name__)


class InputTooLongError(ValueError):
    """Text exceeds the configured maximum input length."""


def _preview(text: str) -> str:
    limit = settings.MAX_TEXT_LOG_CHARS
    return text if len(text) <= limit else text[:limit] + "…"


def extract_entities(
    text: str,
    extract_url_without_protocol: Optional[bool] = None,
    max_input_length: Optional[int] = None,
) -> List[Entity]:
    """
    Extract every URL, hashtag, mention, list mention and cashtag.

    Args:
        text: Message text, already normalized by the caller.
        extract_url_without_protocol: Accept bare domains. Defaults to
            settings.EXTRACT_URLS_WITHOUT_PROTOCOL.
        max_input_length: Override settings.MAX_INPUT_LENGTH.

    Returns:
        Non-overlapping entities sorted by start offset.

    Raises:
        InputTooLongError: text is longer than the allowed maximum.
    """
    if not text:
        return []

    limit = settings.MAX_INPUT_LENGTH if max_input_length is None else max_input_length
    if len(text) > limit:
        raise InputTooLongError(f"Input of {len(text)} characters exceeds limit of {limit}")

    with timed_extraction():
        # 1. URLs first: they take precedence on overlap
        urls = extract_urls_with_indices(text, extract_url_without_protocol)

        # 2. Remaining kinds, each unaware of the others
        candidates = (
            extract_hashtags_with_indices(text, check_url_overlap=False)
            + extract_mentions_or_lists_with_indices(text)
            + extract_cashtags_with_indices(text)
        )

        # 3. Merge
        merged = merge_entities_deterministic(urls + candidates)

    for entity in merged:
        record_entity(entity.kind.value)

    logger.debug(
        "Extracted %d entities (%d URL, %d other candidates) from %r",
        len(merged), len(urls), len(candidates), _preview(text),
    )
    return merged
