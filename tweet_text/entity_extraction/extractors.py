"""
Per-kind entity extractors.

Each extractor runs one pattern over the whole text, applies that
pattern's post-match boundary checks, and returns the surviving entities
in text order. Extractors never look at each other's results, except
extract_hashtags_with_indices when asked to drop hashtags inside URLs.
"""
import logging
from typing import List, Optional

from tweet_text.config import settings
from tweet_text.entity_extraction.patterns import (
    AT_SIGN,
    INVALID_HASHTAG_MATCH_END,
    INVALID_MENTION_MATCH_END,
    INVALID_URL_WITHOUT_PROTOCOL_MATCH_BEGIN,
    VALID_CASHTAG,
    VALID_HASHTAG,
    VALID_MENTION_OR_LIST,
    VALID_REPLY,
    VALID_TCO_URL,
    VALID_URL,
)
from tweet_text.models.entity import Entity, EntityKind
from tweet_text.models.raw_match import RawMatch
from tweet_text.postprocessing.metrics import record_rejection

logger = logging.getLogger(__name__)

URL_SUBGROUPS = ("protocol", "domain", "port", "path", "query")


def _reject(kind: EntityKind, raw: RawMatch, text: str, reason: str) -> None:
    logger.debug(
        "Rejected %s candidate %r at %d: %s",
        kind.value, text[raw.start:raw.end], raw.start, reason,
    )
    record_rejection(kind.value, reason)


# ==========================================================================
# Hashtags
# ==========================================================================

def extract_hashtags_with_indices(text: str, check_url_overlap: bool = True) -> List[Entity]:
    """
    Extract hashtags, including the leading # or ＃ in each span.

    Args:
        text: Message text.
        check_url_overlap: Drop hashtags that fall inside a URL
                           (e.g. the fragment of http://example.com/#tag).
    """
    if not text or ("#" not in text and "＃" not in text):
        return []

    extracted: List[Entity] = []
    for raw in VALID_HASHTAG.scan(text):
        if INVALID_HASHTAG_MATCH_END.match(text, raw.end):
            _reject(EntityKind.HASHTAG, raw, text, "invalid_match_end")
            continue

        hash_sign = raw.group("hash")
        tag = raw.group("tag")
        extracted.append(
            Entity(
                kind=EntityKind.HASHTAG,
                start=hash_sign.start,
                end=tag.end,
                text=text[hash_sign.start:tag.end],
                value=tag.text,
                subgroups={"hash": hash_sign.text, "tag": tag.text},
            )
        )

    if check_url_overlap and extracted:
        urls = extract_urls_with_indices(text)
        if urls:
            kept = []
            for hashtag in extracted:
                if any(hashtag.overlaps(url) for url in urls):
                    record_rejection(EntityKind.HASHTAG.value, "url_overlap")
                else:
                    kept.append(hashtag)
            extracted = kept

    return extracted


def extract_hashtags(text: str) -> List[str]:
    return [e.value for e in extract_hashtags_with_indices(text)]


# ==========================================================================
# Mentions, lists and replies
# ==========================================================================

def extract_mentions_or_lists_with_indices(text: str) -> List[Entity]:
    """
    Extract @username and @username/list-slug entities.

    The span starts at the at-sign directly before the username, so a
    run like "@@jack" yields "@jack".
    """
    if not text or not AT_SIGN.search(text):
        return []

    extracted: List[Entity] = []
    for raw in VALID_MENTION_OR_LIST.scan(text):
        if INVALID_MENTION_MATCH_END.match(text, raw.end):
            _reject(EntityKind.MENTION, raw, text, "invalid_match_end")
            continue

        username = raw.group("username")
        list_slug = raw.group("list")
        start = username.start - 1

        if list_slug is None:
            extracted.append(
                Entity(
                    kind=EntityKind.MENTION,
                    start=start,
                    end=username.end,
                    text=text[start:username.end],
                    value=username.text,
                    subgroups={"username": username.text, "list_slug": None},
                )
            )
        else:
            extracted.append(
                Entity(
                    kind=EntityKind.LIST_MENTION,
                    start=start,
                    end=list_slug.end,
                    text=text[start:list_slug.end],
                    value=username.text,
                    subgroups={"username": username.text, "list_slug": list_slug.text[1:]},
                )
            )

    return extracted


def extract_mentioned_screennames_with_indices(text: str) -> List[Entity]:
    """Mentions only, without list mentions."""
    return [
        e for e in extract_mentions_or_lists_with_indices(text)
        if e.kind is EntityKind.MENTION
    ]


def extract_mentioned_screennames(text: str) -> List[str]:
    return [e.value for e in extract_mentioned_screennames_with_indices(text)]


def extract_reply_screenname(text: str) -> Optional[str]:
    """Username the message replies to: a mention preceded only by whitespace."""
    if not text:
        return None

    raw = VALID_REPLY.match_start(text)
    if raw is None:
        return None
    if INVALID_MENTION_MATCH_END.match(text, raw.end):
        _reject(EntityKind.MENTION, raw, text, "invalid_reply_end")
        return None
    return raw.text_of("username")


# ==========================================================================
# URLs
# ==========================================================================

def extract_urls_with_indices(
    text: str,
    extract_url_without_protocol: Optional[bool] = None,
) -> List[Entity]:
    """
    Extract URLs with their protocol / domain / port / path / query parts.

    Args:
        text: Message text.
        extract_url_without_protocol: Accept bare domains such as
            "example.com". Defaults to settings.EXTRACT_URLS_WITHOUT_PROTOCOL.
    """
    if extract_url_without_protocol is None:
        extract_url_without_protocol = settings.EXTRACT_URLS_WITHOUT_PROTOCOL

    if not text or ("." if extract_url_without_protocol else ":") not in text:
        return []

    urls: List[Entity] = []
    for raw in VALID_URL.scan(text):
        if raw.group("protocol") is None:
            if not extract_url_without_protocol:
                _reject(EntityKind.URL, raw, text, "missing_protocol")
                continue
            if INVALID_URL_WITHOUT_PROTOCOL_MATCH_BEGIN.search(raw.text_of("before")):
                _reject(EntityKind.URL, raw, text, "invalid_preceding_char")
                continue

        url_span = raw.group("url")
        url = url_span.text
        start, end = url_span.start, url_span.end
        subgroups = {name: raw.text_of(name) for name in URL_SUBGROUPS}

        # t.co short links carry no path beyond the slug
        tco = VALID_TCO_URL.match(url)
        if tco:
            url = tco.group(0)
            end = start + len(url)
            subgroups["path"] = "/" + tco.group("slug")
            subgroups["query"] = None

        urls.append(
            Entity(
                kind=EntityKind.URL,
                start=start,
                end=end,
                text=url,
                value=url,
                subgroups=subgroups,
            )
        )

    return urls


def extract_urls(
    text: str, extract_url_without_protocol: Optional[bool] = None
) -> List[str]:
    return [
        e.value
        for e in extract_urls_with_indices(
            text, extract_url_without_protocol=extract_url_without_protocol
        )
    ]


# ==========================================================================
# Cashtags
# ==========================================================================

def extract_cashtags_with_indices(text: str) -> List[Entity]:
    """Extract $TICKER symbols, including the $ in each span."""
    if not text or "$" not in text:
        return []

    extracted: List[Entity] = []
    for raw in VALID_CASHTAG.scan(text):
        dollar = raw.group("dollar")
        cashtag = raw.group("cashtag")
        extracted.append(
            Entity(
                kind=EntityKind.CASHTAG,
                start=dollar.start,
                end=cashtag.end,
                text=text[dollar.start:cashtag.end],
                value=cashtag.text,
                subgroups={"cashtag": cashtag.text},
            )
        )

    return extracted


def extract_cashtags(text: str) -> List[str]:
    return [e.value for e in extract_cashtags_with_indices(text)]
