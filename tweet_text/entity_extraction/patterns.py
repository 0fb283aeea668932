"""
Pattern Library: compiled matchers composed from the character-class tables.

All entity patterns are case-insensitive and expose named groups. Checks
that depend on what follows (or precedes) a candidate span are kept as
separate short patterns and applied after the match, instead of relying on
look-behind or atomic groups.
"""
import itertools
import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from tweet_text.config.constants import (
    CCTLDS,
    GTLDS,
    MAX_CASHTAG_LENGTH,
    MAX_CASHTAG_SUFFIX_LENGTH,
    MAX_LIST_SLUG_LENGTH,
    MAX_USERNAME_LENGTH,
    PUNYCODE_PREFIX,
)
from tweet_text.entity_extraction.character_classes import get_class
from tweet_text.models.raw_match import GroupSpan, RawMatch


def _chars(name: str) -> str:
    return get_class(name).to_pattern()


@dataclass(frozen=True)
class EntityPattern:
    """A compiled matcher and the role of each of its named groups."""

    name: str
    regex: re.Pattern
    roles: Dict[str, str] = field(default_factory=dict)

    def scan(self, text: str) -> Iterator[RawMatch]:
        for match in self.regex.finditer(text):
            yield RawMatch.from_match(match, self.roles)

    def match_start(self, text: str) -> Optional[RawMatch]:
        match = self.regex.match(text)
        return None if match is None else RawMatch.from_match(match, self.roles)


ALNUM = _chars("ALNUM")
PUNCT = _chars("PUNCTUATION")
SPACES = _chars("UNICODE_SPACE")
AT_SIGNS = _chars("AT_SIGNS")
HASH_SIGNS = _chars("HASH_SIGNS")
LATIN_ACCENTS = _chars("LATIN_ACCENTS")

# =============================================================================
# Hashtag
# =============================================================================
_HASHTAG_ALPHA = f"[{_chars('HASHTAG_ELIGIBLE_ALPHA')}]"
_HASHTAG_ALNUM = f"[{_chars('HASHTAG_ELIGIBLE_ALNUM')}]"

VALID_HASHTAG = EntityPattern(
    "hashtag",
    re.compile(
        f"(?P<before>^|[^&{_chars('HASHTAG_ELIGIBLE_ALNUM')}])"
        f"(?P<hash>[{HASH_SIGNS}])"
        f"(?P<tag>{_HASHTAG_ALNUM}*{_HASHTAG_ALPHA}{_HASHTAG_ALNUM}*)",
        re.IGNORECASE,
    ),
    {"before": "boundary", "hash": "marker", "tag": "value"},
)

INVALID_HASHTAG_MATCH_END = re.compile(f"[{HASH_SIGNS}]|://")

# =============================================================================
# Mentions, lists and replies
# =============================================================================
_USERNAME = f"[a-z0-9_]{{1,{MAX_USERNAME_LENGTH}}}"

VALID_MENTION_OR_LIST = EntityPattern(
    "mention",
    re.compile(
        f"(?P<before>[^a-z0-9_!#$%&*{AT_SIGNS}]|^|RT:?)"
        f"(?P<at>[{AT_SIGNS}]+)"
        f"(?P<username>{_USERNAME})"
        f"(?P<list>/[a-z][a-z0-9_\\-]{{0,{MAX_LIST_SLUG_LENGTH - 1}}})?",
        re.IGNORECASE,
    ),
    {"before": "boundary", "at": "marker", "username": "value", "list": "list_slug"},
)

VALID_REPLY = EntityPattern(
    "reply",
    re.compile(
        f"[{SPACES}]*[{AT_SIGNS}](?P<username>{_USERNAME})",
        re.IGNORECASE,
    ),
    {"username": "value"},
)

INVALID_MENTION_MATCH_END = re.compile(f"[{AT_SIGNS}{LATIN_ACCENTS}]|://")

# =============================================================================
# URL
# =============================================================================
# A URL is matched in three steps, each linear in the text it reads:
#   1. _URL_START finds where a URL may begin, with its optional protocol.
#   2. The domain is resolved label by label in Python, and the label that
#      ends it is looked up in the TLD tables.
#   3. _URL_TAIL matches port, path and query from the end of the domain.
_URL_VALID_PRECEDING_CHARS = (
    f"(?:[^A-Z0-9{AT_SIGNS}${HASH_SIGNS}{_chars('DIRECTIONAL_CONTROL')}]|^)"
)

_URL_CHARS = _chars("URL_VALID_CHARS")

# Any non-space, non-punctuation character
_URL_VALID_UNICODE_CHARS = (
    f"(?:\\.|[^{PUNCT}\\s{_chars('UNICODE_SEPARATOR')}{_chars('GENERAL_PUNCTUATION')}])"
)

_URL_START = re.compile(
    f"(?P<before>{_URL_VALID_PRECEDING_CHARS})"
    "(?P<protocol>https?://)?"
    f"(?(protocol)(?={_URL_VALID_UNICODE_CHARS})|(?=[{_URL_CHARS}]))",
    re.IGNORECASE,
)

_URL_PROTOCOL = re.compile("https?://", re.IGNORECASE)

# One dot-free run of label characters. Whether it is a valid subdomain or
# domain-name label is decided by _is_subdomain_label / _is_domain_name_label.
_URL_DOMAIN_LABEL = re.compile(f"[{_URL_CHARS}\\-_]+", re.IGNORECASE)

_URL_UNICODE_DOMAIN = re.compile(f"{_URL_VALID_UNICODE_CHARS}*", re.IGNORECASE)

_URL_PUNYCODE = re.compile(f"{re.escape(PUNYCODE_PREFIX)}[0-9a-z]+", re.IGNORECASE)

_TLD_END = re.compile(f"[^{ALNUM}@]|\\Z")

# Never gives digits back
_URL_VALID_PORT_NUMBER = "[0-9]+(?![0-9])"

_URL_VALID_GENERAL_PATH_CHARS = f"[a-z0-9!\\*';:=\\+,.\\$/%#\\[\\]\\-_~\\|&@{LATIN_ACCENTS}]"

# Balanced parens with one nested level: /Primer_(film), /S(dfd346)/,
# /We_Up_(Album_Version_(Edited))/
_URL_BALANCED_PARENS = (
    "\\("
    "(?:"
    f"{_URL_VALID_GENERAL_PATH_CHARS}+"
    "|"
    f"(?:{_URL_VALID_GENERAL_PATH_CHARS}*\\({_URL_VALID_GENERAL_PATH_CHARS}+\\)"
    f"{_URL_VALID_GENERAL_PATH_CHARS}*)"
    ")"
    "\\)"
)

# Valid end-of-path characters, so /foo. does not gobble the period.
# =&# are allowed for empty URL parameters and other URL-join artifacts.
_URL_VALID_PATH_ENDING_CHARS = f"[a-z0-9=_#/\\-\\+{LATIN_ACCENTS}]"

_URL_VALID_PATH = (
    "(?:"
    f"(?:{_URL_VALID_GENERAL_PATH_CHARS}*"
    f"(?:{_URL_BALANCED_PARENS}{_URL_VALID_GENERAL_PATH_CHARS}*)*"
    f"{_URL_VALID_PATH_ENDING_CHARS})"
    f"|{_URL_BALANCED_PARENS}"
    f"|(?:@{_URL_VALID_GENERAL_PATH_CHARS}+/)"
    ")"
)

_URL_VALID_QUERY_CHARS = "[a-z0-9!?\\*'\\(\\);:&=\\+\\$/%#\\[\\]\\-_\\.,~\\|@]"

_URL_VALID_QUERY_ENDING_CHARS = "[a-z0-9_&=#/]"

_URL_TAIL = re.compile(
    f"(?::(?P<port>{_URL_VALID_PORT_NUMBER}))?"
    f"(?P<path>/{_URL_VALID_PATH}*)?"
    f"(?P<query>\\?{_URL_VALID_QUERY_CHARS}*{_URL_VALID_QUERY_ENDING_CHARS})?",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class TldTable:
    """Lower-cased TLDs ranked by list order, plus the lengths to try."""

    ranks: Dict[str, int]
    lengths: Tuple[int, ...]

    @classmethod
    def of(cls, *tld_lists: Iterable[str]) -> "TldTable":
        ranks: Dict[str, int] = {}
        for tld in itertools.chain(*tld_lists):
            ranks.setdefault(tld.lower(), len(ranks))
        return cls(ranks, tuple(sorted({len(tld) for tld in ranks})))

    def match_end(self, text: str, pos: int) -> Optional[int]:
        """End of the first-ranked TLD starting at pos and followed by a TLD boundary."""
        best: Optional[Tuple[int, int]] = None
        for length in self.lengths:
            end = pos + length
            if end > len(text):
                break
            rank = self.ranks.get(text[pos:end].lower())
            if rank is not None and _TLD_END.match(text, end):
                if best is None or rank < best[0]:
                    best = (rank, end)
        return None if best is None else best[1]


GTLD_TABLE = TldTable.of(GTLDS)
CCTLD_TABLE = TldTable.of(CCTLDS)
ANY_TLD_TABLE = TldTable.of(GTLDS, CCTLDS)


def _is_subdomain_label(label: str) -> bool:
    return label[0] not in "-_" and label[-1] not in "-_"


def _is_domain_name_label(label: str) -> bool:
    return _is_subdomain_label(label) and "_" not in label


def _punycode_end(text: str, pos: int) -> Optional[int]:
    match = _URL_PUNYCODE.match(text, pos)
    return None if match is None else match.end()


def _resolve_domain(text: str, start: int, has_protocol: bool) -> Tuple[Optional[int], int]:
    """
    Find the end of the domain that starts at `start`.

    Returns (domain end or None, furthest position read). Domain shapes are
    tried in this order, longest first within each:
      - subdomain(s) + domain name + gTLD / ccTLD / punycode
      - domain name + gTLD / punycode
      - domain name + ccTLD, only with a protocol or before a "/"
      - unicode characters + gTLD / ccTLD, only with a protocol
    """
    # Labels that are valid subdomains and followed by a dot. Reading stops
    # at the first label that cannot continue the chain.
    labels: List[re.Match] = []
    pos = scanned_to = start
    while True:
        label = _URL_DOMAIN_LABEL.match(text, pos)
        if label is None:
            break
        scanned_to = label.end()
        if not _is_subdomain_label(label.group()) or not text.startswith(".", label.end()):
            break
        labels.append(label)
        pos = scanned_to = label.end() + 1

    for i in range(len(labels) - 1, 0, -1):
        if _is_domain_name_label(labels[i].group()):
            tld_start = labels[i].end() + 1
            end = ANY_TLD_TABLE.match_end(text, tld_start) or _punycode_end(text, tld_start)
            if end is not None:
                return end, scanned_to

    if labels and _is_domain_name_label(labels[0].group()):
        tld_start = labels[0].end() + 1
        end = GTLD_TABLE.match_end(text, tld_start) or _punycode_end(text, tld_start)
        if end is not None:
            return end, scanned_to
        end = CCTLD_TABLE.match_end(text, tld_start)
        if end is not None and (has_protocol or text.startswith("/", end)):
            return end, scanned_to

    if has_protocol:
        run_end = _URL_UNICODE_DOMAIN.match(text, start).end()
        scanned_to = max(scanned_to, run_end)
        dot = text.rfind(".", start + 1, run_end)
        while dot != -1:
            end = ANY_TLD_TABLE.match_end(text, dot + 1)
            if end is not None:
                return end, scanned_to
            dot = text.rfind(".", start + 1, dot)

    return None, scanned_to


@dataclass(frozen=True)
class UrlPattern:
    """URL matcher with the same scan interface as EntityPattern."""

    name: str
    roles: Dict[str, str] = field(default_factory=dict)

    def scan(self, text: str) -> Iterator[RawMatch]:
        pos = 0
        while True:
            head = _URL_START.search(text, pos)
            if head is None:
                return
            domain_start = head.end()
            domain_end, scanned_to = _resolve_domain(
                text, domain_start, head.group("protocol") is not None
            )
            if domain_end is None:
                # A later start inside the labels just read cannot succeed,
                # unless a protocol begins there.
                protocol = _URL_PROTOCOL.search(text, domain_start, scanned_to + 3)
                resume = protocol.start() - 1 if protocol else scanned_to
                pos = max(resume, head.start() + 1)
                continue

            tail = _URL_TAIL.match(text, domain_end)
            url_start = head.end("before")
            groups = {
                "before": GroupSpan.of(head, "before"),
                "url": GroupSpan(url_start, tail.end(), text[url_start:tail.end()]),
                "protocol": GroupSpan.of(head, "protocol"),
                "domain": GroupSpan(domain_start, domain_end, text[domain_start:domain_end]),
                "port": GroupSpan.of(tail, "port"),
                "path": GroupSpan.of(tail, "path"),
                "query": GroupSpan.of(tail, "query"),
            }
            yield RawMatch(head.start(), tail.end(), {name: groups[name] for name in self.roles})
            pos = max(tail.end(), head.start() + 1)


VALID_URL = UrlPattern(
    "url",
    {
        "before": "boundary",
        "url": "value",
        "protocol": "protocol",
        "domain": "domain",
        "port": "port",
        "path": "path",
        "query": "query",
    },
)

VALID_TCO_URL = re.compile("https?://t\\.co/(?P<slug>[a-z0-9]+)", re.IGNORECASE)

INVALID_URL_WITHOUT_PROTOCOL_MATCH_BEGIN = re.compile("[-_./]\\Z")

# =============================================================================
# Cashtag
# =============================================================================
_CASHTAG = (
    f"[a-z]{{1,{MAX_CASHTAG_LENGTH}}}"
    f"(?:[._][a-z]{{1,{MAX_CASHTAG_SUFFIX_LENGTH}}})?"
)

VALID_CASHTAG = EntityPattern(
    "cashtag",
    re.compile(
        f"(?P<before>^|[{SPACES}])"
        "(?P<dollar>\\$)"
        f"(?P<cashtag>{_CASHTAG})"
        f"(?=$|\\s|[{PUNCT}])",
        re.IGNORECASE,
    ),
    {"before": "boundary", "dollar": "marker", "cashtag": "value"},
)

# =============================================================================
# Standalone classifiers
# =============================================================================
RTL_CHARACTERS = re.compile(f"[{_chars('RTL_SCRIPTS')}]")

INVALID_CHARACTERS = re.compile(f"[{_chars('INVALID_CONTROL')}]")

AT_SIGN = re.compile(f"[{AT_SIGNS}]")
