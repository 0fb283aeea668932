"""
Character-Class Tables: named, immutable sets of Unicode code-point ranges.

Every pattern in the library is composed from these tables, so a script
or symbol is made eligible (or ineligible) in exactly one place.

Ranges are stored sorted and coalesced; membership is a binary search
over the range lower bounds.
"""
from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Dict, Iterable, Tuple

from tweet_text.config.constants import ASCII_PUNCTUATION

Range = Tuple[int, int]


def _coalesce(ranges: Iterable[Range]) -> Tuple[Range, ...]:
    """Sort ranges and merge any that overlap or touch."""
    merged: list = []
    for low, high in sorted(ranges):
        if low > high:
            raise ValueError(f"Invalid range {low:#x}-{high:#x}")
        if merged and low <= merged[-1][1] + 1:
            merged[-1] = (merged[-1][0], max(merged[-1][1], high))
        else:
            merged.append((low, high))
    return tuple(merged)


def _escape(code_point: int) -> str:
    if code_point > 0xFFFF:
        return f"\\U{code_point:08x}"
    return f"\\u{code_point:04x}"


@dataclass(frozen=True)
class CharacterClass:
    """A named set of code-point ranges."""

    name: str
    ranges: Tuple[Range, ...]
    _lows: Tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        ranges = _coalesce(self.ranges)
        object.__setattr__(self, "ranges", ranges)
        object.__setattr__(self, "_lows", tuple(low for low, _ in ranges))

    @classmethod
    def from_chars(cls, name: str, chars: str) -> "CharacterClass":
        return cls(name, tuple((ord(c), ord(c)) for c in chars))

    def union(self, name: str, *others: "CharacterClass") -> "CharacterClass":
        ranges = list(self.ranges)
        for other in others:
            ranges.extend(other.ranges)
        return CharacterClass(name, tuple(ranges))

    def __contains__(self, char: str) -> bool:
        code_point = ord(char)
        i = bisect_right(self._lows, code_point) - 1
        return i >= 0 and code_point <= self.ranges[i][1]

    def contains_any(self, text: str) -> bool:
        return any(c in self for c in text)

    def to_pattern(self) -> str:
        """Render as the body of a regex character class (no brackets)."""
        parts = []
        for low, high in self.ranges:
            if low == high:
                parts.append(_escape(low))
            else:
                parts.append(f"{_escape(low)}-{_escape(high)}")
        return "".join(parts)


# =============================================================================
# Base classes
# =============================================================================
ALPHA = CharacterClass("ALPHA", ((0x41, 0x5A), (0x61, 0x7A)))

DIGIT = CharacterClass("DIGIT", ((0x30, 0x39),))

ALNUM = ALPHA.union("ALNUM", DIGIT)

PUNCTUATION = CharacterClass.from_chars("PUNCTUATION", ASCII_PUNCTUATION)

# Space is more than U+0020: U+3000 is the full-width space used with Kanji
UNICODE_SPACE = CharacterClass("UNICODE_SPACE", (
    (0x0009, 0x000D),   # Cc  <control-0009>..<control-000D>
    (0x0020, 0x0020),   # Zs  SPACE
    (0x0085, 0x0085),   # Cc  <control-0085>
    (0x00A0, 0x00A0),   # Zs  NO-BREAK SPACE
    (0x1680, 0x1680),   # Zs  OGHAM SPACE MARK
    (0x180E, 0x180E),   # Zs  MONGOLIAN VOWEL SEPARATOR
    (0x2000, 0x200A),   # Zs  EN QUAD..HAIR SPACE
    (0x2028, 0x2028),   # Zl  LINE SEPARATOR
    (0x2029, 0x2029),   # Zp  PARAGRAPH SEPARATOR
    (0x202F, 0x202F),   # Zs  NARROW NO-BREAK SPACE
    (0x205F, 0x205F),   # Zs  MEDIUM MATHEMATICAL SPACE
    (0x3000, 0x3000),   # Zs  IDEOGRAPHIC SPACE
))

# Unicode "Z" category (space, line and paragraph separators)
UNICODE_SEPARATOR = CharacterClass("UNICODE_SEPARATOR", (
    (0x0020, 0x0020),
    (0x00A0, 0x00A0),
    (0x1680, 0x1680),
    (0x2000, 0x200A),
    (0x2028, 0x2029),
    (0x202F, 0x202F),
    (0x205F, 0x205F),
    (0x3000, 0x3000),
))

GENERAL_PUNCTUATION = CharacterClass("GENERAL_PUNCTUATION", ((0x2000, 0x206F),))

DIRECTIONAL_CONTROL = CharacterClass("DIRECTIONAL_CONTROL", ((0x202A, 0x202E),))

# Characters not allowed in a message at all
INVALID_CONTROL = CharacterClass("INVALID_CONTROL", (
    (0xFFFE, 0xFFFE),   # BOM (reversed)
    (0xFEFF, 0xFEFF),   # BOM
    (0xFFFF, 0xFFFF),   # noncharacter
)).union("INVALID_CONTROL", DIRECTIONAL_CONTROL)

AT_SIGNS = CharacterClass.from_chars("AT_SIGNS", "@＠")

HASH_SIGNS = CharacterClass.from_chars("HASH_SIGNS", "#＃")

# Excludes U+00D7 (multiplication sign, confusable with "x") and U+00F7
LATIN_ACCENTS = CharacterClass("LATIN_ACCENTS", (
    (0x00C0, 0x00D6), (0x00D8, 0x00F6), (0x00F8, 0x00FF),  # Latin-1
    (0x0100, 0x024F),                                      # Latin Extended A and B
    (0x0253, 0x0254), (0x0256, 0x0257), (0x0259, 0x0259),  # IPA Extensions
    (0x025B, 0x025B), (0x0263, 0x0263), (0x0268, 0x0268),
    (0x026F, 0x026F), (0x0272, 0x0272), (0x0289, 0x0289),
    (0x028B, 0x028B),
    (0x02BB, 0x02BB),                                      # Hawaiian
    (0x0300, 0x036F),                                      # Combining diacritics
    (0x1E00, 0x1EFF),                                      # Latin Extended Additional
))

RTL_SCRIPTS = CharacterClass("RTL_SCRIPTS", (
    (0x0600, 0x06FF),   # Arabic
    (0x0750, 0x077F),   # Arabic Supplement
    (0x0590, 0x05FF),   # Hebrew
    (0xFE70, 0xFEFF),   # Arabic Presentation Forms-B
))

URL_VALID_CHARS = ALNUM.union("URL_VALID_CHARS", LATIN_ACCENTS)

# =============================================================================
# Hashtag eligibility
# =============================================================================
_HASHTAG_SCRIPTS = CharacterClass("HASHTAG_SCRIPTS", (
    # Cyrillic, Cyrillic Extended A/B
    (0x0400, 0x04FF), (0x0500, 0x0527), (0x2DE0, 0x2DFF), (0xA640, 0xA69F),
    # Hebrew
    (0x0591, 0x05BF), (0x05C1, 0x05C2), (0x05C4, 0x05C5), (0x05C7, 0x05C7),
    (0x05D0, 0x05EA), (0x05F0, 0x05F4),
    # Hebrew presentation forms
    (0xFB1D, 0xFB28), (0xFB2A, 0xFB36), (0xFB38, 0xFB3C), (0xFB3E, 0xFB3E),
    (0xFB40, 0xFB41), (0xFB43, 0xFB44), (0xFB46, 0xFB4F),
    # Arabic
    (0x0610, 0x061A), (0x0620, 0x065F), (0x066E, 0x06D3), (0x06D5, 0x06DC),
    (0x06DE, 0x06E8), (0x06EA, 0x06EF), (0x06FA, 0x06FC), (0x06FF, 0x06FF),
    # Arabic Supplement and Extended-A
    (0x0750, 0x077F), (0x08A0, 0x08A0), (0x08A2, 0x08AC), (0x08E4, 0x08FE),
    # Arabic presentation forms A and B
    (0xFB50, 0xFBB1), (0xFBD3, 0xFD3D), (0xFD50, 0xFD8F), (0xFD92, 0xFDC7),
    (0xFDF0, 0xFDFB), (0xFE70, 0xFE74), (0xFE76, 0xFEFC),
    # Zero-width non-joiner
    (0x200C, 0x200C),
    # Thai
    (0x0E01, 0x0E3A), (0x0E40, 0x0E4E),
    # Hangul
    (0x1100, 0x11FF), (0x3130, 0x3185), (0xA960, 0xA97F), (0xAC00, 0xD7AF),
    (0xD7B0, 0xD7FF),
    # Hiragana, Katakana
    (0x3040, 0x309F), (0x30A0, 0x30FF),
    # CJK Unified Ideographs
    (0x4E00, 0x9FFF),
    # Kanji/Han iteration marks
    (0x3003, 0x3003), (0x3005, 0x3005), (0x303B, 0x303B),
    # Full-width Latin, half-width Katakana, half-width Hangul
    (0xFF21, 0xFF3A), (0xFF41, 0xFF5A), (0xFF66, 0xFF9F), (0xFFA1, 0xFFDC),
))

HASHTAG_ELIGIBLE_ALPHA = ALPHA.union("HASHTAG_ELIGIBLE_ALPHA", LATIN_ACCENTS, _HASHTAG_SCRIPTS)

HASHTAG_ELIGIBLE_ALNUM = HASHTAG_ELIGIBLE_ALPHA.union(
    "HASHTAG_ELIGIBLE_ALNUM",
    DIGIT,
    CharacterClass("FULLWIDTH_DIGIT", ((0xFF10, 0xFF19),)),
    CharacterClass.from_chars("UNDERSCORE", "_"),
)


_CLASSES: Dict[str, CharacterClass] = {
    cc.name: cc
    for cc in (
        ALPHA,
        DIGIT,
        ALNUM,
        PUNCTUATION,
        UNICODE_SPACE,
        UNICODE_SEPARATOR,
        GENERAL_PUNCTUATION,
        DIRECTIONAL_CONTROL,
        INVALID_CONTROL,
        AT_SIGNS,
        HASH_SIGNS,
        LATIN_ACCENTS,
        RTL_SCRIPTS,
        URL_VALID_CHARS,
        HASHTAG_ELIGIBLE_ALPHA,
        HASHTAG_ELIGIBLE_ALNUM,
    )
}


def get_class(name: str) -> CharacterClass:
    """Look up a table by name. Unknown names are a programming error."""
    try:
        return _CLASSES[name]
    except KeyError:
        raise KeyError(f"Unknown character class: {name!r}") from None


def class_ranges(name: str) -> Tuple[Range, ...]:
    return get_class(name).ranges


def class_names() -> Tuple[str, ...]:
    return tuple(sorted(_CLASSES))
