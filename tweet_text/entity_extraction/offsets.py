"""
Offset Translator: code points <-> UTF-16 code units.

Python strings index by code point, while JavaScript, Java and .NET clients
index by UTF-16 code unit. Characters outside the Basic Multilingual Plane
(most emoji, CJK Extension B and later) take two code units but one code
point, so offsets drift apart after the first such character.

Batch functions sort the requested offsets and resolve all of them in a
single forward pass with a ScanCursor, instead of rescanning from zero for
every offset.
"""
from dataclasses import dataclass
from typing import List, Sequence


def _code_units(char: str) -> int:
    return 2 if ord(char) > 0xFFFF else 1


def utf16_length(text: str) -> int:
    """Length of *text* in UTF-16 code units."""
    return sum(_code_units(c) for c in text)


@dataclass
class ScanCursor:
    """Running position over one text, in both units."""

    text: str
    code_unit_offset: int = 0
    code_point_offset: int = 0

    def at_end(self) -> bool:
        return self.code_point_offset >= len(self.text)

    def next_width(self) -> int:
        return _code_units(self.text[self.code_point_offset])

    def advance(self) -> None:
        self.code_unit_offset += self.next_width()
        self.code_point_offset += 1


def _sorted_indices(offsets: Sequence[int]) -> List[int]:
    return sorted(range(len(offsets)), key=offsets.__getitem__)


def to_code_unit_offsets(text: str, code_point_offsets: Sequence[int]) -> List[int]:
    """Translate code-point offsets to UTF-16 code-unit offsets, order preserved."""
    result = [0] * len(code_point_offsets)
    cursor = ScanCursor(text)

    for i in _sorted_indices(code_point_offsets):
        target = code_point_offsets[i]
        if target < 0 or target > len(text):
            raise ValueError(f"Code-point offset {target} out of range [0, {len(text)}]")
        while cursor.code_point_offset < target:
            cursor.advance()
        result[i] = cursor.code_unit_offset

    return result


def to_code_point_offsets(text: str, code_unit_offsets: Sequence[int]) -> List[int]:
    """
    Translate UTF-16 code-unit offsets to code-point offsets, order preserved.

    An offset pointing at the second half of a surrogate pair maps to the
    code point that contains it.
    """
    result = [0] * len(code_unit_offsets)
    cursor = ScanCursor(text)
    total = utf16_length(text)

    for i in _sorted_indices(code_unit_offsets):
        target = code_unit_offsets[i]
        if target < 0 or target > total:
            raise ValueError(f"Code-unit offset {target} out of range [0, {total}]")
        while not cursor.at_end() and cursor.code_unit_offset + cursor.next_width() <= target:
            cursor.advance()
        result[i] = cursor.code_point_offset

    return result


def to_code_unit_offset(text: str, code_point_offset: int) -> int:
    return to_code_unit_offsets(text, [code_point_offset])[0]


def to_code_point_offset(text: str, code_unit_offset: int) -> int:
    return to_code_point_offsets(text, [code_unit_offset])[0]
