"""
Unit tests for the character-class tables.
"""
import pytest

from tweet_text.entity_extraction.character_classes import (
    CharacterClass,
    class_names,
    class_ranges,
    get_class,
)


class TestCharacterClassConstruction:
    """Ranges are sorted, coalesced and validated at construction."""

    def test_ranges_coalesced(self):
        cc = CharacterClass("X", ((5, 10), (1, 3), (4, 4), (20, 30), (25, 40)))
        assert cc.ranges == ((1, 10), (20, 40))

    def test_disjoint_ranges_kept(self):
        cc = CharacterClass("X", ((10, 12), (1, 2)))
        assert cc.ranges == ((1, 2), (10, 12))

    def test_inverted_range_rejected(self):
        with pytest.raises(ValueError):
            CharacterClass("X", ((10, 1),))

    def test_from_chars(self):
        cc = CharacterClass.from_chars("X", "cab")
        assert cc.ranges == ((0x61, 0x63),)

    def test_union(self):
        a = CharacterClass("A", ((1, 5),))
        b = CharacterClass("B", ((6, 9), (20, 20)))
        u = a.union("U", b)
        assert u.name == "U"
        assert u.ranges == ((1, 9), (20, 20))

    @pytest.mark.parametrize("name", class_names())
    def test_every_table_sorted_and_disjoint(self, name):
        ranges = class_ranges(name)
        assert ranges
        for low, high in ranges:
            assert low <= high
        for (_, prev_high), (next_low, _) in zip(ranges, ranges[1:]):
            assert prev_high + 1 < next_low


class TestMembership:
    """Binary-search membership over the tables."""

    def test_alpha_digit(self):
        alnum = get_class("ALNUM")
        assert "a" in alnum
        assert "Z" in alnum
        assert "7" in alnum
        assert "_" not in alnum
        assert "é" not in alnum

    def test_latin_accents_exclude_math_signs(self):
        accents = get_class("LATIN_ACCENTS")
        assert "é" in accents
        assert "ñ" in accents
        assert "ạ" in accents     # Vietnamese, Latin Extended Additional
        assert "×" not in accents
        assert "÷" not in accents

    @pytest.mark.parametrize("char", ["ж", "ש", "ع", "ก", "한", "あ", "カ", "中", "ｱ", "ａ"])
    def test_hashtag_alpha_covers_scripts(self, char):
        assert char in get_class("HASHTAG_ELIGIBLE_ALPHA")

    def test_hashtag_alnum_adds_digits_and_underscore(self):
        alpha = get_class("HASHTAG_ELIGIBLE_ALPHA")
        alnum = get_class("HASHTAG_ELIGIBLE_ALNUM")
        for char in ("1", "１", "_"):
            assert char not in alpha
            assert char in alnum

    def test_unicode_space(self):
        spaces = get_class("UNICODE_SPACE")
        for char in (" ", "\t", "\n", "\u00a0", "\u2003", "\u3000"):
            assert char in spaces
        assert "a" not in spaces

    def test_invalid_control(self):
        invalid = get_class("INVALID_CONTROL")
        for char in ("\ufeff", "\ufffe", "\uffff", "\u202a", "\u202e"):
            assert char in invalid
        assert " " not in invalid

    def test_rtl_scripts(self):
        rtl = get_class("RTL_SCRIPTS")
        assert "ש" in rtl
        assert "ع" in rtl
        assert "a" not in rtl

    def test_contains_any(self):
        rtl = get_class("RTL_SCRIPTS")
        assert rtl.contains_any("hello שלום")
        assert not rtl.contains_any("hello")

    def test_below_first_range(self):
        assert "\x00" not in get_class("ALPHA")


class TestLookup:
    """Name lookup and rendering."""

    def test_class_ranges(self):
        assert class_ranges("DIGIT") == ((0x30, 0x39),)
        assert class_ranges("ALNUM") == ((0x30, 0x39), (0x41, 0x5A), (0x61, 0x7A))

    def test_unknown_name_raises(self):
        with pytest.raises(KeyError):
            get_class("NOT_A_CLASS")

    def test_to_pattern(self):
        cc = CharacterClass("X", ((0x41, 0x41), (0x61, 0x7A)))
        assert cc.to_pattern() == r"\u0041\u0061-\u007a"

    def test_punctuation_table(self):
        punct = get_class("PUNCTUATION")
        for char in "!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~":
            assert char in punct
        assert "a" not in punct
