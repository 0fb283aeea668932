"""
Unit tests for text checks and single-entity validators.
"""
import pytest

from tweet_text.entity_extraction.validation import (
    classify_entity_text,
    contains_rtl,
    find_invalid_characters,
    has_invalid_characters,
    is_tco_url,
    is_valid_cashtag,
    is_valid_hashtag,
    is_valid_list,
    is_valid_username,
)
from tweet_text.models.entity import EntityKind


class TestInvalidCharacters:

    def test_clean_text(self):
        assert not has_invalid_characters("Hello #world")
        assert find_invalid_characters("Hello #world") == []

    @pytest.mark.parametrize("char", ["\ufeff", "\ufffe", "\uffff", "\u202a", "\u202e"])
    def test_detected(self, char):
        text = f"ab{char}cd"
        assert has_invalid_characters(text)
        assert find_invalid_characters(text) == [2]

    def test_every_position(self):
        assert find_invalid_characters("\ufeffa\u202eb") == [0, 2]


class TestRtl:

    def test_hebrew(self):
        assert contains_rtl("שלום")

    def test_arabic_in_mixed_text(self):
        assert contains_rtl("hello مرحبا")

    def test_ltr_only(self):
        assert not contains_rtl("hello world")

    def test_window(self):
        text = "hello שלום"
        assert not contains_rtl(text, 0, 5)
        assert contains_rtl(text, 6)


class TestTcoUrl:

    def test_tco(self):
        assert is_tco_url("http://t.co/abc123")
        assert is_tco_url("https://t.co/ABC")

    def test_not_tco(self):
        assert not is_tco_url("http://t.co/abc/extra")
        assert not is_tco_url("http://example.com/abc")


class TestClassifyEntityText:

    @pytest.mark.parametrize(
        "text, kind",
        [
            ("#hashtag", EntityKind.HASHTAG),
            ("@jack", EntityKind.MENTION),
            ("@jack/team", EntityKind.LIST_MENTION),
            ("http://example.com", EntityKind.URL),
            ("$AAPL", EntityKind.CASHTAG),
        ],
    )
    def test_single_entity(self, text, kind):
        assert classify_entity_text(text) is kind

    @pytest.mark.parametrize("text", ["", "plain", "#one #two", " #lead", "#trail ", "#123"])
    def test_not_single_entity(self, text):
        assert classify_entity_text(text) is None


class TestValidators:

    def test_hashtag(self):
        assert is_valid_hashtag("#ハッシュタグ")
        assert not is_valid_hashtag("hashtag")
        assert not is_valid_hashtag("@jack")

    def test_username(self):
        assert is_valid_username("@jack_dorsey")
        assert not is_valid_username("jack")
        assert not is_valid_username("@jack/team")

    def test_list(self):
        assert is_valid_list("@jack/team-1")
        assert not is_valid_list("@jack")

    def test_cashtag(self):
        assert is_valid_cashtag("$BRK.A")
        assert not is_valid_cashtag("$5")
