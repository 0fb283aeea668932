"""
Shared test fixtures for the extraction test suite.
"""
import pytest

from tweet_text.models.entity import Entity, EntityKind


# ==========================================================================
# Texts
# ==========================================================================

@pytest.fixture
def mixed_text():
    return "@jack check http://example.com #news $AAPL"


@pytest.fixture
def multilingual_hashtags():
    """(text, expected tag) pairs across scripts."""
    return [
        ("Привет #мир", "мир"),
        ("שלום #עברית", "עברית"),
        ("مرحبا #العربية", "العربية"),
        ("สวัสดี #ภาษาไทย", "ภาษาไทย"),
        ("안녕 #한국어", "한국어"),
        ("こんにちは #ひらがな", "ひらがな"),
        ("テスト #カタカナ", "カタカナ"),
        ("你好 #中文", "中文"),
        ("Café #crème", "crème"),
        ("full width ＃ｔａｇ", "ｔａｇ"),
    ]


@pytest.fixture
def sample_texts():
    """Realistic messages used for whole-pipeline property checks."""
    return [
        "Hello #world",
        "RT@jack: hi",
        "check http://example.com/a_(b)/path.",
        "$AAPL is up",
        "price is $5",
        "user@host.com",
        "@jack/list-name and @jill say #hi to http://t.co/abc123 $BRK.A",
        "😀 #emoji @smile http://例え.jp/path?q=1",
        "RT @user: #tag1 #tag2 http://en.wikipedia.org/wiki/Primer_(film) done.",
        "Visit example.com or foo.co/bar, not -bad.com",
        "#foo#bar @a@b http://example.com/#anchor @x/1bad",
        "Привет #мир и @друг $GOOG, www.яндекс.рф",
    ]


# ==========================================================================
# Entities
# ==========================================================================

@pytest.fixture
def make_entity():
    """Factory for synthetic entities (merger tests)."""

    def _make(kind: EntityKind, start: int, end: int) -> Entity:
        text = "x" * (end - start)
        return Entity(kind=kind, start=start, end=end, text=text, value=text)

    return _make
