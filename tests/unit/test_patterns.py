"""
Unit tests for the pattern library: named groups and boundary patterns.
"""
from tweet_text.entity_extraction.patterns import (
    ANY_TLD_TABLE,
    CCTLD_TABLE,
    GTLD_TABLE,
    INVALID_HASHTAG_MATCH_END,
    INVALID_MENTION_MATCH_END,
    INVALID_URL_WITHOUT_PROTOCOL_MATCH_BEGIN,
    VALID_CASHTAG,
    VALID_HASHTAG,
    VALID_MENTION_OR_LIST,
    VALID_REPLY,
    VALID_URL,
)


class TestUrlGroups:
    """Sub-groups of the URL pattern."""

    def test_protocol_domain(self):
        raw = next(VALID_URL.scan("go to http://example.com now"))
        assert raw.text_of("protocol") == "http://"
        assert raw.text_of("domain") == "example.com"
        assert raw.text_of("port") is None
        assert raw.text_of("path") is None
        assert raw.text_of("url") == "http://example.com"

    def test_port_path_query(self):
        raw = next(VALID_URL.scan("http://example.com:8080/p?a=1&b=2."))
        assert raw.text_of("port") == "8080"
        assert raw.text_of("path") == "/p"
        assert raw.text_of("query") == "?a=1&b=2"

    def test_subdomains(self):
        raw = next(VALID_URL.scan("https://www.news.bbc.co.uk/x"))
        assert raw.text_of("domain") == "www.news.bbc.co.uk"

    def test_path_keeps_balanced_parens_drops_period(self):
        raw = next(VALID_URL.scan("check http://example.com/a_(b)/path."))
        assert raw.text_of("path") == "/a_(b)/path"

    def test_nested_parens(self):
        raw = next(VALID_URL.scan("http://rdio.com/track/We_Up_(Album_Version_(Edited))/ yes"))
        assert raw.text_of("path") == "/track/We_Up_(Album_Version_(Edited))/"

    def test_cctld_needs_slash_without_protocol(self):
        assert list(VALID_URL.scan("see foo.co today")) == []
        raw = next(VALID_URL.scan("see foo.co/bar today"))
        assert raw.text_of("url") == "foo.co/bar"

    def test_cctld_with_protocol(self):
        raw = next(VALID_URL.scan("http://foo.co"))
        assert raw.text_of("domain") == "foo.co"

    def test_unicode_domain_only_with_protocol(self):
        raw = next(VALID_URL.scan("http://例え.jp"))
        assert raw.text_of("domain") == "例え.jp"
        assert list(VALID_URL.scan("例え.jp")) == []

    def test_punycode_tld(self):
        raw = next(VALID_URL.scan("see example.xn--p1ai"))
        assert raw.text_of("domain") == "example.xn--p1ai"

    def test_unknown_tld(self):
        assert list(VALID_URL.scan("see example.notatld")) == []

    def test_before_group(self):
        raw = next(VALID_URL.scan("-example.com"))
        assert raw.text_of("before") == "-"


class TestOtherGroups:
    """Named groups for hashtags, mentions, replies and cashtags."""

    def test_hashtag_groups(self):
        raw = next(VALID_HASHTAG.scan("Hello #world"))
        assert raw.text_of("before") == " "
        assert raw.text_of("hash") == "#"
        assert raw.text_of("tag") == "world"
        assert raw.group("tag").start == 7

    def test_hashtag_at_start(self):
        raw = next(VALID_HASHTAG.scan("#start"))
        assert raw.text_of("before") == ""
        assert raw.start == 0

    def test_mention_groups(self):
        raw = next(VALID_MENTION_OR_LIST.scan("RT@jack/team hi"))
        assert raw.text_of("before") == "RT"
        assert raw.text_of("at") == "@"
        assert raw.text_of("username") == "jack"
        assert raw.text_of("list") == "/team"

    def test_reply_anchored(self):
        assert VALID_REPLY.match_start("  @jack hi").text_of("username") == "jack"
        assert VALID_REPLY.match_start("hi @jack") is None

    def test_cashtag_groups(self):
        raw = next(VALID_CASHTAG.scan("$BRK.A"))
        assert raw.text_of("dollar") == "$"
        assert raw.text_of("cashtag") == "BRK.A"

    def test_roles(self):
        assert VALID_URL.roles["domain"] == "domain"
        assert VALID_HASHTAG.roles["tag"] == "value"


class TestBoundaryPatterns:
    """Short patterns applied to the text around a candidate."""

    def test_invalid_hashtag_end(self):
        assert INVALID_HASHTAG_MATCH_END.match("#foo#bar", 4)
        assert INVALID_HASHTAG_MATCH_END.match("#foo＃bar", 4)
        assert INVALID_HASHTAG_MATCH_END.match("#foo://x", 4)
        assert not INVALID_HASHTAG_MATCH_END.match("#foo bar", 4)

    def test_invalid_mention_end(self):
        assert INVALID_MENTION_MATCH_END.match("@a@b", 2)
        assert INVALID_MENTION_MATCH_END.match("@aé", 2)
        assert INVALID_MENTION_MATCH_END.match("@a://", 2)
        assert not INVALID_MENTION_MATCH_END.match("@a:", 2)

    def test_invalid_url_preceding_char(self):
        for before in ("-", "_", ".", "/"):
            assert INVALID_URL_WITHOUT_PROTOCOL_MATCH_BEGIN.search(before)
        assert not INVALID_URL_WITHOUT_PROTOCOL_MATCH_BEGIN.search(" ")
        assert not INVALID_URL_WITHOUT_PROTOCOL_MATCH_BEGIN.search("")


class TestTldTable:
    """TLD lookup used when resolving URL domains."""

    def test_match_end(self):
        assert ANY_TLD_TABLE.match_end("x.com/a", 2) == 5
        assert ANY_TLD_TABLE.match_end("x.com", 2) == 5

    def test_case_insensitive(self):
        assert GTLD_TABLE.match_end("X.COM", 2) == 5

    def test_needs_boundary(self):
        assert ANY_TLD_TABLE.match_end("x.comx", 2) is None
        assert ANY_TLD_TABLE.match_end("x.com@y", 2) is None
        assert ANY_TLD_TABLE.match_end("x.com-y", 2) == 5

    def test_separate_lists(self):
        assert GTLD_TABLE.match_end("x.jp", 2) is None
        assert CCTLD_TABLE.match_end("x.jp", 2) == 4
        assert ANY_TLD_TABLE.match_end("x.рф", 2) == 4
