"""
Tests for the built-in rule matchers.
"""

import pytest

from launchplan.errors import MatcherEvaluationError
from launchplan.search.matchers import Always, Pattern, Prefix, Substring, extract_query


class TestPrefix:

    def test_matches_prefix(self):
        assert Prefix("img:")("img:cats") is True

    def test_leading_whitespace_is_trimmed(self):
        assert Prefix("img:")("  img:cats") is True

    def test_untrimmed_prefix_does_not_match_whitespace(self):
        assert Prefix("img:", trim=False)("  img:cats") is False

    def test_no_match(self):
        assert Prefix("img:")("cats img:") is False

    def test_extract_strips_prefix(self):
        assert Prefix("img:").extract(" img: cats ") == " cats"

    def test_extract_keeps_prefix_when_strip_disabled(self):
        assert Prefix("img:", strip=False).extract("img:cats") == "img:cats"


class TestSubstring:

    def test_case_insensitive_by_default(self):
        assert Substring("Cats")("i like CATS") is True

    def test_case_sensitive(self):
        assert Substring("Cats", case_sensitive=True)("i like cats") is False

    def test_no_match(self):
        assert Substring("dogs")("cats") is False


class TestPattern:

    def test_search_anywhere(self):
        assert Pattern(r"\d{3}")("call 555 now") is True

    def test_no_match(self):
        assert Pattern(r"^\d+$")("abc") is False

    def test_named_query_group_is_extracted(self):
        assert Pattern(r"^#(?P<query>\d+)$").extract("#42") == "42"

    def test_extract_without_group_returns_query(self):
        assert Pattern(r"\d+").extract(" 42 ") == "42"

    def test_malformed_pattern_raises_evaluation_error(self):
        with pytest.raises(MatcherEvaluationError):
            Pattern("([unclosed")("anything")


class TestAlways:

    def test_matches_everything(self):
        assert Always()("") is True
        assert Always()("anything") is True


def test_extract_query_passes_through_plain_callables():
    assert extract_query(lambda q: True, "img:cats") == "img:cats"
