"""Tests for identifier and regex matching helpers."""

import pytest

from podfilter.utils.regex import is_id_prefix, match_any_regex, match_id


class TestIsIdPrefix:
    """Tests for hex-prefix detection."""

    @pytest.mark.parametrize("value", ["", "0", "abc", "ABCdef0123456789"])
    def test_hex_only(self, value):
        assert is_id_prefix(value) is True

    @pytest.mark.parametrize("value", ["abc.*", "g", "abc ", "^abc", "web"])
    def test_non_hex(self, value):
        assert is_id_prefix(value) is False


class TestMatchAnyRegex:
    """Tests for match_any_regex."""

    def test_search_not_fullmatch(self):
        assert match_any_regex("my-web-pod", ["web"]) is True

    def test_first_match_wins(self):
        assert match_any_regex("db", ["web", "d."]) is True

    def test_no_patterns(self):
        assert match_any_regex("web", []) is False

    def test_invalid_pattern_skipped(self):
        assert match_any_regex("web", ["[", "*", "w"]) is True
        assert match_any_regex("web", ["["]) is False

    @pytest.mark.parametrize("pattern", ["a{9999999999}", "a{2,9999999999}"])
    def test_oversized_repeat_count_skipped(self, pattern):
        assert match_any_regex("aaa", [pattern]) is False
        assert match_any_regex("aaa", [pattern, "a"]) is True


class TestMatchId:
    """Tests for match_id."""

    def test_prefix(self):
        assert match_id("deadbeef", ["DEAD"]) is True

    def test_prefix_does_not_match_middle(self):
        assert match_id("deadbeef", ["beef"]) is False

    def test_regex(self):
        assert match_id("deadbeef", ["beef$"]) is True

    def test_id_side_is_not_lowercased(self):
        assert match_id("DEADBEEF", ["dead"]) is False
