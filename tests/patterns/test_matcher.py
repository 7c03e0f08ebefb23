"""
Unit tests for the pattern matcher.

Tests cover:
- Root matching
- Literal and param matching
- Empty captures
- Percent-encoded paths
- Malformed request paths
"""

import pytest
from genuine.patterns import Match, Pattern, match_parts
from genuine.patterns.compiler.ast_nodes import Literal


class TestRootMatching:
    """Test the root pattern."""

    def setup_method(self):
        self.pattern = Pattern.compile("/")

    def test_root_matches_root(self):
        assert self.pattern.try_match("/") == []

    def test_root_does_not_match_other_paths(self):
        assert self.pattern.try_match("/a") is None
        assert self.pattern.try_match("") is None
        assert self.pattern.try_match("//") is None


class TestBasicMatching:
    """Test literal and param matching."""

    def test_match_static_path(self):
        pattern = Pattern.compile("/users/list")
        assert pattern.try_match("/users/list") == []

    def test_static_path_must_be_consumed(self):
        pattern = Pattern.compile("/users")
        assert pattern.try_match("/users2") is None
        assert pattern.try_match("/users/1") is None
        assert pattern.try_match("/user") is None

    def test_param_between_literals(self):
        pattern = Pattern.compile("/a/{id}/b")
        assert pattern.try_match("/a/42/b") == [Match(name="id", value="42")]

    def test_literal_mismatch_after_param(self):
        pattern = Pattern.compile("/a/{id}/b")
        assert pattern.try_match("/a/42/c") is None
        assert pattern.try_match("/a/42") is None

    def test_trailing_param(self):
        pattern = Pattern.compile("/url/with/{parameters}")
        assert pattern.try_match("/url/with/xyz") == [Match("parameters", "xyz")]

    def test_trailing_remainder_fails(self):
        pattern = Pattern.compile("/url/with/{parameters}")
        assert pattern.try_match("/url/with/xyz/extra") is None

    def test_params_in_pattern_order(self):
        pattern = Pattern.compile("/{a}/x/{b}/{c}")
        matches = pattern.try_match("/1/x/2/3")
        assert [(m.name, m.value) for m in matches] == [("a", "1"), ("b", "2"), ("c", "3")]

    def test_duplicate_names_yield_duplicate_matches(self):
        pattern = Pattern.compile("/{id}/{id}")
        assert pattern.try_match("/1/2") == [Match("id", "1"), Match("id", "2")]

    def test_param_captures_pchars(self):
        pattern = Pattern.compile("/x/{v}")
        assert pattern.try_match("/x/a:b@c!$&'()*+,;=") == [Match("v", "a:b@c!$&'()*+,;=")]


class TestEmptyCaptures:
    """Zero-length captures are allowed by the greedy segment rule."""

    def test_empty_segment_between_literals(self):
        pattern = Pattern.compile("/a/{id}/b")
        assert pattern.try_match("/a//b") == [Match(name="id", value="")]

    def test_empty_trailing_segment(self):
        pattern = Pattern.compile("/a/{id}")
        assert pattern.try_match("/a/") == [Match("id", "")]

    def test_leading_param_against_root(self):
        pattern = Pattern.compile("/{id}")
        assert pattern.try_match("/") == [Match("id", "")]


class TestPercentEncoding:
    """Test byte-exact handling of percent escapes."""

    def test_encoded_literal_matches_identical_encoding(self):
        pattern = Pattern.compile("/files/a%2Fb")
        assert pattern.try_match("/files/a%2Fb") == []

    def test_encoded_literal_does_not_match_decoded_path(self):
        pattern = Pattern.compile("/files/a%2Fb")
        assert pattern.try_match("/files/a/b") is None
        assert pattern.try_match("/files/a%2fb") is None

    def test_param_value_is_raw(self):
        pattern = Pattern.compile("/files/{name}")
        matches = pattern.try_match("/files/report%20final.pdf")

        assert matches[0].value == "report%20final.pdf"
        assert matches[0].decoded == "report final.pdf"

    def test_decoded_utf8(self):
        assert Match("v", "caf%C3%A9").decoded == "café"


class TestMalformedPaths:
    """Malformed request paths are non-matches, never errors."""

    def setup_method(self):
        self.pattern = Pattern.compile("/files/{name}")

    def test_bad_percent_escape(self):
        assert self.pattern.try_match("/files/bad%zz") is None

    def test_truncated_percent_escape(self):
        assert self.pattern.try_match("/files/bad%4") is None

    def test_non_ascii(self):
        assert self.pattern.try_match("/files/café") is None

    def test_space(self):
        assert self.pattern.try_match("/files/a b") is None

    def test_lone_surrogate(self):
        assert self.pattern.try_match("/files/\ud800") is None

    def test_query_string_is_not_parsed(self):
        assert self.pattern.try_match("/files/a?x=1") is None


class TestMatchParts:
    """Test the module-level matching function."""

    def test_results_are_fresh(self):
        pattern = Pattern.compile("/a/{id}")
        first = pattern.try_match("/a/1")
        second = pattern.try_match("/a/1")

        assert first == second
        assert first is not second

    def test_match_to_dict(self):
        assert Match("id", "42").to_dict() == {"name": "id", "value": "42"}

    def test_unknown_part_is_a_defect(self):
        with pytest.raises(TypeError):
            match_parts([Literal(b"/a"), "bogus"], "/a/b")
