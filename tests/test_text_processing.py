"""Tests for input parsing helpers."""

import pytest

from candidate_portal.utils.text_processing import (
    contains_ci,
    parse_bool,
    parse_float,
    parse_int,
    truncate,
)


class TestParseFloat:
    @pytest.mark.parametrize("value, expected", [
        ("7.5", 7.5),
        ("7.5abc", 7.5),
        ("  8", 8.0),
        (".5", 0.5),
        ("-1", -1.0),
        (6, 6.0),
        (6.25, 6.25),
    ])
    def test_parses(self, value, expected):
        assert parse_float(value) == expected

    @pytest.mark.parametrize("value", ["", "abc", None, [], float("nan")])
    def test_defaults(self, value):
        assert parse_float(value) == 0.0

    def test_custom_default(self):
        assert parse_float("x", default=7.0) == 7.0


class TestParseInt:
    @pytest.mark.parametrize("value, expected", [
        ("3", 3),
        ("3 years", 3),
        ("2.9", 2),
        (4, 4),
        (4.7, 4),
    ])
    def test_parses(self, value, expected):
        assert parse_int(value) == expected

    @pytest.mark.parametrize("value", ["", "many", None])
    def test_defaults(self, value):
        assert parse_int(value) == 0


class TestParseBool:
    @pytest.mark.parametrize("value", [True, "true", "on", "1", "Yes", 1])
    def test_truthy(self, value):
        assert parse_bool(value) is True

    @pytest.mark.parametrize("value", [False, "false", "off", "0", "", 0])
    def test_falsy(self, value):
        assert parse_bool(value) is False

    def test_unknown_uses_default(self):
        assert parse_bool("maybe") is False
        assert parse_bool(None, default=True) is True


class TestTextHelpers:
    def test_contains_ci(self):
        assert contains_ci("PostgreSQL", "sql")
        assert not contains_ci("Go", "python")

    def test_truncate(self):
        assert truncate("short", 10) == "short"
        assert truncate("a long name here", 6) == "a lon…"
        assert truncate("anything", 0) == ""


class TestNonFiniteInput:
    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), "1e999", 10 ** 400])
    def test_parse_float_defaults(self, value):
        assert parse_float(value) == 0.0

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_parse_int_defaults(self, value):
        assert parse_int(value) == 0
