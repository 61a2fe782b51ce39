import math

import pytest

from envfallback.core.config.coercion import (
    PARSE_FAILED,
    parse_bool,
    parse_float,
    parse_int,
    parse_override,
)
from envfallback.core.config.registry import Kind


def test_string_is_verbatim():
    assert parse_override("", Kind.STRING) == ""
    assert parse_override("  spaced  ", Kind.STRING) == "  spaced  "


class TestParseBool:
    @pytest.mark.parametrize("raw", ["1", "t", "T", "TRUE", "true", "True", "tRuE"])
    def test_true_tokens(self, raw):
        assert parse_bool(raw) is True

    @pytest.mark.parametrize("raw", ["0", "f", "F", "FALSE", "false", "False"])
    def test_false_tokens(self, raw):
        assert parse_bool(raw) is False

    @pytest.mark.parametrize(
        "raw",
        ["off", "on", "yes", "no", "y", "n", "nope", "nada", "anything", "", " true"],
    )
    def test_other_text_is_rejected(self, raw):
        assert parse_bool(raw) is PARSE_FAILED


class TestParseInt:
    @pytest.mark.parametrize(
        "raw, expected",
        [("2", 2), ("-17", -17), ("+5", 5), ("007", 7), ("9223372036854775807", 2**63 - 1)],
    )
    def test_valid(self, raw, expected):
        assert parse_int(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "notanumber",
            "1.5",
            " 2",
            "2 ",
            "1_000",
            "0x10",
            "9223372036854775808",
            "-9223372036854775809",
            "9" * 5000,
            "-" + "9" * 5000,
            "1" + "0" * 19,
        ],
    )
    def test_invalid(self, raw):
        assert parse_int(raw) is PARSE_FAILED

    def test_leading_zeros_do_not_count_toward_length(self):
        assert parse_int("0" * 5000 + "42") == 42
        assert parse_int("-" + "0" * 5000 + "42") == -42


class TestParseFloat:
    @pytest.mark.parametrize(
        "raw, expected",
        [("0.6", 0.6), ("1", 1.0), ("-2.5e3", -2500.0), (".5", 0.5), ("1.", 1.0)],
    )
    def test_valid(self, raw, expected):
        value = parse_float(raw)
        assert value == expected
        assert type(value) is float

    def test_special_values(self):
        assert parse_float("inf") == math.inf
        assert parse_float("-Infinity") == -math.inf
        assert math.isnan(parse_float("NaN"))

    @pytest.mark.parametrize("raw", ["", "abc", "1,5", " 1.0", "1_0.0", "1e400", "1e"])
    def test_invalid(self, raw):
        assert parse_float(raw) is PARSE_FAILED
