"""Parsing of raw override text into typed values.

Every parser returns the parsed value, or ``PARSE_FAILED`` when the text is
not a valid literal of its kind. Parsers never raise for bad input.
"""

from __future__ import annotations

import math
import re
from typing import Any, Callable, Dict

from .registry import Kind

PARSE_FAILED = object()

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
INT64_MAX_DIGITS = 19

# Strict boolean vocabulary, compared case-insensitively
TRUE_TOKENS = frozenset({"1", "t", "true"})
FALSE_TOKENS = frozenset({"0", "f", "false"})

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def parse_string(raw: str) -> Any:
    return raw


def parse_bool(raw: str) -> Any:
    lowered = raw.lower()
    if lowered in TRUE_TOKENS:
        return True
    if lowered in FALSE_TOKENS:
        return False
    return PARSE_FAILED


def parse_int(raw: str) -> Any:
    """Parse a base-10 signed 64-bit integer."""
    if not _INT_PATTERN.fullmatch(raw):
        return PARSE_FAILED
    digits = raw.lstrip("+-").lstrip("0") or "0"
    if len(digits) > INT64_MAX_DIGITS:
        return PARSE_FAILED
    value = -int(digits) if raw.startswith("-") else int(digits)
    if value < INT64_MIN or value > INT64_MAX:
        return PARSE_FAILED
    return value


def parse_float(raw: str) -> Any:
    """Parse a decimal float literal; finite literals overflowing to inf fail."""
    if not _FLOAT_PATTERN.fullmatch(raw):
        return PARSE_FAILED
    value = float(raw)
    if math.isinf(value) and "inf" not in raw.lower():
        return PARSE_FAILED
    return value


PARSERS: Dict[Kind, Callable[[str], Any]] = {
    Kind.STRING: parse_string,
    Kind.BOOL: parse_bool,
    Kind.INT: parse_int,
    Kind.FLOAT: parse_float,
}


def parse_override(raw: str, kind: Kind) -> Any:
    """Parse raw override text as ``kind``; returns PARSE_FAILED on bad input."""
    return PARSERS[kind](raw)
