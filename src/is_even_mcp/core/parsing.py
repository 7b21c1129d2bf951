"""Numeral parsing for string inputs.

Each format has one pattern, matched against the whole string, and one
converter. Patterns accept ASCII digits only.
"""

from __future__ import annotations

import logging
import re
import sys
from typing import Callable, NamedTuple, Union

from .models import NumberFormat

logger = logging.getLogger(__name__)

Number = Union[int, float]


class NumberParseError(ValueError):
    """A string value does not match its declared numeral format."""

    def __init__(self, number_format: NumberFormat, reason: str):
        super().__init__(reason)
        self.number_format = number_format
        self.reason = reason


class _Rule(NamedTuple):
    pattern: re.Pattern
    convert: Callable[[str], Number]
    reason: str


def _int_digit_limit() -> int:
    """Interpreter cap on decimal digits for int(), 0 when unlimited."""
    get_limit = getattr(sys, "get_int_max_str_digits", None)
    return get_limit() if get_limit else 0


def _parse_decimal(text: str) -> int:
    """Base-10 conversion. Past the int() digit cap, keep sign and last digit.

    The truncated value has the same parity as the full one.
    """
    digits = text.lstrip("-")
    limit = _int_digit_limit()
    if limit and len(digits) > limit:
        sign = "-" if text.startswith("-") else ""
        return int(sign + digits[-1])
    return int(text, 10)


RULES: dict[NumberFormat, _Rule] = {
    NumberFormat.DECIMAL: _Rule(
        re.compile(r"-?[0-9]+"),
        _parse_decimal,
        "Invalid decimal format",
    ),
    NumberFormat.BINARY: _Rule(
        re.compile(r"[01]+"),
        lambda s: int(s, 2),
        "Invalid binary format",
    ),
    NumberFormat.HEX: _Rule(
        re.compile(r"[0-9A-Fa-f]+"),
        lambda s: int(s, 16),
        "Invalid hexadecimal format",
    ),
    NumberFormat.SCIENTIFIC: _Rule(
        re.compile(r"-?[0-9]+\.?[0-9]*[eE][+-]?[0-9]+"),
        float,
        "Invalid scientific notation",
    ),
}


def parse_number(text: str, number_format: NumberFormat = NumberFormat.DECIMAL) -> Number:
    """Parse a string under the given numeral format.

    Args:
        text: The raw string value, e.g. '1010' or '1.5e1'.
        number_format: Encoding to interpret it with. Default decimal.

    Returns:
        An int for decimal, binary and hex; a float for scientific.
        Decimal strings longer than the interpreter's int() digit cap come
        back as their signed last digit, which keeps the parity.

    Raises:
        NumberParseError: If the string does not match the format's pattern.
    """
    number_format = NumberFormat(number_format)
    rule = RULES[number_format]
    if rule.pattern.fullmatch(text) is None:
        raise NumberParseError(number_format, rule.reason)
    number = rule.convert(text)
    logger.debug("Parsed %r as %s -> %r", text, number_format.value, number)
    return number
