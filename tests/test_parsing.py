import math

import pytest

from is_even_mcp.core.models import NumberFormat
from is_even_mcp.core.parsing import NumberParseError, parse_number


@pytest.mark.parametrize(
    "text, number_format, expected",
    [
        ("42", NumberFormat.DECIMAL, 42),
        ("-17", NumberFormat.DECIMAL, -17),
        ("007", NumberFormat.DECIMAL, 7),
        ("1010", NumberFormat.BINARY, 10),
        ("0", NumberFormat.BINARY, 0),
        ("FF", NumberFormat.HEX, 255),
        ("ff", NumberFormat.HEX, 255),
        ("1a", NumberFormat.HEX, 26),
        ("1.5e1", NumberFormat.SCIENTIFIC, 15.0),
        ("-2E3", NumberFormat.SCIENTIFIC, -2000.0),
        ("3.e-1", NumberFormat.SCIENTIFIC, 0.3),
        ("1e+2", NumberFormat.SCIENTIFIC, 100.0),
    ],
)
def test_parse_number_accepts_valid_numerals(text, number_format, expected):
    assert parse_number(text, number_format) == expected


def test_parse_number_defaults_to_decimal():
    assert parse_number("12") == 12


def test_parse_number_accepts_plain_format_names():
    assert parse_number("11", "binary") == 3


def test_scientific_stays_float():
    assert isinstance(parse_number("4e0", NumberFormat.SCIENTIFIC), float)


def test_scientific_overflow_is_infinite():
    assert math.isinf(parse_number("1e999", NumberFormat.SCIENTIFIC))


@pytest.mark.parametrize(
    "text, number_format, reason",
    [
        ("abc", NumberFormat.DECIMAL, "Invalid decimal format"),
        ("1.0", NumberFormat.DECIMAL, "Invalid decimal format"),
        ("+5", NumberFormat.DECIMAL, "Invalid decimal format"),
        ("", NumberFormat.DECIMAL, "Invalid decimal format"),
        ("12\n", NumberFormat.DECIMAL, "Invalid decimal format"),
        ("١٢", NumberFormat.DECIMAL, "Invalid decimal format"),
        ("12", NumberFormat.BINARY, "Invalid binary format"),
        ("G1", NumberFormat.BINARY, "Invalid binary format"),
        ("-101", NumberFormat.BINARY, "Invalid binary format"),
        ("0xFF", NumberFormat.HEX, "Invalid hexadecimal format"),
        ("GG", NumberFormat.HEX, "Invalid hexadecimal format"),
        ("1_000", NumberFormat.HEX, "Invalid hexadecimal format"),
        ("15", NumberFormat.SCIENTIFIC, "Invalid scientific notation"),
        (".5e1", NumberFormat.SCIENTIFIC, "Invalid scientific notation"),
        ("1.5e", NumberFormat.SCIENTIFIC, "Invalid scientific notation"),
    ],
)
def test_parse_number_rejects_mismatched_numerals(text, number_format, reason):
    with pytest.raises(NumberParseError) as excinfo:
        parse_number(text, number_format)

    assert excinfo.value.reason == reason
    assert excinfo.value.number_format is number_format
    assert str(excinfo.value) == reason
