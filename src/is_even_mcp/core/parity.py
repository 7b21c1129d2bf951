"""Parity evaluation — the modulus check and the result document."""

from __future__ import annotations

import logging

from .models import EVEN_MESSAGE, ODD_MESSAGE, IsEvenRequest, IsEvenResult
from .parsing import Number, parse_number

logger = logging.getLogger(__name__)


def is_even(number: Number) -> bool:
    """Remainder-by-two test on the value as given.

    Floats are not rounded first, so 1.5 is odd and inf (NaN remainder) is odd.
    """
    return number % 2 == 0


def resolve_number(request: IsEvenRequest) -> Number:
    """Numeric values pass through; strings are parsed under the request format."""
    if isinstance(request.value, str):
        return parse_number(request.value, request.resolved_format)
    return request.value


def evaluate(request: IsEvenRequest, version: str) -> IsEvenResult:
    """Evaluate a validated request.

    Raises:
        NumberParseError: If a string value does not match its format.
    """
    result = is_even(resolve_number(request))
    return IsEvenResult(
        is_even=result,
        value=request.value,
        format=request.resolved_format,
        message=EVEN_MESSAGE if result else ODD_MESSAGE,
        version=version,
    )
