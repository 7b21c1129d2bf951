"""Tool routing — the is_even descriptor, argument validation, and dispatch.

Two failure channels:
- ToolCallError is a protocol-level fault (unknown tool, malformed arguments).
- A numeral that does not match its format comes back as ToolOutcome with
  is_error set, so the caller sees it as content.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import ValidationError

from ..config import SUPPORTED_FORMATS, TOOL_NAME, VERSION
from .models import ErrorKind, IsEvenRequest
from .parity import evaluate
from .parsing import NumberParseError

logger = logging.getLogger(__name__)

TOOL_DESCRIPTION = "Enterprise-grade solution for determining if a number is even"

INPUT_SCHEMA: dict = {
    "type": "object",
    "properties": {
        "value": {
            "oneOf": [
                {"type": "string"},
                {"type": "number"},
            ],
            "description": "The value to check for evenness",
        },
        "format": {
            "type": "string",
            "enum": list(SUPPORTED_FORMATS),
            "description": "Number format (decimal, binary, hex, scientific)",
        },
    },
    "required": ["value"],
}


class ToolCallError(Exception):
    """A call rejected before evaluation."""

    def __init__(self, kind: ErrorKind, message: str, data: Optional[dict] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.data = data


@dataclass(frozen=True)
class ToolOutcome:
    """Text payload of a completed call."""

    text: str
    is_error: bool = False


def list_tools() -> list[dict]:
    """Descriptors of every tool this server exposes."""
    return [
        {
            "name": TOOL_NAME,
            "description": TOOL_DESCRIPTION,
            "inputSchema": INPUT_SCHEMA,
        }
    ]


def _validation_details(exc: ValidationError) -> list[dict]:
    return [
        {"loc": ".".join(str(part) for part in err["loc"]), "msg": err["msg"]}
        for err in exc.errors()
    ]


def validate_arguments(arguments: Any) -> IsEvenRequest:
    """Check argument shape and build the request.

    Raises:
        ToolCallError: INVALID_PARAMS if arguments are not an object, value is
            missing or not a string/number, or format is not supported.
    """
    if not isinstance(arguments, Mapping):
        raise ToolCallError(ErrorKind.INVALID_PARAMS, "Invalid arguments: must provide a value to check")
    try:
        return IsEvenRequest.model_validate(dict(arguments))
    except ValidationError as exc:
        raise ToolCallError(
            ErrorKind.INVALID_PARAMS,
            "Invalid arguments: must provide a value to check",
            data={"details": _validation_details(exc)},
        ) from exc


def call_tool(name: str, arguments: Any) -> ToolOutcome:
    """Dispatch a tool call by name.

    Args:
        name: Requested tool name. Only 'is_even' exists.
        arguments: Raw call arguments, e.g. {"value": "1010", "format": "binary"}.

    Returns:
        ToolOutcome with the JSON result, or an error text for parse failures.

    Raises:
        ToolCallError: METHOD_NOT_FOUND or INVALID_PARAMS.
    """
    if name != TOOL_NAME:
        raise ToolCallError(ErrorKind.METHOD_NOT_FOUND, f"Unknown tool: {name}")

    request = validate_arguments(arguments)

    try:
        result = evaluate(request, version=VERSION)
    except NumberParseError as exc:
        logger.info("Rejected %r as %s: %s", request.value, exc.number_format.value, exc.reason)
        return ToolOutcome(text=f"Error: Failed to parse number: {exc.reason}", is_error=True)

    payload = result.model_dump(mode="json", by_alias=True)
    return ToolOutcome(text=json.dumps(payload, indent=2, ensure_ascii=False))
