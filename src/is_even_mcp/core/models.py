"""Pydantic data models — the request and result objects of the is_even tool."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, field_validator

EVEN_MESSAGE = "✨ Congratulations! You've discovered an even number! ✨"
ODD_MESSAGE = "😔 Unfortunately, this number suffers from odd-itis"


class NumberFormat(str, Enum):
    """Numeral encodings accepted for string values."""

    DECIMAL = "decimal"
    BINARY = "binary"
    HEX = "hex"
    SCIENTIFIC = "scientific"


SUPPORTED_FORMATS: tuple[str, ...] = tuple(f.value for f in NumberFormat)


class ErrorKind(Enum):
    """Protocol-level fault kinds with their JSON-RPC error codes."""

    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602

    @property
    def code(self) -> int:
        return self.value


class IsEvenRequest(BaseModel):
    """Arguments of an is_even call."""

    model_config = ConfigDict(extra="ignore")

    value: Union[StrictStr, StrictInt, StrictFloat] = Field(description="The value to check for evenness")
    format: Optional[NumberFormat] = Field(None, description="Number format (decimal, binary, hex, scientific)")

    @field_validator("value", mode="before")
    @classmethod
    def _reject_booleans(cls, v):
        if isinstance(v, bool):
            raise ValueError("value must be a string or a number, not a boolean")
        return v

    @property
    def resolved_format(self) -> NumberFormat:
        return self.format or NumberFormat.DECIMAL


class IsEvenResult(BaseModel):
    """Parity verdict plus the decorative analysis metadata."""

    model_config = ConfigDict(populate_by_name=True)

    is_even: bool = Field(alias="isEven")
    value: Union[str, int, float] = Field(description="The original input, unchanged")
    format: NumberFormat
    message: str
    confidence: str = "99.99999%"
    analysis_time: str = Field("0.000001ms", alias="analysisTime")
    methodology: str = "Advanced binary state analysis"
    version: str
