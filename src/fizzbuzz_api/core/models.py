"""Pydantic data models — the shared business objects.

The service layer, the statistics repository and the HTTP server all use
these models as the common interface for generation and statistics.
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field

ParameterValue = Union[int, str]

INT_MAX = 1000
LIMIT_MAX = 100_000
STR_MAX_LENGTH = 50


class ParameterSet(BaseModel):
    """The five request parameters — generation input and statistics key."""

    model_config = ConfigDict(strict=True, frozen=True)

    int1: int = Field(gt=0, le=INT_MAX, description="First divisor")
    int2: int = Field(gt=0, le=INT_MAX, description="Second divisor")
    limit: int = Field(gt=0, le=LIMIT_MAX, description="Upper bound of the sequence (inclusive)")
    str1: str = Field(min_length=1, max_length=STR_MAX_LENGTH, description="Replacement for multiples of int1")
    str2: str = Field(min_length=1, max_length=STR_MAX_LENGTH, description="Replacement for multiples of int2")

    def to_dict(self) -> dict[str, ParameterValue]:
        return self.model_dump()


class StatEntry(BaseModel):
    """How many times one parameter set has been requested."""

    parameters: dict[str, ParameterValue]
    count: int = Field(ge=0)


class FizzBuzzResult(BaseModel):
    """An immutable generated sequence."""

    model_config = ConfigDict(frozen=True)

    items: list[str] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.items)

    def to_response(self) -> dict:
        return {"result": list(self.items), "count": self.count}
