"""Substitution rules applied to each number of a sequence."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class Rule(Protocol):
    """Anything that maps a number to a replacement, or "" when it does not apply."""

    def apply(self, number: int) -> str: ...


@dataclass(frozen=True)
class MultipleRule:
    """Replace multiples of ``divisor`` with ``replacement``.

    ``MultipleRule(3, "fizz")`` turns 3, 6, 9, ... into "fizz". The divisor
    is expected to be positive; a zero divisor raises ZeroDivisionError.
    """

    divisor: int
    replacement: str

    def apply(self, number: int) -> str:
        return self.replacement if number % self.divisor == 0 else ""
