"""Generalized FizzBuzz sequence generation.

Every number from 1 to ``limit`` is passed through the rules in order. The
non-empty replacements are concatenated (rule order decides the order of the
pieces, not divisor size); a number no rule matches is kept as its decimal
string.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from .rules import Rule


def apply_rules(rules: Iterable[Rule], number: int) -> str:
    """Transform a single number with every rule."""
    output = "".join(rule.apply(number) for rule in rules)
    return output if output else str(number)


def generate(rules: Sequence[Rule], limit: int) -> list[str]:
    """Generate the sequence for 1..limit inclusive.

    A limit of zero or less gives an empty list.
    """
    return [apply_rules(rules, i) for i in range(1, limit + 1)]


class FizzBuzzAlgorithm:
    """A fixed, ordered composition of rules."""

    def __init__(self, *rules: Rule):
        self.rules: tuple[Rule, ...] = rules

    def generate(self, limit: int) -> list[str]:
        return generate(self.rules, limit)
