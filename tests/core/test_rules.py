"""Tests for divisor/replacement rules."""
from __future__ import annotations

import dataclasses

import pytest

from fizzbuzz_api.core.rules import MultipleRule


class TestMultipleRule:

    def test_replaces_multiples(self):
        rule = MultipleRule(3, "fizz")
        assert rule.apply(3) == "fizz"
        assert rule.apply(9) == "fizz"
        assert rule.apply(300) == "fizz"

    def test_non_multiples_give_empty_string(self):
        rule = MultipleRule(3, "fizz")
        assert rule.apply(1) == ""
        assert rule.apply(10) == ""

    def test_divisor_one_matches_everything(self):
        rule = MultipleRule(1, "all")
        assert all(rule.apply(n) == "all" for n in range(1, 50))

    def test_zero_is_a_multiple(self):
        assert MultipleRule(7, "x").apply(0) == "x"

    def test_zero_divisor_is_not_validated(self):
        with pytest.raises(ZeroDivisionError):
            MultipleRule(0, "never").apply(5)

    def test_rule_is_immutable(self):
        rule = MultipleRule(3, "fizz")
        with pytest.raises(dataclasses.FrozenInstanceError):
            rule.divisor = 4  # type: ignore[misc]

    def test_equal_rules_compare_equal(self):
        assert MultipleRule(5, "buzz") == MultipleRule(5, "buzz")
