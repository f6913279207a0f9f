"""Application services gluing the core to the statistics repository."""

from __future__ import annotations

from typing import Optional

from .core.algorithm import FizzBuzzAlgorithm
from .core.models import FizzBuzzResult, ParameterSet, StatEntry
from .core.rules import MultipleRule
from .repository import Parameters, StatisticsRepository


class StatisticsService:
    """Records requests and reports the most frequent one."""

    def __init__(self, repository: StatisticsRepository):
        self.repository = repository

    def record_request(self, parameters: Parameters) -> StatEntry:
        return self.repository.increment(parameters)

    def most_frequent_request(self) -> Optional[StatEntry]:
        return self.repository.most_frequent()


class GenerationService:
    """Builds the two rules, runs the generator and optionally records the request.

    Args:
        statistics: Where to record requests. Without it, nothing is recorded.
        record_statistics: Set to False to keep a wired StatisticsService idle.
    """

    def __init__(self, statistics: Optional[StatisticsService] = None, record_statistics: bool = True):
        self.statistics = statistics
        self.record_statistics = record_statistics

    def process(self, int1: int, int2: int, limit: int, str1: str, str2: str) -> FizzBuzzResult:
        algorithm = FizzBuzzAlgorithm(
            MultipleRule(int1, str1),
            MultipleRule(int2, str2),
        )
        result = FizzBuzzResult(items=algorithm.generate(limit))

        if self.statistics is not None and self.record_statistics:
            self.statistics.record_request({
                "int1": int1,
                "int2": int2,
                "limit": limit,
                "str1": str1,
                "str2": str2,
            })

        return result

    def process_parameters(self, params: ParameterSet) -> FizzBuzzResult:
        return self.process(params.int1, params.int2, params.limit, params.str1, params.str2)
