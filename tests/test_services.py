"""Tests for the generation and statistics services."""
from __future__ import annotations

from fizzbuzz_api.core.models import FizzBuzzResult, ParameterSet
from fizzbuzz_api.services import GenerationService, StatisticsService


class TestGenerationService:

    def test_process_without_statistics(self):
        result = GenerationService().process(3, 5, 15, "fizz", "buzz")
        assert isinstance(result, FizzBuzzResult)
        assert result.count == 15
        assert result.items[14] == "fizzbuzz"

    def test_first_pair_comes_first(self):
        result = GenerationService().process(5, 3, 15, "buzz", "fizz")
        assert result.items[14] == "buzzfizz"

    def test_response_shape(self):
        result = GenerationService().process(2, 3, 6, "foo", "bar")
        assert result.to_response() == {
            "result": ["1", "foo", "bar", "foo", "5", "foobar"],
            "count": 6,
        }

    def test_records_request(self, repository, fizzbuzz_params):
        service = GenerationService(StatisticsService(repository))
        service.process(**fizzbuzz_params)
        service.process(**fizzbuzz_params)
        assert repository.most_frequent().count == 2
        assert repository.most_frequent().parameters == fizzbuzz_params

    def test_recording_can_be_disabled(self, repository, fizzbuzz_params):
        service = GenerationService(StatisticsService(repository), record_statistics=False)
        service.process(**fizzbuzz_params)
        assert repository.most_frequent() is None

    def test_process_parameters(self, repository, fizzbuzz_params):
        service = GenerationService(StatisticsService(repository))
        result = service.process_parameters(ParameterSet(**fizzbuzz_params))
        assert result.count == 15
        assert repository.most_frequent().parameters == fizzbuzz_params


class TestStatisticsService:

    def test_nothing_recorded(self, repository):
        assert StatisticsService(repository).most_frequent_request() is None

    def test_record_independently(self, repository, fizzbuzz_params, foobar_params):
        service = StatisticsService(repository)
        for _ in range(4):
            service.record_request(fizzbuzz_params)
        for _ in range(2):
            service.record_request(foobar_params)
        stats = service.most_frequent_request()
        assert stats.count == 4
        assert stats.parameters == fizzbuzz_params
