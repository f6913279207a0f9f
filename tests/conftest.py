"""Shared fixtures for the FizzBuzz API tests."""
from __future__ import annotations

import pytest

from fizzbuzz_api.config import Settings
from fizzbuzz_api.repository import StatisticsRepository
from fizzbuzz_api.server import create_app


FIZZBUZZ_PARAMS = {"int1": 3, "int2": 5, "limit": 15, "str1": "fizz", "str2": "buzz"}
FOOBAR_PARAMS = {"int1": 2, "int2": 7, "limit": 20, "str1": "foo", "str2": "bar"}


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fizzbuzz_params() -> dict:
    return dict(FIZZBUZZ_PARAMS)


@pytest.fixture
def foobar_params() -> dict:
    return dict(FOOBAR_PARAMS)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def stats_file(tmp_path):
    return tmp_path / "var" / "statistics.json"


@pytest.fixture
def repository(stats_file) -> StatisticsRepository:
    return StatisticsRepository.from_path(stats_file)


@pytest.fixture
def settings(tmp_path, stats_file) -> Settings:
    return Settings(environment="test", data_dir=tmp_path, stats_file=stats_file)


@pytest.fixture
def app(settings):
    app = create_app(settings)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
