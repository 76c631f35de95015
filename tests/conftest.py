"""Common test fixtures."""

from __future__ import annotations

import pytest

from popopt.models.config import GAConfig, GWOConfig, SearchInterval, SessionConfig


class SequenceRng:
    """Stand-in generator returning scripted values, for exact operator tests."""

    def __init__(self, randoms: list[float] | None = None, integers: list[int] | None = None) -> None:
        self._randoms = list(randoms or [])
        self._integers = list(integers or [])
        self.random_calls = 0

    def random(self) -> float:
        self.random_calls += 1
        return self._randoms.pop(0)

    def integers(self, low: int, high: int | None = None) -> int:
        return self._integers.pop(0)


@pytest.fixture
def sequence_rng():
    return SequenceRng


@pytest.fixture
def quadratic():
    """f(x) = (x - 7)^2"""
    return lambda x: (x - 7.0) ** 2


@pytest.fixture
def sphere():
    return lambda x: x * x


@pytest.fixture
def fast_ga_config() -> GAConfig:
    """Small seeded GA config for tests."""
    return GAConfig(
        population_size=20,
        chromosome_length=12,
        interval=SearchInterval(min=-10.0, max=10.0),
        seed=42,
    )


@pytest.fixture
def fast_gwo_config() -> GWOConfig:
    """Small seeded GWO config for tests."""
    return GWOConfig(
        wolves_count=10,
        interval=SearchInterval(min=-10.0, max=10.0),
        max_iterations=30,
        seed=7,
    )


@pytest.fixture
def fast_session_config() -> SessionConfig:
    return SessionConfig(population_size=12, max_generations=8, chromosome_length=12, seed=3)
