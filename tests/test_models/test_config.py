"""Tests for configuration models."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from popopt.models.config import Algorithm, GAConfig, GWOConfig, SearchInterval, SessionConfig


class TestSearchInterval:
    def test_valid_interval(self):
        interval = SearchInterval(min=-2.0, max=3.0)
        assert interval.width == 5.0

    @pytest.mark.parametrize("lo, hi", [(1.0, 1.0), (2.0, -2.0)])
    def test_rejects_empty_or_inverted(self, lo, hi):
        with pytest.raises(ValidationError):
            SearchInterval(min=lo, max=hi)

    def test_rejects_non_finite(self):
        with pytest.raises(ValidationError):
            SearchInterval(min=-math.inf, max=0.0)
        with pytest.raises(ValidationError):
            SearchInterval(min=0.0, max=math.nan)


class TestGAConfig:
    def test_defaults(self):
        cfg = GAConfig()
        assert cfg.population_size == 50
        assert cfg.chromosome_length == 16
        assert cfg.crossover_rate == 0.8
        assert cfg.mutation_rate == 0.1
        assert (cfg.interval.min, cfg.interval.max) == (-10.0, 10.0)

    @pytest.mark.parametrize(
        "field, value",
        [
            ("population_size", 0),
            ("population_size", 1),
            ("chromosome_length", 0),
            ("crossover_rate", 1.5),
            ("mutation_rate", -0.1),
        ],
    )
    def test_rejects_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            GAConfig(**{field: value})


class TestGWOConfig:
    def test_requires_three_wolves(self):
        with pytest.raises(ValidationError):
            GWOConfig(wolves_count=2)
        assert GWOConfig(wolves_count=3).wolves_count == 3

    def test_rejects_zero_iterations(self):
        with pytest.raises(ValidationError):
            GWOConfig(max_iterations=0)


class TestSessionConfig:
    def test_to_ga_config(self):
        cfg = SessionConfig(population_size=30, chromosome_length=20, mutation_rate=0.05, seed=9)
        ga = cfg.to_ga_config()
        assert ga.population_size == 30
        assert ga.chromosome_length == 20
        assert ga.mutation_rate == 0.05
        assert ga.seed == 9

    def test_to_gwo_config_uses_max_generations(self):
        cfg = SessionConfig(algorithm=Algorithm.GWO, population_size=15, max_generations=250)
        gwo = cfg.to_gwo_config()
        assert gwo.wolves_count == 15
        assert gwo.max_iterations == 250

    def test_algorithm_from_string(self):
        assert SessionConfig.model_validate({"algorithm": "gwo"}).algorithm == Algorithm.GWO
