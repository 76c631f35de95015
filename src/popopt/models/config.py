"""Optimizer configuration models."""

from __future__ import annotations

import math
from enum import Enum

from pydantic import BaseModel, Field, model_validator


class Algorithm(str, Enum):
    """Available optimization algorithms."""

    GA = "ga"
    GWO = "gwo"


class SearchInterval(BaseModel):
    """Closed real interval all candidate positions must lie within."""

    min: float = -10.0
    max: float = 10.0

    @model_validator(mode="after")
    def _check_bounds(self) -> SearchInterval:
        if not (math.isfinite(self.min) and math.isfinite(self.max)):
            raise ValueError("Search interval bounds must be finite")
        if self.min >= self.max:
            raise ValueError(
                f"Search interval min ({self.min}) must be less than max ({self.max})"
            )
        return self

    @property
    def width(self) -> float:
        return self.max - self.min


class GAConfig(BaseModel):
    """Configuration for the Genetic Algorithm."""

    population_size: int = Field(default=50, ge=2)
    chromosome_length: int = Field(
        default=16, ge=1, description="Bits per chromosome (position resolution)"
    )
    interval: SearchInterval = Field(default_factory=SearchInterval)
    crossover_rate: float = Field(default=0.8, ge=0.0, le=1.0)
    mutation_rate: float = Field(default=0.1, ge=0.0, le=1.0)
    seed: int | None = None


class GWOConfig(BaseModel):
    """Configuration for the Grey Wolf Optimizer."""

    wolves_count: int = Field(default=50, ge=3, description="Pack size, at least 3 leaders")
    interval: SearchInterval = Field(default_factory=SearchInterval)
    max_iterations: int = Field(
        default=100, ge=1, description="Only drives the decay of the control parameter a"
    )
    seed: int | None = None


class SessionConfig(BaseModel):
    """Settings of an interactive optimization session."""

    algorithm: Algorithm = Algorithm.GA
    objective_id: str = "sphere"
    population_size: int = Field(default=50, ge=3)
    max_generations: int = Field(default=100, ge=1)
    interval: SearchInterval = Field(default_factory=SearchInterval)
    crossover_rate: float = Field(default=0.8, ge=0.0, le=1.0)
    mutation_rate: float = Field(default=0.1, ge=0.0, le=1.0)
    chromosome_length: int = Field(default=16, ge=1)
    seed: int | None = None

    def to_ga_config(self) -> GAConfig:
        return GAConfig(
            population_size=self.population_size,
            chromosome_length=self.chromosome_length,
            interval=self.interval,
            crossover_rate=self.crossover_rate,
            mutation_rate=self.mutation_rate,
            seed=self.seed,
        )

    def to_gwo_config(self) -> GWOConfig:
        return GWOConfig(
            wolves_count=self.population_size,
            interval=self.interval,
            max_iterations=self.max_generations,
            seed=self.seed,
        )
