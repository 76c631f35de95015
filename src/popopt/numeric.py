"""Numeric helpers shared by both optimizers."""

from __future__ import annotations

import math

import numpy as np

from popopt.models.config import SearchInterval


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create a private generator; ``None`` seeds from OS entropy."""
    return np.random.default_rng(seed)


def to_fitness(objective_value: float) -> float:
    """Convert a minimization objective value into a maximization fitness.

    NaN is mapped to ``-inf`` so it ranks below every real candidate and
    never breaks comparisons.
    """
    value = float(objective_value)
    if math.isnan(value):
        return -math.inf
    return -value


def clamp(value: float, interval: SearchInterval) -> float:
    return max(interval.min, min(interval.max, value))
