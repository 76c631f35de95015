"""Sampling of an objective over the search interval for plotting."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from popopt.models.config import SearchInterval
from popopt.optimizer import ObjectiveFunction

DEFAULT_RESOLUTION = 500


def sample_objective(
    objective: ObjectiveFunction,
    interval: SearchInterval,
    resolution: int = DEFAULT_RESOLUTION,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Evaluate ``objective`` at ``resolution`` evenly spaced points, endpoints included."""
    if resolution < 2:
        raise ValueError(f"resolution must be at least 2, got {resolution}")
    xs = np.linspace(interval.min, interval.max, resolution)
    ys = np.array([objective(float(x)) for x in xs], dtype=float)
    return xs, ys
