"""GWO position update (encircling and hunting the prey)."""

from __future__ import annotations

import numpy as np

from popopt.models.candidate import Wolf


def decay_parameter(generation: int, max_iterations: int) -> float:
    """Control parameter ``a = 2 - 2 * generation / max_iterations``.

    Not clamped: once ``generation`` exceeds ``max_iterations`` it keeps
    decreasing below zero.
    """
    return 2.0 - 2.0 * generation / max_iterations


def leader_pull(
    leader_position: float,
    position: float,
    a: float,
    rng: np.random.Generator,
) -> float:
    """Candidate position suggested by a single leader.

    Draws r1 then r2 from U(0, 1).
    """
    r1 = rng.random()
    r2 = rng.random()
    A = 2.0 * a * r1 - a
    C = 2.0 * r2
    D = abs(C * leader_position - position)
    return leader_position - A * D


def hunt(
    position: float,
    leaders: list[Wolf],
    a: float,
    rng: np.random.Generator,
) -> float:
    """Average of the pulls towards alpha, beta and delta (unclamped)."""
    pulls = [leader_pull(leader.position, position, a, rng) for leader in leaders]
    return sum(pulls) / len(pulls)
