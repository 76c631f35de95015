"""Leader ranking for the Grey Wolf Optimizer."""

from __future__ import annotations

import math

from popopt.models.candidate import Wolf

LEADER_COUNT = 3


def rank_leaders(wolves: list[Wolf], count: int = LEADER_COUNT) -> list[Wolf]:
    """Return snapshots of the ``count`` fittest wolves, best first.

    Leaders are recomputed from scratch on every call. The sort is stable,
    so among equal fitness the wolf seen first ranks higher. Unevaluated
    wolves rank last.
    """
    ranked = sorted(wolves, key=lambda w: -_rank(w))
    return [wolf.snapshot() for wolf in ranked[:count]]


def _rank(wolf: Wolf) -> float:
    return wolf.fitness if wolf.fitness is not None else -math.inf
