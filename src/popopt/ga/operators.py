"""GA operators: tournament selection, single-point crossover, bit-flip mutation."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from popopt.models.candidate import Chromosome

TOURNAMENT_SIZE = 3


def tournament_selection(
    population: list[Chromosome],
    rng: np.random.Generator,
    tournament_size: int = TOURNAMENT_SIZE,
) -> Chromosome:
    """Pick the fittest of ``tournament_size`` draws made with replacement.

    A later contender only wins if its fitness is strictly greater, so the
    first drawn candidate wins ties. Unevaluated candidates count as worst.
    """
    if not population:
        raise ValueError("Cannot select from an empty population")
    best = population[int(rng.integers(len(population)))]
    for _ in range(tournament_size - 1):
        contender = population[int(rng.integers(len(population)))]
        if _rank(contender) > _rank(best):
            best = contender
    return best


def _rank(chromosome: Chromosome) -> float:
    return chromosome.fitness if chromosome.fitness is not None else -np.inf


def crossover_single_point(
    parent1: NDArray[np.bool_],
    parent2: NDArray[np.bool_],
    rate: float,
    rng: np.random.Generator,
) -> NDArray[np.bool_]:
    """Single-point crossover producing one child.

    With probability ``rate`` the child takes parent1's bits before a random
    cut point c in [1, length - 1] and parent2's bits from c on. Otherwise,
    or when the chromosome is a single bit, the child is a copy of parent1.
    """
    length = len(parent1)
    if rng.random() < rate and length > 1:
        point = int(rng.integers(1, length))
        return np.concatenate([parent1[:point], parent2[point:]])
    return parent1.copy()


def mutate(
    genes: NDArray[np.bool_],
    rate: float,
    rng: np.random.Generator,
) -> NDArray[np.bool_]:
    """Flip each bit independently with probability ``rate`` (in place)."""
    flips = rng.random(len(genes)) < rate
    genes[flips] = ~genes[flips]
    return genes
