"""Population initialization for GA."""

from __future__ import annotations

import numpy as np

from popopt.ga.encoding import random_genes
from popopt.models.candidate import Chromosome


def create_individual(chromosome_length: int, rng: np.random.Generator) -> Chromosome:
    """Create an unevaluated chromosome with uniformly random bits."""
    return Chromosome(genes=random_genes(chromosome_length, rng))


def create_population(
    population_size: int,
    chromosome_length: int,
    rng: np.random.Generator,
) -> list[Chromosome]:
    return [create_individual(chromosome_length, rng) for _ in range(population_size)]
