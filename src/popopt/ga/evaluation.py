"""Chromosome evaluation."""

from __future__ import annotations

from popopt.ga.encoding import decode
from popopt.models.candidate import Chromosome
from popopt.models.config import SearchInterval
from popopt.numeric import to_fitness
from popopt.optimizer import ObjectiveFunction


def evaluate_chromosome(
    chromosome: Chromosome,
    interval: SearchInterval,
    objective: ObjectiveFunction,
) -> Chromosome:
    """Decode a chromosome and store its position and fitness in place.

    Fitness is the negated objective value (larger = better); NaN objective
    values become ``-inf``.
    """
    position = decode(chromosome.genes, interval)
    chromosome.position = position
    chromosome.fitness = to_fitness(objective(position))
    return chromosome


def best_chromosome(population: list[Chromosome]) -> Chromosome | None:
    """Return the evaluated chromosome with the highest fitness.

    Ties go to the first occurrence in population order.
    """
    best: Chromosome | None = None
    for chrom in population:
        if chrom.fitness is None:
            continue
        if best is None or chrom.fitness > best.fitness:
            best = chrom
    return best
