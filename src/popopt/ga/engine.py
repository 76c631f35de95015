"""GA engine - generational loop with elitism."""

from __future__ import annotations

import logging

from popopt.ga.evaluation import best_chromosome, evaluate_chromosome
from popopt.ga.operators import crossover_single_point, mutate, tournament_selection
from popopt.ga.population import create_population
from popopt.models.candidate import Chromosome
from popopt.models.config import GAConfig
from popopt.optimizer import BaseOptimizer, ObjectiveFunction

logger = logging.getLogger(__name__)


class GeneticAlgorithm(BaseOptimizer):
    """Binary-coded Genetic Algorithm minimizing a function of one variable.

    - Tournament selection (size 3, with replacement)
    - Single-point crossover and per-bit mutation
    - Single-candidate elitism, population replaced wholesale each generation
    """

    config_type = GAConfig

    def __init__(self) -> None:
        super().__init__()
        self.population: list[Chromosome] = []

    @property
    def name(self) -> str:
        return "ga"

    @property
    def config(self) -> GAConfig:
        self._require_initialized()
        return self._config  # type: ignore[return-value]

    def _reset(self) -> None:
        cfg = self.config
        self.population = create_population(cfg.population_size, cfg.chromosome_length, self._rng)
        logger.info(
            "GA initialized: population=%d, chromosome_length=%d, interval=[%g, %g]",
            cfg.population_size,
            cfg.chromosome_length,
            cfg.interval.min,
            cfg.interval.max,
        )

    def evaluate_fitness(self, objective: ObjectiveFunction) -> None:
        interval = self.config.interval
        self.population = [
            evaluate_chromosome(chrom.clone(), interval, objective) for chrom in self.population
        ]

    def run_generation(self, objective: ObjectiveFunction) -> None:
        cfg = self.config
        current = self.population
        if any(not chrom.is_evaluated for chrom in current):
            current = [
                evaluate_chromosome(chrom.clone(), cfg.interval, objective) for chrom in current
            ]

        # 1. Elitism: carry the best candidate over unchanged
        elite = best_chromosome(current)
        new_population: list[Chromosome] = [elite.clone()]

        # 2. Fill the rest with evaluated offspring
        while len(new_population) < cfg.population_size:
            parent1 = tournament_selection(current, self._rng)
            parent2 = tournament_selection(current, self._rng)
            genes = crossover_single_point(
                parent1.genes, parent2.genes, cfg.crossover_rate, self._rng
            )
            child = Chromosome(genes=mutate(genes, cfg.mutation_rate, self._rng))
            evaluate_chromosome(child, cfg.interval, objective)
            new_population.append(child)

        # 3. Commit
        self.population = new_population
        self._generation += 1
        best = best_chromosome(new_population)
        logger.debug(
            "GA generation %d: best position=%s fitness=%s",
            self._generation,
            best.position,
            best.fitness,
        )

    def get_best_positions(self) -> list[float]:
        best = best_chromosome(self.population)
        if best is None or best.position is None:
            return []
        return [best.position]

    @property
    def best_fitness(self) -> float | None:
        best = best_chromosome(self.population)
        return best.fitness if best is not None else None
