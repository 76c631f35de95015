"""Tests for chromosome evaluation."""

from __future__ import annotations

import math

import numpy as np
import pytest

from popopt.ga.evaluation import best_chromosome, evaluate_chromosome
from popopt.models.candidate import Chromosome
from popopt.models.config import SearchInterval


def make_population(fitness_values: list[float | None]) -> list[Chromosome]:
    return [
        Chromosome(genes=np.zeros(4, dtype=bool), position=float(i), fitness=f)
        for i, f in enumerate(fitness_values)
    ]


class TestBestChromosome:
    def test_first_occurrence_wins_ties(self):
        population = make_population([-2.0, -2.0, -5.0])
        assert best_chromosome(population) is population[0]

    def test_tie_after_lower_candidates(self):
        population = make_population([-9.0, -1.0, -3.0, -1.0])
        assert best_chromosome(population) is population[1]

    def test_skips_unevaluated(self):
        population = make_population([None, -4.0, None])
        assert best_chromosome(population) is population[1]

    def test_all_negative_infinity_returns_first(self):
        population = make_population([-math.inf, -math.inf])
        assert best_chromosome(population) is population[0]

    def test_empty_or_unevaluated(self):
        assert best_chromosome([]) is None
        assert best_chromosome(make_population([None, None])) is None


class TestEvaluateChromosome:
    def test_sets_position_and_fitness(self):
        chrom = Chromosome(genes=np.array([True, True, True, False]))
        result = evaluate_chromosome(chrom, SearchInterval(min=0.0, max=15.0), lambda x: (x - 7.0) ** 2)
        assert result is chrom
        assert chrom.position == pytest.approx(14.0)
        assert chrom.fitness == pytest.approx(-49.0)
