"""Grey Wolf Optimizer engine."""

from __future__ import annotations

import logging

from popopt.gwo.hunting import decay_parameter, hunt
from popopt.gwo.leaders import rank_leaders
from popopt.models.candidate import Wolf
from popopt.models.config import GWOConfig
from popopt.numeric import clamp, to_fitness
from popopt.optimizer import BaseOptimizer, ObjectiveFunction

logger = logging.getLogger(__name__)


class GreyWolfOptimizer(BaseOptimizer):
    """Grey Wolf Optimizer over a one-dimensional interval.

    The pack is updated in place each generation; alpha, beta and delta are
    recomputed from the current pack on every evaluation.
    """

    config_type = GWOConfig

    def __init__(self) -> None:
        super().__init__()
        self.wolves: list[Wolf] = []
        self.leaders: list[Wolf] = []

    @property
    def name(self) -> str:
        return "gwo"

    @property
    def config(self) -> GWOConfig:
        self._require_initialized()
        return self._config  # type: ignore[return-value]

    @property
    def alpha(self) -> Wolf | None:
        return self.leaders[0] if self.leaders else None

    @property
    def beta(self) -> Wolf | None:
        return self.leaders[1] if len(self.leaders) > 1 else None

    @property
    def delta(self) -> Wolf | None:
        return self.leaders[2] if len(self.leaders) > 2 else None

    def _reset(self) -> None:
        cfg = self.config
        positions = self._rng.uniform(cfg.interval.min, cfg.interval.max, cfg.wolves_count)
        self.wolves = [Wolf(position=float(p)) for p in positions]
        self.leaders = []
        logger.info(
            "GWO initialized: wolves=%d, interval=[%g, %g], max_iterations=%d",
            cfg.wolves_count,
            cfg.interval.min,
            cfg.interval.max,
            cfg.max_iterations,
        )

    def evaluate_fitness(self, objective: ObjectiveFunction) -> None:
        self._require_initialized()
        fitness = [to_fitness(objective(wolf.position)) for wolf in self.wolves]
        for wolf, value in zip(self.wolves, fitness):
            wolf.fitness = value
        self.leaders = rank_leaders(self.wolves)

    def run_generation(self, objective: ObjectiveFunction) -> None:
        cfg = self.config

        # 1. Refresh leaders from the current pack
        self.evaluate_fitness(objective)

        # 2. Linearly decaying exploration parameter
        a = decay_parameter(self._generation, cfg.max_iterations)

        # 3. Move every wolf towards the leaders, 6 draws per wolf
        new_positions = [
            clamp(hunt(wolf.position, self.leaders, a, self._rng), cfg.interval)
            for wolf in self.wolves
        ]
        for wolf, position in zip(self.wolves, new_positions):
            wolf.position = position
            wolf.fitness = None

        self._generation += 1
        logger.debug(
            "GWO generation %d: a=%.4f alpha=%s",
            self._generation,
            a,
            self.alpha.position if self.alpha else None,
        )

    def get_best_positions(self) -> list[float]:
        return [leader.position for leader in self.leaders]
