"""Optimization session - holds one active optimizer and drives it tick by tick."""

from __future__ import annotations

import logging
from typing import Callable

from popopt.ga.engine import GeneticAlgorithm
from popopt.gwo.engine import GreyWolfOptimizer
from popopt.models.config import Algorithm, SessionConfig
from popopt.models.result import OptimizationResult
from popopt.objectives.base import ObjectiveTemplate
from popopt.objectives.registry import get_registry
from popopt.optimizer import BaseOptimizer

logger = logging.getLogger(__name__)

# Type for progress callback: (generation, best_position, best_value)
ProgressCallback = Callable[[int, float | None, float | None], None]


def create_optimizer(algorithm: Algorithm) -> BaseOptimizer:
    """Build an uninitialized optimizer for ``algorithm``."""
    if algorithm == Algorithm.GA:
        return GeneticAlgorithm()
    return GreyWolfOptimizer()


class OptimizationSession:
    """Runs one optimizer against one objective.

    Mirrors an interactive control loop:
    - ``start``/``pause`` toggle the running flag
    - ``tick`` advances one generation while running, up to max_generations
    - ``step`` advances one generation on demand
    - ``reset`` restarts the run with the current configuration
    """

    def __init__(self, config: SessionConfig | None = None) -> None:
        self.config = config or SessionConfig()
        self.is_running = False
        self.objective: ObjectiveTemplate = get_registry().get(self.config.objective_id)
        self.optimizer: BaseOptimizer = create_optimizer(self.config.algorithm)
        self.best_positions: list[float] = []
        self.history: list[float] = []
        self.reset()

    @property
    def generation(self) -> int:
        return self.optimizer.generation

    @property
    def is_finished(self) -> bool:
        return self.generation >= self.config.max_generations

    @property
    def best_position(self) -> float | None:
        return self.best_positions[0] if self.best_positions else None

    @property
    def best_value(self) -> float | None:
        if self.best_position is None:
            return None
        return self.objective(self.best_position)

    def reconfigure(self, config: SessionConfig) -> None:
        """Switch algorithm, objective or parameters; always restarts the run."""
        objective = get_registry().get(config.objective_id)
        self.config = config
        self.objective = objective
        self.optimizer = create_optimizer(config.algorithm)
        self.reset()

    def reset(self) -> None:
        self.is_running = False
        if self.config.algorithm == Algorithm.GA:
            self.optimizer.initialize(self.config.to_ga_config())
        else:
            self.optimizer.initialize(self.config.to_gwo_config())
        self.optimizer.evaluate_fitness(self.objective)
        self.best_positions = []
        self.history = []
        logger.info(
            "Session reset: algorithm=%s objective=%s",
            self.optimizer.name,
            self.config.objective_id,
        )

    def start(self) -> None:
        if not self.is_finished:
            self.is_running = True

    def pause(self) -> None:
        self.is_running = False

    def toggle(self) -> None:
        if self.is_running:
            self.pause()
        else:
            self.start()

    def step(self) -> None:
        """Advance exactly one generation and refresh the best positions."""
        self.optimizer.run_generation(self.objective)
        self.best_positions = self.optimizer.get_best_positions()
        if self.best_value is not None:
            self.history.append(self.best_value)

    def tick(self) -> bool:
        """Advance one generation if running. Returns True if a generation ran."""
        if not self.is_running:
            return False
        self.step()
        if self.is_finished:
            self.is_running = False
            logger.info(
                "Session finished: %s ran %d generations, best x=%s f(x)=%s",
                self.optimizer.name,
                self.generation,
                self.best_position,
                self.best_value,
            )
        return True

    def to_result(self) -> OptimizationResult:
        return OptimizationResult(
            algorithm=self.config.algorithm,
            objective_id=self.config.objective_id,
            best_positions=list(self.best_positions),
            best_position=self.best_position,
            best_value=self.best_value,
            history=list(self.history),
            generation_count=self.generation,
        )


def run_optimization(
    config: SessionConfig,
    progress_callback: ProgressCallback | None = None,
) -> OptimizationResult:
    """Run a fresh session until ``config.max_generations`` is reached."""
    session = OptimizationSession(config)
    session.start()
    while session.tick():
        if progress_callback:
            progress_callback(session.generation, session.best_position, session.best_value)
    return session.to_result()
