"""Common contract for the population-based optimizers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

import numpy as np
from pydantic import BaseModel

from popopt.numeric import make_rng

# Objective to minimize: position -> value
ObjectiveFunction = Callable[[float], float]


class BaseOptimizer(ABC):
    """Abstract optimizer holding an RNG, a configuration and a generation counter.

    Subclasses build their candidates in ``_reset`` and implement the
    evaluation and generation steps. All methods run synchronously; an
    instance must not be shared between threads.
    """

    config_type: type[BaseModel]

    def __init__(self) -> None:
        self._config: BaseModel | None = None
        self._rng: np.random.Generator = make_rng()
        self._generation = 0

    @property
    @abstractmethod
    def name(self) -> str:
        """Short algorithm identifier."""

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_initialized(self) -> bool:
        return self._config is not None

    def initialize(self, config: BaseModel) -> None:
        """Re-seed the generator and rebuild all state from ``config``."""
        if not isinstance(config, self.config_type):
            raise TypeError(
                f"{type(self).__name__} expects {self.config_type.__name__}, "
                f"got {type(config).__name__}"
            )
        self._config = config
        self._rng = make_rng(getattr(config, "seed", None))
        self._generation = 0
        self._reset()

    def _require_initialized(self) -> None:
        if self._config is None:
            raise RuntimeError(f"{type(self).__name__} has not been initialized")

    @abstractmethod
    def _reset(self) -> None:
        """Build fresh candidates from the current configuration."""

    @abstractmethod
    def evaluate_fitness(self, objective: ObjectiveFunction) -> None:
        """Refresh fitness values without advancing the generation."""

    @abstractmethod
    def run_generation(self, objective: ObjectiveFunction) -> None:
        """Advance exactly one generation."""

    @abstractmethod
    def get_best_positions(self) -> list[float]:
        """Positions of the current best candidates, best first."""
