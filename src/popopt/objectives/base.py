"""Base class for objective function templates."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ObjectiveTemplate(ABC):
    """A named test function of one variable to be minimized.

    Instances are callable, so they can be passed directly to an optimizer.
    """

    @property
    @abstractmethod
    def objective_id(self) -> str:
        """Unique identifier for this objective."""

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Name shown in the UI."""

    @property
    def description(self) -> str:
        return ""

    @abstractmethod
    def evaluate(self, x: float) -> float:
        """Objective value at ``x``."""

    def __call__(self, x: float) -> float:
        return self.evaluate(x)
