"""Built-in test functions."""

from __future__ import annotations

import numpy as np

from popopt.objectives.base import ObjectiveTemplate


class Sphere(ObjectiveTemplate):
    @property
    def objective_id(self) -> str:
        return "sphere"

    @property
    def display_name(self) -> str:
        return "Sphere"

    @property
    def description(self) -> str:
        return "f(x) = x^2, global minimum 0 at x = 0"

    def evaluate(self, x: float) -> float:
        return x * x


class Rastrigin(ObjectiveTemplate):
    """Multimodal function with a local minimum near every integer."""

    @property
    def objective_id(self) -> str:
        return "rastrigin"

    @property
    def display_name(self) -> str:
        return "Rastrigin"

    @property
    def description(self) -> str:
        return "f(x) = x^2 - 10 cos(2 pi x) + 10, global minimum 0 at x = 0"

    def evaluate(self, x: float) -> float:
        return float(x * x - 10.0 * np.cos(2.0 * np.pi * x) + 10.0)


class ShiftedSphere(ObjectiveTemplate):
    @property
    def objective_id(self) -> str:
        return "shifted_sphere"

    @property
    def display_name(self) -> str:
        return "Custom Function"

    @property
    def description(self) -> str:
        return "f(x) = x^2 - 2, global minimum -2 at x = 0"

    def evaluate(self, x: float) -> float:
        return x * x - 2.0
