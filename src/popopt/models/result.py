"""Optimization result models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from popopt.models.config import Algorithm


class OptimizationResult(BaseModel):
    """Result of running a session to its generation limit."""

    algorithm: Algorithm
    objective_id: str
    best_positions: list[float] = Field(
        default_factory=list, description="GA: 0 or 1 position; GWO: alpha, beta, delta"
    )
    best_position: float | None = None
    best_value: float | None = Field(default=None, description="Objective value at best_position")
    history: list[float] = Field(
        default_factory=list, description="Best objective value after each generation"
    )
    generation_count: int = 0
