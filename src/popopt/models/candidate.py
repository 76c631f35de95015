"""Candidate models: GA chromosomes and GWO wolves."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, Field


class Chromosome(BaseModel):
    """A GA candidate: a fixed-length bit string and its decoded evaluation."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    genes: NDArray[np.bool_] = Field(description="Bit sequence, most significant bit first")
    position: float | None = Field(default=None, description="Decoded position, None until evaluated")
    fitness: float | None = Field(default=None, description="Negated objective, None until evaluated")

    @property
    def is_evaluated(self) -> bool:
        return self.fitness is not None

    def clone(self) -> Chromosome:
        return Chromosome(genes=self.genes.copy(), position=self.position, fitness=self.fitness)


class Wolf(BaseModel):
    """A GWO candidate: a real position and its fitness."""

    position: float
    fitness: float | None = None

    def snapshot(self) -> Wolf:
        return Wolf(position=self.position, fitness=self.fitness)
