"""Binary chromosome encoding."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from popopt.models.config import SearchInterval
from popopt.numeric import clamp


def random_genes(length: int, rng: np.random.Generator) -> NDArray[np.bool_]:
    """Draw ``length`` independent bits, each set with probability 0.5."""
    return rng.random(length) < 0.5


def genes_to_int(genes: NDArray[np.bool_]) -> int:
    """Interpret the bits as an unsigned big-endian integer."""
    value = 0
    for bit in genes:
        value = (value << 1) | int(bool(bit))
    return value


def decode(genes: NDArray[np.bool_], interval: SearchInterval) -> float:
    """Map a bit string linearly onto the search interval.

    All-zero genes decode to exactly ``interval.min`` and all-one genes to
    exactly ``interval.max``. The mapping is monotone in the integer value.
    """
    length = len(genes)
    if length == 0:
        raise ValueError("Cannot decode an empty chromosome")
    max_value = (1 << length) - 1
    value = genes_to_int(genes)
    if value == max_value:
        return interval.max
    # int / int is correctly rounded for arbitrarily long chromosomes
    ratio = value / max_value
    return clamp(interval.min + ratio * interval.width, interval)
