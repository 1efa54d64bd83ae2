"""
Parameter initialization.

Weights and biases are drawn independently from an explicit, seeded
generator: no global random state, so two networks built from the same
seed are identical and runs are reproducible.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np


@dataclass(frozen=True)
class InitConfig:
    """
    Initialization settings.

    Attributes:
        seed (int): Seed for the generator used when none is passed in
        low (float): Lower bound of the uniform range (inclusive)
        high (float): Upper bound of the uniform range (exclusive)
    """
    seed: int = 42
    low: float = 0.01
    high: float = 1.0

    def __post_init__(self):
        if not self.low < self.high:
            raise ValueError(f"InitConfig needs low < high, got [{self.low}, {self.high})")


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def sample(rng: np.random.Generator, low: float, high: float) -> float:
    """One uniform draw in [low, high)."""
    return float(rng.uniform(low, high))
