"""
Seedable source of uniform and normal deviates shared by the market,
the event draw and the public proxy update.
"""

import numpy as np


class RandomSource:
    """
    Thin wrapper around a ``numpy.random.Generator``.

    A single instance is threaded through every stochastic component so a
    fixed seed reproduces a whole run, provided the draw order is unchanged.
    """

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def uniform(self) -> float:
        """Draw from Uniform(0, 1)."""
        return float(self._rng.random())

    def normal(self, mean: float = 0.0, std_dev: float = 1.0) -> float:
        """Draw from Normal(mean, std_dev)."""
        if std_dev < 0:
            raise ValueError(f"Standard deviation must be non-negative, got {std_dev}")
        return float(self._rng.normal(mean, std_dev))
