"""
Weight initialization for xornet.

Weights are drawn independently from U[0, 1). The random source is
injected: pass a ``numpy.random.Generator``, or a seed, or nothing to
seed from the wall clock.
"""

from __future__ import annotations

import time
from typing import Optional, Tuple

import numpy as np

from .matrix import DTYPE


def make_rng(seed: Optional[int] = None,
             rng: Optional[np.random.Generator] = None
             ) -> Tuple[np.random.Generator, Optional[int]]:
    """
    Resolve the random source for a new network.

    Returns:
        (generator, seed) where seed is None if ``rng`` was supplied.
    """
    if rng is not None:
        return rng, None
    if seed is None:
        seed = time.time_ns()
    return np.random.default_rng(seed), seed


def uniform_(m: np.ndarray, rng: np.random.Generator,
             low: float = 0.0, high: float = 1.0) -> None:
    """Fill ``m`` in place with U[low, high) values."""
    m[...] = rng.uniform(low, high, size=m.shape)


def uniform_matrix(rows: int, cols: int, rng: np.random.Generator) -> np.ndarray:
    """Allocate a (rows, cols) matrix filled from U[0, 1)."""
    m = np.empty((rows, cols), dtype=DTYPE)
    uniform_(m, rng)
    return m
