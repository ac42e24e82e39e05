"""
xornet.activations — sigmoid and the elementwise matrix mapper.

``sigmoid_derivative`` takes the *output* of ``sigmoid``, not the
pre-activation: d/dx sigmoid(x) = s * (1 - s) with s = sigmoid(x).
"""

from __future__ import annotations

import math
from typing import Callable

import numpy as np

from .matrix import DTYPE, _require_2d


def sigmoid(x: float) -> float:
    """
    Logistic sigmoid.

    sigmoid(x) = 1 / (1 + exp(-x))

    Saturates toward 0 or 1 for large |x|; no clamping is applied.
    """
    return 1.0 / (1.0 + math.exp(-x))


def sigmoid_derivative(y: float) -> float:
    """Derivative of sigmoid expressed in terms of its output ``y``."""
    return y * (1.0 - y)


def map_matrix(m: np.ndarray, fn: Callable[[float], float]) -> np.ndarray:
    """
    Apply a scalar function to every entry of a matrix.

    Returns a new matrix of the same shape; ``m`` is left untouched.

    Example:
        >>> h = map_matrix(pre_activation, sigmoid)
    """
    _require_2d(m, "map_matrix")
    rows, cols = m.shape
    out = np.empty((rows, cols), dtype=DTYPE)
    for i in range(rows):
        for j in range(cols):
            out[i, j] = fn(float(m[i, j]))
    return out
