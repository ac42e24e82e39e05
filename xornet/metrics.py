"""
Metrics and evaluation utilities for xornet.
"""

from __future__ import annotations

import numpy as np

from .matrix import _check_same_shape


def mse_loss(error: np.ndarray) -> float:
    """Mean of the squared entries of an error matrix (targets - outputs)."""
    return float(np.mean(np.square(error)))


def binary_accuracy(predictions: np.ndarray, targets: np.ndarray,
                    threshold: float = 0.5) -> float:
    """
    Fraction of entries on the same side of ``threshold`` as the target.

    Raises:
        ShapeMismatchError: If the two matrices differ in shape.
    """
    _check_same_shape("binary_accuracy", predictions, targets)
    if predictions.size == 0:
        return 0.0
    hits = (predictions > threshold) == (targets > threshold)
    return float(np.mean(hits))
