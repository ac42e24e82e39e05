"""
Shape-checked matrix operations for xornet.

Matrices are plain 2-D ``numpy.ndarray`` objects of dtype float64.
Every operation verifies operand shapes before touching numpy, so an
incompatible pair raises ``ShapeMismatchError`` instead of being
broadcast, truncated or padded.
"""

from __future__ import annotations

import numpy as np

from .core import NeuralError, NeuralException, ShapeMismatchError

DTYPE = np.float64


def _require_2d(m: np.ndarray, operation: str) -> None:
    if not isinstance(m, np.ndarray) or m.ndim != 2:
        raise NeuralException(
            NeuralError.INVALID_ARGUMENT,
            f"{operation}: expected a 2-D matrix, got {type(m).__name__}"
            f" with shape {getattr(m, 'shape', None)}",
        )


def as_matrix(data) -> np.ndarray:
    """Convert nested sequences (or an array) into a float64 matrix."""
    m = np.array(data, dtype=DTYPE)
    _require_2d(m, "as_matrix")
    return m


def matmul(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Matrix product ``a . b``; requires ``a.cols == b.rows``."""
    _require_2d(a, "matmul")
    _require_2d(b, "matmul")
    if a.shape[1] != b.shape[0]:
        raise ShapeMismatchError("matmul", a.shape, b.shape)
    return a @ b


def _check_same_shape(operation: str, a: np.ndarray, b: np.ndarray) -> None:
    _require_2d(a, operation)
    _require_2d(b, operation)
    if a.shape != b.shape:
        raise ShapeMismatchError(operation, a.shape, b.shape)


def add_(dst: np.ndarray, delta: np.ndarray) -> np.ndarray:
    """In-place ``dst += delta``. Returns ``dst`` (same object)."""
    _check_same_shape("add_", dst, delta)
    dst += delta
    return dst


def sub(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    _check_same_shape("sub", a, b)
    return a - b


def mul_elem(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Elementwise (Hadamard) product."""
    _check_same_shape("mul_elem", a, b)
    return a * b


def scale(alpha: float, m: np.ndarray) -> np.ndarray:
    _require_2d(m, "scale")
    return alpha * m


def transpose(m: np.ndarray) -> np.ndarray:
    _require_2d(m, "transpose")
    return m.T

