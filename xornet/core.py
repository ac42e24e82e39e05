"""
Core error handling for xornet.
"""

import numbers
from typing import Sequence


# Error codes
class NeuralError:
    OK = 0
    INVALID_ARGUMENT = 3
    SHAPE_MISMATCH = 4
    FILE_NOT_FOUND = 6
    PARSE_ERROR = 9
    INVALID_CONFIG = 10


_ERROR_MESSAGES = {
    NeuralError.OK: "Success",
    NeuralError.INVALID_ARGUMENT: "Invalid argument",
    NeuralError.SHAPE_MISMATCH: "Shape mismatch",
    NeuralError.FILE_NOT_FOUND: "File not found",
    NeuralError.PARSE_ERROR: "Parse error",
    NeuralError.INVALID_CONFIG: "Invalid configuration",
}


def get_error_message(error_code: int) -> str:
    """Get the error message for an error code."""
    return _ERROR_MESSAGES.get(error_code, f"Unknown error ({error_code})")


class NeuralException(Exception):
    """Exception raised when a xornet operation fails."""

    def __init__(self, error_code: int, message: str = None):
        self.error_code = error_code
        if message is None:
            message = get_error_message(error_code)
        super().__init__(f"NeuralError({error_code}): {message}")


class ShapeMismatchError(NeuralException, ValueError):
    """Raised when matrix operands have incompatible dimensions."""

    def __init__(self, operation: str, *shapes: Sequence[int]):
        self.operation = operation
        self.shapes = tuple(tuple(s) for s in shapes)
        dims = " vs ".join(str(s) for s in self.shapes)
        super().__init__(NeuralError.SHAPE_MISMATCH, f"{operation}: {dims}")


def _check_positive_int(value, name: str, allow_zero: bool = False) -> int:
    """Validate a size/count argument and return it as an int."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise NeuralException(
            NeuralError.INVALID_ARGUMENT,
            f"{name} must be an int, got {type(value).__name__}",
        )
    lower = 0 if allow_zero else 1
    if value < lower:
        raise NeuralException(
            NeuralError.INVALID_ARGUMENT,
            f"{name} must be >= {lower}, got {value}",
        )
    return int(value)


def version() -> str:
    """Get the package version string."""
    from . import __version__
    return __version__
