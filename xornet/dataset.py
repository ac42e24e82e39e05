"""
Dataset utilities for xornet.

Samples are stored as columns: ``inputs`` has shape
(input_size, num_samples) and ``targets`` has shape
(output_size, num_samples).
"""

from typing import Sequence, Tuple

import numpy as np

from .core import ShapeMismatchError
from .matrix import as_matrix, transpose


class Dataset:
    """
    Paired input/target matrices sharing a sample count.

    Example:
        >>> ds = Dataset.from_rows([[0, 0], [0, 1]], [[0], [1]])
        >>> ds.inputs.shape
        (2, 2)
        >>> len(ds)
        2
    """

    def __init__(self, inputs, targets):
        self.inputs = as_matrix(inputs)
        self.targets = as_matrix(targets)
        if self.inputs.shape[1] != self.targets.shape[1]:
            raise ShapeMismatchError(
                "Dataset samples", self.inputs.shape, self.targets.shape
            )

    @classmethod
    def from_rows(
        cls,
        input_rows: Sequence[Sequence[float]],
        target_rows: Sequence[Sequence[float]],
    ) -> "Dataset":
        """Build a dataset from one-sample-per-row sequences."""
        return cls(
            transpose(as_matrix(input_rows)).copy(),
            transpose(as_matrix(target_rows)).copy(),
        )

    def __len__(self) -> int:
        """Get the number of samples in the dataset."""
        return self.inputs.shape[1]

    @property
    def input_size(self) -> int:
        return self.inputs.shape[0]

    @property
    def output_size(self) -> int:
        return self.targets.shape[0]

    def sample(self, index: int) -> Tuple[np.ndarray, np.ndarray]:
        """Return (input_column, target_column) for sample ``index``."""
        return self.inputs[:, index], self.targets[:, index]

    def __repr__(self) -> str:
        return (
            f"Dataset(samples={len(self)}, input_size={self.input_size}, "
            f"output_size={self.output_size})"
        )


def xor_dataset() -> Dataset:
    """The XOR truth table: (0,0)->0, (0,1)->1, (1,0)->1, (1,1)->0."""
    return Dataset.from_rows(
        [[0, 0], [0, 1], [1, 0], [1, 1]],
        [[0], [1], [1], [0]],
    )
