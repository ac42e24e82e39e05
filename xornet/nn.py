"""
Two-layer feed-forward network for xornet.
"""

from typing import Callable, List, Optional, Tuple

import numpy as np

from .activations import map_matrix, sigmoid, sigmoid_derivative
from .core import _check_positive_int
from .init import make_rng, uniform_matrix
from . import matrix as M


class NeuralNetwork:
    """
    Feed-forward network with one sigmoid hidden layer and no biases.

    Batches are column-major: an input batch has shape
    (input_size, num_samples), one sample per column.

    Args:
        input_size: Number of input units
        hidden_size: Number of hidden units
        output_size: Number of output units
        seed: Seed for the weight initializer (default: wall clock)
        rng: Explicit ``numpy.random.Generator``; overrides ``seed``

    Example:
        >>> net = NeuralNetwork(2, 2, 1, seed=42)
        >>> net.weights_input_hidden.shape
        (2, 2)
        >>> net.train(inputs, targets, epochs=10000, learning_rate=0.1)
        >>> net.predict(inputs)
    """

    def __init__(
        self,
        input_size: int,
        hidden_size: int,
        output_size: int,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self._input_size = _check_positive_int(input_size, "input_size")
        self._hidden_size = _check_positive_int(hidden_size, "hidden_size")
        self._output_size = _check_positive_int(output_size, "output_size")

        rng, self.seed = make_rng(seed, rng)
        self.weights_input_hidden = uniform_matrix(self._hidden_size, self._input_size, rng)
        self.weights_hidden_output = uniform_matrix(self._output_size, self._hidden_size, rng)
        self.epochs_trained = 0

    @property
    def input_size(self) -> int:
        return self._input_size

    @property
    def hidden_size(self) -> int:
        return self._hidden_size

    @property
    def output_size(self) -> int:
        return self._output_size

    @property
    def is_trained(self) -> bool:
        """True once at least one epoch has run."""
        return self.epochs_trained > 0

    def parameters(self) -> List[np.ndarray]:
        """Get both weight matrices (live references, not copies)."""
        return [self.weights_input_hidden, self.weights_hidden_output]

    def forward(self, inputs: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """
        Forward pass.

        Args:
            inputs: Batch of shape (input_size, N)

        Returns:
            (hidden_output, final_output) of shapes (hidden_size, N)
            and (output_size, N)

        Raises:
            ShapeMismatchError: If ``inputs`` does not have input_size rows
        """
        hidden_input = M.matmul(self.weights_input_hidden, inputs)
        hidden_output = map_matrix(hidden_input, sigmoid)

        final_input = M.matmul(self.weights_hidden_output, hidden_output)
        final_output = map_matrix(final_input, sigmoid)
        return hidden_output, final_output

    def predict(self, inputs: np.ndarray) -> np.ndarray:
        """Forward pass returning only the output layer activations."""
        return self.forward(inputs)[1]

    def __call__(self, inputs: np.ndarray) -> np.ndarray:
        return self.predict(inputs)

    def backward(
        self,
        inputs: np.ndarray,
        targets: np.ndarray,
        hidden_output: np.ndarray,
        final_output: np.ndarray,
        learning_rate: float,
    ) -> np.ndarray:
        """
        Backpropagate the error of one forward pass and update weights in place.

        The hidden error is propagated from the raw output error
        (targets - output), not from the learning-rate-scaled gradient.

        Returns:
            output_error of shape (output_size, N)
        """
        output_errors = M.sub(targets, final_output)

        output_gradient = map_matrix(final_output, sigmoid_derivative)
        output_gradient = M.mul_elem(output_gradient, output_errors)
        output_gradient = M.scale(learning_rate, output_gradient)

        # Must read weights_hidden_output before it is updated below.
        hidden_errors = M.matmul(M.transpose(self.weights_hidden_output), output_errors)

        hidden_gradient = map_matrix(hidden_output, sigmoid_derivative)
        hidden_gradient = M.mul_elem(hidden_gradient, hidden_errors)
        hidden_gradient = M.scale(learning_rate, hidden_gradient)

        delta_weights_ho = M.matmul(output_gradient, M.transpose(hidden_output))
        delta_weights_ih = M.matmul(hidden_gradient, M.transpose(inputs))

        M.add_(self.weights_hidden_output, delta_weights_ho)
        M.add_(self.weights_input_hidden, delta_weights_ih)
        return output_errors

    def train(
        self,
        inputs: np.ndarray,
        targets: np.ndarray,
        epochs: int,
        learning_rate: float,
        callback: Optional[Callable[[int, np.ndarray], None]] = None,
    ) -> None:
        """
        Full-batch gradient descent for exactly ``epochs`` epochs.

        Args:
            inputs: (input_size, N) training inputs
            targets: (output_size, N) training targets
            epochs: Number of forward+backward iterations (>= 0)
            learning_rate: Step size applied to both gradients
            callback: Optional ``callback(epoch, output_error)`` run after
                each epoch's update
        """
        epochs = _check_positive_int(epochs, "epochs", allow_zero=True)

        for epoch in range(epochs):
            hidden_output, final_output = self.forward(inputs)
            output_errors = self.backward(
                inputs, targets, hidden_output, final_output, learning_rate
            )
            self.epochs_trained += 1
            if callback is not None:
                callback(epoch, output_errors)

    def __repr__(self) -> str:
        return (
            f"NeuralNetwork(input_size={self._input_size}, "
            f"hidden_size={self._hidden_size}, "
            f"output_size={self._output_size}, "
            f"epochs_trained={self.epochs_trained})"
        )
