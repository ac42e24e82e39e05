"""
xornet - a one-hidden-layer sigmoid network trained by full-batch
backpropagation, demonstrated on XOR.

Example Usage:
    >>> import xornet as xn
    >>>
    >>> data = xn.xor_dataset()
    >>> net = xn.NeuralNetwork(2, 2, 1, seed=7)
    >>> net.train(data.inputs, data.targets, epochs=10000, learning_rate=0.1)
    >>> print(net.predict(data.inputs))
"""

__version__ = "1.0.0"

from .core import (
    NeuralError,
    NeuralException,
    ShapeMismatchError,
    get_error_message,
    version,
)
from .activations import sigmoid, sigmoid_derivative, map_matrix
from .nn import NeuralNetwork
from .dataset import Dataset, xor_dataset
from .metrics import mse_loss, binary_accuracy
from .config import Config, TrainerConfig
from .training import Trainer, TrainingHistory

__all__ = [
    # Core
    "NeuralError",
    "NeuralException",
    "ShapeMismatchError",
    "get_error_message",
    "version",
    # Activations
    "sigmoid",
    "sigmoid_derivative",
    "map_matrix",
    # Neural Network
    "NeuralNetwork",
    # Data
    "Dataset",
    "xor_dataset",
    # Metrics
    "mse_loss",
    "binary_accuracy",
    # Training
    "Config",
    "TrainerConfig",
    "Trainer",
    "TrainingHistory",
]
