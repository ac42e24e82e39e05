"""
Training utilities for xornet.

Provides:
  - TrainingHistory data class
  - Trainer: runs NeuralNetwork.train for a fixed epoch count and
    records/prints the loss every ``log_interval`` epochs
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from .config import TrainerConfig
from .dataset import Dataset
from .metrics import mse_loss
from .nn import NeuralNetwork


@dataclass
class TrainingHistory:
    """Record of training metrics at each logged epoch."""
    epochs: List[int] = field(default_factory=list)
    train_loss: List[float] = field(default_factory=list)
    elapsed: List[float] = field(default_factory=list)

    def last(self, key: str) -> Optional[float]:
        lst = getattr(self, key, None)
        if lst:
            return lst[-1]
        return None


class Trainer:
    """
    Training loop orchestrator.

    The network is always trained for exactly ``config.epochs``
    epochs; the Trainer only observes the per-epoch output error.

    Example:
        >>> cfg = TrainerConfig(epochs=5000, log_interval=500)
        >>> net = NeuralNetwork(2, 2, 1, seed=cfg.seed)
        >>> history = Trainer(net, cfg).fit(xor_dataset())
    """

    def __init__(self, network: NeuralNetwork, config: Optional[TrainerConfig] = None):
        self.network = network
        self.config = (config or TrainerConfig()).validate()
        self.history = TrainingHistory()

    def fit(self, dataset: Dataset, verbose: bool = True) -> TrainingHistory:
        """
        Run the training loop.

        Args:
            dataset: Full training batch.
            verbose: Whether to print progress.

        Returns:
            TrainingHistory with recorded metrics.
        """
        cfg = self.config
        t0 = time.time()

        def on_epoch(epoch: int, output_error: np.ndarray) -> None:
            if epoch % cfg.log_interval != 0 and epoch != cfg.epochs - 1:
                return
            loss = mse_loss(output_error)
            elapsed = time.time() - t0
            self.history.epochs.append(epoch)
            self.history.train_loss.append(loss)
            self.history.elapsed.append(elapsed)
            if verbose:
                print(f"Epoch {epoch:5d} | train_loss={loss:.6f} | {elapsed:.2f}s")

        self.network.train(
            dataset.inputs,
            dataset.targets,
            cfg.epochs,
            cfg.learning_rate,
            callback=on_epoch,
        )
        return self.history
