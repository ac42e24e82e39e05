"""
Train a 2-2-1 network on XOR and print its predictions.

Usage:
    python -m xornet
"""

import sys

from .config import TrainerConfig
from .dataset import xor_dataset
from .nn import NeuralNetwork
from .training import Trainer


def format_prediction(inputs, outputs) -> str:
    values_in = ", ".join(f"{float(v):g}" for v in inputs)
    values_out = ", ".join(f"{float(v):.6f}" for v in outputs)
    return f"Input: [{values_in}], Output: [{values_out}]"


def main() -> int:
    cfg = TrainerConfig()
    dataset = xor_dataset()

    network = NeuralNetwork(cfg.input_size, cfg.hidden_size, cfg.output_size,
                            seed=cfg.seed)
    print(f"{network} seed={network.seed}")
    Trainer(network, cfg).fit(dataset)

    predictions = network.predict(dataset.inputs)

    print("Predictions:")
    for i in range(len(dataset)):
        print(format_prediction(dataset.inputs[:, i], predictions[:, i]))
    return 0


if __name__ == "__main__":
    sys.exit(main())
