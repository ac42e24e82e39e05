"""
Configuration utilities for xornet.
"""

import configparser
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .core import NeuralError, NeuralException, _check_positive_int


@dataclass
class TrainerConfig:
    """Architecture and hyperparameters for a training run."""
    input_size: int = 2
    hidden_size: int = 2
    output_size: int = 1
    epochs: int = 10000
    learning_rate: float = 0.1
    log_interval: int = 1000
    seed: Optional[int] = None

    def validate(self) -> "TrainerConfig":
        """Raise NeuralException(INVALID_ARGUMENT) on out-of-range values."""
        _check_positive_int(self.input_size, "input_size")
        _check_positive_int(self.hidden_size, "hidden_size")
        _check_positive_int(self.output_size, "output_size")
        _check_positive_int(self.epochs, "epochs", allow_zero=True)
        _check_positive_int(self.log_interval, "log_interval")
        if not self.learning_rate > 0:
            raise NeuralException(
                NeuralError.INVALID_ARGUMENT,
                f"learning_rate must be > 0, got {self.learning_rate}",
            )
        return self


class Config:
    """
    Configuration loader for INI-style config files.
    
    Example:
        >>> config = Config.load("config.ini")
        >>> lr = config.get_float("training", "learning_rate", default=0.01)
        >>> epochs = config.get_int("training", "epochs", default=100)
    """
    
    def __init__(self, parser: configparser.ConfigParser):
        self._parser = parser
    
    @classmethod
    def load(cls, path: str) -> "Config":
        """
        Load configuration from an INI file.
        
        Args:
            path: Path to configuration file
        
        Returns:
            Config instance

        Raises:
            NeuralException: FILE_NOT_FOUND or PARSE_ERROR
        """
        path = Path(path).resolve()
        if not path.exists():
            raise NeuralException(
                NeuralError.FILE_NOT_FOUND,
                f"Failed to load config from {path}"
            )
        parser = configparser.ConfigParser()
        try:
            parser.read(path, encoding="utf-8")
        except configparser.Error as e:
            raise NeuralException(NeuralError.PARSE_ERROR, f"{path}: {e}") from e
        return cls(parser)

    @classmethod
    def from_string(cls, text: str) -> "Config":
        """Parse configuration from an INI-formatted string."""
        parser = configparser.ConfigParser()
        try:
            parser.read_string(text)
        except configparser.Error as e:
            raise NeuralException(NeuralError.PARSE_ERROR, str(e)) from e
        return cls(parser)
    
    def _get(self, section: str, key: str, convert, default):
        if not self._parser.has_option(section, key):
            return default
        raw = self._parser.get(section, key)
        try:
            return convert(raw)
        except ValueError as e:
            raise NeuralException(
                NeuralError.INVALID_CONFIG,
                f"[{section}] {key} = {raw!r}: {e}"
            ) from e

    def get_int(self, section: str, key: str, default: int = 0) -> int:
        """
        Get an integer value from the config.
        
        Args:
            section: Section name (e.g., "training")
            key: Key name (e.g., "epochs")
            default: Default value if not found
        """
        return self._get(section, key, int, default)
    
    def get_float(self, section: str, key: str, default: float = 0.0) -> float:
        """Get a float value from the config."""
        return self._get(section, key, float, default)
    
    def get_string(self, section: str, key: str, default: str = "") -> str:
        """Get a string value from the config."""
        return self._get(section, key, str, default)

    def to_trainer_config(self) -> TrainerConfig:
        """
        Build a TrainerConfig from the ``[network]`` and ``[training]``
        sections, falling back to TrainerConfig defaults.
        """
        d = TrainerConfig()
        seed = self.get_int("training", "seed", default=-1)
        return TrainerConfig(
            input_size=self.get_int("network", "input_size", d.input_size),
            hidden_size=self.get_int("network", "hidden_size", d.hidden_size),
            output_size=self.get_int("network", "output_size", d.output_size),
            epochs=self.get_int("training", "epochs", d.epochs),
            learning_rate=self.get_float("training", "learning_rate", d.learning_rate),
            log_interval=self.get_int("training", "log_interval", d.log_interval),
            seed=None if seed < 0 else seed,
        ).validate()
    
    def __repr__(self) -> str:
        return f"Config(sections={self._parser.sections()})"
