"""Minimal backpropagation neural network with a table-driven sigmoid."""

from .config import DEFAULT_LEARNING_RATE, DEFAULT_SEED, NetworkConfig, RandomSource
from .network import BackpropNetwork
from .sigmoid import SigmoidTable, default_table

__version__ = "1.0.0"

__all__ = [
    "BackpropNetwork",
    "DEFAULT_LEARNING_RATE",
    "DEFAULT_SEED",
    "NetworkConfig",
    "RandomSource",
    "SigmoidTable",
    "default_table",
]
