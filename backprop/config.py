"""Configuration dataclasses for the backpropagation network."""
from __future__ import annotations

from dataclasses import dataclass, field
import random

DEFAULT_LEARNING_RATE = 0.05
DEFAULT_SEED = 42


@dataclass(slots=True, frozen=True)
class RandomSource:
    """Describes where a network draws its random numbers from.

    Use :meth:`seeded` for reproducible runs and :meth:`system_entropy` when
    every run should start from different weights. ``seed=None`` means the
    generator is seeded from the operating system.
    """

    seed: int | None = DEFAULT_SEED

    @classmethod
    def seeded(cls, seed: int = DEFAULT_SEED) -> "RandomSource":
        return cls(seed=seed)

    @classmethod
    def system_entropy(cls) -> "RandomSource":
        return cls(seed=None)

    @property
    def deterministic(self) -> bool:
        return self.seed is not None

    def create(self) -> random.Random:
        """Return a fresh generator for this source."""

        return random.Random(self.seed)


@dataclass(slots=True, frozen=True)
class NetworkConfig:
    """Configuration controlling the size and training speed of a network.

    Parameters
    ----------
    input_count:
        Number of input nodes, i.e. the length of every input vector.
    hidden_count:
        Number of nodes in the single hidden layer.
    output_count:
        Number of output nodes, i.e. the length of every desired output
        vector.
    learning_rate:
        Multiplier applied to every weight and bias update. It is not
        validated: zero freezes the network, large values make training
        oscillate.
    random_source:
        Source of the random numbers used for weight initialisation and for
        picking training pairs. Defaults to a generator seeded with ``42``.
    """

    input_count: int
    hidden_count: int
    output_count: int
    learning_rate: float = DEFAULT_LEARNING_RATE
    random_source: RandomSource = field(default_factory=RandomSource.seeded)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raise ``ValueError`` unless every node count is positive."""

        if self.input_count <= 0:
            raise ValueError("input_count must be positive")
        if self.hidden_count <= 0:
            raise ValueError("hidden_count must be positive")
        if self.output_count <= 0:
            raise ValueError("output_count must be positive")
