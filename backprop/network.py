"""Single hidden layer backpropagation network built on plain Python lists."""
from __future__ import annotations

import logging
import random
from typing import List, Sequence

from tqdm.auto import tqdm

from .config import NetworkConfig
from .sigmoid import SigmoidTable, default_table

logger = logging.getLogger(__name__)

Matrix = List[List[float]]
Vector = List[float]


def zeros(rows: int, cols: int) -> Matrix:
    return [[0.0 for _ in range(cols)] for _ in range(rows)]


def _check_length(vector: Sequence[float], expected: int, name: str) -> None:
    if len(vector) != expected:
        raise ValueError(f"{name} must have length {expected}, got {len(vector)}")


class BackpropNetwork:
    """A feedforward network with one hidden layer and sigmoid activations.

    Weights and biases start uniformly distributed in ``[0.1, 0.5)`` so the
    hidden nodes do not evolve identically. Every call to :meth:`train_step`
    moves all parameters one step along the delta rule; activations come from
    a :class:`~backprop.sigmoid.SigmoidTable` rather than ``math.exp``.

    The activation and error buffers are reused between calls. An instance
    must therefore only be used by one thread at a time.

    ``last_training_error`` holds the backpropagated error sum of the *last*
    hidden node from the most recent training step, not a loss over the whole
    network.
    """

    def __init__(
        self,
        config: NetworkConfig,
        *,
        rng: random.Random | None = None,
        table: SigmoidTable | None = None,
    ) -> None:
        config.validate()
        self.config = config
        self.input_count = config.input_count
        self.hidden_count = config.hidden_count
        self.output_count = config.output_count
        self._learning_rate = config.learning_rate
        self.rng = rng if rng is not None else config.random_source.create()
        self.table = table if table is not None else default_table()

        self.weights_input_hidden = zeros(self.input_count, self.hidden_count)
        self.weights_hidden_output = zeros(self.hidden_count, self.output_count)
        self.bias_hidden = [0.0] * self.hidden_count
        self.bias_output = [0.0] * self.output_count
        self.hidden_activations = [0.0] * self.hidden_count
        self.output_activations = [0.0] * self.output_count
        self.hidden_errors = [0.0] * self.hidden_count
        self.output_errors = [0.0] * self.output_count
        self.last_training_error = 0.0

        self.training_inputs: Matrix | None = None
        self.training_outputs: Matrix | None = None

        self._initialise_parameters()
        logger.debug(
            "Created %d-%d-%d network (learning_rate=%s, seed=%s)",
            self.input_count,
            self.hidden_count,
            self.output_count,
            self._learning_rate,
            config.random_source.seed if rng is None else "external",
        )

    def _next_weight(self) -> float:
        return 0.1 + 0.4 * self.rng.random()

    def _initialise_parameters(self) -> None:
        for row in self.weights_input_hidden:
            for j in range(self.hidden_count):
                row[j] = self._next_weight()
        for i, row in enumerate(self.weights_hidden_output):
            for j in range(self.output_count):
                row[j] = self._next_weight()
            self.bias_hidden[i] = self._next_weight()
        for k in range(self.output_count):
            self.bias_output[k] = self._next_weight()

    @property
    def learning_rate(self) -> float:
        return self._learning_rate

    @learning_rate.setter
    def learning_rate(self, value: float) -> None:
        self._learning_rate = value

    @property
    def training_set_size(self) -> int:
        return 0 if self.training_inputs is None else len(self.training_inputs)

    def load_training_set(self, pairs: Sequence[Sequence[float]]) -> None:
        """Replace the training corpus.

        ``pairs`` alternates input and desired output vectors:
        ``[input_0, output_0, input_1, output_1, ...]``. Nothing is replaced
        when any vector is malformed.
        """

        if not pairs:
            raise ValueError("training set must contain at least one input/output pair")
        if len(pairs) % 2:
            raise ValueError("training set must alternate input and output vectors")

        inputs: Matrix = []
        outputs: Matrix = []
        for index in range(0, len(pairs), 2):
            input_vector, output_vector = pairs[index], pairs[index + 1]
            _check_length(input_vector, self.input_count, f"training input {index // 2}")
            _check_length(output_vector, self.output_count, f"training output {index // 2}")
            inputs.append([float(value) for value in input_vector])
            outputs.append([float(value) for value in output_vector])

        self.training_inputs = inputs
        self.training_outputs = outputs
        logger.debug("Loaded training set with %d pairs", len(inputs))

    def forward(self, inputs: Sequence[float]) -> Vector:
        """Compute the output vector for ``inputs``."""

        _check_length(inputs, self.input_count, "inputs")
        activate = self.table.lookup

        for i in range(self.hidden_count):
            activation = 0.0
            for j in range(self.input_count):
                activation += inputs[j] * self.weights_input_hidden[j][i]
            activation += self.bias_hidden[i]
            self.hidden_activations[i] = activate(activation)

        for i in range(self.output_count):
            activation = 0.0
            for j in range(self.hidden_count):
                activation += self.hidden_activations[j] * self.weights_hidden_output[j][i]
            activation += self.bias_output[i]
            self.output_activations[i] = activate(activation)

        return self.output_activations.copy()

    def train_step(self, inputs: Sequence[float], desired_outputs: Sequence[float]) -> None:
        """Run one forward pass and one backpropagation update."""

        _check_length(inputs, self.input_count, "inputs")
        _check_length(desired_outputs, self.output_count, "desired_outputs")
        self.forward(inputs)

        lr = self._learning_rate
        hidden = self.hidden_activations
        outputs = self.output_activations

        # sigmoid derivative: out * (1 - out)
        for k in range(self.output_count):
            out = outputs[k]
            self.output_errors[k] = (desired_outputs[k] - out) * out * (1.0 - out)

        for i in range(self.hidden_count):
            error = 0.0
            for k in range(self.output_count):
                error += self.output_errors[k] * self.weights_hidden_output[i][k]
            self.last_training_error = error
            self.hidden_errors[i] = error * hidden[i] * (1.0 - hidden[i])

        for i in range(self.input_count):
            row = self.weights_input_hidden[i]
            for j in range(self.hidden_count):
                row[j] += lr * self.hidden_errors[j] * inputs[i]

        for i in range(self.hidden_count):
            row = self.weights_hidden_output[i]
            for j in range(self.output_count):
                row[j] += lr * self.output_errors[j] * hidden[i]
            self.bias_hidden[i] += lr * self.hidden_errors[i]

        for k in range(self.output_count):
            self.bias_output[k] += lr * self.output_errors[k]

    def train_repeated(
        self,
        inputs: Sequence[float],
        desired_outputs: Sequence[float],
        steps: int,
    ) -> None:
        """Call :meth:`train_step` ``steps`` times on the same pair."""

        if steps < 0:
            raise ValueError("steps must be non-negative")
        for _ in range(steps):
            self.train_step(inputs, desired_outputs)

    def train_random(
        self,
        steps: int,
        steps_per_pick: int,
        rng: random.Random | None = None,
        *,
        progress: bool = False,
    ) -> None:
        """Train on pairs drawn uniformly at random from the loaded corpus.

        Each of the ``steps`` draws trains the chosen pair ``steps_per_pick``
        times in a row. The engine's own generator is used when ``rng`` is
        omitted. May be called repeatedly, also after changing the learning
        rate or loading a different corpus.
        """

        if self.training_inputs is None or self.training_outputs is None:
            raise RuntimeError("load_training_set must be called before train_random")
        if steps < 0:
            raise ValueError("steps must be non-negative")
        if steps_per_pick < 0:
            raise ValueError("steps_per_pick must be non-negative")

        rng = rng if rng is not None else self.rng
        size = len(self.training_inputs)
        logger.debug(
            "Random training: %d picks x %d steps over %d pairs", steps, steps_per_pick, size
        )
        for _ in tqdm(range(steps), desc="Training", disable=not progress):
            index = rng.randrange(size)
            self.train_repeated(self.training_inputs[index], self.training_outputs[index], steps_per_pick)

    def squared_error(self, inputs: Sequence[float], desired_outputs: Sequence[float]) -> float:
        """Sum of squared differences between the prediction and ``desired_outputs``."""

        _check_length(desired_outputs, self.output_count, "desired_outputs")
        outputs = self.forward(inputs)
        return sum((target - value) ** 2 for target, value in zip(desired_outputs, outputs))

    def parameters(self) -> dict[str, Matrix | Vector]:
        """Return copies of all weights and biases."""

        return {
            "weights_input_hidden": [row.copy() for row in self.weights_input_hidden],
            "weights_hidden_output": [row.copy() for row in self.weights_hidden_output],
            "bias_hidden": self.bias_hidden.copy(),
            "bias_output": self.bias_output.copy(),
        }


__all__ = ["BackpropNetwork", "Matrix", "Vector"]
