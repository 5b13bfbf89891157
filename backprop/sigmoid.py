"""Lookup-table approximation of the logistic function."""
from __future__ import annotations

import math
import threading

import numpy as np

TABLE_MIN = -6.0
TABLE_MAX = 6.0
TABLE_SIZE = 10_000


class SigmoidTable:
    """Precomputed samples of ``1 / (1 + exp(-x))`` over a bounded domain.

    :meth:`lookup` returns the sample at or just below ``x`` without
    interpolating, so results are biased towards the lower neighbour. Inputs
    outside ``[domain_min, domain_max]`` saturate to the boundary samples.

    The samples array is read-only, so one table can be shared by any number
    of networks and threads.
    """

    __slots__ = ("domain_min", "domain_max", "resolution", "step", "samples")

    def __init__(self, samples: np.ndarray, *, domain_min: float, domain_max: float) -> None:
        if len(samples) < 2:
            raise ValueError("resolution must be at least 2")
        if domain_min >= domain_max:
            raise ValueError("domain_min must be smaller than domain_max")
        self.domain_min = float(domain_min)
        self.domain_max = float(domain_max)
        self.resolution = len(samples)
        self.step = (self.domain_max - self.domain_min) / (self.resolution - 1)
        self.samples = np.array(samples, dtype=np.float64)
        self.samples.setflags(write=False)

    @classmethod
    def build(
        cls,
        domain_min: float = TABLE_MIN,
        domain_max: float = TABLE_MAX,
        resolution: int = TABLE_SIZE,
    ) -> "SigmoidTable":
        """Evaluate the exact logistic function at ``resolution`` points."""

        step = (domain_max - domain_min) / max(resolution - 1, 1)
        points = domain_min + np.arange(max(resolution, 0), dtype=np.float64) * step
        samples = 1.0 / (1.0 + np.exp(-points))
        return cls(samples, domain_min=domain_min, domain_max=domain_max)

    def lookup(self, x: float) -> float:
        if x <= self.domain_min:
            return float(self.samples[0])
        if x >= self.domain_max:
            return float(self.samples[self.resolution - 1])
        return float(self.samples[math.floor((x - self.domain_min) / self.step)])

    __call__ = lookup

    def __len__(self) -> int:
        return self.resolution

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(domain_min={self.domain_min}, "
            f"domain_max={self.domain_max}, resolution={self.resolution})"
        )


_default_table: SigmoidTable | None = None
_default_lock = threading.Lock()


def default_table() -> SigmoidTable:
    """Return the shared table with the standard domain and resolution.

    The table is built on first use; concurrent first callers block until it
    is complete.
    """

    global _default_table
    if _default_table is None:
        with _default_lock:
            if _default_table is None:
                _default_table = SigmoidTable.build()
    return _default_table


__all__ = ["SigmoidTable", "default_table", "TABLE_MIN", "TABLE_MAX", "TABLE_SIZE"]
