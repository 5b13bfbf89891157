"""Plotting utilities for training runs."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt


def plot_training_errors(errors: Sequence[float], path: str | Path | None = None) -> None:
    """Plot the squared error recorded after each training step.

    The figure is written to ``path`` and closed when a path is given;
    otherwise it stays open for the caller.
    """

    plt.figure()
    plt.plot(errors)
    plt.xlabel("Training step")
    plt.ylabel("Squared error")
    plt.title("Training Error")
    plt.tight_layout()
    if path is not None:
        plt.savefig(path)
        plt.close()
