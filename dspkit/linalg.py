"""Linear-algebra helpers."""

from __future__ import annotations

from typing import Iterable

import numpy as np


def companion(coefficients: Iterable[float]) -> np.ndarray:
    """Return the companion matrix of the polynomial with these coefficients.

    The first row is ``-coefficients[1:] / coefficients[0]`` and the first
    sub-diagonal holds ones, giving an ``(n - 1) x (n - 1)`` matrix.
    """
    values = [float(c) for c in coefficients]
    if len(values) < 2:
        raise ValueError("Invalid data length")
    size = len(values) - 1
    matrix = np.zeros((size, size))
    matrix[0, :] = [-c / values[0] for c in values[1:]]
    matrix[np.arange(1, size), np.arange(0, size - 1)] = 1.0
    return matrix