"""FFT-based convolution and cross-correlation of real signals."""

from __future__ import annotations

import enum
from typing import Sequence

import numpy as np


class ConvolveMode(enum.Enum):
    """Output size and edge handling of a convolution."""

    FULL = "full"
    VALID = "valid"
    SAME = "same"


def fftconvolve(
    in1: Sequence[float], in2: Sequence[float], mode: ConvolveMode = ConvolveMode.FULL
) -> list[float]:
    """Convolve two real signals through the FFT.

    ``FULL`` returns ``len(in1) + len(in2) - 1`` values, ``SAME`` returns
    ``len(in1)`` values centred on the full result, and ``VALID`` returns the
    fully overlapping part (empty when ``in1`` is shorter than ``in2``).
    """
    a = np.asarray(in1, dtype=float)
    b = np.asarray(in2, dtype=float)
    n1, n2 = len(a), len(b)
    if n1 == 0 or n2 == 0:
        raise ValueError("inputs must not be empty")

    n = n1 + n2 - 1
    fft_size = 1 << (n - 1).bit_length()

    spectrum = np.fft.fft(a, fft_size) * np.fft.fft(b, fft_size)
    full = np.fft.ifft(spectrum).real[:n]

    if mode is ConvolveMode.FULL:
        result = full
    elif mode is ConvolveMode.VALID:
        result = full[n2 - 1:n1] if n1 >= n2 else full[:0]
    else:
        start = (n2 - 1) // 2
        result = full[start:start + n1]
    return result.tolist()


def convolve(
    in1: Sequence[float], in2: Sequence[float], mode: ConvolveMode = ConvolveMode.FULL
) -> list[float]:
    """Return the convolution of two signals (computed with the FFT)."""
    return fftconvolve(in1, in2, mode)


def correlate(
    in1: Sequence[float], in2: Sequence[float], mode: ConvolveMode = ConvolveMode.FULL
) -> list[float]:
    """Return the cross-correlation of two signals (computed with the FFT)."""
    return fftconvolve(in1, list(reversed(list(in2))), mode)