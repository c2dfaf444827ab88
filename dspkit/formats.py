"""Filter descriptions: band and design types, output formats and containers."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, Sequence


class FilterType(enum.Enum):
    """Type of IIR filter design."""

    BUTTERWORTH = "butter"
    CHEBYSHEV_I = "cheby1"
    CHEBYSHEV_II = "cheby2"
    CAUER_ELLIPTIC = "ellip"
    BESSEL_THOMSON = "bessel"


class BesselThomsonNorm(enum.Enum):
    """Normalisation of a Bessel/Thomson filter."""

    PHASE = "phase"
    DELAY = "delay"
    MAG = "mag"


class FilterBandType(enum.Enum):
    """Band shape of an IIR or FIR filter."""

    LOWPASS = "lowpass"
    HIGHPASS = "highpass"
    BANDPASS = "bandpass"
    BANDSTOP = "bandstop"


class FilterOutputType(enum.Enum):
    """Representation a designed filter is returned in."""

    BA = "ba"
    ZPK = "zpk"
    SOS = "sos"


def _three(values: Iterable[float], name: str) -> list[float]:
    coefficients = [float(v) for v in values]
    if len(coefficients) != 3:
        raise ValueError(f"{name} must hold exactly 3 coefficients, got {len(coefficients)}")
    return coefficients


@dataclass
class Sos:
    """One second-order (biquad) section.

    ``H(z) = (b0 + b1 z^-1 + b2 z^-2) / (a0 + a1 z^-1 + a2 z^-2)``, with the
    coefficients laid out as SciPy produces them. ``zi0`` and ``zi1`` hold the
    section's delay state.
    """

    b: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    a: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    zi0: float = 0.0
    zi1: float = 0.0

    def __post_init__(self) -> None:
        self.b = _three(self.b, "b")
        self.a = _three(self.a, "a")

    @classmethod
    def from_scipy(cls, order: int, values: Sequence[float]) -> list["Sos"]:
        """Build ``order`` sections from a flat SciPy ``sos`` array (6 values per row)."""
        values = [float(v) for v in values]
        if order * 6 != len(values):
            raise ValueError(
                f"expected {order * 6} coefficients for {order} sections, got {len(values)}"
            )
        rows = (values[start:start + 6] for start in range(0, len(values), 6))
        return [cls(row[:3], row[3:]) for row in rows]


@dataclass
class BaFilter:
    """Numerator/denominator representation of a filter."""

    b: list[float]
    a: list[float]


@dataclass
class ZpkFilter:
    """Zeros, poles and gain representation of a filter."""

    z: list[complex] = field(default_factory=list)
    p: list[complex] = field(default_factory=list)
    k: float = 1.0

    def __post_init__(self) -> None:
        self.z = [complex(v) for v in self.z]
        self.p = [complex(v) for v in self.p]
        self.k = float(self.k)


@dataclass
class SosFilter:
    """Cascade of second-order sections."""

    sos: list[Sos] = field(default_factory=list)


def relative_degree(zeros: Sequence[complex], poles: Sequence[complex]) -> int:
    """Return how many more poles than zeros a transfer function has."""
    degree = len(poles) - len(zeros)
    if degree < 0:
        raise ValueError(
            "Improper transfer function. Must have at least as many poles as zeros."
        )
    return degree