"""Conversion from zeros, poles and gain to transfer-function polynomials."""

from __future__ import annotations

from typing import Sequence

from dspkit.cplx import sort_cplx
from dspkit.formats import BaFilter


def poly(roots: Sequence[complex]) -> list[complex]:
    """Return the coefficients of the monic polynomial with the given roots.

    Coefficients run from the highest power down. When the roots come in
    complex-conjugate pairs the imaginary parts of the result are dropped.
    """
    roots = [complex(r) for r in roots]
    coefficients = [complex(1.0)]
    for root in roots:
        coefficients = [
            high - root * low
            for high, low in zip(coefficients + [0j], [0j] + coefficients)
        ]

    conjugates = [r.conjugate() for r in roots]
    if sort_cplx(roots) == sort_cplx(conjugates):
        coefficients = [complex(c.real) for c in coefficients]
    return coefficients


def _real_if_conjugate(coefficients: list[complex], roots: Sequence[complex]) -> list[complex]:
    positive = [r for r in roots if r.imag > 0]
    negative = [r.conjugate() for r in roots if r.imag < 0]
    if len(positive) == len(negative) and sort_cplx(positive) == sort_cplx(negative):
        return [complex(c.real) for c in coefficients]
    return coefficients


def _fit(values: list[complex], length: int) -> list[float]:
    reals = [v.real for v in values[:length]]
    return reals + [0.0] * (length - len(reals))


def zpk2tf(order: int, z: Sequence[complex], p: Sequence[complex], k: float) -> BaFilter:
    """Return the numerator/denominator form of a zpk system.

    Both polynomials are returned with ``order + 1`` real coefficients,
    truncated or padded with zeros at the end as needed.
    """
    z = [complex(v) for v in z]
    p = [complex(v) for v in p]
    b = _real_if_conjugate([float(k) * c for c in poly(z)], z)
    a = _real_if_conjugate(poly(p), p)
    return BaFilter(_fit(b, order + 1), _fit(a, order + 1))