"""Helpers for sorting and pairing complex roots."""

from __future__ import annotations

import cmath
import math
import sys
from typing import Iterable, Optional, Sequence

_DEFAULT_TOL = sys.float_info.epsilon * 100.0


def cplxreal(
    z: Iterable[complex], tol: Optional[float] = None
) -> tuple[list[complex], list[complex]]:
    """Split roots into complex-conjugate pairs and real values.

    Returns ``(zc, zr)``: ``zc`` holds one element of each conjugate pair
    (positive imaginary part, the pair averaged), sorted by real part and then
    by magnitude of imaginary part; ``zr`` holds the real elements sorted by
    value. Raises ``ValueError`` if a complex value has no matching conjugate.
    """
    values = [complex(v) for v in z]
    if not values:
        return [], []

    if tol is None:
        tol = _DEFAULT_TOL

    values.sort(key=lambda v: (v.real, abs(v.imag)))

    zr = [v for v in values if abs(v.imag) <= tol * cmath.sqrt(v * v).real]
    zc = [v for v in values if not abs(v.imag) <= tol * cmath.sqrt(v * v).real]

    if not zc:
        return [], zr

    zp = [v for v in zc if v.imag > 0]
    zn = [v for v in zc if v.imag < 0]
    if len(zp) != len(zn):
        raise ValueError("Array contains complex value with no matching conjugate")

    # Find runs of (approximately) equal real part among the positive halves.
    same_real = (
        [False]
        + [(b.real - a.real) <= tol * abs(a) for a, b in zip(zp, zp[1:])]
        + [False]
    )
    edges = [int(b) - int(a) for a, b in zip(same_real, same_real[1:])]
    run_starts = [i for i, edge in enumerate(edges) if edge > 0]
    run_stops = [i for i, edge in enumerate(edges) if edge < 0]

    # Sort each run by imaginary part so the halves line up.
    for start, last in zip(run_starts, run_stops):
        stop = last + 1
        chunk = sorted(
            zip(zp[start:stop], zn[start:stop]),
            key=lambda pair: (abs(pair[1].imag), pair[0].imag),
        )
        zp[start:stop] = [pos for pos, _ in chunk]
        zn[start:stop] = [neg for _, neg in chunk]

    if any(abs(pos - neg.conjugate()) > tol * abs(neg) for pos, neg in zip(zp, zn)):
        raise ValueError("Array contains complex value with no matching conjugate")

    paired = [(pos + neg.conjugate()) / 2.0 for pos, neg in zip(zp, zn)]
    return paired, zr


def sort_cplx(values: Sequence[complex]) -> list[complex]:
    """Return the values sorted by real part, then by imaginary part."""
    for v in values:
        if math.isnan(v.real) or math.isnan(v.imag):
            raise ValueError("complex values must be orderable (no NaN)")
    return sorted(values, key=lambda v: (v.real, v.imag))