"""Analog lowpass prototypes with unity cutoff frequency."""

from __future__ import annotations

import cmath
import math

from dspkit.formats import ZpkFilter


def buttap(order: int) -> ZpkFilter:
    """Return the analog prototype of an Nth-order Butterworth filter."""
    poles = [
        -cmath.exp(complex(0.0, math.pi * m / (2.0 * order)))
        for m in range(-order + 1, order, 2)
    ]
    return ZpkFilter([], poles, 1.0)


def cheb1ap(n: int, rp: float) -> ZpkFilter:
    """Return the analog Chebyshev type I prototype with ``rp`` dB of passband ripple."""
    rp = float(rp)
    if n == 0:
        return ZpkFilter([], [], 10.0 ** (-rp / 20.0))

    eps = math.sqrt(10.0 ** (rp / 10.0) - 1.0)
    mu = math.asinh(1.0 / eps) / n
    thetas = (math.pi * (m / (2 * n)) for m in range(-n + 1, n, 2))
    poles = [-cmath.sinh(complex(mu, theta)) for theta in thetas]

    k = math.prod((-pole for pole in poles), start=complex(1.0)).real
    if n % 2 == 0:
        k /= math.sqrt(1.0 + eps * eps)
    return ZpkFilter([], poles, k)


def cheb2ap(n: int, rs: float) -> ZpkFilter:
    """Return the analog Chebyshev type II prototype with ``rs`` dB of stopband attenuation."""
    rs = float(rs)
    if n == 0:
        return ZpkFilter([], [], 1.0)

    de = 1.0 / math.sqrt(10.0 ** (rs / 10.0) - 1.0)
    mu = math.asinh(1.0 / de) / n

    if n % 2 == 1:
        ms = list(range(-n + 1, 0, 2)) + list(range(2, n, 2))
    else:
        ms = list(range(-n + 1, n, 2))

    zeros = [
        -(1j / complex(math.sin(m * (math.pi / (2.0 * n))), 0.0)).conjugate()
        for m in ms
    ]

    poles = []
    for x in range(-n + 1, n, 2):
        base = -cmath.exp(complex(0.0, math.pi * x / (2.0 * n)))
        scaled = complex(math.sinh(mu) * base.real, math.cosh(mu) * base.imag)
        poles.append(1.0 / scaled)

    num = math.prod((-pole for pole in poles), start=complex(1.0))
    den = math.prod((-zero for zero in zeros), start=complex(1.0))
    return ZpkFilter(zeros, poles, (num / den).real)