"""Lowpass-to-bandstop frequency transformation in zpk form."""

from __future__ import annotations

import cmath
import math
from typing import Optional

from dspkit.formats import ZpkFilter, relative_degree


def _square_polar(value: complex) -> complex:
    """Square through polar form, keeping its rounding of the angle."""
    return cmath.rect(abs(value) ** 2, cmath.phase(value) * 2.0)


def lp2bs_zpk(
    zpk: ZpkFilter, wo: Optional[float] = None, bw: Optional[float] = None
) -> ZpkFilter:
    """Turn a unity-cutoff analog lowpass prototype into a bandstop filter.

    The stopband is centred on ``wo`` with width ``bw`` (both rad/s, both
    defaulting to 1), using ``s -> (s * bw) / (s^2 + wo^2)``. Zeros at
    infinity move to the centre of the stopband.
    """
    wo = 1.0 if wo is None else float(wo)
    bw = 1.0 if bw is None else float(bw)
    degree = relative_degree(zpk.z, zpk.p)

    # Invert to a highpass filter with the desired bandwidth.
    z_hp = [(complex(-bw) / zi) * -1j for zi in zpk.z]
    p_hp = [(complex(0.0, bw / 2.0) / pi) * -1j for pi in zpk.p]

    # Duplicate poles and zeros and shift them from baseband to +wo and -wo.
    wo2 = complex(wo * wo)
    z_shift = [
        (zi.real, cmath.sqrt(_square_polar(zi - complex(0.0, zi.imag)) - wo2).imag)
        for zi in z_hp
    ]
    z_bs = [complex(re, im) for re, im in z_shift] + [
        complex(re, -im) for re, im in z_shift
    ]

    p_shift = [(pi, cmath.sqrt(pi * pi - wo2)) for pi in p_hp]
    p_bs = [a + b for a, b in p_shift] + [a - b for a, b in p_shift]

    # Move any zeros that were at infinity to the centre of the stopband.
    z_bs.extend([complex(0.0, wo)] * degree)
    z_bs.extend([complex(0.0, -wo)] * degree)

    # Cancel out the gain change caused by the inversion.
    num = math.prod((zi.real for zi in zpk.z), start=1.0)
    denom = math.prod((-pi for pi in zpk.p), start=complex(1.0))
    k_bs = zpk.k * (num / denom.real)

    return ZpkFilter(z_bs, p_bs, k_bs)