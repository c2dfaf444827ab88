"""Lowpass-to-bandpass frequency transformation in zpk form."""

from __future__ import annotations

import cmath
from typing import Optional

from dspkit.formats import ZpkFilter, relative_degree


def lp2bp_zpk(
    zpk: ZpkFilter, wo: Optional[float] = None, bw: Optional[float] = None
) -> ZpkFilter:
    """Turn a unity-cutoff analog lowpass prototype into a bandpass filter.

    The passband is centred on ``wo`` with width ``bw`` (both rad/s, both
    defaulting to 1), using ``s -> (s^2 + wo^2) / (s * bw)``. Zeros at
    infinity are split between the origin and infinity.
    """
    wo = 1.0 if wo is None else float(wo)
    bw = 1.0 if bw is None else float(bw)
    degree = relative_degree(zpk.z, zpk.p)

    # Scale poles and zeros to the desired bandwidth.
    z_lp = [zi * (bw / 2.0) for zi in zpk.z]
    p_lp = [pi * (bw / 2.0) for pi in zpk.p]

    # Duplicate poles and zeros and shift them from baseband to +wo and -wo.
    wo2 = complex(wo * wo)
    z_shift = [(zi, cmath.sqrt(zi * zi - wo2)) for zi in z_lp]
    p_shift = [(pi, cmath.sqrt(pi * pi - wo2)) for pi in p_lp]

    z_bp = [a + b for a, b in z_shift] + [a - b for a, b in z_shift]
    p_bp = [a + b for a, b in p_shift] + [a - b for a, b in p_shift]

    # Move `degree` zeros to the origin, leaving the rest at infinity.
    z_bp.extend([0j] * degree)

    # Cancel out the gain change from frequency scaling.
    k_bp = zpk.k * bw**degree

    return ZpkFilter(z_bp, p_bp, k_bp)