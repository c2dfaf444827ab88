"""Lowpass-to-lowpass frequency transformation in zpk form."""

from __future__ import annotations

from typing import Optional

from dspkit.formats import ZpkFilter, relative_degree


def lp2lp_zpk(zpk: ZpkFilter, wo: Optional[float] = None) -> ZpkFilter:
    """Move a unity-cutoff analog lowpass prototype to cutoff ``wo`` (rad/s).

    Uses the substitution ``s -> s / wo``; ``wo`` defaults to 1.
    """
    wo = 1.0 if wo is None else float(wo)
    degree = relative_degree(zpk.z, zpk.p)

    z_lp = [zi * wo for zi in zpk.z]
    p_lp = [pi * wo for pi in zpk.p]
    # Each shifted pole lowers the gain by wo, each shifted zero raises it.
    k_lp = zpk.k * wo**degree

    return ZpkFilter(z_lp, p_lp, k_lp)