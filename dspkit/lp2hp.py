"""Lowpass-to-highpass frequency transformation in zpk form."""

from __future__ import annotations

import math
from typing import Optional

from dspkit.formats import ZpkFilter, relative_degree


def lp2hp_zpk(zpk: ZpkFilter, wo: Optional[float] = None) -> ZpkFilter:
    """Turn a unity-cutoff analog lowpass prototype into a highpass at ``wo``.

    Poles and zeros are inverted about the unit circle (``s -> wo / s``);
    zeros at infinity move to the origin. ``wo`` defaults to 1.
    """
    wo = 1.0 if wo is None else float(wo)
    degree = relative_degree(zpk.z, zpk.p)

    z_hp = [(complex(-2.0 * wo) / zi) * -1j for zi in zpk.z]
    p_hp = [complex(wo) / pi for pi in zpk.p]
    z_hp.extend([0j] * degree)

    # Cancel out the gain change caused by the inversion.
    num = math.prod((zi - 1.0 for zi in zpk.z), start=complex(1.0))
    denom = math.prod((-pi for pi in zpk.p), start=complex(1.0))
    k_hp = zpk.k * (num / denom).real

    return ZpkFilter(z_hp, p_hp, k_hp)