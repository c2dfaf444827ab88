"""Bilinear (Tustin) transform of an analog filter to a digital one."""

from __future__ import annotations

import math

from dspkit.formats import ZpkFilter, relative_degree


def bilinear_zpk(zpk: ZpkFilter, fs: float) -> ZpkFilter:
    """Map analog zeros, poles and gain to the z-plane at sample rate ``fs``.

    Substitutes ``(z - 1) / (z + 1)`` for ``s`` without prewarping. Zeros at
    infinity move to the Nyquist frequency (``z = -1``).
    """
    degree = relative_degree(zpk.z, zpk.p)
    fs2 = complex(2.0 * float(fs))

    z_z = [(fs2 + zi) / (fs2 - zi) for zi in zpk.z]
    z_z.extend([complex(-1.0)] * degree)
    p_z = [(fs2 + pi) / (fs2 - pi) for pi in zpk.p]

    # Compensate for the gain change.
    num = math.prod((fs2 - zi for zi in zpk.z), start=complex(1.0))
    denom = math.prod((fs2 - pi for pi in zpk.p), start=complex(1.0))
    k_z = zpk.k * (num / denom).real

    return ZpkFilter(z_z, p_z, k_z)