"""IIR filter design from order and critical frequencies."""

from __future__ import annotations

import math
from typing import Optional, Sequence, Union

from dspkit.bilinear import bilinear_zpk
from dspkit.formats import (
    BaFilter,
    FilterBandType,
    FilterOutputType,
    FilterType,
    SosFilter,
    ZpkFilter,
)
from dspkit.lp2bp import lp2bp_zpk
from dspkit.lp2bs import lp2bs_zpk
from dspkit.lp2hp import lp2hp_zpk
from dspkit.lp2lp import lp2lp_zpk
from dspkit.prototypes import buttap, cheb1ap, cheb2ap
from dspkit.zpk2sos import zpk2sos
from dspkit.zpk2tf import zpk2tf

DesignedFilter = Union[BaFilter, ZpkFilter, SosFilter]


def _critical_frequencies(wn: Union[float, Sequence[float]]) -> list[float]:
    if isinstance(wn, (int, float)):
        return [float(wn)]
    return [float(w) for w in wn]


def _prototype(
    order: int, ftype: FilterType, rp: Optional[float], rs: Optional[float]
) -> ZpkFilter:
    if ftype is FilterType.BUTTERWORTH:
        return buttap(order)
    if ftype is FilterType.CHEBYSHEV_I:
        if rp is None:
            raise ValueError(
                "passband ripple (rp) must be provided to design a Chebyshev I filter"
            )
        return cheb1ap(order, rp)
    if ftype is FilterType.CHEBYSHEV_II:
        if rs is None:
            raise ValueError(
                "stopband attenuation (rs) must be provided to design an Chebyshev II filter."
            )
        return cheb2ap(order, rs)
    if ftype is FilterType.CAUER_ELLIPTIC:
        if rs is None or rp is None:
            raise ValueError(
                "Both rp and rs must be provided to design an elliptic filter."
            )
        raise ValueError("elliptic filter design is not supported")
    raise ValueError("Bessel/Thomson filter design is not supported")


def iirfilter(
    order: int,
    wn: Union[float, Sequence[float]],
    rp: Optional[float] = None,
    rs: Optional[float] = None,
    btype: Optional[FilterBandType] = None,
    ftype: Optional[FilterType] = None,
    analog: Optional[bool] = None,
    output: Optional[FilterOutputType] = None,
    fs: Optional[float] = None,
) -> DesignedFilter:
    """Design an Nth-order digital or analog IIR filter.

    ``btype`` defaults to bandpass, ``ftype`` to Butterworth and ``output``
    to numerator/denominator form. With ``fs`` given, ``wn`` is in the same
    units as ``fs``; otherwise digital frequencies are normalised so that 1
    is the Nyquist frequency. Invalid arguments raise ``ValueError``.
    """
    analog = bool(analog) if analog is not None else False
    wn = _critical_frequencies(wn)
    fs = None if fs is None else float(fs)

    if len(wn) > 2:
        raise ValueError("Wn may be of len 1 or 2")

    if fs is not None:
        if analog:
            raise ValueError("fs cannot be specified for an analog filter")
        wn = [2.0 * w / fs for w in wn]

    if any(w <= 0.0 for w in wn):
        raise ValueError("filter critical frequencies must be greater than 0")

    if len(wn) > 1 and wn[0] >= wn[1]:
        raise ValueError("Wn[0] must be less than Wn[1]")

    if rp is not None and rp < 0.0:
        raise ValueError("passband ripple (rp) must be positive")

    if rs is not None and rs < 0.0:
        raise ValueError("stopband attenuation (rs) must be positive")

    ftype = FilterType.BUTTERWORTH if ftype is None else ftype
    zpk = _prototype(order, ftype, rp, rs)

    # Pre-warp frequencies for digital filter design.
    if not analog:
        if any(w <= 0.0 or w >= 1.0 for w in wn):
            if fs is not None:
                raise ValueError(
                    "Digital filter critical frequencies must be 0 < Wn < fs/2 "
                    f"(fs={fs} -> fs/2={fs / 2.0})"
                )
            raise ValueError("Digital filter critical frequencies must be 0 < Wn < 1")
        fs = 2.0
        warped = [2.0 * fs * math.tan(math.pi * w / fs) for w in wn]
    else:
        fs = 1.0 if fs is None else fs
        warped = list(wn)

    btype = FilterBandType.BANDPASS if btype is None else btype
    if btype in (FilterBandType.LOWPASS, FilterBandType.HIGHPASS):
        if len(wn) != 1:
            raise ValueError(
                "Must specify a single critical frequency Wn for lowpass or highpass filter"
            )
        if btype is FilterBandType.LOWPASS:
            zpk = lp2lp_zpk(zpk, warped[0])
        else:
            zpk = lp2hp_zpk(zpk, warped[0])
    else:
        if len(wn) != 2:
            raise ValueError(
                "Wn must specify start and stop frequencies for bandpass or bandstop filter"
            )
        bw = warped[1] - warped[0]
        wo = math.sqrt(warped[0] * warped[1])
        if btype is FilterBandType.BANDPASS:
            zpk = lp2bp_zpk(zpk, wo, bw)
        else:
            zpk = lp2bs_zpk(zpk, wo, bw)

    if not analog:
        zpk = bilinear_zpk(zpk, fs)

    output = FilterOutputType.BA if output is None else output
    if output is FilterOutputType.ZPK:
        return zpk
    if output is FilterOutputType.BA:
        return zpk2tf(2 * order, zpk.z, zpk.p, zpk.k)
    return zpk2sos(order, zpk, None, analog)