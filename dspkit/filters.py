"""Named IIR filter designs built on the general IIR designer."""

from __future__ import annotations

from typing import Optional, Sequence, Union

from dspkit.formats import FilterBandType, FilterOutputType, FilterType
from dspkit.iirfilter import DesignedFilter, iirfilter

CriticalFrequencies = Union[float, Sequence[float]]


def butter(
    order: int,
    wn: CriticalFrequencies,
    btype: Optional[FilterBandType] = None,
    analog: Optional[bool] = None,
    output: Optional[FilterOutputType] = None,
    fs: Optional[float] = None,
) -> DesignedFilter:
    """Design an Nth-order digital or analog Butterworth filter.

    ``btype`` defaults to lowpass, ``analog`` to False and ``output`` to
    numerator/denominator form.
    """
    return iirfilter(
        order,
        wn,
        None,
        None,
        FilterBandType.LOWPASS if btype is None else btype,
        FilterType.BUTTERWORTH,
        False if analog is None else analog,
        FilterOutputType.BA if output is None else output,
        fs,
    )


def cheby1(
    n: int,
    rp: float,
    wn: CriticalFrequencies,
    btype: Optional[FilterBandType] = None,
    analog: Optional[bool] = None,
    output: Optional[FilterOutputType] = None,
    fs: Optional[float] = None,
) -> DesignedFilter:
    """Design an Nth-order Chebyshev type I filter with ``rp`` dB of passband ripple."""
    return iirfilter(
        n, wn, rp, None, btype, FilterType.CHEBYSHEV_I, analog, output, fs
    )


def cheby2(
    n: int,
    rs: float,
    wn: CriticalFrequencies,
    btype: Optional[FilterBandType] = None,
    analog: Optional[bool] = None,
    output: Optional[FilterOutputType] = None,
    fs: Optional[float] = None,
) -> DesignedFilter:
    """Design an Nth-order Chebyshev type II filter with ``rs`` dB of stopband attenuation."""
    return iirfilter(
        n, wn, None, rs, btype, FilterType.CHEBYSHEV_II, analog, output, fs
    )