# dspkit

Digital signal processing building blocks: IIR filter design with an
interface modelled on the familiar scientific Python one, zero/pole/gain
transforms, second-order section conversion, companion matrices and
FFT-based convolution.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Designing filters

`dspkit.filters` provides `butter`, `cheby1` and `cheby2`. Each designs a
digital or analog filter and returns it in the representation you ask for:

- `FilterOutputType.BA` – a `BaFilter` with numerator `b` and denominator `a`
- `FilterOutputType.ZPK` – a `ZpkFilter` with zeros `z`, poles `p` and gain `k`
- `FilterOutputType.SOS` – a `SosFilter` holding a list of `Sos` sections

```python
from dspkit.filters import butter
from dspkit.formats import FilterBandType, FilterOutputType

design = butter(
    4,
    [10.0, 50.0],
    btype=FilterBandType.BANDPASS,
    output=FilterOutputType.SOS,
    fs=1666.0,
)
for section in design.sos:
    print(section.b, section.a)
```

`butter` defaults to a lowpass, digital filter in `BA` form. When `fs` is
given, critical frequencies are in the same units as `fs`; otherwise digital
frequencies are normalised so that 1 is the Nyquist frequency. Invalid
arguments raise `ValueError`.

For full control, `dspkit.iirfilter.iirfilter` takes the filter family as a
`FilterType` along with passband ripple `rp` and stopband attenuation `rs`;
its band type defaults to bandpass. Butterworth and Chebyshev type I and II
designs are supported; asking for `FilterType.CAUER_ELLIPTIC` or
`FilterType.BESSEL_THOMSON` raises `ValueError`.

The analog lowpass prototypes with unity cutoff are available directly as
`buttap`, `cheb1ap` and `cheb2ap` in `dspkit.prototypes`.

## Transforms

Zero/pole/gain filters (`ZpkFilter`) can be moved between band types and
domains:

- `dspkit.lp2lp.lp2lp_zpk` – shift the cutoff of a lowpass prototype
- `dspkit.lp2hp.lp2hp_zpk` – lowpass to highpass
- `dspkit.lp2bp.lp2bp_zpk` – lowpass to bandpass
- `dspkit.lp2bs.lp2bs_zpk` – lowpass to bandstop
- `dspkit.bilinear.bilinear_zpk` – analog to digital via the bilinear transform

`dspkit.zpk2tf.zpk2tf` converts a zero/pole/gain system into polynomial
coefficients (`dspkit.zpk2tf.poly` builds a polynomial from its roots), and
`dspkit.zpk2sos.zpk2sos` converts it into second-order sections, pairing
poles and zeros by `ZpkPairing.NEAREST` (digital default) or
`ZpkPairing.MINIMAL` (required for analog systems).

Coefficients written as a flat list of six values per section can be loaded
with `Sos.from_scipy(order, values)`.

`dspkit.cplx.cplxreal` splits roots into conjugate pairs and real values, and
`dspkit.cplx.sort_cplx` sorts complex values by real then imaginary part.

## Convolution

```python
from dspkit.convolve import ConvolveMode, convolve, correlate

convolve([1.0, 2.0, 3.0], [4.0, 5.0, 6.0], ConvolveMode.FULL)
# [4.0, 13.0, 28.0, 27.0, 18.0]
correlate([1.0, 2.0, 3.0], [4.0, 5.0, 6.0], ConvolveMode.FULL)
# [6.0, 17.0, 32.0, 23.0, 12.0]
```

`ConvolveMode.VALID` returns only the fully overlapping part and
`ConvolveMode.SAME` returns as many values as the first input, centred on the
full result. `fftconvolve` is the underlying function.

## Linear algebra

`dspkit.linalg.companion` returns the companion matrix of a polynomial as a
NumPy array.

## What it does not do

The package has no plotting or visualisation helpers, and no command-line
tool; it is used as a library only.