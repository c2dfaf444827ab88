"""IIR filter design, zero/pole/gain transforms, companion matrices and FFT convolution."""

__version__ = "0.1.0"