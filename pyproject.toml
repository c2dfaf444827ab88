[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dspkit"
version = "0.1.0"
description = "IIR filter design, zero/pole/gain transforms and FFT convolution"
requires-python = ">=3.10"
keywords = ["dsp", "signal processing", "iir", "butterworth", "chebyshev", "filter design", "convolution"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["dspkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
