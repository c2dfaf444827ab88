"""Conversion from zeros, poles and gain to cascaded second-order sections."""

from __future__ import annotations

import enum
from typing import Callable, Optional, Sequence

from dspkit.cplx import cplxreal
from dspkit.formats import Sos, SosFilter, ZpkFilter
from dspkit.zpk2tf import zpk2tf


class ZpkPairing(enum.Enum):
    """How poles and zeros are paired into sections."""

    MINIMAL = "minimal"
    NEAREST = "nearest"


class _Which(enum.Enum):
    REAL = "real"
    COMPLEX = "complex"
    ANY = "any"


def _is_real(value: complex) -> bool:
    return value.imag == 0


def _nearest_idx(fro: Sequence[complex], to: complex, which: _Which) -> int:
    """Index of the element of ``fro`` closest to ``to`` of the requested kind."""
    candidates = [
        (abs(value - to), index)
        for index, value in enumerate(fro)
        if which is _Which.ANY
        or (which is _Which.REAL and _is_real(value))
        or (which is _Which.COMPLEX and not _is_real(value))
    ]
    if not candidates:
        raise ValueError(f"no {which.value} value available to pair with")
    return min(candidates, key=lambda candidate: candidate[0])[1]


def _worst_digital(poles: Sequence[complex]) -> int:
    if not poles:
        raise ValueError("Poles must have a min")
    return min(range(len(poles)), key=lambda i: abs(1.0 - abs(poles[i])))


def _worst_analog(poles: Sequence[complex]) -> int:
    if not poles:
        raise ValueError("Poles must have a min")
    return min(range(len(poles)), key=lambda i: abs(poles[i].real))


def _single_section(z: Sequence[complex], p: Sequence[complex], k: float) -> Sos:
    """Build one second-order section from up to two zeros and two poles."""
    ba = zpk2tf(2, z, p, k)
    if len(ba.b) != 3 or len(ba.a) != 3:
        raise ValueError(
            f"SOS must have 3 coefficients has {len(ba.b)} and {len(ba.a)}"
        )
    return Sos(ba.b, ba.a)


def zpk2sos(
    order: int,
    zpk: ZpkFilter,
    pairing: Optional[ZpkPairing] = None,
    analog: Optional[bool] = None,
) -> SosFilter:
    """Return second-order sections for a zeros/poles/gain system.

    Pairing defaults to ``NEAREST`` for digital systems and ``MINIMAL`` for
    analog ones; analog systems only accept ``MINIMAL``. The gain goes into
    the first section and the sections nearest instability come last.
    """
    analog = bool(analog) if analog is not None else False
    if pairing is None:
        pairing = ZpkPairing.MINIMAL if analog else ZpkPairing.NEAREST

    if analog and pairing is not ZpkPairing.MINIMAL:
        raise ValueError("for analog zpk2sos conversion, pairing must be minimal")

    if not zpk.z and not zpk.p:
        if not analog:
            return SosFilter([Sos([zpk.k, 0.0, 0.0], [1.0, 0.0, 0.0])])
        return SosFilter([Sos([0.0, 0.0, zpk.k], [0.0, 0.0, 1.0])])

    z = list(zpk.z)
    p = list(zpk.p)
    if pairing is not ZpkPairing.MINIMAL:
        # Make the numbers of poles and zeros equal.
        if len(z) > len(p):
            p.extend([0j] * (len(z) - len(p)))
        if len(p) > len(z):
            z.extend([0j] * (len(p) - len(z)))
        n_sections = (max(len(p), len(z)) + 1) // 2
        if len(p) % 2 == 1 and pairing is ZpkPairing.NEAREST:
            z.append(0j)
            p.append(0j)
    else:
        if len(p) < len(z):
            raise ValueError("for analog zpk2sos conversion, must have len(p)>=len(z)")
        n_sections = (len(p) + 1) // 2

    # Only one element of each conjugate pair is kept.
    zc, zr = cplxreal(z)
    z = zc + zr
    pc, pr = cplxreal(p)
    p = pc + pr

    worst: Callable[[Sequence[complex]], int] = _worst_analog if analog else _worst_digital

    sections: list[Sos] = []
    for _ in range(n_sections):
        # Select the next "worst" pole.
        p1 = p.pop(worst(p))
        real_poles_left = sum(1 for pi in p if _is_real(pi))

        if _is_real(p1) and real_poles_left == 0:
            # Special case (1): last remaining real pole.
            if pairing is ZpkPairing.MINIMAL:
                z1 = z.pop(_nearest_idx(z, p1, _Which.REAL))
                section = _single_section([z1, 0j], [p1, 0j], 1.0)
            elif z:
                z1 = z.pop(_nearest_idx(z, p1, _Which.REAL))
                section = _single_section([z1], [p1], 1.0)
            else:
                section = _single_section([], [p1], 1.0)
        elif (
            len(p) + 1 == len(z)
            and not _is_real(p1)
            and real_poles_left == 1
            and sum(1 for zi in z if _is_real(zi)) == 1
        ):
            # Special case (2): one real pole and one real zero remain with
            # equal counts left to pair, so this pole takes a complex zero.
            z1 = z.pop(_nearest_idx(z, p1, _Which.COMPLEX))
            section = _single_section([z1, z1.conjugate()], [p1, p1.conjugate()], 1.0)
        else:
            if _is_real(p1):
                real_indices = [i for i, pi in enumerate(p) if _is_real(pi)]
                chosen = real_indices[worst([p[i] for i in real_indices])]
                p2 = p.pop(chosen)
            else:
                p2 = p1.conjugate()

            if z:
                z1 = z.pop(_nearest_idx(z, p1, _Which.ANY))
                if not _is_real(z1):
                    section = _single_section([z1, z1.conjugate()], [p1, p2], 1.0)
                elif z:
                    z2 = z.pop(_nearest_idx(z, p1, _Which.REAL))
                    section = _single_section([z1, z2], [p1, p2], 1.0)
                else:
                    section = _single_section([z1], [p1, p2], 1.0)
            else:
                section = _single_section([], [p1, p2], 1.0)
        sections.append(section)

    # The "worst" sections go last.
    sections.reverse()

    if p or z:
        raise ValueError("poles and zeros were left unpaired")

    sections[0].b = [bi * zpk.k for bi in sections[0].b]
    return SosFilter(sections)