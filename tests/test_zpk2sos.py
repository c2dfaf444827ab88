import numpy as np
import pytest

from dspkit.formats import ZpkFilter
from dspkit.prototypes import buttap
from dspkit.zpk2sos import ZpkPairing, zpk2sos


def _assert_sections(actual, expected, rel):
    assert len(actual.sos) == len(expected)
    for section, (b, a) in zip(actual.sos, expected):
        assert section.b == pytest.approx(b, rel=rel, abs=1e-12)
        assert section.a == pytest.approx(a, rel=rel, abs=1e-12)


def test_bandpass_butter_digital_zpk():
    zpk = ZpkFilter(
        [1, 1, 1, 1, -1, -1, -1, -1],
        [
            complex(0.98924866, -0.03710237),
            complex(0.96189799, -0.03364097),
            complex(0.96189799, 0.03364097),
            complex(0.98924866, 0.03710237),
            complex(0.93873849, 0.16792939),
            complex(0.89956011, 0.08396115),
            complex(0.89956011, -0.08396115),
            complex(0.93873849, -0.16792939),
        ],
        2.6775767382597835e-05,
    )
    expected = [
        ([2.67757674e-05, 5.35515348e-05, 2.67757674e-05], [1.0, -1.79912022, 8.16257861e-01]),
        ([1.0, 2.0, 1.0], [1.0, -1.87747699, 9.09430241e-01]),
        ([1.0, -2.0, 1.0], [1.0, -1.92379599, 9.26379467e-01]),
        ([1.0, -2.0, 1.0], [1.0, -1.97849731, 9.79989489e-01]),
    ]
    _assert_sections(zpk2sos(4, zpk), expected, rel=1e-6)


def test_highpass_butter_digital_zpk_odd_order():
    zpk = ZpkFilter(
        [1, 1, 1, 1, 1],
        [
            complex(0.99335214, -0.01978936),
            complex(0.98312384, -0.01210456),
            complex(0.97927235, 0.0),
            complex(0.98312384, 0.01210456),
            complex(0.99335214, 0.01978936),
        ],
        0.9666790028093929,
    )
    expected = [
        ([0.966679, -0.966679, 0.0], [1.0, -0.97927235, 0.0]),
        ([1.0, -2.0, 1.0], [1.0, -1.96624768, 0.966679]),
        ([1.0, -2.0, 1.0], [1.0, -1.98670428, 0.9871401]),
    ]
    _assert_sections(zpk2sos(5, zpk, ZpkPairing.NEAREST, False), expected, rel=1e-6)


def test_empty_digital_system_is_pure_gain():
    result = zpk2sos(0, ZpkFilter([], [], 3.5))
    assert len(result.sos) == 1
    assert result.sos[0].b == [3.5, 0.0, 0.0]
    assert result.sos[0].a == [1.0, 0.0, 0.0]


def test_empty_analog_system_is_pure_gain():
    result = zpk2sos(0, ZpkFilter([], [], 3.5), analog=True)
    assert result.sos[0].b == [0.0, 0.0, 3.5]
    assert result.sos[0].a == [0.0, 0.0, 1.0]


def test_analog_requires_minimal_pairing():
    with pytest.raises(ValueError):
        zpk2sos(4, buttap(4), ZpkPairing.NEAREST, True)


def test_minimal_requires_enough_poles():
    zpk = ZpkFilter([0.5, 0.25, -0.5], [0.1], 1.0)
    with pytest.raises(ValueError):
        zpk2sos(2, zpk, ZpkPairing.MINIMAL, False)


def test_analog_sections_keep_all_poles():
    prototype = buttap(4)
    result = zpk2sos(4, prototype, analog=True)
    assert len(result.sos) == 2
    roots = np.concatenate([np.roots(section.a) for section in result.sos])
    got = sorted(roots, key=lambda v: (round(v.real, 9), round(v.imag, 9)))
    want = sorted(prototype.p, key=lambda v: (round(v.real, 9), round(v.imag, 9)))
    assert np.allclose(got, want, atol=1e-9)
    for section in result.sos:
        assert section.a[0] == pytest.approx(1.0)


def test_section_count_and_gain_placement():
    zpk = ZpkFilter([1, 1, -1], [0.5, 0.4, complex(0.3, 0.2), complex(0.3, -0.2)], 2.0)
    result = zpk2sos(4, zpk)
    assert len(result.sos) == 2
    assert result.sos[0].b[0] == pytest.approx(2.0)
    assert all(section.b[0] == pytest.approx(1.0) for section in result.sos[1:])