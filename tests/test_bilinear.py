import pytest

from dspkit.bilinear import bilinear_zpk
from dspkit.formats import ZpkFilter


def _assert_complex_close(actual, expected, rel):
    assert len(actual) == len(expected)
    for a, e in zip(actual, expected):
        assert a.real == pytest.approx(e.real, rel=rel)
        assert a.imag == pytest.approx(e.imag, rel=rel)


def test_matches_scipy_iirfilter_butter():
    zpk = ZpkFilter(
        [0j] * 4,
        [
            complex(-0.02022036, -0.07498294),
            complex(-0.07648538, -0.06990013),
            complex(-0.07648538, 0.06990013),
            complex(-0.02022036, 0.07498294),
            complex(-0.0956662, 0.35475786),
            complex(-0.20328954, 0.1857867),
            complex(-0.20328954, -0.1857867),
            complex(-0.0956662, -0.35475786),
        ],
        0.008409569194994788,
    )
    expected_z = [complex(1.0, 0.0)] * 4 + [complex(-1.0, 0.0)] * 4
    expected_p = [
        complex(0.98924866, -0.03710237),
        complex(0.96189799, -0.03364097),
        complex(0.96189799, 0.03364097),
        complex(0.98924866, 0.03710237),
        complex(0.93873849, 0.16792939),
        complex(0.89956011, 0.08396115),
        complex(0.89956011, -0.08396115),
        complex(0.93873849, -0.16792939),
    ]
    expected_k = 2.6775767382597835e-05

    actual = bilinear_zpk(zpk, 2.0)

    _assert_complex_close(actual.z, expected_z, 1e-6)
    _assert_complex_close(actual.p, expected_p, 1e-6)
    assert actual.k == pytest.approx(expected_k, rel=1e-8)


def test_origin_maps_to_one_and_infinity_to_minus_one():
    zpk = ZpkFilter([0j], [0j, 0j], 5.0)
    actual = bilinear_zpk(zpk, 10.0)
    assert actual.z == [complex(1.0), complex(-1.0)]
    assert actual.p == [complex(1.0), complex(1.0)]
    assert actual.k == pytest.approx(5.0 * 20.0 / 400.0)


def test_improper_transfer_function_raises():
    zpk = ZpkFilter([0j, 0j], [complex(-1.0)], 1.0)
    with pytest.raises(ValueError):
        bilinear_zpk(zpk, 2.0)