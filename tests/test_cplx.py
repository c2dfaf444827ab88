import pytest

from dspkit.cplx import cplxreal, sort_cplx


def _assert_close(actual, expected, rel=1e-7):
    assert len(actual) == len(expected)
    for a, e in zip(actual, expected):
        assert a.real == pytest.approx(e.real, rel=rel, abs=1e-12)
        assert a.imag == pytest.approx(e.imag, rel=rel, abs=1e-12)


def test_matches_scipy_example_all_real():
    z = [1 + 0j] * 4 + [-1 + 0j] * 4
    zc, zr = cplxreal(z)
    assert zc == []
    assert [v.real for v in zr] == [-1.0] * 4 + [1.0] * 4


def test_matches_scipy_example_conjugates():
    z = [
        complex(0.98924866, -0.03710237),
        complex(0.96189799, -0.03364097),
        complex(0.96189799, 0.03364097),
        complex(0.98924866, 0.03710237),
        complex(0.93873849, 0.16792939),
        complex(0.89956011, 0.08396115),
        complex(0.89956011, -0.08396115),
        complex(0.93873849, -0.16792939),
    ]
    expected_zc = [
        complex(0.89956011, 0.08396115),
        complex(0.93873849, 0.16792939),
        complex(0.96189799, 0.03364097),
        complex(0.98924866, 0.03710237),
    ]
    zc, zr = cplxreal(z)
    _assert_close(zc, expected_zc)
    assert zr == []


def test_empty_input():
    assert cplxreal([]) == ([], [])


def test_mixed_real_and_complex():
    zc, zr = cplxreal([2, 1 + 1j, 1 - 1j, 0.5])
    _assert_close(zc, [1 + 1j])
    assert [v.real for v in zr] == [0.5, 2.0]


@pytest.mark.parametrize(
    "z",
    [
        [1 + 1j, 1 - 1j, 1 + 2j, 1 - 2j],
        [1 - 2j, 1 + 2j, 1 - 1j, 1 + 1j],
        [1 + 2j, 1 - 1j, 1 - 2j, 1 + 1j],
    ],
)
def test_runs_with_same_real_part_are_sorted_by_imaginary(z):
    zc, zr = cplxreal(z)
    _assert_close(zc, [1 + 1j, 1 + 2j])
    assert zr == []


def test_unmatched_conjugate_count_raises():
    with pytest.raises(ValueError):
        cplxreal([1 + 1j, 1 + 2j, 1 - 1j])


def test_mismatched_conjugate_value_raises():
    with pytest.raises(ValueError):
        cplxreal([1 + 1j, 3 - 1j])


def test_tolerance_allows_near_conjugates():
    zc, _ = cplxreal([1 + 1j, 1.001 - 1j], tol=0.01)
    _assert_close(zc, [1.0005 + 1j])


def test_sort_cplx_orders_by_real_then_imag():
    assert sort_cplx([3, 1 + 2j, 1 - 1j, -2]) == [-2, 1 - 1j, 1 + 2j, 3]


def test_sort_cplx_rejects_nan():
    with pytest.raises(ValueError):
        sort_cplx([complex(float("nan"), 0.0), 1 + 0j])