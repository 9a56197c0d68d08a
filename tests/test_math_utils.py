import math

import pytest

from shared.math_utils import chi_squared_sf, chi_squared_test


def test_known_value_one_degree_of_freedom():
    chi2, p_value = chi_squared_test([60, 40], [50, 50])

    assert chi2 == pytest.approx(4.0)
    assert p_value == pytest.approx(0.0455, abs=1e-3)


def test_perfect_fit():
    chi2, p_value = chi_squared_test([25, 25, 25, 25], [25, 25, 25, 25])

    assert chi2 == 0
    assert p_value == 1.0


@pytest.mark.parametrize("statistic", [0.5, 2.0, 7.3, 40.0])
def test_two_degrees_of_freedom_is_exponential(statistic):
    assert chi_squared_sf(statistic, 2) == pytest.approx(math.exp(-statistic / 2))


@pytest.mark.parametrize(
    "statistic, dof, expected",
    [
        (3.841, 1, 0.05),
        (5.991, 2, 0.05),
        (7.815, 3, 0.05),
        (16.919, 9, 0.05),
        (21.666, 9, 0.01),
        (27.877, 9, 0.001),
        (18.307, 10, 0.05),
    ],
)
def test_matches_critical_value_table(statistic, dof, expected):
    assert chi_squared_sf(statistic, dof) == pytest.approx(expected, rel=2e-3)


def test_huge_statistic_has_zero_tail():
    assert chi_squared_sf(9_000.0, 9) == pytest.approx(0.0, abs=1e-300)


def test_many_bins_do_not_underflow():
    # Mean of chi2(k) is k; the tail at the mean is close to one half
    assert 0.45 < chi_squared_sf(2_000.0, 2_000) < 0.55
    assert 0.45 < chi_squared_sf(2_001.0, 2_001) < 0.55


def test_rejects_mismatched_shapes():
    with pytest.raises(ValueError):
        chi_squared_test([1, 2, 3], [1, 2])


def test_rejects_non_positive_expectation():
    with pytest.raises(ValueError):
        chi_squared_test([1, 2], [0, 3])
