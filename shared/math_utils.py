"""
PhraseCore Mathematical Utilities
==================================

Pearson's chi-squared goodness-of-fit test on NumPy arrays, used to check
that the random source behind word selection draws uniformly.

The p-value is the chi-squared survival function for an integer number
of degrees of freedom, evaluated with its closed-form finite series
(Poisson tail for even ``k``, complementary error function plus a
finite sum for odd ``k``). Terms are summed in log space so that large
statistics and many bins neither overflow nor underflow early. No SciPy
is needed.

References:
    - Pearson, K. (1900). On the Criterion that a Given System of
      Deviations ... Philosophical Magazine, 50(302), 157-175.
    - Abramowitz, M. & Stegun, I. A. (1964). Handbook of Mathematical
      Functions, Section 26.4.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike


def chi_squared_test(
    observed: ArrayLike, expected: ArrayLike
) -> tuple[float, float]:
    """Return ``(chi2, p_value)`` for *observed* against *expected* counts.

    Degrees of freedom are ``len(observed) - 1``; a single bin yields
    ``p_value = 1.0``.

    Raises:
        ValueError: Shapes differ, or an expected count is not positive.
    """
    obs = np.asarray(observed, dtype=np.float64)
    exp = np.asarray(expected, dtype=np.float64)

    if obs.shape != exp.shape:
        raise ValueError(
            f"observed and expected differ in shape: {obs.shape} vs {exp.shape}"
        )
    if (exp <= 0).any():
        raise ValueError("expected counts must all be positive")

    chi2 = float(np.sum(np.square(obs - exp) / exp))
    return chi2, chi_squared_sf(chi2, obs.size - 1)


def chi_squared_sf(statistic: float, dof: int) -> float:
    """Upper-tail probability ``P(X >= statistic)`` for ``X ~ chi2(dof)``."""
    if dof <= 0 or statistic <= 0.0:
        return 1.0

    half = statistic / 2.0
    if dof % 2 == 0:
        # exp(-h) * sum_{i < k/2} h^i / i!
        i = np.arange(dof // 2, dtype=np.float64)
        log_factorial = np.concatenate(([0.0], np.cumsum(np.log(i[1:]))))
        log_terms = -half + i * math.log(half) - log_factorial
        tail = float(np.exp(log_terms).sum())
    else:
        # erfc(sqrt(h)) + sqrt(2x/pi) e^-h sum_{j=1}^{(k-1)/2} x^(j-1) / (2j-1)!!
        tail = math.erfc(math.sqrt(half))
        terms = (dof - 1) // 2
        if terms:
            j = np.arange(1, terms + 1, dtype=np.float64)
            log_double_factorial = np.cumsum(np.log(2.0 * j - 1.0))
            log_terms = (
                0.5 * math.log(2.0 * statistic / math.pi)
                - half
                + (j - 1.0) * math.log(statistic)
                - log_double_factorial
            )
            tail += float(np.exp(log_terms).sum())

    return min(1.0, max(0.0, tail))
