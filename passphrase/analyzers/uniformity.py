"""
Random Source Uniformity Tester
================================

Checks that :meth:`SecureRandom.uniform` draws are confined to
``[0, bound)`` and evenly spread across it, using Pearson's chi-squared
goodness-of-fit test against the uniform expectation ``draws / bound``
per value.

The default significance is deliberately loose (0.001): a healthy source
fails about one run in a thousand, while a biased reduction such as a
plain modulo over a small byte range fails almost always.

References:
    - Pearson, K. (1900). On the criterion that a given system of
      deviations from the probable ... Philosophical Magazine, 50(302).
    - Knuth, D. E. (1997). The Art of Computer Programming, Volume 2:
      Seminumerical Algorithms (3rd ed.), Section 3.3.1.
"""

from __future__ import annotations

import numpy as np

from shared.math_utils import chi_squared_test

from passphrase.core.models import UniformityResult
from passphrase.generators.random_source import SecureRandom


class UniformityTester:
    """Chi-squared uniformity check for a :class:`SecureRandom`.

    Usage::

        tester = UniformityTester(significance=0.001)
        result = tester.run(SecureRandom(), bound=10, draws=100_000)
        print("PASS" if result.passed else "FAIL", result.p_value)
    """

    # Below this many expected hits per bin the chi-squared approximation
    # is unreliable (Cochran's rule of thumb)
    MIN_EXPECTED_PER_BIN: int = 5

    def __init__(self, significance: float = 0.001) -> None:
        if not 0.0 < significance < 1.0:
            raise ValueError(f"significance must be in (0, 1), got {significance}")
        self.significance = significance

    def run(self, source: SecureRandom, bound: int, draws: int) -> UniformityResult:
        """Draw *draws* samples of ``source.uniform(bound)`` and test them.

        Raises:
            ValueError: If *bound* < 2 or *draws* gives fewer than
                :attr:`MIN_EXPECTED_PER_BIN` expected hits per value.
        """
        if bound < 2:
            raise ValueError(f"bound must be at least 2, got {bound}")
        if draws < bound * self.MIN_EXPECTED_PER_BIN:
            raise ValueError(
                f"{draws} draws is too few for bound {bound}; need at least "
                f"{bound * self.MIN_EXPECTED_PER_BIN}"
            )

        samples = np.fromiter(
            (source.uniform(bound) for _ in range(draws)),
            dtype=np.int64,
            count=draws,
        )
        in_range = (samples >= 0) & (samples < bound)
        out_of_range = int(draws - np.count_nonzero(in_range))

        counts = np.bincount(samples[in_range], minlength=bound)
        expected = np.full(bound, draws / bound, dtype=np.float64)
        chi2, p_value = chi_squared_test(counts, expected)
        p_value = min(1.0, max(0.0, p_value))

        return UniformityResult(
            bound=bound,
            draws=draws,
            counts=[int(c) for c in counts],
            chi_squared=round(chi2, 6),
            p_value=p_value,
            significance=self.significance,
            passed=out_of_range == 0 and p_value >= self.significance,
            out_of_range=out_of_range,
            cryptographic=source.is_cryptographic,
        )
