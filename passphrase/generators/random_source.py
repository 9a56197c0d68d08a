"""
Secure Random Source
=====================

Uniform integer sampling in ``[0, bound)`` for word selection and
character injection.

When a cryptographic byte source is available (``os.urandom`` by
default) each draw reads an unsigned 32-bit integer and rejects values
at or above the largest multiple of ``bound`` that fits in 32 bits,
which removes modulo bias exactly:

    limit = floor(2^32 / bound) * bound
    accept value iff value < limit, return value % bound

Without a cryptographic source the sampler degrades to
``floor(random() * bound)`` from the Mersenne Twister. The degradation
is logged once and exposed through :attr:`SecureRandom.is_cryptographic`
so that security-sensitive deployments can refuse to operate, or they
can pass ``require_cryptographic=True`` and get
:class:`InsecureRandomSource` at construction instead.

Reference:
    - Lemire, D. (2019). Fast Random Integer Generation in an Interval.
      ACM Transactions on Modeling and Computer Simulation, 29(1).
"""

from __future__ import annotations

import os
import random
from typing import Callable, Optional

from shared.logger import PhraseLogger

from passphrase.core.errors import InsecureRandomSource

ByteSource = Callable[[int], bytes]

_DRAW_BYTES = 4
_DRAW_RANGE = 1 << 32


class SecureRandom:
    """Bias-free bounded integer sampler over a cryptographic byte source.

    Usage::

        rng = SecureRandom()
        index = rng.uniform(len(words))
        if not rng.is_cryptographic:
            ...  # refuse, or warn the user

    Args:
        byte_source: Callable returning *n* random bytes. ``None`` forces
            the degraded path.
        fallback: PRNG used when no byte source is usable.
        require_cryptographic: Raise instead of degrading.
        logger: Logger for the degradation warning; defaults to a
            stderr-only ``random`` component logger.
    """

    def __init__(
        self,
        byte_source: Optional[ByteSource] = os.urandom,
        *,
        fallback: Optional[random.Random] = None,
        require_cryptographic: bool = False,
        logger: Optional[PhraseLogger] = None,
    ) -> None:
        self.logger = logger or PhraseLogger("random")
        self._byte_source = self._usable_source(byte_source)
        self._fallback = fallback or random.Random()

        if self._byte_source is None:
            if require_cryptographic:
                raise InsecureRandomSource(
                    "No cryptographic random source is available"
                )
            self.logger.warning(
                "No cryptographic random source available; falling back to "
                "a non-uniform pseudo-random generator"
            )

    @staticmethod
    def _usable_source(byte_source: Optional[ByteSource]) -> Optional[ByteSource]:
        if byte_source is None:
            return None
        try:
            byte_source(_DRAW_BYTES)
        except NotImplementedError:
            # os.urandom raises this when the platform has no entropy source
            return None
        return byte_source

    @property
    def is_cryptographic(self) -> bool:
        """``True`` when draws come from the cryptographic byte source."""
        return self._byte_source is not None

    def uniform(self, bound: int) -> int:
        """Return an integer uniformly distributed in ``[0, bound)``.

        Args:
            bound: Exclusive upper bound, ``1 <= bound <= 2**32``.

        Raises:
            ValueError: If *bound* is not a positive integer within range.
        """
        if isinstance(bound, bool) or not isinstance(bound, int):
            raise ValueError(f"bound must be an integer, got {bound!r}")
        if bound <= 0 or bound > _DRAW_RANGE:
            raise ValueError(f"bound must be in 1..2**32, got {bound}")

        if self._byte_source is None:
            return int(self._fallback.random() * bound)

        limit = (_DRAW_RANGE // bound) * bound
        while True:
            value = int.from_bytes(self._byte_source(_DRAW_BYTES), "big")
            if value < limit:
                return value % bound

    def choice(self, alphabet: str) -> str:
        """Return one character of *alphabet*, uniformly."""
        return alphabet[self.uniform(len(alphabet))]

    def sample_indices(self, population: int, k: int) -> list[int]:
        """Draw *k* distinct indices from ``range(population)``.

        Partial Fisher-Yates shuffle, so every *k*-subset (and order) is
        equally likely. Returned in draw order.

        Raises:
            ValueError: If *k* is negative or exceeds *population*.
        """
        if k < 0 or k > population:
            raise ValueError(
                f"cannot sample {k} distinct indices from {population}"
            )
        pool = list(range(population))
        for i in range(k):
            j = i + self.uniform(population - i)
            pool[i], pool[j] = pool[j], pool[i]
        return pool[:k]
