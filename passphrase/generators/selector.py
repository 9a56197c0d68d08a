"""
Word Selector
==============

Draws a fixed number of distinct words from the length-filtered catalog,
optionally rejecting words that look too much alike.

Similarity is a deliberately coarse heuristic, not a phonetic or
lexical-distance algorithm: two normalised words are similar when they
share their first two characters and their lengths differ by at most
one ("garden" / "gardens", "stone" / "store").
"""

from __future__ import annotations

from typing import Sequence

from passphrase.core.errors import InsufficientWordPool
from passphrase.core.models import GenerationOptions
from passphrase.generators.catalog import words_for
from passphrase.generators.random_source import SecureRandom

# Smallest filtered pool the selector will draw from
MIN_POOL_SIZE = 25


def are_similar(first: str, second: str) -> bool:
    """Heuristic similarity: same two-letter prefix, length delta <= 1."""
    return first[:2] == second[:2] and abs(len(first) - len(second)) <= 1


def filter_pool(options: GenerationOptions) -> list[str]:
    """Catalog words for the options' locale/category within the length window."""
    return [
        word
        for word in words_for(options.locale, options.word_category)
        if options.min_word_length <= len(word) <= options.max_word_length
    ]


class WordSelector:
    """Selects distinct, length-bounded words with a secure random source.

    Usage::

        selector = WordSelector(SecureRandom())
        words = selector.select(4, options)
    """

    def __init__(self, rng: SecureRandom) -> None:
        self._rng = rng

    def select(self, count: int, options: GenerationOptions) -> list[str]:
        """Return *count* distinct words in draw order.

        Up to ``2 * pool_size`` draws try to satisfy both distinctness and
        (when ``avoid_similar_words`` is set) dissimilarity. Any shortfall
        is then filled from the not-yet-selected words, ignoring
        similarity.

        Raises:
            InsufficientWordPool: Pool smaller than :data:`MIN_POOL_SIZE`
                or than *count*.
        """
        pool = filter_pool(options)
        if len(pool) < MIN_POOL_SIZE:
            raise InsufficientWordPool(len(pool), MIN_POOL_SIZE)
        if count > len(pool):
            raise InsufficientWordPool(len(pool), count)

        selected: list[str] = []
        for _ in range(2 * len(pool)):
            if len(selected) >= count:
                break
            candidate = pool[self._rng.uniform(len(pool))]
            if candidate in selected:
                continue
            if options.avoid_similar_words and self._clashes(candidate, selected):
                continue
            selected.append(candidate)

        if len(selected) < count:
            remaining = [word for word in pool if word not in selected]
            while len(selected) < count:
                selected.append(remaining.pop(self._rng.uniform(len(remaining))))

        return selected

    @staticmethod
    def _clashes(candidate: str, selected: Sequence[str]) -> bool:
        return any(are_similar(candidate, word) for word in selected)
