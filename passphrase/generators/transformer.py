"""
Word Transformer
=================

Decorates selected words before they are joined:

* capitalisation upper-cases the first letter of *every* word, or of
  none; it is never density-gated;
* the digit and symbol channels each pick ``max(1, floor(n * density))``
  distinct words and insert one character from their alphabet at an
  interior position. The two channels draw independently, so a word may
  receive both a digit and a symbol, or neither.

Words of two characters or fewer have no interior position and are left
as they are, even when a channel picks them.
"""

from __future__ import annotations

import math
from typing import Sequence

from passphrase.core.models import GenerationOptions
from passphrase.generators.random_source import SecureRandom

DIGITS = "0123456789"
SYMBOLS = "!@#$%^&*"


def capitalize_word(word: str) -> str:
    return word[:1].upper() + word[1:]


def injection_count(word_count: int, density: float) -> int:
    """Number of words a channel decorates: ``max(1, floor(n * d))``, at most n."""
    if word_count <= 0:
        return 0
    return min(word_count, max(1, math.floor(word_count * density)))


class WordTransformer:
    """Applies capitalisation and digit/symbol injection.

    Usage::

        transformer = WordTransformer(SecureRandom())
        decorated = transformer.transform(["river", "forest", "stone"], options)
    """

    def __init__(self, rng: SecureRandom) -> None:
        self._rng = rng

    def transform(
        self, words: Sequence[str], options: GenerationOptions
    ) -> list[str]:
        """Return decorated copies of *words*; the input is not modified."""
        decorated = list(words)

        if options.include_capitals:
            decorated = [capitalize_word(word) for word in decorated]

        if options.include_numbers:
            decorated = self.inject(decorated, DIGITS, options.character_density)

        if options.include_specials:
            decorated = self.inject(decorated, SYMBOLS, options.character_density)

        return decorated

    def inject(
        self, words: Sequence[str], alphabet: str, density: float
    ) -> list[str]:
        """Insert one *alphabet* character into a density-chosen subset."""
        result = list(words)
        count = injection_count(len(result), density)
        for index in self._rng.sample_indices(len(result), count):
            result[index] = self.insert_character(result[index], alphabet)
        return result

    def insert_character(self, word: str, alphabet: str) -> str:
        """Insert a random *alphabet* character strictly inside *word*.

        The position is drawn from ``1 .. len(word) - 2`` so the first and
        last characters are never displaced.
        """
        if len(word) <= 2:
            return word
        char = self._rng.choice(alphabet)
        position = self._rng.uniform(len(word) - 2) + 1
        return word[:position] + char + word[position:]
