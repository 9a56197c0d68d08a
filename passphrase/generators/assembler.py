"""
Password Assembler
===================

Joins decorated words with a single hyphen, and re-derives a password
from an existing one under new options.

Re-derivation strips every injected digit and symbol from each segment,
lower-cases the rest and runs the transformer again. Word selection is
not repeated, so the words themselves stay the same while decoration
changes; changing the word count needs a fresh :meth:`generate`.
"""

from __future__ import annotations

from passphrase.core.errors import InvalidPassword
from passphrase.core.models import GenerationOptions
from passphrase.generators.selector import WordSelector
from passphrase.generators.transformer import DIGITS, SYMBOLS, WordTransformer

SEPARATOR = "-"

_DECORATIONS = frozenset(DIGITS + SYMBOLS)


def join_words(words: list[str]) -> str:
    return SEPARATOR.join(words)


def split_password(password: str) -> list[str]:
    return password.split(SEPARATOR)


def strip_decorations(segment: str) -> str:
    """Remove injected digits/symbols from *segment* and lower-case it."""
    return "".join(ch for ch in segment if ch not in _DECORATIONS).lower()


def base_words(password: str) -> list[str]:
    """Recover the undecorated words of an assembled password."""
    return [strip_decorations(segment) for segment in split_password(password)]


class PasswordAssembler:
    """Runs the select -> transform -> join pipeline.

    Usage::

        assembler = PasswordAssembler(selector, transformer)
        password = assembler.generate(options)
        password = assembler.rederive(password, GenerationOptions.model_validate(
            {**options.model_dump(), "include_specials": True}))
    """

    def __init__(self, selector: WordSelector, transformer: WordTransformer) -> None:
        self._selector = selector
        self._transformer = transformer

    def generate(self, options: GenerationOptions) -> str:
        words = self._selector.select(options.word_count, options)
        return join_words(self._transformer.transform(words, options))

    def rederive(self, password: str, options: GenerationOptions) -> str:
        """Re-decorate the words of *password* under *options*.

        ``options.word_count`` is ignored: the word count of *password* is
        kept.

        Raises:
            InvalidPassword: If *password* is empty or a segment has no
                letters left once decorations are removed.
        """
        if not password:
            raise InvalidPassword("There is no password to re-derive")

        words = base_words(password)
        if not all(words):
            raise InvalidPassword(
                "Password contains a segment with no word left after "
                "removing digits and symbols"
            )
        return join_words(self._transformer.transform(words, options))
