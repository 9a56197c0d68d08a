"""
Passphrase Exceptions
======================

Every failure the core reports is a :class:`PassphraseError`; callers
decide how to display or retry. Scoring never raises.
"""

from __future__ import annotations


class PassphraseError(Exception):
    """Base class for generator failures."""


class InvalidOptions(PassphraseError, ValueError):
    """Generation options are outside their domain.

    Raised before any random draw is made.
    """


class InvalidPassword(PassphraseError, ValueError):
    """A password handed to re-derivation has no recoverable words."""


class InsufficientWordPool(PassphraseError):
    """The filtered catalog cannot supply the requested words.

    Attributes:
        available: Words left after length filtering.
        required: Words needed (pool minimum or requested count).
    """

    def __init__(self, available: int, required: int) -> None:
        self.available = available
        self.required = required
        super().__init__(
            f"Insufficient word pool: {available} words available with the "
            f"current filters, {required} required"
        )


class InsecureRandomSource(PassphraseError):
    """A cryptographic random source was required but is unavailable."""
