import pytest

from passphrase.core.engine import PassphraseEngine
from passphrase.core.models import GenerationOptions
from passphrase.generators.random_source import SecureRandom
from shared.config import PhraseConfig


class ScriptedBytes:
    """Byte source replaying 32-bit big-endian values, then os-like zeros.

    ``SecureRandom`` reads four bytes once at construction to check the
    source; that startup read is answered with ``first`` and not counted
    as a draw.
    """

    def __init__(self, values, first=0):
        self._values = [first, *values]
        self.calls = 0

    def __call__(self, n):
        assert n == 4
        self.calls += 1
        value = self._values.pop(0) if self._values else 0
        return value.to_bytes(4, "big")

    @property
    def draws(self):
        return self.calls - 1


@pytest.fixture
def scripted_bytes():
    return ScriptedBytes


@pytest.fixture
def rng():
    return SecureRandom()


@pytest.fixture
def default_options():
    return GenerationOptions()


@pytest.fixture
def engine():
    return PassphraseEngine(PhraseConfig())
