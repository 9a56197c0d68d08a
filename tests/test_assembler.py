import pytest

from passphrase.core.errors import InvalidPassword
from passphrase.core.models import GenerationOptions
from passphrase.generators.assembler import (
    PasswordAssembler,
    base_words,
    split_password,
    strip_decorations,
)
from passphrase.generators.catalog import words_for
from passphrase.generators.selector import WordSelector
from passphrase.generators.transformer import DIGITS, SYMBOLS, WordTransformer

PLAIN = GenerationOptions(include_capitals=False, include_numbers=False, include_specials=False)


@pytest.fixture
def assembler(rng):
    return PasswordAssembler(WordSelector(rng), WordTransformer(rng))


@pytest.mark.parametrize("count", [2, 3, 4, 5, 6])
def test_generate_joins_requested_number_of_words(assembler, count):
    options = GenerationOptions(word_count=count, include_specials=True)
    password = assembler.generate(options)

    segments = split_password(password)
    assert len(segments) == count
    catalog = set(words_for("en", options.word_category))
    assert all(word in catalog for word in base_words(password))


def test_plain_options_produce_lowercase_catalog_words(assembler):
    password = assembler.generate(PLAIN)

    assert password == password.lower()
    assert not any(ch in DIGITS + SYMBOLS for ch in password)


def test_rederive_keeps_the_words(assembler):
    original = assembler.generate(GenerationOptions(word_count=4))
    words = base_words(original)

    for options in (
        PLAIN,
        GenerationOptions(include_specials=True, character_density=1.0),
        GenerationOptions(include_capitals=False, include_numbers=True),
    ):
        updated = assembler.rederive(original, options)
        assert base_words(updated) == words


def test_rederive_ignores_word_count(assembler):
    original = assembler.generate(GenerationOptions(word_count=3))
    updated = assembler.rederive(original, GenerationOptions(word_count=6))

    assert len(split_password(updated)) == 3


def test_rederive_with_plain_options_recovers_base_words(assembler):
    updated = assembler.rederive("Riv3er-F@orest-Sto!ne", PLAIN)

    assert updated == "river-forest-stone"


@pytest.mark.parametrize("password", ["", "123-river", "river-!@#", "river--stone"])
def test_rederive_rejects_unrecoverable_passwords(assembler, password):
    with pytest.raises(InvalidPassword):
        assembler.rederive(password, PLAIN)


@pytest.mark.parametrize("segment", ["Riv3er", "F@orest", "sto!n5e", "PLAIN", "x"])
def test_strip_decorations_is_idempotent(segment):
    once = strip_decorations(segment)

    assert strip_decorations(once) == once
    assert not any(ch in DIGITS + SYMBOLS for ch in once)
    assert once == once.lower()
