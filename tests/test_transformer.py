import pytest

from passphrase.core.models import GenerationOptions
from passphrase.generators.transformer import (
    DIGITS,
    SYMBOLS,
    WordTransformer,
    capitalize_word,
    injection_count,
)

WORDS = ["river", "forest", "stone", "planet", "garden", "breeze"]


def _count_touched(decorated, alphabet):
    return sum(1 for word in decorated if any(ch in alphabet for ch in word))


@pytest.mark.parametrize(
    "word_count, density, expected",
    [
        (3, 0.7, 2),
        (2, 0.2, 1),
        (4, 0.5, 2),
        (6, 1.0, 6),
        (5, 0.2, 1),
        (6, 0.7, 4),
        (0, 0.7, 0),
    ],
)
def test_injection_count(word_count, density, expected):
    assert injection_count(word_count, density) == expected


def test_capitalize_word():
    assert capitalize_word("river") == "River"
    assert capitalize_word("") == ""


def test_capitals_apply_to_every_word_or_none(rng):
    transformer = WordTransformer(rng)

    on = transformer.transform(WORDS, GenerationOptions(
        include_capitals=True, include_numbers=False, include_specials=False))
    off = transformer.transform(WORDS, GenerationOptions(
        include_capitals=False, include_numbers=False, include_specials=False))

    assert all(word[0].isupper() for word in on)
    assert off == WORDS


@pytest.mark.parametrize("density", [0.2, 0.5, 0.7, 1.0])
@pytest.mark.parametrize("count", [2, 3, 6])
def test_each_channel_touches_expected_number_of_words(rng, density, count):
    words = WORDS[:count]
    options = GenerationOptions(
        word_count=count,
        include_capitals=False,
        include_numbers=True,
        include_specials=True,
        character_density=density,
    )

    decorated = WordTransformer(rng).transform(words, options)
    expected = injection_count(count, density)

    assert _count_touched(decorated, DIGITS) == expected
    assert _count_touched(decorated, SYMBOLS) == expected
    assert sum(ch in DIGITS for word in decorated for ch in word) == expected
    assert sum(ch in SYMBOLS for word in decorated for ch in word) == expected


def test_injection_keeps_word_edges(rng):
    transformer = WordTransformer(rng)

    for _ in range(100):
        result = transformer.insert_character("stone", DIGITS)
        assert len(result) == 6
        assert result[0] == "s" and result[-1] == "e"
        assert result[1:-1].replace(next(c for c in result if c in DIGITS), "", 1) == "ton"


@pytest.mark.parametrize("word", ["", "a", "ab"])
def test_short_words_are_never_mutated(rng, word):
    assert WordTransformer(rng).insert_character(word, SYMBOLS) == word


def test_transform_does_not_modify_input(rng):
    words = list(WORDS)
    WordTransformer(rng).transform(words, GenerationOptions(include_specials=True))

    assert words == WORDS


def test_full_density_skips_short_words(rng):
    options = GenerationOptions(
        word_count=3,
        include_capitals=False,
        include_numbers=True,
        include_specials=True,
        character_density=1.0,
    )

    for _ in range(20):
        short, word, single = WordTransformer(rng).transform(["ab", "river", "x"], options)
        assert (short, single) == ("ab", "x")
        assert len(word) == 7
        assert word[0] == "r" and word[-1] == "r"
        assert sum(ch in DIGITS for ch in word) == 1
        assert sum(ch in SYMBOLS for ch in word) == 1
