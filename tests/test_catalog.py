import pytest

from passphrase.core.errors import InvalidOptions
from passphrase.core.models import GenerationOptions, WordCategory
from passphrase.generators.catalog import available_locales, normalize_word, words_for
from passphrase.generators.selector import MIN_POOL_SIZE, filter_pool


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Pingüino", "pinguino"),
        ("Árbol", "arbol"),
        ("niño", "nino"),
        ("CORAZÓN", "corazon"),
        ("river", "river"),
    ],
)
def test_normalize_word(raw, expected):
    assert normalize_word(raw) == expected


def test_ships_english_and_spanish():
    assert set(available_locales()) == {"en", "es"}


@pytest.mark.parametrize("locale", ["en", "es"])
@pytest.mark.parametrize("category", list(WordCategory))
def test_words_are_normalised_and_unique(locale, category):
    words = words_for(locale, category)

    assert len(words) == len(set(words))
    for word in words:
        assert word.isascii() and word.isalpha() and word.islower(), word
        assert "-" not in word


@pytest.mark.parametrize("locale", ["en", "es"])
def test_mixed_is_union_of_categories(locale):
    union = set()
    for category in WordCategory:
        if category is not WordCategory.MIXED:
            union.update(words_for(locale, category))

    assert set(words_for(locale, WordCategory.MIXED)) == union


@pytest.mark.parametrize("locale", ["en", "es"])
@pytest.mark.parametrize("category", list(WordCategory))
def test_every_offered_length_window_leaves_enough_words(locale, category):
    for min_length in range(4, 9):
        for max_length in range(8, 16):
            options = GenerationOptions(
                word_category=category,
                locale=locale,
                min_word_length=min_length,
                max_word_length=max_length,
            )
            pool = filter_pool(options)
            assert len(pool) >= MIN_POOL_SIZE, (min_length, max_length, len(pool))


def test_category_accepts_plain_string():
    assert words_for("en", "nature") == words_for("en", WordCategory.NATURE)


def test_unknown_locale_raises():
    with pytest.raises(InvalidOptions):
        words_for("fr", WordCategory.MIXED)


def test_unknown_category_raises():
    with pytest.raises(InvalidOptions):
        words_for("en", "food")
