import pytest

from passphrase.core.errors import InsufficientWordPool
from passphrase.core.models import GenerationOptions
from passphrase.generators import selector as selector_module
from passphrase.generators.selector import WordSelector, are_similar


@pytest.mark.parametrize(
    "first, second, similar",
    [
        ("garden", "gardens", True),
        ("stone", "store", True),
        ("planet", "planet", True),
        ("river", "stone", False),
        ("garden", "gardening", False),
        ("forest", "format", True),
        ("forest", "formation", False),
    ],
)
def test_are_similar(first, second, similar):
    assert are_similar(first, second) is similar


@pytest.mark.parametrize("count", [2, 3, 4, 5, 6])
def test_select_returns_distinct_words_within_bounds(rng, count):
    options = GenerationOptions(word_count=count, min_word_length=5, max_word_length=9)

    for _ in range(20):
        words = WordSelector(rng).select(count, options)
        assert len(words) == count
        assert len(set(words)) == count
        assert all(5 <= len(word) <= 9 for word in words)


def test_select_avoids_similar_words(rng):
    options = GenerationOptions(word_count=6, avoid_similar_words=True)

    for _ in range(50):
        words = WordSelector(rng).select(6, options)
        for i, first in enumerate(words):
            for second in words[i + 1:]:
                assert not are_similar(first, second), (first, second)


def test_small_pool_raises(rng, monkeypatch):
    tiny = tuple(f"word{letter}" for letter in "abcdefghij")
    monkeypatch.setattr(selector_module, "words_for", lambda locale, category: tiny)

    with pytest.raises(InsufficientWordPool) as excinfo:
        WordSelector(rng).select(3, GenerationOptions())

    assert excinfo.value.available == 10
    assert excinfo.value.required == 25


def test_count_larger_than_pool_raises(rng, monkeypatch):
    pool = tuple(f"wor{a}{b}" for a in "abcde" for b in "abcde")
    monkeypatch.setattr(selector_module, "words_for", lambda locale, category: pool)

    with pytest.raises(InsufficientWordPool) as excinfo:
        WordSelector(rng).select(30, GenerationOptions())

    assert excinfo.value.required == 30


def test_all_similar_pool_still_fills_the_request(rng, monkeypatch):
    # Every word shares the prefix "wo" and has the same length
    pool = tuple(f"wor{a}{b}" for a in "abcde" for b in "abcde")
    monkeypatch.setattr(selector_module, "words_for", lambda locale, category: pool)

    words = WordSelector(rng).select(4, GenerationOptions(word_count=4))

    assert len(words) == 4
    assert len(set(words)) == 4
    assert set(words) <= set(pool)
