import pytest

from passphrase.analyzers.complexity import (
    FEEDBACK_EMPTY,
    FEEDBACK_INVALID,
    FEEDBACK_LONG,
    FEEDBACK_LOW_VARIETY,
    FEEDBACK_MULTIPLE_WORDS,
    FEEDBACK_ONE_CLASS,
    FEEDBACK_PLAIN_WORDS,
    FEEDBACK_SHORT,
    ComplexityScorer,
    score_password,
)
from passphrase.core.models import StrengthLevel


@pytest.fixture
def scorer():
    return ComplexityScorer()


def test_empty_password(scorer):
    report = scorer.analyze("")

    assert report.score == 0
    assert report.level is StrengthLevel.WEAK
    assert report.feedback == [FEEDBACK_EMPTY]


@pytest.mark.parametrize("value", [None, 123, b"river-stone", ["river"]])
def test_non_string_input_never_raises(scorer, value):
    report = scorer.analyze(value)

    assert report.score == 0
    assert report.level is StrengthLevel.WEAK
    assert report.feedback == [FEEDBACK_INVALID]


def test_scoring_is_deterministic(scorer):
    password = "Gar7den-Plan@et-Breeze"

    assert scorer.analyze(password) == scorer.analyze(password)


def test_plain_dictionary_words_score_low(scorer):
    report = scorer.analyze("river-forest-stone")

    assert report.level in (StrengthLevel.WEAK, StrengthLevel.FAIR)
    assert report.score == pytest.approx(24.34, abs=0.01)
    assert report.variety == 1
    assert report.word_count == 3
    for message in (
        FEEDBACK_ONE_CLASS,
        FEEDBACK_PLAIN_WORDS,
        FEEDBACK_LOW_VARIETY,
        FEEDBACK_MULTIPLE_WORDS,
    ):
        assert message in report.feedback


def test_decorated_two_word_password_scores_strong(scorer):
    report = scorer.analyze("H=el6icopter-Freedom")

    assert 60 <= report.score < 100
    assert report.score == pytest.approx(70.29, abs=0.01)
    assert report.level is StrengthLevel.STRONG
    assert report.variety == 4
    assert report.length == 20
    assert FEEDBACK_LONG in report.feedback


def test_short_password_is_penalised(scorer):
    report = scorer.analyze("abc")

    assert report.score == 0
    assert FEEDBACK_SHORT in report.feedback


def test_only_hyphens(scorer):
    report = scorer.analyze("--")

    assert report.entropy == 0
    assert report.score == 0
    assert report.level is StrengthLevel.WEAK


@pytest.mark.parametrize(
    "password",
    ["a", "Tr0ub4dor&3", "correct-horse-battery-staple", "A1!" * 40, "ñandú-árbol"],
)
def test_score_is_clamped_and_feedback_distinct(scorer, password):
    report = scorer.analyze(password)

    assert 0 <= report.score <= 100
    assert len(report.feedback) == len(set(report.feedback))


@pytest.mark.parametrize(
    "score, level",
    [
        (0, StrengthLevel.WEAK),
        (19.99, StrengthLevel.WEAK),
        (20, StrengthLevel.FAIR),
        (39.99, StrengthLevel.FAIR),
        (40, StrengthLevel.GOOD),
        (60, StrengthLevel.STRONG),
        (79.99, StrengthLevel.STRONG),
        (80, StrengthLevel.EXCELLENT),
        (100, StrengthLevel.EXCELLENT),
    ],
)
def test_level_table(score, level):
    assert ComplexityScorer.level_for(score) is level


@pytest.mark.parametrize(
    "entropy, expected",
    [
        (0, 0),
        (14, 10),
        (28, 20),
        (40, 40),
        (50, 50),
        (60, 60),
        (128, 80),
        (256, 100),
        (400, 100),
    ],
)
def test_entropy_curve(entropy, expected):
    assert ComplexityScorer.entropy_to_score(entropy) == pytest.approx(expected)


def test_entropy_ignores_hyphens():
    assert ComplexityScorer.calculate_entropy("ab-cd") == ComplexityScorer.calculate_entropy("abcd")


def test_module_shortcut_matches_scorer(scorer):
    assert score_password("Gar7den-Planet") == scorer.analyze("Gar7den-Planet")
