import json

import pytest

from passphrase.core import engine as engine_module
from passphrase.core.engine import PassphraseEngine
from passphrase.core.errors import InvalidOptions, InvalidPassword
from passphrase.core.models import GenerationOptions, StrengthLevel, WordCategory
from passphrase.generators.assembler import base_words, split_password
from passphrase.generators.catalog import words_for
from passphrase.generators.random_source import SecureRandom
from shared.config import PhraseConfig


@pytest.mark.parametrize("word_count", [0, 1, 7, 10])
def test_word_count_out_of_range_fails_before_any_draw(scripted_bytes, word_count):
    source = scripted_bytes([])
    engine = PassphraseEngine(PhraseConfig(), rng=SecureRandom(source))

    with pytest.raises(InvalidOptions):
        engine.generate({"word_count": word_count})

    assert source.draws == 0


@pytest.mark.parametrize(
    "options",
    [
        {"min_word_length": 10, "max_word_length": 6},
        {"min_word_length": 3},
        {"max_word_length": 16},
        {"character_density": 0.1},
        {"character_density": 1.5},
        {"word_category": "food"},
        {"locale": "fr"},
        {"unknown": True},
    ],
)
def test_invalid_options_are_rejected(engine, options):
    with pytest.raises(InvalidOptions):
        engine.generate(options)


def test_invalid_options_is_a_value_error(engine):
    with pytest.raises(ValueError):
        engine.resolve_options({"wordCount": 9})


def test_camel_case_keys_are_accepted(engine):
    options = engine.resolve_options({
        "wordCount": 4,
        "includeSpecials": True,
        "wordCategory": "nature",
        "characterDensity": 1.0,
    })

    assert options.word_count == 4
    assert options.include_specials is True
    assert options.word_category is WordCategory.NATURE
    assert options.character_density == 1.0
    assert options.include_capitals is True


def test_configured_defaults_fill_missing_options():
    config = PhraseConfig()
    config.generator.word_count = 5
    config.generator.include_specials = True
    engine = PassphraseEngine(config)

    assert engine.resolve_options(None).word_count == 5
    assert engine.resolve_options({"include_numbers": False}).include_specials is True
    assert engine.resolve_options({"wordCount": 2}).word_count == 2


def test_options_model_is_revalidated(engine):
    options = GenerationOptions(word_count=6)

    assert engine.resolve_options(options) == options


def test_unvalidated_model_copy_fails_before_any_draw(scripted_bytes):
    source = scripted_bytes([])
    engine = PassphraseEngine(PhraseConfig(), rng=SecureRandom(source))
    options = GenerationOptions().model_copy(
        update={"word_count": 10, "character_density": -1.0})

    with pytest.raises(InvalidOptions):
        engine.generate(options)
    with pytest.raises(InvalidOptions):
        engine.rederive("River-Stone", options)

    assert source.draws == 0


def test_random_source_logs_to_configured_file(tmp_path, monkeypatch):
    path = tmp_path / "phrasecore.jsonl"
    config = PhraseConfig()
    config.global_settings.log_file = str(path)
    config.global_settings.log_json = True
    monkeypatch.setattr(SecureRandom, "_usable_source", staticmethod(lambda source: None))

    engine = PassphraseEngine(config)

    assert not engine.is_cryptographic
    records = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert any(
        r["component"] == "random" and r["level"] == "WARNING" for r in records
    )


def test_generate_and_score(engine):
    password = engine.generate({"word_count": 4, "include_specials": True})
    report = engine.score(password)

    assert len(split_password(password)) == 4
    assert report.word_count == 4
    assert report.length == len(password)
    assert 0 <= report.score <= 100


def test_generate_spanish_words(engine):
    password = engine.generate({"locale": "es", "word_category": "nature"})
    catalog = set(words_for("es", WordCategory.NATURE))

    assert all(word in catalog for word in base_words(password))


def test_rederive_through_engine(engine):
    password = engine.generate(None)
    updated = engine.rederive(password, {"include_numbers": False, "include_capitals": False})

    assert updated == "-".join(base_words(password))


def test_rederive_empty_password(engine):
    with pytest.raises(InvalidPassword):
        engine.rederive("", None)


def test_score_never_raises(engine):
    assert engine.score(None).level is StrengthLevel.WEAK


def test_module_level_helpers(monkeypatch):
    monkeypatch.delattr(engine_module.get_engine, "_cached", raising=False)

    password = engine_module.generate({"wordCount": 3})
    assert len(split_password(password)) == 3
    assert base_words(engine_module.rederive(password, None)) == base_words(password)
    assert engine_module.score("").score == 0
    assert engine_module.get_engine() is engine_module.get_engine()
