"""
Passphrase Engine
==================

Facade over the generator pipeline and the complexity scorer. Callers
hold options, call :meth:`PassphraseEngine.generate` or
:meth:`PassphraseEngine.rederive` when they change, and score the result
with :meth:`PassphraseEngine.score`.

All calls are synchronous and independent; the engine keeps no state
between them beyond its configured collaborators.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from shared.config import PhraseConfig
from shared.logger import PhraseLogger

from passphrase.analyzers.complexity import ComplexityScorer
from passphrase.core.errors import InvalidOptions
from passphrase.core.models import ComplexityReport, GenerationOptions
from passphrase.generators.assembler import PasswordAssembler
from passphrase.generators.catalog import available_locales
from passphrase.generators.random_source import SecureRandom
from passphrase.generators.selector import WordSelector
from passphrase.generators.transformer import WordTransformer

OptionsInput = Union[GenerationOptions, Mapping[str, Any], None]


class PassphraseEngine:
    """Generates, re-derives and scores passphrases.

    Usage::

        engine = PassphraseEngine()
        password = engine.generate({"wordCount": 4, "includeSpecials": True})
        report = engine.score(password)
        password = engine.rederive(password, {"include_numbers": False})

    Attributes:
        config: PhraseCore configuration instance.
        logger: Logger for the engine.
        rng: Random source shared by selection and transformation.
    """

    def __init__(
        self,
        config: Optional[PhraseConfig] = None,
        rng: Optional[SecureRandom] = None,
    ) -> None:
        self.config = config or PhraseConfig()
        self.logger = self._component_logger("engine")

        self.rng = rng or SecureRandom(
            require_cryptographic=self.config.generator.require_cryptographic_rng,
            logger=self._component_logger("random"),
        )
        self._selector = WordSelector(self.rng)
        self._transformer = WordTransformer(self.rng)
        self._assembler = PasswordAssembler(self._selector, self._transformer)
        self._scorer = ComplexityScorer()

    def _component_logger(self, name: str) -> PhraseLogger:
        settings = self.config.global_settings
        return PhraseLogger(
            name,
            log_level="DEBUG" if settings.debug else settings.log_level,
            log_file=settings.log_file or None,
            json_logs=settings.log_json,
        )

    @property
    def is_cryptographic(self) -> bool:
        """Whether the underlying random source is cryptographic."""
        return self.rng.is_cryptographic

    # ------------------------------------------------------------------ #
    #  Options
    # ------------------------------------------------------------------ #

    def resolve_options(self, options: OptionsInput = None) -> GenerationOptions:
        """Validate *options*, filling gaps from the configured defaults.

        Accepts a :class:`GenerationOptions`, a mapping with snake_case or
        camelCase keys, or ``None``.

        Raises:
            InvalidOptions: On any out-of-domain value or unknown locale.
        """
        if isinstance(options, GenerationOptions):
            # model_copy(update=...) skips validation, so instances are re-checked
            raw: dict[str, Any] = options.model_dump()
        else:
            raw = self.config.generator.option_defaults()
            if options is not None:
                supplied = dict(options)
                # A camelCase key overrides the snake_case default it aliases
                for key in supplied:
                    field_name = _field_for_alias(key)
                    if field_name is not None and field_name != key:
                        raw.pop(field_name, None)
                raw.update(supplied)
        try:
            resolved = GenerationOptions.model_validate(raw)
        except ValidationError as exc:
            raise InvalidOptions(_describe_validation_error(exc)) from exc

        if resolved.locale not in available_locales():
            raise InvalidOptions(
                f"Unknown locale {resolved.locale!r}; available: "
                f"{', '.join(available_locales())}"
            )
        return resolved

    # ------------------------------------------------------------------ #
    #  Operations
    # ------------------------------------------------------------------ #

    def generate(self, options: OptionsInput = None) -> str:
        """Select, decorate and join a fresh passphrase.

        Raises:
            InvalidOptions: Options are out of domain.
            InsufficientWordPool: The filtered catalog is too small.
        """
        opts = self.resolve_options(options)
        with self.logger.operation("generate"):
            password = self._assembler.generate(opts)
            self.logger.debug(
                "Generated %d-word passphrase",
                opts.word_count,
                category=opts.word_category.value,
                locale=opts.locale,
                length=len(password),
                cryptographic=self.rng.is_cryptographic,
            )
        return password

    def rederive(self, password: str, options: OptionsInput = None) -> str:
        """Re-decorate the words of *password* under new *options*.

        Raises:
            InvalidOptions: Options are out of domain.
            InvalidPassword: *password* has no recoverable words.
        """
        opts = self.resolve_options(options)
        with self.logger.operation("rederive"):
            updated = self._assembler.rederive(password, opts)
            self.logger.debug(
                "Re-derived passphrase",
                words=updated.count("-") + 1,
                capitals=opts.include_capitals,
                numbers=opts.include_numbers,
                specials=opts.include_specials,
            )
        return updated

    def score(self, password: Any) -> ComplexityReport:
        """Score *password*; never raises."""
        return self._scorer.analyze(password)


# ===================================================================== #
#  Helpers
# ===================================================================== #


def _field_for_alias(key: str) -> Optional[str]:
    for name, info in GenerationOptions.model_fields.items():
        if key in (name, info.alias):
            return name
    return None


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(loc) for loc in error["loc"]) or "options"
        parts.append(f"{location}: {error['msg']}")
    return "Invalid generation options: " + "; ".join(parts)


# ===================================================================== #
#  Module-level convenience
# ===================================================================== #


def get_engine() -> PassphraseEngine:
    """Return a cached engine built from :func:`shared.config.get_config`."""
    if not hasattr(get_engine, "_cached"):
        from shared.config import get_config

        get_engine._cached = PassphraseEngine(get_config())  # type: ignore[attr-defined]
    return get_engine._cached  # type: ignore[attr-defined]


def generate(options: OptionsInput = None) -> str:
    return get_engine().generate(options)


def rederive(password: str, options: OptionsInput = None) -> str:
    return get_engine().rederive(password, options)


def score(password: Any) -> ComplexityReport:
    return get_engine().score(password)
