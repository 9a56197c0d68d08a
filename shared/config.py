"""
PhraseCore Configuration Management
====================================

Centralized configuration for the PhraseCore toolkit using Python
dataclasses and TOML-based persistence.

Configuration is kept separate from code: generator defaults, logging
and analysis parameters all live in one ``config.toml`` whose sections
map one-to-one onto the dataclasses below.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


# ---------------------------------------------------------------------------
# Default configuration file path relative to the PhraseCore root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"

# GeneratorConfig keys that are not generation options
_CALLER_KEYS = ("history_limit", "require_cryptographic_rng")


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class GeneratorConfig:
    """Configuration for the passphrase generator.

    Holds the default generation options used when a caller does not
    pass any, the capacity of the caller-side history list, and whether
    a missing cryptographic random source is a hard error.
    """

    # Default generation options
    word_count: int = 3
    include_capitals: bool = True
    include_numbers: bool = True
    include_specials: bool = False
    word_category: str = "mixed"
    min_word_length: int = 5
    max_word_length: int = 12
    character_density: float = 0.7
    avoid_similar_words: bool = True
    locale: str = "en"

    # Caller-side behaviour
    history_limit: int = 50
    require_cryptographic_rng: bool = False

    def option_defaults(self) -> dict[str, Any]:
        """Return the generation option defaults as a plain mapping."""
        values = asdict(self)
        for key in _CALLER_KEYS:
            del values[key]
        return values


@dataclass(frozen=False, slots=True)
class AnalysisConfig:
    """Configuration for the random-source uniformity check.

    Reference:
        Pearson, K. (1900). On the criterion that a given system of
        deviations from the probable ... Philosophical Magazine, 50(302).
    """

    uniformity_bound: int = 10
    uniformity_draws: int = 100_000
    uniformity_significance: float = 0.001


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings shared across all PhraseCore modules."""

    log_level: str = "INFO"
    log_file: str = ""
    log_json: bool = False
    debug: bool = False


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class PhraseConfig:
    """Master configuration aggregating all settings.

    Usage:
        >>> config = PhraseConfig.load()                  # from default path
        >>> config = PhraseConfig.load("custom.toml")     # from custom path
        >>> print(config.generator.word_count)
        3
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> PhraseConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`PhraseConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            generator=cls._build_section(GeneratorConfig, raw.get("generator", {})),
            analysis=cls._build_section(AnalysisConfig, raw.get("analysis", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are ignored so that
        forward-compatible config files do not break older code.
        """
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> PhraseConfig:
    """Module-level convenience wrapper around :meth:`PhraseConfig.load`.

    Caches the result so that repeated imports share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = PhraseConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
