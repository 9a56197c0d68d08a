"""
Passphrase Core Data Models
============================

Pydantic models for the passphrase generator and complexity scorer:
generation options, strength reports, caller-side history entries and
the random-source uniformity result.

Options accept both snake_case and camelCase keys so that a UI-shaped
plain options structure (``{"wordCount": 4, ...}``) validates directly.
History entries and exports serialise with camelCase keys, the shape
the original front end used for its JSON export.
"""

from __future__ import annotations

import enum
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class WordCategory(str, enum.Enum):
    """Word list a passphrase draws from. ``mixed`` is the union of the rest."""

    MIXED = "mixed"
    COMMON = "common"
    NATURE = "nature"
    TECHNOLOGY = "technology"
    ABSTRACT = "abstract"


class StrengthLevel(str, enum.Enum):
    """Discrete strength band derived from the 0-100 score.

    Bands: weak [0,20), fair [20,40), good [40,60), strong [60,80),
    excellent [80,100].
    """

    WEAK = "weak"
    FAIR = "fair"
    GOOD = "good"
    STRONG = "strong"
    EXCELLENT = "excellent"


# ===================================================================== #
#  Generation Options
# ===================================================================== #


class GenerationOptions(BaseModel):
    """Immutable options for a single generate or re-derive call.

    Attributes:
        word_count: Number of words, 2-6 inclusive.
        include_capitals: Upper-case the first letter of every word.
        include_numbers: Inject digits into a density-chosen subset of words.
        include_specials: Inject symbols into a density-chosen subset of words.
        word_category: Catalog category to draw from.
        min_word_length: Shortest acceptable word, 4-15.
        max_word_length: Longest acceptable word, 4-15, >= min_word_length.
        character_density: Fraction of words eligible for injection, 0.2-1.0.
        avoid_similar_words: Reject words similar to already-chosen ones.
        locale: Catalog locale.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    word_count: int = Field(default=3, ge=2, le=6)
    include_capitals: bool = True
    include_numbers: bool = True
    include_specials: bool = False
    word_category: WordCategory = WordCategory.MIXED
    min_word_length: int = Field(default=5, ge=4, le=15)
    max_word_length: int = Field(default=12, ge=4, le=15)
    character_density: float = Field(default=0.7, ge=0.2, le=1.0)
    avoid_similar_words: bool = True
    locale: str = "en"

    @model_validator(mode="after")
    def _check_length_bounds(self) -> GenerationOptions:
        if self.min_word_length > self.max_word_length:
            raise ValueError(
                f"min_word_length ({self.min_word_length}) must not exceed "
                f"max_word_length ({self.max_word_length})"
            )
        return self


# ===================================================================== #
#  Complexity Report
# ===================================================================== #


class ComplexityReport(BaseModel):
    """Strength assessment of a password string.

    Attributes:
        score: Final score in [0, 100], rounded to two decimals.
        level: Strength band for the score.
        feedback: Ordered, distinct advisory strings.
        entropy: Character-class entropy estimate in bits.
        length: Total password length, separators included.
        variety: Number of character classes present (0-4).
        word_count: Number of hyphen-separated segments.
    """

    score: float = Field(default=0.0, ge=0.0, le=100.0)
    level: StrengthLevel = StrengthLevel.WEAK
    feedback: list[str] = Field(default_factory=list)
    entropy: float = 0.0
    length: int = 0
    variety: int = 0
    word_count: int = 0


# ===================================================================== #
#  History
# ===================================================================== #


class HistoryEntry(BaseModel):
    """A password accepted by the caller, with the options that made it."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    password: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    options: GenerationOptions


class HistoryExport(BaseModel):
    """JSON export shape: ``{"passwords": [...], "exportDate": "..."}``."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    passwords: list[HistoryEntry] = Field(default_factory=list)
    export_date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


# ===================================================================== #
#  Random Source Uniformity
# ===================================================================== #


class UniformityResult(BaseModel):
    """Outcome of a chi-squared uniformity check on ``SecureRandom.uniform``.

    Attributes:
        bound: Exclusive upper bound passed to ``uniform``.
        draws: Number of samples drawn.
        counts: Observed count per value ``0..bound-1``.
        chi_squared: Pearson statistic against the uniform expectation.
        p_value: Upper-tail probability of the statistic.
        significance: Rejection threshold for the p-value.
        passed: ``p_value >= significance`` and no out-of-range draws.
        out_of_range: Draws that fell outside ``[0, bound)``.
        cryptographic: Whether the cryptographic path produced the draws.
    """

    bound: int
    draws: int
    counts: list[int] = Field(default_factory=list)
    chi_squared: float = 0.0
    p_value: float = Field(default=1.0, ge=0.0, le=1.0)
    significance: float = 0.001
    passed: bool = False
    out_of_range: int = 0
    cryptographic: bool = True
