"""
Complexity Scorer
==================

Scores dictionary-structured passwords (hyphen-joined words with
injected digits and symbols) on a 0-100 scale.

Pipeline:
    1. Character-class entropy: hyphens removed, alphabet size is the sum
       of the classes present (lowercase 26, uppercase 26, digits 10,
       other 32), entropy = length * log2(alphabet).
    2. Piecewise-linear mapping of entropy to a base score through the
       breakpoints 28/40/60/128/256 bits -> 20/40/60/80/100.
    3. Variety: number of classes among lower, upper, digit and
       symbol-other-than-hyphen.
    4. Dictionary adjustment for two or more segments: x0.3 when there
       are neither digits nor symbols, x0.7 otherwise; -5 when variety is
       below 3; +5 for each word beyond the first.
    5. Length adjustment: -20 below 8 characters, +10 from 20 characters.
    6. Clamp to [0, 100].

The entropy figure treats the password as random characters, which
overstates natural-language words; step 4 is there to pull such
passwords back down. It is a coarse brute-force proxy, not a
cryptographic guarantee.

Reference:
    - NIST SP 800-63B (2017). Digital Identity Guidelines, Appendix A.
"""

from __future__ import annotations

import math
from typing import Any

from passphrase.core.models import ComplexityReport, StrengthLevel

# (entropy bits, score) breakpoints of the piecewise-linear curve
_ENTROPY_BREAKPOINTS: tuple[tuple[float, float], ...] = (
    (0.0, 0.0),
    (28.0, 20.0),
    (40.0, 40.0),
    (60.0, 60.0),
    (128.0, 80.0),
    (256.0, 100.0),
)

# (lower score bound, level), highest first
_LEVEL_THRESHOLDS: tuple[tuple[float, StrengthLevel], ...] = (
    (80.0, StrengthLevel.EXCELLENT),
    (60.0, StrengthLevel.STRONG),
    (40.0, StrengthLevel.GOOD),
    (20.0, StrengthLevel.FAIR),
    (0.0, StrengthLevel.WEAK),
)

LOWERCASE_POOL = 26
UPPERCASE_POOL = 26
DIGIT_POOL = 10
SYMBOL_POOL = 32

MINIMUM_LENGTH = 8
LONG_PASSWORD_LENGTH = 20
STRICT_DICTIONARY_FACTOR = 0.3
DEFAULT_DICTIONARY_FACTOR = 0.7
DICTIONARY_VARIETY_PENALTY = 5.0
WORD_BONUS = 5.0
SHORT_PENALTY = 20.0
LENGTH_BONUS = 10.0

FEEDBACK_INVALID = "Invalid input: password must be a string"
FEEDBACK_EMPTY = "Password cannot be empty"
FEEDBACK_ONE_CLASS = (
    "Include uppercase letters, numbers, or symbols (beyond hyphens) "
    "to enhance security"
)
FEEDBACK_TWO_CLASSES = (
    "Add another character type (e.g., numbers or symbols beyond hyphens) "
    "for stronger security"
)
FEEDBACK_ADD_NUMBERS = "Incorporate numbers to further strengthen your password"
FEEDBACK_ADD_SYMBOLS = (
    "Incorporate symbols (beyond hyphens) to further strengthen your password"
)
FEEDBACK_PLAIN_WORDS = (
    "Plain dictionary words are easy to guess; mix in numbers or symbols"
)
FEEDBACK_LOW_VARIETY = (
    "Add more words or increase character density to strengthen your password"
)
FEEDBACK_MULTIPLE_WORDS = "Multiple words add complexity"
FEEDBACK_SHORT = f"Use at least {MINIMUM_LENGTH} characters for better security"
FEEDBACK_LONG = "Long password length adds strength"


class ComplexityScorer:
    """Pure password-strength scorer for hyphen-joined passphrases.

    Usage::

        scorer = ComplexityScorer()
        report = scorer.analyze("H=el6icopter-Freedom")
        print(report.score, report.level.value)

    ``analyze`` never raises: non-string or empty input yields score 0,
    level ``weak`` and an explanatory feedback line.
    """

    def analyze(self, password: Any) -> ComplexityReport:
        if not isinstance(password, str):
            return ComplexityReport(feedback=[FEEDBACK_INVALID])
        if not password:
            return ComplexityReport(feedback=[FEEDBACK_EMPTY])

        entropy = self.calculate_entropy(password)
        base_score = self.entropy_to_score(entropy)
        checks = self._character_checks(password)
        variety = sum(checks.values())
        word_count = len(password.split("-"))
        is_dictionary = word_count >= 2

        feedback = self._variety_feedback(variety, checks, is_dictionary)
        score, adjustment_feedback = self._apply_adjustments(
            password, base_score, variety, checks, word_count
        )
        feedback.extend(adjustment_feedback)

        score = round(max(0.0, min(100.0, score)), 2)
        return ComplexityReport(
            score=score,
            level=self.level_for(score),
            feedback=list(dict.fromkeys(msg.strip() for msg in feedback if msg.strip())),
            entropy=round(entropy, 2),
            length=len(password),
            variety=variety,
            word_count=word_count,
        )

    # ------------------------------------------------------------------ #
    #  Entropy
    # ------------------------------------------------------------------ #

    @staticmethod
    def calculate_entropy(password: str) -> float:
        """Character-class entropy in bits, hyphens excluded.

        Returns 0.0 when no character class is present.
        """
        cleaned = password.replace("-", "")
        pool = 0
        if any("a" <= c <= "z" for c in cleaned):
            pool += LOWERCASE_POOL
        if any("A" <= c <= "Z" for c in cleaned):
            pool += UPPERCASE_POOL
        if any("0" <= c <= "9" for c in cleaned):
            pool += DIGIT_POOL
        if any(not _is_ascii_alnum(c) for c in cleaned):
            pool += SYMBOL_POOL

        if pool == 0:
            return 0.0
        return len(cleaned) * math.log2(pool)

    @staticmethod
    def entropy_to_score(entropy: float) -> float:
        """Interpolate *entropy* along the breakpoint curve to 0-100."""
        if entropy <= 0:
            return 0.0
        for (lo_bits, lo_score), (hi_bits, hi_score) in zip(
            _ENTROPY_BREAKPOINTS, _ENTROPY_BREAKPOINTS[1:]
        ):
            if entropy < hi_bits:
                fraction = (entropy - lo_bits) / (hi_bits - lo_bits)
                return lo_score + fraction * (hi_score - lo_score)
        return _ENTROPY_BREAKPOINTS[-1][1]

    @staticmethod
    def level_for(score: float) -> StrengthLevel:
        for threshold, level in _LEVEL_THRESHOLDS:
            if score >= threshold:
                return level
        return StrengthLevel.WEAK

    # ------------------------------------------------------------------ #
    #  Variety and adjustments
    # ------------------------------------------------------------------ #

    @staticmethod
    def _character_checks(password: str) -> dict[str, bool]:
        return {
            "lowercase": any("a" <= c <= "z" for c in password),
            "uppercase": any("A" <= c <= "Z" for c in password),
            "numbers": any("0" <= c <= "9" for c in password),
            "symbols": any(c != "-" and not _is_ascii_alnum(c) for c in password),
        }

    @staticmethod
    def _variety_feedback(
        variety: int, checks: dict[str, bool], is_dictionary: bool
    ) -> list[str]:
        feedback: list[str] = []
        if variety <= 1:
            feedback.append(FEEDBACK_ONE_CLASS)
        elif variety == 2:
            feedback.append(FEEDBACK_TWO_CLASSES)
        elif variety == 3 and is_dictionary:
            if not checks["numbers"]:
                feedback.append(FEEDBACK_ADD_NUMBERS)
            if not checks["symbols"]:
                feedback.append(FEEDBACK_ADD_SYMBOLS)
        return feedback

    @staticmethod
    def _apply_adjustments(
        password: str,
        score: float,
        variety: int,
        checks: dict[str, bool],
        word_count: int,
    ) -> tuple[float, list[str]]:
        feedback: list[str] = []

        if word_count >= 2:
            if not checks["symbols"] and not checks["numbers"]:
                score *= STRICT_DICTIONARY_FACTOR
                feedback.append(FEEDBACK_PLAIN_WORDS)
            else:
                score *= DEFAULT_DICTIONARY_FACTOR

            if variety < 3:
                score -= DICTIONARY_VARIETY_PENALTY
                feedback.append(FEEDBACK_LOW_VARIETY)

            score += (word_count - 1) * WORD_BONUS
            feedback.append(FEEDBACK_MULTIPLE_WORDS)

        if len(password) < MINIMUM_LENGTH:
            score -= SHORT_PENALTY
            feedback.append(FEEDBACK_SHORT)

        if len(password) >= LONG_PASSWORD_LENGTH:
            score += LENGTH_BONUS
            feedback.append(FEEDBACK_LONG)

        return score, feedback


def _is_ascii_alnum(char: str) -> bool:
    return "a" <= char <= "z" or "A" <= char <= "Z" or "0" <= char <= "9"


def score_password(password: Any) -> ComplexityReport:
    """Module-level shortcut for :meth:`ComplexityScorer.analyze`."""
    return ComplexityScorer().analyze(password)
