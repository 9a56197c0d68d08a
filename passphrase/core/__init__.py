"""
Passphrase Core Module
=======================

Data models and exceptions of the passphrase generator. The engine
facade lives in :mod:`passphrase.core.engine`.
"""

from passphrase.core.errors import (
    InsecureRandomSource,
    InsufficientWordPool,
    InvalidOptions,
    InvalidPassword,
    PassphraseError,
)
from passphrase.core.models import (
    ComplexityReport,
    GenerationOptions,
    HistoryEntry,
    HistoryExport,
    StrengthLevel,
    UniformityResult,
    WordCategory,
)

__all__ = [
    "InsecureRandomSource",
    "InsufficientWordPool",
    "InvalidOptions",
    "InvalidPassword",
    "PassphraseError",
    "ComplexityReport",
    "GenerationOptions",
    "HistoryEntry",
    "HistoryExport",
    "StrengthLevel",
    "UniformityResult",
    "WordCategory",
]
