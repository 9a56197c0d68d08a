"""
Passphrase Analyzers
=====================

Password complexity scoring and the statistical check of the random
source.
"""

from passphrase.analyzers.complexity import ComplexityScorer
from passphrase.analyzers.uniformity import UniformityTester

__all__ = [
    "ComplexityScorer",
    "UniformityTester",
]
