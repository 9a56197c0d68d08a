"""
Passphrase Generators
======================

The generation pipeline: a secure random source, the word catalog,
word selection, word decoration and final assembly.
"""

from passphrase.generators.assembler import PasswordAssembler
from passphrase.generators.random_source import SecureRandom
from passphrase.generators.selector import WordSelector
from passphrase.generators.transformer import WordTransformer

__all__ = [
    "PasswordAssembler",
    "SecureRandom",
    "WordSelector",
    "WordTransformer",
]
