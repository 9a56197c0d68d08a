"""
PhraseCore Passphrase -- Generator & Strength Scorer
=====================================================

Builds memorable passphrases from curated word lists, decorates them
with capitals, digits and symbols drawn from a cryptographic random
source, and scores the result on a 0-100 scale.

Modules:
    - passphrase.core.engine: Generation and scoring facade
    - passphrase.core.models: Pydantic data models
    - passphrase.generators: Random source, catalog, selection, decoration
    - passphrase.analyzers: Complexity scorer and random-source check
    - passphrase.history: Caller-side capped password history
    - passphrase.output: Console and report output
    - passphrase.cli: Click-based command-line interface

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
    - Knuth, D. E. (1997). The Art of Computer Programming, Volume 2.
"""

__version__ = "1.0.0"
__tool_name__ = "passphrase"
