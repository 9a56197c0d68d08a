"""
PhraseCore Shared Module
========================

Configuration, logging, console and statistics helpers shared by the
PhraseCore passphrase toolkit.
"""

from shared.config import PhraseConfig, get_config

__all__ = ["PhraseConfig", "get_config"]
