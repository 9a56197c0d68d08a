"""
Passphrase Output Module
=========================

Console display and report generation for passphrase results.
"""

from passphrase.output.console import PassphraseConsoleOutput
from passphrase.output.report import HistoryReportGenerator

__all__ = [
    "PassphraseConsoleOutput",
    "HistoryReportGenerator",
]
