"""
Password History
=================

In-memory, newest-first list of accepted passwords kept by the caller
(the CLI here, a UI elsewhere). The generator core never touches it.
The list is capped; adding past the cap drops the oldest entry.
"""

from __future__ import annotations

from passphrase.core.models import GenerationOptions, HistoryEntry, HistoryExport

DEFAULT_HISTORY_LIMIT = 50


class PasswordHistory:
    """Capped, newest-first history of generated passwords.

    Usage::

        history = PasswordHistory(limit=50)
        history.add(password, options)
        payload = history.export().model_dump(mode="json", by_alias=True)
    """

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        if limit < 1:
            raise ValueError(f"history limit must be positive, got {limit}")
        self._limit = limit
        self._entries: list[HistoryEntry] = []

    def add(self, password: str, options: GenerationOptions) -> HistoryEntry:
        entry = HistoryEntry(password=password, options=options)
        self._entries = [entry, *self._entries][: self._limit]
        return entry

    def clear(self) -> None:
        self._entries = []

    @property
    def entries(self) -> list[HistoryEntry]:
        return list(self._entries)

    @property
    def limit(self) -> int:
        return self._limit

    def export(self) -> HistoryExport:
        return HistoryExport(passwords=self.entries)

    def __len__(self) -> int:
        return len(self._entries)
