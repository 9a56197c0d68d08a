"""
History Report Generator
=========================

Writes the caller-side password history as a JSON document::

    {
      "passwords": [
        {"password": "...", "timestamp": "...", "options": {"wordCount": 3, ...}},
        ...
      ],
      "exportDate": "..."
    }

Entries are newest first. Keys are camelCase so that exports stay
readable by tools that consumed the browser-side history download.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Union

from passphrase.core.models import HistoryExport
from passphrase.history import PasswordHistory


class HistoryReportGenerator:
    """Serialises password history to JSON files.

    Usage::

        reporter = HistoryReportGenerator()
        path = reporter.generate_json(history, Path("history.json"))
    """

    def generate_json(
        self,
        history: Union[PasswordHistory, HistoryExport],
        output_path: Path,
    ) -> Path:
        """Write *history* to *output_path* and return the path.

        Args:
            history: A live history (exported on the spot) or an export.
            output_path: Destination file; parent directories are created.
        """
        export = history.export() if isinstance(history, PasswordHistory) else history
        output_path = Path(output_path)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            json.dumps(
                export.model_dump(mode="json", by_alias=True),
                indent=2,
                ensure_ascii=False,
            ),
            encoding="utf-8",
        )

        return output_path
