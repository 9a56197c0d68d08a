"""
PhraseCore Structured Logger
=============================

:class:`PhraseLogger` binds a component name and an optional operation
name to every record, writes coloured output to stderr through Rich and,
when a log file is configured, rotating plain-text or JSON-lines records.

Passphrases are secrets. Components log counts, option summaries and
flags only; as a backstop, structured fields named like a password are
masked before any handler sees them.

References:
    - Python logging cookbook, "Adding contextual information".
      https://docs.python.org/3/howto/logging-cookbook.html
    - Rich logging handler. https://rich.readthedocs.io/en/latest/logging.html
"""

from __future__ import annotations

import contextlib
import json
import logging
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator, MutableMapping

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_STDERR_THEME = Theme(
    {
        "log.level.debug": "dim cyan",
        "log.level.info": "bright_blue",
        "log.level.warning": "bold yellow",
        "log.level.error": "bold red",
    }
)

_LOGGER_PREFIX = "phrasecore"
_RESERVED_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel", "extra"})
_SECRET_FIELDS = frozenset({"password", "passphrase", "secret"})
_MASK = "***"


# ===================================================================== #
#  Formatting & filtering
# ===================================================================== #


class _JSONLinesFormatter(logging.Formatter):
    """One JSON object per record::

        {"ts": "...", "level": "DEBUG", "component": "engine",
         "operation": "generate", "message": "...", "fields": {...}}
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "component": getattr(record, "component", record.name),
            "operation": getattr(record, "operation", None),
            "message": record.getMessage(),
        }
        fields = getattr(record, "fields", None)
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


class _SecretMaskFilter(logging.Filter):
    """Masks structured fields whose name marks them as a secret."""

    def filter(self, record: logging.LogRecord) -> bool:
        fields = getattr(record, "fields", None)
        if fields:
            record.fields = {
                key: (_MASK if key.lower() in _SECRET_FIELDS else value)
                for key, value in fields.items()
            }
        return True


def _stderr_handler(level: int) -> logging.Handler:
    handler = RichHandler(
        console=Console(theme=_STDERR_THEME, stderr=True),
        level=level,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("[%(component)s] %(message)s"))
    return handler


def _file_handler(
    path: Path, level: int, json_lines: bool, max_bytes: int, backups: int
) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path, maxBytes=max_bytes, backupCount=backups, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(
        _JSONLinesFormatter()
        if json_lines
        else logging.Formatter(
            "%(asctime)s %(levelname)-7s %(component)s/%(operation)s: %(message)s"
        )
    )
    return handler


# ===================================================================== #
#  PhraseLogger
# ===================================================================== #


class PhraseLogger(logging.LoggerAdapter):
    """Component logger carrying a component and operation name.

    Keyword arguments other than the stdlib ones travel as structured
    ``fields`` on the record and appear in JSON-lines output.

    Usage::

        log = PhraseLogger("engine", log_file="phrasecore.log", json_logs=True)
        with log.operation("generate"):
            log.debug("Selected %d words", 4, category="nature")

    Args:
        tool_name:       Component name; the stdlib logger is ``phrasecore.<name>``.
        log_level:       Minimum severity name (DEBUG .. CRITICAL).
        log_file:        Rotating log file. ``None`` or ``""`` disables it.
        json_logs:       Write JSON lines instead of plain text to the file.
        max_bytes:       File size that triggers rotation.
        backup_count:    Rotated files kept.
        console_output:  Attach the Rich stderr handler.
    """

    def __init__(
        self,
        tool_name: str,
        *,
        log_level: str = "INFO",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        max_bytes: int = 5_242_880,
        backup_count: int = 3,
        console_output: bool = True,
    ) -> None:
        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            level = logging.INFO

        logger = logging.getLogger(f"{_LOGGER_PREFIX}.{tool_name}")
        logger.setLevel(level)
        logger.propagate = False
        # Rebuilding a component logger replaces its handlers
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        for flt in list(logger.filters):
            logger.removeFilter(flt)
        logger.addFilter(_SecretMaskFilter())

        if console_output:
            logger.addHandler(_stderr_handler(level))
        if log_file:
            logger.addHandler(
                _file_handler(Path(log_file), level, json_logs, max_bytes, backup_count)
            )

        super().__init__(logger, {"component": tool_name, "operation": None})

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        fields = {k: kwargs.pop(k) for k in list(kwargs) if k not in _RESERVED_KWARGS}
        extra = dict(kwargs.get("extra") or {})
        extra.update(self.extra)
        extra["fields"] = fields
        kwargs["extra"] = extra
        return msg, kwargs

    @contextlib.contextmanager
    def operation(self, name: str) -> Iterator[PhraseLogger]:
        """Tag records emitted inside the block with operation *name*."""
        previous = self.extra["operation"]
        self.extra["operation"] = name
        try:
            yield self
        finally:
            self.extra["operation"] = previous

    @property
    def tool_name(self) -> str:
        return self.extra["component"]
