"""
PhraseCore Console Interface
=============================

Thin wrapper around a themed :class:`rich.console.Console` so every
command presents itself the same way: a one-panel banner, section rules,
tagged one-line notices and bordered tables.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme

_THEME = Theme(
    {
        "phrase.title": "bold bright_cyan",
        "phrase.section": "bold bright_magenta",
        "phrase.ok": "bold green",
        "phrase.warn": "bold yellow",
        "phrase.fail": "bold red",
        "phrase.note": "bold bright_blue",
        "phrase.dim": "dim white",
    }
)

# notice kind -> (style, tag)
_NOTICES: dict[str, tuple[str, str]] = {
    "success": ("phrase.ok", "OK"),
    "warning": ("phrase.warn", "WARN"),
    "error": ("phrase.fail", "ERROR"),
    "info": ("phrase.note", "INFO"),
}

_TAGLINE = "passphrase generator & strength scorer"


class PhraseConsole:
    """Unified console interface for PhraseCore commands.

    Usage::

        con = PhraseConsole()
        con.banner("1.0.0")
        con.section("Generated Passphrase")
        con.success("History exported")

    Args:
        quiet:  Suppress all output (library / test mode).
        record: Keep rendered output for :meth:`rich.console.Console.export_text`.
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        self._console = Console(theme=_THEME, quiet=quiet, record=record, highlight=False)

    @property
    def rich(self) -> Console:
        return self._console

    def banner(self, version: str) -> None:
        self._console.print(
            Panel.fit(
                f"[phrase.title]PhraseCore[/phrase.title] [phrase.dim]v{version}[/phrase.dim]\n"
                f"[phrase.dim]{_TAGLINE}[/phrase.dim]",
                border_style="bright_cyan",
            )
        )

    def section(self, title: str) -> None:
        self._console.rule(f"[phrase.section]{title}[/phrase.section]", style="bright_magenta")

    # ------------------------------------------------------------------ #
    #  Notices
    # ------------------------------------------------------------------ #

    def _notice(self, kind: str, message: str) -> None:
        style, tag = _NOTICES[kind]
        self._console.print(f"[{style}]{tag:>5}[/{style}] {escape(message)}")

    def success(self, message: str) -> None:
        self._notice("success", message)

    def warning(self, message: str) -> None:
        self._notice("warning", message)

    def error(self, message: str) -> None:
        self._notice("error", message)

    def info(self, message: str) -> None:
        self._notice("info", message)

    # ------------------------------------------------------------------ #
    #  Tables
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        styles: Sequence[str] = (),
    ) -> None:
        """Render *rows* under *columns*; cells are stringified."""
        tbl = Table(title=title, border_style="bright_cyan", header_style="bold bright_magenta")
        for idx, name in enumerate(columns):
            tbl.add_column(name, style=styles[idx] if idx < len(styles) else "")
        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))
        self._console.print(tbl)

    def print(self, *args: Any, **kwargs: Any) -> None:
        self._console.print(*args, **kwargs)
