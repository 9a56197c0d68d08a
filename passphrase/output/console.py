"""
Passphrase Console Output
==========================

Rich-based console output formatters for the passphrase generator:
the generated password panel, the strength meter with feedback, the
random-source uniformity table and the session history.

Uses the PhraseCore shared console infrastructure for consistent
styling across commands.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import PhraseConsole
from passphrase.core.models import (
    ComplexityReport,
    GenerationOptions,
    HistoryEntry,
    UniformityResult,
)


# ===================================================================== #
#  Colour Maps
# ===================================================================== #

_LEVEL_COLOURS: dict[str, str] = {
    "weak": "bold red",
    "fair": "bold yellow",
    "good": "bold bright_blue",
    "strong": "bold green",
    "excellent": "bold bright_green",
}


class PassphraseConsoleOutput:
    """Console output formatters for passphrase results.

    Usage::

        console = PhraseConsole()
        output = PassphraseConsoleOutput(console)
        output.display_password(password, options)
        output.display_report(report)
    """

    def __init__(self, console: Optional[PhraseConsole] = None) -> None:
        self.console = console or PhraseConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Password Display
    # ------------------------------------------------------------------ #

    def display_password(
        self,
        password: str,
        options: Optional[GenerationOptions] = None,
        *,
        title: str = "Generated Passphrase",
    ) -> None:
        """Show *password* in a panel, with an options summary if given."""
        self.console.section(title)
        self._rich.print(
            Panel(
                Text(password, style="bold bright_white"),
                border_style="bright_cyan",
                padding=(0, 2),
            )
        )

        if options is not None:
            flags = [
                name
                for name, enabled in (
                    ("capitals", options.include_capitals),
                    ("numbers", options.include_numbers),
                    ("symbols", options.include_specials),
                    ("avoid similar", options.avoid_similar_words),
                )
                if enabled
            ]
            self._rich.print(
                f"[phrase.dim]{options.word_count} words | "
                f"{options.word_category.value} ({options.locale}) | "
                f"length {options.min_word_length}-{options.max_word_length} | "
                f"density {options.character_density:.0%} | "
                f"{', '.join(flags) or 'plain'}[/phrase.dim]"
            )

    # ------------------------------------------------------------------ #
    #  Complexity Report Display
    # ------------------------------------------------------------------ #

    def display_report(self, report: ComplexityReport) -> None:
        """Display a complexity report with a visual 0-100 meter."""
        self.console.section("Password Strength")

        level_colour = _LEVEL_COLOURS.get(report.level.value, "white")
        level_label = report.level.value.upper()

        meter_width = 40
        filled = int((report.score / 100) * meter_width)
        filled = max(0, min(meter_width, filled))

        meter = Text()
        meter.append("Score: ", style="bold")
        meter.append(f"{report.score:.0f}/100  ")
        meter.append("[", style="dim")

        for i in range(meter_width):
            if i < filled:
                if i < meter_width * 0.25:
                    meter.append("█", style="red")
                elif i < meter_width * 0.50:
                    meter.append("█", style="yellow")
                elif i < meter_width * 0.75:
                    meter.append("█", style="green")
                else:
                    meter.append("█", style="bright_green")
            else:
                meter.append("░", style="dim")

        meter.append("]", style="dim")
        meter.append("  ")
        meter.append(level_label, style=level_colour)

        self._rich.print(Panel(meter, title="Strength Meter", border_style="cyan"))

        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Property", style="bold")
        tbl.add_column("Value")

        tbl.add_row("Length", str(report.length))
        tbl.add_row("Words", str(report.word_count))
        tbl.add_row("Character Classes", f"{report.variety}/4")
        tbl.add_row("Entropy Estimate", f"{report.entropy:.2f} bits")

        self._rich.print(tbl)

        if report.feedback:
            self._rich.print()
            self._rich.print("[bold]Feedback:[/bold]")
            for message in report.feedback:
                self._rich.print(f"  [bright_cyan]•[/bright_cyan] {message}")

    # ------------------------------------------------------------------ #
    #  Uniformity Display
    # ------------------------------------------------------------------ #

    def display_uniformity(self, result: UniformityResult) -> None:
        """Display the chi-squared check of the random source."""
        self.console.section("Random Source Uniformity")

        overall_colour = "bold bright_green" if result.passed else "bold red"
        overall_text = "PASS" if result.passed else "FAIL"

        summary = Text()
        summary.append("Overall: ", style="bold")
        summary.append(overall_text, style=overall_colour)
        summary.append(f"\nDraws: {result.draws:,} over [0, {result.bound})\n")
        summary.append(f"Chi-squared: {result.chi_squared:.4f}  ")
        summary.append(f"(df = {result.bound - 1})\n")
        summary.append(f"p-value: {result.p_value:.6f}  ")
        summary.append(f"(significance {result.significance})\n")
        summary.append(
            "Source: " + ("cryptographic" if result.cryptographic else "NON-CRYPTOGRAPHIC"),
            style="" if result.cryptographic else "bold yellow",
        )
        if result.out_of_range:
            summary.append(f"\nOut of range draws: {result.out_of_range}", style="bold red")

        self._rich.print(Panel(summary, title="Uniformity Check", border_style="cyan"))

        expected = result.draws / result.bound
        tbl = Table(
            title="Observed Counts",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=False,
        )
        tbl.add_column("Value", style="bold", justify="right")
        tbl.add_column("Count", justify="right")
        tbl.add_column("Deviation", justify="right")

        for value, count in enumerate(result.counts):
            deviation = (count - expected) / expected * 100 if expected else 0.0
            colour = "green" if abs(deviation) < 5 else "yellow"
            tbl.add_row(
                str(value),
                f"{count:,}",
                f"[{colour}]{deviation:+.2f}%[/{colour}]",
            )

        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  History Display
    # ------------------------------------------------------------------ #

    def display_history(self, entries: Sequence[HistoryEntry]) -> None:
        """Display history entries, newest first."""
        if not entries:
            return

        self.console.table(
            "Session History",
            ["#", "Password", "Words", "Category", "Generated (UTC)"],
            [
                (
                    idx,
                    entry.password,
                    entry.options.word_count,
                    entry.options.word_category.value,
                    entry.timestamp.strftime("%Y-%m-%d %H:%M:%S"),
                )
                for idx, entry in enumerate(entries, start=1)
            ],
            styles=["dim", "bold bright_white", "", "cyan", "dim"],
        )
