"""
Passphrase CLI
===============

Click-based command-line interface for the passphrase generator.
Provides subcommands to generate passphrases, re-decorate an existing
one under new options, score any password and check the random source.

Usage::

    python -m passphrase generate --words 4 --specials
    python -m passphrase generate --count 5 --export history.json
    python -m passphrase rederive "Forest7-River-Stone" --no-numbers
    python -m passphrase score "H=el6icopter-Freedom"
    python -m passphrase --output json rng-check --bound 10 --draws 100000

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import functools
import json
from pathlib import Path
from typing import Any, Callable, Optional

import click
from click.core import ParameterSource

from shared.config import PhraseConfig
from shared.console import PhraseConsole

from passphrase import __version__
from passphrase.analyzers.uniformity import UniformityTester
from passphrase.core.engine import PassphraseEngine
from passphrase.core.errors import PassphraseError
from passphrase.core.models import WordCategory
from passphrase.history import PasswordHistory
from passphrase.output.console import PassphraseConsoleOutput
from passphrase.output.report import HistoryReportGenerator


# ===================================================================== #
#  Shared Option Flags
# ===================================================================== #

# CLI parameter name -> GenerationOptions field
_OPTION_FIELDS: dict[str, str] = {
    "words": "word_count",
    "capitals": "include_capitals",
    "numbers": "include_numbers",
    "specials": "include_specials",
    "category": "word_category",
    "min_length": "min_word_length",
    "max_length": "max_word_length",
    "density": "character_density",
    "avoid_similar": "avoid_similar_words",
    "locale": "locale",
}


def generation_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the generation option flags to a subcommand."""
    decorators = [
        click.option("--words", "-w", type=int, default=3, show_default=True,
                     help="Number of words (2-6)."),
        click.option("--capitals/--no-capitals", default=True,
                     help="Capitalise the first letter of each word."),
        click.option("--numbers/--no-numbers", default=True,
                     help="Insert digits into some words."),
        click.option("--specials/--no-specials", default=False,
                     help="Insert symbols into some words."),
        click.option("--category", type=click.Choice([c.value for c in WordCategory]),
                     default=WordCategory.MIXED.value, show_default=True,
                     help="Word list to draw from."),
        click.option("--min-length", type=int, default=5, show_default=True,
                     help="Shortest word length (4-15)."),
        click.option("--max-length", type=int, default=12, show_default=True,
                     help="Longest word length (4-15)."),
        click.option("--density", type=float, default=0.7, show_default=True,
                     help="Fraction of words that receive digits/symbols (0.2-1.0)."),
        click.option("--avoid-similar/--allow-similar", default=True,
                     help="Reject words that look alike."),
        click.option("--locale", "-l", default="en", show_default=True,
                     help="Word list locale."),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def _collect_options(ctx: click.Context, params: dict[str, Any]) -> dict[str, Any]:
    """Return only the option flags given on the command line.

    Flags left at their defaults fall through to the configured
    ``[generator]`` defaults inside the engine.
    """
    supplied: dict[str, Any] = {}
    for param_name, field_name in _OPTION_FIELDS.items():
        source = ctx.get_parameter_source(param_name)
        if source in (ParameterSource.COMMANDLINE, ParameterSource.ENVIRONMENT):
            supplied[field_name] = params[param_name]
    return supplied


def _handles_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Report :class:`PassphraseError` on the console and exit with 1."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        ctx = click.get_current_context()
        try:
            return func(*args, **kwargs)
        except PassphraseError as exc:
            _fail(ctx, exc)

    return wrapper


def _fail(ctx: click.Context, exc: Exception) -> None:
    console: Optional[PhraseConsole] = ctx.obj.get("console") if ctx.obj else None
    if console is not None and not ctx.obj.get("quiet"):
        console.error(str(exc))
    else:
        click.echo(f"Error: {exc}", err=True)
    ctx.exit(1)


def _echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False, default=str))


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to PhraseCore configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and informational output.",
)
@click.version_option(__version__, prog_name="phrasecore")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    quiet: bool,
) -> None:
    """PhraseCore Passphrase -- Generator & Strength Scorer.

    Generate memorable passphrases from curated word lists and score
    how well any password resists guessing.
    """
    ctx.ensure_object(dict)

    phrase_config = PhraseConfig.load(config) if config else PhraseConfig()
    ctx.obj["config"] = phrase_config
    ctx.obj["output_format"] = output
    ctx.obj["quiet"] = quiet

    console = PhraseConsole(quiet=quiet)
    ctx.obj["console"] = console
    try:
        ctx.obj["engine"] = PassphraseEngine(phrase_config)
    except PassphraseError as exc:
        _fail(ctx, exc)
    ctx.obj["display"] = PassphraseConsoleOutput(console)
    ctx.obj["reporter"] = HistoryReportGenerator()

    if not quiet and output == "console":
        console.banner(version=__version__)


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@generation_options
@click.option(
    "--count", "-n",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of passphrases to generate.",
)
@click.option(
    "--export", "-e", "export_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the generated passphrases as a JSON history export.",
)
@click.pass_context
@_handles_errors
def generate(ctx: click.Context, count: int, export_path: Optional[str], **params: Any) -> None:
    """Generate one or more passphrases.

    Words are drawn from the selected category and locale, then
    decorated with capitals, digits and symbols as requested.
    """
    engine: PassphraseEngine = ctx.obj["engine"]
    display: PassphraseConsoleOutput = ctx.obj["display"]
    console: PhraseConsole = ctx.obj["console"]
    config: PhraseConfig = ctx.obj["config"]

    options = engine.resolve_options(_collect_options(ctx, params))
    history = PasswordHistory(limit=config.generator.history_limit)

    as_json = ctx.obj["output_format"] == "json"
    if not engine.is_cryptographic and not as_json:
        console.warning("Cryptographic randomness is unavailable; output is NOT secure")

    results = []
    for _ in range(count):
        password = engine.generate(options)
        history.add(password, options)
        results.append((password, engine.score(password)))

    if as_json:
        _echo_json({
            "options": options.model_dump(mode="json", by_alias=True),
            "passwords": [
                {"password": password, "report": report.model_dump(mode="json")}
                for password, report in results
            ],
        })
    elif count == 1:
        password, report = results[0]
        display.display_password(password, options)
        display.display_report(report)
    else:
        display.display_history(history.entries)

    if export_path:
        path = ctx.obj["reporter"].generate_json(history, Path(export_path))
        if not as_json:
            console.success(f"History exported to: {path}")


@cli.command()
@click.argument("password")
@generation_options
@click.pass_context
@_handles_errors
def rederive(ctx: click.Context, password: str, **params: Any) -> None:
    """Re-decorate PASSWORD under new options, keeping its words.

    Digits and symbols are stripped from every word before the new
    capitalisation and injections are applied. The word count of
    PASSWORD is kept regardless of --words.
    """
    engine: PassphraseEngine = ctx.obj["engine"]
    display: PassphraseConsoleOutput = ctx.obj["display"]

    options = engine.resolve_options(_collect_options(ctx, params))
    updated = engine.rederive(password, options)
    report = engine.score(updated)

    if ctx.obj["output_format"] == "json":
        _echo_json({"password": updated, "report": report.model_dump(mode="json")})
    else:
        display.display_password(updated, options, title="Re-derived Passphrase")
        display.display_report(report)


@cli.command()
@click.argument("password")
@click.pass_context
def score(ctx: click.Context, password: str) -> None:
    """Score the strength of PASSWORD on a 0-100 scale."""
    engine: PassphraseEngine = ctx.obj["engine"]
    display: PassphraseConsoleOutput = ctx.obj["display"]

    report = engine.score(password)

    if ctx.obj["output_format"] == "json":
        _echo_json(report.model_dump(mode="json"))
    else:
        display.display_report(report)


@cli.command("rng-check")
@click.option(
    "--bound", "-b",
    type=click.IntRange(min=2),
    default=None,
    help="Exclusive upper bound of each draw (default from config).",
)
@click.option(
    "--draws", "-d",
    type=click.IntRange(min=1),
    default=None,
    help="Number of draws (default from config).",
)
@click.pass_context
def rng_check(ctx: click.Context, bound: Optional[int], draws: Optional[int]) -> None:
    """Chi-squared check that the random source draws uniformly.

    Draws repeatedly from the generator's random source and compares
    the observed counts with the uniform expectation.
    """
    engine: PassphraseEngine = ctx.obj["engine"]
    display: PassphraseConsoleOutput = ctx.obj["display"]
    analysis = ctx.obj["config"].analysis

    tester = UniformityTester(significance=analysis.uniformity_significance)
    try:
        result = tester.run(
            engine.rng,
            bound=bound or analysis.uniformity_bound,
            draws=draws or analysis.uniformity_draws,
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    if ctx.obj["output_format"] == "json":
        _echo_json(result.model_dump(mode="json"))
    else:
        display.display_uniformity(result)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Passphrase CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
