"""
Command Line Interface for Business Health Analytics
=====================================================

Score locations and analyze review sentiment from JSON exports of the
dashboard API, or from the built-in sample data.
"""

import sys
from pathlib import Path
from typing import Optional

import click
from loguru import logger
from rich.console import Console
from rich.panel import Panel

from business_health import __version__
from business_health.config import get_settings
from business_health.core.sentiment import TIMELINE_PERIODS, SentimentAnalyzer
from business_health.core.visibility import LocalVisibilityScoreCalculator
from business_health.engine.report import (
    build_health_report,
    export_report,
    print_report,
    print_sentiment,
    print_visibility,
)
from business_health.samples import (
    SAMPLE_REFERENCE_TIME,
    sample_review_data,
    sample_visibility_data,
)
from business_health.schemas import load_reviews, load_visibility_input

console = Console()

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

period_option = click.option(
    "--period", "-p",
    type=click.IntRange(min(TIMELINE_PERIODS), max(TIMELINE_PERIODS)),
    default=None,
    help="Sentiment window in months (1-6). Defaults to DEFAULT_SENTIMENT_PERIOD.",
)
output_option = click.option(
    "--output", "-o", type=click.Path(dir_okay=False), help="Export report to JSON file"
)


def configure_logging(level: str) -> None:
    """Send log records to stderr at *level*."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)


def _fail(message: str) -> None:
    console.print(f"[red]Error: {message}[/red]")
    sys.exit(1)


def _default_output(name: str) -> Path:
    settings = get_settings()
    return settings.report_output_dir / f"{name}.json"


@click.group()
@click.version_option(version=__version__, prog_name="Business Health Analytics")
@click.option("--debug/--no-debug", default=False, help="Enable debug logging")
def main(debug: bool):
    """
    Business Health Analytics

    Local Visibility Score and review sentiment trends for
    multi-location businesses.
    """
    settings = get_settings()
    configure_logging("DEBUG" if debug else settings.log_level)


@main.command()
@click.argument("metrics", type=click.Path(exists=True, dir_okay=False))
@output_option
def score(metrics: str, output: Optional[str]):
    """Calculate the Local Visibility Score from a metrics JSON file."""
    try:
        score_input = load_visibility_input(metrics)
    except ValueError as exc:
        _fail(str(exc))

    visibility = LocalVisibilityScoreCalculator.calculate_score(score_input)
    print_visibility(visibility, console)

    if output:
        export_report(visibility.to_dict(), output)
        console.print(f"\n[green]Report exported to {output}[/green]")


@main.command()
@click.argument("reviews", type=click.Path(exists=True, dir_okay=False))
@period_option
@output_option
def sentiment(reviews: str, period: Optional[int], output: Optional[str]):
    """Analyze review sentiment trends from a reviews JSON file."""
    period = period or get_settings().default_sentiment_period
    try:
        records = load_reviews(reviews)
    except ValueError as exc:
        _fail(str(exc))

    trends = SentimentAnalyzer.analyze_sentiment_trends(records, period)
    print_sentiment(trends, console)

    if output:
        export_report(trends.to_dict(), output)
        console.print(f"\n[green]Report exported to {output}[/green]")


@main.command()
@click.argument("metrics", type=click.Path(exists=True, dir_okay=False))
@click.argument("reviews", type=click.Path(exists=True, dir_okay=False))
@period_option
@click.option("--location", "-l", default=None, help="Location label for the report")
@output_option
@click.option("--save", is_flag=True, help="Save JSON to REPORT_OUTPUT_DIR")
def report(
    metrics: str,
    reviews: str,
    period: Optional[int],
    location: Optional[str],
    output: Optional[str],
    save: bool,
):
    """Build a full health report for one location."""
    settings = get_settings()
    period = period or settings.default_sentiment_period
    try:
        score_input = load_visibility_input(metrics)
        records = load_reviews(reviews)
    except ValueError as exc:
        _fail(str(exc))

    health = build_health_report(
        score_input, records, period=period, location=location or settings.location_name
    )
    print_report(health, console)

    target = output
    if not target and save:
        target = _default_output(f"health_report_{health.generated_at:%Y%m%d_%H%M%S}")
    if target:
        export_report(health, target)
        console.print(f"\n[green]Report exported to {target}[/green]")


@main.command()
@period_option
@output_option
def demo(period: Optional[int], output: Optional[str]):
    """Run both engines on the built-in sample data."""
    period = period or get_settings().default_sentiment_period
    console.print(Panel.fit(
        "[bold blue]Business Health Demo[/bold blue]\n"
        "Scoring a sample location and analyzing twelve sample reviews.",
        border_style="blue",
    ))

    health = build_health_report(
        sample_visibility_data(),
        sample_review_data(),
        period=period,
        location="Sample Location",
        now=SAMPLE_REFERENCE_TIME,
    )
    print_report(health, console)

    if output:
        export_report(health, output)
        console.print(f"\n[green]Report exported to {output}[/green]")


@main.command()
def periods():
    """List the available sentiment timeline periods."""
    for option in SentimentAnalyzer.get_timeline_options():
        console.print(f"  {option.value}  {option.label}")


if __name__ == "__main__":
    main()
