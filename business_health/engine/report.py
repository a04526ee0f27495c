"""
Health Report Module
====================

Runs the visibility and sentiment engines for one location and bundles the
results the way the dashboard displays them, with terminal rendering and
JSON export.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional, Union

from loguru import logger
from rich.console import Console
from rich.table import Table

from business_health.core.models import (
    ReviewRecord,
    SentimentTrend,
    SentimentTrends,
    VisibilityScoreBreakdown,
    VisibilityScoreInput,
)
from business_health.core.sentiment import DEFAULT_PERIOD, SentimentAnalyzer
from business_health.core.visibility import LocalVisibilityScoreCalculator
from business_health.utils import round_int

console = Console()

CATEGORY_LABELS = {
    "gmb": "GMB Profile",
    "reviews": "Reviews",
    "seo": "Local SEO",
    "engagement": "Engagement",
}

TREND_STYLES = {
    SentimentTrend.IMPROVING: "green",
    SentimentTrend.DECLINING: "red",
    SentimentTrend.STABLE: "yellow",
}


@dataclass
class HealthReport:
    """Visibility score and sentiment trends for one location."""
    location: str
    visibility: VisibilityScoreBreakdown
    sentiment: SentimentTrends
    chart_data: list[dict] = field(default_factory=list)
    generated_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        return {
            "location": self.location,
            "generated_at": self.generated_at.isoformat(),
            "visibility": self.visibility.to_dict(),
            "sentiment": self.sentiment.to_dict(),
            "chart_data": self.chart_data,
        }


def build_health_report(
    score_input: VisibilityScoreInput,
    reviews: Iterable[ReviewRecord],
    period: int = DEFAULT_PERIOD,
    location: str = "All Locations",
    now: Optional[datetime] = None,
) -> HealthReport:
    """Score a location and analyze its reviews in one pass.

    Args:
        score_input: Visibility metrics for the location.
        reviews: Review batch for the location.
        period: Sentiment window in months (1-6).
        location: Display label for the report.
        now: Reference time for the sentiment window.

    Raises:
        ValueError: If *period* is outside 1-6.
    """
    logger.info("Building health report for '{}' over {} month(s)", location, period)

    visibility = LocalVisibilityScoreCalculator.calculate_score(score_input)
    sentiment = SentimentAnalyzer.analyze_sentiment_trends(reviews, period, now)

    report = HealthReport(
        location=location,
        visibility=visibility,
        sentiment=sentiment,
        chart_data=SentimentAnalyzer.get_chart_data(sentiment.monthly_data),
        generated_at=now or datetime.now(),
    )

    logger.info(
        "Health report for '{}': visibility {}/100, sentiment {}",
        location, visibility.total_score, sentiment.overall_trend.value,
    )
    return report


def _score_style(score: int) -> str:
    if score >= 80:
        return "green"
    if score >= 50:
        return "yellow"
    return "red"


def _score_bar(score: int, width: int = 20) -> str:
    filled = round_int(score / 100 * width)
    return "█" * filled + "░" * (width - filled)


def print_visibility(visibility: VisibilityScoreBreakdown, out: Optional[Console] = None) -> None:
    """Print the Local Visibility Score breakdown."""
    out = out or console
    style = _score_style(visibility.total_score)
    out.print(
        f"\n[bold]Local Visibility Score:[/bold] [{style}]{visibility.total_score}/100[/{style}]"
    )

    table = Table(title="Score Breakdown")
    table.add_column("Category", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("")
    table.add_column("Details")

    for name, category in visibility.breakdown.items():
        cat_style = _score_style(category.score)
        table.add_row(
            CATEGORY_LABELS.get(name, name),
            f"[{cat_style}]{category.score}[/{cat_style}]",
            _score_bar(category.score),
            "\n".join(category.details) or "[dim]On target[/dim]",
        )

    out.print(table)

    if visibility.recommendations:
        out.print("\n[bold]Recommendations:[/bold]")
        for index, rec in enumerate(visibility.recommendations, 1):
            out.print(f"  {index}. {rec}")


def print_sentiment(sentiment: SentimentTrends, out: Optional[Console] = None) -> None:
    """Print monthly sentiment, trend, insights and recommendations."""
    out = out or console
    style = TREND_STYLES[sentiment.overall_trend]
    months = "month" if sentiment.selected_period == 1 else "months"
    out.print(
        f"\n[bold]Review Sentiment ({sentiment.selected_period} {months}):[/bold] "
        f"[{style}]{sentiment.overall_trend.value}[/{style}]"
    )

    if not sentiment.monthly_data:
        out.print("[dim]No reviews in the selected period.[/dim]")
        return

    table = Table(title="Monthly Sentiment")
    table.add_column("Month", style="cyan")
    table.add_column("Positive", justify="right", style="green")
    table.add_column("Neutral", justify="right")
    table.add_column("Negative", justify="right", style="red")
    table.add_column("Reviews", justify="right")
    table.add_column("Avg Rating", justify="right")

    for month in sentiment.monthly_data:
        table.add_row(
            month.month,
            f"{month.positive}%",
            f"{month.neutral}%",
            f"{month.negative}%",
            str(month.total_reviews),
            f"{month.average_rating:.1f}",
        )

    out.print(table)

    out.print("\n[bold]Key Insights:[/bold]")
    for insight in sentiment.key_insights:
        out.print(f"  - {insight}")

    out.print("\n[bold]Recommendations:[/bold]")
    for index, rec in enumerate(sentiment.recommendations, 1):
        out.print(f"  {index}. {rec}")


def print_report(report: HealthReport, out: Optional[Console] = None) -> None:
    """Print formatted health report."""
    out = out or console
    out.print(f"\n[bold blue]Business Health Report - {report.location}[/bold blue]")
    out.print(f"[dim]Generated {report.generated_at:%Y-%m-%d %H:%M}[/dim]")
    out.print("=" * 60)

    print_visibility(report.visibility, out)
    print_sentiment(report.sentiment, out)


def export_report(data: Union[HealthReport, dict], output_path: Union[str, Path]) -> Path:
    """Export a report (or any JSON-ready dict) to *output_path*."""
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    payload = data.to_dict() if isinstance(data, HealthReport) else data
    with open(output, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)

    logger.info("Report exported to {}", output)
    return output
