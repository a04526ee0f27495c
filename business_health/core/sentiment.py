"""
Review Sentiment Trend Analyzer

Scores individual reviews from their star rating and a fixed service-review
lexicon, buckets them by calendar month, and derives the overall trend,
key insights and recommendations for a 1-6 month window.
"""

import math
import re
from collections import defaultdict
from datetime import date, datetime, time, timedelta
from typing import Iterable, Optional, Sequence, Union

from dateutil.relativedelta import relativedelta
from loguru import logger

from business_health.core.models import (
    MonthlySentiment,
    ReviewRecord,
    SentimentScore,
    SentimentTrend,
    SentimentTrends,
    TimelineOption,
)
from business_health.utils import clamp, round_half_up, round_int


# ---------------------------------------------------------------------------
# Lexicons
# ---------------------------------------------------------------------------

POSITIVE_WORDS: frozenset[str] = frozenset({
    "excellent", "amazing", "great", "good", "wonderful", "fantastic", "outstanding",
    "perfect", "brilliant", "superb", "terrific", "awesome", "fabulous", "incredible",
    "love", "enjoy", "satisfied", "happy", "pleased", "delighted", "impressed",
    "clean", "comfortable", "convenient", "affordable", "friendly", "helpful",
    "professional", "efficient", "reliable", "trustworthy", "quality", "value",
    "recommend", "best", "top", "exceeded", "surpassed", "wow", "stunning",
})

NEGATIVE_WORDS: frozenset[str] = frozenset({
    "terrible", "awful", "horrible", "bad", "poor", "disappointing", "frustrating",
    "annoying", "upset", "angry", "disgusted", "hate", "worst", "useless",
    "dirty", "uncomfortable", "expensive", "rude", "unhelpful", "unprofessional",
    "slow", "unreliable", "untrustworthy", "cheap", "broken", "damaged",
    "noisy", "crowded", "messy", "smelly", "cold", "hot", "difficult",
    "complicated", "confusing", "waste", "regret", "avoid", "never",
})

NEUTRAL_WORDS: frozenset[str] = frozenset({
    "okay", "fine", "average", "decent", "acceptable", "reasonable", "standard",
    "normal", "usual", "typical", "moderate", "adequate", "sufficient",
})

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

TIMELINE_PERIODS = (1, 2, 3, 4, 5, 6)
DEFAULT_PERIOD = 6

RATING_WEIGHT = 0.7
WORD_WEIGHT = 0.3

TREND_THRESHOLD = 10  # net sentiment points between halves
RECENT_WINDOW = 3  # months compared for the recent-change insight
STRONG_POSITIVE = 70
WEAK_POSITIVE = 50
HIGH_NEGATIVE = 30
LOW_POSITIVE = 60
LOW_REVIEW_VOLUME = 10
MAX_RECOMMENDATIONS = 5

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_NON_WORD = re.compile(r"[^\w]", re.ASCII)


def _to_local_naive(value: Union[datetime, date]) -> datetime:
    """Normalize a review timestamp to a naive local datetime."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value
    return datetime.combine(value, time.min)


def _months_before(reference: datetime, months: int) -> datetime:
    """Step *months* back in the month field, rolling overflow days forward.

    31 May minus 3 months is 2 Mar 2024, not 29 Feb.
    """
    shifted = reference - relativedelta(months=months)
    return shifted + timedelta(days=reference.day - shifted.day)


def _month_label(year: int, month: int) -> str:
    return f"{MONTH_ABBREVIATIONS[month - 1]} {year}"


def _average(values: Sequence[float]) -> float:
    return sum(values) / len(values)


class SentimentAnalyzer:
    """Stateless review sentiment analyzer.

    A review's ``overall`` sentiment blends its star rating (70%) with the
    balance of positive and negative lexicon words (30%). Monthly figures are
    averages of the per-review percentages.
    """

    positive_words = POSITIVE_WORDS
    negative_words = NEGATIVE_WORDS
    neutral_words = NEUTRAL_WORDS

    # ------------------------------------------------------------------
    # Single review
    # ------------------------------------------------------------------

    @classmethod
    def analyze_review_sentiment(cls, review: ReviewRecord) -> SentimentScore:
        """Analyze sentiment of a single review."""
        positive_count = 0
        negative_count = 0
        neutral_count = 0

        for token in review.content.lower().split():
            word = _NON_WORD.sub("", token)
            if word in cls.positive_words:
                positive_count += 1
            elif word in cls.negative_words:
                negative_count += 1
            elif word in cls.neutral_words:
                neutral_count += 1

        rating_sentiment = (review.rating - 3) / 2
        word_sentiment = (positive_count - negative_count) / max(positive_count + negative_count, 1)
        overall = clamp(
            rating_sentiment * RATING_WEIGHT + word_sentiment * WORD_WEIGHT, -1.0, 1.0
        )

        total = positive_count + negative_count + neutral_count
        if total == 0:
            return SentimentScore(positive=0, negative=0, neutral=100, overall=overall)

        return SentimentScore(
            positive=round_int(positive_count / total * 100),
            negative=round_int(negative_count / total * 100),
            neutral=round_int(neutral_count / total * 100),
            overall=overall,
        )

    # ------------------------------------------------------------------
    # Trends
    # ------------------------------------------------------------------

    @classmethod
    def analyze_sentiment_trends(
        cls,
        reviews: Iterable[ReviewRecord],
        period: int = DEFAULT_PERIOD,
        now: Optional[datetime] = None,
    ) -> SentimentTrends:
        """Analyze sentiment trends over the last *period* months.

        Args:
            reviews: Review batch, in any order.
            period: Window length in months, 1 through 6.
            now: Reference time; defaults to the current local time.

        Returns:
            A :class:`SentimentTrends` report. An empty window yields no
            monthly data, a stable trend and no insights or recommendations.

        Raises:
            ValueError: If *period* is not between 1 and 6.
        """
        if period not in TIMELINE_PERIODS:
            raise ValueError(
                f"Unsupported timeline period {period!r}. "
                f"Choose from: {', '.join(str(p) for p in TIMELINE_PERIODS)}"
            )

        filtered = cls.filter_reviews_by_period(reviews, period, now)
        monthly_data = tuple(
            cls._summarize_month(label, month_reviews)
            for label, month_reviews in cls.group_reviews_by_month(filtered)
        )

        overall_trend = cls.determine_overall_trend(monthly_data)

        logger.debug(
            "Sentiment over {} month(s): {} reviews in {} buckets, trend {}",
            period, len(filtered), len(monthly_data), overall_trend.value,
        )

        return SentimentTrends(
            monthly_data=monthly_data,
            overall_trend=overall_trend,
            key_insights=cls.generate_key_insights(monthly_data, period),
            recommendations=cls.generate_recommendations(monthly_data, overall_trend, period),
            selected_period=period,
        )

    @staticmethod
    def filter_reviews_by_period(
        reviews: Iterable[ReviewRecord],
        period: int,
        now: Optional[datetime] = None,
    ) -> list[ReviewRecord]:
        """Keep reviews created on or after *period* calendar months before now."""
        reference = _to_local_naive(now) if now is not None else datetime.now()
        cutoff = _months_before(reference, period)
        return [review for review in reviews if _to_local_naive(review.created_at) >= cutoff]

    @staticmethod
    def group_reviews_by_month(
        reviews: Iterable[ReviewRecord],
    ) -> list[tuple[str, list[ReviewRecord]]]:
        """Group reviews into ``(label, reviews)`` pairs in calendar order."""
        groups: dict[tuple[int, int], list[ReviewRecord]] = defaultdict(list)
        for review in reviews:
            created = _to_local_naive(review.created_at)
            groups[(created.year, created.month)].append(review)

        return [
            (_month_label(year, month), groups[(year, month)])
            for year, month in sorted(groups)
        ]

    @classmethod
    def _summarize_month(cls, label: str, reviews: list[ReviewRecord]) -> MonthlySentiment:
        sentiments = [cls.analyze_review_sentiment(review) for review in reviews]
        count = len(reviews)

        return MonthlySentiment(
            month=label,
            positive=round_int(sum(s.positive for s in sentiments) / count),
            negative=round_int(sum(s.negative for s in sentiments) / count),
            neutral=round_int(sum(s.neutral for s in sentiments) / count),
            total_reviews=count,
            average_rating=round_half_up(sum(r.rating for r in reviews) / count, 1),
        )

    @staticmethod
    def determine_overall_trend(monthly_data: Sequence[MonthlySentiment]) -> SentimentTrend:
        """Compare net sentiment of the earlier and later halves of the window."""
        if len(monthly_data) < 2:
            return SentimentTrend.STABLE

        split = math.ceil(len(monthly_data) / 2)
        first_half = _average([m.net_sentiment for m in monthly_data[:split]])
        second_half = _average([m.net_sentiment for m in monthly_data[split:]])
        difference = second_half - first_half

        if difference > TREND_THRESHOLD:
            return SentimentTrend.IMPROVING
        if difference < -TREND_THRESHOLD:
            return SentimentTrend.DECLINING
        return SentimentTrend.STABLE

    # ------------------------------------------------------------------
    # Insights and recommendations
    # ------------------------------------------------------------------

    @staticmethod
    def generate_key_insights(
        monthly_data: Sequence[MonthlySentiment], period: int
    ) -> tuple[str, ...]:
        if not monthly_data:
            return ()

        insights: list[str] = []

        if period == 1:
            insights.append(f"Analyzing sentiment for the last {period} month")
        else:
            insights.append(f"Analyzing sentiment trends over the last {period} months")

        # max/min keep the earliest month on ties
        best_month = max(monthly_data, key=lambda m: m.net_sentiment)
        worst_month = min(monthly_data, key=lambda m: m.net_sentiment)
        insights.append(
            f"Best sentiment month: {best_month.month} ({best_month.positive}% positive)"
        )
        insights.append(
            f"Challenging month: {worst_month.month} ({worst_month.negative}% negative)"
        )

        overall_positive = _average([m.positive for m in monthly_data])
        if overall_positive > STRONG_POSITIVE:
            insights.append(
                f"Strong positive sentiment maintained ({round_int(overall_positive)}% average)"
            )
        elif overall_positive < WEAK_POSITIVE:
            insights.append(
                f"Need to improve positive sentiment ({round_int(overall_positive)}% average)"
            )

        recent_months = monthly_data[-RECENT_WINDOW:]
        if len(recent_months) >= 2:
            recent_change = recent_months[-1].positive - recent_months[0].positive
            if recent_change > TREND_THRESHOLD:
                insights.append("Recent improvement in sentiment trends")
            elif recent_change < -TREND_THRESHOLD:
                insights.append("Recent decline in sentiment - immediate attention needed")

        return tuple(insights)

    @staticmethod
    def generate_recommendations(
        monthly_data: Sequence[MonthlySentiment],
        trend: SentimentTrend,
        period: int,
    ) -> tuple[str, ...]:
        if not monthly_data:
            return ()

        latest_month = monthly_data[-1]
        recommendations: list[str] = []

        if period == 1:
            recommendations.append(
                "Monitor daily sentiment changes for immediate response opportunities"
            )
        elif period <= 3:
            recommendations.append("Focus on short-term sentiment improvements and quick wins")
        else:
            recommendations.append(
                "Implement long-term strategies for sustained sentiment improvement"
            )

        if latest_month.negative > HIGH_NEGATIVE:
            recommendations.append(
                "Address negative feedback immediately to prevent sentiment decline"
            )
        if latest_month.positive < LOW_POSITIVE:
            recommendations.append("Implement strategies to boost positive customer experiences")

        if trend == SentimentTrend.DECLINING:
            recommendations.append(
                "Review recent changes that may have impacted customer satisfaction"
            )
            recommendations.append(
                "Increase proactive customer outreach and feedback collection"
            )
        elif trend == SentimentTrend.IMPROVING:
            recommendations.append(
                "Maintain current positive practices and customer service standards"
            )

        if latest_month.total_reviews < LOW_REVIEW_VOLUME:
            recommendations.append(
                "Encourage more customer reviews to get better sentiment insights"
            )

        recommendations.append("Respond to all reviews within 24 hours to show customer care")
        recommendations.append("Use negative feedback to identify and fix operational issues")

        return tuple(recommendations[:MAX_RECOMMENDATIONS])

    # ------------------------------------------------------------------
    # Display helpers
    # ------------------------------------------------------------------

    @staticmethod
    def get_chart_data(monthly_data: Sequence[MonthlySentiment]) -> list[dict]:
        """Flatten monthly sentiment into rows for chart widgets."""
        return [
            {
                "month": month.month,
                "positive": month.positive,
                "negative": month.negative,
                "neutral": month.neutral,
                "total": month.total_reviews,
                "average_rating": month.average_rating,
            }
            for month in monthly_data
        ]

    @staticmethod
    def get_timeline_options() -> list[TimelineOption]:
        """Return the selectable analysis windows."""
        return [
            TimelineOption(value=p, label=f"{p} Month" if p == 1 else f"{p} Months")
            for p in TIMELINE_PERIODS
        ]


def analyze_review_sentiment(review: ReviewRecord) -> SentimentScore:
    return SentimentAnalyzer.analyze_review_sentiment(review)


def analyze_sentiment_trends(
    reviews: Iterable[ReviewRecord],
    period: int = DEFAULT_PERIOD,
    now: Optional[datetime] = None,
) -> SentimentTrends:
    return SentimentAnalyzer.analyze_sentiment_trends(reviews, period, now)
