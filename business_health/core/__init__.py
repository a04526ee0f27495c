"""Core scoring and analysis engines."""

from business_health.core.models import (
    CategoryBreakdown,
    EngagementMetrics,
    GMBMetrics,
    KeywordRanking,
    LocalSEOMetrics,
    MonthlySentiment,
    ReviewMetrics,
    ReviewRecord,
    SentimentScore,
    SentimentTrend,
    SentimentTrends,
    TimelineOption,
    VisibilityScoreBreakdown,
    VisibilityScoreInput,
)
from business_health.core.sentiment import (
    SentimentAnalyzer,
    analyze_review_sentiment,
    analyze_sentiment_trends,
)
from business_health.core.visibility import LocalVisibilityScoreCalculator, calculate_score

__all__ = [
    "CategoryBreakdown",
    "EngagementMetrics",
    "GMBMetrics",
    "KeywordRanking",
    "LocalSEOMetrics",
    "LocalVisibilityScoreCalculator",
    "MonthlySentiment",
    "ReviewMetrics",
    "ReviewRecord",
    "SentimentAnalyzer",
    "SentimentScore",
    "SentimentTrend",
    "SentimentTrends",
    "TimelineOption",
    "VisibilityScoreBreakdown",
    "VisibilityScoreInput",
    "analyze_review_sentiment",
    "analyze_sentiment_trends",
    "calculate_score",
]
