"""
Data models for the Business Health analytics engines.

Inputs are the raw metrics and review batches the dashboard fetches for a
location; outputs are the score breakdowns and sentiment reports it renders.
All models are immutable and recomputed on every call.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Union


# ---------------------------------------------------------------------------
# Visibility score inputs
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GMBMetrics:
    """Google Business Profile metrics for the last 30 days."""
    profile_completion: float  # 0-100
    posts_last_30_days: int  # target: 4+
    photos_count: int  # target: 10+
    questions_answered: int  # target: 10+
    impressions_last_30_days: int
    ctr: float  # click-through rate percentage


@dataclass(frozen=True)
class ReviewMetrics:
    """Aggregate review health for a location."""
    average_rating: float  # 0-5
    total_reviews: int
    new_reviews_last_30_days: int
    response_rate: float  # 0-100
    response_time: float  # average response time in hours


@dataclass(frozen=True)
class KeywordRanking:
    """Search position of a tracked local keyword (1 is best)."""
    keyword: str
    rank: int


@dataclass(frozen=True)
class LocalSEOMetrics:
    """On-page SEO hygiene and local keyword rankings."""
    has_title: bool
    has_description: bool
    has_h1: bool
    has_schema: bool
    image_alt_tags_coverage: float  # 0-100
    local_keywords: tuple[str, ...] = ()
    local_keyword_rankings: tuple[KeywordRanking, ...] = ()


@dataclass(frozen=True)
class EngagementMetrics:
    """Customer actions taken from the listing."""
    website_clicks: int
    phone_calls: int
    direction_requests: int
    form_submissions: int


@dataclass(frozen=True)
class VisibilityScoreInput:
    """Everything the visibility calculator needs for one location."""
    gmb: GMBMetrics
    reviews: ReviewMetrics
    local_seo: LocalSEOMetrics
    engagement: EngagementMetrics


# ---------------------------------------------------------------------------
# Visibility score outputs
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CategoryBreakdown:
    """Score and advisory details for a single category."""
    score: int
    details: tuple[str, ...] = ()


@dataclass(frozen=True)
class VisibilityScoreBreakdown:
    """Weighted Local Visibility Score with per-category detail."""
    total_score: int
    gmb_score: int
    review_score: int
    seo_score: int
    engagement_score: int
    breakdown: dict[str, CategoryBreakdown] = field(default_factory=dict)
    recommendations: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "total_score": self.total_score,
            "gmb_score": self.gmb_score,
            "review_score": self.review_score,
            "seo_score": self.seo_score,
            "engagement_score": self.engagement_score,
            "breakdown": {
                name: {"score": category.score, "details": list(category.details)}
                for name, category in self.breakdown.items()
            },
            "recommendations": list(self.recommendations),
        }


# ---------------------------------------------------------------------------
# Sentiment models
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ReviewRecord:
    """A single customer review."""
    id: str
    content: str
    rating: int  # 1-5
    created_at: Union[datetime, date]
    store_name: str = ""  # display only


@dataclass(frozen=True)
class SentimentScore:
    """Lexicon and rating based sentiment of one review."""
    positive: int
    negative: int
    neutral: int
    overall: float  # -1 to 1


@dataclass(frozen=True)
class MonthlySentiment:
    """Sentiment distribution for one calendar month."""
    month: str
    positive: int
    negative: int
    neutral: int
    total_reviews: int
    average_rating: float

    @property
    def net_sentiment(self) -> int:
        """Positive minus negative percentage points."""
        return self.positive - self.negative

    def to_dict(self) -> dict:
        return {
            "month": self.month,
            "positive": self.positive,
            "negative": self.negative,
            "neutral": self.neutral,
            "total_reviews": self.total_reviews,
            "average_rating": self.average_rating,
        }


class SentimentTrend(str, Enum):
    """Direction of sentiment across the selected period."""
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


@dataclass(frozen=True)
class SentimentTrends:
    """Monthly sentiment report for a review batch."""
    monthly_data: tuple[MonthlySentiment, ...]
    overall_trend: SentimentTrend
    key_insights: tuple[str, ...]
    recommendations: tuple[str, ...]
    selected_period: int

    def to_dict(self) -> dict:
        return {
            "monthly_data": [month.to_dict() for month in self.monthly_data],
            "overall_trend": self.overall_trend.value,
            "key_insights": list(self.key_insights),
            "recommendations": list(self.recommendations),
            "selected_period": self.selected_period,
        }


@dataclass(frozen=True)
class TimelineOption:
    """A selectable analysis window for the sentiment chart."""
    value: int
    label: str
