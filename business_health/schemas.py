"""
Input validation for dashboard payloads.

Raw metrics and review batches arrive as JSON from the dashboard API using
camelCase keys; snake_case keys are accepted too. Each schema validates the
payload and converts it into the immutable models the engines consume.
"""

import json
from datetime import date, datetime
from pathlib import Path
from typing import Any, Union

from dateutil import parser as date_parser
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from business_health.core.models import (
    EngagementMetrics,
    GMBMetrics,
    KeywordRanking,
    LocalSEOMetrics,
    ReviewMetrics,
    ReviewRecord,
    VisibilityScoreInput,
)


class _Payload(BaseModel):
    """Base schema accepting both camelCase and snake_case keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# ---------------------------------------------------------------------------
# Visibility metrics
# ---------------------------------------------------------------------------

class GMBMetricsSchema(_Payload):
    profile_completion: float = Field(ge=0)
    posts_last_30_days: int = Field(ge=0)
    photos_count: int = Field(ge=0)
    questions_answered: int = Field(ge=0)
    impressions_last_30_days: int = Field(ge=0)
    ctr: float = Field(default=0.0, ge=0)

    def to_domain(self) -> GMBMetrics:
        return GMBMetrics(**self.model_dump())


class ReviewMetricsSchema(_Payload):
    average_rating: float = Field(ge=0, le=5)
    total_reviews: int = Field(ge=0)
    new_reviews_last_30_days: int = Field(ge=0)
    response_rate: float = Field(ge=0)
    response_time: float = Field(default=0.0, ge=0)

    def to_domain(self) -> ReviewMetrics:
        return ReviewMetrics(**self.model_dump())


class KeywordRankingSchema(_Payload):
    keyword: str
    rank: int = Field(ge=1)


class LocalSEOMetricsSchema(_Payload):
    has_title: bool = False
    has_description: bool = False
    has_h1: bool = Field(default=False, alias="hasH1")
    has_schema: bool = False
    image_alt_tags_coverage: float = Field(default=0.0, ge=0)
    local_keywords: list[str] = Field(default_factory=list)
    local_keyword_rankings: list[KeywordRankingSchema] = Field(default_factory=list)

    def to_domain(self) -> LocalSEOMetrics:
        return LocalSEOMetrics(
            has_title=self.has_title,
            has_description=self.has_description,
            has_h1=self.has_h1,
            has_schema=self.has_schema,
            image_alt_tags_coverage=self.image_alt_tags_coverage,
            local_keywords=tuple(self.local_keywords),
            local_keyword_rankings=tuple(
                KeywordRanking(keyword=r.keyword, rank=r.rank)
                for r in self.local_keyword_rankings
            ),
        )


class EngagementMetricsSchema(_Payload):
    website_clicks: int = Field(ge=0)
    phone_calls: int = Field(ge=0)
    direction_requests: int = Field(ge=0)
    form_submissions: int = Field(ge=0)

    def to_domain(self) -> EngagementMetrics:
        return EngagementMetrics(**self.model_dump())


class VisibilityScoreInputSchema(_Payload):
    gmb: GMBMetricsSchema
    reviews: ReviewMetricsSchema
    local_seo: LocalSEOMetricsSchema = Field(alias="localSEO")
    engagement: EngagementMetricsSchema

    def to_domain(self) -> VisibilityScoreInput:
        return VisibilityScoreInput(
            gmb=self.gmb.to_domain(),
            reviews=self.reviews.to_domain(),
            local_seo=self.local_seo.to_domain(),
            engagement=self.engagement.to_domain(),
        )


# ---------------------------------------------------------------------------
# Reviews
# ---------------------------------------------------------------------------

class ReviewRecordSchema(_Payload):
    id: str
    content: str = ""
    rating: int = Field(ge=1, le=5)
    created_at: datetime
    store_name: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        if isinstance(value, int):
            return str(value)
        return value

    @field_validator("created_at", mode="before")
    @classmethod
    def _parse_created_at(cls, value: Any) -> Any:
        if isinstance(value, str):
            return date_parser.parse(value)
        if isinstance(value, date) and not isinstance(value, datetime):
            return datetime(value.year, value.month, value.day)
        return value

    def to_domain(self) -> ReviewRecord:
        return ReviewRecord(
            id=self.id,
            content=self.content,
            rating=self.rating,
            created_at=self.created_at,
            store_name=self.store_name,
        )


# ---------------------------------------------------------------------------
# Parsing and loading
# ---------------------------------------------------------------------------

def parse_visibility_input(payload: dict) -> VisibilityScoreInput:
    """Validate a metrics payload.

    Raises:
        ValueError: If required fields are missing or out of range.
    """
    try:
        return VisibilityScoreInputSchema.model_validate(payload).to_domain()
    except ValidationError as exc:
        raise ValueError(f"Invalid visibility metrics: {exc}") from exc


def parse_reviews(payload: Union[list, dict]) -> list[ReviewRecord]:
    """Validate a review batch (a list, or an object with a ``reviews`` list).

    Raises:
        ValueError: If any review is malformed.
    """
    items = payload.get("reviews", []) if isinstance(payload, dict) else payload
    if not isinstance(items, list):
        raise ValueError("Review payload must be a list of reviews")

    records: list[ReviewRecord] = []
    for index, item in enumerate(items):
        try:
            records.append(ReviewRecordSchema.model_validate(item).to_domain())
        except ValidationError as exc:
            raise ValueError(f"Invalid review at index {index}: {exc}") from exc
    return records


def _read_json(path: Union[str, Path]) -> Any:
    source = Path(path)
    try:
        with open(source, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as exc:
        raise ValueError(f"{source} is not valid JSON: {exc}") from exc


def load_visibility_input(path: Union[str, Path]) -> VisibilityScoreInput:
    """Load and validate visibility metrics from a JSON file."""
    score_input = parse_visibility_input(_read_json(path))
    logger.info("Loaded visibility metrics from {}", path)
    return score_input


def load_reviews(path: Union[str, Path]) -> list[ReviewRecord]:
    """Load and validate a review batch from a JSON file."""
    reviews = parse_reviews(_read_json(path))
    logger.info("Loaded {} reviews from {}", len(reviews), path)
    return reviews
