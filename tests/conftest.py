"""Shared fixtures for the Business Health test suite."""

from datetime import datetime

import pytest

from business_health.core.models import (
    EngagementMetrics,
    GMBMetrics,
    KeywordRanking,
    LocalSEOMetrics,
    ReviewMetrics,
    ReviewRecord,
    VisibilityScoreInput,
)
from business_health.samples import sample_visibility_data


@pytest.fixture
def sample_input():
    """Sample dashboard metrics."""
    return sample_visibility_data()


@pytest.fixture
def target_input():
    """Metrics sitting exactly at every scoring target."""
    return VisibilityScoreInput(
        gmb=GMBMetrics(
            profile_completion=100,
            posts_last_30_days=4,
            photos_count=10,
            questions_answered=10,
            impressions_last_30_days=10000,
            ctr=5.0,
        ),
        reviews=ReviewMetrics(
            average_rating=5.0,
            total_reviews=500,
            new_reviews_last_30_days=50,
            response_rate=100,
            response_time=1,
        ),
        local_seo=LocalSEOMetrics(
            has_title=True,
            has_description=True,
            has_h1=True,
            has_schema=True,
            image_alt_tags_coverage=100,
            local_keywords=("notary near me",),
            local_keyword_rankings=(KeywordRanking("notary near me", 1),),
        ),
        engagement=EngagementMetrics(
            website_clicks=1000,
            phone_calls=500,
            direction_requests=200,
            form_submissions=100,
        ),
    )


@pytest.fixture
def zero_input():
    """Metrics for a brand new, empty listing."""
    return VisibilityScoreInput(
        gmb=GMBMetrics(
            profile_completion=0,
            posts_last_30_days=0,
            photos_count=0,
            questions_answered=0,
            impressions_last_30_days=0,
            ctr=0.0,
        ),
        reviews=ReviewMetrics(
            average_rating=0.0,
            total_reviews=0,
            new_reviews_last_30_days=0,
            response_rate=0,
            response_time=0,
        ),
        local_seo=LocalSEOMetrics(
            has_title=False,
            has_description=False,
            has_h1=False,
            has_schema=False,
            image_alt_tags_coverage=0,
        ),
        engagement=EngagementMetrics(
            website_clicks=0,
            phone_calls=0,
            direction_requests=0,
            form_submissions=0,
        ),
    )


@pytest.fixture
def make_review():
    """Factory for review records."""
    counter = {"next": 0}

    def _make(content: str, rating: int, created_at: datetime, store_name: str = "Main St"):
        counter["next"] += 1
        return ReviewRecord(
            id=str(counter["next"]),
            content=content,
            rating=rating,
            created_at=created_at,
            store_name=store_name,
        )

    return _make
