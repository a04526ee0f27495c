"""Sample dashboard data for demos and testing."""

from datetime import datetime

from business_health.core.models import (
    EngagementMetrics,
    GMBMetrics,
    KeywordRanking,
    LocalSEOMetrics,
    ReviewMetrics,
    ReviewRecord,
    VisibilityScoreInput,
)


def sample_visibility_data() -> VisibilityScoreInput:
    """Return metrics for a well-run location with a thin review history."""
    return VisibilityScoreInput(
        gmb=GMBMetrics(
            profile_completion=85,
            posts_last_30_days=3,
            photos_count=15,
            questions_answered=8,
            impressions_last_30_days=143000,
            ctr=3.6,
        ),
        reviews=ReviewMetrics(
            average_rating=4.25,
            total_reviews=4,
            new_reviews_last_30_days=15,
            response_rate=90,
            response_time=4,
        ),
        local_seo=LocalSEOMetrics(
            has_title=True,
            has_description=True,
            has_h1=True,
            has_schema=True,
            image_alt_tags_coverage=95,
            local_keywords=(
                "colive pg bangalore",
                "student accommodation bangalore",
                "pg near tech park",
            ),
            local_keyword_rankings=(
                KeywordRanking("colive pg bangalore", 2),
                KeywordRanking("student accommodation bangalore", 4),
                KeywordRanking("pg near tech park", 7),
            ),
        ),
        engagement=EngagementMetrics(
            website_clicks=2345,
            phone_calls=892,
            direction_requests=156,
            form_submissions=189,
        ),
    )


_SAMPLE_REVIEWS = [
    ("1", "Excellent accommodation! Clean rooms, great food, and friendly staff. Highly recommend!",
     5, "2024-01-15", "Colive 918 Cape Town"),
    ("2", "Good place but could be better. Rooms are clean and food is decent. "
          "Some amenities could be improved.",
     4, "2024-01-20", "Colive 918 Cape Town"),
    ("3", "Amazing place! Great location near tech parks, modern amenities, "
          "and very professional staff.",
     5, "2024-02-10", "Colive 1180 Columbus"),
    ("4", "The place is okay but the food quality has gone down recently. Staff is helpful though.",
     3, "2024-02-15", "Colive 1180 Columbus"),
    ("5", "Terrible experience! Dirty rooms and unprofessional staff. Would not recommend.",
     2, "2024-03-05", "Colive 918 Cape Town"),
    ("6", "Wonderful stay! Everything exceeded expectations. Clean, comfortable, and great value.",
     5, "2024-03-20", "Colive 1180 Columbus"),
    ("7", "Average experience. Nothing special but not bad either. Decent for the price.",
     3, "2024-04-10", "Colive 918 Cape Town"),
    ("8", "Fantastic service! The staff went above and beyond to make our stay comfortable.",
     5, "2024-04-25", "Colive 1180 Columbus"),
    ("9", "Great improvement! Much better than before. Clean facilities and friendly atmosphere.",
     4, "2024-05-15", "Colive 918 Cape Town"),
    ("10", "Outstanding experience! Best accommodation we've stayed at. Highly recommend!",
     5, "2024-05-30", "Colive 1180 Columbus"),
    ("11", "Excellent value for money. Clean rooms, good location, and helpful staff.",
     5, "2024-06-10", "Colive 918 Cape Town"),
    ("12", "Superb service and facilities. Couldn't ask for more. Will definitely return!",
     5, "2024-06-25", "Colive 1180 Columbus"),
]

# End of the sample window; pass as ``now`` so all six months stay in range.
SAMPLE_REFERENCE_TIME = datetime(2024, 6, 30, 12, 0)


def sample_review_data() -> list[ReviewRecord]:
    """Return twelve reviews spread over January to June 2024."""
    return [
        ReviewRecord(
            id=review_id,
            content=content,
            rating=rating,
            created_at=datetime.strptime(created, "%Y-%m-%d"),
            store_name=store,
        )
        for review_id, content, rating, created, store in _SAMPLE_REVIEWS
    ]
