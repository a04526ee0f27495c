"""
Local Visibility Score Calculator

Turns Google Business Profile, review, on-page SEO and engagement metrics
into a single 0-100 Local Visibility Score, a per-category breakdown with
advisory details, and up to five prioritized recommendations.
"""

from loguru import logger

from business_health.core.models import (
    CategoryBreakdown,
    EngagementMetrics,
    GMBMetrics,
    LocalSEOMetrics,
    ReviewMetrics,
    VisibilityScoreBreakdown,
    VisibilityScoreInput,
)
from business_health.utils import capped_ratio, clamp, format_number, round_half_up, round_int


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

CATEGORY_WEIGHTS: dict[str, float] = {
    "gmb": 0.4,
    "reviews": 0.3,
    "seo": 0.2,
    "engagement": 0.1,
}

# Values at which each component earns its full points.
SCORE_TARGETS: dict[str, int] = {
    "posts_last_30_days": 4,
    "photos_count": 10,
    "questions_answered": 10,
    "total_reviews": 500,
    "new_reviews_last_30_days": 50,
    "website_clicks": 1000,
    "phone_calls": 500,
    "direction_requests": 200,
    "form_submissions": 100,
}

# Below these values a category emits an advisory detail.
DETAIL_THRESHOLDS: dict[str, float] = {
    "profile_completion": 100,
    "posts_last_30_days": 4,
    "photos_count": 10,
    "questions_answered": 10,
    "average_rating": 4.0,
    "total_reviews": 100,
    "response_rate": 90,
    "new_reviews_last_30_days": 10,
    "image_alt_tags_coverage": 90,
    "keyword_rank": 5,
    "website_clicks": 500,
    "phone_calls": 200,
    "direction_requests": 100,
    "form_submissions": 50,
}

MIN_CLICK_THROUGH_RATE = 3.0  # percent of impressions
MAX_RECOMMENDATIONS = 5
MAX_LISTED_KEYWORDS = 3
WORST_SCORED_RANK = 10


class LocalVisibilityScoreCalculator:
    """Stateless calculator for the Local Visibility Score.

    Each category is scored independently on a 0-100 scale and rounded, then
    the weighted sum is rounded again to produce the total.
    """

    @classmethod
    def calculate_score(cls, score_input: VisibilityScoreInput) -> VisibilityScoreBreakdown:
        """Calculate the overall Local Visibility Score.

        Args:
            score_input: Metrics for the four scored categories.

        Returns:
            A :class:`VisibilityScoreBreakdown` with the total, category
            scores, per-category details and recommendations.
        """
        gmb_score = cls.calculate_gmb_score(score_input.gmb)
        review_score = cls.calculate_review_score(score_input.reviews)
        seo_score = cls.calculate_local_seo_score(score_input.local_seo)
        engagement_score = cls.calculate_engagement_score(score_input.engagement)

        total_score = round_int(
            gmb_score * CATEGORY_WEIGHTS["gmb"]
            + review_score * CATEGORY_WEIGHTS["reviews"]
            + seo_score * CATEGORY_WEIGHTS["seo"]
            + engagement_score * CATEGORY_WEIGHTS["engagement"]
        )

        logger.debug(
            "Visibility score {} (gmb={}, reviews={}, seo={}, engagement={})",
            total_score, gmb_score, review_score, seo_score, engagement_score,
        )

        return VisibilityScoreBreakdown(
            total_score=total_score,
            gmb_score=gmb_score,
            review_score=review_score,
            seo_score=seo_score,
            engagement_score=engagement_score,
            breakdown={
                "gmb": CategoryBreakdown(gmb_score, cls.get_gmb_details(score_input.gmb)),
                "reviews": CategoryBreakdown(review_score, cls.get_review_details(score_input.reviews)),
                "seo": CategoryBreakdown(seo_score, cls.get_seo_details(score_input.local_seo)),
                "engagement": CategoryBreakdown(
                    engagement_score, cls.get_engagement_details(score_input.engagement)
                ),
            },
            recommendations=cls.generate_recommendations(score_input),
        )

    # ------------------------------------------------------------------
    # Category scores
    # ------------------------------------------------------------------

    @staticmethod
    def calculate_gmb_score(gmb: GMBMetrics) -> int:
        """Profile completion 30, posts 25, photos 25, Q&A 20."""
        score = clamp(gmb.profile_completion, 0, 100) * 0.3
        score += capped_ratio(gmb.posts_last_30_days, SCORE_TARGETS["posts_last_30_days"]) * 25
        score += capped_ratio(gmb.photos_count, SCORE_TARGETS["photos_count"]) * 25
        score += capped_ratio(gmb.questions_answered, SCORE_TARGETS["questions_answered"]) * 20
        return round_int(score)

    @staticmethod
    def calculate_review_score(reviews: ReviewMetrics) -> int:
        """Rating 40, volume 25, recency 20, response rate 15."""
        score = clamp(reviews.average_rating / 5) * 40
        score += capped_ratio(reviews.total_reviews, SCORE_TARGETS["total_reviews"]) * 25
        score += capped_ratio(
            reviews.new_reviews_last_30_days, SCORE_TARGETS["new_reviews_last_30_days"]
        ) * 20
        score += clamp(reviews.response_rate, 0, 100) * 0.15
        return round_int(score)

    @staticmethod
    def calculate_local_seo_score(seo: LocalSEOMetrics) -> int:
        """Basic elements 40, image alt tags 30, keyword rankings 30.

        With no tracked rankings the keyword component contributes nothing,
        so the category tops out at 70.
        """
        basic_elements = [seo.has_title, seo.has_description, seo.has_h1, seo.has_schema]
        score = (sum(1 for present in basic_elements if present) / len(basic_elements)) * 40
        score += clamp(seo.image_alt_tags_coverage, 0, 100) * 0.3

        if seo.local_keyword_rankings:
            ranks = [ranking.rank for ranking in seo.local_keyword_rankings]
            avg_rank = sum(ranks) / len(ranks)
            # Rank 1 earns full points, rank 10 and beyond earn none
            score += clamp((WORST_SCORED_RANK - avg_rank) / (WORST_SCORED_RANK - 1)) * 30

        return round_int(score)

    @staticmethod
    def calculate_engagement_score(engagement: EngagementMetrics) -> int:
        """Website clicks 40, calls 30, directions 20, forms 10."""
        score = capped_ratio(engagement.website_clicks, SCORE_TARGETS["website_clicks"]) * 40
        score += capped_ratio(engagement.phone_calls, SCORE_TARGETS["phone_calls"]) * 30
        score += capped_ratio(engagement.direction_requests, SCORE_TARGETS["direction_requests"]) * 20
        score += capped_ratio(engagement.form_submissions, SCORE_TARGETS["form_submissions"]) * 10
        return round_int(score)

    # ------------------------------------------------------------------
    # Category details
    # ------------------------------------------------------------------

    @staticmethod
    def get_gmb_details(gmb: GMBMetrics) -> tuple[str, ...]:
        details: list[str] = []

        if gmb.profile_completion < DETAIL_THRESHOLDS["profile_completion"]:
            details.append(
                f"Complete your GMB profile (currently {format_number(gmb.profile_completion)}%)"
            )
        if gmb.posts_last_30_days < DETAIL_THRESHOLDS["posts_last_30_days"]:
            details.append(
                f"Post more frequently ({format_number(gmb.posts_last_30_days)}/4 posts this month)"
            )
        if gmb.photos_count < DETAIL_THRESHOLDS["photos_count"]:
            details.append(f"Add more photos ({format_number(gmb.photos_count)}/10 minimum)")
        if gmb.questions_answered < DETAIL_THRESHOLDS["questions_answered"]:
            details.append(
                f"Answer more customer questions ({format_number(gmb.questions_answered)}/10)"
            )

        return tuple(details)

    @staticmethod
    def get_review_details(reviews: ReviewMetrics) -> tuple[str, ...]:
        details: list[str] = []

        if reviews.average_rating < DETAIL_THRESHOLDS["average_rating"]:
            rating = round_half_up(reviews.average_rating, 1)
            details.append(f"Improve customer satisfaction (current rating: {rating:.1f})")
        if reviews.total_reviews < DETAIL_THRESHOLDS["total_reviews"]:
            details.append(
                f"Encourage more reviews ({format_number(reviews.total_reviews)}/100 minimum)"
            )
        if reviews.response_rate < DETAIL_THRESHOLDS["response_rate"]:
            details.append(
                f"Respond to more reviews ({format_number(reviews.response_rate)}% response rate)"
            )
        if reviews.new_reviews_last_30_days < DETAIL_THRESHOLDS["new_reviews_last_30_days"]:
            details.append(
                "Generate more recent reviews "
                f"({format_number(reviews.new_reviews_last_30_days)} this month)"
            )

        return tuple(details)

    @staticmethod
    def get_seo_details(seo: LocalSEOMetrics) -> tuple[str, ...]:
        details: list[str] = []

        if not seo.has_title:
            details.append("Add a compelling page title")
        if not seo.has_description:
            details.append("Add a meta description")
        if not seo.has_h1:
            details.append("Include an H1 heading")
        if not seo.has_schema:
            details.append("Add structured data markup")

        if seo.image_alt_tags_coverage < DETAIL_THRESHOLDS["image_alt_tags_coverage"]:
            details.append(
                f"Optimize image alt tags ({format_number(seo.image_alt_tags_coverage)}% coverage)"
            )

        poor_rankings = [
            ranking.keyword
            for ranking in seo.local_keyword_rankings
            if ranking.rank > DETAIL_THRESHOLDS["keyword_rank"]
        ]
        if poor_rankings:
            details.append(
                f"Improve rankings for: {', '.join(poor_rankings[:MAX_LISTED_KEYWORDS])}"
            )

        return tuple(details)

    @staticmethod
    def get_engagement_details(engagement: EngagementMetrics) -> tuple[str, ...]:
        details: list[str] = []

        if engagement.website_clicks < DETAIL_THRESHOLDS["website_clicks"]:
            details.append("Increase website clicks from GMB")
        if engagement.phone_calls < DETAIL_THRESHOLDS["phone_calls"]:
            details.append("Generate more phone call leads")
        if engagement.direction_requests < DETAIL_THRESHOLDS["direction_requests"]:
            details.append("Encourage more direction requests")
        if engagement.form_submissions < DETAIL_THRESHOLDS["form_submissions"]:
            details.append("Improve form submission conversion")

        return tuple(details)

    # ------------------------------------------------------------------
    # Recommendations
    # ------------------------------------------------------------------

    @staticmethod
    def generate_recommendations(score_input: VisibilityScoreInput) -> tuple[str, ...]:
        """Return up to five actions, GMB first, then reviews, SEO, engagement."""
        gmb = score_input.gmb
        reviews = score_input.reviews
        seo = score_input.local_seo
        engagement = score_input.engagement

        recommendations: list[str] = []

        if gmb.profile_completion < DETAIL_THRESHOLDS["profile_completion"]:
            recommendations.append(
                "Complete your Google My Business profile to improve local visibility"
            )
        if gmb.posts_last_30_days < DETAIL_THRESHOLDS["posts_last_30_days"]:
            recommendations.append(
                "Post at least 4 times per month to keep your GMB profile active"
            )

        if reviews.response_rate < DETAIL_THRESHOLDS["response_rate"]:
            recommendations.append(
                "Respond to customer reviews within 24 hours to improve engagement"
            )
        if reviews.average_rating < DETAIL_THRESHOLDS["average_rating"]:
            recommendations.append("Focus on improving customer experience to boost ratings")

        if not seo.has_schema:
            recommendations.append(
                "Add structured data markup to help search engines understand your business"
            )
        if seo.image_alt_tags_coverage < DETAIL_THRESHOLDS["image_alt_tags_coverage"]:
            recommendations.append("Optimize image alt tags for better local SEO performance")

        # No impressions means no click-through rate to judge
        if gmb.impressions_last_30_days > 0:
            click_through = engagement.website_clicks / gmb.impressions_last_30_days * 100
            if click_through < MIN_CLICK_THROUGH_RATE:
                recommendations.append(
                    "Improve your GMB profile to increase click-through rates"
                )

        return tuple(recommendations[:MAX_RECOMMENDATIONS])


def calculate_score(score_input: VisibilityScoreInput) -> VisibilityScoreBreakdown:
    """Module-level shortcut for :meth:`LocalVisibilityScoreCalculator.calculate_score`."""
    return LocalVisibilityScoreCalculator.calculate_score(score_input)
