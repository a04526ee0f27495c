"""Tests for the Local Visibility Score calculator."""

from dataclasses import replace

import pytest

from business_health.core.models import (
    EngagementMetrics,
    GMBMetrics,
    KeywordRanking,
    LocalSEOMetrics,
    ReviewMetrics,
    VisibilityScoreInput,
)
from business_health.core.visibility import LocalVisibilityScoreCalculator, calculate_score


class TestCalculateScore:
    """Tests for the weighted total and category scores."""

    def test_sample_data_scores(self, sample_input):
        """Test pinned scores for the sample location."""
        result = calculate_score(sample_input)

        assert result.gmb_score == 85
        assert result.review_score == 54
        assert result.seo_score == 87
        assert result.engagement_score == 96
        assert result.total_score == 77

    def test_breakdown_matches_category_scores(self, sample_input):
        """Test breakdown entries mirror the category scores."""
        result = calculate_score(sample_input)

        assert set(result.breakdown) == {"gmb", "reviews", "seo", "engagement"}
        assert result.breakdown["gmb"].score == result.gmb_score
        assert result.breakdown["reviews"].score == result.review_score
        assert result.breakdown["seo"].score == result.seo_score
        assert result.breakdown["engagement"].score == result.engagement_score

    def test_all_targets_score_100(self, target_input):
        """Test that metrics at every target yield a perfect score."""
        result = calculate_score(target_input)

        assert result.total_score == 100
        assert result.gmb_score == 100
        assert result.review_score == 100
        assert result.seo_score == 100
        assert result.engagement_score == 100

    def test_above_targets_still_100(self, target_input):
        """Test that exceeding targets does not push scores past 100."""
        boosted = replace(
            target_input,
            gmb=replace(target_input.gmb, posts_last_30_days=40, photos_count=400),
            engagement=EngagementMetrics(
                website_clicks=50000,
                phone_calls=9000,
                direction_requests=7000,
                form_submissions=3000,
            ),
        )

        result = calculate_score(boosted)
        assert result.total_score == 100
        assert result.engagement_score == 100

    def test_all_zero_scores_0(self, zero_input):
        """Test that an empty listing scores zero with details everywhere."""
        result = calculate_score(zero_input)

        assert result.total_score == 0
        for category in result.breakdown.values():
            assert category.score == 0
            assert len(category.details) > 0

    def test_malformed_inputs_are_clamped(self, target_input):
        """Test that out-of-range values keep every score within 0-100."""
        malformed = VisibilityScoreInput(
            gmb=GMBMetrics(
                profile_completion=250,
                posts_last_30_days=-3,
                photos_count=10**6,
                questions_answered=-1,
                impressions_last_30_days=-10,
                ctr=-1,
            ),
            reviews=ReviewMetrics(
                average_rating=9.0,
                total_reviews=-20,
                new_reviews_last_30_days=10**5,
                response_rate=400,
                response_time=-2,
            ),
            local_seo=LocalSEOMetrics(
                has_title=True,
                has_description=True,
                has_h1=True,
                has_schema=True,
                image_alt_tags_coverage=500,
                local_keyword_rankings=(KeywordRanking("zero", 0), KeywordRanking("neg", -5)),
            ),
            engagement=EngagementMetrics(
                website_clicks=-1,
                phone_calls=-1,
                direction_requests=-1,
                form_submissions=-1,
            ),
        )

        result = calculate_score(malformed)

        assert 0 <= result.total_score <= 100
        for category in result.breakdown.values():
            assert 0 <= category.score <= 100
        assert result.seo_score == 100
        assert result.engagement_score == 0

    def test_two_stage_rounding_rounds_half_up(self, zero_input):
        """Test that a category landing on .5 rounds up (2 posts -> 12.5 -> 13)."""
        gmb = replace(zero_input.gmb, posts_last_30_days=2)
        assert LocalVisibilityScoreCalculator.calculate_gmb_score(gmb) == 13

    def test_total_uses_rounded_category_scores(self, zero_input):
        """Test the weighted sum is built from already rounded categories."""
        score_input = replace(zero_input, gmb=replace(zero_input.gmb, posts_last_30_days=2))
        result = calculate_score(score_input)

        # 13 * 0.4 = 5.2 -> 5
        assert result.gmb_score == 13
        assert result.total_score == 5


class TestLocalSEOScore:
    """Tests for the SEO category."""

    def test_no_rankings_caps_category_at_70(self, target_input):
        """Test that missing rankings contribute nothing instead of being skipped."""
        seo = replace(target_input.local_seo, local_keyword_rankings=())
        assert LocalVisibilityScoreCalculator.calculate_local_seo_score(seo) == 70

    def test_rank_ten_or_worse_earns_no_keyword_points(self, zero_input):
        """Test that an average rank of 10+ adds no keyword points."""
        seo = replace(zero_input.local_seo, local_keyword_rankings=(KeywordRanking("far", 12),))
        assert LocalVisibilityScoreCalculator.calculate_local_seo_score(seo) == 0

    def test_average_rank_is_used(self, zero_input):
        """Test keyword points from the mean rank ((10 - 4) / 9 * 30 = 20)."""
        seo = replace(
            zero_input.local_seo,
            local_keyword_rankings=(KeywordRanking("a", 1), KeywordRanking("b", 7)),
        )
        assert LocalVisibilityScoreCalculator.calculate_local_seo_score(seo) == 20

    def test_basic_elements_count(self, zero_input):
        """Test each basic element is worth 10 points."""
        seo = replace(zero_input.local_seo, has_title=True, has_h1=True)
        assert LocalVisibilityScoreCalculator.calculate_local_seo_score(seo) == 20


class TestDetails:
    """Tests for per-category advisory details."""

    def test_sample_gmb_details(self, sample_input):
        """Test GMB details for the sample location."""
        details = calculate_score(sample_input).breakdown["gmb"].details

        assert details == (
            "Complete your GMB profile (currently 85%)",
            "Post more frequently (3/4 posts this month)",
            "Answer more customer questions (8/10)",
        )

    def test_sample_review_details(self, sample_input):
        """Test review details for the sample location."""
        details = calculate_score(sample_input).breakdown["reviews"].details
        assert details == ("Encourage more reviews (4/100 minimum)",)

    def test_sample_seo_details(self, sample_input):
        """Test that only keywords ranked worse than 5 are listed."""
        details = calculate_score(sample_input).breakdown["seo"].details
        assert details == ("Improve rankings for: pg near tech park",)

    def test_sample_engagement_details_empty(self, sample_input):
        """Test that healthy engagement produces no details."""
        assert calculate_score(sample_input).breakdown["engagement"].details == ()

    def test_poor_rankings_list_at_most_three(self, target_input):
        """Test that only the first three poorly ranked keywords are named."""
        seo = replace(
            target_input.local_seo,
            local_keyword_rankings=tuple(
                KeywordRanking(f"kw{i}", 8) for i in range(1, 6)
            ),
        )
        details = LocalVisibilityScoreCalculator.get_seo_details(seo)
        assert details == ("Improve rankings for: kw1, kw2, kw3",)

    def test_rating_detail_uses_one_decimal(self, sample_input):
        """Test rating formatting in the review detail."""
        reviews = replace(sample_input.reviews, average_rating=3.46)
        details = LocalVisibilityScoreCalculator.get_review_details(reviews)
        assert "Improve customer satisfaction (current rating: 3.5)" in details

    def test_rating_detail_rounds_half_up(self, sample_input):
        """Test a rating of 3.25 displays as 3.3."""
        reviews = replace(sample_input.reviews, average_rating=3.25)
        details = LocalVisibilityScoreCalculator.get_review_details(reviews)
        assert "Improve customer satisfaction (current rating: 3.3)" in details

    def test_zero_input_seo_details(self, zero_input):
        """Test one detail per missing element plus alt tags."""
        details = calculate_score(zero_input).breakdown["seo"].details
        assert details == (
            "Add a compelling page title",
            "Add a meta description",
            "Include an H1 heading",
            "Add structured data markup",
            "Optimize image alt tags (0% coverage)",
        )


class TestRecommendations:
    """Tests for prioritized recommendations."""

    def test_sample_recommendations(self, sample_input):
        """Test recommendations for the sample location in fixed order."""
        recs = calculate_score(sample_input).recommendations

        assert recs == (
            "Complete your Google My Business profile to improve local visibility",
            "Post at least 4 times per month to keep your GMB profile active",
            "Improve your GMB profile to increase click-through rates",
        )

    def test_recommendations_truncated_to_five(self, zero_input):
        """Test that only the first five triggered recommendations are kept."""
        recs = calculate_score(zero_input).recommendations

        assert len(recs) == 5
        assert recs[-1] == (
            "Add structured data markup to help search engines understand your business"
        )
        assert "Optimize image alt tags for better local SEO performance" not in recs

    def test_no_recommendations_at_target(self, target_input):
        """Test that a healthy location gets no recommendations."""
        assert calculate_score(target_input).recommendations == ()

    def test_zero_impressions_skips_click_through_check(self, target_input):
        """Test division by zero impressions does not trigger a recommendation."""
        score_input = replace(
            target_input, gmb=replace(target_input.gmb, impressions_last_30_days=0)
        )
        assert calculate_score(score_input).recommendations == ()

    @pytest.mark.parametrize("clicks,expected", [(20, True), (50, False)])
    def test_click_through_threshold(self, target_input, clicks, expected):
        """Test the 3% click-through cut-off."""
        score_input = replace(
            target_input,
            gmb=replace(target_input.gmb, impressions_last_30_days=1000),
            engagement=replace(target_input.engagement, website_clicks=clicks),
        )
        recs = calculate_score(score_input).recommendations
        assert ("Improve your GMB profile to increase click-through rates" in recs) is expected


class TestToDict:
    """Tests for JSON conversion."""

    def test_to_dict_is_plain(self, sample_input):
        """Test the dict form uses lists and nested dicts."""
        data = calculate_score(sample_input).to_dict()

        assert data["total_score"] == 77
        assert data["breakdown"]["seo"] == {
            "score": 87,
            "details": ["Improve rankings for: pg near tech park"],
        }
        assert isinstance(data["recommendations"], list)
