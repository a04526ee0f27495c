"""
Business Health Analytics
=========================

Scoring engines behind the multi-location business dashboard: the Local
Visibility Score calculator and the review Sentiment Trend analyzer.
"""

__version__ = "1.0.0"
__author__ = "Business Health Team"

from business_health.core.sentiment import SentimentAnalyzer
from business_health.core.visibility import LocalVisibilityScoreCalculator
from business_health.engine.report import HealthReport, build_health_report

__all__ = [
    "LocalVisibilityScoreCalculator",
    "SentimentAnalyzer",
    "HealthReport",
    "build_health_report",
]
