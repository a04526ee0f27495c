"""Report composition for the dashboard."""

from business_health.engine.report import HealthReport, build_health_report, export_report, print_report

__all__ = ["HealthReport", "build_health_report", "export_report", "print_report"]
