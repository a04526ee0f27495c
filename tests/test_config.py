"""Tests for environment-driven settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from business_health.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run each test away from any local .env file and overrides."""
    monkeypatch.chdir(tmp_path)
    for name in ("LOG_LEVEL", "DEFAULT_SENTIMENT_PERIOD", "LOCATION_NAME", "REPORT_OUTPUT_DIR"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = get_settings()

        assert settings.log_level == "INFO"
        assert settings.default_sentiment_period == 6
        assert settings.location_name == "All Locations"
        assert settings.report_output_dir == Path("reports")

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_SENTIMENT_PERIOD", "3")
        monkeypatch.setenv("LOCATION_NAME", "Colive 918 Cape Town")
        monkeypatch.setenv("REPORT_OUTPUT_DIR", "out/reports")

        settings = get_settings()

        assert settings.default_sentiment_period == 3
        assert settings.location_name == "Colive 918 Cape Town"
        assert settings.report_output_dir == Path("out/reports")

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("LOG_LEVEL=DEBUG\n", encoding="utf-8")
        assert Settings().log_level == "DEBUG"

    @pytest.mark.parametrize("value", ["0", "7"])
    def test_period_out_of_range(self, monkeypatch, value):
        monkeypatch.setenv("DEFAULT_SENTIMENT_PERIOD", value)

        with pytest.raises(ValidationError):
            get_settings()
