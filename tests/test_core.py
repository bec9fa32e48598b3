"""Tests for settings and the exception hierarchy."""

import pytest

from s3_cadence.core.config import Settings
from s3_cadence.core.exceptions import (
    ListingServiceError,
    ProtocolViolationError,
    S3CadenceError,
    TimestampParseError,
    ValidationError,
)


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        """Test default values."""
        monkeypatch.delenv("S3_CADENCE_MAX_PAGES", raising=False)
        monkeypatch.delenv("S3_CADENCE_LOG_LEVEL", raising=False)

        settings = Settings()

        assert settings.log_level == "WARNING"
        assert settings.otel_enabled is False
        assert settings.max_pages is None

    def test_env_override(self, monkeypatch):
        """Test S3_CADENCE_ variables override defaults."""
        monkeypatch.setenv("S3_CADENCE_MAX_PAGES", "50")
        monkeypatch.setenv("s3_cadence_log_level", "debug")

        settings = Settings()

        assert settings.max_pages == 50
        assert settings.log_level == "debug"


class TestExceptions:
    """Test the exception hierarchy."""

    @pytest.mark.parametrize(
        "exc_type",
        [ValidationError, ListingServiceError, ProtocolViolationError],
    )
    def test_hierarchy(self, exc_type):
        """Test every error derives from S3CadenceError."""
        assert issubclass(exc_type, S3CadenceError)

    def test_timestamp_parse_error_message(self):
        """Test the offending value and reason appear in the message."""
        error = TimestampParseError("bogus", "bad format")

        assert isinstance(error, S3CadenceError)
        assert error.value == "bogus"
        assert str(error) == "Invalid last-modified timestamp 'bogus': bad format"
