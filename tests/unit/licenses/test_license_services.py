"""
Unit tests for license domain services.
"""

import uuid
from datetime import datetime, timezone

import pytest

from licenses.domain.license_record import LicenseRecord
from licenses.domain.services import RefreshTokenGenerator, TrialPolicy


def make_record(license_key, player_id):
    return LicenseRecord.create(
        license_key=license_key,
        player_id=player_id,
        token="token",
        refresh_token=str(uuid.uuid4()),
        expiration_date=datetime(2030, 1, 1, tzinfo=timezone.utc),
    )


class TestRefreshTokenGenerator:
    """Tests for RefreshTokenGenerator."""

    def test_generate_is_uuid4(self):
        """Test that refresh tokens are canonical UUID4 strings."""
        token = RefreshTokenGenerator.generate()

        parsed = uuid.UUID(token)
        assert str(parsed) == token
        assert parsed.version == 4

    def test_generate_unique(self):
        """Test that refresh tokens do not repeat."""
        tokens = {RefreshTokenGenerator.generate() for _ in range(100)}

        assert len(tokens) == 100


class TestTrialPolicy:
    """Tests for TrialPolicy."""

    def test_make_trial_key(self):
        """Test trial key format."""
        key = TrialPolicy.make_trial_key()

        assert key.startswith("TRIAL-")
        uuid.UUID(key[len("TRIAL-"):])

    def test_has_used_trial(self):
        """Test detection of a previous trial."""
        records = [make_record("K1", "p1"), make_record("TRIAL-abc", "p1")]

        assert TrialPolicy.has_used_trial(records, "p1") is True
        assert TrialPolicy.has_used_trial(records, "p2") is False

    def test_regular_license_does_not_count_as_trial(self):
        """Test that a non-trial license leaves the player eligible."""
        assert TrialPolicy.has_used_trial([make_record("K1", "p1")], "p1") is False

    def test_expiration_adds_calendar_years(self):
        """Test default trial duration."""
        now = datetime(2025, 6, 1, 12, 30, tzinfo=timezone.utc)

        assert TrialPolicy().expiration_from(now) == datetime(
            2035, 6, 1, 12, 30, tzinfo=timezone.utc
        )

    def test_expiration_from_leap_day(self):
        """Test that February 29 falls back to February 28."""
        now = datetime(2024, 2, 29, tzinfo=timezone.utc)

        assert TrialPolicy(duration_years=1).expiration_from(now) == datetime(
            2025, 2, 28, tzinfo=timezone.utc
        )

    def test_invalid_duration(self):
        """Test that a duration below one year is rejected."""
        with pytest.raises(ValueError):
            TrialPolicy(duration_years=0)
