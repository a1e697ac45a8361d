"""
Unit tests for LicenseRecord domain entity.
"""

import uuid
from datetime import datetime, timezone

import pytest

from licenses.domain.license_record import TRIAL_KEY_PREFIX, LicenseRecord


def make_record(**overrides):
    values = {
        "license_key": "K1",
        "player_id": "p1",
        "token": "token-1",
        "refresh_token": "refresh-1",
        "expiration_date": datetime(2030, 1, 1, tzinfo=timezone.utc),
    }
    values.update(overrides)
    return LicenseRecord.create(**values)


class TestLicenseRecord:
    """Tests for LicenseRecord domain entity."""

    def test_create_record(self):
        """Test creating a license record."""
        record = make_record()

        assert isinstance(record.id, uuid.UUID)
        assert record.license_key == "K1"
        assert record.player_id == "p1"
        assert record.token == "token-1"
        assert record.refresh_token == "refresh-1"
        assert record.created_at.tzinfo is not None

    def test_create_record_keeps_given_id(self):
        """Test that an explicit id is kept."""
        record_id = uuid.uuid4()

        assert make_record(record_id=record_id).id == record_id

    def test_missing_license_key_rejected(self):
        """Test that an empty license key is rejected."""
        with pytest.raises(ValueError, match="License key is required"):
            make_record(license_key="")

    def test_missing_player_rejected(self):
        """Test that an empty player id is rejected."""
        with pytest.raises(ValueError, match="Player ID is required"):
            make_record(player_id="")

    def test_naive_expiration_rejected(self):
        """Test that a naive expiration date is rejected."""
        with pytest.raises(ValueError, match="timezone-aware"):
            make_record(expiration_date=datetime(2030, 1, 1))

    def test_is_trial(self):
        """Test trial detection by key prefix."""
        assert make_record(license_key=f"{TRIAL_KEY_PREFIX}abc").is_trial is True
        assert make_record(license_key="K1").is_trial is False

    def test_matches(self):
        """Test pair matching."""
        record = make_record()

        assert record.matches("K1", "p1") is True
        assert record.matches("K1", "p2") is False
        assert record.matches("K2", "p1") is False

    def test_with_token_keeps_other_fields(self):
        """Test that re-issuing a token touches nothing else."""
        record = make_record()

        reissued = record.with_token("token-2")

        assert reissued.token == "token-2"
        assert reissued.id == record.id
        assert reissued.refresh_token == record.refresh_token
        assert reissued.expiration_date == record.expiration_date
        assert record.token == "token-1"

    def test_rotate_replaces_credentials(self):
        """Test that rotation replaces key, expiry and both credentials."""
        record = make_record()
        new_expiry = datetime(2031, 1, 1, tzinfo=timezone.utc)

        rotated = record.rotate(
            license_key="K2",
            expiration_date=new_expiry,
            token="token-2",
            refresh_token="refresh-2",
        )

        assert rotated.id == record.id
        assert rotated.player_id == "p1"
        assert rotated.license_key == "K2"
        assert rotated.expiration_date == new_expiry
        assert rotated.token == "token-2"
        assert rotated.refresh_token == "refresh-2"
