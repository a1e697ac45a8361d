"""
Unit tests for core value objects.
"""
from datetime import datetime, timezone

from core.domain.clock import ensure_aware
from core.domain.value_objects import TokenPayload, TokenVerification, VerificationStatus


class TestTokenPayload:
    """Tests for TokenPayload value object."""

    def test_expiration_date(self):
        """Test conversion of the exp claim to an aware datetime."""
        payload = TokenPayload(
            license_key="K1", player_id="p1", issued_at=0, expires_at=1893456000
        )

        assert payload.expiration_date == datetime(2030, 1, 1, tzinfo=timezone.utc)

    def test_compared_by_value(self):
        """Test value equality."""
        first = TokenPayload(license_key="K1", player_id="p1", issued_at=1, expires_at=2)
        second = TokenPayload(license_key="K1", player_id="p1", issued_at=1, expires_at=2)

        assert first == second
        assert hash(first) == hash(second)


class TestTokenVerification:
    """Tests for TokenVerification value object."""

    def test_is_valid(self):
        """Test that only the VALID status counts as valid."""
        assert TokenVerification(status=VerificationStatus.VALID).is_valid is True
        assert TokenVerification(status=VerificationStatus.EXPIRED).is_valid is False
        assert TokenVerification(status=VerificationStatus.MALFORMED).is_valid is False

    def test_status_str(self):
        """Test status string form."""
        assert str(VerificationStatus.EXPIRED) == "expired"


def test_ensure_aware():
    """Test that naive datetimes are read as UTC and aware ones kept."""
    naive = datetime(2030, 1, 1)
    aware = datetime(2030, 1, 1, tzinfo=timezone.utc)

    assert ensure_aware(naive) == aware
    assert ensure_aware(aware) is aware
