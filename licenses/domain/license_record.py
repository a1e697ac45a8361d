"""
License record domain entity.

A license record binds a license key to a player together with the
credential pair (signed token + refresh token) currently issued for them.
It is independent of infrastructure.
"""
import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional

TRIAL_KEY_PREFIX = "TRIAL-"


@dataclass(frozen=True)
class LicenseRecord:
    """
    License record domain entity.

    Immutable; every mutation returns a new instance with the same id.
    """

    id: uuid.UUID
    license_key: str
    player_id: str
    token: str
    refresh_token: str
    expiration_date: datetime
    created_at: datetime

    def __post_init__(self):
        """Validate license record."""
        if not self.license_key:
            raise ValueError("License key is required")
        if not self.player_id:
            raise ValueError("Player ID is required")
        if self.expiration_date.tzinfo is None:
            raise ValueError("Expiration date must be timezone-aware")

    @classmethod
    def create(
        cls,
        license_key: str,
        player_id: str,
        token: str,
        refresh_token: str,
        expiration_date: datetime,
        record_id: Optional[uuid.UUID] = None,
        created_at: Optional[datetime] = None,
    ) -> "LicenseRecord":
        """
        Create a new LicenseRecord entity.

        Args:
            license_key: License key string
            player_id: Owning player identifier
            token: Signed credential
            refresh_token: Opaque refresh credential
            expiration_date: Instant after which the token is invalid
            record_id: Optional UUID (generated if not provided)
            created_at: Optional insertion instant (defaults to now)

        Returns:
            LicenseRecord entity instance
        """
        return cls(
            id=record_id or uuid.uuid4(),
            license_key=license_key,
            player_id=player_id,
            token=token,
            refresh_token=refresh_token,
            expiration_date=expiration_date,
            created_at=created_at or datetime.now(timezone.utc),
        )

    @property
    def is_trial(self) -> bool:
        """Whether this record was issued by the trial policy."""
        return self.license_key.startswith(TRIAL_KEY_PREFIX)

    def matches(self, license_key: str, player_id: str) -> bool:
        return self.license_key == license_key and self.player_id == player_id

    def with_token(self, token: str) -> "LicenseRecord":
        """
        Return a copy carrying a re-issued token.

        The refresh token and expiration date are left untouched.
        """
        return replace(self, token=token)

    def rotate(
        self,
        license_key: str,
        expiration_date: datetime,
        token: str,
        refresh_token: str,
    ) -> "LicenseRecord":
        """
        Return a copy with new key/expiry and a fully rotated credential pair.

        The token must have been issued for the new key and expiry.
        """
        return replace(
            self,
            license_key=license_key,
            expiration_date=expiration_date,
            token=token,
            refresh_token=refresh_token,
        )
