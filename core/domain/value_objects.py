"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from abc import ABC
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


class VerificationStatus(Enum):
    """Outcome of verifying a signed token."""

    VALID = "valid"
    EXPIRED = "expired"
    MALFORMED = "malformed"

    def __str__(self) -> str:
        """Return status as string."""
        return self.value


@dataclass(frozen=True)
class TokenPayload(ValueObject):
    """Claims carried by a license token."""

    license_key: str
    player_id: str
    issued_at: int
    expires_at: int

    @property
    def expiration_date(self) -> datetime:
        """Expiry claim as an aware UTC datetime."""
        return datetime.fromtimestamp(self.expires_at, tz=timezone.utc)


@dataclass(frozen=True)
class TokenVerification(ValueObject):
    """Result of verifying a token: status plus payload when decodable."""

    status: VerificationStatus
    payload: Optional[TokenPayload] = None

    @property
    def is_valid(self) -> bool:
        return self.status == VerificationStatus.VALID
