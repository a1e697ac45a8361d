"""
License DTOs returned by the lifecycle engine.

Every result is tagged: ``success`` tells the caller whether the operation
went through, and a failed result carries the domain error's message and
code instead of raising.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from core.domain.exceptions import DomainException
from licenses.domain.license_record import LicenseRecord


@dataclass
class OperationResult:
    """Base for tagged lifecycle results."""

    success: bool
    message: Optional[str] = None
    code: Optional[str] = None

    @classmethod
    def failure(cls, exc: DomainException):
        """Build a failed result from a domain exception."""
        return cls(success=False, message=exc.message, code=exc.code)


@dataclass
class CreateLicenseResult(OperationResult):
    """Result of creating a license."""

    token: Optional[str] = None
    refresh_token: Optional[str] = None
    expiration_date: Optional[datetime] = None


@dataclass
class LicenseValidationResult(OperationResult):
    """Result of validating a license key for a player."""

    token: Optional[str] = None
    refresh_token: Optional[str] = None
    expiration_date: Optional[datetime] = None


@dataclass
class TokenValidationResult(OperationResult):
    """
    Result of validating a token.

    ``expired`` is True when the token failed verification and a new one
    was issued from the refresh credential.
    """

    expired: bool = False
    new_token: Optional[str] = None
    player_id: Optional[str] = None
    support_devs: Optional[str] = None
    announcement: Optional[str] = None


@dataclass
class TokenRefreshResult(OperationResult):
    """Result of refreshing a token."""

    token: Optional[str] = None


@dataclass
class UpdateLicenseResult(OperationResult):
    """Result of updating a license."""

    new_token: Optional[str] = None
    new_refresh_token: Optional[str] = None
    new_expiration_date: Optional[datetime] = None


@dataclass
class DeleteLicenseResult(OperationResult):
    """Result of deleting a license."""


@dataclass
class TrialResult(OperationResult):
    """Result of issuing a trial license."""

    trial_key: Optional[str] = None
    token: Optional[str] = None
    expiration_date: Optional[datetime] = None


@dataclass
class LicenseListResult:
    """Full dump of license records."""

    count: int
    licenses: List[LicenseRecord] = field(default_factory=list)
