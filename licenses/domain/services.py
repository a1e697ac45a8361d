"""
License domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity.
"""
import uuid
from datetime import datetime
from typing import List

from licenses.domain.license_record import TRIAL_KEY_PREFIX, LicenseRecord


class RefreshTokenGenerator:
    """Domain service for refresh credential generation."""

    @staticmethod
    def generate() -> str:
        """
        Generate a refresh token.

        Returns:
            Canonical textual form of a random UUID4
        """
        return str(uuid.uuid4())


class TrialPolicy:
    """Domain service deciding trial eligibility, keys and duration."""

    def __init__(self, duration_years: int = 10):
        if duration_years < 1:
            raise ValueError("Trial duration must be at least one year")
        self.duration_years = duration_years

    @staticmethod
    def make_trial_key() -> str:
        """Synthesize a trial license key with a fresh unique suffix."""
        return f"{TRIAL_KEY_PREFIX}{RefreshTokenGenerator.generate()}"

    @staticmethod
    def has_used_trial(records: List[LicenseRecord], player_id: str) -> bool:
        """Whether any of the player's records is a trial."""
        return any(
            record.player_id == player_id and record.is_trial for record in records
        )

    def expiration_from(self, now: datetime) -> datetime:
        """
        Compute the trial expiration date.

        Adds calendar years; February 29 falls back to February 28 when the
        target year is not a leap year.
        """
        year = now.year + self.duration_years
        try:
            return now.replace(year=year)
        except ValueError:
            return now.replace(year=year, day=28)
