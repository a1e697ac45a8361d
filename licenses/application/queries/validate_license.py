"""
ValidateLicenseQuery.

Query to look up the credentials stored for a license key and player.
"""
from dataclasses import dataclass


@dataclass
class ValidateLicenseQuery:
    """Query to validate a license key for a player."""

    license_key: str
    player_id: str
