"""
CreateLicenseCommand.

Command to issue a license key to a player.
"""
from dataclasses import dataclass
from datetime import datetime


@dataclass
class CreateLicenseCommand:
    """
    Command to create a license record.

    A fresh token and refresh token are minted for the pair.
    """

    player_id: str
    license_key: str
    expiration_date: datetime
