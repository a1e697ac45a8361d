"""
UpdateLicenseCommand.

Command to change a license's key and/or expiration and rotate its credentials.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class UpdateLicenseCommand:
    """
    Command to update a license.

    Empty or missing new values keep the current ones.
    """

    player_id: str
    license_key: str
    new_license_key: Optional[str] = None
    new_expiration_date: Optional[datetime] = None
