"""
DeleteLicenseCommand.

Command to revoke a license by removing its record.
"""
from dataclasses import dataclass


@dataclass
class DeleteLicenseCommand:
    """Command to delete a license."""

    license_key: str
    player_id: str
