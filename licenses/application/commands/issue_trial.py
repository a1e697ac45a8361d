"""
IssueTrialCommand.

Command to grant a player their one trial license.
"""
from dataclasses import dataclass


@dataclass
class IssueTrialCommand:
    """Command to issue a trial license."""

    player_id: str
