"""
ValidateTokenCommand.

Command to check a token, falling back to the refresh credential when the
token no longer verifies.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class ValidateTokenCommand:
    """
    Command to validate a token.

    This command may re-issue and persist a token, hence not a query.
    """

    token: str
    player_id: str
    refresh_token: Optional[str] = None
