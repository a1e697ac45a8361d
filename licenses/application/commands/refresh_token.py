"""
RefreshTokenCommand.

Command to re-issue a token from a refresh credential.
"""
from dataclasses import dataclass


@dataclass
class RefreshTokenCommand:
    """Command to refresh a token."""

    refresh_token: str
