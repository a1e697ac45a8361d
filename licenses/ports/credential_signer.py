"""
Credential signer port (interface).

Produces and verifies signed, time-bounded license tokens.
"""
from abc import ABC, abstractmethod
from datetime import datetime

from core.domain.exceptions import TokenExpiredError, TokenSignatureError
from core.domain.value_objects import (
    TokenPayload,
    TokenVerification,
    VerificationStatus,
)


class CredentialSigner(ABC):
    """Abstract signer for license tokens."""

    @abstractmethod
    def issue(self, player_id: str, license_key: str, expiration_date: datetime) -> str:
        """
        Issue a signed token.

        Args:
            player_id: Player identifier
            license_key: License key string
            expiration_date: Instant the token stops being valid

        Returns:
            Signed token string

        Raises:
            ConfigurationError: If no signing secret is configured
        """
        pass

    @abstractmethod
    def decode(self, token: str) -> TokenPayload:
        """
        Verify a token and return its claims.

        Args:
            token: Signed token string

        Returns:
            TokenPayload

        Raises:
            TokenExpiredError: If the signature is good but the token expired
            TokenSignatureError: If the token is malformed or tampered with
        """
        pass

    def verify(self, token: str) -> TokenVerification:
        """
        Verify a token without raising.

        Returns:
            TokenVerification with status VALID, EXPIRED or MALFORMED
        """
        try:
            payload = self.decode(token)
        except TokenExpiredError as e:
            return TokenVerification(
                status=VerificationStatus.EXPIRED, payload=e.payload
            )
        except TokenSignatureError:
            return TokenVerification(status=VerificationStatus.MALFORMED)
        return TokenVerification(status=VerificationStatus.VALID, payload=payload)
