"""
PyJWT implementation of CredentialSigner port.

Tokens are HS256 JWTs carrying ``licenseKey``, ``playerId``, ``iat`` and
``exp`` claims. Expiry is checked against the injected clock rather than
PyJWT's wall-clock check.
"""
import logging
import math
from datetime import datetime

import jwt

from core.domain.clock import Clock, utc_now
from core.domain.exceptions import (
    ConfigurationError,
    TokenExpiredError,
    TokenSignatureError,
)
from core.domain.value_objects import TokenPayload
from licenses.ports.credential_signer import CredentialSigner

logger = logging.getLogger(__name__)

REQUIRED_CLAIMS = ["licenseKey", "playerId", "iat", "exp"]


class JWTCredentialSigner(CredentialSigner):
    """
    JWT signer backed by a process-wide symmetric secret.

    Stateless apart from its configuration; safe to share between threads.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", clock: Clock = utc_now):
        """
        Initialize signer.

        Args:
            secret: Symmetric signing secret
            algorithm: HMAC algorithm understood by PyJWT
            clock: Source of the current instant
        """
        self._secret = secret
        self._algorithm = algorithm
        self._clock = clock

    def _require_secret(self) -> str:
        if not self._secret:
            raise ConfigurationError("License signing secret is not configured")
        return self._secret

    def issue(self, player_id: str, license_key: str, expiration_date: datetime) -> str:
        """Issue a signed token for a player and license key."""
        secret = self._require_secret()
        payload = {
            "licenseKey": license_key,
            "playerId": player_id,
            "iat": math.floor(self._clock().timestamp()),
            "exp": math.floor(expiration_date.timestamp()),
        }
        return jwt.encode(payload, secret, algorithm=self._algorithm)

    def decode(self, token: str) -> TokenPayload:
        """Verify signature and expiry, returning the token claims."""
        secret = self._require_secret()
        try:
            claims = jwt.decode(
                token,
                secret,
                algorithms=[self._algorithm],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": REQUIRED_CLAIMS,
                },
            )
        except jwt.InvalidTokenError as e:
            logger.debug("Token rejected: %s", e)
            raise TokenSignatureError() from e

        if not isinstance(claims["exp"], int) or not isinstance(claims["iat"], int):
            raise TokenSignatureError("Token timestamps are not integers")

        payload = TokenPayload(
            license_key=claims["licenseKey"],
            player_id=claims["playerId"],
            issued_at=claims["iat"],
            expires_at=claims["exp"],
        )
        if self._clock().timestamp() >= payload.expires_at:
            raise TokenExpiredError(payload=payload)
        return payload
