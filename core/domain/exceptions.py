"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class InvalidInputError(DomainException):
    """Raised when a required identity field is missing."""

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message, code="INVALID_INPUT")


class LicenseException(DomainException):
    """Base exception for license-related errors."""

    pass


class LicenseNotFoundError(LicenseException):
    """Raised when a license is not found."""

    def __init__(self, message: str = "License not found"):
        super().__init__(message, code="LICENSE_NOT_FOUND")


class LicenseAlreadyExistsError(LicenseException):
    """Raised when a license already exists for a key and player."""

    def __init__(self, message: str = "License already exists"):
        super().__init__(message, code="LICENSE_ALREADY_EXISTS")


class InvalidRefreshTokenError(LicenseException):
    """Raised when no license matches a refresh token."""

    def __init__(self, message: str = "Invalid refresh token"):
        super().__init__(message, code="INVALID_REFRESH_TOKEN")


class TrialAlreadyUsedError(LicenseException):
    """Raised when a player asks for a second trial license."""

    def __init__(self, message: str = "Trial already used"):
        super().__init__(message, code="TRIAL_ALREADY_USED")


class TokenException(DomainException):
    """Base exception for token verification failures."""

    pass


class TokenSignatureError(TokenException):
    """Raised when a token is malformed or its signature does not verify."""

    def __init__(self, message: str = "Token signature is invalid"):
        super().__init__(message, code="TOKEN_SIGNATURE_INVALID")


class TokenExpiredError(TokenException):
    """Raised when a correctly signed token is past its expiry."""

    def __init__(self, message: str = "Token has expired", payload=None):
        super().__init__(message, code="TOKEN_EXPIRED")
        self.payload = payload


class InfrastructureException(Exception):
    """Base exception for configuration and persistence failures."""

    def __init__(self, message: str, code: str = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ConfigurationError(InfrastructureException):
    """Raised when required configuration such as the signing secret is missing."""

    def __init__(self, message: str = "Service is not configured"):
        super().__init__(message, code="CONFIGURATION_ERROR")


class StoreIOError(InfrastructureException):
    """Raised when the record store cannot be read or written."""

    def __init__(self, message: str = "Record store is unavailable"):
        super().__init__(message, code="STORE_IO_ERROR")
