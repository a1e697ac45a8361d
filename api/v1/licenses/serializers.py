"""
Serializers for License API endpoints.

Field names follow the wire format of the license clients (camelCase).
"""

from rest_framework import serializers


class CreateLicenseRequestSerializer(serializers.Serializer):
    """Serializer for create license request."""

    playerId = serializers.CharField(max_length=255)
    licenseKey = serializers.CharField(max_length=255)
    expirationDate = serializers.DateTimeField()


class LicensePairRequestSerializer(serializers.Serializer):
    """Serializer for requests addressing a (license key, player) pair."""

    licenseKey = serializers.CharField(max_length=255)
    playerId = serializers.CharField(max_length=255)


class ValidateTokenRequestSerializer(serializers.Serializer):
    """
    Serializer for validate token request.

    The token may be empty: a client holding only its refresh token still
    gets a new token through the refresh fallback.
    """

    token = serializers.CharField(required=False, allow_blank=True, default="")
    refreshToken = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, default=None
    )
    playerId = serializers.CharField(max_length=255)


class RefreshTokenRequestSerializer(serializers.Serializer):
    """Serializer for refresh token request."""

    refreshToken = serializers.CharField()


class UpdateLicenseRequestSerializer(serializers.Serializer):
    """
    Serializer for update license request.

    Empty new values are accepted and mean "keep the current value".
    """

    playerId = serializers.CharField(max_length=255)
    licenseKey = serializers.CharField(max_length=255)
    newLicenseKey = serializers.CharField(
        max_length=255, required=False, allow_blank=True, allow_null=True, default=None
    )
    newExpirationDate = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, default=None
    )

    def validate_newExpirationDate(self, value):
        """Parse a non-empty expiration date; empty stays None."""
        if not value:
            return None
        return serializers.DateTimeField().to_internal_value(value)


class TrialRequestSerializer(serializers.Serializer):
    """Serializer for trial request; a missing player is reported by the engine."""

    playerId = serializers.CharField(
        max_length=255, required=False, allow_blank=True, allow_null=True, default=None
    )


class FailureResponseSerializer(serializers.Serializer):
    """Serializer for a refused license operation."""

    valid = serializers.BooleanField(source="success")
    message = serializers.CharField()


class MessageResponseSerializer(serializers.Serializer):
    """Serializer for a message-only response."""

    message = serializers.CharField()


class CreateLicenseResponseSerializer(serializers.Serializer):
    """Serializer for create license response."""

    message = serializers.CharField()
    token = serializers.CharField()
    refreshToken = serializers.CharField(source="refresh_token")
    expirationDate = serializers.DateTimeField(source="expiration_date")


class LicenseValidationResponseSerializer(serializers.Serializer):
    """Serializer for validate license response."""

    valid = serializers.BooleanField(source="success")
    token = serializers.CharField()
    refreshToken = serializers.CharField(source="refresh_token")
    expirationDate = serializers.DateTimeField(source="expiration_date")


class TokenValidationResponseSerializer(serializers.Serializer):
    """Serializer for validate token response."""

    valid = serializers.BooleanField(source="success")
    expired = serializers.BooleanField()
    newToken = serializers.CharField(source="new_token", allow_null=True)
    playerId = serializers.CharField(source="player_id")
    supportDevs = serializers.CharField(source="support_devs")
    announcement = serializers.CharField()


class TokenRefreshResponseSerializer(serializers.Serializer):
    """Serializer for refresh token response."""

    valid = serializers.BooleanField(source="success")
    token = serializers.CharField()


class UpdateLicenseResponseSerializer(serializers.Serializer):
    """Serializer for update license response."""

    message = serializers.CharField()
    newToken = serializers.CharField(source="new_token")
    newRefreshToken = serializers.CharField(source="new_refresh_token")
    newExpirationDate = serializers.DateTimeField(source="new_expiration_date")


class TrialResponseSerializer(serializers.Serializer):
    """Serializer for issued trial response."""

    success = serializers.BooleanField()
    trialKey = serializers.CharField(source="trial_key")
    token = serializers.CharField()
    expirationDate = serializers.DateTimeField(source="expiration_date")


class TrialFailureResponseSerializer(serializers.Serializer):
    """Serializer for refused trial response."""

    success = serializers.BooleanField()
    message = serializers.CharField()


class LicenseRecordSerializer(serializers.Serializer):
    """Serializer for a full license record."""

    licenseKey = serializers.CharField(source="license_key")
    playerId = serializers.CharField(source="player_id")
    token = serializers.CharField()
    refreshToken = serializers.CharField(source="refresh_token")
    expirationDate = serializers.DateTimeField(source="expiration_date")


class LicenseListResponseSerializer(serializers.Serializer):
    """Serializer for list licenses response."""

    count = serializers.IntegerField()
    licenses = LicenseRecordSerializer(many=True)
