"""
License API views.

These endpoints are used by game clients to:
- Create, validate, update and delete licenses
- Validate and refresh license tokens
- Obtain a one-off trial license

Domain refusals come back as HTTP 200 with a negative body; the lifecycle
engine never raises for them.
"""

from django.apps import apps
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.permissions import ADMIN_TOKEN_HEADER, HasAdminToken
from api.v1.licenses.serializers import (
    CreateLicenseRequestSerializer,
    CreateLicenseResponseSerializer,
    FailureResponseSerializer,
    LicenseListResponseSerializer,
    LicensePairRequestSerializer,
    LicenseValidationResponseSerializer,
    MessageResponseSerializer,
    RefreshTokenRequestSerializer,
    TokenRefreshResponseSerializer,
    TokenValidationResponseSerializer,
    TrialFailureResponseSerializer,
    TrialRequestSerializer,
    TrialResponseSerializer,
    UpdateLicenseRequestSerializer,
    UpdateLicenseResponseSerializer,
    ValidateTokenRequestSerializer,
)
from licenses.application.commands.create_license import CreateLicenseCommand
from licenses.application.commands.delete_license import DeleteLicenseCommand
from licenses.application.commands.issue_trial import IssueTrialCommand
from licenses.application.commands.refresh_token import RefreshTokenCommand
from licenses.application.commands.update_license import UpdateLicenseCommand
from licenses.application.commands.validate_token import ValidateTokenCommand
from licenses.application.queries.list_licenses import ListLicensesQuery
from licenses.application.queries.validate_license import ValidateLicenseQuery


def get_engine():
    """Return the lifecycle engine built at app startup."""
    return apps.get_app_config("licenses").engine


def _validated(serializer_class, request: Request):
    serializer = serializer_class(data=request.data)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data


def _refused(result) -> Response:
    return Response(FailureResponseSerializer(result).data, status=status.HTTP_200_OK)


class CreateLicenseView(APIView):
    """View for creating a license."""

    @extend_schema(
        operation_id="create_license",
        summary="Create License",
        description=(
            "Create a license record for a player and issue a signed token "
            "together with a refresh token."
        ),
        tags=["Licenses"],
        request=CreateLicenseRequestSerializer,
        responses={
            200: CreateLicenseResponseSerializer,
            400: {"description": "Bad Request"},
        },
    )
    def post(self, request: Request) -> Response:
        data = _validated(CreateLicenseRequestSerializer, request)
        result = get_engine().create_license(
            CreateLicenseCommand(
                player_id=data["playerId"],
                license_key=data["licenseKey"],
                expiration_date=data["expirationDate"],
            )
        )
        if not result.success:
            return _refused(result)
        return Response(CreateLicenseResponseSerializer(result).data, status=status.HTTP_200_OK)


class ValidateLicenseView(APIView):
    """View for validating a license key against a player."""

    @extend_schema(
        operation_id="validate_license",
        summary="Validate License",
        description=(
            "Check that a license exists for the player and return its stored "
            "credentials. The stored token is returned even if it has expired."
        ),
        tags=["Licenses"],
        request=LicensePairRequestSerializer,
        responses={
            200: LicenseValidationResponseSerializer,
            400: {"description": "Bad Request"},
        },
    )
    def post(self, request: Request) -> Response:
        data = _validated(LicensePairRequestSerializer, request)
        result = get_engine().validate_license(
            ValidateLicenseQuery(license_key=data["licenseKey"], player_id=data["playerId"])
        )
        if not result.success:
            return _refused(result)
        return Response(LicenseValidationResponseSerializer(result).data)


class ValidateTokenView(APIView):
    """View for validating a token, falling back to the refresh token."""

    @extend_schema(
        operation_id="validate_token",
        summary="Validate Token",
        description=(
            "Verify a license token. When verification fails and a matching "
            "refresh token is supplied, a new token is issued with the same "
            "expiration date and returned as newToken."
        ),
        tags=["Licenses"],
        request=ValidateTokenRequestSerializer,
        responses={
            200: TokenValidationResponseSerializer,
            400: {"description": "Bad Request"},
        },
    )
    def post(self, request: Request) -> Response:
        data = _validated(ValidateTokenRequestSerializer, request)
        result = get_engine().validate_token(
            ValidateTokenCommand(
                token=data["token"],
                player_id=data["playerId"],
                refresh_token=data.get("refreshToken"),
            )
        )
        if not result.success:
            return _refused(result)
        return Response(TokenValidationResponseSerializer(result).data)


class RefreshTokenView(APIView):
    """View for exchanging a refresh token for a new token."""

    @extend_schema(
        operation_id="refresh_token",
        summary="Refresh Token",
        description=(
            "Issue a new token for the record holding the refresh token. The "
            "refresh token and the expiration date are left unchanged."
        ),
        tags=["Licenses"],
        request=RefreshTokenRequestSerializer,
        responses={
            200: TokenRefreshResponseSerializer,
            400: {"description": "Bad Request"},
        },
    )
    def post(self, request: Request) -> Response:
        data = _validated(RefreshTokenRequestSerializer, request)
        result = get_engine().refresh_token(RefreshTokenCommand(refresh_token=data["refreshToken"]))
        if not result.success:
            return _refused(result)
        return Response(TokenRefreshResponseSerializer(result).data)


class UpdateLicenseView(APIView):
    """View for updating a license key or expiration date."""

    @extend_schema(
        operation_id="update_license",
        summary="Update License",
        description=(
            "Change the license key and/or expiration date of a player's "
            "license. Empty new values keep the current ones. Both the token "
            "and the refresh token are rotated."
        ),
        tags=["Licenses"],
        request=UpdateLicenseRequestSerializer,
        responses={
            200: UpdateLicenseResponseSerializer,
            400: {"description": "Bad Request"},
        },
    )
    def post(self, request: Request) -> Response:
        data = _validated(UpdateLicenseRequestSerializer, request)
        result = get_engine().update_license(
            UpdateLicenseCommand(
                player_id=data["playerId"],
                license_key=data["licenseKey"],
                new_license_key=data.get("newLicenseKey"),
                new_expiration_date=data.get("newExpirationDate"),
            )
        )
        if not result.success:
            return _refused(result)
        return Response(UpdateLicenseResponseSerializer(result).data)


class DeleteLicenseView(APIView):
    """View for deleting a license."""

    @extend_schema(
        operation_id="delete_license",
        summary="Delete License",
        description="Remove one license record for the player.",
        tags=["Licenses"],
        request=LicensePairRequestSerializer,
        responses={
            200: MessageResponseSerializer,
            400: {"description": "Bad Request"},
        },
    )
    def post(self, request: Request) -> Response:
        data = _validated(LicensePairRequestSerializer, request)
        result = get_engine().delete_license(
            DeleteLicenseCommand(license_key=data["licenseKey"], player_id=data["playerId"])
        )
        return Response(MessageResponseSerializer(result).data)


class IssueTrialView(APIView):
    """View for issuing a trial license."""

    @extend_schema(
        operation_id="get_trial",
        summary="Get Trial",
        description="Issue a trial license. Each player gets at most one.",
        tags=["Licenses"],
        request=TrialRequestSerializer,
        responses={
            200: TrialResponseSerializer,
            400: TrialFailureResponseSerializer,
        },
    )
    def post(self, request: Request) -> Response:
        data = _validated(TrialRequestSerializer, request)
        result = get_engine().issue_trial(IssueTrialCommand(player_id=data.get("playerId")))
        if not result.success:
            response_status = status.HTTP_200_OK
            if result.code == "INVALID_INPUT":
                response_status = status.HTTP_400_BAD_REQUEST
            return Response(TrialFailureResponseSerializer(result).data, status=response_status)
        return Response(TrialResponseSerializer(result).data)


class ListLicensesView(APIView):
    """View listing every license record."""

    permission_classes = [HasAdminToken]

    @extend_schema(
        operation_id="list_licenses",
        summary="List Licenses",
        description=(
            "Return every license record, live tokens included. Requires the "
            "administrative token."
        ),
        tags=["Admin"],
        parameters=[
            OpenApiParameter(
                name=ADMIN_TOKEN_HEADER,
                type=str,
                location=OpenApiParameter.HEADER,
                required=True,
                description="Administrative token",
            ),
        ],
        responses={
            200: LicenseListResponseSerializer,
            403: {"description": "Forbidden"},
        },
    )
    def get(self, request: Request) -> Response:
        result = get_engine().list_licenses(ListLicensesQuery())
        return Response(LicenseListResponseSerializer(result).data)
