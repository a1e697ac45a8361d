"""
API exception handlers.

This module provides custom exception handling for REST API responses.
Domain refusals never reach this handler: the lifecycle engine returns
them as tagged results. What lands here is request validation, store
failures and unexpected errors.
"""

import logging
from typing import Any, Dict, Optional

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.domain.exceptions import (
    ConfigurationError,
    DomainException,
    InvalidInputError,
    StoreIOError,
)
from core.metrics import store_errors_total

logger = logging.getLogger(__name__)


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Custom exception handler for REST API."""
    correlation_id = _get_correlation_id(context)

    if isinstance(exc, DomainException):
        response = _handle_domain_exception(exc, correlation_id)
    elif isinstance(exc, StoreIOError):
        response = _handle_store_error(exc, context, correlation_id)
    elif isinstance(exc, APIException):
        response = exception_handler(exc, context)
        code = (
            exc.default_code.upper().replace("-", "_")
            if hasattr(exc, "default_code")
            else "API_ERROR"
        )
        detail = response.data
        if isinstance(detail, dict) and "detail" in detail:
            detail = detail["detail"]
        # Serializer validation errors keep their per-field details
        response.data = {"error": {"code": code, "message": detail}}
    elif isinstance(exc, Http404):
        response = Response(
            {"error": {"code": "NOT_FOUND", "message": "Resource not found"}},
            status=status.HTTP_404_NOT_FOUND,
        )
    else:
        response = _handle_unexpected_exception(exc, context, correlation_id)

    if correlation_id:
        response["X-Correlation-ID"] = correlation_id
    return response


def _get_correlation_id(context: Dict[str, Any]) -> Optional[str]:
    """Extract correlation ID from request context."""
    request = context.get("request")
    if not request:
        return None
    return getattr(request, "correlation_id", None)


def _handle_domain_exception(exc: DomainException, correlation_id: Optional[str]) -> Response:
    """
    Handle domain-specific exceptions.

    Handlers return refusals as results; what still arrives here is a store
    raising during a handler, e.g. LicenseNotFoundError from
    ``RecordStore.update`` when the record vanished from the database.
    """
    status_code = status.HTTP_400_BAD_REQUEST
    if not isinstance(exc, InvalidInputError):
        status_code = status.HTTP_422_UNPROCESSABLE_ENTITY

    logger.warning(
        "Domain exception: %s - %s", exc.code, exc.message, extra={"correlation_id": correlation_id}
    )
    return Response({"error": {"code": exc.code, "message": exc.message}}, status=status_code)


def _handle_store_error(
    exc: StoreIOError, context: Dict[str, Any], correlation_id: Optional[str]
) -> Response:
    """Handle record store failures."""
    view = context.get("view")
    store_errors_total.labels(operation=view.__class__.__name__ if view else "unknown").inc()
    logger.error(
        "Record store failure: %s", exc.message, extra={"correlation_id": correlation_id}
    )
    return Response(
        {"error": {"code": exc.code, "message": "License store is temporarily unavailable"}},
        status=status.HTTP_503_SERVICE_UNAVAILABLE,
    )


def _handle_unexpected_exception(
    exc: Exception, context: Dict[str, Any], correlation_id: Optional[str]
) -> Response:
    """Handle unexpected or untracked exceptions."""
    code = "CONFIGURATION_ERROR" if isinstance(exc, ConfigurationError) else "INTERNAL_ERROR"
    logger.error(
        "Unexpected error: %s", exc, extra={"correlation_id": correlation_id}, exc_info=True
    )
    return Response(
        {"error": {"code": code, "message": "An internal error occurred"}},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
