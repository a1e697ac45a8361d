"""
API permissions.
"""

import hmac
import logging

from django.apps import apps
from rest_framework.permissions import BasePermission

logger = logging.getLogger(__name__)

ADMIN_TOKEN_HEADER = "X-Admin-Token"


class HasAdminToken(BasePermission):
    """
    Allow access only when the request carries the configured admin token.

    With no admin token configured every request is refused.
    """

    message = "Administrative token required"

    def has_permission(self, request, view) -> bool:
        expected = apps.get_app_config("licenses").license_settings.admin_token
        provided = request.headers.get(ADMIN_TOKEN_HEADER, "")
        if not expected or not provided:
            logger.warning("Admin endpoint refused: missing token", extra={"path": request.path})
            return False
        allowed = hmac.compare_digest(expected.encode(), provided.encode())
        if not allowed:
            logger.warning("Admin endpoint refused: bad token", extra={"path": request.path})
        return allowed
