"""
Django model discovery for the licenses app.
"""
from licenses.infrastructure.models import LicenseRecord  # noqa: F401
