"""
Test settings for PlayerLicenseService.
"""

from .base import *  # noqa: F403, F401

DEBUG = False

SECRET_KEY = "django-insecure-test-only"

# Use in-memory SQLite for tests
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# License service test configuration
LICENSE_SIGNING_SECRET = "test-signing-secret-for-license-tokens"
LICENSE_STORE_BACKEND = "memory"
LICENSE_SUPPORT_DEVS = "support@example.com"
LICENSE_ANNOUNCEMENT = "Test announcement"
LICENSE_ENFORCE_UNIQUE_PAIRS = False
LICENSE_ADMIN_TOKEN = "test-admin-token"

# Disable logging during tests
LOGGING_CONFIG = None
