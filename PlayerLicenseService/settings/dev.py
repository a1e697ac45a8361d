"""
Development settings for PlayerLicenseService.
"""

import os

from .base import *  # noqa: F403, F401
from .logging import get_logging_config

DEBUG = True

ALLOWED_HOSTS = ["localhost", "127.0.0.1", "0.0.0.0"]

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "django-insecure-dev-only")

# Keep records in a JSON document next to the project
LICENSE_STORE_BACKEND = os.environ.get("LICENSE_STORE_BACKEND", "file")

LOGGING = get_logging_config("development")
