"""
Base Django settings for PlayerLicenseService.

These settings are shared across all environments.
Environment-specific overrides are in dev.py, test.py, and prod.py
"""
import os
from pathlib import Path

from .logging import get_logging_config


def env_bool(name: str, default: str = "false") -> bool:
    """Read a boolean flag from the environment."""
    return os.environ.get(name, default).lower() in ("1", "true", "yes")


# Build paths inside the project
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# Django's own secret (sessions, CSRF); unrelated to license token signing
SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "")

DEBUG = False

ALLOWED_HOSTS = []

# Application definition
INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    # Third party
    "rest_framework",
    "drf_spectacular",
    # Local apps
    "core",
    "licenses.apps.LicensesConfig",
    "api",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    # Custom middleware
    "core.middleware.observability.ObservabilityMiddleware",
    "core.middleware.metrics.MetricsMiddleware",
]

ROOT_URLCONF = "PlayerLicenseService.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
            ],
        },
    },
]

WSGI_APPLICATION = "PlayerLicenseService.wsgi.application"

# Database
# https://docs.djangoproject.com/en/4.2/ref/settings/#databases
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("DB_PATH", BASE_DIR / "db.sqlite3"),
    }
}

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

# Default primary key field type
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# REST Framework
REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
    "UNAUTHENTICATED_USER": None,
    "EXCEPTION_HANDLER": "api.exceptions.custom_exception_handler",
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
}

# drf-spectacular settings
SPECTACULAR_SETTINGS = {
    "TITLE": "Player License Service API",
    "DESCRIPTION": (
        "Issues, validates and refreshes signed, expiring license tokens "
        "bound to a player identity."
    ),
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
    "COMPONENT_SPLIT_REQUEST": True,
    "SCHEMA_PATH_PREFIX": "/api/v1",
    "TAGS": [
        {"name": "Licenses", "description": "License and token lifecycle"},
        {"name": "Admin", "description": "Administrative license access"},
    ],
}

# License service
# The signing secret has no default: startup fails when it is missing.
LICENSE_SIGNING_SECRET = os.environ.get("LICENSE_SIGNING_SECRET", "")
LICENSE_TOKEN_ALGORITHM = "HS256"
LICENSE_STORE_BACKEND = os.environ.get("LICENSE_STORE_BACKEND", "database")
LICENSE_STORE_PATH = os.environ.get("LICENSE_STORE_PATH", str(BASE_DIR / "db.json"))
LICENSE_TRIAL_YEARS = int(os.environ.get("LICENSE_TRIAL_YEARS", "10"))
LICENSE_SUPPORT_DEVS = os.environ.get("LICENSE_SUPPORT_DEVS", "")
LICENSE_ANNOUNCEMENT = os.environ.get("LICENSE_ANNOUNCEMENT", "")
LICENSE_ENFORCE_UNIQUE_PAIRS = env_bool("LICENSE_ENFORCE_UNIQUE_PAIRS")
LICENSE_ADMIN_TOKEN = os.environ.get("LICENSE_ADMIN_TOKEN", "")

# Observability
LOGGING = get_logging_config(os.environ.get("ENVIRONMENT", "production"))
