"""
App configuration for the licenses module.
"""
import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class LicensesConfig(AppConfig):
    """
    App configuration for licenses.

    Builds the lifecycle engine once when Django starts. A missing signing
    secret raises ConfigurationError here and aborts startup.
    """

    name = "licenses"
    verbose_name = "Licenses"
    default_auto_field = "django.db.models.BigAutoField"

    engine = None

    def ready(self):
        """Called when Django starts."""
        from core.config import LicenseSettings
        from licenses.application.engine import LicenseLifecycleEngine

        license_settings = LicenseSettings.from_django_settings(settings)
        self.license_settings = license_settings
        self.engine = LicenseLifecycleEngine.from_settings(license_settings)
        logger.info(
            "License engine ready",
            extra={"store_backend": license_settings.store_backend},
        )
