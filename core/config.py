"""
License service configuration.

Reads the ``LICENSE_*`` Django settings once into an immutable object that
is handed to the lifecycle engine at startup.
"""
from dataclasses import dataclass
from typing import Optional

from core.domain.exceptions import ConfigurationError

STORE_BACKENDS = ("memory", "file", "database")


@dataclass(frozen=True)
class LicenseSettings:
    """License service settings."""

    signing_secret: str
    token_algorithm: str = "HS256"
    store_backend: str = "database"
    store_path: str = "db.json"
    trial_years: int = 10
    support_devs: str = ""
    announcement: str = ""
    enforce_unique_pairs: bool = False
    admin_token: Optional[str] = None

    def __post_init__(self):
        """Validate settings."""
        if not self.signing_secret:
            raise ConfigurationError(
                "LICENSE_SIGNING_SECRET is not set; refusing to start without a signing secret"
            )
        if self.store_backend not in STORE_BACKENDS:
            raise ConfigurationError(
                f"Unknown LICENSE_STORE_BACKEND {self.store_backend!r}, "
                f"expected one of {', '.join(STORE_BACKENDS)}"
            )
        if self.trial_years < 1:
            raise ConfigurationError("LICENSE_TRIAL_YEARS must be at least 1")

    @classmethod
    def from_django_settings(cls, settings) -> "LicenseSettings":
        """
        Build settings from a Django settings object.

        Args:
            settings: ``django.conf.settings`` or an equivalent object

        Returns:
            LicenseSettings

        Raises:
            ConfigurationError: If the signing secret is missing or a value is invalid
        """
        return cls(
            signing_secret=getattr(settings, "LICENSE_SIGNING_SECRET", None) or "",
            token_algorithm=getattr(settings, "LICENSE_TOKEN_ALGORITHM", "HS256"),
            store_backend=getattr(settings, "LICENSE_STORE_BACKEND", "database"),
            store_path=str(getattr(settings, "LICENSE_STORE_PATH", "db.json")),
            trial_years=int(getattr(settings, "LICENSE_TRIAL_YEARS", 10)),
            support_devs=getattr(settings, "LICENSE_SUPPORT_DEVS", ""),
            announcement=getattr(settings, "LICENSE_ANNOUNCEMENT", ""),
            enforce_unique_pairs=bool(getattr(settings, "LICENSE_ENFORCE_UNIQUE_PAIRS", False)),
            admin_token=getattr(settings, "LICENSE_ADMIN_TOKEN", None) or None,
        )
