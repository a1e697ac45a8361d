"""
Unit tests for LicenseSettings.
"""
from types import SimpleNamespace

import pytest

from core.config import LicenseSettings
from core.domain.exceptions import ConfigurationError


class TestLicenseSettings:
    """Tests for LicenseSettings."""

    def test_defaults(self):
        """Test default values."""
        settings = LicenseSettings(signing_secret="secret")

        assert settings.token_algorithm == "HS256"
        assert settings.store_backend == "database"
        assert settings.trial_years == 10
        assert settings.enforce_unique_pairs is False
        assert settings.admin_token is None

    def test_missing_secret(self):
        """Test that a missing signing secret aborts configuration."""
        with pytest.raises(ConfigurationError, match="LICENSE_SIGNING_SECRET"):
            LicenseSettings(signing_secret="")

    def test_unknown_backend(self):
        """Test that an unknown store backend is rejected."""
        with pytest.raises(ConfigurationError, match="LICENSE_STORE_BACKEND"):
            LicenseSettings(signing_secret="secret", store_backend="redis")

    def test_invalid_trial_years(self):
        """Test that a trial shorter than a year is rejected."""
        with pytest.raises(ConfigurationError):
            LicenseSettings(signing_secret="secret", trial_years=0)

    def test_from_django_settings(self):
        """Test reading LICENSE_* settings."""
        django_settings = SimpleNamespace(
            LICENSE_SIGNING_SECRET="secret",
            LICENSE_STORE_BACKEND="file",
            LICENSE_STORE_PATH="/tmp/licenses.json",
            LICENSE_TRIAL_YEARS="5",
            LICENSE_SUPPORT_DEVS="dev@example.com",
            LICENSE_ANNOUNCEMENT="Hello",
            LICENSE_ENFORCE_UNIQUE_PAIRS=True,
            LICENSE_ADMIN_TOKEN="",
        )

        settings = LicenseSettings.from_django_settings(django_settings)

        assert settings.store_backend == "file"
        assert settings.store_path == "/tmp/licenses.json"
        assert settings.trial_years == 5
        assert settings.support_devs == "dev@example.com"
        assert settings.announcement == "Hello"
        assert settings.enforce_unique_pairs is True
        assert settings.admin_token is None

    def test_from_django_settings_without_secret(self):
        """Test that absent settings fail on the secret."""
        with pytest.raises(ConfigurationError):
            LicenseSettings.from_django_settings(SimpleNamespace())

    def test_from_loaded_django_settings(self, settings):
        """Test reading the active test settings."""
        license_settings = LicenseSettings.from_django_settings(settings)

        assert license_settings.store_backend == "memory"
        assert license_settings.admin_token == "test-admin-token"
