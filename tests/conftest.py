"""
Pytest configuration and shared fixtures.
"""

from datetime import datetime, timedelta, timezone

import pytest
from django.apps import apps

from licenses.application.engine import LicenseLifecycleEngine
from licenses.domain.services import TrialPolicy
from licenses.infrastructure.jwt_signer import JWTCredentialSigner
from licenses.infrastructure.repositories.in_memory_record_store import (
    InMemoryRecordStore,
)

SIGNING_SECRET = "unit-test-signing-secret-0123456789"


class FakeClock:
    """Settable clock for expiry scenarios."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def clock():
    """Fixture for a clock pinned to 2025-06-01T00:00:00Z."""
    return FakeClock(datetime(2025, 6, 1, tzinfo=timezone.utc))


@pytest.fixture
def signing_secret():
    """Fixture for the secret shared by the signer fixtures."""
    return SIGNING_SECRET


@pytest.fixture
def signer(clock, signing_secret):
    """Fixture for a JWT signer driven by the fixed clock."""
    return JWTCredentialSigner(signing_secret, clock=clock)


@pytest.fixture
def record_store():
    """Fixture for an empty in-memory RecordStore."""
    return InMemoryRecordStore()


@pytest.fixture
def engine(record_store, signer, clock):
    """Fixture for a lifecycle engine over the in-memory store."""
    return LicenseLifecycleEngine(
        record_store,
        signer,
        trial_policy=TrialPolicy(duration_years=10),
        clock=clock,
        support_devs="support@example.com",
        announcement="Server maintenance on Friday",
    )


@pytest.fixture
def expiration_date():
    """Fixture for the expiration instant used by most scenarios."""
    return datetime(2030, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def api_engine(monkeypatch, engine):
    """Install a fresh engine on the licenses app for the duration of a test."""
    monkeypatch.setattr(apps.get_app_config("licenses"), "engine", engine)
    return engine


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()
