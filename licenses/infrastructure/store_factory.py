"""
Record store construction from configuration.
"""
import logging

from core.config import LicenseSettings
from licenses.ports.record_store import RecordStore

logger = logging.getLogger(__name__)


def build_record_store(license_settings: LicenseSettings) -> RecordStore:
    """
    Build the configured RecordStore implementation.

    Args:
        license_settings: LicenseSettings naming the backend

    Returns:
        RecordStore instance
    """
    backend = license_settings.store_backend
    if backend == "memory":
        from licenses.infrastructure.repositories.in_memory_record_store import (
            InMemoryRecordStore,
        )

        store = InMemoryRecordStore()
    elif backend == "file":
        from licenses.infrastructure.repositories.json_file_record_store import (
            JsonFileRecordStore,
        )

        store = JsonFileRecordStore(license_settings.store_path)
    else:
        from licenses.infrastructure.repositories.django_record_store import (
            DjangoRecordStore,
        )

        store = DjangoRecordStore()

    logger.info("Using %s record store", backend)
    return store
