"""
Record store port (interface).

This defines the contract for license record persistence.
Implementations are in the infrastructure layer.
"""
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator, List, Optional

from licenses.domain.license_record import LicenseRecord


class RecordStore(ABC):
    """
    Abstract store for LicenseRecord entities.

    Lookups that can match several records return the first one in
    insertion order. Lifecycle operations wrap their reads and writes in
    ``transaction()`` so that concurrent requests are serialized.
    """

    def __init__(self):
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self) -> Iterator["RecordStore"]:
        """
        Critical section for a read-modify-write sequence.

        Re-entrant, so a handler may delegate to another handler while
        holding it.
        """
        with self._lock:
            yield self

    @abstractmethod
    def all(self) -> List[LicenseRecord]:
        """
        Return every record in insertion order.

        Returns:
            List of LicenseRecord entities
        """
        pass

    @abstractmethod
    def find_by_license_key(self, license_key: str) -> Optional[LicenseRecord]:
        """
        Find the first record carrying a license key.

        Args:
            license_key: License key string

        Returns:
            LicenseRecord or None if not found
        """
        pass

    @abstractmethod
    def find_by_key_and_player(
        self, license_key: str, player_id: str
    ) -> Optional[LicenseRecord]:
        """
        Find the first record for a (license key, player) pair.

        Args:
            license_key: License key string
            player_id: Player identifier

        Returns:
            LicenseRecord or None if not found
        """
        pass

    @abstractmethod
    def find_by_refresh_token(
        self, refresh_token: str, player_id: Optional[str] = None
    ) -> Optional[LicenseRecord]:
        """
        Find the first record holding a refresh token.

        Args:
            refresh_token: Refresh credential
            player_id: When given, the record must also belong to this player

        Returns:
            LicenseRecord or None if not found
        """
        pass

    @abstractmethod
    def find_by_player(self, player_id: str) -> List[LicenseRecord]:
        """
        Find all records of a player in insertion order.

        Args:
            player_id: Player identifier

        Returns:
            List of LicenseRecord entities
        """
        pass

    @abstractmethod
    def add(self, record: LicenseRecord) -> LicenseRecord:
        """
        Append a new record.

        Args:
            record: LicenseRecord to insert

        Returns:
            Stored LicenseRecord
        """
        pass

    @abstractmethod
    def update(self, record: LicenseRecord) -> LicenseRecord:
        """
        Replace the stored record having the same id.

        Args:
            record: LicenseRecord carrying new field values

        Returns:
            Stored LicenseRecord

        Raises:
            LicenseNotFoundError: If no record has this id
        """
        pass

    @abstractmethod
    def delete(self, license_key: str, player_id: str) -> bool:
        """
        Remove the first record for a (license key, player) pair.

        Args:
            license_key: License key string
            player_id: Player identifier

        Returns:
            True if a record was removed, False otherwise
        """
        pass
