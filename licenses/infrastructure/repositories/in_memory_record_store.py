"""
In-memory implementation of RecordStore port.

Records live in a list kept in insertion order. Mutations build a new list
and hand it to ``_commit`` so that subclasses can persist it before it
becomes visible.
"""
from typing import Iterable, List, Optional

from core.domain.exceptions import LicenseNotFoundError
from licenses.domain.license_record import LicenseRecord
from licenses.ports.record_store import RecordStore


class InMemoryRecordStore(RecordStore):
    """RecordStore keeping every record in process memory."""

    def __init__(self, records: Optional[Iterable[LicenseRecord]] = None):
        super().__init__()
        self._records: List[LicenseRecord] = list(records or [])

    def _commit(self, records: List[LicenseRecord]) -> None:
        """Make a new record list the current state."""
        self._records = records

    def _first(self, predicate) -> Optional[LicenseRecord]:
        with self._lock:
            return next((record for record in self._records if predicate(record)), None)

    def all(self) -> List[LicenseRecord]:
        with self._lock:
            return list(self._records)

    def find_by_license_key(self, license_key: str) -> Optional[LicenseRecord]:
        return self._first(lambda record: record.license_key == license_key)

    def find_by_key_and_player(
        self, license_key: str, player_id: str
    ) -> Optional[LicenseRecord]:
        return self._first(lambda record: record.matches(license_key, player_id))

    def find_by_refresh_token(
        self, refresh_token: str, player_id: Optional[str] = None
    ) -> Optional[LicenseRecord]:
        return self._first(
            lambda record: record.refresh_token == refresh_token
            and (player_id is None or record.player_id == player_id)
        )

    def find_by_player(self, player_id: str) -> List[LicenseRecord]:
        with self._lock:
            return [record for record in self._records if record.player_id == player_id]

    def add(self, record: LicenseRecord) -> LicenseRecord:
        with self._lock:
            self._commit(self._records + [record])
        return record

    def update(self, record: LicenseRecord) -> LicenseRecord:
        with self._lock:
            for index, existing in enumerate(self._records):
                if existing.id == record.id:
                    records = list(self._records)
                    records[index] = record
                    self._commit(records)
                    return record
        raise LicenseNotFoundError(f"License record {record.id} not found")

    def delete(self, license_key: str, player_id: str) -> bool:
        with self._lock:
            for index, existing in enumerate(self._records):
                if existing.matches(license_key, player_id):
                    self._commit(self._records[:index] + self._records[index + 1:])
                    return True
        return False
