"""
Django implementation of RecordStore port.

This adapter converts between domain entities and Django ORM models.
"""
from contextlib import contextmanager
from typing import Iterator, List, Optional

from django.db import DatabaseError
from django.db import transaction as db_transaction

from core.domain.exceptions import LicenseNotFoundError, StoreIOError
from licenses.domain.license_record import LicenseRecord
from licenses.infrastructure.models import LicenseRecord as LicenseRecordModel
from licenses.ports.record_store import RecordStore


class DjangoRecordStore(RecordStore):
    """
    Django ORM implementation of RecordStore.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Runs each transaction under the process lock and a database
       transaction
    """

    @contextmanager
    def transaction(self) -> Iterator[RecordStore]:
        with self._lock:
            try:
                with db_transaction.atomic():
                    yield self
            except DatabaseError as e:
                raise StoreIOError(f"License database error: {e}") from e

    def _to_domain(self, model: LicenseRecordModel) -> LicenseRecord:
        """
        Convert Django model to domain entity.

        Args:
            model: Django LicenseRecord model

        Returns:
            LicenseRecord domain entity
        """
        return LicenseRecord(
            id=model.record_id,
            license_key=model.license_key,
            player_id=model.player_id,
            token=model.token,
            refresh_token=model.refresh_token,
            expiration_date=model.expiration_date,
            created_at=model.created_at,
        )

    def _first(self, **filters) -> Optional[LicenseRecord]:
        model = LicenseRecordModel.objects.filter(**filters).order_by("id").first()
        return self._to_domain(model) if model else None

    def all(self) -> List[LicenseRecord]:
        return [self._to_domain(model) for model in LicenseRecordModel.objects.order_by("id")]

    def find_by_license_key(self, license_key: str) -> Optional[LicenseRecord]:
        return self._first(license_key=license_key)

    def find_by_key_and_player(
        self, license_key: str, player_id: str
    ) -> Optional[LicenseRecord]:
        return self._first(license_key=license_key, player_id=player_id)

    def find_by_refresh_token(
        self, refresh_token: str, player_id: Optional[str] = None
    ) -> Optional[LicenseRecord]:
        filters = {"refresh_token": refresh_token}
        if player_id is not None:
            filters["player_id"] = player_id
        return self._first(**filters)

    def find_by_player(self, player_id: str) -> List[LicenseRecord]:
        models = LicenseRecordModel.objects.filter(player_id=player_id).order_by("id")
        return [self._to_domain(model) for model in models]

    def add(self, record: LicenseRecord) -> LicenseRecord:
        model = LicenseRecordModel.objects.create(
            record_id=record.id,
            license_key=record.license_key,
            player_id=record.player_id,
            token=record.token,
            refresh_token=record.refresh_token,
            expiration_date=record.expiration_date,
            created_at=record.created_at,
        )
        return self._to_domain(model)

    def update(self, record: LicenseRecord) -> LicenseRecord:
        try:
            model = LicenseRecordModel.objects.get(record_id=record.id)
        except LicenseRecordModel.DoesNotExist:
            raise LicenseNotFoundError(f"License record {record.id} not found")
        model.license_key = record.license_key
        model.player_id = record.player_id
        model.token = record.token
        model.refresh_token = record.refresh_token
        model.expiration_date = record.expiration_date
        model.save()
        return self._to_domain(model)

    def delete(self, license_key: str, player_id: str) -> bool:
        model = (
            LicenseRecordModel.objects.filter(license_key=license_key, player_id=player_id)
            .order_by("id")
            .first()
        )
        if not model:
            return False
        model.delete()
        return True
