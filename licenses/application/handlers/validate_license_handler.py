"""
ValidateLicenseHandler.

Handles the validate license query.
"""
from core.domain.exceptions import LicenseNotFoundError
from core.metrics import license_operations_total
from licenses.application.dto.license_dto import LicenseValidationResult
from licenses.application.queries.validate_license import ValidateLicenseQuery
from licenses.ports.record_store import RecordStore


class ValidateLicenseHandler:
    """Handler for ValidateLicenseQuery."""

    def __init__(self, record_store: RecordStore):
        """Initialize handler with store."""
        self.record_store = record_store

    def handle(self, query: ValidateLicenseQuery) -> LicenseValidationResult:
        """
        Handle validate license query.

        Existence check only: the stored token is returned as-is, even when
        it has expired.

        Args:
            query: ValidateLicenseQuery

        Returns:
            LicenseValidationResult with the stored credentials
        """
        with self.record_store.transaction() as store:
            record = store.find_by_key_and_player(query.license_key, query.player_id)

        if not record:
            license_operations_total.labels(operation="validate_license", outcome="not_found").inc()
            return LicenseValidationResult.failure(
                LicenseNotFoundError("Invalid license or playerId")
            )

        license_operations_total.labels(operation="validate_license", outcome="valid").inc()
        return LicenseValidationResult(
            success=True,
            token=record.token,
            refresh_token=record.refresh_token,
            expiration_date=record.expiration_date,
        )
