"""
ListLicensesHandler.

Handles the list licenses query.
"""
import logging

from licenses.application.dto.license_dto import LicenseListResult
from licenses.application.queries.list_licenses import ListLicensesQuery
from licenses.ports.record_store import RecordStore

logger = logging.getLogger(__name__)


class ListLicensesHandler:
    """Handler for ListLicensesQuery."""

    def __init__(self, record_store: RecordStore):
        """Initialize handler with store."""
        self.record_store = record_store

    def handle(self, query: ListLicensesQuery) -> LicenseListResult:
        """
        Handle list licenses query.

        Records are returned unredacted, live tokens included.

        Args:
            query: ListLicensesQuery

        Returns:
            LicenseListResult in insertion order
        """
        with self.record_store.transaction() as store:
            records = store.all()

        logger.info("Listed license records", extra={"count": len(records)})
        return LicenseListResult(count=len(records), licenses=records)
