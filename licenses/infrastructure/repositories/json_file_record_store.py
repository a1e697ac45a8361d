"""
JSON file implementation of RecordStore port.

The file holds a single document ``{"licenses": [...]}``. It is read once
at construction and rewritten wholesale after every mutation: the new
document goes to a temporary file in the same directory which then
replaces the old one, so a reader never sees a half-written file.
"""
import json
import logging
import os
import tempfile
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Union

from core.domain.exceptions import StoreIOError
from licenses.domain.license_record import LicenseRecord
from licenses.infrastructure.repositories.in_memory_record_store import (
    InMemoryRecordStore,
)

logger = logging.getLogger(__name__)


def parse_instant(value: str) -> datetime:
    """Parse an ISO 8601 instant; naive values are taken as UTC."""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_instant(value: datetime) -> str:
    """Format an instant as ISO 8601 UTC with a ``Z`` suffix."""
    formatted = value.astimezone(timezone.utc).isoformat()
    if formatted.endswith("+00:00"):
        formatted = formatted[:-6] + "Z"
    return formatted


def record_to_dict(record: LicenseRecord) -> Dict[str, Any]:
    return {
        "id": str(record.id),
        "licenseKey": record.license_key,
        "playerId": record.player_id,
        "token": record.token,
        "refreshToken": record.refresh_token,
        "expirationDate": format_instant(record.expiration_date),
        "createdAt": format_instant(record.created_at),
    }


def record_from_dict(data: Dict[str, Any]) -> LicenseRecord:
    # Documents written by older servers carry no id or createdAt.
    return LicenseRecord.create(
        record_id=uuid.UUID(data["id"]) if data.get("id") else None,
        license_key=data["licenseKey"],
        player_id=data["playerId"],
        token=data["token"],
        refresh_token=data["refreshToken"],
        expiration_date=parse_instant(data["expirationDate"]),
        created_at=parse_instant(data["createdAt"]) if data.get("createdAt") else None,
    )


class JsonFileRecordStore(InMemoryRecordStore):
    """RecordStore persisted to a JSON document on disk."""

    def __init__(self, path: Union[str, Path]):
        """
        Initialize store from a file.

        A missing file starts an empty store. An unreadable or corrupt file
        is logged, renamed to ``<name>.corrupt`` and also starts an empty
        store, so later writes do not destroy what it held.

        Args:
            path: Location of the JSON document
        """
        self.path = Path(path)
        super().__init__(self._load())

    def _load(self) -> List[LicenseRecord]:
        if not self.path.exists():
            logger.info("No license store at %s, starting empty", self.path)
            return []
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                document = json.load(fh)
            records = [record_from_dict(item) for item in document.get("licenses", [])]
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error(
                "Failed to read license store %s, starting empty: %s",
                self.path,
                e,
                exc_info=True,
            )
            self._set_aside()
            return []
        logger.info("Loaded %d license record(s) from %s", len(records), self.path)
        return records

    def _set_aside(self) -> None:
        """Move an unreadable document out of the way so the next write cannot replace it."""
        corrupt_path = self.path.with_name(f"{self.path.name}.corrupt")
        try:
            os.replace(self.path, corrupt_path)
        except OSError as e:
            logger.error("Could not move unreadable license store %s aside: %s", self.path, e)
            return
        logger.warning("Unreadable license store moved to %s", corrupt_path)

    def _commit(self, records: List[LicenseRecord]) -> None:
        """Write the document, then swap it into memory."""
        self._write(records)
        super()._commit(records)

    def _write(self, records: List[LicenseRecord]) -> None:
        document = {"licenses": [record_to_dict(record) for record in records]}
        directory = self.path.parent
        tmp_name = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=directory,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as fh:
                tmp_name = fh.name
                json.dump(document, fh, indent=2)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self.path)
        except OSError as e:
            logger.error("Failed to write license store %s: %s", self.path, e, exc_info=True)
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StoreIOError(f"Could not write license store: {e}") from e
