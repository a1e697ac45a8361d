"""
License lifecycle handlers.

Handlers for create, validate-token, refresh, update and delete commands.
Each handler runs its reads and writes inside one store transaction and
turns domain errors into a failed result rather than raising them.
"""
import logging
from datetime import datetime

from core.domain.clock import Clock, ensure_aware, utc_now
from core.domain.exceptions import (
    InvalidInputError,
    InvalidRefreshTokenError,
    LicenseAlreadyExistsError,
    LicenseNotFoundError,
)
from core.metrics import license_operations_total, tokens_reissued_total
from licenses.application.commands.create_license import CreateLicenseCommand
from licenses.application.commands.delete_license import DeleteLicenseCommand
from licenses.application.commands.refresh_token import RefreshTokenCommand
from licenses.application.commands.update_license import UpdateLicenseCommand
from licenses.application.commands.validate_token import ValidateTokenCommand
from licenses.application.dto.license_dto import (
    CreateLicenseResult,
    DeleteLicenseResult,
    TokenRefreshResult,
    TokenValidationResult,
    UpdateLicenseResult,
)
from licenses.domain.license_record import LicenseRecord
from licenses.domain.services import RefreshTokenGenerator
from licenses.ports.credential_signer import CredentialSigner
from licenses.ports.record_store import RecordStore

logger = logging.getLogger(__name__)


def _mask(value: str) -> str:
    """Shorten an identifier for log output."""
    return f"{value[:8]}..." if value and len(value) > 8 else value


class CreateLicenseHandler:
    """Handler for CreateLicenseCommand."""

    def __init__(
        self,
        record_store: RecordStore,
        signer: CredentialSigner,
        refresh_generator: RefreshTokenGenerator = None,
        clock: Clock = utc_now,
        enforce_unique_pairs: bool = False,
    ):
        """Initialize handler with store and credential services."""
        self.record_store = record_store
        self.signer = signer
        self.refresh_generator = refresh_generator or RefreshTokenGenerator()
        self.clock = clock
        self.enforce_unique_pairs = enforce_unique_pairs

    def create_record(
        self,
        store: RecordStore,
        player_id: str,
        license_key: str,
        expiration_date: datetime,
    ) -> LicenseRecord:
        """
        Mint credentials for a pair and insert the record.

        Must be called inside ``store.transaction()``.

        Raises:
            InvalidInputError: If player or license key is missing
            LicenseAlreadyExistsError: If the pair exists and uniqueness is enforced
        """
        if not player_id or not license_key:
            raise InvalidInputError("playerId and licenseKey are required")

        if store.find_by_key_and_player(license_key, player_id):
            if self.enforce_unique_pairs:
                raise LicenseAlreadyExistsError()
            logger.warning(
                "Duplicate license record created",
                extra={"player_id": player_id, "license_key": _mask(license_key)},
            )

        expiration_date = ensure_aware(expiration_date)
        record = LicenseRecord.create(
            license_key=license_key,
            player_id=player_id,
            token=self.signer.issue(player_id, license_key, expiration_date),
            refresh_token=self.refresh_generator.generate(),
            expiration_date=expiration_date,
            created_at=self.clock(),
        )
        return store.add(record)

    def handle(self, command: CreateLicenseCommand) -> CreateLicenseResult:
        """
        Handle create license command.

        Args:
            command: CreateLicenseCommand

        Returns:
            CreateLicenseResult with the new credential pair
        """
        try:
            with self.record_store.transaction() as store:
                record = self.create_record(
                    store, command.player_id, command.license_key, command.expiration_date
                )
        except (InvalidInputError, LicenseAlreadyExistsError) as e:
            license_operations_total.labels(operation="create", outcome="rejected").inc()
            logger.warning("License not created: %s", e.message, extra={"code": e.code})
            return CreateLicenseResult.failure(e)

        license_operations_total.labels(operation="create", outcome="success").inc()
        logger.info(
            "License created",
            extra={"player_id": record.player_id, "license_key": _mask(record.license_key)},
        )
        return CreateLicenseResult(
            success=True,
            message="License created",
            token=record.token,
            refresh_token=record.refresh_token,
            expiration_date=record.expiration_date,
        )


class ValidateTokenHandler:
    """Handler for ValidateTokenCommand."""

    def __init__(
        self,
        record_store: RecordStore,
        signer: CredentialSigner,
        support_devs: str = "",
        announcement: str = "",
    ):
        """Initialize handler with store, signer and pass-through server info."""
        self.record_store = record_store
        self.signer = signer
        self.support_devs = support_devs
        self.announcement = announcement

    def _result(self, command: ValidateTokenCommand, expired: bool, new_token=None):
        return TokenValidationResult(
            success=True,
            expired=expired,
            new_token=new_token,
            player_id=command.player_id,
            support_devs=self.support_devs,
            announcement=self.announcement,
        )

    def handle(self, command: ValidateTokenCommand) -> TokenValidationResult:
        """
        Handle validate token command.

        A token that verifies is reported valid without touching the store.
        Any verification failure, expired or malformed alike, falls back to
        the refresh credential: the record's existing key, player and
        expiration date are re-signed and the new token persisted. The
        expiration date is never extended and the refresh token is kept.

        Args:
            command: ValidateTokenCommand

        Returns:
            TokenValidationResult
        """
        verification = self.signer.verify(command.token)
        if verification.is_valid:
            license_operations_total.labels(operation="validate_token", outcome="valid").inc()
            return self._result(command, expired=False)

        try:
            with self.record_store.transaction() as store:
                if not command.refresh_token or not command.player_id:
                    raise InvalidRefreshTokenError()
                record = store.find_by_refresh_token(
                    command.refresh_token, player_id=command.player_id
                )
                if not record:
                    raise InvalidRefreshTokenError()
                new_token = self.signer.issue(
                    record.player_id, record.license_key, record.expiration_date
                )
                store.update(record.with_token(new_token))
        except InvalidRefreshTokenError as e:
            license_operations_total.labels(operation="validate_token", outcome="invalid").inc()
            logger.warning(
                "Token rejected and no refresh fallback",
                extra={"player_id": command.player_id, "verification": str(verification.status)},
            )
            return TokenValidationResult.failure(e)

        license_operations_total.labels(operation="validate_token", outcome="reissued").inc()
        tokens_reissued_total.labels(path="validate_token").inc()
        logger.info(
            "Token re-issued from refresh token",
            extra={"player_id": record.player_id, "verification": str(verification.status)},
        )
        return self._result(command, expired=True, new_token=new_token)


class RefreshTokenHandler:
    """Handler for RefreshTokenCommand."""

    def __init__(self, record_store: RecordStore, signer: CredentialSigner):
        """Initialize handler with store and signer."""
        self.record_store = record_store
        self.signer = signer

    def handle(self, command: RefreshTokenCommand) -> TokenRefreshResult:
        """
        Handle refresh token command.

        Looks the record up by refresh token alone and re-signs its existing
        fields. Neither the refresh token nor the expiration date change.

        Args:
            command: RefreshTokenCommand

        Returns:
            TokenRefreshResult with the new token
        """
        try:
            with self.record_store.transaction() as store:
                record = None
                if command.refresh_token:
                    record = store.find_by_refresh_token(command.refresh_token)
                if not record:
                    raise InvalidRefreshTokenError()
                new_token = self.signer.issue(
                    record.player_id, record.license_key, record.expiration_date
                )
                store.update(record.with_token(new_token))
        except InvalidRefreshTokenError as e:
            license_operations_total.labels(operation="refresh", outcome="invalid").inc()
            logger.warning("Refresh token not recognised")
            return TokenRefreshResult.failure(e)

        license_operations_total.labels(operation="refresh", outcome="success").inc()
        tokens_reissued_total.labels(path="refresh").inc()
        logger.info("Token refreshed", extra={"player_id": record.player_id})
        return TokenRefreshResult(success=True, token=new_token)


class UpdateLicenseHandler:
    """Handler for UpdateLicenseCommand."""

    def __init__(
        self,
        record_store: RecordStore,
        signer: CredentialSigner,
        refresh_generator: RefreshTokenGenerator = None,
    ):
        """Initialize handler with store and credential services."""
        self.record_store = record_store
        self.signer = signer
        self.refresh_generator = refresh_generator or RefreshTokenGenerator()

    def handle(self, command: UpdateLicenseCommand) -> UpdateLicenseResult:
        """
        Handle update license command.

        New values that are empty or missing keep the current ones, so an
        empty string can never be set as a key. Both the token and the
        refresh token are always rotated.

        Args:
            command: UpdateLicenseCommand

        Returns:
            UpdateLicenseResult with the rotated credential pair
        """
        try:
            with self.record_store.transaction() as store:
                record = store.find_by_key_and_player(command.license_key, command.player_id)
                if not record:
                    raise LicenseNotFoundError()

                license_key = command.new_license_key or record.license_key
                expiration_date = (
                    ensure_aware(command.new_expiration_date)
                    if command.new_expiration_date
                    else record.expiration_date
                )
                updated = store.update(
                    record.rotate(
                        license_key=license_key,
                        expiration_date=expiration_date,
                        token=self.signer.issue(record.player_id, license_key, expiration_date),
                        refresh_token=self.refresh_generator.generate(),
                    )
                )
        except LicenseNotFoundError as e:
            license_operations_total.labels(operation="update", outcome="not_found").inc()
            logger.warning(
                "License to update not found",
                extra={"player_id": command.player_id, "license_key": _mask(command.license_key)},
            )
            return UpdateLicenseResult.failure(e)

        license_operations_total.labels(operation="update", outcome="success").inc()
        logger.info(
            "License updated",
            extra={"player_id": updated.player_id, "license_key": _mask(updated.license_key)},
        )
        return UpdateLicenseResult(
            success=True,
            message="License updated",
            new_token=updated.token,
            new_refresh_token=updated.refresh_token,
            new_expiration_date=updated.expiration_date,
        )


class DeleteLicenseHandler:
    """Handler for DeleteLicenseCommand."""

    def __init__(self, record_store: RecordStore):
        """Initialize handler with store."""
        self.record_store = record_store

    def handle(self, command: DeleteLicenseCommand) -> DeleteLicenseResult:
        """
        Handle delete license command.

        Removes at most one record. A missing pair is reported, not raised.

        Args:
            command: DeleteLicenseCommand

        Returns:
            DeleteLicenseResult
        """
        with self.record_store.transaction() as store:
            deleted = store.delete(command.license_key, command.player_id)

        if not deleted:
            license_operations_total.labels(operation="delete", outcome="not_found").inc()
            return DeleteLicenseResult.failure(LicenseNotFoundError())

        license_operations_total.labels(operation="delete", outcome="success").inc()
        logger.info(
            "License deleted",
            extra={"player_id": command.player_id, "license_key": _mask(command.license_key)},
        )
        return DeleteLicenseResult(success=True, message="License deleted")
