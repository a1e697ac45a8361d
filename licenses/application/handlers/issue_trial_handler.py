"""
IssueTrialHandler.

Handles the issue trial command: at most one trial license per player.
"""
import logging

from core.domain.clock import Clock, utc_now
from core.domain.exceptions import InvalidInputError, TrialAlreadyUsedError
from core.metrics import license_operations_total
from licenses.application.commands.issue_trial import IssueTrialCommand
from licenses.application.dto.license_dto import TrialResult
from licenses.application.handlers.license_lifecycle_handlers import (
    CreateLicenseHandler,
)
from licenses.domain.services import TrialPolicy
from licenses.ports.record_store import RecordStore

logger = logging.getLogger(__name__)


class IssueTrialHandler:
    """Handler for IssueTrialCommand."""

    def __init__(
        self,
        record_store: RecordStore,
        create_handler: CreateLicenseHandler,
        trial_policy: TrialPolicy = None,
        clock: Clock = utc_now,
    ):
        """Initialize handler with store, creation path and trial policy."""
        self.record_store = record_store
        self.create_handler = create_handler
        self.trial_policy = trial_policy or TrialPolicy()
        self.clock = clock

    def handle(self, command: IssueTrialCommand) -> TrialResult:
        """
        Handle issue trial command.

        The eligibility check and the insert share one transaction, so two
        concurrent requests for the same player cannot both succeed.

        Args:
            command: IssueTrialCommand

        Returns:
            TrialResult with the trial key, token and expiration date
        """
        try:
            if not command.player_id:
                raise InvalidInputError("Missing playerId")

            with self.record_store.transaction() as store:
                if self.trial_policy.has_used_trial(
                    store.find_by_player(command.player_id), command.player_id
                ):
                    raise TrialAlreadyUsedError()

                record = self.create_handler.create_record(
                    store,
                    command.player_id,
                    self.trial_policy.make_trial_key(),
                    self.trial_policy.expiration_from(self.clock()),
                )
        except (InvalidInputError, TrialAlreadyUsedError) as e:
            license_operations_total.labels(operation="trial", outcome="rejected").inc()
            logger.warning(
                "Trial not issued: %s",
                e.message,
                extra={"player_id": command.player_id, "code": e.code},
            )
            return TrialResult.failure(e)

        license_operations_total.labels(operation="trial", outcome="success").inc()
        logger.info("Trial license issued", extra={"player_id": record.player_id})
        return TrialResult(
            success=True,
            trial_key=record.license_key,
            token=record.token,
            expiration_date=record.expiration_date,
        )
