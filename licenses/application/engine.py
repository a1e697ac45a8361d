"""
License lifecycle engine.

Single entry point for the license operations. It owns one handler per
operation, all sharing the same record store, signer and refresh
generator, and is built once at process start.
"""
from core.config import LicenseSettings
from core.domain.clock import Clock, utc_now
from licenses.application.commands.create_license import CreateLicenseCommand
from licenses.application.commands.delete_license import DeleteLicenseCommand
from licenses.application.commands.issue_trial import IssueTrialCommand
from licenses.application.commands.refresh_token import RefreshTokenCommand
from licenses.application.commands.update_license import UpdateLicenseCommand
from licenses.application.commands.validate_token import ValidateTokenCommand
from licenses.application.dto.license_dto import (
    CreateLicenseResult,
    DeleteLicenseResult,
    LicenseListResult,
    LicenseValidationResult,
    TokenRefreshResult,
    TokenValidationResult,
    TrialResult,
    UpdateLicenseResult,
)
from licenses.application.handlers.issue_trial_handler import IssueTrialHandler
from licenses.application.handlers.license_lifecycle_handlers import (
    CreateLicenseHandler,
    DeleteLicenseHandler,
    RefreshTokenHandler,
    UpdateLicenseHandler,
    ValidateTokenHandler,
)
from licenses.application.handlers.list_licenses_handler import ListLicensesHandler
from licenses.application.handlers.validate_license_handler import (
    ValidateLicenseHandler,
)
from licenses.application.queries.list_licenses import ListLicensesQuery
from licenses.application.queries.validate_license import ValidateLicenseQuery
from licenses.domain.services import RefreshTokenGenerator, TrialPolicy
from licenses.infrastructure.jwt_signer import JWTCredentialSigner
from licenses.infrastructure.store_factory import build_record_store
from licenses.ports.credential_signer import CredentialSigner
from licenses.ports.record_store import RecordStore


class LicenseLifecycleEngine:
    """Facade over the license lifecycle handlers."""

    def __init__(
        self,
        record_store: RecordStore,
        signer: CredentialSigner,
        refresh_generator: RefreshTokenGenerator = None,
        trial_policy: TrialPolicy = None,
        clock: Clock = utc_now,
        support_devs: str = "",
        announcement: str = "",
        enforce_unique_pairs: bool = False,
    ):
        """
        Initialize engine.

        Args:
            record_store: Store shared by every operation
            signer: Token signer
            refresh_generator: Refresh credential generator
            trial_policy: Trial duration and key policy
            clock: Source of the current instant
            support_devs: Pass-through string echoed by token validation
            announcement: Pass-through string echoed by token validation
            enforce_unique_pairs: Refuse to create a second record for a pair
        """
        self.record_store = record_store
        self.signer = signer
        refresh_generator = refresh_generator or RefreshTokenGenerator()

        self._create = CreateLicenseHandler(
            record_store,
            signer,
            refresh_generator=refresh_generator,
            clock=clock,
            enforce_unique_pairs=enforce_unique_pairs,
        )
        self._validate_license = ValidateLicenseHandler(record_store)
        self._validate_token = ValidateTokenHandler(
            record_store, signer, support_devs=support_devs, announcement=announcement
        )
        self._refresh = RefreshTokenHandler(record_store, signer)
        self._update = UpdateLicenseHandler(
            record_store, signer, refresh_generator=refresh_generator
        )
        self._delete = DeleteLicenseHandler(record_store)
        self._trial = IssueTrialHandler(
            record_store, self._create, trial_policy=trial_policy, clock=clock
        )
        self._list = ListLicensesHandler(record_store)

    @classmethod
    def from_settings(
        cls, license_settings: LicenseSettings, clock: Clock = utc_now
    ) -> "LicenseLifecycleEngine":
        """
        Build an engine, its store and its signer from settings.

        Args:
            license_settings: LicenseSettings
            clock: Source of the current instant

        Returns:
            LicenseLifecycleEngine
        """
        return cls(
            record_store=build_record_store(license_settings),
            signer=JWTCredentialSigner(
                license_settings.signing_secret,
                algorithm=license_settings.token_algorithm,
                clock=clock,
            ),
            trial_policy=TrialPolicy(duration_years=license_settings.trial_years),
            clock=clock,
            support_devs=license_settings.support_devs,
            announcement=license_settings.announcement,
            enforce_unique_pairs=license_settings.enforce_unique_pairs,
        )

    def create_license(self, command: CreateLicenseCommand) -> CreateLicenseResult:
        return self._create.handle(command)

    def validate_license(self, query: ValidateLicenseQuery) -> LicenseValidationResult:
        return self._validate_license.handle(query)

    def validate_token(self, command: ValidateTokenCommand) -> TokenValidationResult:
        return self._validate_token.handle(command)

    def refresh_token(self, command: RefreshTokenCommand) -> TokenRefreshResult:
        return self._refresh.handle(command)

    def update_license(self, command: UpdateLicenseCommand) -> UpdateLicenseResult:
        return self._update.handle(command)

    def delete_license(self, command: DeleteLicenseCommand) -> DeleteLicenseResult:
        return self._delete.handle(command)

    def issue_trial(self, command: IssueTrialCommand) -> TrialResult:
        return self._trial.handle(command)

    def list_licenses(self, query: ListLicensesQuery = None) -> LicenseListResult:
        return self._list.handle(query or ListLicensesQuery())
