"""Application service for login credential verification."""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from enum import StrEnum

from pydantic import ValidationError

from dashboard_auth.application.dto.credential_models import CredentialsPayload
from dashboard_auth.application.ports.account_repository_port import (
    AccountLookupError,
    AccountRecord,
    AccountRepositoryPort,
)
from dashboard_auth.application.ports.password_hasher_port import PasswordHasherPort
from dashboard_auth.domain.auth.credentials import normalize_account_email

logger = logging.getLogger(__name__)


class VerificationOutcome(StrEnum):
    """Supported credential verification outcomes."""

    ACCEPTED = "accepted"
    REJECTED = "rejected"


@dataclass(frozen=True)
class VerificationResult:
    """Credential verification result model."""

    outcome: VerificationOutcome
    account: AccountRecord | None = None


_REJECTED = VerificationResult(outcome=VerificationOutcome.REJECTED)


class CredentialVerifier:
    """Validate a raw credentials payload against stored account hashes.

    Rejections never say whether the email was unknown or the password wrong.
    Account store failures raise AccountLookupError instead of rejecting.
    """

    def __init__(
        self,
        *,
        accounts: AccountRepositoryPort,
        password_hasher: PasswordHasherPort,
        log_rejections: bool = False,
    ) -> None:
        self._accounts = accounts
        self._password_hasher = password_hasher
        self._log_rejections = log_rejections
        # Unknown accounts still pay for one hash comparison.
        self._absent_account_hash = password_hasher.hash_password(secrets.token_urlsafe(32))

    async def verify(self, raw_credentials: object) -> VerificationResult:
        """Verify one login attempt and return accepted account or rejection."""

        try:
            credentials = CredentialsPayload.model_validate(raw_credentials)
        except ValidationError:
            return self._reject()

        email = normalize_account_email(email=credentials.email)
        try:
            account = await self._accounts.get_by_email(email=email)
        except AccountLookupError:
            raise
        except Exception as exc:
            logger.error("account_lookup_failed error_type=%s", type(exc).__name__)
            raise AccountLookupError("failed to fetch account") from exc

        if account is None:
            self._password_hasher.verify_password(
                password=credentials.password,
                password_hash=self._absent_account_hash,
            )
            return self._reject()

        is_valid = self._password_hasher.verify_password(
            password=credentials.password,
            password_hash=account.password_hash,
        )
        if not is_valid:
            return self._reject()

        return VerificationResult(outcome=VerificationOutcome.ACCEPTED, account=account)

    def _reject(self) -> VerificationResult:
        if self._log_rejections:
            logger.info("credential_verification_rejected")
        return _REJECTED
