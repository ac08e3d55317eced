"""Pydantic models for login credential payloads and responses."""

from __future__ import annotations

from uuid import UUID

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator

from dashboard_auth.domain.auth.credentials import PASSWORD_MIN_LENGTH


class CredentialsPayload(BaseModel):
    """Shape contract for one submitted login attempt.

    Login forms post extra keys (csrf token, callback url) alongside the
    credentials, so unknown fields are ignored rather than rejected.
    """

    model_config = ConfigDict(extra="ignore", strict=True, frozen=True)

    email: str
    password: str = Field(min_length=PASSWORD_MIN_LENGTH, repr=False)

    @field_validator("email")
    @classmethod
    def _validate_bare_address(cls, value: str) -> str:
        # Display-name forms ("Alice <a@b.c>") are not addresses.
        try:
            validated = validate_email(
                value,
                check_deliverability=False,
                globally_deliverable=False,
                allow_display_name=False,
            )
        except EmailNotValidError as exc:
            raise ValueError("email must be a bare email address") from exc
        if "." not in validated.ascii_domain:
            raise ValueError("email domain must contain a dot")
        return validated.normalized


class LoginResponse(BaseModel):
    """HTTP response model for an accepted login attempt."""

    model_config = ConfigDict(extra="forbid")

    account_id: UUID
    name: str
    email: str
