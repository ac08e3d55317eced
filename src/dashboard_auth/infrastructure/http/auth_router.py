"""FastAPI router for the credentials login endpoint."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, HTTPException, Request

from dashboard_auth.application.dto.credential_models import LoginResponse
from dashboard_auth.application.ports.account_repository_port import AccountLookupError
from dashboard_auth.application.services.credential_verifier import (
    CredentialVerifier,
    VerificationOutcome,
)

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_DETAIL = "invalid credentials"
LOOKUP_UNAVAILABLE_DETAIL = "try again later"


def build_auth_router(*, credential_verifier: CredentialVerifier) -> APIRouter:
    """Build router exposing the credentials login endpoint."""

    router = APIRouter(tags=["auth"])

    @router.post("/auth/login", response_model=LoginResponse)
    async def login(request: Request) -> LoginResponse:
        raw_body = await request.body()
        try:
            raw_credentials: object = json.loads(raw_body) if raw_body else None
        except (ValueError, RecursionError):
            raw_credentials = None

        try:
            result = await credential_verifier.verify(raw_credentials)
        except AccountLookupError as exc:
            raise HTTPException(status_code=503, detail=LOOKUP_UNAVAILABLE_DETAIL) from exc

        if result.outcome is not VerificationOutcome.ACCEPTED or result.account is None:
            raise HTTPException(status_code=401, detail=INVALID_CREDENTIALS_DETAIL)

        logger.info("login_accepted account_id=%s", result.account.account_id)
        return LoginResponse(
            account_id=result.account.account_id,
            name=result.account.name,
            email=result.account.email,
        )

    return router
