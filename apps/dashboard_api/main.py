"""dashboard-api entrypoint and HTTP route wiring."""

from __future__ import annotations

import uvicorn
from fastapi import FastAPI

from dashboard_auth.application.services.credential_verifier import CredentialVerifier
from dashboard_auth.config.settings import load_settings
from dashboard_auth.infrastructure.db.account_repository import SqlAlchemyAccountRepository
from dashboard_auth.infrastructure.db.session import create_session_factory
from dashboard_auth.infrastructure.http.auth_router import build_auth_router
from dashboard_auth.infrastructure.logging import configure_logging
from dashboard_auth.infrastructure.security.password_hasher import BcryptPasswordHasher


def build_credential_verifier(
    database_url: str,
    *,
    log_rejections: bool = False,
) -> CredentialVerifier:
    """Build credential verifier with SQLAlchemy-backed account lookup."""

    session_factory = create_session_factory(database_url)
    return CredentialVerifier(
        accounts=SqlAlchemyAccountRepository(session_factory),
        password_hasher=BcryptPasswordHasher(),
        log_rejections=log_rejections,
    )


def create_app(
    *,
    credential_verifier: CredentialVerifier | None = None,
    database_url: str | None = None,
) -> FastAPI:
    """Create FastAPI app exposing the credentials login route."""

    if credential_verifier is None:
        settings = load_settings()
        configure_logging(level=settings.log_level)
        credential_verifier = build_credential_verifier(
            database_url or settings.database_url,
            log_rejections=settings.log_rejected_logins,
        )

    app = FastAPI()
    app.include_router(build_auth_router(credential_verifier=credential_verifier))
    return app


def run_asgi_server(*, host: str, port: int) -> None:
    """Run dashboard-api as a long-lived ASGI process using application factory mode."""

    uvicorn.run(
        "apps.dashboard_api.main:create_app",
        host=host,
        port=port,
        factory=True,
    )


def main() -> None:
    """Run dashboard-api runtime process."""

    settings = load_settings()
    run_asgi_server(host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
