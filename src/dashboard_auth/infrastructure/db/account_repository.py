"""SQLAlchemy adapter for account lookup queries."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import cast
from uuid import UUID

import sqlalchemy as sa
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from dashboard_auth.application.ports.account_repository_port import (
    AccountLookupError,
    AccountRecord,
    AccountRepositoryPort,
)
from dashboard_auth.infrastructure.db.metadata import accounts

logger = logging.getLogger(__name__)


class SqlAlchemyAccountRepository(AccountRepositoryPort):
    """Account repository backed by SQLAlchemy async sessions."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get_by_email(self, *, email: str) -> AccountRecord | None:
        """Return account by normalized email or None."""

        statement = sa.select(
            accounts.c.id,
            accounts.c.name,
            accounts.c.email,
            accounts.c.password_hash,
            accounts.c.created_at,
            accounts.c.updated_at,
        ).where(accounts.c.email == email).limit(1)

        try:
            async with self._session_factory() as session:
                result = await session.execute(statement)
        except (SQLAlchemyError, OSError) as exc:
            logger.error("account_fetch_failed error_type=%s", type(exc).__name__)
            raise AccountLookupError("failed to fetch account") from exc

        row = result.mappings().first()
        if row is None:
            return None
        return _to_account_record(row)


def _to_account_record(row: sa.RowMapping) -> AccountRecord:
    raw_account_id = row["id"]
    account_id = (
        raw_account_id if isinstance(raw_account_id, UUID) else UUID(str(raw_account_id))
    )
    return AccountRecord(
        account_id=account_id,
        name=cast(str, row["name"]),
        email=cast(str, row["email"]),
        password_hash=cast(str, row["password_hash"]),
        created_at=cast(datetime, row["created_at"]),
        updated_at=cast(datetime, row["updated_at"]),
    )
