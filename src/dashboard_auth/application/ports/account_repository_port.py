"""Port for account lookup operations used by credential verification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol
from uuid import UUID


class AccountLookupError(RuntimeError):
    """Raised when the account store cannot answer a lookup."""


@dataclass(frozen=True)
class AccountRecord:
    """Account persistence model."""

    account_id: UUID
    name: str
    email: str
    password_hash: str = field(repr=False)
    created_at: datetime
    updated_at: datetime


class AccountRepositoryPort(Protocol):
    """Account repository contract."""

    async def get_by_email(self, *, email: str) -> AccountRecord | None:
        """Return account by normalized email or None.

        Raises AccountLookupError when the backing store fails.
        """
