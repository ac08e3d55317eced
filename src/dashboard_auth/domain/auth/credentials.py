"""Shared normalization helpers for account credential inputs."""

from __future__ import annotations

PASSWORD_MIN_LENGTH = 6


def normalize_account_email(*, email: str) -> str:
    """Normalize one account email into its lookup key and reject blank values."""

    normalized = email.strip().lower()
    if not normalized:
        raise ValueError("email cannot be blank")
    return normalized
