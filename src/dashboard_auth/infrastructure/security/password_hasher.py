"""Bcrypt password hasher adapter."""

from __future__ import annotations

import bcrypt

from dashboard_auth.application.ports.password_hasher_port import PasswordHasherPort

_DEFAULT_ROUNDS = 12


class BcryptPasswordHasher(PasswordHasherPort):
    """Salted password hashing adapter using bcrypt.

    bcrypt only reads the first 72 bytes of a password, and newer releases
    raise on longer input, so both directions truncate to that limit.
    """

    _MAX_PASSWORD_BYTES = 72

    def __init__(self, *, rounds: int = _DEFAULT_ROUNDS) -> None:
        self._rounds = rounds

    def hash_password(self, password: str) -> str:
        encoded = self._encode(password)
        return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self._rounds)).decode("utf-8")

    def verify_password(self, *, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(self._encode(password), password_hash.encode("utf-8"))
        except ValueError:
            return False

    def _encode(self, password: str) -> bytes:
        return password.encode("utf-8")[: self._MAX_PASSWORD_BYTES]
