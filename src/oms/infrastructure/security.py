"""passlib-backed password hashing."""

from __future__ import annotations

from passlib.context import CryptContext

from oms.application.password_hasher import PasswordHasher


class PasslibPasswordHasher(PasswordHasher):

    def __init__(self, context: CryptContext | None = None) -> None:
        self._context = context or CryptContext(
            schemes=["pbkdf2_sha256"], deprecated="auto"
        )

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return self._context.verify(password, password_hash)
        except ValueError:
            # Unrecognized or malformed hash
            return False
