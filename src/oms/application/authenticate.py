"""Application service: Authenticate use case.

Turns credentials into the Principal every other use case receives.
"""

from __future__ import annotations

from oms.application.password_hasher import PasswordHasher
from oms.domain.exceptions import AuthenticationFailed
from oms.domain.model.user import Principal
from oms.domain.repository.unit_of_work import UnitOfWork


class AuthenticateHandler:

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher) -> None:
        self._uow = uow
        self._hasher = hasher

    def handle(self, email: str, password: str) -> Principal:
        with self._uow as uow:
            user = uow.users.get_by_email(email)
        if user is None or not self._hasher.verify(password, user.password_hash):
            raise AuthenticationFailed()
        return Principal.of(user)
