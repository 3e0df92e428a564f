"""Application service: Register User use case."""

from __future__ import annotations

import structlog

from oms.application.dto import UserDTO
from oms.application.password_hasher import PasswordHasher
from oms.domain.exceptions import ValidationError
from oms.domain.model.user import Role, User
from oms.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)

MIN_PASSWORD_LENGTH = 6


class RegisterUserHandler:

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher) -> None:
        self._uow = uow
        self._hasher = hasher

    def handle(
        self,
        name: str,
        email: str,
        password: str,
        role: Role = Role.CLIENT,
    ) -> UserDTO:
        if not name or not name.strip():
            raise ValidationError("User name is required")
        email = (email or "").strip().lower()
        if "@" not in email:
            raise ValidationError(f"Invalid email address: '{email}'")
        if len(password or "") < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )

        with self._uow as uow:
            if uow.users.get_by_email(email) is not None:
                raise ValidationError(f"Email '{email}' is already registered")

            user = User(
                id=None,
                name=name.strip(),
                email=email,
                password_hash=self._hasher.hash(password),
                role=role,
            )
            uow.users.save(user)
            uow.commit()

        logger.info("User registered", user_id=user.id, email=email, role=role.value)
        return UserDTO.from_user(user)
