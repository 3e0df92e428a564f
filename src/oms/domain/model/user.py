"""User records and the authenticated principal.

Users are owned by the identity store; the order core only reads them
to resolve ownership.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(Enum):
    ADMIN = "ADMIN"
    CLIENT = "CLIENT"


@dataclass
class User:
    id: int | None
    name: str
    email: str
    password_hash: str
    role: Role = Role.CLIENT


@dataclass(frozen=True)
class Principal:
    """The identity making a request, as resolved by authentication."""

    email: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    @staticmethod
    def of(user: User) -> Principal:
        return Principal(email=user.email, role=user.role)
