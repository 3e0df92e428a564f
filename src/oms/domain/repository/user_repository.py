"""Abstract repository for User records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from oms.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: int) -> User | None:
        """Return a user by ID, or None."""

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return a user by email (case-insensitive), or None."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist a new or updated user, assigning an ID if needed."""
