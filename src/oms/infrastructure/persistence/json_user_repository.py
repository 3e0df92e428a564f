"""JSON-document-backed implementation of UserRepository."""

from __future__ import annotations

from oms.domain.model.user import Role, User
from oms.domain.repository.user_repository import UserRepository
from oms.infrastructure.persistence.records import next_id, upsert


class JsonUserRepository(UserRepository):

    def __init__(self, records: list[dict], sequences: dict[str, int]) -> None:
        self._records = records
        self._sequences = sequences

    def get_by_id(self, user_id: int) -> User | None:
        for raw in self._records:
            if raw["id"] == user_id:
                return self._to_domain(raw)
        return None

    def get_by_email(self, email: str) -> User | None:
        for raw in self._records:
            if raw["email"].lower() == email.lower():
                return self._to_domain(raw)
        return None

    def save(self, user: User) -> None:
        if user.id is None:
            user.id = next_id(self._records, self._sequences, "users")
        upsert(self._records, self._to_raw(user))

    @staticmethod
    def _to_raw(user: User) -> dict:
        return {
            "id": user.id,
            "name": user.name,
            "email": user.email,
            "password_hash": user.password_hash,
            "role": user.role.value,
        }

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            id=raw["id"],
            name=raw["name"],
            email=raw["email"],
            password_hash=raw["password_hash"],
            role=Role(raw["role"]),
        )
