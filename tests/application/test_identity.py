"""Integration tests for registration, authentication and role checks."""

import pytest

from oms.application.authenticate import AuthenticateHandler
from oms.application.authorization import require_role
from oms.application.register_user import RegisterUserHandler
from oms.domain.exceptions import AccessDenied, AuthenticationFailed, ValidationError
from oms.domain.model.user import Principal, Role
from tests.factories import ADMIN, ALICE, make_store
from tests.fakes import FakePasswordHasher, FakeUnitOfWork


def _register(store, **kwargs):
    handler = RegisterUserHandler(FakeUnitOfWork(store), FakePasswordHasher())
    return handler.handle(**kwargs)


class TestRegisterUser:

    def test_registers_client_with_hashed_password(self):
        store = make_store()
        dto = _register(store, name="Carol", email=" Carol@Example.com ", password="hunter22")

        assert dto.id == 4
        assert dto.email == "carol@example.com"
        assert dto.role == "CLIENT"
        assert store.users[4].password_hash == "hashed:hunter22"

    def test_duplicate_email_rejected(self):
        with pytest.raises(ValidationError, match="already registered"):
            _register(make_store(), name="A", email="ALICE@example.com", password="secret1")

    def test_short_password_rejected(self):
        with pytest.raises(ValidationError, match="at least 6"):
            _register(make_store(), name="A", email="a@b.c", password="123")

    def test_bad_email_rejected(self):
        with pytest.raises(ValidationError, match="Invalid email"):
            _register(make_store(), name="A", email="nope", password="secret1")


class TestAuthenticate:

    def test_valid_credentials(self):
        handler = AuthenticateHandler(FakeUnitOfWork(make_store()), FakePasswordHasher())
        assert handler.handle(ALICE.email, "secret1") == ALICE

    def test_admin_role_carried(self):
        handler = AuthenticateHandler(FakeUnitOfWork(make_store()), FakePasswordHasher())
        assert handler.handle(ADMIN.email, "secret3").is_admin

    @pytest.mark.parametrize("email,password", [
        ("alice@example.com", "wrong"),
        ("ghost@example.com", "secret1"),
    ])
    def test_bad_credentials_rejected(self, email, password):
        handler = AuthenticateHandler(FakeUnitOfWork(make_store()), FakePasswordHasher())
        with pytest.raises(AuthenticationFailed):
            handler.handle(email, password)


class TestRequireRole:

    def test_allowed(self):
        require_role(ALICE, Role.CLIENT)
        require_role(ADMIN, Role.CLIENT, Role.ADMIN)

    def test_denied(self):
        with pytest.raises(AccessDenied, match="requires ADMIN"):
            require_role(Principal("x@y.z", Role.CLIENT), Role.ADMIN)
