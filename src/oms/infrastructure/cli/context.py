"""Per-invocation CLI state: configuration, credentials and output mode."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

import click

from oms.application.authenticate import AuthenticateHandler
from oms.application.dto import error_payload
from oms.domain.exceptions import DomainException
from oms.domain.model.user import Principal
from oms.infrastructure import bootstrap
from oms.infrastructure.persistence.json_store import JsonUnitOfWork


class CommandFailed(click.ClickException):
    """A domain error reported to the user, as text or as a JSON payload."""

    def __init__(self, exc: DomainException, as_json: bool = False) -> None:
        super().__init__(str(exc))
        self.payload = error_payload(exc)
        self.as_json = as_json

    def show(self, file=None) -> None:
        if self.as_json:
            click.echo(json.dumps(self.payload, indent=2))
        else:
            super().show(file)


@dataclass
class CliContext:
    data_dir: Path | None = None
    email: str | None = None
    password: str | None = None
    as_json: bool = False

    def uow(self) -> JsonUnitOfWork:
        return bootstrap.unit_of_work(self.data_dir)

    def principal(self) -> Principal:
        """Authenticate the configured credentials."""
        if not self.email or not self.password:
            raise click.UsageError(
                "This command needs credentials: pass --email and --password "
                "or set OMS_EMAIL and OMS_PASSWORD."
            )
        handler = AuthenticateHandler(self.uow(), bootstrap.password_hasher())
        return handler.handle(self.email, self.password)

    def fail(self, exc: DomainException) -> CommandFailed:
        return CommandFailed(exc, as_json=self.as_json)

    def emit_json(self, payload: dict | list) -> None:
        click.echo(json.dumps(payload, indent=2))


pass_cli = click.make_pass_decorator(CliContext, ensure=True)
